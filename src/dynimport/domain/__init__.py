"""Domain layer — layout types, naming rules, and request models.

This layer depends only on stdlib and pydantic.
It must never import from services, config, output, or commands.
"""
