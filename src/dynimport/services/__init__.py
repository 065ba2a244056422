"""Service layer — layout, relativize, and statement stages.

Every service method returns a ServiceResult; nothing here raises on bad input.
"""
