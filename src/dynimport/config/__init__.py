"""Configuration — TOML models, discovery, unified settings, logging."""
