"""Building blocks for layered services: persistence, tokens, password hashing, caching and model generation."""

__version__ = "0.1.0"

__all__ = [
    "cache",
    "database",
    "errors",
    "generator",
    "models",
    "naming",
    "repository",
    "schema",
    "security",
    "settings",
    "tokens",
    "transaction",
    "users",
    "validation",
]