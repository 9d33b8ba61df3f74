# codegate/api/__init__.py
"""
API module - All route handlers.
"""
from . import health, validate

__all__ = [
    "health",
    "validate",
]
