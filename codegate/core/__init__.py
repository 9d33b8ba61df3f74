# codegate/core/__init__.py
"""
Core module - configuration, logging and shared exceptions.
"""
from .config import settings
from .exceptions import (
    CodeGateError,
    UnsupportedFrameworkError,
    InputTooLargeError,
    SyntaxCheckerError,
)

__all__ = [
    "settings",
    "CodeGateError",
    "UnsupportedFrameworkError",
    "InputTooLargeError",
    "SyntaxCheckerError",
]
