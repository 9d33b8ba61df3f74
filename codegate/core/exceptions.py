# codegate/core/exceptions.py
"""
Custom exceptions for the application.

Validation findings are never raised - they are strings in a ValidationResult.
These exceptions cover caller mistakes and collaborator faults only.
"""
from typing import Any, Dict, Optional


class CodeGateError(Exception):
    """Base exception for all codegate errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnsupportedFrameworkError(CodeGateError):
    """Framework selector is not one of the supported frameworks."""
    def __init__(self, framework: Any):
        super().__init__(
            f"Unsupported framework: {framework!r}",
            {"framework": str(framework)}
        )
        self.framework = framework


class InputTooLargeError(CodeGateError):
    """Snippet exceeds the configured size bound."""
    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Code is {size} characters, limit is {limit}",
            {"size": size, "limit": limit}
        )
        self.size = size
        self.limit = limit


class SyntaxCheckerError(CodeGateError):
    """The syntax-parsing collaborator failed while checking a snippet."""
    def __init__(self, message: str):
        super().__init__(f"Syntax checker failed: {message}")
