# codegate/validation/__init__.py
"""
Validation Module - Single Entry Point for All Validation.

Usage:
    from codegate.validation import CodeValidator, validate_code, Framework
"""
from .models import (
    Framework,
    ValidationResult,
    SyntaxDiagnostic,
    ImportPattern,
    GeneratedComponent,
)
from .scanner import LexicalScanner, ScanState, QuoteMode
from .brackets import brackets_balanced, has_unbalanced_braces, has_unmatched_parentheses
from .jsx_stripper import strip_jsx_expressions
from .tags import find_tag_errors, VOID_ELEMENTS
from .imports import IMPORT_PATTERNS, detect_missing_imports, has_import, has_import_statements
from .syntax import check_syntax
from .code_validator import CodeValidator, validate_code, is_code_file, aggregate_results


__all__ = [
    # Orchestrator
    "CodeValidator",
    "validate_code",
    "is_code_file",
    "aggregate_results",

    # Result and value types
    "Framework",
    "ValidationResult",
    "SyntaxDiagnostic",
    "ImportPattern",
    "GeneratedComponent",

    # Building blocks
    "LexicalScanner",
    "ScanState",
    "QuoteMode",
    "brackets_balanced",
    "has_unbalanced_braces",
    "has_unmatched_parentheses",
    "strip_jsx_expressions",
    "find_tag_errors",
    "VOID_ELEMENTS",
    "IMPORT_PATTERNS",
    "detect_missing_imports",
    "has_import",
    "has_import_statements",
    "check_syntax",
]
