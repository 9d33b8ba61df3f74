# codegate/validation/models.py
"""
Value types shared by the structural validator.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Pattern, Tuple

from codegate.core.exceptions import UnsupportedFrameworkError


class Framework(str, Enum):
    """
    Target UI framework of a generated snippet.

    Drives which import-heuristic table applies.
    """
    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    SOLID = "solid"
    VANILLA = "vanilla"

    @property
    def default_extension(self) -> str:
        """Conventional file extension for a component in this framework."""
        return _DEFAULT_EXTENSIONS[self]

    @classmethod
    def coerce(cls, value: Any) -> "Framework":
        """Accept a member or its (case-insensitive) string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedFrameworkError(value)


_DEFAULT_EXTENSIONS = {
    Framework.REACT: ".jsx",
    Framework.VUE: ".vue",
    Framework.SVELTE: ".svelte",
    Framework.SOLID: ".jsx",
    Framework.VANILLA: ".js",
}


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating one snippet (or one aggregated feature)."""
    valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @classmethod
    def from_messages(cls, errors: Iterable[str], warnings: Iterable[str] = ()) -> "ValidationResult":
        errors = tuple(errors)
        return cls(valid=not errors, errors=errors, warnings=tuple(warnings))

    def __bool__(self):
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class SyntaxDiagnostic:
    """A genuine parse error reported by the syntax phase."""
    line: int
    message: str

    def format(self) -> str:
        return f"Line {self.line}: {self.message}"


@dataclass(frozen=True)
class ImportPattern:
    """Usage pattern that implies a named import is required."""
    usage_pattern: Pattern[str]
    expected_import_name: str


@dataclass(frozen=True)
class GeneratedComponent:
    """One generated artifact of a feature."""
    name: str
    path: str
    code: str
