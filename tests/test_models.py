"""
Value types: Framework, ValidationResult, SyntaxDiagnostic.
"""
import dataclasses

import pytest

from codegate.core.exceptions import UnsupportedFrameworkError
from codegate.validation.models import Framework, SyntaxDiagnostic, ValidationResult


def test_framework_coerce():
    assert Framework.coerce("react") is Framework.REACT
    assert Framework.coerce(" Vue ") is Framework.VUE
    assert Framework.coerce(Framework.SOLID) is Framework.SOLID


@pytest.mark.parametrize("value", ["angular", "", None, 3])
def test_framework_coerce_rejects_unknown(value):
    with pytest.raises(UnsupportedFrameworkError):
        Framework.coerce(value)


def test_default_extensions():
    assert Framework.REACT.default_extension == ".jsx"
    assert Framework.VUE.default_extension == ".vue"
    assert Framework.SVELTE.default_extension == ".svelte"
    assert Framework.VANILLA.default_extension == ".js"


def test_result_validity_follows_errors():
    assert ValidationResult.from_messages([], ["w"]).valid
    assert not ValidationResult.from_messages(["e"])
    assert ValidationResult.from_messages(["e"], ["w"]).to_dict() == {
        "valid": False,
        "errors": ["e"],
        "warnings": ["w"],
    }


def test_result_is_immutable():
    result = ValidationResult.from_messages(["e"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.valid = True
    assert isinstance(result.errors, tuple)


def test_diagnostic_format():
    assert SyntaxDiagnostic(7, "Unterminated string literal.").format() == (
        "Line 7: Unterminated string literal."
    )
