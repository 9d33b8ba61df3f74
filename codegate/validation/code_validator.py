# codegate/validation/code_validator.py
"""
Structural Code Validator - quality gate for generated UI snippets.

Two phases:
1. Syntax phase: any diagnostic short-circuits, because structural
   heuristics over text with hard syntax errors only add noise.
2. Structural phase: tag matching, import heuristics, brace balance and
   paren balance. All four always run; outputs are concatenated in that order.

Every call owns its scanner state, counters and tag stack, so concurrent
calls on different snippets never interact.
"""
import asyncio
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from codegate.core.config import settings
from codegate.core.exceptions import InputTooLargeError, SyntaxCheckerError
from codegate.core.logging import log, log_section
from codegate.lib.monitoring import record_validation

from .brackets import (
    UNBALANCED_BRACES,
    UNMATCHED_PARENTHESES,
    has_unbalanced_braces,
    has_unmatched_parentheses,
)
from .imports import detect_missing_imports
from .models import Framework, GeneratedComponent, SyntaxDiagnostic, ValidationResult
from .syntax import check_syntax
from .tags import find_tag_errors

SyntaxChecker = Callable[[str], Iterable[SyntaxDiagnostic]]
FrameworkLike = Union[Framework, str]
FileResults = List[Tuple[str, ValidationResult]]

CODE_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte")


def is_code_file(path: str) -> bool:
    return path.lower().endswith(CODE_EXTENSIONS)


class CodeValidator:
    """
    Validates generated source text for one framework at a time.

    Args:
        syntax_checker: Callable returning parse diagnostics for a snippet.
            Defaults to the built-in tokenizer. Any checker honouring
            "no diagnostics => structure may be checked" is substitutable.
        max_input_chars: Size bound enforced before scanning.
    """

    def __init__(
        self,
        syntax_checker: Optional[SyntaxChecker] = None,
        max_input_chars: Optional[int] = None,
    ):
        self.syntax_checker = syntax_checker or check_syntax
        if max_input_chars is None:
            max_input_chars = settings.validation.max_input_chars
        self.max_input_chars = max_input_chars

    async def validate(self, code: str, framework: FrameworkLike) -> ValidationResult:
        """Async entry point; does no I/O and never suspends."""
        return self.validate_sync(code, framework)

    def validate_sync(self, code: str, framework: FrameworkLike) -> ValidationResult:
        framework = Framework.coerce(framework)
        if len(code) > self.max_input_chars:
            raise InputTooLargeError(len(code), self.max_input_chars)

        errors: List[str] = [d.format() for d in self._syntax_diagnostics(code)]
        warnings: List[str] = []

        if not errors:
            structure_errors, structure_warnings = self._check_structure(code, framework)
            errors.extend(structure_errors)
            warnings.extend(structure_warnings)
        else:
            log("VALIDATION", f"❌ {framework.value}: syntax phase failed, structural checks skipped")

        result = ValidationResult.from_messages(errors, warnings)
        record_validation(framework.value, result.valid, len(result.errors), len(result.warnings))
        return result

    def _syntax_diagnostics(self, code: str) -> List[SyntaxDiagnostic]:
        try:
            return list(self.syntax_checker(code))
        except Exception as e:
            raise SyntaxCheckerError(str(e)) from e

    def _check_structure(self, code: str, framework: Framework) -> Tuple[List[str], List[str]]:
        errors: List[str] = []
        warnings: List[str] = []

        errors.extend(find_tag_errors(code))
        warnings.extend(detect_missing_imports(code, framework))

        if has_unbalanced_braces(code):
            errors.append(UNBALANCED_BRACES)
        if has_unmatched_parentheses(code):
            errors.append(UNMATCHED_PARENTHESES)

        log("STRUCTURE", f"{framework.value}: {len(errors)} error(s), {len(warnings)} warning(s)")
        return errors, warnings

    # ─────────────────────────────────────────────────────────────
    # Batch validation (all files of one generated feature)
    # ─────────────────────────────────────────────────────────────

    async def _validate_code_components(
        self,
        components: Sequence[GeneratedComponent],
        framework: Framework,
    ) -> FileResults:
        code_components = [c for c in components if is_code_file(c.path)]
        log_section("BATCH", f"Validating {len(code_components)}/{len(components)} generated files ({framework.value})")
        results = await asyncio.gather(
            *(self.validate(c.code, framework) for c in code_components)
        )
        return [(c.path, result) for c, result in zip(code_components, results)]

    async def validate_components_detailed(
        self,
        components: Sequence[GeneratedComponent],
        framework: FrameworkLike,
    ) -> FileResults:
        """
        Per-file (path, result) pairs in component order.

        Non-code files are skipped. Components sharing a path each keep
        their own entry.
        """
        framework = Framework.coerce(framework)
        return await self._validate_code_components(components, framework)

    async def validate_components(
        self,
        components: Sequence[GeneratedComponent],
        framework: FrameworkLike,
    ) -> ValidationResult:
        """
        Validate every code file of a feature and aggregate the findings.
        """
        framework = Framework.coerce(framework)
        return aggregate_results(await self._validate_code_components(components, framework))


def aggregate_results(per_file: Iterable[Tuple[str, ValidationResult]]) -> ValidationResult:
    """
    Merge per-file results into one verdict for the whole feature.

    Messages are prefixed with the file path and kept in file order.
    """
    errors: List[str] = []
    warnings: List[str] = []
    total = 0
    rejected = 0

    for path, result in per_file:
        total += 1
        errors.extend(f"{path}: {e}" for e in result.errors)
        warnings.extend(f"{path}: {w}" for w in result.warnings)
        if not result.valid:
            rejected += 1
            log("BATCH", f"❌ {path}: REJECTED - {result.errors[0]}")

    if rejected:
        log("BATCH", f"🚨 REJECTED {rejected}/{total} files")
    else:
        log("BATCH", f"✅ All {total} files passed validation")

    return ValidationResult.from_messages(errors, warnings)


def validate_code(code: str, framework: FrameworkLike) -> ValidationResult:
    """Synchronous one-shot validation with the default syntax checker."""
    return CodeValidator().validate_sync(code, framework)
