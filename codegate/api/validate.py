# codegate/api/validate.py
"""
Validation routes - run the structural gate over generated code.
"""
from typing import List

from fastapi import APIRouter
from pydantic import BaseModel, Field

from codegate.core.config import settings
from codegate.core.logging import log
from codegate.validation import (
    CodeValidator,
    Framework,
    GeneratedComponent,
    ValidationResult,
    aggregate_results,
)

router = APIRouter(prefix="/api/validate", tags=["Validation"])

validator = CodeValidator()


def _default_framework() -> Framework:
    return Framework.coerce(settings.validation.default_framework)


class ValidateRequest(BaseModel):
    code: str
    framework: Framework = Field(default_factory=_default_framework)


class ComponentIn(BaseModel):
    name: str = ""
    path: str
    code: str


class BatchValidateRequest(BaseModel):
    framework: Framework = Field(default_factory=_default_framework)
    components: List[ComponentIn]


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[str]
    warnings: List[str]

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationResponse":
        return cls(**result.to_dict())


class FileValidationResponse(ValidationResponse):
    path: str


class BatchValidationResponse(ValidationResponse):
    files: List[FileValidationResponse] = []


@router.post("", response_model=ValidationResponse)
async def validate_snippet(req: ValidateRequest):
    """Validate a single snippet."""
    result = await validator.validate(req.code, req.framework)
    if not result.valid:
        log("API", f"❌ {req.framework.value} snippet rejected: {result.errors[0]}")
    return ValidationResponse.from_result(result)


@router.post("/batch", response_model=BatchValidationResponse)
async def validate_batch(req: BatchValidateRequest):
    """
    Validate every code file of a generated feature.

    Returns the aggregated verdict plus per-file results in component order.
    Non-code files (by extension) are skipped; duplicate paths are kept
    as separate entries.
    """
    components = [GeneratedComponent(name=c.name, path=c.path, code=c.code) for c in req.components]

    per_file = await validator.validate_components_detailed(components, req.framework)
    aggregated = aggregate_results(per_file)

    return BatchValidationResponse(
        **aggregated.to_dict(),
        files=[FileValidationResponse(path=path, **r.to_dict()) for path, r in per_file],
    )
