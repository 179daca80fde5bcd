"""Validation models — classified statements, documents, diagnostics, results.

Everything here is built fresh for a single validation call and never
mutated afterwards.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Deterministic error codes, one per validation rule."""

    MISSING_OR_INVALID_SHADER_TYPE = "MISSING_OR_INVALID_SHADER_TYPE"
    MISSING_OR_INVALID_ENTRY_POINT = "MISSING_OR_INVALID_ENTRY_POINT"
    MISSING_STATEMENT_TERMINATOR = "MISSING_STATEMENT_TERMINATOR"


class ClassifiedStatement(BaseModel):
    """One comment-stripped, non-blank source line."""

    line: int = Field(ge=1, description="1-based line number in the original source")
    text: str
    requires_semicolon: bool
    ends_with_semicolon: bool
    rule: str = Field(description="Name of the classification rule that matched")

    model_config = {"frozen": True}


class ShaderDocument(BaseModel):
    """Output of the line classifier."""

    shader_type: Optional[str] = None
    entry_point: Optional[str] = None
    statements: list[ClassifiedStatement] = Field(default_factory=list)

    model_config = {"frozen": True}


class Diagnostic(BaseModel):
    """A single reported defect."""

    line: int = Field(ge=1)
    message: str
    code: ErrorCode

    model_config = {"use_enum_values": True}


class ValidationResult(BaseModel):
    """Complete validation result — the output of the validation engine."""

    valid: bool = Field(description="True iff no diagnostics were produced")
    errors: list[Diagnostic] = Field(default_factory=list)

    @classmethod
    def build(cls, errors: list[Diagnostic]) -> "ValidationResult":
        """Build a result from diagnostics, preserving discovery order."""
        return cls(valid=not errors, errors=list(errors))
