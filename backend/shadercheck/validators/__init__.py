"""Shader Validator — deterministic lexical validation for GDShader-like source.

Usage:
    from shadercheck.validators import validate

    result = validate(source)
    if not result.valid:
        # Show result.errors, do not hand source to the renderer
"""

from shadercheck.validators.classifier import SEMICOLON_RULES, classify, classify_statement
from shadercheck.validators.engine import ValidationEngine, validate, validation_engine
from shadercheck.validators.models import (
    ClassifiedStatement,
    Diagnostic,
    ErrorCode,
    ShaderDocument,
    ValidationResult,
)

__all__ = [
    "SEMICOLON_RULES",
    "classify",
    "classify_statement",
    "ValidationEngine",
    "validate",
    "validation_engine",
    "ClassifiedStatement",
    "Diagnostic",
    "ErrorCode",
    "ShaderDocument",
    "ValidationResult",
]
