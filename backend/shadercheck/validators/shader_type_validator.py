"""Shader Type Validator — requires a recognized shader_type declaration."""

from shadercheck.validators.base import BaseValidator
from shadercheck.validators.models import Diagnostic, ErrorCode, ShaderDocument
from shadercheck.validators.reference_data import SHADER_TYPES


class ShaderTypeValidator(BaseValidator):
    """Flags a missing or unrecognized shader_type at line 1."""

    @property
    def name(self) -> str:
        return "ShaderTypeValidator"

    def validate(self, document: ShaderDocument) -> list[Diagnostic]:
        if document.shader_type in SHADER_TYPES:
            return []

        # Reported at line 1 wherever the (invalid) declaration appears
        return [self._error(
            code=ErrorCode.MISSING_OR_INVALID_SHADER_TYPE,
            line=1,
            message="Missing or invalid shader_type declaration (e.g. shader_type spatial;).",
        )]
