"""Entry Point Validator — requires an entry point the shader type is run through.

The suggested signature in the message depends on the declared shader type.
The hint is cosmetic and never changes whether a diagnostic is emitted.
"""

from typing import Optional

from shadercheck.validators.base import BaseValidator
from shadercheck.validators.models import Diagnostic, ErrorCode, ShaderDocument
from shadercheck.validators.reference_data import (
    DEFAULT_ENTRY_POINT_HINT,
    ENTRY_POINT_HINTS,
    ENTRY_POINTS,
    SHADER_ENTRY_POINTS,
)


def entry_point_hint(shader_type: Optional[str]) -> str:
    """Example entry-point signature for a (possibly unknown) shader type."""
    return ENTRY_POINT_HINTS.get(shader_type or "", DEFAULT_ENTRY_POINT_HINT)


class EntryPointValidator(BaseValidator):
    """Flags a missing entry point, or one the declared shader type never calls."""

    @property
    def name(self) -> str:
        return "EntryPointValidator"

    def validate(self, document: ShaderDocument) -> list[Diagnostic]:
        entry_point = document.entry_point

        if entry_point in ENTRY_POINTS:
            # Unknown shader types are reported by ShaderTypeValidator; only
            # a recognized type narrows the accepted entry points.
            expected = SHADER_ENTRY_POINTS.get(document.shader_type or "")
            if expected is None or entry_point in expected:
                return []

        return [self._error(
            code=ErrorCode.MISSING_OR_INVALID_ENTRY_POINT,
            line=1,
            message=f"Missing or invalid entrypoint (e.g. {entry_point_hint(document.shader_type)}).",
        )]
