"""Terminator Validator — every statement that needs a semicolon must end with one."""

from shadercheck.validators.base import BaseValidator
from shadercheck.validators.models import Diagnostic, ErrorCode, ShaderDocument


class TerminatorValidator(BaseValidator):
    """Flags statements missing their trailing ';', in source order."""

    @property
    def name(self) -> str:
        return "TerminatorValidator"

    def validate(self, document: ShaderDocument) -> list[Diagnostic]:
        errors = []

        for statement in document.statements:
            if statement.requires_semicolon and not statement.ends_with_semicolon:
                errors.append(self._error(
                    code=ErrorCode.MISSING_STATEMENT_TERMINATOR,
                    line=statement.line,
                    message="Expected ';' at end of statement.",
                ))

        return errors
