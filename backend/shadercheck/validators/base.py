"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit that inspects a
classified ShaderDocument. New validators are added without modifying the
engine.
"""

from abc import ABC, abstractmethod

from shadercheck.validators.models import Diagnostic, ErrorCode, ShaderDocument


class BaseValidator(ABC):
    """Abstract base for all shader validators.

    Contract:
        - validate() is deterministic: same document → same diagnostics
        - validate() returns a list of Diagnostic (empty = no issues)
        - validate() never raises for a well-formed ShaderDocument
        - No I/O, no shared mutable state
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, document: ShaderDocument) -> list[Diagnostic]:
        """Run validation checks against the classified document.

        Args:
            document: Output of the line classifier

        Returns:
            List of Diagnostic findings in discovery order (empty if no issues)
        """
        ...

    def _error(self, code: ErrorCode, line: int, message: str) -> Diagnostic:
        """Convenience method to create a Diagnostic."""
        return Diagnostic(line=line, message=message, code=code)
