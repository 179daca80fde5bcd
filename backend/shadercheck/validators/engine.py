"""Validation Engine — classifies shader source, runs all validators, produces a result.

This is the main entry point for shader validation. It classifies the source
once and runs every registered validator against the resulting document,
accumulating diagnostics in a fixed order: global declaration checks first,
then per-statement checks in source order.

Usage:
    engine = ValidationEngine()
    result = engine.validate(source)
    if not result.valid:
        # Surface result.errors, withhold source from the renderer
"""

import time
from typing import Optional

import structlog

from shadercheck.validators.base import BaseValidator
from shadercheck.validators.classifier import classify
from shadercheck.validators.models import Diagnostic, ShaderDocument, ValidationResult

# Import all validators
from shadercheck.validators.shader_type_validator import ShaderTypeValidator
from shadercheck.validators.entry_point_validator import EntryPointValidator
from shadercheck.validators.terminator_validator import TerminatorValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates all validators and produces a unified validation result.

    Design principles:
        - Deterministic: same source → same result
        - Stateless: nothing survives between calls
        - Exhaustive: every validator runs, no early exit
        - Extensible: add validators without modifying engine
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators = self._default_validators() if validators is None else list(validators)

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in execution order."""
        return [
            ShaderTypeValidator(),    # Line 1 — shader_type declaration
            EntryPointValidator(),    # Line 1 — entry point for the shader type
            TerminatorValidator(),    # Per statement, in source order
        ]

    def validate(self, source: str) -> ValidationResult:
        """Classify the source and run all validators against it.

        Args:
            source: Raw shader source text

        Returns:
            ValidationResult with verdict and every diagnostic found
        """
        start_time = time.perf_counter()

        document = classify(source)
        result = self.validate_document(document)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            valid=result.valid,
            total_errors=len(result.errors),
            statements=len(document.statements),
            shader_type=document.shader_type,
            entry_point=document.entry_point,
            duration_ms=round(total_duration, 2),
        )

        return result

    def validate_document(self, document: ShaderDocument) -> ValidationResult:
        """Run all validators against an already classified document."""
        all_errors: list[Diagnostic] = []
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            all_errors.extend(validator.validate(document))
            validator_timings[validator.name] = round((time.perf_counter() - v_start) * 1000, 3)

        logger.debug("validators_run", validator_timings=validator_timings)

        return ValidationResult.build(all_errors)

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the end of the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]

    @property
    def validator_names(self) -> list[str]:
        return [v.name for v in self.validators]


# Module-level singleton
validation_engine = ValidationEngine()


def validate(source: str) -> ValidationResult:
    """Validate shader source with the default validator chain."""
    return validation_engine.validate(source)
