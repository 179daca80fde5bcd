"""End-to-end tests for the validation engine and the validate() entry point."""

import pytest
from structlog.testing import capture_logs

from shadercheck.validators import ErrorCode, ValidationEngine, validate
from shadercheck.validators.terminator_validator import TerminatorValidator


MISSING_TERMINATOR = """shader_type spatial;

void fragment() {
    vec3 x = vec3(1.0, 0.0, 0.0)
    ALBEDO = x;
}
"""

SAMPLE_SOURCES = [
    "",
    "x = 1\ny = 2",
    MISSING_TERMINATOR,
    "shader_type spatial;\nvoid fragment() { vec3 x = vec3(1.0, 0.0, 0.0); ALBEDO = x; }",
    "shader_type sky;\nvoid sky() {\n    COLOR = vec3(0.1, 0.2, 0.6);\n}",
    "/* unterminated\nshader_type spatial;",
]


class TestValidate:
    def test_well_formed_shader_is_valid(self, valid_spatial: str) -> None:
        result = validate(valid_spatial)
        assert result.valid is True
        assert result.errors == []

    def test_single_line_body_is_valid(self) -> None:
        source = "shader_type spatial;\nvoid fragment() { vec3 x = vec3(1.0, 0.0, 0.0); ALBEDO = x; }"
        result = validate(source)
        assert result.valid is True
        assert result.errors == []

    def test_missing_terminator_reported_at_its_line(self) -> None:
        result = validate(MISSING_TERMINATOR)

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].line == 4
        assert result.errors[0].code == ErrorCode.MISSING_STATEMENT_TERMINATOR

    def test_missing_shader_type_reported_at_line_one(self) -> None:
        result = validate("void fragment() {\n    ALBEDO = vec3(1.0);\n}\n")

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].line == 1
        assert result.errors[0].code == ErrorCode.MISSING_OR_INVALID_SHADER_TYPE

    def test_invalid_shader_type_reported_at_line_one(self) -> None:
        result = validate("\n\nshader_type volumetric;\nvoid fragment() {\n}\n")

        assert [(e.line, e.code) for e in result.errors] == [
            (1, ErrorCode.MISSING_OR_INVALID_SHADER_TYPE),
        ]

    def test_sky_shader_with_fragment_entry_point(self) -> None:
        result = validate("shader_type sky;\n\nvoid fragment() {\n    COLOR = vec3(0.2);\n}\n")

        assert result.valid is False
        assert len(result.errors) == 1
        assert result.errors[0].line == 1
        assert result.errors[0].code == ErrorCode.MISSING_OR_INVALID_ENTRY_POINT
        assert "sky()" in result.errors[0].message

    def test_fragment_entry_point_valid_for_spatial(self) -> None:
        result = validate("shader_type spatial;\n\nvoid fragment() {\n    ALBEDO = vec3(0.2);\n}\n")
        assert result.valid is True

    @pytest.mark.parametrize(
        "shader_type, needle",
        [("sky", "void sky()"), ("fog", "void fog()"), ("particles", "void start() or void process()")],
    )
    def test_hint_varies_with_shader_type(self, shader_type: str, needle: str) -> None:
        result = validate(f"shader_type {shader_type};\nvoid vertex() {{\n}}\n")
        assert needle in result.errors[0].message

    def test_comparison_in_if_header_not_flagged(self) -> None:
        source = (
            "shader_type spatial;\n"
            "void fragment() {\n"
            "    float x = 1.0;\n"
            "    if (x == 1.0) {\n"
            "        ALBEDO = vec3(x);\n"
            "    }\n"
            "}\n"
        )
        assert validate(source).valid is True

    def test_unterminated_return_flagged(self) -> None:
        source = (
            "shader_type spatial;\n"
            "vec3 tint() {\n"
            "    return vec3(0.0, 0.0, 0.0)\n"
            "}\n"
            "void fragment() {\n"
            "    ALBEDO = tint();\n"
            "}\n"
        )
        result = validate(source)

        assert [(e.line, e.code) for e in result.errors] == [
            (3, ErrorCode.MISSING_STATEMENT_TERMINATOR),
        ]

    def test_comment_lines_never_diagnosed(self) -> None:
        source = (
            "shader_type spatial;\n"
            "// ALBEDO = x\n"
            "/* y = 2 */\n"
            "/*\n"
            "   return vec3(1.0)\n"
            "*/\n"
            "void fragment() {\n"
            "}\n"
        )
        assert validate(source).errors == []

    def test_diagnostic_order(self) -> None:
        result = validate("x = 1\ny = 2")

        assert [(e.line, e.code) for e in result.errors] == [
            (1, ErrorCode.MISSING_OR_INVALID_SHADER_TYPE),
            (1, ErrorCode.MISSING_OR_INVALID_ENTRY_POINT),
            (1, ErrorCode.MISSING_STATEMENT_TERMINATOR),
            (2, ErrorCode.MISSING_STATEMENT_TERMINATOR),
        ]

    def test_empty_source(self) -> None:
        result = validate("")
        assert result.valid is False
        assert [e.code for e in result.errors] == [
            ErrorCode.MISSING_OR_INVALID_SHADER_TYPE,
            ErrorCode.MISSING_OR_INVALID_ENTRY_POINT,
        ]

    @pytest.mark.parametrize("source", SAMPLE_SOURCES)
    def test_valid_iff_no_errors(self, source: str) -> None:
        result = validate(source)
        assert result.valid == (len(result.errors) == 0)

    @pytest.mark.parametrize("source", SAMPLE_SOURCES)
    def test_idempotent(self, source: str) -> None:
        assert validate(source) == validate(source)

    def test_logs_validation_run(self) -> None:
        with capture_logs() as logs:
            validate(MISSING_TERMINATOR)

        events = [entry for entry in logs if entry["event"] == "validation_complete"]
        assert len(events) == 1
        assert events[0]["valid"] is False
        assert events[0]["total_errors"] == 1
        assert events[0]["shader_type"] == "spatial"


class TestValidationEngine:
    def test_default_chain(self) -> None:
        assert ValidationEngine().validator_names == [
            "ShaderTypeValidator",
            "EntryPointValidator",
            "TerminatorValidator",
        ]

    def test_empty_chain_always_valid(self) -> None:
        engine = ValidationEngine(validators=[])
        assert engine.validator_names == []
        assert engine.validate("not a shader at all").valid is True

    def test_remove_and_add_validator(self) -> None:
        engine = ValidationEngine()

        engine.remove_validator("TerminatorValidator")
        assert engine.validate(MISSING_TERMINATOR).valid is True

        engine.add_validator(TerminatorValidator())
        assert [e.line for e in engine.validate(MISSING_TERMINATOR).errors] == [4]
