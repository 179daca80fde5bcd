"""API request models."""

from pydantic import BaseModel, Field


class ShaderSourceRequest(BaseModel):
    """Shader source submitted for validation or classification."""

    source: str = Field(
        ...,
        description="Raw GDShader-like source text",
        examples=[
            "shader_type spatial;\n\n"
            "void fragment() {\n"
            "    vec3 x = vec3(1.0, 0.0, 0.0);\n"
            "    ALBEDO = x;\n"
            "}\n"
        ],
    )
