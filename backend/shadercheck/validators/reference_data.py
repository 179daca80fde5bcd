"""Reference data — the shader dialect's rule tables.

Every check reads its allowed values from here, so the dialect can be
retargeted without touching classification or validation logic.
"""

# ──────────────────────────────────────────────────────────────────────
# SHADER TYPES
# ──────────────────────────────────────────────────────────────────────

SHADER_TYPES: tuple[str, ...] = ("spatial", "canvas_item", "particles", "sky", "fog")

# ──────────────────────────────────────────────────────────────────────
# ENTRY POINTS
# ──────────────────────────────────────────────────────────────────────

ENTRY_POINTS: tuple[str, ...] = ("vertex", "fragment", "light", "start", "process", "sky", "fog")

# Entry points each shader type is invoked through
SHADER_ENTRY_POINTS: dict[str, tuple[str, ...]] = {
    "spatial": ("vertex", "fragment", "light"),
    "canvas_item": ("vertex", "fragment", "light"),
    "particles": ("start", "process"),
    "sky": ("sky",),
    "fog": ("fog",),
}

# Example signature shown in the entry-point diagnostic, by shader type
ENTRY_POINT_HINTS: dict[str, str] = {
    "sky": "void sky()",
    "fog": "void fog()",
    "particles": "void start() or void process()",
}

DEFAULT_ENTRY_POINT_HINT = "void fragment() or void vertex()"

# ──────────────────────────────────────────────────────────────────────
# STATEMENT SHAPES
# ──────────────────────────────────────────────────────────────────────

# Keywords that open a line-level declaration rather than a statement
DIRECTIVE_KEYWORDS: tuple[str, ...] = ("shader_type", "render_mode")

CONTROL_FLOW_KEYWORDS: tuple[str, ...] = ("if", "else if", "for", "while", "do", "switch")

# Types a function definition may return
RETURN_TYPES: tuple[str, ...] = (
    "void", "float", "int", "uint", "bool",
    "vec2", "vec3", "vec4",
    "ivec2", "ivec3", "ivec4",
    "uvec2", "uvec3", "uvec4",
    "bvec2", "bvec3", "bvec4",
    "mat2", "mat3", "mat4",
)

# Opaque sampler types are matched by prefix (sampler2D, isampler3D, ...)
SAMPLER_PREFIXES: tuple[str, ...] = ("sampler", "isampler", "usampler")
