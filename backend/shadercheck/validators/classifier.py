"""Line Classifier — turns raw shader source into a ShaderDocument.

Deterministic, single pass, no AST. Each non-blank line becomes a
ClassifiedStatement tagged with whether its shape demands a terminating
semicolon. The decision is an ordered policy table (SEMICOLON_RULES):
the first rule whose predicate matches decides, later rules never override.

Usage:
    doc = classify(source)
    for st in doc.statements:
        print(st.line, st.rule, st.requires_semicolon)
"""

import re
from typing import Callable, NamedTuple, Optional

from shadercheck.validators.models import ClassifiedStatement, ShaderDocument
from shadercheck.validators.reference_data import (
    CONTROL_FLOW_KEYWORDS,
    DIRECTIVE_KEYWORDS,
    ENTRY_POINTS,
    RETURN_TYPES,
    SAMPLER_PREFIXES,
)

_LINE_SPLIT_RE = re.compile(r"\r?\n")

# Global facts, matched against the raw source
_SHADER_TYPE_RE = re.compile(r"\bshader_type\s+(\w+)\s*;")
_ENTRY_POINT_RE = re.compile(r"\bvoid\s+(" + "|".join(ENTRY_POINTS) + r")\s*\(")

# Per-line shapes, matched against trimmed, comment-free text
_DIRECTIVE_RE = re.compile(r"^(?:(?:" + "|".join(DIRECTIVE_KEYWORDS) + r")\s|#)")
_BLOCK_DELIMITER_ENDINGS = ("{", "}", "};", ",")
_LONE_BRACE_RE = re.compile(r"^\s*[{}]\s*$")
_CONTROL_FLOW_RE = re.compile(
    r"^(?:" + "|".join(kw.replace(" ", r"\s+") for kw in CONTROL_FLOW_KEYWORDS) + r")\s*\("
)
_BARE_ELSE_RE = re.compile(r"^else$")
_STRUCT_OPENER_RE = re.compile(r"^struct\s+\w+\s*\{")
_FUNCTION_HEADER_RE = re.compile(
    r"^(?:"
    + "|".join(RETURN_TYPES)
    + "|"
    + "|".join(prefix + r"\w*" for prefix in SAMPLER_PREFIXES)
    + r")\s+\w+\s*\("
)
# An "=" that is neither part of a comparison nor followed by another "="
_ASSIGNMENT_RE = re.compile(r"(?:<<|>>)=|(?<![=!<>])=(?!=)")
_RETURN_RE = re.compile(r"\breturn\b")
_CALL_STATEMENT_RE = re.compile(r"\w\s*\(.*\)\s*$")


class SemicolonRule(NamedTuple):
    """One row of the semicolon policy table."""

    name: str
    matches: Callable[[str], bool]
    requires_semicolon: bool


def _is_directive(text: str) -> bool:
    return bool(_DIRECTIVE_RE.match(text))


def _is_block_delimiter(text: str) -> bool:
    return text.endswith(_BLOCK_DELIMITER_ENDINGS)


def _is_lone_brace(text: str) -> bool:
    return bool(_LONE_BRACE_RE.match(text))


def _is_control_flow(text: str) -> bool:
    return bool(_CONTROL_FLOW_RE.match(text) or _BARE_ELSE_RE.match(text))


def _is_struct_opener(text: str) -> bool:
    return bool(_STRUCT_OPENER_RE.match(text))


def _is_function_header(text: str) -> bool:
    return bool(_FUNCTION_HEADER_RE.match(text))


def _is_assignment(text: str) -> bool:
    return bool(_ASSIGNMENT_RE.search(text))


def _is_return(text: str) -> bool:
    return bool(_RETURN_RE.search(text))


def _is_call_statement(text: str) -> bool:
    return bool(_CALL_STATEMENT_RE.search(text))


def _always(text: str) -> bool:
    return True


SEMICOLON_RULES: tuple[SemicolonRule, ...] = (
    SemicolonRule("directive", _is_directive, False),
    SemicolonRule("block_delimiter", _is_block_delimiter, False),
    SemicolonRule("lone_brace", _is_lone_brace, False),
    SemicolonRule("control_flow", _is_control_flow, False),
    SemicolonRule("struct_opener", _is_struct_opener, False),
    SemicolonRule("function_header", _is_function_header, False),
    SemicolonRule("assignment", _is_assignment, True),
    SemicolonRule("return_statement", _is_return, True),
    SemicolonRule("call_statement", _is_call_statement, True),
    SemicolonRule("unclassified", _always, False),
)


def classify_statement(text: str) -> tuple[bool, str]:
    """Decide whether a trimmed, comment-free line needs a semicolon.

    Returns:
        (requires_semicolon, name of the rule that decided it)
    """
    for rule in SEMICOLON_RULES:
        if rule.matches(text):
            return rule.requires_semicolon, rule.name
    # unreachable: the last rule always matches
    return False, "unclassified"


def strip_comments(line: str, in_block_comment: bool = False) -> tuple[str, bool]:
    """Remove // and /* */ comments from one physical line.

    Args:
        line: Raw line text, without its line terminator
        in_block_comment: Whether a block comment is still open from a
            previous line

    Returns:
        (code text, whether a block comment is still open at end of line)
    """
    kept = []
    i = 0
    while i < len(line):
        if in_block_comment:
            close = line.find("*/", i)
            if close == -1:
                break
            in_block_comment = False
            i = close + 2
            continue

        line_comment = line.find("//", i)
        block_open = line.find("/*", i)
        if block_open != -1 and (line_comment == -1 or block_open < line_comment):
            kept.append(line[i:block_open])
            in_block_comment = True
            i = block_open + 2
            continue

        kept.append(line[i:] if line_comment == -1 else line[i:line_comment])
        break

    return "".join(kept), in_block_comment


def _first_capture(pattern: re.Pattern, source: str) -> Optional[str]:
    match = pattern.search(source)
    return match.group(1) if match else None


def classify(source: str) -> ShaderDocument:
    """Classify shader source into a ShaderDocument.

    Never raises for string input: empty or malformed source yields a
    document with no shader type, no entry point and no statements.
    """
    statements: list[ClassifiedStatement] = []
    in_block_comment = False

    for line_no, raw in enumerate(_LINE_SPLIT_RE.split(source), start=1):
        code, in_block_comment = strip_comments(raw, in_block_comment)
        text = code.strip()
        if not text:
            continue

        requires_semicolon, rule = classify_statement(text)
        statements.append(ClassifiedStatement(
            line=line_no,
            text=text,
            requires_semicolon=requires_semicolon,
            ends_with_semicolon=text.endswith(";"),
            rule=rule,
        ))

    return ShaderDocument(
        shader_type=_first_capture(_SHADER_TYPE_RE, source),
        entry_point=_first_capture(_ENTRY_POINT_RE, source),
        statements=statements,
    )
