"""Plain-text rendering of analysis results."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, TypeAlias

from codesense.pipeline.results import AnalysisResult, CheckResult

Section: TypeAlias = Literal["lexical", "syntax", "semantic", "formatted"]

SECTIONS: tuple[Section, ...] = ("lexical", "syntax", "semantic", "formatted")


def render_tokens(result: AnalysisResult) -> str:
    rows = [("Lexeme", "Token Type", "Line")]
    rows.extend((token.lexeme, token.category.value, str(token.line)) for token in result.tokens)
    lexeme_width = max(len(row[0]) for row in rows)
    type_width = max(len(row[1]) for row in rows)
    lines = ["Symbol Table"]
    for lexeme, category, line in rows:
        lines.append(f"  {lexeme:<{lexeme_width}}  {category:<{type_width}}  {line}".rstrip())
    return "\n".join(lines)


def render_check(title: str, check: CheckResult) -> str:
    kind = title.lower()
    if check.valid:
        return f"{title} Analysis\n  Valid {title}: no {kind} errors were found in the code."
    lines = [f"{title} Analysis", f"  Found {len(check.errors)} {kind} error(s)."]
    for error in check.errors:
        lines.append(f"  line {error.line}: {error.message}")
        if error.hint is not None:
            lines.append(f"    hint: {error.hint}")
    return "\n".join(lines)


def render_formatted(result: AnalysisResult) -> str:
    return "Formatted Code\n" + result.formatted.formatted_text


def render_result(result: AnalysisResult, sections: Sequence[Section] = SECTIONS) -> str:
    """Render the requested sections, in the canonical section order."""
    blocks: list[str] = []
    for section in SECTIONS:
        if section not in sections:
            continue
        match section:
            case "lexical":
                blocks.append(render_tokens(result))
            case "syntax":
                blocks.append(render_check("Syntax", result.syntax))
            case "semantic":
                blocks.append(render_check("Semantic", result.semantic))
            case "formatted":
                blocks.append(render_formatted(result))
    return "\n\n".join(blocks)
