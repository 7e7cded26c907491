"""Format runner over raw source text."""

from __future__ import annotations

import logging

from codesense.format.strategies import format_braced, format_indented
from codesense.languages.profiles import BRACE_LANGUAGES, Language
from codesense.options import FormatOptions
from codesense.pipeline.results import FormatRunResult

logger = logging.getLogger(__name__)


def format_code(text: str, language: str, options: FormatOptions | None = None) -> str:
    """Re-indent `text`. Works on trimmed lines and ignores the token stream."""
    resolved_options = options if options is not None else FormatOptions()
    lines = text.split("\n")
    if language in BRACE_LANGUAGES:
        return "\n".join(format_braced(lines, resolved_options.brace_indent))
    if language == Language.PYTHON:
        return "\n".join(format_indented(lines, resolved_options.python_indent))
    logger.debug("No formatter for %r; returning the source unchanged", language)
    return text


def run_format(text: str, language: str, options: FormatOptions | None = None) -> FormatRunResult:
    """Run formatting and report whether the text changed."""
    formatted_text = format_code(text, language, options)
    return FormatRunResult(formatted_text=formatted_text, changed=formatted_text != text)
