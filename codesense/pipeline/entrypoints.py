"""Unified entrypoint that runs every analysis stage over one source text."""

from __future__ import annotations

import logging

from codesense.format import run_format
from codesense.languages.profiles import get_profile
from codesense.lexer import tokenize
from codesense.options import AnalyzerOptions
from codesense.pipeline.results import AnalysisResult
from codesense.semantic import check_semantics
from codesense.syntax import check_syntax

logger = logging.getLogger(__name__)


def analyze(text: str, language: str, options: AnalyzerOptions | None = None) -> AnalysisResult:
    """Tokenize, validate and format `text`.

    Total over all inputs: problems are reported as diagnostics, never raised.
    Unknown language keys tokenize with the javascript profile and skip the
    language-gated heuristics.
    """
    resolved_options = options if options is not None else AnalyzerOptions()
    tokens = tokenize(text, get_profile(language))
    syntax = check_syntax(tokens, language)
    semantic = check_semantics(tokens, language)
    formatted = run_format(text, language, resolved_options.format)
    logger.debug(
        "Analyzed %d lines of %s: %d tokens, %d syntax and %d semantic diagnostics",
        text.count("\n") + 1,
        language,
        len(tokens),
        len(syntax.errors),
        len(semantic.errors),
    )
    return AnalysisResult(
        language=language,
        tokens=tokens,
        syntax=syntax,
        semantic=semantic,
        formatted=formatted,
    )
