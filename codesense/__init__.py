"""Heuristic token, syntax, semantic and formatting analysis for code snippets."""

from codesense.diagnostics import Diagnostic
from codesense.format import format_code
from codesense.languages import Language, LanguageMismatchError, get_profile, read_source_file
from codesense.lexer import Token, TokenCategory, tokenize, tokenize_source
from codesense.options import AnalyzerOptions, FormatOptions
from codesense.pipeline import AnalysisResult, CheckResult, FormatRunResult, analyze
from codesense.semantic import check_semantics
from codesense.syntax import check_syntax

__all__ = [
    "AnalysisResult",
    "AnalyzerOptions",
    "CheckResult",
    "Diagnostic",
    "FormatOptions",
    "FormatRunResult",
    "Language",
    "LanguageMismatchError",
    "Token",
    "TokenCategory",
    "analyze",
    "check_semantics",
    "check_syntax",
    "format_code",
    "get_profile",
    "read_source_file",
    "tokenize",
    "tokenize_source",
]
