"""Formatter."""

from codesense.format.runner import format_code, run_format
from codesense.format.strategies import correct_brace_imbalance, format_braced, format_indented

__all__ = [
    "correct_brace_imbalance",
    "format_braced",
    "format_code",
    "format_indented",
    "run_format",
]
