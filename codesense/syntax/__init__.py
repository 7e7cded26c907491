"""Syntax validation for token sequences."""

from codesense.syntax.rules import (
    SyntaxRule,
    default_syntax_rules,
    validate_syntax_rules,
)
from codesense.syntax.runner import check_syntax

__all__ = [
    "SyntaxRule",
    "check_syntax",
    "default_syntax_rules",
    "validate_syntax_rules",
]
