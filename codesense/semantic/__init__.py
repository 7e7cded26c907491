"""Scope-approximate semantic validation for token sequences."""

from codesense.semantic.rules import (
    SemanticContext,
    SemanticRule,
    default_semantic_rules,
    validate_semantic_rules,
)
from codesense.semantic.runner import check_semantics

__all__ = [
    "SemanticContext",
    "SemanticRule",
    "check_semantics",
    "default_semantic_rules",
    "validate_semantic_rules",
]
