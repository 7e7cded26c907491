"""Semantic runner: one left-to-right pass over the tokens."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from codesense.diagnostics import Diagnostic
from codesense.languages.profiles import HEURISTIC_LANGUAGES
from codesense.lexer import Token
from codesense.pipeline.results import CheckResult
from codesense.semantic.rules import (
    SemanticContext,
    SemanticRule,
    default_semantic_rules,
    validate_semantic_rules,
)

logger = logging.getLogger(__name__)


def check_semantics(
    tokens: list[Token],
    language: str,
    *,
    rules: Sequence[SemanticRule] | None = None,
) -> CheckResult:
    """Run the semantic rules. Languages outside the heuristic subset are always valid."""
    if language not in HEURISTIC_LANGUAGES:
        return CheckResult()

    resolved_rules = tuple(rules) if rules is not None else default_semantic_rules()
    validate_semantic_rules(resolved_rules)

    context = SemanticContext()
    diagnostics: list[Diagnostic] = []
    for index, token in enumerate(tokens):
        context.enter(token)
        for rule in resolved_rules:
            diagnostics.extend(rule.visit(tokens, index, context))

    logger.debug(
        "Semantic check (%s) produced %d diagnostics; %d variables, %d functions declared",
        language,
        len(diagnostics),
        len(context.declared_variables),
        len(context.declared_functions),
    )
    return CheckResult(errors=diagnostics)
