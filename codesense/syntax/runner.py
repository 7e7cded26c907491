"""Syntax runner over a token sequence."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from codesense.diagnostics import collect_diagnostics
from codesense.lexer import Token
from codesense.pipeline.results import CheckResult
from codesense.syntax.rules import SyntaxRule, default_syntax_rules, validate_syntax_rules

logger = logging.getLogger(__name__)


def check_syntax(
    tokens: list[Token],
    language: str,
    *,
    rules: Sequence[SyntaxRule] | None = None,
) -> CheckResult:
    """Run every rule that applies to `language`, keeping rule execution order."""
    resolved_rules = tuple(rules) if rules is not None else default_syntax_rules()
    validate_syntax_rules(resolved_rules)

    applicable = [rule for rule in resolved_rules if rule.languages is None or language in rule.languages]
    diagnostics = collect_diagnostics(*(rule.run(tokens) for rule in applicable))

    logger.debug("Syntax check (%s) produced %d diagnostics", language, len(diagnostics))
    return CheckResult(errors=diagnostics)
