"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field

from codesense.diagnostics import Diagnostic
from codesense.lexer import Token


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Diagnostics of one validator. `valid` is derived, never stored."""

    errors: list[Diagnostic] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        return {"valid": self.valid, "errors": [error.to_dict() for error in self.errors]}


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting one source text."""

    formatted_text: str
    changed: bool

    def to_dict(self) -> dict[str, object]:
        return {"code": self.formatted_text}


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Aggregate of one analysis call: tokens, both checks and formatting."""

    language: str
    tokens: list[Token]
    syntax: CheckResult
    semantic: CheckResult
    formatted: FormatRunResult

    @property
    def has_errors(self) -> bool:
        return not (self.syntax.valid and self.semantic.valid)

    def to_dict(self) -> dict[str, object]:
        return {
            "tokens": [token.to_dict() for token in self.tokens],
            "syntax": self.syntax.to_dict(),
            "semantic": self.semantic.to_dict(),
            "formatted": self.formatted.to_dict(),
        }
