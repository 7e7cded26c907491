"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the syntax and semantic validators."""

    code: str
    message: str
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "line": self.line}
