"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from codesense.diagnostics.codes import DiagnosticSpec
from codesense.diagnostics.diagnostic import Diagnostic


def make_diagnostic(spec: DiagnosticSpec, line: int, message: str | None = None) -> Diagnostic:
    """Build a diagnostic from a catalogue entry, optionally overriding its message."""
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        line=line,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics
