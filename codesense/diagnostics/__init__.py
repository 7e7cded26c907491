"""Diagnostics."""

from codesense.diagnostics.codes import DiagnosticSpec
from codesense.diagnostics.diagnostic import Diagnostic, Severity
from codesense.diagnostics.report import collect_diagnostics, make_diagnostic

__all__ = [
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "make_diagnostic",
]
