"""Result carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codesense.pipeline.results import AnalysisResult, CheckResult, FormatRunResult

if TYPE_CHECKING:
    from codesense.options import AnalyzerOptions


def analyze(text: str, language: str, options: AnalyzerOptions | None = None) -> AnalysisResult:
    from codesense.pipeline.entrypoints import analyze as _analyze

    return _analyze(text, language, options)


__all__ = [
    "AnalysisResult",
    "CheckResult",
    "FormatRunResult",
    "analyze",
]
