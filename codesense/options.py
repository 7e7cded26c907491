"""Analyzer configuration options."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Indentation widths used by the formatter."""

    brace_indent_width: int = 2
    python_indent_width: int = 4

    def __post_init__(self) -> None:
        if self.brace_indent_width < 1:
            raise ValueError(f"brace_indent_width must be positive, got {self.brace_indent_width}")
        if self.python_indent_width < 1:
            raise ValueError(f"python_indent_width must be positive, got {self.python_indent_width}")

    @property
    def brace_indent(self) -> str:
        return " " * self.brace_indent_width

    @property
    def python_indent(self) -> str:
        return " " * self.python_indent_width


@dataclass(frozen=True, slots=True)
class AnalyzerOptions:
    """Options for one analysis call."""

    format: FormatOptions = field(default_factory=FormatOptions)
