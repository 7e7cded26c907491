"""Line-based indentation strategies."""

from __future__ import annotations

import re
from typing import Final

_CONTINUATION_CLAUSE: Final[re.Pattern[str]] = re.compile(r"(?:elif|else|except|finally)\b")
_BLOCK_TERMINATOR: Final[re.Pattern[str]] = re.compile(r"(?:return|break|continue|pass)\b")


def format_braced(lines: list[str], indent: str) -> list[str]:
    """Re-indent brace-delimited code from its `{`/`}` layout."""
    formatted: list[str] = []
    depth = 0
    for line in lines:
        trimmed = line.strip()
        if trimmed.startswith("}"):
            depth = max(0, depth - 1)
        formatted.append(indent * depth + trimmed if trimmed else "")
        if trimmed.endswith("{"):
            depth += 1
        depth = correct_brace_imbalance(trimmed, depth)
    return formatted


def correct_brace_imbalance(trimmed: str, depth: int) -> int:
    """Secondary correction for lines whose braces are not at the edges.

    Lines that start with `}` or end with `{` were already counted by the
    primary pass and are left alone.
    """
    if trimmed.startswith("}") or trimmed.endswith("{"):
        return depth
    imbalance = trimmed.count("{") - trimmed.count("}")
    if imbalance == 0:
        return depth
    return max(0, depth + imbalance)


def format_indented(lines: list[str], indent: str) -> list[str]:
    """Re-indent Python-like code from `:` headers and block terminators.

    A terminator followed by `elif/else/except/finally` keeps its depth and the
    clause line is emitted one level out instead.
    """
    formatted: list[str] = []
    depth = 0
    pending_clause_dedent = False
    for index, line in enumerate(lines):
        trimmed = line.strip()
        if not trimmed:
            formatted.append("")
            continue

        if pending_clause_dedent and _CONTINUATION_CLAUSE.match(trimmed):
            depth = max(0, depth - 1)
        pending_clause_dedent = False
        formatted.append(indent * depth + trimmed)

        if trimmed.endswith(":"):
            depth += 1
        elif _BLOCK_TERMINATOR.match(trimmed):
            if _continues_clause(lines, index):
                pending_clause_dedent = True
            else:
                depth = max(0, depth - 1)
    return formatted


def _continues_clause(lines: list[str], index: int) -> bool:
    for line in lines[index + 1 :]:
        trimmed = line.strip()
        if trimmed:
            return _CONTINUATION_CLAUSE.match(trimmed) is not None
    return False
