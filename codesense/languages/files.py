"""Source-file ingestion: extension to language checks before analysis."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from codesense.languages.profiles import Language

EXTENSION_TO_LANGUAGE: Final[Mapping[str, Language]] = MappingProxyType(
    {
        ".js": Language.JAVASCRIPT,
        ".ts": Language.TYPESCRIPT,
        ".py": Language.PYTHON,
        ".java": Language.JAVA,
        ".c": Language.C,
        ".cpp": Language.CPP,
        ".h": Language.C,
        ".hpp": Language.CPP,
    }
)


class LanguageMismatchError(ValueError):
    """Raised when a file's extension maps to a different language than the selected one."""

    def __init__(self, path: Path, detected: str, selected: str) -> None:
        self.path = path
        self.detected = detected
        self.selected = selected
        super().__init__(
            f"The uploaded file ({path.name}) appears to be {detected} code, "
            f"but the selected language is {selected}."
        )


def language_for_path(path: str | Path) -> Language | None:
    """Language implied by the file extension, or None for unknown extensions."""
    return EXTENSION_TO_LANGUAGE.get(Path(path).suffix)


def check_language_consistency(path: str | Path, language: str) -> None:
    resolved = Path(path)
    detected = language_for_path(resolved)
    if detected is not None and detected != language:
        raise LanguageMismatchError(resolved, detected.value, language)


def read_source_file(path: str | Path, language: str, *, encoding: str = "utf-8") -> str:
    """Read a source file after verifying its extension agrees with `language`."""
    resolved = Path(path)
    check_language_consistency(resolved, language)
    return resolved.read_text(encoding=encoding)
