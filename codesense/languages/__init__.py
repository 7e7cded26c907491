"""Language keys, token profiles and file ingestion."""

from codesense.languages.files import (
    EXTENSION_TO_LANGUAGE,
    LanguageMismatchError,
    check_language_consistency,
    language_for_path,
    read_source_file,
)
from codesense.languages.profiles import (
    BRACE_LANGUAGES,
    DEFAULT_LANGUAGE,
    HEURISTIC_LANGUAGES,
    PROFILES,
    Language,
    LanguageProfile,
    TokenRule,
    get_profile,
    is_supported_language,
)

__all__ = [
    "BRACE_LANGUAGES",
    "DEFAULT_LANGUAGE",
    "EXTENSION_TO_LANGUAGE",
    "HEURISTIC_LANGUAGES",
    "PROFILES",
    "Language",
    "LanguageMismatchError",
    "LanguageProfile",
    "TokenRule",
    "check_language_consistency",
    "get_profile",
    "is_supported_language",
    "language_for_path",
    "read_source_file",
]
