"""Language profile registry: ordered token rules per language."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
import logging
import re
from types import MappingProxyType
from typing import Final

from codesense.lexer.tokens import TokenCategory

logger = logging.getLogger(__name__)


class Language(StrEnum):
    """Supported language keys."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"
    JAVA = "java"
    C = "c"
    CPP = "cpp"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: Final[Mapping[Language, str]] = MappingProxyType(
    {
        Language.JAVASCRIPT: "JavaScript",
        Language.TYPESCRIPT: "TypeScript",
        Language.PYTHON: "Python",
        Language.JAVA: "Java",
        Language.C: "C",
        Language.CPP: "C++",
    }
)

DEFAULT_LANGUAGE: Final[Language] = Language.JAVASCRIPT

# Languages the syntax heuristics and the semantic validator understand.
HEURISTIC_LANGUAGES: Final[frozenset[str]] = frozenset(
    {Language.JAVASCRIPT, Language.TYPESCRIPT, Language.JAVA}
)

BRACE_LANGUAGES: Final[frozenset[str]] = frozenset(
    {Language.JAVASCRIPT, Language.TYPESCRIPT, Language.JAVA, Language.C, Language.CPP}
)


@dataclass(frozen=True, slots=True)
class TokenRule:
    """One `(category, pattern)` entry of a profile."""

    category: TokenCategory
    pattern: re.Pattern[str]

    def match_length(self, text: str) -> int:
        """Length of the match anchored at the start of `text` (0 when none)."""
        match = self.pattern.match(text)
        if match is None:
            return 0
        return match.end()


@dataclass(frozen=True, slots=True)
class LanguageProfile:
    """Flat, ordered rule list for one language. Earlier rules win ties."""

    name: str
    rules: tuple[TokenRule, ...]


def _keywords(words: str) -> str:
    return r"\b(?:" + "|".join(words.split()) + r")\b"


def _profile(name: str, entries: Iterable[tuple[TokenCategory, str]]) -> LanguageProfile:
    return LanguageProfile(
        name=name,
        rules=tuple(TokenRule(category, re.compile(pattern, re.ASCII)) for category, pattern in entries),
    )


_NUMBER = r"\b\d+(\.\d+)?\b"
_OPERATOR = r"[+\-*/%=<>!&|^~?:]+"
_PUNCTUATION = r"[{}\[\]();,.]"
_SLASH_COMMENT = r"//.*|/\*.*?\*/"
_WHITESPACE = r"\s+"
_DOLLAR_IDENTIFIER = r"\b[a-zA-Z_$][a-zA-Z0-9_$]*\b"
_IDENTIFIER = r"\b[a-zA-Z_][a-zA-Z0-9_]*\b"
_PREPROCESSOR = r"#[a-zA-Z]+"

_JAVASCRIPT_KEYWORDS = (
    "const let var function return if else for while class import export from async await"
)

JAVASCRIPT_PROFILE: Final[LanguageProfile] = _profile(
    Language.JAVASCRIPT,
    (
        (TokenCategory.KEYWORD, _keywords(_JAVASCRIPT_KEYWORDS)),
        (TokenCategory.IDENTIFIER, _DOLLAR_IDENTIFIER),
        (TokenCategory.STRING, r"([\"'])(.*?)\1"),
        (TokenCategory.NUMBER, _NUMBER),
        (TokenCategory.OPERATOR, _OPERATOR),
        (TokenCategory.PUNCTUATION, _PUNCTUATION),
        (TokenCategory.COMMENT, _SLASH_COMMENT),
        (TokenCategory.WHITESPACE, _WHITESPACE),
    ),
)

TYPESCRIPT_PROFILE: Final[LanguageProfile] = _profile(
    Language.TYPESCRIPT,
    (
        (TokenCategory.KEYWORD, _keywords(_JAVASCRIPT_KEYWORDS + " interface type")),
        (TokenCategory.IDENTIFIER, _DOLLAR_IDENTIFIER),
        (TokenCategory.STRING, r"([\"'])(.*?)\1"),
        (TokenCategory.NUMBER, _NUMBER),
        (TokenCategory.OPERATOR, _OPERATOR),
        (TokenCategory.PUNCTUATION, _PUNCTUATION),
        (TokenCategory.COMMENT, _SLASH_COMMENT),
        (TokenCategory.WHITESPACE, _WHITESPACE),
    ),
)

PYTHON_PROFILE: Final[LanguageProfile] = _profile(
    Language.PYTHON,
    (
        (
            TokenCategory.KEYWORD,
            _keywords(
                "def class if elif else for while return import from as try except finally "
                "with in is not and or True False None"
            ),
        ),
        (TokenCategory.IDENTIFIER, _IDENTIFIER),
        # Triple-quoted forms first so `"""doc"""` is one token, not three.
        (TokenCategory.STRING, r'""".*?"""|' + r"'''.*?'''|" + r"([\"'])(.*?)\1"),
        (TokenCategory.NUMBER, _NUMBER),
        (TokenCategory.OPERATOR, r"[+\-*/%=<>!&|^~@:]+"),
        (TokenCategory.PUNCTUATION, _PUNCTUATION),
        (TokenCategory.COMMENT, r"#.*"),
        (TokenCategory.WHITESPACE, _WHITESPACE),
    ),
)

JAVA_PROFILE: Final[LanguageProfile] = _profile(
    Language.JAVA,
    (
        (
            TokenCategory.KEYWORD,
            _keywords(
                "public private protected class interface enum extends implements static final "
                "void if else for while return new this super"
            ),
        ),
        (TokenCategory.IDENTIFIER, _DOLLAR_IDENTIFIER),
        (TokenCategory.STRING, r"\".*?\""),
        (TokenCategory.NUMBER, _NUMBER),
        (TokenCategory.OPERATOR, _OPERATOR),
        (TokenCategory.PUNCTUATION, _PUNCTUATION),
        (TokenCategory.COMMENT, _SLASH_COMMENT),
        (TokenCategory.WHITESPACE, _WHITESPACE),
    ),
)

C_PROFILE: Final[LanguageProfile] = _profile(
    Language.C,
    (
        (
            TokenCategory.KEYWORD,
            _keywords(
                "int char float double void struct union enum if else for while return "
                "switch case break continue typedef"
            ),
        ),
        (TokenCategory.IDENTIFIER, _IDENTIFIER),
        (TokenCategory.STRING, r"\".*?\""),
        (TokenCategory.NUMBER, _NUMBER),
        (TokenCategory.OPERATOR, _OPERATOR),
        (TokenCategory.PUNCTUATION, _PUNCTUATION),
        (TokenCategory.PREPROCESSOR, _PREPROCESSOR),
        (TokenCategory.COMMENT, _SLASH_COMMENT),
        (TokenCategory.WHITESPACE, _WHITESPACE),
    ),
)

CPP_PROFILE: Final[LanguageProfile] = _profile(
    Language.CPP,
    (
        (
            TokenCategory.KEYWORD,
            _keywords(
                "int char float double void struct class namespace template public private "
                "protected if else for while return new delete using try catch"
            ),
        ),
        (TokenCategory.IDENTIFIER, _IDENTIFIER),
        (TokenCategory.STRING, r"\".*?\""),
        (TokenCategory.NUMBER, _NUMBER),
        (TokenCategory.OPERATOR, _OPERATOR),
        (TokenCategory.PUNCTUATION, _PUNCTUATION),
        (TokenCategory.PREPROCESSOR, _PREPROCESSOR),
        (TokenCategory.COMMENT, _SLASH_COMMENT),
        (TokenCategory.WHITESPACE, _WHITESPACE),
    ),
)

PROFILES: Final[Mapping[str, LanguageProfile]] = MappingProxyType(
    {
        Language.JAVASCRIPT: JAVASCRIPT_PROFILE,
        Language.TYPESCRIPT: TYPESCRIPT_PROFILE,
        Language.PYTHON: PYTHON_PROFILE,
        Language.JAVA: JAVA_PROFILE,
        Language.C: C_PROFILE,
        Language.CPP: CPP_PROFILE,
    }
)


def get_profile(language: str) -> LanguageProfile:
    """Resolve a language key. Unknown keys fall back to the javascript profile."""
    profile = PROFILES.get(language)
    if profile is None:
        logger.debug("Unknown language %r, using the %s profile", language, DEFAULT_LANGUAGE)
        return PROFILES[DEFAULT_LANGUAGE]
    return profile


def is_supported_language(language: str) -> bool:
    return language in PROFILES
