"""Lexer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from codesense.lexer.tokens import Token, TokenCategory

if TYPE_CHECKING:
    from codesense.languages.profiles import LanguageProfile

logger = logging.getLogger(__name__)


class Lexer:
    """Line-oriented maximal-munch lexer driven by a language profile.

    Every profile rule is tried anchored at the scan position; the longest match
    wins and ties go to the rule declared first. Characters no rule accepts are
    skipped without a token or diagnostic. Matches never cross a line break.
    """

    def __init__(self, source: str, profile: LanguageProfile) -> None:
        self._source = source
        self._profile = profile
        self._line = ""
        self._line_number = 0
        self._position = 0
        self._skipped = 0

    @property
    def skipped(self) -> int:
        """Number of characters dropped because no rule matched them."""
        return self._skipped

    @property
    def is_eol(self) -> bool:
        return self._position >= len(self._line)

    def lex(self) -> list[Token]:
        self._skipped = 0
        tokens: list[Token] = []
        for line_number, line in enumerate(self._source.split("\n"), start=1):
            self._line = line
            self._line_number = line_number
            self._position = 0
            while not self.is_eol:
                token = self._next_token()
                if token is not None:
                    tokens.append(token)
        return tokens

    def _next_token(self) -> Token | None:
        remainder = self._line[self._position :]
        category, length = self._longest_match(remainder)
        if category is None:
            logger.debug(
                "No rule matches %r at line %d, column %d; skipping it",
                remainder[0],
                self._line_number,
                self._position + 1,
            )
            self._skipped += 1
            self._advance(1)
            return None

        lexeme = remainder[:length]
        self._advance(length)
        if category.is_trivia:
            return None
        return Token(lexeme=lexeme, category=category, line=self._line_number)

    def _longest_match(self, text: str) -> tuple[TokenCategory | None, int]:
        best_category: TokenCategory | None = None
        best_length = 0
        for rule in self._profile.rules:
            length = rule.match_length(text)
            # Strictly longer only: an equal-length later rule never displaces an earlier one.
            if length > best_length:
                best_category = rule.category
                best_length = length
        return best_category, best_length

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize(source: str, profile: LanguageProfile) -> list[Token]:
    """Tokenize `source` with an explicit profile."""
    tokens = Lexer(source, profile).lex()
    logger.debug("Lexed %d tokens with the %s profile", len(tokens), profile.name)
    return tokens


def tokenize_source(source: str, language: str) -> list[Token]:
    """Tokenize `source` with the profile registered for `language`."""
    from codesense.languages.profiles import get_profile

    return tokenize(source, get_profile(language))


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with category, line, and lexeme for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.category.name:<12} line={tok.line:<4} lexeme={tok.lexeme!r}")
