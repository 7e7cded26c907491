"""Lexer tokens."""

from dataclasses import dataclass
from enum import StrEnum


class TokenCategory(StrEnum):
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    PREPROCESSOR = "preprocessor"  # C/C++ only

    @property
    def is_trivia(self) -> bool:
        return self in (TokenCategory.WHITESPACE, TokenCategory.COMMENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token. Trivia never reaches this type."""

    lexeme: str
    category: TokenCategory
    line: int

    def to_dict(self) -> dict[str, object]:
        return {"lexeme": self.lexeme, "category": self.category.value, "line": self.line}
