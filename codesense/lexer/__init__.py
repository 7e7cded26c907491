"""Lexer."""

from codesense.lexer.tokens import Token, TokenCategory
from codesense.lexer.lexer import Lexer, dump_tokens, tokenize, tokenize_source

__all__ = [
    "Lexer",
    "Token",
    "TokenCategory",
    "dump_tokens",
    "tokenize",
    "tokenize_source",
]
