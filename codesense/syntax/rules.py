"""Syntax rules and rule contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol

from codesense.diagnostics import Diagnostic, make_diagnostic
from codesense.diagnostics.codes import (
    SYNTAX_INVALID_ARRAY_ELEMENT,
    SYNTAX_INVALID_FUNCTION_DECLARATION,
    SYNTAX_INVALID_NUMBER_LITERAL,
    SYNTAX_INVALID_OBJECT_PROPERTY,
    SYNTAX_INVALID_OPERATOR_COMBINATION,
    SYNTAX_INVALID_STRING_LITERAL,
    SYNTAX_INVALID_VARIABLE_DECLARATION,
    SYNTAX_MISSING_PARENTHESES,
    SYNTAX_MISSING_SEMICOLON_ASSIGNMENT,
    SYNTAX_MISSING_SEMICOLON_DECLARATION,
    SYNTAX_MISSING_SEMICOLON_EXPRESSION,
    SYNTAX_MISSING_SEMICOLON_KEYWORD,
    SYNTAX_MULTIPLE_SEMICOLONS,
    SYNTAX_RESERVED_KEYWORD_DECLARATION,
    SYNTAX_RESERVED_KEYWORD_IDENTIFIER,
    SYNTAX_UNCLOSED_DELIMITER,
    SYNTAX_UNMATCHED_CLOSING,
)
from codesense.languages.keywords import (
    ASSIGNMENT_OPERATORS,
    CONTROL_KEYWORDS,
    CONTROL_KEYWORDS_WITHOUT_CONDITION,
    DECLARATION_KEYWORDS,
    EXPRESSION_CONTINUATIONS,
    RESERVED_KEYWORDS,
    STATEMENT_BOUNDARIES,
    STATEMENT_END_KEYWORDS,
    VALID_OPERATOR_PAIRS,
)
from codesense.languages.profiles import HEURISTIC_LANGUAGES
from codesense.lexer import Token, TokenCategory

_DELIMITER_NAMES: Final[dict[str, str]] = {"{": "brace", "[": "bracket", "(": "parenthesis"}
_OPENER_FOR_CLOSER: Final[dict[str, str]] = {"}": "{", "]": "[", ")": "("}
_LITERAL_CATEGORIES: Final[frozenset[TokenCategory]] = frozenset(
    {TokenCategory.IDENTIFIER, TokenCategory.NUMBER, TokenCategory.STRING}
)


class SyntaxRule(Protocol):
    """Token-level syntax rule contract.

    `languages` is None for rules that apply to every language.
    """

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def languages(self) -> frozenset[str] | None: ...

    def run(self, tokens: list[Token]) -> list[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class DelimiterBalanceRule:
    """Tracks `{ [ (` on a stack and reports stray closers and unclosed openers.

    A mismatched closer leaves the stack untouched so scanning can continue.
    """

    code: str = SYNTAX_UNCLOSED_DELIMITER.code
    name: str = "delimiterBalance"
    languages: frozenset[str] | None = None

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        stack: list[Token] = []
        for token in tokens:
            if token.category != TokenCategory.PUNCTUATION:
                continue
            if token.lexeme in _DELIMITER_NAMES:
                stack.append(token)
                continue
            opener = _OPENER_FOR_CLOSER.get(token.lexeme)
            if opener is None:
                continue
            if not stack or stack[-1].lexeme != opener:
                diagnostics.append(
                    make_diagnostic(
                        SYNTAX_UNMATCHED_CLOSING,
                        token.line,
                        SYNTAX_UNMATCHED_CLOSING.format_message(delimiter=_DELIMITER_NAMES[opener]),
                    )
                )
            else:
                stack.pop()

        for open_token in stack:
            diagnostics.append(
                make_diagnostic(
                    SYNTAX_UNCLOSED_DELIMITER,
                    open_token.line,
                    SYNTAX_UNCLOSED_DELIMITER.format_message(delimiter=_DELIMITER_NAMES[open_token.lexeme]),
                )
            )
        return diagnostics


@dataclass(frozen=True, slots=True)
class ReservedKeywordRule:
    """Flags reserved words used as names, unless reached through member access."""

    code: str = SYNTAX_RESERVED_KEYWORD_IDENTIFIER.code
    name: str = "reservedKeyword"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for i, token in enumerate(tokens):
            if token.category == TokenCategory.IDENTIFIER and token.lexeme in RESERVED_KEYWORDS:
                if i > 0 and tokens[i - 1].lexeme == ".":
                    continue
                diagnostics.append(
                    make_diagnostic(
                        SYNTAX_RESERVED_KEYWORD_IDENTIFIER,
                        token.line,
                        SYNTAX_RESERVED_KEYWORD_IDENTIFIER.format_message(name=token.lexeme),
                    )
                )

            if token.lexeme in DECLARATION_KEYWORDS and i + 1 < len(tokens):
                declared = tokens[i + 1]
                if declared.lexeme in RESERVED_KEYWORDS:
                    diagnostics.append(
                        make_diagnostic(
                            SYNTAX_RESERVED_KEYWORD_DECLARATION,
                            declared.line,
                            SYNTAX_RESERVED_KEYWORD_DECLARATION.format_message(name=declared.lexeme),
                        )
                    )
        return diagnostics


@dataclass(frozen=True, slots=True)
class FunctionDeclarationRule:
    code: str = SYNTAX_INVALID_FUNCTION_DECLARATION.code
    name: str = "functionDeclaration"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for i in range(len(tokens) - 1):
            if tokens[i].lexeme == "function" and tokens[i + 1].category != TokenCategory.IDENTIFIER:
                diagnostics.append(make_diagnostic(SYNTAX_INVALID_FUNCTION_DECLARATION, tokens[i].line))
        return diagnostics


@dataclass(frozen=True, slots=True)
class VariableDeclarationRule:
    """`const|let|var` must be followed by an identifier.

    Only evaluated while at least two tokens follow the keyword.
    """

    code: str = SYNTAX_INVALID_VARIABLE_DECLARATION.code
    name: str = "variableDeclaration"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for i in range(len(tokens) - 2):
            if tokens[i].lexeme in DECLARATION_KEYWORDS and tokens[i + 1].category != TokenCategory.IDENTIFIER:
                diagnostics.append(make_diagnostic(SYNTAX_INVALID_VARIABLE_DECLARATION, tokens[i].line))
        return diagnostics


@dataclass(frozen=True, slots=True)
class OperatorCombinationRule:
    """Adjacent operator tokens must form one of the whitelisted pairs."""

    code: str = SYNTAX_INVALID_OPERATOR_COMBINATION.code
    name: str = "operatorCombination"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for current, following in zip(tokens, tokens[1:]):
            if current.category != TokenCategory.OPERATOR or following.category != TokenCategory.OPERATOR:
                continue
            if current.lexeme + following.lexeme not in VALID_OPERATOR_PAIRS:
                diagnostics.append(make_diagnostic(SYNTAX_INVALID_OPERATOR_COMBINATION, current.line))
        return diagnostics


@dataclass(frozen=True, slots=True)
class MultipleSemicolonRule:
    code: str = SYNTAX_MULTIPLE_SEMICOLONS.code
    name: str = "multipleSemicolons"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        return [
            make_diagnostic(SYNTAX_MULTIPLE_SEMICOLONS, current.line)
            for current, following in zip(tokens, tokens[1:])
            if current.lexeme == ";" and following.lexeme == ";"
        ]


@dataclass(frozen=True, slots=True)
class ControlParenthesesRule:
    """Control keywords other than `else`/`default` must be followed by `(`."""

    code: str = SYNTAX_MISSING_PARENTHESES.code
    name: str = "controlParentheses"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for current, following in zip(tokens, tokens[1:]):
            if current.lexeme not in CONTROL_KEYWORDS or current.lexeme in CONTROL_KEYWORDS_WITHOUT_CONDITION:
                continue
            if following.lexeme != "(":
                diagnostics.append(
                    make_diagnostic(
                        SYNTAX_MISSING_PARENTHESES,
                        current.line,
                        SYNTAX_MISSING_PARENTHESES.format_message(name=current.lexeme),
                    )
                )
        return diagnostics


@dataclass(frozen=True, slots=True)
class EmptyLiteralRule:
    """Empty `{}`/`[]` literals directly followed by a malformed member."""

    code: str = SYNTAX_INVALID_OBJECT_PROPERTY.code
    name: str = "emptyLiteral"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        count = len(tokens)
        for i in range(count - 1):
            if tokens[i].lexeme != "{" or tokens[i + 1].lexeme != "}":
                continue
            if i + 2 < count and tokens[i + 2].category == TokenCategory.IDENTIFIER:
                if i + 3 >= count or tokens[i + 3].lexeme != ":":
                    diagnostics.append(make_diagnostic(SYNTAX_INVALID_OBJECT_PROPERTY, tokens[i].line))

        for i in range(count - 1):
            if tokens[i].lexeme != "[" or tokens[i + 1].lexeme != "]":
                continue
            if i + 2 < count and tokens[i + 2].lexeme == ",":
                diagnostics.append(make_diagnostic(SYNTAX_INVALID_ARRAY_ELEMENT, tokens[i].line))
        return diagnostics


@dataclass(frozen=True, slots=True)
class StringLiteralRule:
    code: str = SYNTAX_INVALID_STRING_LITERAL.code
    name: str = "stringLiteral"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        return [
            make_diagnostic(SYNTAX_INVALID_STRING_LITERAL, token.line)
            for token in tokens
            if token.category == TokenCategory.STRING and not token.lexeme.startswith(('"', "'"))
        ]


@dataclass(frozen=True, slots=True)
class NumberLiteralRule:
    code: str = SYNTAX_INVALID_NUMBER_LITERAL.code
    name: str = "numberLiteral"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for token in tokens:
            if token.category != TokenCategory.NUMBER:
                continue
            try:
                float(token.lexeme)
            except ValueError:
                diagnostics.append(make_diagnostic(SYNTAX_INVALID_NUMBER_LITERAL, token.line))
        return diagnostics


@dataclass(frozen=True, slots=True)
class MissingSemicolonRule:
    """Missing-`;` heuristics, evaluated together per token.

    Declarations and assignments scan forward to the next `;`, `{` or `}` and
    complain when the stop token is not `;`. Running off the end of the input
    is not reported.
    """

    code: str = SYNTAX_MISSING_SEMICOLON_EXPRESSION.code
    name: str = "missingSemicolon"
    languages: frozenset[str] | None = HEURISTIC_LANGUAGES

    def run(self, tokens: list[Token]) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        count = len(tokens)
        for i in range(count - 1):
            token = tokens[i]
            following = tokens[i + 1]

            if token.lexeme in DECLARATION_KEYWORDS and i + 2 < count and tokens[i + 2].lexeme != "=":
                if _stops_without_semicolon(tokens, i + 2):
                    diagnostics.append(make_diagnostic(SYNTAX_MISSING_SEMICOLON_DECLARATION, token.line))

            if token.category in _LITERAL_CATEGORIES and following.lexeme not in EXPRESSION_CONTINUATIONS:
                diagnostics.append(make_diagnostic(SYNTAX_MISSING_SEMICOLON_EXPRESSION, token.line))

            if token.lexeme in STATEMENT_END_KEYWORDS and following.lexeme != ";":
                diagnostics.append(
                    make_diagnostic(
                        SYNTAX_MISSING_SEMICOLON_KEYWORD,
                        token.line,
                        SYNTAX_MISSING_SEMICOLON_KEYWORD.format_message(name=token.lexeme),
                    )
                )

            if token.lexeme in ASSIGNMENT_OPERATORS and _stops_without_semicolon(tokens, i + 1):
                diagnostics.append(make_diagnostic(SYNTAX_MISSING_SEMICOLON_ASSIGNMENT, token.line))
        return diagnostics


def _stops_without_semicolon(tokens: list[Token], start: int) -> bool:
    for token in tokens[start:]:
        if token.lexeme in STATEMENT_BOUNDARIES:
            return token.lexeme != ";"
    return False


def default_syntax_rules() -> tuple[SyntaxRule, ...]:
    """Rules in execution order; diagnostics are reported in this order."""
    return (
        DelimiterBalanceRule(),
        ReservedKeywordRule(),
        FunctionDeclarationRule(),
        VariableDeclarationRule(),
        OperatorCombinationRule(),
        MultipleSemicolonRule(),
        ControlParenthesesRule(),
        EmptyLiteralRule(),
        StringLiteralRule(),
        NumberLiteralRule(),
        MissingSemicolonRule(),
    )


def validate_syntax_rules(rules: tuple[SyntaxRule, ...]) -> None:
    for rule in rules:
        if not rule.code.startswith("SYNTAX_"):
            raise ValueError(f"Syntax rule `{rule.name}` has invalid code `{rule.code}`; expected `SYNTAX_` prefix.")
        if rule.languages is not None and not rule.languages:
            raise ValueError(f"Syntax rule `{rule.name}` applies to no language; use None for all languages.")
