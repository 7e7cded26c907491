"""Semantic rules and the state they share during one pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Protocol

from codesense.diagnostics import Diagnostic, make_diagnostic
from codesense.diagnostics.codes import (
    SEMANTIC_CONST_REASSIGNMENT,
    SEMANTIC_CONSTANT_LOOP_CONDITION,
    SEMANTIC_DIVISION_BY_ZERO,
    SEMANTIC_FUNCTION_REDECLARED,
    SEMANTIC_INVALID_ASSIGNMENT_TARGET,
    SEMANTIC_POSSIBLE_NULL_ACCESS,
    SEMANTIC_UNDECLARED_VARIABLE,
    SEMANTIC_UNDEFINED_FUNCTION,
    SEMANTIC_UNREACHABLE_CODE,
    SEMANTIC_VARIABLE_REDECLARED,
)
from codesense.languages.keywords import DECLARATION_KEYWORDS, KNOWN_GLOBALS, STATEMENT_END_KEYWORDS
from codesense.lexer import Token, TokenCategory

_DECLARATION_PREFIXES: Final[frozenset[str]] = DECLARATION_KEYWORDS | {"function"}
_UNREACHABLE_SCAN_STOPS: Final[frozenset[str]] = frozenset({";", "}"})
_BOOLEAN_LITERALS: Final[frozenset[str]] = frozenset({"true", "false"})


@dataclass(slots=True)
class SemanticContext:
    """State carried across a single left-to-right pass.

    `declared_variables` and `declared_functions` only grow; they do not follow
    block structure. `scopes` is pushed on `{` and popped on `}`, and the
    outermost scope is never popped.
    """

    declared_variables: set[str] = field(default_factory=set)
    declared_functions: set[str] = field(default_factory=set)
    scopes: list[set[str]] = field(default_factory=lambda: [set()])
    current_scope: set[str] = field(default_factory=set)

    def enter(self, token: Token) -> None:
        """Record the scope in effect for `token`, then apply its block effect."""
        self.current_scope = self.scopes[-1]
        if token.lexeme == "{":
            self.scopes.append(set())
        elif token.lexeme == "}" and len(self.scopes) > 1:
            self.scopes.pop()


class SemanticRule(Protocol):
    """Per-token semantic rule contract."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]: ...


def _next_is(tokens: list[Token], index: int, lexeme: str) -> bool:
    return index + 1 < len(tokens) and tokens[index + 1].lexeme == lexeme


@dataclass(frozen=True, slots=True)
class FunctionRedeclarationRule:
    code: str = SEMANTIC_FUNCTION_REDECLARED.code
    name: str = "functionRedeclaration"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.lexeme != "function" or index + 1 >= len(tokens):
            return []
        declared = tokens[index + 1]
        if declared.category != TokenCategory.IDENTIFIER:
            return []
        diagnostics: list[Diagnostic] = []
        if declared.lexeme in context.declared_functions:
            diagnostics.append(
                make_diagnostic(
                    SEMANTIC_FUNCTION_REDECLARED,
                    token.line,
                    SEMANTIC_FUNCTION_REDECLARED.format_message(name=declared.lexeme),
                )
            )
        context.declared_functions.add(declared.lexeme)
        return diagnostics


@dataclass(frozen=True, slots=True)
class VariableRedeclarationRule:
    """Redeclaration is checked against the current block scope only."""

    code: str = SEMANTIC_VARIABLE_REDECLARED.code
    name: str = "variableRedeclaration"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.lexeme not in DECLARATION_KEYWORDS or index + 1 >= len(tokens):
            return []
        declared = tokens[index + 1]
        if declared.category != TokenCategory.IDENTIFIER:
            return []
        diagnostics: list[Diagnostic] = []
        if declared.lexeme in context.current_scope:
            diagnostics.append(
                make_diagnostic(
                    SEMANTIC_VARIABLE_REDECLARED,
                    token.line,
                    SEMANTIC_VARIABLE_REDECLARED.format_message(name=declared.lexeme),
                )
            )
        context.current_scope.add(declared.lexeme)
        context.declared_variables.add(declared.lexeme)
        return diagnostics


@dataclass(frozen=True, slots=True)
class UndeclaredVariableRule:
    """Identifiers that were never declared. Calls are left to UndefinedFunctionRule."""

    code: str = SEMANTIC_UNDECLARED_VARIABLE.code
    name: str = "undeclaredVariable"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.category != TokenCategory.IDENTIFIER or index == 0:
            return []
        if tokens[index - 1].lexeme in _DECLARATION_PREFIXES:
            return []
        name = token.lexeme
        if name in context.declared_variables or name in context.declared_functions or name in KNOWN_GLOBALS:
            return []
        if _next_is(tokens, index, "("):
            return []
        return [
            make_diagnostic(
                SEMANTIC_UNDECLARED_VARIABLE,
                token.line,
                SEMANTIC_UNDECLARED_VARIABLE.format_message(name=name),
            )
        ]


@dataclass(frozen=True, slots=True)
class UndefinedFunctionRule:
    code: str = SEMANTIC_UNDEFINED_FUNCTION.code
    name: str = "undefinedFunction"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.category != TokenCategory.IDENTIFIER or not _next_is(tokens, index, "("):
            return []
        if token.lexeme in context.declared_functions or token.lexeme in KNOWN_GLOBALS:
            return []
        return [
            make_diagnostic(
                SEMANTIC_UNDEFINED_FUNCTION,
                token.line,
                SEMANTIC_UNDEFINED_FUNCTION.format_message(name=token.lexeme),
            )
        ]


@dataclass(frozen=True, slots=True)
class AssignmentRule:
    """Assignments to `const` bindings and to non-assignable left-hand sides.

    The constness test looks backward for the nearest keyword token, so the
    declaring `const x = ...` statement is itself reported.
    """

    code: str = SEMANTIC_CONST_REASSIGNMENT.code
    name: str = "assignment"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.lexeme != "=" or index == 0 or index + 1 >= len(tokens):
            return []
        target = tokens[index - 1]
        diagnostics: list[Diagnostic] = []
        if target.category == TokenCategory.IDENTIFIER and _nearest_keyword_before(tokens, index - 2) == "const":
            diagnostics.append(
                make_diagnostic(
                    SEMANTIC_CONST_REASSIGNMENT,
                    token.line,
                    SEMANTIC_CONST_REASSIGNMENT.format_message(name=target.lexeme),
                )
            )
        if target.category not in (TokenCategory.IDENTIFIER, TokenCategory.OPERATOR):
            diagnostics.append(make_diagnostic(SEMANTIC_INVALID_ASSIGNMENT_TARGET, token.line))
        return diagnostics


def _nearest_keyword_before(tokens: list[Token], start: int) -> str | None:
    for position in range(start, -1, -1):
        if tokens[position].category == TokenCategory.KEYWORD:
            return tokens[position].lexeme
    return None


@dataclass(frozen=True, slots=True)
class MemberAccessRule:
    """Member access on a receiver that was never declared as a variable."""

    code: str = SEMANTIC_POSSIBLE_NULL_ACCESS.code
    name: str = "memberAccess"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.lexeme != "." or index == 0 or index + 1 >= len(tokens):
            return []
        receiver = tokens[index - 1]
        if receiver.category != TokenCategory.IDENTIFIER or receiver.lexeme in context.declared_variables:
            return []
        return [
            make_diagnostic(
                SEMANTIC_POSSIBLE_NULL_ACCESS,
                token.line,
                SEMANTIC_POSSIBLE_NULL_ACCESS.format_message(name=receiver.lexeme),
            )
        ]


@dataclass(frozen=True, slots=True)
class DivisionByZeroRule:
    code: str = SEMANTIC_DIVISION_BY_ZERO.code
    name: str = "divisionByZero"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        if tokens[index].lexeme != "/" or index + 1 >= len(tokens):
            return []
        divisor = tokens[index + 1]
        if divisor.category != TokenCategory.NUMBER or float(divisor.lexeme) != 0:
            return []
        return [make_diagnostic(SEMANTIC_DIVISION_BY_ZERO, tokens[index].line)]


@dataclass(frozen=True, slots=True)
class UnreachableCodeRule:
    """Code after `return|throw|break|continue` within the same statement.

    Tokens on the keyword's own line are its operand. The first token on a
    later line reached before `;` or `}` is reported.
    """

    code: str = SEMANTIC_UNREACHABLE_CODE.code
    name: str = "unreachableCode"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.lexeme not in STATEMENT_END_KEYWORDS:
            return []
        for following in tokens[index + 1 :]:
            if following.lexeme in _UNREACHABLE_SCAN_STOPS:
                break
            if following.line > token.line:
                return [make_diagnostic(SEMANTIC_UNREACHABLE_CODE, following.line)]
        return []


@dataclass(frozen=True, slots=True)
class ConstantLoopConditionRule:
    code: str = SEMANTIC_CONSTANT_LOOP_CONDITION.code
    name: str = "constantLoopCondition"

    def visit(self, tokens: list[Token], index: int, context: SemanticContext) -> list[Diagnostic]:
        token = tokens[index]
        if token.lexeme != "while" or index + 2 >= len(tokens):
            return []
        if tokens[index + 2].lexeme not in _BOOLEAN_LITERALS:
            return []
        return [make_diagnostic(SEMANTIC_CONSTANT_LOOP_CONDITION, token.line)]


def default_semantic_rules() -> tuple[SemanticRule, ...]:
    """Rules in per-token evaluation order. Declaration rules come first so later rules see new names."""
    return (
        FunctionRedeclarationRule(),
        VariableRedeclarationRule(),
        UndeclaredVariableRule(),
        UndefinedFunctionRule(),
        AssignmentRule(),
        MemberAccessRule(),
        DivisionByZeroRule(),
        UnreachableCodeRule(),
        ConstantLoopConditionRule(),
    )


def validate_semantic_rules(rules: tuple[SemanticRule, ...]) -> None:
    for rule in rules:
        if not rule.code.startswith("SEMANTIC_"):
            raise ValueError(
                f"Semantic rule `{rule.name}` has invalid code `{rule.code}`; expected `SEMANTIC_` prefix."
            )
