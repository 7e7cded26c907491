"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def format_message(self, **fields: object) -> str:
        """Fill the `{placeholders}` of the message template."""
        return self.message.format(**fields)


# -------------------------
# Syntax
# -------------------------

SYNTAX_UNMATCHED_CLOSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNMATCHED_CLOSING",
    message="Unmatched closing {delimiter}",
    hint="Remove the extra delimiter or add the missing opener.",
    category="syntax",
)

SYNTAX_UNCLOSED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_UNCLOSED_DELIMITER",
    message="Unclosed {delimiter}",
    hint="Close the delimiter before the end of the input.",
    category="syntax",
)

SYNTAX_RESERVED_KEYWORD_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_RESERVED_KEYWORD_IDENTIFIER",
    message="'{name}' is a reserved keyword and cannot be used as a variable name",
    category="syntax",
)

SYNTAX_RESERVED_KEYWORD_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_RESERVED_KEYWORD_DECLARATION",
    message="Cannot declare variable with reserved keyword '{name}'",
    category="syntax",
)

SYNTAX_INVALID_FUNCTION_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_FUNCTION_DECLARATION",
    message="Invalid function declaration",
    hint="Name the function right after `function`.",
    category="syntax",
)

SYNTAX_INVALID_VARIABLE_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_VARIABLE_DECLARATION",
    message="Invalid variable declaration",
    hint="Follow `const`, `let` or `var` with an identifier.",
    category="syntax",
)

SYNTAX_INVALID_OPERATOR_COMBINATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_OPERATOR_COMBINATION",
    message="Invalid operator combination",
    category="syntax",
)

SYNTAX_MULTIPLE_SEMICOLONS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MULTIPLE_SEMICOLONS",
    message="Multiple semicolons",
    category="syntax",
)

SYNTAX_MISSING_PARENTHESES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_PARENTHESES",
    message="Missing parentheses after '{name}'",
    category="syntax",
)

SYNTAX_INVALID_OBJECT_PROPERTY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_OBJECT_PROPERTY",
    message="Invalid object property syntax",
    category="syntax",
)

SYNTAX_INVALID_ARRAY_ELEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_ARRAY_ELEMENT",
    message="Invalid array element syntax",
    category="syntax",
)

SYNTAX_INVALID_STRING_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_STRING_LITERAL",
    message="Invalid string literal",
    category="syntax",
)

SYNTAX_INVALID_NUMBER_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_INVALID_NUMBER_LITERAL",
    message="Invalid number literal",
    category="syntax",
)

SYNTAX_MISSING_SEMICOLON_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_SEMICOLON_DECLARATION",
    message="Missing semicolon after variable declaration",
    category="syntax",
)

SYNTAX_MISSING_SEMICOLON_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_SEMICOLON_EXPRESSION",
    message="Missing semicolon after expression",
    category="syntax",
)

SYNTAX_MISSING_SEMICOLON_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_SEMICOLON_KEYWORD",
    message="Missing semicolon after '{name}'",
    category="syntax",
)

SYNTAX_MISSING_SEMICOLON_ASSIGNMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SYNTAX_MISSING_SEMICOLON_ASSIGNMENT",
    message="Missing semicolon after assignment",
    category="syntax",
)

# -------------------------
# Semantic
# -------------------------

SEMANTIC_FUNCTION_REDECLARED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_FUNCTION_REDECLARED",
    message="Function '{name}' is already declared",
    hint="Rename one of the functions or remove the duplicate.",
    category="semantic",
)

SEMANTIC_VARIABLE_REDECLARED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_VARIABLE_REDECLARED",
    message="Variable '{name}' is already declared in this scope",
    category="semantic",
)

SEMANTIC_UNDECLARED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_UNDECLARED_VARIABLE",
    message="Use of undeclared variable '{name}'",
    category="semantic",
)

SEMANTIC_UNDEFINED_FUNCTION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_UNDEFINED_FUNCTION",
    message="Function '{name}' is not defined",
    category="semantic",
)

SEMANTIC_CONST_REASSIGNMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_CONST_REASSIGNMENT",
    message="Cannot assign to constant '{name}'",
    hint="Declare the binding with `let` if it has to change.",
    category="semantic",
)

SEMANTIC_INVALID_ASSIGNMENT_TARGET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_INVALID_ASSIGNMENT_TARGET",
    message="Invalid assignment target",
    category="semantic",
)

SEMANTIC_POSSIBLE_NULL_ACCESS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_POSSIBLE_NULL_ACCESS",
    message="Potential null/undefined access on '{name}'",
    category="semantic",
)

SEMANTIC_DIVISION_BY_ZERO: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_DIVISION_BY_ZERO",
    message="Division by zero",
    category="semantic",
)

SEMANTIC_UNREACHABLE_CODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_UNREACHABLE_CODE",
    message="Unreachable code after control flow statement",
    hint="Terminate the statement with `;` or remove the dead code.",
    category="semantic",
)

SEMANTIC_CONSTANT_LOOP_CONDITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SEMANTIC_CONSTANT_LOOP_CONDITION",
    message="Potential infinite loop with constant condition",
    category="semantic",
)
