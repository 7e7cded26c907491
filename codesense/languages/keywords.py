"""Keyword tables shared by the syntax and semantic heuristics."""

from typing import Final

# Reserved words across JavaScript, TypeScript and Java.
RESERVED_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        # JavaScript / TypeScript
        "break", "case", "catch", "class", "const", "continue", "debugger", "default", "delete",
        "do", "else", "enum", "export", "extends", "false", "finally", "for", "function", "if",
        "import", "in", "instanceof", "new", "null", "return", "super", "switch", "this", "throw",
        "true", "try", "typeof", "var", "void", "while", "with", "yield",
        # TypeScript
        "interface", "type", "namespace", "module", "declare", "abstract", "implements",
        # Java
        "assert", "boolean", "byte", "char", "double", "final", "float", "int", "long",
        "native", "package", "private", "protected", "public", "short", "static", "strictfp",
        "synchronized", "throws", "transient", "volatile",
    }
)

DECLARATION_KEYWORDS: Final[frozenset[str]] = frozenset({"const", "let", "var"})

# Keywords that end a statement and must be followed by `;`.
STATEMENT_END_KEYWORDS: Final[frozenset[str]] = frozenset({"break", "continue", "return", "throw"})

CONTROL_KEYWORDS: Final[frozenset[str]] = frozenset(
    {"if", "else", "for", "while", "do", "switch", "case", "default", "try", "catch", "finally"}
)

# Control keywords that legitimately take no parenthesised condition.
CONTROL_KEYWORDS_WITHOUT_CONDITION: Final[frozenset[str]] = frozenset({"else", "default"})

VALID_OPERATOR_PAIRS: Final[frozenset[str]] = frozenset(
    {"++", "--", "==", "!=", "<=", ">=", "&&", "||", "+=", "-=", "*=", "/=", "%="}
)

ASSIGNMENT_OPERATORS: Final[frozenset[str]] = frozenset({"=", "+=", "-=", "*=", "/=", "%="})

# Tokens allowed right after an identifier/literal without implying a missing `;`.
EXPRESSION_CONTINUATIONS: Final[frozenset[str]] = frozenset(
    {
        ";", ".", "(", "[", "++", "--", "=", "+=", "-=", "*=", "/=", "%=",
        "&&", "||", "?", ":", ",", ")", "}",
    }
)

# Tokens that end a forward scan for a statement terminator.
STATEMENT_BOUNDARIES: Final[frozenset[str]] = frozenset({";", "{", "}"})

# Host globals exempt from the undeclared-name checks.
KNOWN_GLOBALS: Final[frozenset[str]] = frozenset(
    {"console", "document", "window", "Math", "Array", "Object", "String"}
)
