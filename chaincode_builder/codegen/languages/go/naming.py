"""
Go-specific naming checks.

Go reserved words and predeclared names that generated parameters and
variables must not collide with.
"""

from ...core.naming import NameChecker


# Go reserved words
GO_RESERVED_WORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# Predeclared names, plus the identifiers every generated file already uses
GO_PREDECLARED_NAMES = {
    "bool",
    "error",
    "float64",
    "int",
    "string",
    "append",
    "len",
    "make",
    "new",
    "nil",
    "true",
    "false",
    "ctx",
    "err",
    "exists",
    "fmt",
    "json",
    "contractapi",
}


def create_go_name_checker() -> NameChecker:
    """Create a name checker configured for Go."""
    return NameChecker(GO_RESERVED_WORDS, GO_PREDECLARED_NAMES)


def is_exported(name: str) -> bool:
    """Go exports (and encoding/json serializes) only upper-case names."""
    return bool(name) and name[0].isupper()
