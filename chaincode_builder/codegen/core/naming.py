"""
Naming utilities for chaincode generation.

Derives conventional identifiers from the asset type name and infers the
role of schema fields (identifying key, owner) from their names. This is
the only place role inference lives; emitters ask these helpers instead of
inspecting field names themselves.
"""

import re
from typing import Iterable, Optional, Set

from .schema import Field

KEY_FIELD_NAME = "id"
OWNER_FIELD_NAME = "owner"

# Used when the schema declares no identifying field
FALLBACK_KEY_PARAM = "id"
FALLBACK_KEY_MEMBER = "ID"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _has_role(field: Field, role: str) -> bool:
    return field.name.lower() == role or field.serialized_name.lower() == role


def is_key_field(field: Field) -> bool:
    """True if the field is named or tagged ``id`` (case-insensitive)."""
    return _has_role(field, KEY_FIELD_NAME)


def is_owner_field(field: Field) -> bool:
    """True if the field is named or tagged ``owner`` (case-insensitive)."""
    return _has_role(field, OWNER_FIELD_NAME)


def var_name(type_name: str) -> str:
    """Lower-camel variable name for a type: ``CarPart`` -> ``carPart``."""
    return type_name[:1].lower() + type_name[1:]


def plural_collection_name(type_name: str) -> str:
    """Variable name for a slice of records: ``Car`` -> ``cars``."""
    return var_name(type_name) + "s"


def lowercased_noun(type_name: str) -> str:
    """Noun used in comments and error strings."""
    return type_name.lower()


def param_name(field: Field) -> str:
    """Parameter name a field takes in generated function signatures."""
    return field.serialized_name.lower()


def find_key_field(fields: Iterable[Field]) -> Optional[Field]:
    """
    Locate the identifying field of a schema.

    Args:
        fields: Schema fields in declaration order

    Returns:
        First field named or tagged ``id``, or None
    """
    for field in fields:
        if is_key_field(field):
            return field
    return None


def key_param_name(fields: Iterable[Field]) -> str:
    """Name of the key parameter in generated signatures."""
    key_field = find_key_field(fields)
    return param_name(key_field) if key_field else FALLBACK_KEY_PARAM


def key_member_name(fields: Iterable[Field]) -> str:
    """Struct member holding the key of a record value."""
    key_field = find_key_field(fields)
    return key_field.name if key_field else FALLBACK_KEY_MEMBER


class NameChecker:
    """Checks generated identifiers against a language's reserved names."""

    def __init__(self, reserved_words: Set[str] = None, builtin_names: Set[str] = None):
        """
        Initialize name checker.

        Args:
            reserved_words: Set of language reserved words
            builtin_names: Set of predeclared names that might be shadowed
        """
        self.reserved_words = reserved_words or set()
        self.builtin_names = builtin_names or set()

    def problem(self, name: str) -> Optional[str]:
        """
        Describe why a name is unusable as an identifier.

        Returns:
            Short reason, or None if the name is fine
        """
        if not name:
            return "is empty"
        if not _IDENTIFIER_RE.match(name):
            return "is not a valid identifier"
        if name in self.reserved_words:
            return "is a reserved word"
        if name in self.builtin_names:
            return "shadows a builtin"
        return None

    def is_safe(self, name: str) -> bool:
        return self.problem(name) is None
