"""
Derivation errors.

Every failure is local to the type that caused it: deriving that type's
schema is aborted and the error carries enough context (type name, and
for some kinds the offending variant) to point the user at the problem.
"""

from __future__ import annotations

from enum import Enum


class ShapeErrorKind(str, Enum):
    """Why a type's structure cannot be expressed in JSON Typedef."""

    EMPTY_NAMED_RECORD = "empty_named_record"
    UNIT_RECORD = "unit_record"
    MULTI_FIELD_TUPLE = "multi_field_tuple"
    TUPLE_VARIANT = "tuple_variant"
    MIXED_VARIANTS = "mixed_variants"
    EMPTY_UNION = "empty_union"
    NON_STRING_KEYS = "non_string_keys"
    BARE_UNION = "bare_union"
    NON_STRING_LITERAL = "non_string_literal"
    UNKNOWN_TYPE = "unknown_type"


class DeriveError(Exception):
    """Base class for all schema derivation failures.

    Attributes:
        type_name: Name of the type whose derivation failed
        message: Primary diagnostic
        notes: Secondary diagnostics as (label, message) pairs, e.g. the
            variants involved in a mixed-variant union
    """

    def __init__(self, type_name: str, message: str, notes: list[tuple[str, str]] | None = None):
        self.type_name = type_name
        self.message = message
        self.notes = list(notes or [])
        super().__init__(message)

    def __str__(self) -> str:
        lines = [f"{self.type_name}: {self.message}"]
        for label, note in self.notes:
            lines.append(f"  note [{label}]: {note}")
        return "\n".join(lines)


class UnsupportedShape(DeriveError):
    """The type's structure has no JSON Typedef representation."""

    def __init__(
        self,
        type_name: str,
        kind: ShapeErrorKind,
        message: str,
        notes: list[tuple[str, str]] | None = None,
        variant: str | None = None,
        unit_variant: str | None = None,
        struct_variant: str | None = None,
    ):
        super().__init__(type_name, message, notes)
        self.kind = kind
        self.variant = variant
        self.unit_variant = unit_variant
        self.struct_variant = struct_variant


class MissingDiscriminator(DeriveError):
    """A union with struct variants was asked for without an internal tag."""


class ConfigError(DeriveError):
    """Malformed per-type configuration."""

    def __init__(self, type_name: str, message: str, key: str | None = None):
        super().__init__(type_name, message)
        self.key = key


class NameCollision(DeriveError):
    """Two distinct types render to the same definition name."""

    def __init__(self, definition_id: str, first: str, second: str):
        super().__init__(
            definition_id,
            f"definition name `{definition_id}` is used by both `{first}` and `{second}`",
        )
        self.definition_id = definition_id
        self.first = first
        self.second = second
