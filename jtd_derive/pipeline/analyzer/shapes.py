"""
Classified shapes.

A shape is the outcome of classifying a declared type: it says which
JSON Typedef construct applies. Member types are kept as unresolved type
references; the synthesizer asks the generator for their schemas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class TypeShape:
    """Base class for classified shapes."""

    # Name of the classified type (for diagnostics)
    type_name: str = ""


@dataclass
class RecordShape(TypeShape):
    """A record with at least one named field."""

    fields: list[tuple[str, Any]] = field(default_factory=list)


@dataclass
class NewtypeShape(TypeShape):
    """A record with exactly one unnamed member, encoded as that member."""

    inner: Any = None


@dataclass
class UnitVariantUnionShape(TypeShape):
    """A union whose variants carry no data."""

    variants: list[str] = field(default_factory=list)


@dataclass
class StructVariantUnionShape(TypeShape):
    """A union whose variants all carry named fields."""

    variants: list[tuple[str, list[tuple[str, Any]]]] = field(default_factory=list)
