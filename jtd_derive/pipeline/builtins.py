"""
Schemas for primitives and standard containers.

These types are never referenceable: their schemas are inlined at every
use site. Container element schemas still go through the registry so
user types nested in containers are referenced as usual.
"""

from __future__ import annotations

import collections.abc
import datetime
import types
import typing
from typing import Any, Literal, get_args, get_origin

from ..errors import ShapeErrorKind, UnsupportedShape
from ..schema import ElementsForm, EmptyForm, EnumForm, Schema, TypeForm, ValuesForm

_PRIMITIVES = {
    bool: "boolean",
    str: "string",
    float: "float64",
    datetime.datetime: "timestamp",
}

_SEQUENCE_ORIGINS = {
    list,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
    collections.abc.MutableSet,
    collections.abc.Iterable,
    collections.abc.Collection,
}

_MAPPING_ORIGINS = {dict, collections.abc.Mapping, collections.abc.MutableMapping}

_UNION_ORIGINS = {typing.Union, types.UnionType}


def _unsupported(tp: Any, kind: ShapeErrorKind, message: str) -> UnsupportedShape:
    return UnsupportedShape(repr(tp), kind, message)


def builtin_schema(tp: Any, registry: Any, int_type: str = "int32") -> Schema:
    """
    Build the schema of a primitive or container type.

    Args:
        tp: The type reference
        registry: Generator used for element/value schemas
        int_type: JSON Typedef type used for ``int``

    Returns:
        Inline schema for ``tp``

    Raises:
        UnsupportedShape: If ``tp`` has no JSON Typedef representation
    """
    if tp is typing.Any or tp is object:
        return Schema(ty=EmptyForm())
    if tp is int:
        return Schema(ty=TypeForm(type=int_type))
    if tp in _PRIMITIVES:
        return Schema(ty=TypeForm(type=_PRIMITIVES[tp]))

    origin = get_origin(tp)
    args = get_args(tp)

    if origin in _UNION_ORIGINS:
        members = [a for a in args if a is not type(None)]
        if len(members) == 1 and len(members) < len(args):
            return registry.sub_schema(members[0]).with_nullable()
        raise _unsupported(tp, ShapeErrorKind.BARE_UNION, "only `T | None` unions are supported")

    if origin is Literal:
        if not all(isinstance(a, str) for a in args):
            raise _unsupported(tp, ShapeErrorKind.NON_STRING_LITERAL, "only string literals are supported")
        return Schema(ty=EnumForm(values=tuple(dict.fromkeys(args))))

    if origin in _SEQUENCE_ORIGINS:
        return Schema(ty=ElementsForm(elements=registry.sub_schema(args[0] if args else typing.Any)))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return Schema(ty=ElementsForm(elements=registry.sub_schema(args[0])))
        raise _unsupported(
            tp,
            ShapeErrorKind.MULTI_FIELD_TUPLE,
            "only variable-length tuples `tuple[T, ...]` are supported",
        )

    if origin in _MAPPING_ORIGINS:
        key_type, value_type = args if args else (str, typing.Any)
        if key_type is not str:
            raise _unsupported(tp, ShapeErrorKind.NON_STRING_KEYS, "mapping keys must be `str`")
        return Schema(ty=ValuesForm(values=registry.sub_schema(value_type)))

    # Bare containers without parameters
    if tp in (list, set, frozenset):
        return Schema(ty=ElementsForm(elements=Schema(ty=EmptyForm())))
    if tp is dict:
        return Schema(ty=ValuesForm(values=Schema(ty=EmptyForm())))

    raise _unsupported(tp, ShapeErrorKind.UNKNOWN_TYPE, "no JSON Typedef mapping for this type")
