"""
Reflection front-end: describe Python classes as type declarations.

Phase 1 of the pipeline: turn a Python type (dataclass, Enum, NewType,
tuple subclass, TaggedUnion) into a ``TypeDef`` without deciding whether
its shape is supported. Classification happens later.
"""

from __future__ import annotations

import dataclasses
import enum
import typing
from typing import Any, Literal, get_args, get_origin, get_type_hints

from ...config import TYPE_CONFIG_ATTR
from .nodes import EnumDef, Fields, FieldStyle, Member, StructDef, TypeDef, Variant


class TaggedUnion:
    """Marker base for unions whose variants are classes nested in the body.

    Example:
        @typedef(tag="kind")
        class Shape(TaggedUnion):
            @dataclass
            class Circle:
                radius: float

            @dataclass
            class Square:
                side: float
    """


# Modules whose classes are never treated as user records
_NON_USER_MODULES = {"builtins", "typing", "collections", "collections.abc", "datetime", "types"}


def is_newtype(tp: Any) -> bool:
    return isinstance(tp, typing.NewType)


def _user_class(tp: Any) -> type | None:
    """Return the user class behind ``tp`` (possibly a parameterised alias)."""
    origin = get_origin(tp) or tp
    if isinstance(origin, type) and origin.__module__ not in _NON_USER_MODULES:
        return origin
    return None


def is_user_type(tp: Any) -> bool:
    """Whether ``tp`` is described by this front-end (and so referenceable)."""
    return isinstance(tp, TypeDef) or is_newtype(tp) or _user_class(tp) is not None


def _substitute(hint: Any, bindings: dict[Any, Any]) -> Any:
    """Replace type variables in ``hint`` with their bound arguments."""
    if isinstance(hint, typing.TypeVar):
        return bindings.get(hint, hint)
    params = getattr(hint, "__parameters__", ())
    if params and get_origin(hint) is not None:
        return hint[tuple(bindings.get(p, p) for p in params)]
    return hint


def split_generic_args(args: tuple[Any, ...]) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
    """Split generic arguments into type arguments and constant (Literal) arguments."""
    type_args = []
    const_args = []
    for arg in args:
        if get_origin(arg) is Literal:
            const_args.append(arg)
        else:
            type_args.append(arg)
    return tuple(type_args), tuple(const_args)


def _describe_members(cls: type, bindings: dict[Any, Any]) -> Fields:
    """Describe the members of a record-like class."""
    tuple_base = _tuple_base(cls)
    if tuple_base is not None:
        return Fields.unnamed(*(_substitute(arg, bindings) for arg in get_args(tuple_base)))

    hints = get_type_hints(cls)
    if dataclasses.is_dataclass(cls):
        names = [f.name for f in dataclasses.fields(cls)]
        return Fields(FieldStyle.NAMED, [Member(n, _substitute(hints[n], bindings)) for n in names])

    own = {k: v for k, v in hints.items() if not k.startswith("_")}
    if own:
        return Fields(FieldStyle.NAMED, [Member(n, _substitute(h, bindings)) for n, h in own.items()])
    return Fields.unit()


def _tuple_base(cls: type) -> Any:
    for base in getattr(cls, "__orig_bases__", ()):
        if get_origin(base) is tuple:
            return base
    return None


def _nested_variants(cls: type) -> list[type]:
    """Classes declared in the body of ``cls``, in declaration order."""
    prefix = f"{cls.__qualname__}."
    return [
        value
        for key, value in vars(cls).items()
        if isinstance(value, type) and value.__qualname__ == prefix + key
    ]


def describe(tp: Any) -> TypeDef:
    """
    Describe a user type as a TypeDef.

    Args:
        tp: A TypeDef (returned as-is), a NewType, or a user class,
            optionally parameterised (``Box[int]``)

    Returns:
        StructDef or EnumDef describing the declared layout

    Raises:
        TypeError: If ``tp`` is not a user type
    """
    if isinstance(tp, TypeDef):
        return tp

    if is_newtype(tp):
        return StructDef(
            name=tp.__name__,
            module=getattr(tp, "__module__", "") or "",
            fields=Fields.unnamed(tp.__supertype__),
        )

    cls = _user_class(tp)
    if cls is None:
        raise TypeError(f"{tp!r} is not a user type")

    args = get_args(tp) if get_origin(tp) is not None else ()
    bindings = dict(zip(getattr(cls, "__parameters__", ()), args))
    type_args, const_args = split_generic_args(args)
    common = {
        "name": cls.__name__,
        "qualname": cls.__qualname__,
        "module": cls.__module__,
        "options": vars(cls).get(TYPE_CONFIG_ATTR),
        "type_args": type_args,
        "const_args": const_args,
    }

    if issubclass(cls, enum.Enum):
        return EnumDef(**common, variants=[Variant(member.name, Fields.unit()) for member in cls])

    if issubclass(cls, TaggedUnion):
        variants = [Variant(v.__name__, _describe_members(v, bindings)) for v in _nested_variants(cls)]
        return EnumDef(**common, variants=variants)

    return StructDef(**common, fields=_describe_members(cls, bindings))
