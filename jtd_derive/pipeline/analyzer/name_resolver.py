"""
Name resolver computing the identity of a type.

Names are pure values derived fresh for every type: the bare name, the
fully qualified name and, recursively, the Names of every generic type
argument plus the rendering of every generic constant argument.
"""

from __future__ import annotations

import types
import typing
from typing import Any, Literal, get_args, get_origin

from ...config import parse_type_config
from ...schema import Names
from ..type_ast.introspect import split_generic_args, describe, is_user_type
from ..type_ast.nodes import TypeDef

# Display names for special typing forms
_SPECIAL_FORMS = {
    typing.Union: "Union",
    types.UnionType: "Union",
    Literal: "Literal",
}


def render_const(arg: Any) -> str:
    """Render a ``Literal[...]`` generic argument."""
    return " | ".join(str(value) for value in get_args(arg))


class NameResolver:
    """Computes Names for user types and builtins."""

    def resolve(self, tp: Any) -> Names:
        """
        Resolve the Names of a type.

        Args:
            tp: Any type reference accepted by the generator

        Returns:
            Names for ``tp``
        """
        if tp is None or tp is type(None):
            return Names(short="None", long="builtins.None")
        if is_user_type(tp):
            return self._resolve_declared(describe(tp))
        return self._resolve_builtin(tp)

    def _resolve_declared(self, type_def: TypeDef) -> Names:
        type_config = parse_type_config(type_def.name, type_def.options)
        qualname = type_def.qualname or type_def.name
        return Names(
            short=type_config.rename or type_def.name,
            long=f"{type_def.module}.{qualname}" if type_def.module else qualname,
            type_params=tuple(self.resolve(arg) for arg in type_def.type_args),
            const_params=tuple(self._render_const_arg(arg) for arg in type_def.const_args),
        )

    def _render_const_arg(self, arg: Any) -> str:
        if get_origin(arg) is Literal:
            return render_const(arg)
        return str(arg)

    def _resolve_builtin(self, tp: Any) -> Names:
        origin = get_origin(tp)
        if origin is None:
            return Names(short=self._bare_name(tp), long=self._qualified_name(tp))

        if origin is Literal:
            return Names(short="Literal", long="typing.Literal", const_params=(render_const(tp),))

        args = tuple(a for a in get_args(tp) if a is not Ellipsis)
        type_args, const_args = split_generic_args(args)
        return Names(
            short=self._bare_name(origin),
            long=self._qualified_name(origin),
            type_params=tuple(self.resolve(a) for a in type_args),
            const_params=tuple(render_const(a) for a in const_args),
        )

    def _bare_name(self, tp: Any) -> str:
        if tp in _SPECIAL_FORMS:
            return _SPECIAL_FORMS[tp]
        return getattr(tp, "__name__", None) or getattr(tp, "_name", None) or repr(tp)

    def _qualified_name(self, tp: Any) -> str:
        if tp in _SPECIAL_FORMS:
            return f"typing.{_SPECIAL_FORMS[tp]}"
        module = getattr(tp, "__module__", "builtins")
        qualname = getattr(tp, "__qualname__", None) or self._bare_name(tp)
        return f"{module}.{qualname}"


def resolve_names(tp: Any) -> Names:
    """Convenience wrapper around ``NameResolver().resolve``."""
    return NameResolver().resolve(tp)


def short_name_of(tp: Any) -> str:
    """Best-effort display name for diagnostics."""
    if isinstance(tp, TypeDef):
        return tp.name
    return NameResolver()._bare_name(get_origin(tp) or tp)
