import collections.abc
import typing
from datetime import datetime
from typing import Any, Literal, Optional

import pytest

from jtd_derive import DeriveConfig, Generator, ShapeErrorKind, UnsupportedShape


def schema_of(tp, **config):
    return Generator(DeriveConfig(**config)).sub_schema(tp).to_dict()


@pytest.mark.parametrize(
    "tp, expected",
    [
        (bool, {"type": "boolean"}),
        (str, {"type": "string"}),
        (int, {"type": "int32"}),
        (float, {"type": "float64"}),
        (datetime, {"type": "timestamp"}),
        (Any, {}),
        (object, {}),
        (list[int], {"elements": {"type": "int32"}}),
        (set[str], {"elements": {"type": "string"}}),
        (frozenset[str], {"elements": {"type": "string"}}),
        (tuple[float, ...], {"elements": {"type": "float64"}}),
        (collections.abc.Sequence[bool], {"elements": {"type": "boolean"}}),
        (typing.List[int], {"elements": {"type": "int32"}}),
        (list, {"elements": {}}),
        (dict[str, int], {"values": {"type": "int32"}}),
        (collections.abc.Mapping[str, bool], {"values": {"type": "boolean"}}),
        (dict, {"values": {}}),
        (Optional[int], {"type": "int32", "nullable": True}),
        (int | None, {"type": "int32", "nullable": True}),
        (Optional[Optional[str]], {"type": "string", "nullable": True}),
        (list[int | None], {"elements": {"type": "int32", "nullable": True}}),
        (dict[str, list[str]], {"values": {"elements": {"type": "string"}}}),
        (Literal["a", "b", "a"], {"enum": ["a", "b"]}),
    ],
)
def test_builtin_schema(tp, expected):
    assert schema_of(tp) == expected


@pytest.mark.parametrize("int_type", ["int8", "uint8", "int16", "uint16", "int32", "uint32"])
def test_int_type(int_type):
    assert schema_of(int, int_type=int_type) == {"type": int_type}


@pytest.mark.parametrize(
    "tp, kind",
    [
        (dict[int, str], ShapeErrorKind.NON_STRING_KEYS),
        (int | str, ShapeErrorKind.BARE_UNION),
        (Optional[int | str], ShapeErrorKind.BARE_UNION),
        (Literal["a", 1], ShapeErrorKind.NON_STRING_LITERAL),
        (tuple[int, str], ShapeErrorKind.MULTI_FIELD_TUPLE),
        (complex, ShapeErrorKind.UNKNOWN_TYPE),
        (bytes, ShapeErrorKind.UNKNOWN_TYPE),
    ],
)
def test_unsupported(tp, kind):
    with pytest.raises(UnsupportedShape) as exc:
        schema_of(tp)
    assert exc.value.kind == kind


def test_builtins_are_never_definitions():
    gen = Generator()
    gen.sub_schema(list[dict[str, int]])
    assert gen.definitions == {}
