"""
Shape classifier.

Decides which JSON Typedef construct a declared type maps to, and rejects
layouts JSON Typedef cannot express.
"""

from __future__ import annotations

from ...errors import ShapeErrorKind, UnsupportedShape
from ..type_ast.nodes import EnumDef, Fields, FieldStyle, StructDef, TypeDef
from .shapes import (
    NewtypeShape,
    RecordShape,
    StructVariantUnionShape,
    TypeShape,
    UnitVariantUnionShape,
)


def _named_members(fields: Fields) -> list[tuple[str, object]]:
    return [(m.name, m.type) for m in fields.members]


class ShapeClassifier:
    """Classifies records and unions."""

    def classify(self, type_def: TypeDef) -> TypeShape:
        """
        Classify a declared type.

        Args:
            type_def: The declared record or union

        Returns:
            The matching shape

        Raises:
            UnsupportedShape: If the layout has no JSON Typedef representation
        """
        if isinstance(type_def, EnumDef):
            return self.classify_union(type_def)
        if isinstance(type_def, StructDef):
            return self.classify_record(type_def)
        raise TypeError(f"Cannot classify {type_def!r}")

    def classify_record(self, struct: StructDef) -> TypeShape:
        name = struct.name
        fields = struct.fields

        if fields.style == FieldStyle.NAMED:
            if not fields.members:
                raise UnsupportedShape(
                    name,
                    ShapeErrorKind.EMPTY_NAMED_RECORD,
                    "records with named fields must have at least one field",
                )
            return RecordShape(type_name=name, fields=_named_members(fields))

        if fields.style == FieldStyle.UNNAMED:
            if len(fields.members) == 1:
                return NewtypeShape(type_name=name, inner=fields.members[0].type)
            raise UnsupportedShape(
                name,
                ShapeErrorKind.MULTI_FIELD_TUPLE,
                f"tuple records are only supported with exactly one member, found {len(fields.members)}",
            )

        raise UnsupportedShape(name, ShapeErrorKind.UNIT_RECORD, "unit records are not supported")

    def classify_union(self, union: EnumDef) -> TypeShape:
        name = union.name
        first_unit = None
        first_struct = None

        for variant in union.variants:
            style = variant.fields.style
            if style == FieldStyle.UNNAMED:
                raise UnsupportedShape(
                    name,
                    ShapeErrorKind.TUPLE_VARIANT,
                    f"tuple variants are not supported (variant `{variant.name}`)",
                    variant=variant.name,
                )
            if style == FieldStyle.UNIT:
                first_unit = first_unit or variant
            else:
                first_struct = first_struct or variant

        if first_unit is None and first_struct is None:
            raise UnsupportedShape(name, ShapeErrorKind.EMPTY_UNION, "unions must have at least one variant")

        if first_unit is not None and first_struct is not None:
            raise UnsupportedShape(
                name,
                ShapeErrorKind.MIXED_VARIANTS,
                "unions with a mix of unit and struct variants are not supported",
                notes=[
                    (first_unit.name, f"here's a unit variant of `{name}`"),
                    (first_struct.name, f"here's a struct variant of `{name}`"),
                ],
                unit_variant=first_unit.name,
                struct_variant=first_struct.name,
            )

        if first_struct is None:
            return UnitVariantUnionShape(type_name=name, variants=[v.name for v in union.variants])

        return StructVariantUnionShape(
            type_name=name,
            variants=[(v.name, _named_members(v.fields)) for v in union.variants],
        )
