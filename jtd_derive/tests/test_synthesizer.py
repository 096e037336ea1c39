from unittest import TestCase

from jtd_derive.errors import ConfigError, MissingDiscriminator
from jtd_derive.pipeline.analyzer import (
    EXTERNAL,
    Internal,
    NewtypeShape,
    RecordShape,
    StructVariantUnionShape,
    UnitVariantUnionShape,
)
from jtd_derive.pipeline.synthesizer import SchemaSynthesizer
from jtd_derive.schema import DiscriminatorForm, EnumForm, PropertiesForm, Schema, TypeForm


class FakeRegistry:
    """Maps each member type to a primitive schema and records requests."""

    def __init__(self):
        self.requested = []

    def sub_schema(self, tp):
        self.requested.append(tp)
        return Schema(ty=TypeForm(type={int: "int32", float: "float64", str: "string"}[tp]))


class TestSchemaSynthesizer(TestCase):
    def setUp(self):
        self.registry = FakeRegistry()
        self.synthesizer = SchemaSynthesizer(self.registry)

    def test_record(self):
        schema = self.synthesizer.synthesize(RecordShape("P", [("x", float), ("name", str)]), EXTERNAL)
        self.assertIsInstance(schema.ty, PropertiesForm)
        self.assertEqual(list(schema.ty.properties), ["x", "name"])
        self.assertEqual(schema.ty.optional_properties, {})
        self.assertTrue(schema.ty.additional_properties)
        self.assertEqual(self.registry.requested, [float, str])

    def test_newtype_is_transparent(self):
        schema = self.synthesizer.synthesize(NewtypeShape("Id", str), EXTERNAL)
        self.assertEqual(schema, self.registry.sub_schema(str))

    def test_unit_union_external(self):
        schema = self.synthesizer.synthesize(UnitVariantUnionShape("C", ["A", "B"]), EXTERNAL)
        self.assertEqual(schema, Schema(ty=EnumForm(values=("A", "B"))))

    def test_unit_union_internal(self):
        schema = self.synthesizer.synthesize(UnitVariantUnionShape("C", ["A", "B"]), Internal("kind"))
        self.assertIsInstance(schema.ty, PropertiesForm)
        self.assertEqual(schema.ty.properties, {"kind": Schema(ty=EnumForm(values=("A", "B")))})
        self.assertTrue(schema.ty.additional_properties)

    def test_struct_union_internal(self):
        shape = StructVariantUnionShape("S", [("Circle", [("radius", float)]), ("Square", [("side", float)])])
        schema = self.synthesizer.synthesize(shape, Internal("kind"))
        self.assertIsInstance(schema.ty, DiscriminatorForm)
        self.assertEqual(schema.ty.discriminator, "kind")
        self.assertEqual(list(schema.ty.mapping), ["Circle", "Square"])
        circle = schema.ty.mapping["Circle"].ty
        self.assertEqual(circle.properties, {"radius": Schema(ty=TypeForm(type="float64"))})
        self.assertTrue(circle.additional_properties)

    def test_struct_union_external_fails(self):
        shape = StructVariantUnionShape("S", [("Circle", [("radius", float)])])
        with self.assertRaises(MissingDiscriminator) as ctx:
            self.synthesizer.synthesize(shape, EXTERNAL)
        self.assertEqual(ctx.exception.type_name, "S")
        self.assertEqual(self.registry.requested, [])

    def test_tag_clashing_with_field(self):
        shape = StructVariantUnionShape("S", [("A", [("kind", str)])])
        with self.assertRaises(ConfigError) as ctx:
            self.synthesizer.synthesize(shape, Internal("kind"))
        self.assertEqual(ctx.exception.key, "tag")
