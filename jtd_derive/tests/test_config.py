import pytest

from jtd_derive.config import (
    DeriveConfig,
    NamingStrategy,
    TypeConfig,
    parse_type_config,
    read_type_config,
    typedef,
)
from jtd_derive.errors import ConfigError
from jtd_derive.pipeline.analyzer import EXTERNAL, Internal, resolve_tag_strategy

from .models import Labelled, Point, Shape, TaggedColor


class TestTagStrategy:
    def test_default_is_external(self):
        assert resolve_tag_strategy(TypeConfig()) == EXTERNAL

    def test_tag_gives_internal(self):
        assert resolve_tag_strategy(TypeConfig(tag="kind")) == Internal("kind")

    def test_read_from_class(self):
        assert resolve_tag_strategy(read_type_config(Shape)) == Internal("kind")
        assert resolve_tag_strategy(read_type_config(TaggedColor)) == Internal("color")
        assert resolve_tag_strategy(read_type_config(Point)) == EXTERNAL


class TestTypeConfig:
    def test_none_is_default(self):
        assert parse_type_config("T", None) == TypeConfig()

    def test_all_options(self):
        config = read_type_config(Labelled)
        assert config.metadata == {"description": "A labelled point"}
        assert config.rename == "Label"
        assert config.tag is None

    @pytest.mark.parametrize(
        "raw, key",
        [
            ({"tag": ""}, "tag"),
            ({"tag": 3}, "tag"),
            ({"rename": None}, "rename"),
            ({"metadata": ["description"]}, "metadata"),
            ({"metadata": {1: "x"}}, "metadata"),
            ({"tagg": "kind"}, "tagg"),
        ],
    )
    def test_malformed(self, raw, key):
        with pytest.raises(ConfigError) as exc:
            parse_type_config("Broken", raw)
        assert exc.value.key == key
        assert exc.value.type_name == "Broken"

    def test_not_a_dict(self):
        with pytest.raises(ConfigError):
            parse_type_config("Broken", "kind")

    def test_decorator_bare_and_called(self):
        @typedef
        class A:
            pass

        @typedef(tag="t")
        class B:
            pass

        assert read_type_config(A) == TypeConfig()
        assert read_type_config(B).tag == "t"

    def test_config_is_not_inherited(self):
        class Sub(Shape):
            pass

        assert read_type_config(Sub).tag is None


class TestDeriveConfig:
    def test_defaults(self):
        config = DeriveConfig()
        assert config.naming == NamingStrategy.SHORT
        assert config.prefer_inline is False
        assert config.int_type == "int32"

    def test_from_dict_roundtrip(self):
        d = {"naming": "long", "prefer_inline": True, "int_type": "uint16", "add_generation_comment": False}
        config = DeriveConfig.from_dict(d)
        assert config.naming == NamingStrategy.LONG
        assert config.to_dict() == d

    def test_from_dict_ignores_unknown_keys(self):
        assert DeriveConfig.from_dict({"whatever": 1}) == DeriveConfig()

    def test_invalid_int_type(self):
        with pytest.raises(ValueError):
            DeriveConfig(int_type="int64")
        with pytest.raises(ValueError):
            DeriveConfig.from_dict({"int_type": "float64"})

    def test_naming_from_string(self):
        assert DeriveConfig(naming="long").naming == NamingStrategy.LONG
