"""
Configuration for schema derivation.

Two layers:
- ``DeriveConfig``: session-wide options (naming, inlining, int mapping)
- ``TypeConfig``: per-type options read from a class's ``__jtd__`` attribute,
  usually set through the ``typedef`` decorator
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ConfigError

TYPE_CONFIG_ATTR = "__jtd__"

JTD_INT_TYPES = ("int8", "uint8", "int16", "uint16", "int32", "uint32")


class NamingStrategy(str, Enum):
    """How definition names are rendered from a type's Names."""

    SHORT = "short"  # Shape<Circle>
    LONG = "long"  # geometry.Shape<geometry.Circle>


@dataclass
class DeriveConfig:
    """Configuration options for a derivation session."""

    # How definitions are named
    naming: NamingStrategy = NamingStrategy.SHORT

    # Inline referenceable types unless recursion needs a definition
    prefer_inline: bool = False

    # JSON Typedef type used for Python int
    int_type: str = "int32"

    # Add generation comment to rendered documentation
    add_generation_comment: bool = True

    def __post_init__(self):
        if isinstance(self.naming, str):
            self.naming = NamingStrategy(self.naming)
        if self.int_type not in JTD_INT_TYPES:
            raise ValueError(f"int_type must be one of {', '.join(JTD_INT_TYPES)}, got {self.int_type!r}")

    @staticmethod
    def from_dict(d: dict) -> DeriveConfig:
        """Create a config from a dictionary."""
        config = DeriveConfig()
        for k, v in d.items():
            if k == "naming":
                config.naming = NamingStrategy(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        config.__post_init__()
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "naming": self.naming.value,
            "prefer_inline": self.prefer_inline,
            "int_type": self.int_type,
            "add_generation_comment": self.add_generation_comment,
        }


@dataclass(frozen=True)
class TypeConfig:
    """Per-type options."""

    # Internal tag property for unions; None means externally tagged
    tag: str | None = None

    # Extra JSON Typedef metadata for the type's schema
    metadata: dict[str, Any] = field(default_factory=dict)

    # Overrides the short name used for definitions
    rename: str | None = None


def _non_empty_str(type_name: str, key: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ConfigError(type_name, f"`{key}` must be a non-empty string, got {value!r}", key=key)
    return value


def parse_type_config(type_name: str, raw: Any) -> TypeConfig:
    """
    Validate a raw per-type configuration mapping.

    Args:
        type_name: Name of the configured type (for diagnostics)
        raw: The mapping found in ``__jtd__`` (or None)

    Returns:
        Parsed TypeConfig

    Raises:
        ConfigError: If the mapping is not a dict, has unknown keys, or a
            value of the wrong type
    """
    if raw is None:
        return TypeConfig()
    if not isinstance(raw, dict):
        raise ConfigError(type_name, f"`{TYPE_CONFIG_ATTR}` must be a dict, got {type(raw).__name__}")

    tag = None
    metadata: dict[str, Any] = {}
    rename = None
    for key, value in raw.items():
        if key == "tag":
            tag = _non_empty_str(type_name, key, value)
        elif key == "rename":
            rename = _non_empty_str(type_name, key, value)
        elif key == "metadata":
            if not isinstance(value, dict) or not all(isinstance(k, str) for k in value):
                raise ConfigError(type_name, "`metadata` must be a dict with string keys", key=key)
            metadata = dict(value)
        else:
            raise ConfigError(type_name, f"unknown option `{key}`", key=key)
    return TypeConfig(tag=tag, metadata=metadata, rename=rename)


def read_type_config(tp: Any) -> TypeConfig:
    """Read the per-type configuration declared on ``tp`` itself (not inherited)."""
    raw = vars(tp).get(TYPE_CONFIG_ATTR) if isinstance(tp, type) else getattr(tp, TYPE_CONFIG_ATTR, None)
    return parse_type_config(getattr(tp, "__name__", repr(tp)), raw)


def typedef(_cls=None, **options):
    """
    Attach JSON Typedef options to a class.

    Usable bare (``@typedef``) or with options
    (``@typedef(tag="kind", metadata={...}, rename="Name")``). Options are
    validated when the schema is derived, not here.
    """

    def wrap(cls):
        setattr(cls, TYPE_CONFIG_ATTR, dict(options))
        return cls

    if _cls is not None:
        return wrap(_cls)
    return wrap
