"""
Tag-strategy resolution for unions.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...config import TypeConfig


class TagStrategy:
    """How a union's active variant is signalled in JSON."""


@dataclass(frozen=True)
class External(TagStrategy):
    """No in-band discriminant: the variant is implied by the value itself."""


@dataclass(frozen=True)
class Internal(TagStrategy):
    """The discriminant is a property named ``tag`` inside the object."""

    tag: str


EXTERNAL = External()


def resolve_tag_strategy(config: TypeConfig) -> TagStrategy:
    """Internal tagging when a tag is configured, external otherwise.

    Whether the strategy suits the type's shape is checked by the synthesizer.
    """
    if config.tag is not None:
        return Internal(config.tag)
    return EXTERNAL
