"""
Type declarations - Phase 1 of the pipeline.
"""

from .introspect import TaggedUnion, describe, is_user_type
from .nodes import EnumDef, Fields, FieldStyle, Member, StructDef, TypeDef, Variant

__all__ = [
    "TaggedUnion",
    "describe",
    "is_user_type",
    "EnumDef",
    "Fields",
    "FieldStyle",
    "Member",
    "StructDef",
    "TypeDef",
    "Variant",
]
