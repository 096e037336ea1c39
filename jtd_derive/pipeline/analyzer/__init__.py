"""
Analyzer - Phase 2 of the pipeline.

Resolves tag strategies, classifies shapes and computes type identities.
"""

from .classifier import ShapeClassifier
from .name_resolver import NameResolver, resolve_names
from .shapes import (
    NewtypeShape,
    RecordShape,
    StructVariantUnionShape,
    TypeShape,
    UnitVariantUnionShape,
)
from .tagging import EXTERNAL, External, Internal, TagStrategy, resolve_tag_strategy

__all__ = [
    "ShapeClassifier",
    "NameResolver",
    "resolve_names",
    "NewtypeShape",
    "RecordShape",
    "StructVariantUnionShape",
    "TypeShape",
    "UnitVariantUnionShape",
    "EXTERNAL",
    "External",
    "Internal",
    "TagStrategy",
    "resolve_tag_strategy",
]
