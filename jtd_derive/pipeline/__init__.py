"""
Pipeline - derive JSON Typedef schemas from type declarations.

1. Phase 1 (Type AST): describe a type's declared layout (reflection or explicit)
2. Phase 2 (Analyzer): resolve the tag strategy, classify the shape, compute Names
3. Phase 3 (Synthesizer): build the schema, requesting member schemas
4. Registry (Generator): inline or reference member schemas, terminate recursion
"""

from __future__ import annotations

from .generator import Generator, derive_schema
from .synthesizer import SchemaSynthesizer

__all__ = [
    "Generator",
    "derive_schema",
    "SchemaSynthesizer",
]
