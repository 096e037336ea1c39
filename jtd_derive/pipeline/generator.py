"""
Schema generator: the registry behind ``sub_schema``.

One generator is one derivation session. It decides, per type, whether a
schema is inlined or registered as a definition and referenced, and it
guarantees at most one synthesis per type identity. Types being derived
are marked in progress; a recursive request for such a type gets a
``ref`` instead of re-entering synthesis.

A generator is not thread-safe; use one per session.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import DeriveConfig, NamingStrategy, parse_type_config
from ..errors import NameCollision
from ..schema import Names, RefForm, RootSchema, Schema
from .analyzer.classifier import ShapeClassifier
from .analyzer.name_resolver import NameResolver
from .analyzer.tagging import resolve_tag_strategy
from .builtins import builtin_schema
from .synthesizer import SchemaSynthesizer
from .type_ast.introspect import describe, is_user_type

logger = logging.getLogger(__name__)


class Generator:
    """Derives JSON Typedef schemas for a set of types."""

    def __init__(self, config: DeriveConfig | None = None):
        """
        Initialize the generator.

        Args:
            config: Session configuration (defaults to DeriveConfig())
        """
        self.config = config or DeriveConfig()
        self.name_resolver = NameResolver()
        self.classifier = ShapeClassifier()
        self.synthesizer = SchemaSynthesizer(self)

        # Finished definitions, by definition id
        self.definitions: dict[str, Schema] = {}

        # Definition id -> Names that claimed it
        self._owners: dict[str, Names] = {}
        # Definition ids in first-request order
        self._order: list[str] = []
        self._in_progress: set[str] = set()
        self._recursive: set[str] = set()
        # Inlined schemas (prefer_inline), so repeated uses are identical
        self._inlined: dict[str, Schema] = {}

    def definition_id(self, names: Names) -> str:
        if self.config.naming == NamingStrategy.LONG:
            return names.render_long()
        return names.render_short()

    def sub_schema(self, tp: Any) -> Schema:
        """
        Schema for a member type: inline, or a reference to a definition.

        Args:
            tp: Any supported type reference

        Returns:
            The schema to use at the call site
        """
        if not is_user_type(tp):
            return builtin_schema(tp, self, self.config.int_type)

        def_id = self._claim(tp)
        if def_id in self._in_progress:
            logger.debug("Recursive reference to %s", def_id)
            self._recursive.add(def_id)
            return self._ref(def_id)
        if def_id in self.definitions:
            return self._ref(def_id)
        if def_id in self._inlined:
            if self.config.prefer_inline:
                return self._inlined[def_id]
            # Inlined earlier as a root; reuse it as a definition now
            self._register(def_id, self._inlined[def_id])
            return self._ref(def_id)

        schema = self._derive(tp, def_id)
        if self.config.prefer_inline and def_id not in self._recursive:
            self._inlined[def_id] = schema
            return schema

        self._register(def_id, schema)
        return self._ref(def_id)

    def root_schema(self, tp: Any) -> RootSchema:
        """
        Derive the top-level schema for ``tp`` with all its definitions.

        The root type is inlined at the root unless it refers to itself,
        in which case the root is a reference to its own definition.
        """
        if not is_user_type(tp):
            schema = self.sub_schema(tp)
        else:
            def_id = self._claim(tp)
            if def_id in self.definitions:
                schema = self._ref(def_id) if def_id in self._recursive else self.definitions[def_id]
            elif def_id in self._inlined:
                schema = self._inlined[def_id]
            else:
                schema = self._derive(tp, def_id)
                if def_id in self._recursive:
                    self._register(def_id, schema)
                    schema = self._ref(def_id)
                else:
                    self._inlined[def_id] = schema

        definitions = {d: self.definitions[d] for d in self._order if d in self.definitions}
        return RootSchema(schema=schema, definitions=definitions)

    def derive(self, tp: Any) -> Schema:
        """
        Run the derivation pipeline for one user type.

        Tag strategy and shape are resolved first, then the synthesizer
        builds the schema, calling back into ``sub_schema`` for members.
        """
        type_def = describe(tp)
        type_config = parse_type_config(type_def.name, type_def.options)
        strategy = resolve_tag_strategy(type_config)
        shape = self.classifier.classify(type_def)
        schema = self.synthesizer.synthesize(shape, strategy)
        return schema.with_metadata(type_config.metadata)

    def _derive(self, tp: Any, def_id: str) -> Schema:
        self._recursive.discard(def_id)
        self._in_progress.add(def_id)
        known = set(self.definitions) | set(self._inlined)
        try:
            return self.derive(tp)
        except Exception:
            self._in_progress.discard(def_id)
            self._discard_dangling(known)
            raise
        finally:
            self._in_progress.discard(def_id)

    def _discard_dangling(self, known: set[str]) -> None:
        """
        Drop schemas cached since ``known`` that refer to a type which will
        never be defined.

        Types still in progress count as defined: if they fail too, their own
        cleanup runs.
        """
        changed = True
        while changed:
            changed = False
            for cache in (self.definitions, self._inlined):
                for def_id in [d for d in cache if d not in known]:
                    missing = cache[def_id].refs() - set(self.definitions) - self._in_progress
                    if missing:
                        logger.debug("Discarding %s: refers to undefined %s", def_id, ", ".join(sorted(missing)))
                        del cache[def_id]
                        changed = True

    def _claim(self, tp: Any) -> str:
        """Compute the definition id of ``tp``, detecting name collisions."""
        names = self.name_resolver.resolve(tp)
        def_id = self.definition_id(names)
        owner = self._owners.get(def_id)
        if owner is None:
            self._owners[def_id] = names
            self._order.append(def_id)
        elif owner.key() != names.key():
            raise NameCollision(def_id, owner.render_long(), names.render_long())
        return def_id

    def _register(self, def_id: str, schema: Schema) -> None:
        logger.debug("Registered definition %s", def_id)
        self.definitions[def_id] = schema

    def _ref(self, def_id: str) -> Schema:
        return Schema(ty=RefForm(ref=def_id))


def derive_schema(tp: Any, config: DeriveConfig | None = None) -> RootSchema:
    """Derive the root schema for ``tp`` in a fresh session."""
    return Generator(config).root_schema(tp)
