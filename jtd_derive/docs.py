"""
Markdown documentation for derived schemas.

Renders a RootSchema as a reference page: one section for the root and
one per definition, listing properties, enum values or discriminator
mappings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from . import __version__
from .schema import RootSchema

TEMPLATE_DIR = Path(__file__).parent / "templates"


def summarize(schema: dict[str, Any]) -> str:
    """One-line description of a schema in JSON Typedef form."""
    if "ref" in schema:
        text = f"[{schema['ref']}](#{anchor(schema['ref'])})"
    elif "type" in schema:
        text = f"`{schema['type']}`"
    elif "enum" in schema:
        text = "one of " + ", ".join(f'`"{v}"`' for v in schema["enum"])
    elif "elements" in schema:
        text = f"array of {summarize(schema['elements'])}"
    elif "values" in schema:
        text = f"map of string to {summarize(schema['values'])}"
    elif "discriminator" in schema:
        text = f"tagged union on `{schema['discriminator']}`"
    elif "properties" in schema or "optionalProperties" in schema:
        text = "object"
    else:
        text = "any value"
    if schema.get("nullable"):
        text += " or `null`"
    return text


def anchor(name: str) -> str:
    """GitHub-style heading anchor."""
    return "".join(c for c in name.lower().replace(" ", "-") if c.isalnum() or c in "-_")


class MarkdownRenderer:
    """Renders schemas with the ``schema.md.jinja2`` template."""

    def __init__(self):
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["summarize"] = summarize
        self.jinja_env.filters["anchor"] = anchor
        self.template = self.jinja_env.get_template("schema.md.jinja2")

    def render(self, root: RootSchema, title: str, command_line: str | None = None) -> str:
        """
        Render a root schema as Markdown.

        Args:
            root: The derived schema and its definitions
            title: Page title (usually the root type name)
            command_line: If given, a generated-by line citing this command

        Returns:
            Markdown text
        """
        sections = [(title, root.schema.to_dict())]
        sections.extend((name, schema.to_dict()) for name, schema in root.definitions.items())
        return self.template.render(
            title=title,
            sections=sections,
            command_line=command_line,
            version=__version__,
        )


def render_markdown(root: RootSchema, title: str, command_line: str | None = None) -> str:
    return MarkdownRenderer().render(root, title, command_line)
