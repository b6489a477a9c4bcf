"""JSON serialization for parsed documents.

Converts a `Document` to and from JSON-compatible dicts. Each block carries a
``type`` discriminator; link definitions are keyed by normalized label.
Output is deterministic (sorted keys) so it can be diffed or cached.

Example:
    from md_blocks import parse
    from md_blocks.serialization import from_json, to_json

    document = parse("# Hello\\n")
    assert from_json(to_json(document)) == document
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from .document import assemble
from .models import Block, Code, Document, Heading, LinkDefinition, Paragraph, ThematicBreak

_BLOCK_TYPES: dict[str, type] = {
    "heading": Heading,
    "paragraph": Paragraph,
    "code": Code,
    "thematic_break": ThematicBreak,
}
_BLOCK_NAMES = {block_type: name for name, block_type in _BLOCK_TYPES.items()}


def block_to_dict(block: Block) -> dict[str, Any]:
    """Convert one block to a dict with a ``type`` field."""
    return {"type": _BLOCK_NAMES[type(block)], **asdict(block)}


def to_dict(document: Document, include_links: bool = True) -> dict[str, Any]:
    """Convert a document to a JSON-compatible dict.

    Args:
        document: Parse result to convert.
        include_links: When False, the ``link_definitions`` key is omitted.

    Returns:
        dict[str, Any]: ``blocks`` list and, optionally, ``link_definitions``.
    """
    result: dict[str, Any] = {"blocks": [block_to_dict(block) for block in document.blocks]}
    if include_links:
        result["link_definitions"] = {
            label: {"destination": definition.destination, "title": definition.title}
            for label, definition in document.link_definitions.items()
        }
    return result


def to_json(document: Document, indent: int | None = 2, include_links: bool = True) -> str:
    """Serialize a document to a JSON string with sorted keys."""
    return json.dumps(
        to_dict(document, include_links=include_links),
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )


def block_from_dict(data: dict[str, Any]) -> Block:
    """Rebuild a block from its dict form.

    Raises:
        ValueError: If ``type`` is missing or unknown.
    """
    fields = dict(data)
    type_name = fields.pop("type", None)
    if type_name is None:
        raise ValueError("Missing 'type' field in serialized block")

    block_type = _BLOCK_TYPES.get(type_name)
    if block_type is None:
        raise ValueError(f"Unknown block type: {type_name!r}")

    return block_type(**fields)


def from_dict(data: dict[str, Any]) -> Document:
    """Rebuild a document from the output of `to_dict`."""
    blocks = [block_from_dict(block) for block in data.get("blocks", [])]
    link_table = {
        label: LinkDefinition(
            label=label, destination=entry["destination"], title=entry.get("title")
        )
        for label, entry in data.get("link_definitions", {}).items()
    }
    return assemble(blocks, link_table)


def from_json(text: str) -> Document:
    """Rebuild a document from a JSON string."""
    return from_dict(json.loads(text))
