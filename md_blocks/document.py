"""Document assembly."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .models import Block, Document, LinkDefinition


def assemble(blocks: Iterable[Block], link_table: Mapping[str, LinkDefinition]) -> Document:
    """Pair emitted blocks with the link table.

    The table is copied into a read-only mapping so later changes to the
    caller's dictionary never reach the returned document.

    Args:
        blocks: Blocks in emission order.
        link_table: Definitions keyed by normalized label.

    Returns:
        Document: Immutable parse result.
    """
    return Document(
        blocks=tuple(blocks),
        link_definitions=MappingProxyType(dict(link_table)),
    )
