"""Data models for md-blocks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Union

from .labels import normalize_label


class ParserState(Enum):
    """States of the block state machine.

    Attributes:
        IDLE: No block is open.
        IN_PARAGRAPH: Text lines are being collected into a paragraph.
        IN_FENCE: Inside a fenced code block.
    """

    IDLE = auto()
    IN_PARAGRAPH = auto()
    IN_FENCE = auto()


class LineKind(Enum):
    """Classification of a single source line."""

    BLANK = auto()
    HEADING = auto()
    FENCE_OPEN = auto()
    FENCE_CONTENT = auto()
    FENCE_CLOSE = auto()
    THEMATIC_BREAK = auto()
    PLAIN_TEXT = auto()


@dataclass(frozen=True)
class ClassifiedLine:
    """A source line together with its classification.

    Attributes:
        kind: Line kind decided by the classifier.
        line: Raw line content, without its terminator.
        level: Heading level for ``HEADING`` lines, otherwise 0.
        text: Heading text for ``HEADING`` lines, info string for
            ``FENCE_OPEN`` lines, otherwise empty.
        fence_char: Fence character for ``FENCE_OPEN`` lines.
        fence_length: Length of the opening fence run for ``FENCE_OPEN`` lines.
    """

    kind: LineKind
    line: str
    level: int = 0
    text: str = ""
    fence_char: str | None = None
    fence_length: int = 0


@dataclass
class ParserContext:
    """Mutable state owned by a single parse call.

    Attributes:
        state: Current state of the block state machine.
        fence_char: Character of the open fence, if any.
        fence_length: Run length of the open fence.
        info_string: Trimmed info string of the open fence.
        paragraph_lines: Lines collected for the open paragraph.
        code_lines: Lines collected for the open fenced block.
    """

    state: ParserState = ParserState.IDLE
    fence_char: str | None = None
    fence_length: int = 0
    info_string: str = ""
    paragraph_lines: list[str] = field(default_factory=list)
    code_lines: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Heading:
    """ATX or setext heading. ``level`` is between 1 and 6."""

    level: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    """Consecutive text lines joined with single spaces."""

    text: str


@dataclass(frozen=True)
class Code:
    """Fenced code block.

    Attributes:
        language: Trimmed info string, or None when the fence had none.
        content: Exact lines between the fences, each ending with ``\\n``.
    """

    language: str | None
    content: str


@dataclass(frozen=True)
class ThematicBreak:
    """Horizontal rule written as a line of dashes."""


Block = Union[Heading, Paragraph, Code, ThematicBreak]


@dataclass(frozen=True)
class LinkDefinition:
    """Link reference definition.

    Attributes:
        label: Normalized label used as the lookup key.
        destination: Link destination, without angle brackets.
        title: Title text without its delimiters, or None when absent.
    """

    label: str
    destination: str
    title: str | None = None


@dataclass(frozen=True)
class Document:
    """Parse result: blocks in source order plus the link definition table.

    Attributes:
        blocks: Blocks in the order their first lines appear in the source.
        link_definitions: Definitions keyed by normalized label.

    Examples:
        document = parse("[Docs]: https://example.com\\n")
        document.resolve("DOCS").destination  # "https://example.com"
    """

    blocks: tuple[Block, ...] = ()
    link_definitions: Mapping[str, LinkDefinition] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def resolve(self, label: str) -> LinkDefinition | None:
        """Look up a definition by raw label, normalizing it first."""
        return self.link_definitions.get(normalize_label(label))

    def headings(self) -> list[Heading]:
        """Return the heading blocks in document order."""
        return [block for block in self.blocks if isinstance(block, Heading)]
