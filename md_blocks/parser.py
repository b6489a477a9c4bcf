"""Block parsing.

`parse` drives a small state machine over classified lines. It is a total
function: every input string produces a `Document`, with malformed
constructs falling back to plain text or to an implicit fence close.
"""

from __future__ import annotations

from .classifier import classify_line
from .document import assemble
from .linkdefs import record_link_definition, try_parse_link_definition
from .logger import get_logger
from .models import (
    Block,
    ClassifiedLine,
    Code,
    Document,
    Heading,
    LineKind,
    LinkDefinition,
    Paragraph,
    ParserContext,
    ParserState,
    ThematicBreak,
)
from .scanner import scan_lines

logger = get_logger(__name__)


def _join_paragraph_lines(lines: list[str]) -> str:
    return " ".join(line.strip() for line in lines).strip()


def _flush_paragraph(ctx: ParserContext, blocks: list[Block]) -> None:
    """Emit the open paragraph, if any, and return to the idle state.

    Buffers that are empty after trimming are dropped without emitting.

    Examples:
        ctx = ParserContext(state=ParserState.IN_PARAGRAPH, paragraph_lines=["a ", " b"])
        _flush_paragraph(ctx, blocks)  # blocks gains Paragraph("a b")
    """
    if ctx.state is not ParserState.IN_PARAGRAPH:
        return

    text = _join_paragraph_lines(ctx.paragraph_lines)
    if text:
        blocks.append(Paragraph(text))

    ctx.state = ParserState.IDLE
    ctx.paragraph_lines = []


def _apply_setext_underline(ctx: ParserContext, blocks: list[Block]) -> None:
    """Turn the last paragraph line into a heading underlined by dashes.

    Lines before it still form a paragraph of their own.

    Examples:
        # "Intro text\\nTitle\\n---" yields Paragraph("Intro text"), Heading(1, "Title")
    """
    *before, last = ctx.paragraph_lines
    ctx.paragraph_lines = before
    _flush_paragraph(ctx, blocks)
    blocks.append(Heading(1, last.strip()))


def _try_consume_link_definition(line: str, link_table: dict[str, LinkDefinition]) -> bool:
    """Record the line as a link definition when it is one.

    Args:
        line: Plain text line that would otherwise start a paragraph.
        link_table: Definitions collected so far, updated in place.

    Returns:
        bool: True when the line was consumed as a definition.
    """
    definition = try_parse_link_definition(line)
    if definition is None:
        return False

    record_link_definition(link_table, definition)
    return True


def _open_fence(ctx: ParserContext, classified: ClassifiedLine) -> None:
    ctx.state = ParserState.IN_FENCE
    ctx.fence_char = classified.fence_char
    ctx.fence_length = classified.fence_length
    ctx.info_string = classified.text
    ctx.code_lines = []


def _close_fence(ctx: ParserContext, blocks: list[Block]) -> None:
    """Emit the buffered code block and reset the fence descriptor."""
    language = ctx.info_string.strip() or None
    content = "".join(f"{line}\n" for line in ctx.code_lines)
    blocks.append(Code(language=language, content=content))

    ctx.state = ParserState.IDLE
    ctx.fence_char = None
    ctx.fence_length = 0
    ctx.info_string = ""
    ctx.code_lines = []


def _finish(ctx: ParserContext, blocks: list[Block]) -> None:
    """Close whatever block is still open at the end of input."""
    if ctx.state is ParserState.IN_FENCE:
        logger.debug(
            "Unterminated %r fence closed at end of input (%d lines)",
            ctx.fence_char * ctx.fence_length,
            len(ctx.code_lines),
        )
        _close_fence(ctx, blocks)
        return

    _flush_paragraph(ctx, blocks)


def parse(text: str) -> Document:
    """Parse Markdown text into blocks and link definitions.

    Lines are processed once, in order. Plain text starting a new block is
    first tried as a link reference definition; plain text inside an open
    paragraph is always a lazy continuation, even when it looks like a
    definition. Definitions never appear in block content.

    Args:
        text: Complete document text.

    Returns:
        Document: Blocks in source order and definitions keyed by normalized
            label. Empty input yields an empty document.

    Examples:
        parse("# Docs\\n").blocks  # (Heading(level=1, text="Docs"),)
        parse("[foo]: /url\\n").link_definitions["foo"].destination  # "/url"
    """
    ctx = ParserContext()
    blocks: list[Block] = []
    link_table: dict[str, LinkDefinition] = {}

    for scanned in scan_lines(text):
        classified = classify_line(scanned.content, ctx)
        kind = classified.kind

        # Fenced content is kept verbatim
        if ctx.state is ParserState.IN_FENCE:
            if kind is LineKind.FENCE_CLOSE:
                _close_fence(ctx, blocks)
            else:
                ctx.code_lines.append(classified.line)
            continue

        if kind is LineKind.PLAIN_TEXT:
            if ctx.state is ParserState.IN_PARAGRAPH:
                ctx.paragraph_lines.append(classified.line)
                continue
            if _try_consume_link_definition(classified.line, link_table):
                continue
            ctx.state = ParserState.IN_PARAGRAPH
            ctx.paragraph_lines = [classified.line]
            continue

        if kind is LineKind.THEMATIC_BREAK and ctx.state is ParserState.IN_PARAGRAPH:
            _apply_setext_underline(ctx, blocks)
            continue

        # Every remaining kind ends an open paragraph
        _flush_paragraph(ctx, blocks)

        if kind is LineKind.HEADING:
            blocks.append(Heading(classified.level, classified.text))
        elif kind is LineKind.FENCE_OPEN:
            _open_fence(ctx, classified)
        elif kind is LineKind.THEMATIC_BREAK:
            blocks.append(ThematicBreak())

    _finish(ctx, blocks)

    logger.debug("Parsed %d blocks and %d link definitions", len(blocks), len(link_table))
    return assemble(blocks, link_table)
