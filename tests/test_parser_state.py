from md_blocks.classifier import classify_line
from md_blocks.models import Code, Heading, LinkDefinition, Paragraph, ParserContext, ParserState
from md_blocks.parser import (
    _apply_setext_underline,
    _close_fence,
    _finish,
    _flush_paragraph,
    _open_fence,
    _try_consume_link_definition,
)


def test_flush_paragraph_emits_and_resets():
    ctx = ParserContext(state=ParserState.IN_PARAGRAPH, paragraph_lines=["a ", " b"])
    blocks = []

    _flush_paragraph(ctx, blocks)

    assert blocks == [Paragraph("a b")]
    assert ctx.state is ParserState.IDLE
    assert ctx.paragraph_lines == []


def test_flush_paragraph_drops_empty_buffer():
    ctx = ParserContext(state=ParserState.IN_PARAGRAPH, paragraph_lines=["   ", ""])
    blocks = []

    _flush_paragraph(ctx, blocks)

    assert blocks == []
    assert ctx.state is ParserState.IDLE


def test_flush_paragraph_is_noop_when_idle():
    ctx = ParserContext()
    blocks = []

    _flush_paragraph(ctx, blocks)

    assert blocks == []
    assert ctx.state is ParserState.IDLE


def test_open_and_close_fence_cycle():
    ctx = ParserContext()
    blocks = []

    _open_fence(ctx, classify_line("~~~~ text ", ctx))

    assert ctx.state is ParserState.IN_FENCE
    assert ctx.fence_char == "~"
    assert ctx.fence_length == 4
    assert ctx.info_string == "text"

    ctx.code_lines.extend(["one", ""])
    _close_fence(ctx, blocks)

    assert blocks == [Code("text", "one\n\n")]
    assert ctx.state is ParserState.IDLE
    assert ctx.fence_char is None
    assert ctx.fence_length == 0
    assert ctx.info_string == ""
    assert ctx.code_lines == []


def test_apply_setext_underline_splits_buffer():
    ctx = ParserContext(state=ParserState.IN_PARAGRAPH, paragraph_lines=["intro", " Title "])
    blocks = []

    _apply_setext_underline(ctx, blocks)

    assert blocks == [Paragraph("intro"), Heading(1, "Title")]
    assert ctx.state is ParserState.IDLE


def test_try_consume_link_definition_updates_table():
    table: dict[str, LinkDefinition] = {}

    assert _try_consume_link_definition("not a definition", table) is False
    assert table == {}

    assert _try_consume_link_definition("[Key]: /dest", table) is True
    assert table == {"key": LinkDefinition("key", "/dest")}


def test_finish_closes_open_fence():
    ctx = ParserContext(
        state=ParserState.IN_FENCE,
        fence_char="`",
        fence_length=3,
        code_lines=["partial"],
    )
    blocks = []

    _finish(ctx, blocks)

    assert blocks == [Code(None, "partial\n")]
    assert ctx.state is ParserState.IDLE


def test_finish_flushes_open_paragraph():
    ctx = ParserContext(state=ParserState.IN_PARAGRAPH, paragraph_lines=["tail"])
    blocks = []

    _finish(ctx, blocks)

    assert blocks == [Paragraph("tail")]
