from types import MappingProxyType

from md_blocks.models import (
    Code,
    Document,
    Heading,
    LineKind,
    LinkDefinition,
    ParserContext,
    ParserState,
)


def test_parser_state_members():
    assert list(ParserState) == [
        ParserState.IDLE,
        ParserState.IN_PARAGRAPH,
        ParserState.IN_FENCE,
    ]


def test_line_kind_members():
    assert {kind.name for kind in LineKind} == {
        "BLANK",
        "HEADING",
        "FENCE_OPEN",
        "FENCE_CONTENT",
        "FENCE_CLOSE",
        "THEMATIC_BREAK",
        "PLAIN_TEXT",
    }


def test_parser_context_defaults():
    ctx = ParserContext()

    assert ctx.state is ParserState.IDLE
    assert ctx.fence_char is None
    assert ctx.fence_length == 0
    assert ctx.info_string == ""
    assert ctx.paragraph_lines == []
    assert ctx.code_lines == []


def test_parser_contexts_do_not_share_buffers():
    first = ParserContext()
    second = ParserContext()

    first.paragraph_lines.append("text")

    assert second.paragraph_lines == []


def test_document_defaults_are_empty():
    document = Document()

    assert document.blocks == ()
    assert dict(document.link_definitions) == {}


def test_document_resolve_normalizes_label():
    definition = LinkDefinition("foo bar", "/x")
    document = Document(link_definitions=MappingProxyType({"foo bar": definition}))

    assert document.resolve("  FOO\tBar ") == definition
    assert document.resolve("missing") is None


def test_blocks_compare_by_value():
    assert Heading(2, "x") == Heading(2, "x")
    assert Code(None, "a\n") != Code("", "a\n")
