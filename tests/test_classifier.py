import pytest

from md_blocks.classifier import classify_line, is_closing_fence
from md_blocks.models import LineKind, ParserContext, ParserState


def _classify(line: str):
    return classify_line(line, ParserContext())


@pytest.mark.parametrize("line", ["", "   ", "\t", " \t  "])
def test_whitespace_only_lines_are_blank(line: str):
    assert _classify(line).kind is LineKind.BLANK


@pytest.mark.parametrize(
    "line, level, text",
    [
        ("# Docs", 1, "Docs"),
        ("###### Six", 6, "Six"),
        ("## Trailing  ", 2, "Trailing"),
        ("## Closed ##", 2, "Closed"),
        ("# C#", 1, "C#"),
        ("#", 1, ""),
        ("# #", 1, ""),
        ("   ### Indented", 3, "Indented"),
        ("#  Two spaces", 1, " Two spaces"),
    ],
)
def test_heading_lines(line: str, level: int, text: str):
    classified = _classify(line)

    assert classified.kind is LineKind.HEADING
    assert classified.level == level
    assert classified.text == text


@pytest.mark.parametrize("line", ["####### Seven", "#NoSpace", "    # Too deep", "#5", "#\tTabbed"])
def test_malformed_headings_are_plain_text(line: str):
    assert _classify(line).kind is LineKind.PLAIN_TEXT


def test_fence_open_records_descriptor():
    classified = _classify("````python  ")

    assert classified.kind is LineKind.FENCE_OPEN
    assert classified.fence_char == "`"
    assert classified.fence_length == 4
    assert classified.text == "python"


def test_tilde_fence_may_contain_tildes_in_info():
    classified = _classify("~~~ a~b")

    assert classified.kind is LineKind.FENCE_OPEN
    assert classified.fence_char == "~"
    assert classified.text == "a~b"


@pytest.mark.parametrize("line", ["``` a`b", "``", "~~", "    ```"])
def test_invalid_fences_are_plain_text(line: str):
    assert _classify(line).kind is LineKind.PLAIN_TEXT


@pytest.mark.parametrize("line", ["---", "-----", "  ---"])
def test_thematic_breaks(line: str):
    assert _classify(line).kind is LineKind.THEMATIC_BREAK


@pytest.mark.parametrize("line", ["- - -", "--", "--- x"])
def test_dash_lines_that_are_not_breaks(line: str):
    assert _classify(line).kind is LineKind.PLAIN_TEXT


def test_lines_inside_fence_are_content():
    ctx = ParserContext(state=ParserState.IN_FENCE, fence_char="`", fence_length=3)

    assert classify_line("# not a heading", ctx).kind is LineKind.FENCE_CONTENT
    assert classify_line("", ctx).kind is LineKind.FENCE_CONTENT
    assert classify_line("~~~", ctx).kind is LineKind.FENCE_CONTENT
    assert classify_line("``", ctx).kind is LineKind.FENCE_CONTENT
    assert classify_line("```", ctx).kind is LineKind.FENCE_CLOSE


def test_closing_fence_rules():
    ctx = ParserContext(state=ParserState.IN_FENCE, fence_char="`", fence_length=4)

    assert is_closing_fence(ctx, "````") is True
    assert is_closing_fence(ctx, "`````   ") is True
    assert is_closing_fence(ctx, "   ````") is True
    assert is_closing_fence(ctx, "```") is False
    assert is_closing_fence(ctx, "```` python") is False
    assert is_closing_fence(ctx, "    ````") is False


def test_closing_fence_requires_open_fence():
    assert is_closing_fence(ParserContext(), "```") is False
