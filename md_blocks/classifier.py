"""Line classification for the block state machine."""

from __future__ import annotations

from .constants import (
    CODE_FENCE_PATTERN,
    HEADING_PATTERN,
    MAX_MARKER_INDENT,
    THEMATIC_BREAK_PATTERN,
)
from .models import ClassifiedLine, LineKind, ParserContext, ParserState


def _leading_whitespace_columns(line: str) -> int:
    """Compute the column width of leading whitespace.

    Tabs advance to the next multiple of four columns.

    Examples:
        _leading_whitespace_columns("   ```")  # 3
        _leading_whitespace_columns("\\t```")  # 4
    """
    columns = 0
    for character in line:
        if character == " ":
            columns += 1
            continue
        if character == "\t":
            columns += 4 - (columns % 4)
            continue
        break
    return columns


def is_blank(line: str) -> bool:
    """Return True when the line holds only whitespace."""
    return not line.strip()


def _heading_text(rest: str | None) -> str:
    # An optional closing sequence counts only when it stands alone or
    # follows whitespace, so "C#" keeps its hash.
    if rest is None:
        return ""
    text = rest.rstrip()
    without_closing = text.rstrip("#")
    if without_closing != text and (not without_closing or without_closing[-1] in " \t"):
        text = without_closing.rstrip()
    return text


def _match_heading(line: str) -> ClassifiedLine | None:
    """Recognize an ATX heading line.

    Returns:
        ClassifiedLine | None: Heading classification, or None when the line
            is not a heading (including runs of seven or more ``#``).

    Examples:
        _match_heading("## Usage ##").text  # "Usage"
        _match_heading("####### deep")  # None
    """
    match = HEADING_PATTERN.match(line)
    if not match:
        return None
    return ClassifiedLine(
        LineKind.HEADING,
        line,
        level=len(match.group("marker")),
        text=_heading_text(match.group("rest")),
    )


def _match_fence_open(line: str) -> ClassifiedLine | None:
    """Recognize an opening code fence.

    Backtick fences whose info string contains a backtick are rejected, as are
    fences indented by more than three columns.

    Examples:
        _match_fence_open("```python").text  # "python"
        _match_fence_open("``` a`b")  # None
    """
    match = CODE_FENCE_PATTERN.match(line)
    if not match:
        return None

    if _leading_whitespace_columns(match.group("indent")) > MAX_MARKER_INDENT:
        return None

    fence = match.group("fence")
    info = match.group("info").strip()
    if fence[0] == "`" and "`" in info:
        return None

    return ClassifiedLine(
        LineKind.FENCE_OPEN,
        line,
        text=info,
        fence_char=fence[0],
        fence_length=len(fence),
    )


def is_closing_fence(ctx: ParserContext, line: str) -> bool:
    """Check whether a line closes the fence described by the context.

    The line must hold a run of the opening character at least as long as the
    opening run, indented by at most three columns and followed only by
    whitespace.

    Args:
        ctx: Parser context describing the open fence.
        line: Line being scanned.

    Returns:
        bool: True when the line closes the fence.

    Examples:
        ctx = ParserContext(state=ParserState.IN_FENCE, fence_char="`", fence_length=3)
        is_closing_fence(ctx, "````  ")  # True
        is_closing_fence(ctx, "```python")  # False
    """
    if ctx.state is not ParserState.IN_FENCE or ctx.fence_char is None:
        return False

    if _leading_whitespace_columns(line) > MAX_MARKER_INDENT:
        return False

    stripped_line = line.lstrip(" \t")
    if not stripped_line or stripped_line[0] != ctx.fence_char:
        return False

    fence_run_length = len(stripped_line) - len(stripped_line.lstrip(ctx.fence_char))
    if fence_run_length < ctx.fence_length:
        return False

    return not stripped_line[fence_run_length:].strip()


def classify_line(line: str, ctx: ParserContext) -> ClassifiedLine:
    """Classify one line given the current parser state.

    Inside a fence every line is content unless it closes the fence. Outside a
    fence the checks run in order: blank, heading, fence opening, thematic
    break, and finally plain text, which is the fallback for anything
    unrecognized.

    Args:
        line: Line content without its terminator.
        ctx: Current parser context; only the fence descriptor is read.

    Returns:
        ClassifiedLine: The line and its kind. Never raises.

    Examples:
        classify_line("# Docs", ParserContext()).kind  # LineKind.HEADING
        classify_line("####### x", ParserContext()).kind  # LineKind.PLAIN_TEXT
    """
    if ctx.state is ParserState.IN_FENCE:
        if is_closing_fence(ctx, line):
            return ClassifiedLine(LineKind.FENCE_CLOSE, line)
        return ClassifiedLine(LineKind.FENCE_CONTENT, line)

    if is_blank(line):
        return ClassifiedLine(LineKind.BLANK, line)

    heading = _match_heading(line)
    if heading is not None:
        return heading

    fence = _match_fence_open(line)
    if fence is not None:
        return fence

    if THEMATIC_BREAK_PATTERN.match(line):
        return ClassifiedLine(LineKind.THEMATIC_BREAK, line)

    return ClassifiedLine(LineKind.PLAIN_TEXT, line)
