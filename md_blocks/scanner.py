"""Line scanning."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ScannedLine:
    """One logical line of the input buffer.

    Attributes:
        content: Line text without its terminator.
        is_final: True for the last line of the buffer.
        offset: Zero-based character offset where the line starts.
    """

    content: str
    is_final: bool
    offset: int


def scan_lines(text: str) -> Iterator[ScannedLine]:
    """Split text into logical lines lazily.

    Lines end at ``\\n``; a single ``\\r`` right before it is dropped. A
    trailing terminator does not produce an extra empty line, and empty input
    yields nothing. Other Unicode line separators are left in the content.

    Args:
        text: Full document text.

    Yields:
        ScannedLine: Lines in source order.

    Examples:
        [line.content for line in scan_lines("a\\r\\nb")]  # ["a", "b"]
        list(scan_lines(""))  # []
    """
    length = len(text)
    start = 0
    while start < length:
        newline = text.find("\n", start)
        if newline == -1:
            yield ScannedLine(text[start:], True, start)
            return

        end = newline
        if end > start and text[end - 1] == "\r":
            end -= 1
        next_start = newline + 1
        yield ScannedLine(text[start:end], next_start >= length, start)
        start = next_start
