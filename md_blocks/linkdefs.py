"""Link reference definition recognition.

A definition is a single line of the form::

    [label]: destination "optional title"

The destination may be wrapped in angle brackets, and the title may be
delimited by double quotes, single quotes, or parentheses. A line that
matches only partially is not a definition.
"""

from __future__ import annotations

from .constants import MAX_MARKER_INDENT, TITLE_DELIMITERS
from .labels import normalize_label
from .logger import get_logger
from .models import LinkDefinition

logger = get_logger(__name__)


def _skip_whitespace(line: str, pos: int) -> int:
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def _parse_label(line: str, pos: int) -> tuple[str, int] | None:
    """Parse ``[label]:`` starting at the opening bracket.

    Returns:
        tuple[str, int] | None: Raw label and the position after the colon,
            or None when the label is missing, empty, or not followed by ``:``.
    """
    if pos >= len(line) or line[pos] != "[":
        return None

    close = line.find("]", pos + 1)
    if close == -1:
        return None

    label = line[pos + 1 : close]
    if not normalize_label(label):
        return None

    colon = close + 1
    if colon >= len(line) or line[colon] != ":":
        return None

    return label, colon + 1


def _parse_destination(line: str, pos: int) -> tuple[str, int] | None:
    """Parse a bracketed or bare destination.

    Examples:
        _parse_destination("<a b>", 0)  # None, whitespace inside brackets
        _parse_destination("/url 'x'", 0)  # ("/url", 4)
    """
    if pos >= len(line):
        return None

    if line[pos] == "<":
        end = pos + 1
        while end < len(line):
            character = line[end]
            if character == ">":
                return line[pos + 1 : end], end + 1
            if character == "<" or character.isspace():
                return None
            end += 1
        return None

    end = pos
    while end < len(line) and not line[end].isspace():
        end += 1
    if end == pos:
        return None
    return line[pos:end], end


def _parse_title(line: str, pos: int) -> tuple[str, int] | None:
    """Parse a delimited title starting at its opening delimiter."""
    opener = line[pos]
    closer = TITLE_DELIMITERS.get(opener)
    if closer is None:
        return None

    end = line.find(closer, pos + 1)
    if end == -1:
        return None

    title = line[pos + 1 : end]
    if opener == "(" and "(" in title:
        return None
    return title, end + 1


def try_parse_link_definition(line: str) -> LinkDefinition | None:
    """Parse a whole line as a link reference definition.

    The line must match the definition grammar in full: anything other than
    whitespace after the destination or title rejects it. Up to three spaces
    of indentation are allowed before the opening bracket.

    Args:
        line: Line content without its terminator.

    Returns:
        LinkDefinition | None: Definition with a normalized label, or None
            when the line is not a definition.

    Examples:
        try_parse_link_definition('[Foo]: /url "title"')
        # LinkDefinition(label="foo", destination="/url", title="title")
        try_parse_link_definition("[foo]: /url trailing")  # None
    """
    pos = 0
    while pos < len(line) and line[pos] == " ":
        pos += 1
    if pos > MAX_MARKER_INDENT:
        return None

    parsed_label = _parse_label(line, pos)
    if parsed_label is None:
        return None
    label, pos = parsed_label

    parsed_destination = _parse_destination(line, _skip_whitespace(line, pos))
    if parsed_destination is None:
        return None
    destination, pos = parsed_destination

    title = None
    title_start = _skip_whitespace(line, pos)
    if title_start < len(line):
        # A title must be separated from the destination by whitespace.
        if title_start == pos:
            return None
        parsed_title = _parse_title(line, title_start)
        if parsed_title is None:
            return None
        title, pos = parsed_title

    if line[pos:].strip():
        return None

    return LinkDefinition(label=normalize_label(label), destination=destination, title=title)


def record_link_definition(
    link_table: dict[str, LinkDefinition], definition: LinkDefinition
) -> None:
    """Insert a definition, replacing any earlier one with the same label."""
    previous = link_table.get(definition.label)
    if previous is not None:
        logger.debug(
            "Link definition %r redefined: %r replaces %r",
            definition.label,
            definition.destination,
            previous.destination,
        )
    link_table[definition.label] = definition
