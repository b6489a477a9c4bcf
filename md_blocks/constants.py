"""Constants used across the md-blocks package."""

from __future__ import annotations

import re

# Block markers
MAX_HEADING_LEVEL = 6
MAX_MARKER_INDENT = 3
MIN_FENCE_LENGTH = 3
FENCE_CHARACTERS = "`~"

HEADING_PATTERN = re.compile(
    rf"^(?P<indent> {{0,{MAX_MARKER_INDENT}}})(?P<marker>#{{1,{MAX_HEADING_LEVEL}}})"
    r"(?: (?P<rest>.*)|$)"
)
CODE_FENCE_PATTERN = re.compile(
    rf"^(?P<indent>[ \t]{{0,{MAX_MARKER_INDENT}}})"
    "(?P<fence>"
    + "|".join(rf"{re.escape(char)}{{{MIN_FENCE_LENGTH},}}" for char in FENCE_CHARACTERS)
    + r")(?P<info>.*)$"
)
THEMATIC_BREAK_PATTERN = re.compile(rf"^ {{0,{MAX_MARKER_INDENT}}}-{{3,}}$")

# Link reference definitions
TITLE_DELIMITERS = {'"': '"', "'": "'", "(": ")"}

# File loading
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
MARKDOWN_EXTENSIONS = (".md", ".markdown", ".mdown", ".mkd", ".txt")
