"""
md-blocks: block-level Markdown parser.

Splits Markdown text into headings, paragraphs, fenced code blocks and
thematic breaks, and collects link reference definitions into a side table
without substituting them into the text.

CLI Usage:
    md-blocks README.md

Library Usage:
    from md_blocks import parse

    document = parse("# Docs\\n\\n[home]: https://example.com\\n")
    document.blocks  # (Heading(level=1, text="Docs"),)
    document.resolve("HOME").destination  # "https://example.com"
"""

from .exceptions import ConfigError, FileTooLargeError, ParseFileError
from .labels import normalize_label
from .linkdefs import try_parse_link_definition
from .loader import parse_file
from .models import Block, Code, Document, Heading, LinkDefinition, Paragraph, ThematicBreak
from .parser import parse
from .serialization import from_json, to_json

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "parse",
    "parse_file",
    "normalize_label",
    "try_parse_link_definition",
    # Data models
    "Block",
    "Code",
    "Document",
    "Heading",
    "LinkDefinition",
    "Paragraph",
    "ThematicBreak",
    # Serialization
    "to_json",
    "from_json",
    # Exceptions
    "ConfigError",
    "FileTooLargeError",
    "ParseFileError",
    # Version
    "__version__",
]
