"""Loading Markdown files for the parser.

The parsing core never touches the filesystem; `parse_file` reads and
decodes the file first and only then hands the text to `parse`.
"""

from __future__ import annotations

from pathlib import Path

from .config import BlocksConfig, validate_config
from .exceptions import ConfigError, ParseFileError
from .filesystem import collect_file_stat, enforce_file_size, get_max_file_size, safe_read
from .logger import get_logger
from .models import Document
from .parser import parse

logger = get_logger(__name__)


def read_markdown(filepath: Path, config: BlocksConfig | None = None) -> str:
    """Read a Markdown file as text after size checks.

    Args:
        filepath: Path to the file.
        config: Configuration providing the size limit; the
            ``MD_BLOCKS_MAX_FILE_SIZE`` environment variable takes precedence.

    Returns:
        str: Decoded file content.

    Raises:
        ParseFileError: If configuration is invalid, the file is too large,
            cannot be read, or is not valid UTF-8.
    """
    config = config or BlocksConfig()
    try:
        validate_config(config)
        max_file_size = get_max_file_size(default=config.max_file_size)
    except (ConfigError, ValueError) as error:
        raise ParseFileError(str(error)) from error

    try:
        stat_result = collect_file_stat(filepath)
    except IOError as error:
        raise ParseFileError(str(error)) from error
    enforce_file_size(stat_result, max_file_size, filepath)

    try:
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        raise ParseFileError(f"Invalid UTF-8 sequence in {filepath}: {error}") from error
    except IOError as error:
        raise ParseFileError(str(error)) from error

    logger.debug("Read %d characters from %s", len(content), filepath)
    return content


def parse_file(filepath: Path, config: BlocksConfig | None = None) -> Document:
    """Read and parse a Markdown file.

    Args:
        filepath: Path to the Markdown file.
        config: Optional configuration; defaults to `BlocksConfig()`.

    Returns:
        Document: Parse result for the file content.

    Raises:
        ParseFileError: If the file cannot be loaded. Parsing itself never
            fails.

    Examples:
        document = parse_file(Path("README.md"))
    """
    return parse(read_markdown(filepath, config))
