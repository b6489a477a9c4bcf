"""Package-specific exception types.

The parsing core never raises for any input string; these errors belong to
the layers around it (configuration and file loading).
"""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when configuration values are invalid.

    Examples:
        raise ConfigError("`max_file_size` must be a positive integer")
    """


class ParseFileError(Exception):
    """Raised when a Markdown file cannot be loaded for parsing."""


class FileTooLargeError(ParseFileError):
    """Raised when a file exceeds the configured size limit.

    Args:
        filepath: Path of the rejected file.
        max_size: Maximum allowed size in bytes.
    """

    def __init__(self, filepath: object, max_size: int):
        self.filepath = filepath
        self.max_size = max_size
        super().__init__(f"{filepath} exceeds the maximum allowed size of {max_size} bytes.")
