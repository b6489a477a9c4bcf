"""Logging helpers for md-blocks.

The library never installs handlers; callers (or the CLI's ``--verbose``
flag) decide where records go.

Example:
    from md_blocks.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Parsed %d blocks", 3)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``md_blocks``.

    Args:
        name: Logger name, typically ``__name__``.

    Returns:
        logging.Logger: Standard library logger.

    Examples:
        get_logger("cli").name  # "md_blocks.cli"
    """
    if not (name == "md_blocks" or name.startswith("md_blocks.")):
        name = f"md_blocks.{name}"
    return logging.getLogger(name)
