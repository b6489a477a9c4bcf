"""
Parses a Markdown file into blocks and link definitions.
Prints the result as JSON, or as a one-line-per-block summary.
"""

from __future__ import annotations

import logging

import click

from .config import build_config
from .exceptions import ConfigError, ParseFileError
from .filesystem import normalize_filepath
from .loader import parse_file
from .models import Code, Document, Heading, Paragraph, ThematicBreak
from .serialization import to_json

__all__ = ["cli"]

SUMMARY_WIDTH = 60


def _shorten(text: str, width: int = SUMMARY_WIDTH) -> str:
    text = text.replace("\n", "\\n")
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def render_summary(document: Document, include_links: bool = True) -> list[str]:
    """Describe each block on one line, followed by the link definitions.

    Examples:
        render_summary(parse("# Docs\\n"))  # ["heading(1): Docs"]
    """
    lines = []
    for block in document.blocks:
        if isinstance(block, Heading):
            lines.append(f"heading({block.level}): {_shorten(block.text)}")
        elif isinstance(block, Paragraph):
            lines.append(f"paragraph: {_shorten(block.text)}")
        elif isinstance(block, Code):
            line_count = block.content.count("\n")
            lines.append(f"code({block.language or '-'}): {line_count} lines")
        elif isinstance(block, ThematicBreak):
            lines.append("thematic_break")

    if include_links:
        for label, definition in document.link_definitions.items():
            title = f' "{definition.title}"' if definition.title is not None else ""
            lines.append(f"[{label}]: {definition.destination}{title}")

    return lines


@click.command()
@click.version_option()
@click.option("--indent", type=int, help="JSON indentation width")
@click.option("--links/--no-links", default=None, help="Include link definitions in the output")
@click.option("--summary", is_flag=True, help="Print one line per block instead of JSON")
@click.option("--verbose", "-v", is_flag=True, help="Log parsing details to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    indent: int | None = None,
    links: bool | None = None,
    summary: bool = False,
    verbose: bool = False,
):
    """
    Parse FILEPATH and print its blocks and link definitions.

    Args:
        filepath: Path to the Markdown file to parse.
        indent: Override for the JSON indentation width.
        links: Override for including link definitions.
        summary: Print a short per-block summary instead of JSON.
        verbose: Enable debug logging.

    Raises:
        click.BadParameter: If the path or configuration values are invalid.
        click.ClickException: If the file cannot be loaded.

    Examples:
        md-blocks README.md --indent 4 --no-links
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        path = normalize_filepath(filepath)
    except ValueError as error:
        raise click.BadParameter(str(error)) from error

    try:
        config = build_config(path.parent, json_indent=indent, include_links=links)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        document = parse_file(path, config)
    except ParseFileError as error:
        raise click.ClickException(str(error)) from error

    if summary:
        for line in render_summary(document, include_links=config.include_links):
            click.echo(line)
        return

    click.echo(to_json(document, indent=config.json_indent, include_links=config.include_links))


if __name__ == "__main__":
    cli()
