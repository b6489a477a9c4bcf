"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib

from .constants import DEFAULT_MAX_FILE_SIZE
from .exceptions import ConfigError

CONFIG_TABLE = "md-blocks"
DOTFILE_NAME = ".md-blocks.toml"


@dataclass
class BlocksConfig:
    """Configuration for loading and printing parsed documents.

    The parser itself takes no options; these settings govern the file
    loader and the command-line output.

    Attributes:
        max_file_size: Maximum file size in bytes that will be parsed.
        json_indent: Indentation used when printing JSON output.
        include_links: Whether JSON output carries the link definition table.

    Examples:
        BlocksConfig(max_file_size=1024, json_indent=4)
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    json_indent: int = 2
    include_links: bool = True


def load_config(search_path: Path) -> BlocksConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root,
    reading the ``[tool.md-blocks]`` table from `pyproject.toml` and the
    ``[md-blocks]`` or ``[tool.md-blocks]`` table from `.md-blocks.toml`.
    TOML files that cannot be read or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for lookup.

    Returns:
        BlocksConfig: Loaded configuration, or defaults when none is found.

    Raises:
        ConfigError: If a table exists but is not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / DOTFILE_NAME,
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return BlocksConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> BlocksConfig | None:
    if not config_file.is_file():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> BlocksConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    known = {f.name for f in fields(BlocksConfig)}
    unknown = sorted(set(raw_config) - known)
    if unknown:
        raise ConfigError(
            f"Unsupported keys in `[{table_display}]` of {config_file}: {', '.join(unknown)}"
        )

    return BlocksConfig(**raw_config)


def validate_config(config: BlocksConfig) -> None:
    """Validate a `BlocksConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a value has the wrong type, the size limit is not
            positive, or the JSON indent is negative.

    Examples:
        validate_config(BlocksConfig(json_indent=0))
    """
    _ensure_integers({"max_file_size": config.max_file_size, "json_indent": config.json_indent})

    if config.max_file_size <= 0:
        raise ConfigError("`max_file_size` must be a positive integer")
    if config.json_indent < 0:
        raise ConfigError("`json_indent` must be >= 0")
    if not isinstance(config.include_links, bool):
        raise ConfigError("`include_links` must be a boolean")


def apply_overrides(config: BlocksConfig, **overrides: object) -> BlocksConfig:
    """Apply override values to a `BlocksConfig`.

    Args:
        config: Base configuration.
        overrides: Values keyed by field name; None values are ignored.

    Returns:
        BlocksConfig: Updated configuration, or `config` itself when nothing
        changes.

    Raises:
        TypeError: If an override name is not a `BlocksConfig` field.

    Examples:
        apply_overrides(config, json_indent=4, include_links=None)
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> BlocksConfig:
    """Load, override, and validate configuration.

    Raises:
        ConfigError: If loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), json_indent=0)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
