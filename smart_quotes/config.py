"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

SUPPORTED_LANGUAGES = ("de", "en")


@dataclass
class QuotesConfig:
    """Configuration for converting straight quotes.

    Attributes:
        lang: Language code (``"de"`` or ``"en"``) used instead of the word
            heuristic, or None to detect it. A ``lang:`` key in a document's
            frontmatter still takes precedence.
        max_file_size: Maximum file size in bytes that will be processed.
        max_restore_passes: Maximum number of passes used to restore
            protected spans on a single line.

    Examples:
        QuotesConfig(lang="en", max_file_size=1024)
    """

    lang: str | None = None

    # Limits
    max_file_size: int = 10 * 1024 * 1024
    max_restore_passes: int = 100


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`lang` must be one of: de, en")
    """


def load_config(search_path: Path) -> QuotesConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.smart-quotes]`` table from `pyproject.toml` and the
    ``[smart-quotes]`` or ``[tool.smart-quotes]`` table from
    `.smart-quotes.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        QuotesConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If a table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", "smart-quotes")]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / ".smart-quotes.toml",
            table_paths=[("smart-quotes",), ("tool", "smart-quotes")],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return QuotesConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> QuotesConfig | None:
    if not config_file.exists():
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
) -> QuotesConfig:
    table_display = ".".join(table_path)

    if raw_config is None:
        return QuotesConfig()

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return QuotesConfig()

    try:
        return QuotesConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: QuotesConfig) -> None:
    """Validate a `QuotesConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If the language is unsupported or a limit is not a
            positive integer.

    Examples:
        validate_config(QuotesConfig(lang="de"))
    """
    if config.lang is not None and config.lang not in SUPPORTED_LANGUAGES:
        raise ConfigError(f"`lang` must be one of: {', '.join(SUPPORTED_LANGUAGES)}")

    limits = {
        "max_file_size": config.max_file_size,
        "max_restore_passes": config.max_restore_passes,
    }
    _ensure_integers(limits)
    _ensure_positive(limits)


def apply_overrides(config: QuotesConfig, **overrides: object) -> QuotesConfig:
    """Apply override values to a `QuotesConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set to
            None are ignored.

    Returns:
        QuotesConfig: New configuration with the overrides applied, or the
        original configuration when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `QuotesConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> QuotesConfig:
    """Load, override, and validate configuration.

    Examples:
        config = build_config(Path.cwd(), lang="en")
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")
