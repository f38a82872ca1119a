"""
Converts straight quotes in prose files into German or English typographic quotes.
Each file is rewritten in place; code, markup attributes, templating tags, and
link targets keep their straight quotes.
"""

from __future__ import annotations

from pathlib import Path

import click
from .config import SUPPORTED_LANGUAGES, ConfigError, build_config
from .converter import ConvertFileError, convert_file

__all__ = ["cli"]


def _warn(message: str) -> None:
    click.echo(message, err=True)


def _fix_file(raw_path: str, lang: str | None) -> bool:
    filepath = Path(raw_path).expanduser()
    if not filepath.exists():
        _warn(f"Error: File not found: {raw_path}")
        return False

    try:
        config = build_config(filepath.resolve().parent, lang=lang)
        result = convert_file(filepath, config, warn=_warn)
    except (ConfigError, ConvertFileError) as error:
        _warn(f"Error processing {raw_path}: {error}")
        return False

    click.echo(f"✓ Fixed quotes ({result.language.label}): {raw_path}")
    return True


@click.command()
@click.version_option()
@click.option(
    "--lang",
    type=click.Choice(SUPPORTED_LANGUAGES),
    help="Language to use when the frontmatter declares none (skips detection).",
)
@click.argument("files", nargs=-1, required=True, type=click.Path())
@click.pass_context
def cli(ctx: click.Context, files: tuple[str, ...], lang: str | None = None):
    """
    Entry point for converting straight quotes in one or more files.

    Every file is processed even when an earlier one fails.

    Args:
        ctx: Click context used to set the exit status.
        files: Paths of the files to rewrite in place.
        lang: Fallback language code (`de` or `en`) overriding detection.

    Returns:
        None. Exits with status 1 when any file failed.

    Examples:
        fix-smart-quotes README.md docs/*.md --lang en
    """
    has_errors = False
    for raw_path in files:
        if not _fix_file(raw_path, lang):
            has_errors = True

    ctx.exit(1 if has_errors else 0)


if __name__ == "__main__":
    cli()
