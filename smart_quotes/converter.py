"""Document and file level quote conversion."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .blocks import find_protected_ranges, is_protected_line
from .config import QuotesConfig, validate_config
from .constants import QUOTE_STYLES
from .exceptions import ConversionError
from .filesystem import (
    collect_file_stat,
    enforce_file_size,
    get_max_file_size,
    safe_read,
    write_in_place,
)
from .language import detect_language
from .models import ConversionResult, Language, ToggleState
from .protector import SpanProtector, protect_line
from .toggler import convert_quotes


def convert_document(content: str, config: QuotesConfig | None = None) -> ConversionResult:
    """Convert straight quotes in a document to typographic quotes.

    The language is detected once for the whole document. Frontmatter and
    fenced code block lines are copied unchanged. Every other line has its
    inline code, templating tags, attributes, and links protected before its
    quotes are converted, and restored afterwards. The toggle state runs
    through all lines, so a quotation may span several lines.

    Args:
        content: Full document text.
        config: Configuration controlling language fallback and limits.
            Defaults to a new `QuotesConfig` when omitted.

    Returns:
        ConversionResult: Converted text, applied language, and final state.

    Raises:
        ConfigError: If the configuration fails validation.
        RestoreLimitError: If protected spans on a line cannot be restored.

    Examples:
        convert_document('Sie sagte: "Das ist wichtig."').text
        # 'Sie sagte: „Das ist wichtig.“'
    """
    config = config or QuotesConfig()
    validate_config(config)

    lines = content.split("\n")
    protected_ranges = find_protected_ranges(lines)

    default_language = Language.from_code(config.lang) if config.lang else None
    language = detect_language(content, default=default_language)
    style = QUOTE_STYLES[language]

    protector = SpanProtector(max_passes=config.max_restore_passes)
    state = ToggleState()
    result_lines: list[str] = []

    for line_number, line in enumerate(lines):
        if is_protected_line(protected_ranges, line_number):
            result_lines.append(line)
            continue

        protector.reset()
        processed = protect_line(protector, line)
        processed, state = convert_quotes(processed, state, style)
        result_lines.append(protector.restore(processed))

    text = "\n".join(result_lines)
    return ConversionResult(text=text, language=language, state=state, changed=text != content)


def process_document(content: str) -> str:
    """Return `content` with its straight quotes converted."""
    return convert_document(content).text


class ConvertFileError(Exception):
    """Raised when converting a file fails."""


def convert_file(
    filepath: Path,
    config: QuotesConfig | None = None,
    warn: Callable[[str], None] | None = None,
) -> ConversionResult:
    """Convert the quotes of a UTF-8 file in place.

    The file is only rewritten when the conversion changes its content.

    Args:
        filepath: Path to the file to convert.
        config: Configuration controlling conversion and limits; defaults to
            a new `QuotesConfig` when omitted.
        warn: Optional callback for non-fatal warnings.

    Returns:
        ConversionResult: Result of converting the file content.

    Raises:
        ConvertFileError: If the configuration is invalid, the file is too
            large, cannot be read, decoded, converted, or written.

    Examples:
        result = convert_file(Path("post.md"))
        result.language.label  # "German"
    """
    config = config or QuotesConfig()
    try:
        validate_config(config)
        max_file_size = get_max_file_size(default=config.max_file_size)
    except ValueError as error:
        raise ConvertFileError(str(error)) from error

    try:
        initial_stat = collect_file_stat(filepath)
        enforce_file_size(initial_stat, max_file_size, filepath)
        with safe_read(filepath) as file:
            content = file.read()
    except UnicodeDecodeError as error:
        error_message = f"Invalid UTF-8 sequence in {filepath}: {error}"
        raise ConvertFileError(error_message) from error
    except IOError as error:
        raise ConvertFileError(str(error)) from error

    try:
        result = convert_document(content, config)
    except ConversionError as error:
        error_message = f"{filepath}: {error}"
        raise ConvertFileError(error_message) from error

    if result.changed:
        try:
            write_in_place(filepath, result.text, initial_stat, warn=warn)
        except IOError as error:
            raise ConvertFileError(str(error)) from error

    return result
