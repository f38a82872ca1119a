"""
smart-quotes: Typographic quotes for German and English prose files.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    fix-smart-quotes post.md notes.md

Library Usage:
    from smart_quotes import convert_document

    result = convert_document('This is "a test" of smart quotes.')
    print(result.language.label, result.text)
"""

from .blocks import find_protected_ranges, protected_line_indices
from .converter import ConvertFileError, convert_document, convert_file, process_document
from .exceptions import ConversionError, RestoreLimitError
from .language import detect_language, detect_language_from_content, language_from_frontmatter
from .models import ConversionResult, Language, ProtectedRange, QuoteStyle, RangeKind, ToggleState
from .protector import SpanProtector, protect_line
from .toggler import convert_quotes, normalize_quotes

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "process_document",
    "convert_document",
    "convert_file",
    "convert_quotes",
    "normalize_quotes",
    "detect_language",
    "detect_language_from_content",
    "language_from_frontmatter",
    "find_protected_ranges",
    "protected_line_indices",
    "SpanProtector",
    "protect_line",
    # Data models
    "ConversionResult",
    "Language",
    "ProtectedRange",
    "QuoteStyle",
    "RangeKind",
    "ToggleState",
    # Exceptions
    "ConversionError",
    "ConvertFileError",
    "RestoreLimitError",
    # Version
    "__version__",
]
