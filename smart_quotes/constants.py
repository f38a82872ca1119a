"""Constants used across the smart-quotes package."""

from __future__ import annotations

import re

from .config import QuotesConfig
from .models import Language, QuoteStyle

DEFAULT_CONFIG = QuotesConfig()
DEFAULT_MAX_FILE_SIZE = DEFAULT_CONFIG.max_file_size
DEFAULT_MAX_RESTORE_PASSES = DEFAULT_CONFIG.max_restore_passes

# Language detection
GERMAN_MARKERS = frozenset(
    {
        "und", "der", "die", "das", "ist", "für", "mit", "auf", "ein", "eine",
        "nicht", "sich", "auch", "dass", "werden", "sein", "haben", "können",
        "mehr", "oder", "wenn", "aber", "wird", "sind", "wurde", "durch",
        "bei", "nach", "vom", "zum", "zur", "aus", "wie", "kann", "noch",
        "nur", "über", "diese", "dieser", "dieses", "einem", "einen", "einer",
    }
)

ENGLISH_MARKERS = frozenset(
    {
        "the", "and", "is", "of", "to", "in", "that", "for", "with", "this",
        "from", "are", "have", "was", "been", "will", "would", "could", "should",
        "which", "their", "there", "about", "into", "what", "when", "where",
        "can", "has", "had", "but", "not", "you", "all", "were", "they", "be",
        "how", "than", "then", "some", "these", "those", "such", "only", "also",
    }
)

WORD_PATTERN = re.compile(r"\b[a-zäöüß]+\b")
FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
FRONTMATTER_LANG_PATTERN = re.compile(r"^lang:[ \t]*(de|en)[ \t]*\r?$", re.MULTILINE)

# Quote glyphs
QUOTE_STYLES = {
    Language.GERMAN: QuoteStyle(
        open_double="\u201E",  # „
        close_double="\u201C",  # “
        open_single="\u201A",  # ‚
        close_single="\u2018",  # ‘
    ),
    Language.ENGLISH: QuoteStyle(
        open_double="\u201C",  # “
        close_double="\u201D",  # ”
        open_single="\u2018",  # ‘
        close_single="\u2019",  # ’
    ),
}

STRAIGHT_DOUBLE = '"'
STRAIGHT_SINGLE = "'"
TYPOGRAPHIC_DOUBLES = "\u201C\u201D\u201E\u201F\u00AB\u00BB"
TYPOGRAPHIC_SINGLES = "\u2018\u2019\u201A\u201B"
APOSTROPHE_LETTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZäöüßÄÖÜ"
)

# Block-level delimiters
FRONTMATTER_DELIMITER = "---"
CODE_FENCE = "```"

# Inline protection patterns, applied in this order
INLINE_CODE_PATTERN = re.compile(r"`[^`]+`")
LIQUID_TAG_PATTERN = re.compile(r"\{%.*?%\}", re.DOTALL)
LIQUID_OUTPUT_PATTERN = re.compile(r"\{\{.*?\}\}", re.DOTALL)
# Must run before HTML_ATTR_PATTERN, which would otherwise match inside `{: title="..."}`.
KRAMDOWN_ATTR_PATTERN = re.compile(r"\{:[^}]*\}")
HTML_ATTR_PATTERN = re.compile(
    r"""\b([a-z][a-z0-9-]*)\s*=\s*(["'])((?:(?!\2)[^\\]|\\.)*)\2""",
    re.IGNORECASE | re.ASCII,
)
MARKDOWN_LINK_PATTERN = re.compile(r"\[([^\]]*)\]\([^)]+\)")

PROTECTION_PATTERNS = (
    INLINE_CODE_PATTERN,
    LIQUID_TAG_PATTERN,
    LIQUID_OUTPUT_PATTERN,
    KRAMDOWN_ATTR_PATTERN,
    HTML_ATTR_PATTERN,
    MARKDOWN_LINK_PATTERN,
)

# Placeholders standing in for protected spans
PLACEHOLDER_PREFIX = "\x00PROTECTED_"
PLACEHOLDER_SUFFIX = "\x00"
PLACEHOLDER_PATTERN = re.compile(
    rf"{re.escape(PLACEHOLDER_PREFIX)}(\d+){re.escape(PLACEHOLDER_SUFFIX)}"
)
