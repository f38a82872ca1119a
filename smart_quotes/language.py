"""Language detection for quote conversion."""

from __future__ import annotations

from .constants import (
    ENGLISH_MARKERS,
    FRONTMATTER_LANG_PATTERN,
    FRONTMATTER_PATTERN,
    GERMAN_MARKERS,
    WORD_PATTERN,
)
from .models import Language


def language_from_frontmatter(text: str) -> Language | None:
    """Read an explicit ``lang:`` key from leading frontmatter.

    The document must start with a ``---`` line and contain a later ``---``
    line closing the block. Only ``lang: de`` and ``lang: en`` are recognized.

    Args:
        text: Full document text.

    Returns:
        Language | None: The declared language, or None when the document
            has no frontmatter or no recognized ``lang:`` line.

    Examples:
        language_from_frontmatter("---\\nlang: en\\n---\\nText")  # Language.ENGLISH
        language_from_frontmatter("lang: en")  # None
    """
    frontmatter_match = FRONTMATTER_PATTERN.match(text)
    if not frontmatter_match:
        return None

    lang_match = FRONTMATTER_LANG_PATTERN.search(frontmatter_match.group(1))
    if not lang_match:
        return None

    return Language.from_code(lang_match.group(1))


def score_language(text: str) -> tuple[int, int]:
    """Count German and English marker words in `text`.

    Returns:
        tuple[int, int]: German count and English count.

    Examples:
        score_language("Das ist gut")  # (2, 0)
    """
    german_score = 0
    english_score = 0

    for word in WORD_PATTERN.findall(text.lower()):
        if word in GERMAN_MARKERS:
            german_score += 1
        if word in ENGLISH_MARKERS:
            english_score += 1

    return german_score, english_score


def detect_language_from_content(text: str) -> Language:
    """Guess the prose language from marker word frequencies.

    English wins only with strictly more marker words than German. Ties,
    including documents without any marker words, resolve to German.

    Examples:
        detect_language_from_content("This is the test")  # Language.ENGLISH
        detect_language_from_content("Lorem ipsum")  # Language.GERMAN
    """
    german_score, english_score = score_language(text)
    return Language.ENGLISH if english_score > german_score else Language.GERMAN


def detect_language(text: str, default: Language | None = None) -> Language:
    """Determine the language whose quote style applies to a document.

    Frontmatter wins over everything else. When it declares nothing, the
    `default` language is used if given, otherwise the word heuristic.

    Args:
        text: Full document text.
        default: Language to use instead of the heuristic.

    Returns:
        Language: The document language.
    """
    declared = language_from_frontmatter(text)
    if declared is not None:
        return declared

    if default is not None:
        return default

    return detect_language_from_content(text)
