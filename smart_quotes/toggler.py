"""Open/close decisions for straight quote characters."""

from __future__ import annotations

from dataclasses import replace

from .constants import (
    APOSTROPHE_LETTERS,
    STRAIGHT_DOUBLE,
    STRAIGHT_SINGLE,
    TYPOGRAPHIC_DOUBLES,
    TYPOGRAPHIC_SINGLES,
)
from .models import QuoteStyle, ToggleState

_NORMALIZE_TABLE = str.maketrans(
    {
        **{char: STRAIGHT_DOUBLE for char in TYPOGRAPHIC_DOUBLES},
        **{char: STRAIGHT_SINGLE for char in TYPOGRAPHIC_SINGLES},
    }
)


def normalize_quotes(text: str) -> str:
    """Map curly and angled quotation marks back to straight quotes.

    Examples:
        normalize_quotes("„Hallo“")  # '"Hallo"'
        normalize_quotes("it’s")  # "it's"
    """
    return text.translate(_NORMALIZE_TABLE)


def is_letter(char: str) -> bool:
    return char in APOSTROPHE_LETTERS


def convert_quotes(
    text: str, state: ToggleState, style: QuoteStyle
) -> tuple[str, ToggleState]:
    """Replace straight quotes in `text` with typographic quotes.

    Every double quote toggles between the opening and closing glyph. A single
    quote with a letter on both sides is an apostrophe and stays as it is;
    any other single quote toggles like a double quote. Balance is not
    checked, so an unmatched quote flips every later decision in the
    document.

    Args:
        text: Line text, with protected spans already replaced by placeholders.
        state: Toggle state left behind by the previous line.
        style: Glyphs of the document language.

    Returns:
        tuple[str, ToggleState]: Converted text and the state for the next line.

    Examples:
        convert_quotes('"Hi"', ToggleState(), QUOTE_STYLES[Language.ENGLISH])
        # ("“Hi”", ToggleState(double_quote_open=True, single_quote_open=True))
    """
    normalized = normalize_quotes(text)
    double_open = state.double_quote_open
    single_open = state.single_quote_open
    processed = []

    for index, char in enumerate(normalized):
        if char == STRAIGHT_DOUBLE:
            processed.append(style.open_double if double_open else style.close_double)
            double_open = not double_open
        elif char == STRAIGHT_SINGLE:
            prev_char = normalized[index - 1] if index > 0 else ""
            next_char = normalized[index + 1] if index + 1 < len(normalized) else ""

            # Apostrophes inside words: it's, we've, Grimm's
            if is_letter(prev_char) and is_letter(next_char):
                processed.append(char)
                continue

            processed.append(style.open_single if single_open else style.close_single)
            single_open = not single_open
        else:
            processed.append(char)

    new_state = replace(state, double_quote_open=double_open, single_quote_open=single_open)
    return "".join(processed), new_state
