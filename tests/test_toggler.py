from __future__ import annotations

from smart_quotes.constants import QUOTE_STYLES
from smart_quotes.models import Language, ToggleState
from smart_quotes.toggler import convert_quotes, is_letter, normalize_quotes

GERMAN = QUOTE_STYLES[Language.GERMAN]
ENGLISH = QUOTE_STYLES[Language.ENGLISH]


def test_double_quotes_alternate_in_english():
    text, state = convert_quotes('This is "a test" of smart quotes.', ToggleState(), ENGLISH)

    assert text == "This is “a test” of smart quotes."
    assert state == ToggleState()


def test_double_quotes_alternate_in_german():
    text, _ = convert_quotes('Sie sagte: "Das ist wichtig."', ToggleState(), GERMAN)

    assert text == "Sie sagte: „Das ist wichtig.“"


def test_single_quotes_use_language_glyphs():
    german, _ = convert_quotes("Er nannte es 'klein'.", ToggleState(), GERMAN)
    english, _ = convert_quotes("He called it 'small'.", ToggleState(), ENGLISH)

    assert german == "Er nannte es ‚klein‘."
    assert english == "He called it ‘small’."


def test_state_carries_an_open_quote_to_the_next_line():
    first, state = convert_quotes('He said "hello', ToggleState(), ENGLISH)
    assert state.double_quote_open is False

    second, state = convert_quotes('world" and left.', state, ENGLISH)

    assert first == "He said “hello"
    assert second == "world” and left."
    assert state.double_quote_open is True


def test_apostrophe_between_letters_is_kept():
    text, state = convert_quotes("it's what we've got", ToggleState(), ENGLISH)

    assert text == "it's what we've got"
    assert state == ToggleState()


def test_apostrophe_between_umlauts_is_kept():
    text, _ = convert_quotes("geht's, Ä'Ü", ToggleState(), GERMAN)

    assert text == "geht's, Ä'Ü"


def test_apostrophe_does_not_touch_single_state():
    start = ToggleState(single_quote_open=False)

    _, state = convert_quotes("it's", start, ENGLISH)

    assert state.single_quote_open is False


def test_leading_elision_is_treated_as_opening_quote():
    text, state = convert_quotes("'twas", ToggleState(), ENGLISH)

    assert text == "‘twas"
    assert state.single_quote_open is False


def test_typographic_quotes_are_reconverted():
    text, _ = convert_quotes("Das ist “falsch” und »auch«.", ToggleState(), GERMAN)

    assert text == "Das ist „falsch“ und „auch“."


def test_unbalanced_quotes_flip_later_text():
    text, state = convert_quotes('"a" "b', ToggleState(), ENGLISH)

    assert text == "“a” “b"
    assert state.double_quote_open is False


def test_input_state_is_not_mutated():
    start = ToggleState()

    convert_quotes('"open', start, ENGLISH)

    assert start == ToggleState()


def test_text_without_quotes_is_unchanged():
    text, state = convert_quotes("Nothing to see here.", ToggleState(), ENGLISH)

    assert text == "Nothing to see here."
    assert state == ToggleState()


def test_normalize_quotes_maps_all_forms_to_straight():
    assert normalize_quotes("„a“ “b” ‟c«»") == '"a" "b" "c""'
    assert normalize_quotes("‚a‘ ’ ‛") == "'a' ' '"


def test_is_letter():
    assert is_letter("a")
    assert is_letter("ß")
    assert is_letter("Ö")
    assert not is_letter("1")
    assert not is_letter(" ")
    assert not is_letter("")
