from __future__ import annotations

import pytest

from smart_quotes.constants import INLINE_CODE_PATTERN, PLACEHOLDER_PREFIX, PLACEHOLDER_SUFFIX
from smart_quotes.exceptions import RestoreLimitError
from smart_quotes.protector import SpanProtector, protect_line


def _token(index: int) -> str:
    return f"{PLACEHOLDER_PREFIX}{index}{PLACEHOLDER_SUFFIX}"


def test_protect_replaces_matches_with_indexed_tokens():
    protector = SpanProtector()

    masked = protector.protect('Run `echo "x"` or `ls`', INLINE_CODE_PATTERN)

    assert masked == f"Run {_token(0)} or {_token(1)}"
    assert protector.segments == ['`echo "x"`', "`ls`"]


def test_restore_returns_original_text():
    protector = SpanProtector()
    original = 'Run `echo "x"` now'

    masked = protector.protect(original, INLINE_CODE_PATTERN)

    assert protector.restore(masked) == original


def test_protect_without_matches_is_a_no_op():
    protector = SpanProtector()

    assert protector.protect("plain text", INLINE_CODE_PATTERN) == "plain text"
    assert protector.segments == []


def test_reset_clears_segments():
    protector = SpanProtector()
    protector.protect("`a`", INLINE_CODE_PATTERN)

    protector.reset()

    assert protector.segments == []


def test_unknown_tokens_are_left_alone():
    protector = SpanProtector()

    assert protector.restore(f"keep {_token(7)}") == f"keep {_token(7)}"


def test_nested_protection_is_unwound():
    protector = SpanProtector()
    original = '[link](https://example.com/?q="x")'

    masked = protect_line(protector, original)

    assert masked == _token(1)
    assert protector.segments[0] == 'q="x"'
    assert protector.restore(masked) == original


def test_self_referencing_segment_hits_pass_limit():
    protector = SpanProtector(max_passes=5)
    masked = protector.protect(f"`{_token(0)}`", INLINE_CODE_PATTERN)

    with pytest.raises(RestoreLimitError) as excinfo:
        protector.restore(masked)

    assert excinfo.value.max_passes == 5


@pytest.mark.parametrize(
    "line",
    [
        '`echo "test"`',
        '{% include note.html text="Hi" %}',
        '{{ page.date | date: "%Y-%m-%d" }}',
        '{: title="tooltip"}',
        'href="https://example.com"',
        "style='color: red;'",
        'title="say \\"hi\\""',
        '[test](https://example.com "title")',
    ],
)
def test_protect_line_covers_whole_construct(line):
    protector = SpanProtector()

    masked = protect_line(protector, line)

    assert masked == _token(len(protector.segments) - 1)
    assert protector.restore(masked) == line


def test_kramdown_attributes_are_protected_before_html_attributes():
    protector = SpanProtector()

    protect_line(protector, 'Text {: title="tooltip" .note}')

    assert protector.segments == ['{: title="tooltip" .note}']


def test_inline_code_shields_its_content_from_later_patterns():
    protector = SpanProtector()

    protect_line(protector, '`<a href="x">` and href="y"')

    assert protector.segments == ['`<a href="x">`', 'href="y"']


def test_protect_line_leaves_prose_quotes_visible():
    protector = SpanProtector()

    masked = protect_line(protector, '<a href="value">Das ist "gut"</a>')

    assert masked == f'<a {_token(0)}>Das ist "gut"</a>'
