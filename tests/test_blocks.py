from __future__ import annotations

from smart_quotes.blocks import find_protected_ranges, is_protected_line, protected_line_indices
from smart_quotes.constants import CODE_FENCE
from smart_quotes.models import ProtectedRange, RangeKind


def test_frontmatter_range_includes_delimiters():
    lines = ["---", 'title: "Post"', "---", "Text"]

    assert find_protected_ranges(lines) == [
        ProtectedRange(start=0, end=2, kind=RangeKind.FRONTMATTER)
    ]


def test_frontmatter_delimiters_may_carry_whitespace():
    lines = ["---  ", "lang: de", " ---", "Text"]

    assert protected_line_indices(lines) == {0, 1, 2}


def test_frontmatter_only_recognized_on_first_line():
    lines = ["Text", "---", "title: x", "---"]

    assert find_protected_ranges(lines) == []


def test_code_blocks_are_found():
    lines = ["Intro", f"{CODE_FENCE}python", 'x = "y"', CODE_FENCE, "Outro"]

    assert find_protected_ranges(lines) == [
        ProtectedRange(start=1, end=3, kind=RangeKind.CODEBLOCK)
    ]
    assert protected_line_indices(lines) == {1, 2, 3}


def test_indented_fence_counts():
    lines = ["- item", f"  {CODE_FENCE}", '  "code"', f"  {CODE_FENCE}", "after"]

    assert protected_line_indices(lines) == {1, 2, 3}


def test_second_opening_fence_closes_block():
    lines = [f"{CODE_FENCE}js", "a", f"{CODE_FENCE}python", "b"]

    assert protected_line_indices(lines) == {0, 1, 2}


def test_unterminated_code_block_protects_to_end():
    lines = ["Text", CODE_FENCE, "code", "more code"]

    ranges = find_protected_ranges(lines)

    assert ranges == [ProtectedRange(start=1, end=3, kind=RangeKind.CODEBLOCK)]


def test_unterminated_frontmatter_protects_to_end():
    lines = ["---", "title: x", "Text"]

    assert protected_line_indices(lines) == {0, 1, 2}


def test_frontmatter_and_code_blocks_combine():
    lines = ["---", "lang: en", "---", "Text", CODE_FENCE, "code", CODE_FENCE, "End"]

    assert protected_line_indices(lines) == {0, 1, 2, 4, 5, 6}


def test_is_protected_line():
    ranges = [ProtectedRange(start=2, end=4, kind=RangeKind.CODEBLOCK)]

    assert not is_protected_line(ranges, 1)
    assert is_protected_line(ranges, 2)
    assert is_protected_line(ranges, 4)
    assert not is_protected_line(ranges, 5)


def test_empty_document_has_no_ranges():
    assert find_protected_ranges([""]) == []
    assert find_protected_ranges([]) == []
