"""Detection of whole lines that are never converted."""

from __future__ import annotations

from .constants import CODE_FENCE, FRONTMATTER_DELIMITER
from .models import ProtectedRange, RangeKind


def _find_frontmatter(lines: list[str]) -> ProtectedRange | None:
    """Locate a frontmatter block starting on the first line.

    Examples:
        _find_frontmatter(["---", "lang: de", "---", "Text"])
        # ProtectedRange(start=0, end=2, kind=RangeKind.FRONTMATTER)
    """
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return None

    frontmatter = ProtectedRange(start=0, end=None, kind=RangeKind.FRONTMATTER)
    for line_number in range(1, len(lines)):
        if lines[line_number].strip() == FRONTMATTER_DELIMITER:
            frontmatter.end = line_number
            break
    return frontmatter


def _find_code_blocks(lines: list[str]) -> list[ProtectedRange]:
    """Locate fenced code blocks.

    Any line starting with three backticks toggles the fence: fences do not
    nest, so a second opening fence closes the current block.
    """
    blocks: list[ProtectedRange] = []
    current: ProtectedRange | None = None

    for line_number, line in enumerate(lines):
        if not line.strip().startswith(CODE_FENCE):
            continue

        if current is None:
            current = ProtectedRange(start=line_number, end=None, kind=RangeKind.CODEBLOCK)
            blocks.append(current)
        else:
            current.end = line_number
            current = None

    return blocks


def find_protected_ranges(lines: list[str]) -> list[ProtectedRange]:
    """Compute the frontmatter and code block ranges of a document.

    Delimiter lines belong to their range. A block without a closing
    delimiter extends to the last line of the document.

    Args:
        lines: Document lines without newlines.

    Returns:
        list[ProtectedRange]: Ranges with `end` always set.

    Examples:
        find_protected_ranges(["Text", "```", "code", "```"])
        # [ProtectedRange(start=1, end=3, kind=RangeKind.CODEBLOCK)]
    """
    ranges: list[ProtectedRange] = []

    frontmatter = _find_frontmatter(lines)
    if frontmatter is not None:
        ranges.append(frontmatter)
    ranges.extend(_find_code_blocks(lines))

    last_line = len(lines) - 1
    for protected_range in ranges:
        if protected_range.end is None:
            protected_range.end = last_line

    return ranges


def is_protected_line(ranges: list[ProtectedRange], line_number: int) -> bool:
    return any(protected_range.contains(line_number) for protected_range in ranges)


def protected_line_indices(lines: list[str]) -> set[int]:
    """Return the indices of all lines inside frontmatter or code blocks."""
    ranges = find_protected_ranges(lines)
    return {
        line_number
        for line_number in range(len(lines))
        if is_protected_line(ranges, line_number)
    }
