"""Placeholder protection for spans that must keep their quotes."""

from __future__ import annotations

import re

from .constants import (
    DEFAULT_MAX_RESTORE_PASSES,
    PLACEHOLDER_PATTERN,
    PLACEHOLDER_PREFIX,
    PLACEHOLDER_SUFFIX,
    PROTECTION_PATTERNS,
)
from .exceptions import RestoreLimitError


class SpanProtector:
    """Swap protected spans for placeholder tokens and back.

    Each match is recorded in `segments` and replaced with a token carrying
    its index. Spans protected later may contain tokens from earlier passes,
    so `restore` substitutes repeatedly until the text stops changing.

    Args:
        max_passes: Maximum number of substitution passes `restore` may run.

    Examples:
        protector = SpanProtector()
        masked = protector.protect('see `x = "y"`', INLINE_CODE_PATTERN)
        protector.restore(masked)  # 'see `x = "y"`'
    """

    def __init__(self, max_passes: int = DEFAULT_MAX_RESTORE_PASSES):
        self.max_passes = max_passes
        self.segments: list[str] = []

    def protect(self, text: str, pattern: re.Pattern[str]) -> str:
        """Replace every match of `pattern` with a placeholder token."""
        return pattern.sub(self._record, text)

    def _record(self, match: re.Match[str]) -> str:
        index = len(self.segments)
        self.segments.append(match.group(0))
        return f"{PLACEHOLDER_PREFIX}{index}{PLACEHOLDER_SUFFIX}"

    def _lookup(self, match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(self.segments):
            return match.group(0)
        return self.segments[index]

    def restore(self, text: str) -> str:
        """Substitute placeholder tokens until none can be resolved.

        Raises:
            RestoreLimitError: If the text is still changing after
                `max_passes` passes.
        """
        result = text
        for _ in range(self.max_passes):
            restored = PLACEHOLDER_PATTERN.sub(self._lookup, result)
            if restored == result:
                return result
            result = restored
        raise RestoreLimitError(self.max_passes)

    def reset(self) -> None:
        self.segments.clear()


def protect_line(protector: SpanProtector, line: str) -> str:
    """Protect inline code, templating, attributes, and links in one line.

    Patterns run in a fixed order, each over the output of the previous one,
    so spans already replaced are invisible to later patterns.

    Args:
        protector: Protector recording the spans for this line.
        line: Line text without its newline.

    Returns:
        str: Line with every protected span replaced by a placeholder token.

    Examples:
        protect_line(SpanProtector(), '<a href="x">')  # '<a \\x00PROTECTED_0\\x00>'
    """
    for pattern in PROTECTION_PATTERNS:
        line = protector.protect(line, pattern)
    return line
