"""Data models for smart-quotes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Language(Enum):
    """Quotation conventions supported by the converter.

    Attributes:
        GERMAN: German quotes (``„…“`` and ``‚…‘``).
        ENGLISH: English quotes (``“…”`` and ``‘…’``).
    """

    GERMAN = "de"
    ENGLISH = "en"

    @property
    def label(self) -> str:
        return "German" if self is Language.GERMAN else "English"

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Return the language for a two-letter code such as ``"de"``.

        Raises:
            ValueError: If the code is not ``"de"`` or ``"en"``.
        """
        return cls(code)


@dataclass(frozen=True)
class QuoteStyle:
    """Glyphs used for one language's quotation marks."""

    open_double: str
    close_double: str
    open_single: str
    close_single: str


@dataclass(frozen=True)
class ToggleState:
    """Open/close flags carried across the lines of one document.

    A flag is True while the next quote of that kind opens a quotation.

    Attributes:
        double_quote_open: Whether the next double quote is an opening quote.
        single_quote_open: Whether the next single quote is an opening quote.
    """

    double_quote_open: bool = True
    single_quote_open: bool = True


class RangeKind(Enum):
    """Kinds of line ranges excluded from conversion."""

    FRONTMATTER = auto()
    CODEBLOCK = auto()


@dataclass
class ProtectedRange:
    """Inclusive range of line indices excluded from conversion.

    Attributes:
        start: Index of the opening delimiter line.
        end: Index of the closing delimiter line, or None while unterminated.
        kind: What opened the range.
    """

    start: int
    end: int | None
    kind: RangeKind

    def contains(self, index: int) -> bool:
        if index < self.start:
            return False
        return self.end is None or index <= self.end


@dataclass
class ConversionResult:
    """Outcome of converting one document.

    Attributes:
        text: Converted document text.
        language: Language whose quote style was applied.
        state: Toggle state after the last line.
        changed: Whether the converted text differs from the input.
    """

    text: str
    language: Language
    state: ToggleState
    changed: bool
