"""Package-specific exception types."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for errors raised while converting document text."""


class RestoreLimitError(ConversionError):
    """Raised when protected spans cannot be restored to a fixed point.

    Happens only when a protected segment contains its own placeholder token,
    which would otherwise expand forever.

    Args:
        max_passes: Number of restore passes attempted.
    """

    def __init__(self, max_passes: int):
        self.max_passes = max_passes
        super().__init__(
            f"Protected spans did not settle after {self.max_passes} restore passes"
        )
