"""Exceptions raised while parsing, expanding, or substituting notations.

Every error derives from ``NotationError`` (itself a ``ValueError``) so callers
can catch the whole family at once. Errors are raised by the first component
that detects them and are never recovered from internally.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "NotationError",
    "UnmatchedBracketError",
    "NestedBracketError",
    "EmptyGroupError",
    "ReversedRangeError",
    "WidthMismatchError",
    "InvalidRangeItemError",
    "UnsupportedNotationError",
    "ExpansionLimitError",
    "MissingPlaceholderError",
]


class NotationError(ValueError):
    """Base class for all notation and template errors.

    Attributes:
        fragment: The offending piece of input, when known.
    """

    def __init__(self, message: str, fragment: Optional[str] = None) -> None:
        super().__init__(message)
        self.fragment = fragment

    @property
    def kind(self) -> str:
        """Short error kind used in diagnostics."""
        return type(self).__name__


class UnmatchedBracketError(NotationError):
    """A ``[`` without a matching ``]`` or vice versa."""


class NestedBracketError(NotationError):
    """A second ``[`` opened before the first one closed."""


class EmptyGroupError(NotationError):
    """An empty comma-delimited segment or an empty bracket body."""


class ReversedRangeError(NotationError):
    """A range whose end is numerically less than its start."""


class WidthMismatchError(NotationError):
    """A range whose start and end are written with different digit counts."""


class InvalidRangeItemError(NotationError):
    """A bracket item that is neither ``digits`` nor ``digits-digits``."""


class UnsupportedNotationError(NotationError):
    """Notation outside the supported subset, such as two bracket groups."""


class ExpansionLimitError(NotationError):
    """Expansion would produce more hostnames than the configured limit."""


class MissingPlaceholderError(NotationError):
    """Substitution requested but the template has no placeholder."""
