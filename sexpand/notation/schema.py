"""Data model for parsed notations.

A notation such as ``n[02-03,09-11],n01`` parses into one ``Group`` per
top-level segment. Each group carries literal ``prefix``/``suffix`` text and an
optional numeric part, which is a tagged variant:

- ``None``: the segment is a plain hostname.
- ``InlineRange``: an unbracketed hyphen range such as ``n1-n4``.
- ``BracketBody``: a bracketed list of ``Literal`` and ``Range`` items.

``ExpandedSet`` is the sorted, duplicate-free result of expanding groups.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple, Union, overload

__all__ = [
    "Literal",
    "Range",
    "RangeItem",
    "InlineRange",
    "BracketBody",
    "NumericPart",
    "Group",
    "ExpandedSet",
]


@dataclass(frozen=True)
class Literal:
    """A bare number inside a bracket body, kept as written.

    Attributes:
        digits: Digit string including leading zeros.
        width: Number of digits as written.
    """

    digits: str
    width: int


@dataclass(frozen=True)
class Range:
    """An inclusive ``start-end`` range inside a bracket body.

    Attributes:
        start: First value.
        end: Last value, never less than ``start``.
        width: Zero-padding width applied to every produced number.
    """

    start: int
    end: int
    width: int

    def count(self) -> int:
        """Number of values in the range; may exceed ``sys.maxsize``."""
        return self.end - self.start + 1


RangeItem = Union[Literal, Range]


@dataclass(frozen=True)
class InlineRange:
    """An unbracketed hyphen range; numbers keep their natural width."""

    start: int
    end: int

    def count(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class BracketBody:
    """Items of one ``[...]`` body in the order they were written."""

    items: Tuple[RangeItem, ...] = field(default_factory=tuple)

    def size(self) -> int:
        """Upper bound on the number of strings this body expands to."""
        return sum(
            item.count() if isinstance(item, Range) else 1 for item in self.items
        )


NumericPart = Union[InlineRange, BracketBody]


@dataclass(frozen=True)
class Group:
    """One top-level comma-separated unit of a notation.

    Attributes:
        prefix: Literal text before the numeric part. For a pure literal group
            this is the whole hostname.
        numeric_part: ``None``, ``InlineRange`` or ``BracketBody``.
        suffix: Literal text after the numeric part.
    """

    prefix: str
    numeric_part: Optional[NumericPart] = None
    suffix: str = ""

    @property
    def is_literal(self) -> bool:
        return self.numeric_part is None


class ExpandedSet(Sequence[str]):
    """Immutable, duplicate-free hostnames in ascending lexicographic order.

    Compares equal to another ``ExpandedSet`` or to any list/tuple holding the
    same tokens in the same order.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: Tuple[str, ...] = tuple(sorted(set(tokens)))

    @property
    def tokens(self) -> Tuple[str, ...]:
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[str, ...]: ...

    def __getitem__(self, index):
        return self._tokens[index]

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        i = bisect_left(self._tokens, token)
        return i < len(self._tokens) and self._tokens[i] == token

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExpandedSet):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return self._tokens == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __or__(self, other: Iterable[str]) -> "ExpandedSet":
        return ExpandedSet((*self._tokens, *other))

    def __repr__(self) -> str:
        return f"ExpandedSet({list(self._tokens)!r})"

    def join(self, separator: str = ",") -> str:
        """Join the tokens with ``separator``."""
        return separator.join(self._tokens)
