"""Bracket body expansion.

Parses the comma-separated content of one ``[...]`` into range items and
expands them into zero-padded numeric strings:

    >>> expand_body("01-03,07")
    ["01", "02", "03", "07"]
"""

from __future__ import annotations

import re
from typing import List

from sexpand.errors import (
    EmptyGroupError,
    InvalidRangeItemError,
    ReversedRangeError,
    WidthMismatchError,
)
from sexpand.notation.schema import Literal, Range, RangeItem

__all__ = [
    "parse_body",
    "parse_item",
    "expand_body",
    "expand_item",
    "zero_pad",
    "parse_operand",
    "MAX_OPERAND_DIGITS",
]

_ITEM_REGEX = re.compile(r"(\d+)(?:-(\d+))?", re.ASCII)

# Range operands longer than this are rejected before int() conversion
MAX_OPERAND_DIGITS = 64


def zero_pad(value: int, width: int) -> str:
    """Format ``value`` with leading zeros up to ``width`` digits.

    Values wider than ``width`` are never truncated.
    """
    return str(value).zfill(width)


def parse_operand(digits: str, fragment: str) -> int:
    """Convert one range operand to an int.

    Raises:
        InvalidRangeItemError: If the operand has more than
            ``MAX_OPERAND_DIGITS`` digits.
    """
    if len(digits) > MAX_OPERAND_DIGITS:
        raise InvalidRangeItemError(
            f"range operand in '{fragment[:40]}...' has {len(digits)} digits "
            f"(limit: {MAX_OPERAND_DIGITS})",
            fragment=fragment,
        )
    return int(digits)


def parse_item(item: str, lenient_width: bool = False) -> RangeItem:
    """Parse one bracket item, either ``digits`` or ``digits-digits``.

    Args:
        item: Item text, surrounding whitespace is ignored.
        lenient_width: Pad to the start operand's width when the operands
            have different digit counts instead of raising.

    Returns:
        ``Literal`` or ``Range``.

    Raises:
        EmptyGroupError: If the item is empty.
        InvalidRangeItemError: If the item is not numeric or an operand is
            longer than ``MAX_OPERAND_DIGITS``.
        WidthMismatchError: If range operands differ in width (strict mode).
        ReversedRangeError: If the range end is less than its start.
    """
    text = item.strip()
    if not text:
        raise EmptyGroupError("empty item in bracket body", fragment=item)

    match = _ITEM_REGEX.fullmatch(text)
    if match is None:
        raise InvalidRangeItemError(
            f"invalid bracket item '{text}': expected a number or a range "
            f"like 01-04",
            fragment=text,
        )

    start_str, end_str = match.groups()
    if end_str is None:
        return Literal(digits=start_str, width=len(start_str))

    if len(start_str) != len(end_str) and not lenient_width:
        raise WidthMismatchError(
            f"range '{text}' mixes widths {len(start_str)} and {len(end_str)}; "
            f"write both ends with the same number of digits",
            fragment=text,
        )

    start, end = parse_operand(start_str, text), parse_operand(end_str, text)
    if end < start:
        raise ReversedRangeError(
            f"range '{text}' ends before it starts", fragment=text
        )
    return Range(start=start, end=end, width=len(start_str))


def parse_body(body: str, lenient_width: bool = False) -> List[RangeItem]:
    """Parse a bracket body like ``01-04,07`` into range items.

    Raises:
        EmptyGroupError: If the body or any of its items is empty.
    """
    if not body.strip():
        raise EmptyGroupError("empty bracket body '[]'", fragment=f"[{body}]")
    return [parse_item(part, lenient_width) for part in body.split(",")]


def expand_item(item: RangeItem) -> List[str]:
    """Expand one range item into numeric strings."""
    if isinstance(item, Literal):
        return [item.digits]
    return [zero_pad(i, item.width) for i in range(item.start, item.end + 1)]


def expand_body(body: str, lenient_width: bool = False) -> List[str]:
    """Expand a bracket body into numeric strings in written order.

    Duplicates are kept; deduplication happens when groups are assembled.
    """
    values: List[str] = []
    for item in parse_body(body, lenient_width):
        values.extend(expand_item(item))
    return values
