"""Notation parser.

Turns a raw notation such as ``n[02-03,09-11],n01`` into ``Group`` objects.
Splitting happens in one left-to-right scan that tracks bracket depth, so
commas inside ``[...]`` never split a group. Bracket depth is capped at one.
"""

from __future__ import annotations

import re
from typing import List, Optional

from sexpand.config import DEFAULT_CONFIG, ExpansionConfig
from sexpand.errors import (
    EmptyGroupError,
    NestedBracketError,
    ReversedRangeError,
    UnmatchedBracketError,
    UnsupportedNotationError,
)
from sexpand.logging import get_logger
from sexpand.notation.brackets import parse_body, parse_operand
from sexpand.notation.schema import BracketBody, Group, InlineRange

__all__ = [
    "split_groups",
    "parse_group",
    "parse",
]

logger = get_logger(__name__)

# <prefix><start>-[<prefix>]<end><suffix>; the end may repeat the prefix (n1-n4)
_INLINE_RANGE_REGEX = re.compile(
    r"(?P<prefix>.*?)(?P<start>\d+)-(?P=prefix)?(?P<end>\d+)(?P<suffix>\D*)",
    re.ASCII | re.DOTALL,
)


def split_groups(notation: str) -> List[str]:
    """Split a notation on commas that are not inside brackets.

    Args:
        notation: Raw notation string.

    Returns:
        Top-level segments, unstripped, in input order.

    Raises:
        NestedBracketError: If ``[`` appears inside an open bracket.
        UnmatchedBracketError: If brackets do not pair up.
    """
    segments: List[str] = []
    depth = 0
    opened_at = -1
    start = 0

    for index, char in enumerate(notation):
        if char == "[":
            if depth:
                raise NestedBracketError(
                    f"nested '[' at position {index} in '{notation}'",
                    fragment=notation[opened_at : index + 1],
                )
            depth = 1
            opened_at = index
        elif char == "]":
            if not depth:
                raise UnmatchedBracketError(
                    f"unmatched ']' at position {index} in '{notation}'",
                    fragment=notation[start : index + 1],
                )
            depth = 0
        elif char == "," and not depth:
            segments.append(notation[start:index])
            start = index + 1

    if depth:
        raise UnmatchedBracketError(
            f"unmatched '[' at position {opened_at} in '{notation}'",
            fragment=notation[opened_at:],
        )

    segments.append(notation[start:])
    return segments


def parse_group(segment: str, lenient_width: bool = False) -> Group:
    """Parse one top-level segment into a ``Group``.

    Nested brackets are detected by ``split_groups``, not here.

    Raises:
        EmptyGroupError: For an empty segment or an empty bracket body.
        UnmatchedBracketError: For a ``[`` that is never closed.
        UnsupportedNotationError: For more than one bracket group.
        ReversedRangeError: For an inline range that runs backwards.
        InvalidRangeItemError: For an inline operand with too many digits.
    """
    text = segment.strip()
    if not text:
        raise EmptyGroupError("empty group in notation", fragment=segment)

    open_idx = text.find("[")
    if open_idx >= 0:
        close_idx = text.find("]", open_idx)
        if close_idx < 0:
            raise UnmatchedBracketError(
                f"unmatched '[' in group '{text}'", fragment=text[open_idx:]
            )
        suffix = text[close_idx + 1 :]
        if "[" in suffix:
            raise UnsupportedNotationError(
                f"group '{text}' has more than one bracket expression",
                fragment=text,
            )
        body = parse_body(text[open_idx + 1 : close_idx], lenient_width)
        return Group(
            prefix=text[:open_idx],
            numeric_part=BracketBody(tuple(body)),
            suffix=suffix,
        )

    match = _INLINE_RANGE_REGEX.fullmatch(text)
    if match is None:
        return Group(prefix=text)

    start = parse_operand(match["start"], text)
    end = parse_operand(match["end"], text)
    if end < start:
        raise ReversedRangeError(f"range '{text}' ends before it starts", fragment=text)
    return Group(
        prefix=match["prefix"],
        numeric_part=InlineRange(start=start, end=end),
        suffix=match["suffix"],
    )


def parse(notation: str, config: Optional[ExpansionConfig] = None) -> List[Group]:
    """Parse a notation into its top-level groups.

    Args:
        notation: Raw notation, e.g. ``"n[01-04],login1"``.
        config: Expansion settings; ``DEFAULT_CONFIG`` when omitted.

    Returns:
        Groups in input order.

    Raises:
        NotationError: Any structural or range error found in the notation.
    """
    cfg = config or DEFAULT_CONFIG
    groups = [
        parse_group(segment, cfg.lenient_width) for segment in split_groups(notation)
    ]
    logger.debug(f"Parsed {len(groups)} group(s) from '{notation}'")
    return groups
