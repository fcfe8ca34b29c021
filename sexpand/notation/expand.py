"""Group materialization and set assembly.

``materialize`` turns one parsed group into hostname strings; ``assemble``
unions every group into a sorted, duplicate-free ``ExpandedSet``; ``expand``
runs the whole pipeline on a raw notation.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

from sexpand.config import DEFAULT_CONFIG, ExpansionConfig
from sexpand.errors import ExpansionLimitError
from sexpand.logging import get_logger
from sexpand.notation.brackets import expand_item
from sexpand.notation.parser import parse
from sexpand.notation.schema import BracketBody, ExpandedSet, Group, InlineRange

__all__ = [
    "group_size",
    "materialize",
    "assemble",
    "expand",
]

logger = get_logger(__name__)


def group_size(group: Group) -> int:
    """Number of strings ``group`` produces, counting duplicates."""
    part = group.numeric_part
    if part is None:
        return 1
    if isinstance(part, InlineRange):
        return part.count()
    return part.size()


def materialize(group: Group) -> Set[str]:
    """Produce every hostname described by one group.

    Inline ranges use each number's natural width; bracket ranges pad every
    number to the width written in the notation.
    """
    part = group.numeric_part
    if part is None:
        return {group.prefix}

    if isinstance(part, InlineRange):
        return {
            f"{group.prefix}{i}{group.suffix}" for i in range(part.start, part.end + 1)
        }

    assert isinstance(part, BracketBody)
    tokens: Set[str] = set()
    for item in part.items:
        tokens.update(f"{group.prefix}{num}{group.suffix}" for num in expand_item(item))
    return tokens


def assemble(
    groups: Iterable[Group], config: Optional[ExpansionConfig] = None
) -> ExpandedSet:
    """Union the hostnames of all groups into one sorted set.

    Args:
        groups: Parsed groups, in any order.
        config: Expansion settings; ``DEFAULT_CONFIG`` when omitted.

    Returns:
        Duplicate-free hostnames in ascending lexicographic order.

    Raises:
        ExpansionLimitError: If the groups would produce more than
            ``config.max_hosts`` names before deduplication.
    """
    cfg = config or DEFAULT_CONFIG
    groups = list(groups)

    total = sum(group_size(g) for g in groups)
    if total > cfg.max_hosts:
        raise ExpansionLimitError(
            f"notation would expand to {total} hostnames "
            f"(limit: {cfg.max_hosts})"
        )

    tokens: Set[str] = set()
    for group in groups:
        tokens |= materialize(group)

    result = ExpandedSet(tokens)
    logger.debug(
        f"Assembled {len(result)} hostname(s) from {len(groups)} group(s) "
        f"({total - len(result)} duplicate(s) removed)"
    )
    return result


def expand(notation: str, config: Optional[ExpansionConfig] = None) -> ExpandedSet:
    """Expand a notation into sorted, unique hostnames.

    Examples:
        >>> expand("n[02-03,09-11],n01")
        ExpandedSet(['n01', 'n02', 'n03', 'n09', 'n10', 'n11'])
        >>> expand("n1-n4")
        ExpandedSet(['n1', 'n2', 'n3', 'n4'])
    """
    return assemble(parse(notation, config), config)
