"""SLURM-style hostname notation: parsing and expansion.

Usage:
    from sexpand.notation import expand, parse

    hosts = expand("n[01-03],login1")  # ["login1", "n01", "n02", "n03"]
    groups = parse("n[01-03]")  # [Group(prefix="n", numeric_part=BracketBody(...))]
"""

from .brackets import expand_body, parse_body, zero_pad
from .expand import assemble, expand, materialize
from .parser import parse, parse_group, split_groups
from .schema import (
    BracketBody,
    ExpandedSet,
    Group,
    InlineRange,
    Literal,
    Range,
    RangeItem,
)

__all__ = [
    # Schema
    "Group",
    "InlineRange",
    "BracketBody",
    "Literal",
    "Range",
    "RangeItem",
    "ExpandedSet",
    # Parsing
    "parse",
    "parse_group",
    "split_groups",
    "parse_body",
    # Expansion
    "expand_body",
    "zero_pad",
    "materialize",
    "assemble",
    "expand",
]
