"""sexpand: SLURM-style hostname expansion.

Expands compact hostname notations into sorted, duplicate-free hostname lists
and substitutes each hostname into a template.

Primary API:
    expand() - Expand a notation into an ExpandedSet
    parse() - Parse a notation into Group objects
    substitute() - Fill a template once per hostname and join the results

Example:
    from sexpand import expand, substitute

    hosts = expand("n[02-03,09-11],n01")
    # ExpandedSet(['n01', 'n02', 'n03', 'n09', 'n10', 'n11'])

    print(substitute(hosts, "{}.example.com"))
"""

from __future__ import annotations

from sexpand import cli, logging
from sexpand._version import __version__
from sexpand.config import DEFAULT_CONFIG, ExpansionConfig
from sexpand.errors import (
    EmptyGroupError,
    ExpansionLimitError,
    InvalidRangeItemError,
    MissingPlaceholderError,
    NestedBracketError,
    NotationError,
    ReversedRangeError,
    UnmatchedBracketError,
    UnsupportedNotationError,
    WidthMismatchError,
)
from sexpand.notation import ExpandedSet, Group, assemble, expand, materialize, parse
from sexpand.template import render, substitute

__all__ = [
    # Version
    "__version__",
    # Core API
    "expand",
    "parse",
    "materialize",
    "assemble",
    "substitute",
    "render",
    # Types
    "ExpandedSet",
    "Group",
    # Configuration
    "ExpansionConfig",
    "DEFAULT_CONFIG",
    # Errors
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
    # Utilities
    "cli",
    "logging",
]
