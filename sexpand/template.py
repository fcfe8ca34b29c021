"""Placeholder substitution for expanded hostnames.

Provides render() and substitute() for filling a template such as
``"ssh {} uptime"`` once per hostname.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from sexpand.config import DEFAULT_CONFIG
from sexpand.errors import MissingPlaceholderError
from sexpand.logging import get_logger

__all__ = [
    "render",
    "substitute",
]

logger = get_logger(__name__)


def render(
    tokens: Iterable[str],
    template: str,
    placeholder: Optional[str] = None,
) -> List[str]:
    """Substitute each token into ``template``.

    Every occurrence of the placeholder is replaced; the rest of the template
    is left untouched.

    Args:
        tokens: Hostnames, substituted in the order given.
        template: String containing the placeholder at least once.
        placeholder: Marker to replace; ``DEFAULT_CONFIG.placeholder`` when omitted.

    Returns:
        One substituted string per token.

    Raises:
        MissingPlaceholderError: If ``template`` lacks the placeholder.
    """
    marker = DEFAULT_CONFIG.placeholder if placeholder is None else placeholder
    if not marker or marker not in template:
        raise MissingPlaceholderError(
            f"template '{template}' does not contain placeholder '{marker}'",
            fragment=template,
        )
    return [template.replace(marker, token) for token in tokens]


def substitute(
    tokens: Iterable[str],
    template: str,
    separator: Optional[str] = None,
    placeholder: Optional[str] = None,
) -> str:
    """Substitute each token into ``template`` and join the results.

    Args:
        tokens: Hostnames, usually an ``ExpandedSet``.
        template: String containing the placeholder at least once.
        separator: Join separator; ``DEFAULT_CONFIG.template_separator``
            (newline) when omitted.
        placeholder: Marker to replace.

    Returns:
        Joined substituted strings.

    Example:
        >>> substitute(["n01", "n02"], "{}.example.com")
        'n01.example.com\\nn02.example.com'
    """
    sep = DEFAULT_CONFIG.template_separator if separator is None else separator
    lines = render(tokens, template, placeholder)
    logger.debug(f"Rendered template '{template}' for {len(lines)} hostname(s)")
    return sep.join(lines)
