"""Command-line interface for sexpand."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sexpand._version import __version__
from sexpand.config import DEFAULT_CONFIG, ExpansionConfig
from sexpand.errors import NotationError
from sexpand.logging import get_logger, level_for_flags, set_global_log_level
from sexpand.notation import expand
from sexpand.template import substitute

logger = get_logger(__name__)

_ESCAPES = {"\\n": "\n", "\\t": "\t"}


def _unescape(text: str) -> str:
    """Interpret ``\\n`` and ``\\t`` typed on the command line."""
    for escaped, char in _ESCAPES.items():
        text = text.replace(escaped, char)
    return text


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: '{value}'")
    return number


def _render_output(
    notation: str,
    template: Optional[str],
    config: ExpansionConfig,
    separator: Optional[str] = None,
) -> str:
    """Expand ``notation`` and format it for printing.

    Without a template the hostnames are joined directly; with one, each
    hostname is substituted into it first.
    """
    hosts = expand(notation, config)
    sep = config.separator_for(template) if separator is None else separator
    if template is None:
        return hosts.join(sep)
    return substitute(hosts, template, separator=sep, placeholder=config.placeholder)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sexpand",
        description=(
            "Expand a SLURM-style hostname notation such as 'n[01-04],login1' "
            "and optionally substitute each hostname into a template."
        ),
    )
    parser.add_argument(
        "notation", metavar="NOTATION", help="SLURM-style hostname notation"
    )
    parser.add_argument(
        "template",
        metavar="TEMPLATE",
        nargs="?",
        default=None,
        help=(
            "Expression to expand the hostnames into; every occurrence of the"
            " placeholder is replaced by one hostname"
        ),
    )
    parser.add_argument(
        "--separator",
        "-s",
        default=None,
        help=(
            "Separator between results (default: ',' without TEMPLATE,"
            " newline with TEMPLATE); \\n and \\t are interpreted"
        ),
    )
    parser.add_argument(
        "--placeholder",
        "-p",
        default=None,
        help=f"Placeholder marker in TEMPLATE (default: '{DEFAULT_CONFIG.placeholder}')",
    )
    parser.add_argument(
        "--lenient-width",
        action="store_true",
        help="Pad ranges like [1-10] to the start's width instead of failing",
    )
    parser.add_argument(
        "--max-hosts",
        type=_positive_int,
        default=None,
        help=f"Maximum number of hostnames to produce (default: {DEFAULT_CONFIG.max_hosts})",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``sexpand`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = _build_parser()

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    config = DEFAULT_CONFIG.with_overrides(
        placeholder=args.placeholder,
        lenient_width=args.lenient_width or None,
        max_hosts=args.max_hosts,
    )
    separator = None if args.separator is None else _unescape(args.separator)

    try:
        output = _render_output(args.notation, args.template, config, separator)
    except NotationError as e:
        logger.debug(f"Expansion of '{args.notation}' failed: {e!r}")
        print(f"error: {e.kind}: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
