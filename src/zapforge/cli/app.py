"""CLI app entrypoint."""

from __future__ import annotations

import logging
import sys

from zapforge.cli.common import EXIT_CANCELLED, EXIT_ERROR, EXIT_USAGE
from zapforge.cli.parser import build_parser


def main(argv: list[str] | None = None) -> int:
    import zapforge.cli as cli

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    if args.command != "create":
        print(f"error: unsupported command: {args.command}", file=sys.stderr)
        return EXIT_USAGE

    try:
        return cli.run_create(args)
    except KeyboardInterrupt:
        print("\nAborted.")
        return EXIT_CANCELLED
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR


__all__ = ["main"]
