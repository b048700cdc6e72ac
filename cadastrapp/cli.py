"""Replay a JSONL action log and print the resulting state."""
from __future__ import annotations

import argparse
import json
import logging
import sys

from cadastrapp import __version__
from cadastrapp.config import settings
from cadastrapp.kernel.actions import InvalidActionError
from cadastrapp.kernel.store import SelectionStore
from cadastrapp.kernel.stream import read_actions

logger = logging.getLogger("cadastrapp.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cadastrapp-replay",
        description="Replay a JSONL log of plot-selection actions and print the final state.",
    )
    parser.add_argument("file", nargs="?", default="-", help="JSONL action log (default: stdin)")
    parser.add_argument("--strict", action="store_true", help="Stop at the first action failing validation")
    parser.add_argument("--no-validate", action="store_true", help="Skip payload validation")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    store = SelectionStore(validate=not args.no_validate, strict=args.strict)

    stream = sys.stdin if args.file == "-" else open(args.file, encoding="utf-8")
    try:
        for action in read_actions(stream):
            store.dispatch(action)
    except InvalidActionError as e:
        logger.error("Replay stopped: %s", e)
        return 1
    finally:
        if stream is not sys.stdin:
            stream.close()

    json.dump(store.state, sys.stdout, sort_keys=True, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
