"""
Command line entry point.

    script-translate -s scripts/ -d _includes/episodes -f season-2 -u
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_config
from .driver import run
from .errors import ConfigError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="script-translate",
        description="Translate episode scripts into HTML fragments.",
    )
    ap.add_argument("-s", "--source", type=Path, help="Root directory for source scanning")
    ap.add_argument("-d", "--destination", type=Path, help="Root directory for results (default: ./out)")
    ap.add_argument("-f", "--filter", help="Regex; only source paths containing a match are translated")
    ap.add_argument(
        "-u",
        "--update",
        action="store_true",
        default=None,
        help="Force: rebuild even when the output is newer than the source",
    )
    ap.add_argument("-c", "--config", type=Path, help="YAML config file (default: ./script_translate.yaml if present)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config).merged(
            source=args.source,
            destination=args.destination,
            filter=args.filter,
            force=args.update,
        )
        config.path_pattern()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if config.source is None:
        ap.print_usage(sys.stderr)
        print("error: missing source directory (-s)", file=sys.stderr)
        return 2
    if not config.source.is_dir():
        print(f"error: source directory not found: {config.source}", file=sys.stderr)
        return 2

    summary = run(config)
    return 0 if summary.ok else 1
