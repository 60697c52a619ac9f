# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Cartmerge Contributors
#
# This file is part of Cartmerge.
#
# Cartmerge is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Cartmerge is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import argparse
import sys

from cartmerge.cli import replay
from cartmerge.cli.exitcodes import EXIT_ENGINE_ERROR


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cartmerge", description="Cartmerge — order line validation & merging")
    p.add_argument("--version", dest="tool_version", default=None, help="Override tool version for reporting.")

    sub = p.add_subparsers(dest="cmd", required=True)

    # replay
    replay_p = sub.add_parser("replay", help="Add every line of an items file to a new order.")
    replay_p.add_argument("path", help="Items file (.yaml, .yml or .json).")
    replay_p.add_argument("--config", default=None, help="Config file (default: cartmerge.yaml next to the items file).")
    replay_p.add_argument("--format", choices=["text", "json"], default="text", help="Output format.")
    replay_p.add_argument(
        "--keep-going", dest="keep_going", action="store_true", help="Continue past rejected lines."
    )
    replay_p.add_argument(
        "--log-level",
        dest="log_level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        default=None,
        help="Logging level (overrides config).",
    )
    verbosity = replay_p.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Minimal output (summary only).")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Verbose output (include all counters).")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.cmd == "replay":
            verbosity = "quiet" if args.quiet else ("verbose" if args.verbose else "normal")
            return replay.run(
                path=args.path,
                config=args.config,
                fmt=args.format,
                keep_going=args.keep_going,
                verbosity=verbosity,
                log_level=args.log_level,
                tool_version=args.tool_version,
            )

        print("Unknown command.", file=sys.stderr)
        return EXIT_ENGINE_ERROR

    except Exception as e:
        print(f"cartmerge: error: {e}", file=sys.stderr)
        return EXIT_ENGINE_ERROR
