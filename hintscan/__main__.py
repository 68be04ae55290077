from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from rich.console import Console

from hintscan.config.defaults import OUTPUT_FORMATS, get_custom_patterns
from hintscan.config.manager import ConfigManager
from hintscan.render import render_hints
from hintscan.scan import (
    ALPHABETS,
    InvalidPatternError,
    Match,
    State,
    UnknownAlphabetError,
    find,
)
from hintscan.utils.logger import setup_logging

log = logging.getLogger("hintscan.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hintscan",
        description="Find URLs, paths, hashes and friends in text and label them with hints",
    )
    parser.add_argument("file", nargs="?", help="Read lines from FILE instead of stdin")
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("-a", "--alphabet", choices=sorted(ALPHABETS), help="Hint alphabet")
    parser.add_argument(
        "-r", "--reverse", action="store_true", default=None,
        help="Give the shortest hints to the last matches",
    )
    parser.add_argument(
        "-u", "--unique", action="store_true", default=None,
        help="Share one hint between matches with the same text",
    )
    parser.add_argument(
        "-x", "--regexp", action="append", default=[], metavar="PATTERN",
        help="Extra pattern to hint, tried before the built-ins (repeatable)",
    )
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, help="Output format")
    parser.add_argument("-s", "--select", metavar="HINT", help="Print only the text hinted HINT")
    parser.add_argument("--write-config", action="store_true", help="Write the effective config and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def read_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _format_text(matches: Sequence[Match]) -> str:
    return "\n".join(f"{m.hint}\t{m.text}" for m in matches if m.hint is not None)


def _format_json(matches: Sequence[Match]) -> str:
    return "\n".join(
        json.dumps({"x": m.x, "y": m.y, "text": m.text, "hint": m.hint})
        for m in matches
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config_manager = ConfigManager(args.config)
    cfg = config_manager.config

    log_level = "DEBUG" if args.verbose else str(config_manager.get("general.log_level", "INFO"))
    log_file = str(config_manager.get("general.log_file", ""))
    setup_logging(
        log_file=log_file,
        log_level=log_level,
        stderr_level="DEBUG" if args.verbose else "WARNING",
    )

    alphabet = args.alphabet or str(config_manager.get("hints.alphabet", "qwerty"))
    reverse = bool(config_manager.get("hints.reverse", False)) if args.reverse is None else args.reverse
    unique = bool(config_manager.get("hints.unique", False)) if args.unique is None else args.unique
    regexp = get_custom_patterns(cfg) + list(args.regexp)
    output_format = args.format or str(config_manager.get("output.format", "text"))
    if output_format not in OUTPUT_FORMATS:
        parser.error(f"unknown output format {output_format!r}")

    if args.write_config:
        cfg["hints"].update(alphabet=alphabet, reverse=reverse, unique=unique, regexp=regexp)
        cfg["output"]["format"] = output_format
        config_manager.save(cfg)
        return 0

    if args.file:
        with open(args.file, encoding="utf-8", errors="replace") as f:
            lines = read_lines(f.read())
    else:
        lines = read_lines(sys.stdin.read())

    try:
        state = State(lines, alphabet, regexp)
    except (InvalidPatternError, UnknownAlphabetError) as exc:
        parser.error(str(exc))

    matches = state.matches(reverse=reverse, unique=unique)
    log.debug("%d match(es) over %d line(s)", len(matches), len(lines))

    if args.select is not None:
        selected = find(matches, args.select)
        if selected is None:
            log.warning("No match is hinted %r", args.select)
            return 1
        print(selected.text)
        return 0

    if output_format == "preview":
        Console(highlight=False).print(render_hints(lines, matches))
    elif output_format == "json":
        if matches:
            print(_format_json(matches))
    elif matches:
        print(_format_text(matches))
    return 0


if __name__ == "__main__":
    sys.exit(main())
