"""Command-line interface for generating slugs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, TextIO

from .config import load_slug_config
from .models import EMOJI_POLICIES, MODES, SEPARATORS, SYMBOL_POLICIES, UNKNOWN_POLICIES, SlugOptions
from .pipeline import build_slug, slug_detailed
from .presets import PRESETS, get_preset

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slugline",
        description="Convert text into URL- and filesystem-safe slugs.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert. Reads one input per line from stdin when omitted.",
    )
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Start from a named option preset.")
    parser.add_argument("--config", type=Path, help="YAML file with slug options.")
    parser.add_argument("--separator", choices=SEPARATORS, help="Separator placed between tokens.")
    parser.add_argument("--ascii", action="store_true", help="Transliterate the output to ASCII.")
    parser.add_argument("--locale", help="Locale used for segmentation and lowercasing.")
    parser.add_argument("--max-length", type=int, help="Maximum slug length (0 disables truncation).")
    parser.add_argument("--mode", choices=MODES, help="Processing mode.")
    parser.add_argument("--emoji", choices=EMOJI_POLICIES, help="Emoji handling policy.")
    parser.add_argument(
        "--symbols",
        choices=(*SYMBOL_POLICIES, "off"),
        help="Symbol rewrite table, or 'off' to leave symbols alone.",
    )
    parser.add_argument("--tech", action="store_true", help="Rewrite tech shorthand such as C++ and .NET.")
    parser.add_argument(
        "--stopwords",
        help="Stopword policy for semantic mode: 'auto', 'none' or a comma separated list.",
    )
    parser.add_argument("--drop-numbers", action="store_true", help="Drop tokens made only of digits.")
    parser.add_argument("--keep-case", action="store_true", help="Do not lowercase tokens.")
    parser.add_argument("--unknown", choices=UNKNOWN_POLICIES, help="Policy for characters with no ASCII mapping.")
    parser.add_argument("--no-strict", action="store_true", help="Disable strict character sanitization.")
    parser.add_argument("--reserved", nargs="+", metavar="NAME", help="Additional reserved slugs.")
    parser.add_argument("--fallback", help="Base text used when no usable slug remains.")
    parser.add_argument("--detailed", action="store_true", help="Print the full pipeline trace as JSON.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity.",
    )
    return parser


def _parse_stopwords(value: str) -> str | tuple[str, ...] | None:
    if value == "auto":
        return "auto"
    if value == "none":
        return None
    return tuple(word.strip() for word in value.split(",") if word.strip())


def _collect_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.separator:
        overrides["separator"] = args.separator
    if args.ascii:
        overrides["alphabet"] = "ascii"
    if args.locale:
        overrides["locale"] = args.locale
    if args.max_length is not None:
        overrides["max_length"] = args.max_length
    if args.mode:
        overrides["mode"] = args.mode
    if args.emoji:
        overrides["emoji"] = args.emoji
    if args.symbols:
        overrides["symbols"] = None if args.symbols == "off" else args.symbols
    if args.tech:
        overrides["tech"] = True
    if args.stopwords is not None:
        overrides["stopwords"] = _parse_stopwords(args.stopwords)
    if args.drop_numbers:
        overrides["keep_numbers"] = False
    if args.keep_case:
        overrides["lowercase"] = False
    if args.unknown:
        overrides["unknown"] = args.unknown
    if args.no_strict:
        overrides["strict"] = False
    if args.reserved:
        overrides["reserved"] = tuple(args.reserved)
    if args.fallback is not None:
        overrides["fallback"] = args.fallback
    return overrides


def resolve_cli_options(args: argparse.Namespace) -> SlugOptions:
    """Combine preset, config file and flags (in that order) into options."""

    if args.config is not None:
        base = load_slug_config(args.config)
    elif args.preset:
        base = get_preset(args.preset)
    else:
        base = SlugOptions()
    if args.config is not None and args.preset:
        logger.info("Both --config and --preset given; the config file takes precedence")
    return base.merged(**_collect_overrides(args))


def _iter_inputs(args: argparse.Namespace, stdin: TextIO) -> Iterable[str]:
    if args.text:
        yield " ".join(args.text)
        return
    for line in stdin:
        stripped = line.rstrip("\n")
        if stripped.strip():
            yield stripped


def run(args: argparse.Namespace, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Execute the slug command for parsed ``args``."""

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    try:
        options = resolve_cli_options(args)
    except (FileNotFoundError, ImportError, ValueError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    for text in _iter_inputs(args, stdin):
        if args.detailed:
            result = slug_detailed(text, options)
            print(json.dumps(result.to_dict(), ensure_ascii=False), file=stdout)
        else:
            print(build_slug(text, options)[0], file=stdout)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
