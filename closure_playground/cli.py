"""Command line entry point for the closure walkthrough."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from . import formats
from .config import PlaygroundConfig, apply_overrides, load_config_from_env
from .errors import PlaygroundError
from .logs import configure_logging
from .playground import build_snippets, render_results, run_playground

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliConfig:
    list_only: bool
    overrides: dict[str, object]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m closure_playground",
        description="Evaluate the closure walkthrough and print each snippet's value.",
    )
    parser.add_argument(
        "--format",
        choices=sorted(formats.SUPPORTED_FORMATS),
        default=None,
        help="Report format. Defaults to $CLOSURE_PLAYGROUND_FORMAT or 'text'.",
    )
    parser.add_argument(
        "--snippet",
        dest="snippets",
        action="append",
        default=None,
        metavar="NAME",
        help="Only report the named snippet. May be repeated.",
    )
    parser.add_argument(
        "--list",
        dest="list_only",
        action="store_true",
        help="List snippet names and titles without evaluating them.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=None,
        help="Logging level (e.g. debug, info, warning).",
    )
    parser.add_argument(
        "--log-file",
        dest="log_file",
        type=Path,
        default=None,
        help="Write log records to this file instead of stderr.",
    )
    return parser


def _parse_args(argv: Sequence[str]) -> CliConfig:
    ns = _build_parser().parse_args(list(argv))

    overrides: dict[str, object] = {}
    if ns.format is not None:
        overrides["format"] = ns.format
    if ns.snippets:
        overrides["snippets"] = tuple(ns.snippets)
    if ns.log_level is not None:
        overrides["log_level"] = ns.log_level
    if ns.log_file is not None:
        overrides["log_file"] = ns.log_file.expanduser().resolve()

    return CliConfig(list_only=ns.list_only, overrides=overrides)


def _list_snippets() -> Iterable[str]:
    for snippet in build_snippets():
        yield f"{snippet.name}\t{snippet.title}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    cli = _parse_args(argv)
    try:
        config: PlaygroundConfig = apply_overrides(load_config_from_env(), cli.overrides)
        configure_logging(config.log_level, config.log_file)
    except (ValueError, OSError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if cli.list_only:
        for line in _list_snippets():
            print(line)
        return 0

    logger.info("running walkthrough (format=%s)", config.format)
    try:
        results = run_playground(config.snippets or None)
    except PlaygroundError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    print(render_results(results, config.format))
    return 0


__all__ = ["CliConfig", "main"]
