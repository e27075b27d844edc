"""
Argmatch Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""
import asyncio
import logging
import sys
from typing import Sequence

from rich.markup import escape

from argmatch.config import ArgmatchSettings, load_settings, load_roster
from argmatch.console import console
from argmatch.engine import ArgumentEngine
from argmatch.exceptions import ConfigError
from argmatch.matching import get_matcher
from argmatch.parsers import get_arg_parsers
from argmatch.shell import build_user_argument, resolve_line, run_shell
from argmatch.utils import setup_logging
from argmatch.version import __version__


def build_settings(settings_path: str | None, debug_options: list[str]) -> ArgmatchSettings:
    settings = load_settings(settings_path) if settings_path else ArgmatchSettings()
    if debug_options:
        merged = tuple(dict.fromkeys([*settings.debug_options, *debug_options]))
        settings = settings.model_copy(update={"debug_options": merged})
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    parsers = get_arg_parsers()
    args = parsers.parse_args(argv)

    if args.version:
        console.print(f"argmatch {__version__}")
        return 0
    if not args.command:
        parsers.root.print_help()
        return 2

    setup_logging(
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        settings = build_settings(args.settings, args.debug_options)
        roster = load_roster(args.roster)
    except (ConfigError, FileNotFoundError) as error:
        console.print(f"[bold red]✗[/] {escape(str(error))}")
        return 1

    engine = ArgumentEngine(settings)
    argument = build_user_argument(
        roster, get_matcher(args.strategy, match_display_names=args.display_names)
    )

    if args.command == "resolve":
        return 0 if resolve_line(engine, argument, args.tokens) is not None else 1
    if args.command == "complete":
        for suggestion in engine.complete(argument, args.tokens or [""]):
            console.print(suggestion, markup=False, highlight=False)
        return 0
    if args.command == "shell":
        asyncio.run(run_shell(engine, argument))
        return 0
    return 2


if __name__ == "__main__":
    sys.exit(main())
