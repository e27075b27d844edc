# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command line surfaces for argmatch: the demo grammar, result rendering and the
interactive shell.

The demo grammar is `<user> [amount]`: a user given by name or identifier,
optionally followed by an integer. It is what `argmatch resolve`, `argmatch
complete` and `argmatch shell` parse against.
"""
from __future__ import annotations

from typing import Any

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argmatch.completer import ArgumentCompleter
from argmatch.console import console
from argmatch.engine import ArgumentEngine
from argmatch.exceptions import ArgumentParseError
from argmatch.logger import logger
from argmatch.matching import NameMatcher
from argmatch.parser.argument import CommandArgument
from argmatch.parser.candidates import CandidateArgument
from argmatch.parser.combinators import OptionalArgument, SequenceArgument
from argmatch.parser.context import ParseContext
from argmatch.parser.values import ValueArgument
from argmatch.protocols import CandidatePool

EXIT_WORDS = {"exit", "quit"}


def build_user_argument(pool: CandidatePool, matcher: NameMatcher) -> CommandArgument:
    """Build the `<user> [amount]` demo grammar."""
    return SequenceArgument(
        "command",
        [
            CandidateArgument("user", pool, matcher=matcher, id_type=int | str),
            OptionalArgument(ValueArgument("amount", type=int)),
        ],
    )


def _describe(value: Any) -> str:
    if hasattr(value, "id") and hasattr(value, "name"):
        label = f"{value.name} (id {value.id})"
        display_name = getattr(value, "display_name", None)
        if display_name:
            label += f" as {display_name}"
        return label
    return repr(value)


def render_context(context: ParseContext, target: Console | None = None) -> None:
    """Print the parsed values as a table."""
    table = Table(title="Parsed arguments", show_header=True, header_style="bold")
    table.add_column("Argument", style="cyan")
    table.add_column("Value")
    for key, value in context.items():
        if isinstance(value, dict):
            continue
        table.add_row(escape(key), escape(_describe(value)))
    (target or console).print(table)


def render_error(error: ArgumentParseError, target: Console | None = None) -> None:
    (target or console).print(f"[bold red]✗[/] {escape(error.message)}")


def resolve_line(
    engine: ArgumentEngine,
    argument: CommandArgument,
    tokens: list[str] | str,
    target: Console | None = None,
) -> ParseContext | None:
    """Parse one line and print the outcome. Returns the context on success."""
    try:
        context = engine.parse(argument, tokens)
    except ArgumentParseError as error:
        render_error(error, target)
        return None
    render_context(context, target)
    return context


async def run_shell(
    engine: ArgumentEngine,
    argument: CommandArgument,
    session: PromptSession | None = None,
    target: Console | None = None,
) -> int:
    """
    Run an interactive prompt until `exit`, `quit`, EOF or Ctrl-C.

    Returns:
        int: The number of lines that parsed successfully.
    """
    session = session or PromptSession(
        message="argmatch > ",
        completer=ArgumentCompleter(argument, engine),
        complete_while_typing=True,
    )
    parsed = 0
    while True:
        try:
            line = await session.prompt_async()
        except (EOFError, KeyboardInterrupt):
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in EXIT_WORDS:
            break
        if resolve_line(engine, argument, line, target) is not None:
            parsed += 1
    logger.debug("Shell finished after %d successful parses.", parsed)
    return parsed
