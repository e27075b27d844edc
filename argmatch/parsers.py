# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse parsers for the `argmatch` command line.

Key Components:
- `ArgmatchParsers`: Container for the root parser and its subcommand parsers.
- `get_root_parser()`: Root parser with the global options.
- `get_subparsers()`: Attaches the subcommand block to the root parser.
- `get_arg_parsers()`: Builds the full parser suite (`resolve`, `complete`, `shell`).
"""
from argparse import ArgumentParser, Namespace, _SubParsersAction
from dataclasses import asdict, dataclass
from typing import Sequence

from argmatch.debug import DebugOptions


@dataclass
class ArgmatchParsers:
    """Defines the argument parsers for the argmatch command line."""

    root: ArgumentParser
    subparsers: _SubParsersAction
    resolve: ArgumentParser
    complete: ArgumentParser
    shell: ArgumentParser

    def parse_args(self, args: Sequence[str] | None = None) -> Namespace:
        """Parse the command line arguments."""
        return self.root.parse_args(args)

    def as_dict(self) -> dict[str, ArgumentParser]:
        """Convert the ArgmatchParsers instance to a dictionary."""
        return asdict(self)

    def get_parser(self, name: str) -> ArgumentParser | None:
        """Get the parser by name."""
        return self.as_dict().get(name)


def get_root_parser(
    prog: str | None = "argmatch",
    description: str | None = "Resolve user names and identifiers with completion.",
    exit_on_error: bool = True,
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the argmatch command line.

    Notes:
        ```
        Includes the following arguments:
            --settings PATH        : Load settings from a YAML or TOML file.
            --strategy NAME        : Name matching strategy (exact, prefix, contains).
            --no-display-names     : Only match primary names.
            --debug-option NAME    : Enable a debug option (repeatable).
            -v / --verbose         : Enable debug logging.
            --version              : Print the argmatch version.
        ```
    """
    parser = ArgumentParser(
        prog=prog,
        description=description,
        exit_on_error=exit_on_error,
    )
    parser.add_argument("--settings", help="Path to a YAML or TOML settings file.")
    parser.add_argument(
        "--strategy",
        choices=["exact", "prefix", "contains"],
        default="exact",
        help="Name matching strategy (default: exact).",
    )
    parser.add_argument(
        "--no-display-names",
        dest="display_names",
        action="store_false",
        help="Only match primary names, ignore display names.",
    )
    parser.add_argument(
        "--debug-option",
        dest="debug_options",
        action="append",
        choices=DebugOptions.ALL,
        default=[],
        help="Enable a debug option. May be given more than once.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "Commands",
    description: str | None = "Available argmatch commands.",
) -> _SubParsersAction:
    """
    Create and return a subparsers object for registering argmatch subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    return parser.add_subparsers(title=title, description=description, dest="command")


def get_arg_parsers(prog: str | None = "argmatch") -> ArgmatchParsers:
    """Create and return the full suite of argmatch argument parsers."""
    parser = get_root_parser(prog=prog)
    subparsers = get_subparsers(parser)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a user by name or identifier",
        description="Parse the given tokens as '<user> [amount]' against a roster.",
    )
    resolve_parser.add_argument("roster", help="YAML or TOML roster file")
    resolve_parser.add_argument("tokens", nargs="*", help="Tokens to parse")

    complete_parser = subparsers.add_parser(
        "complete",
        help="Print completion suggestions",
        description=(
            "Print suggestions for the final token. Pass an empty string as the "
            "final token to complete a new argument."
        ),
    )
    complete_parser.add_argument("roster", help="YAML or TOML roster file")
    complete_parser.add_argument("tokens", nargs="*", help="Tokens typed so far")

    shell_parser = subparsers.add_parser(
        "shell", help="Interactive prompt with tab completion"
    )
    shell_parser.add_argument("roster", help="YAML or TOML roster file")

    return ArgmatchParsers(
        root=parser,
        subparsers=subparsers,
        resolve=resolve_parser,
        complete=complete_parser,
        shell=shell_parser,
    )
