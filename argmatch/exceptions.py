# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argmatch.

Parse failures carry the argument that raised them and a user-facing message
rendered from the message catalog. The dispatcher that called the engine is
responsible for presenting that message; argmatch never retries on its own.

All exceptions inherit from `ArgmatchError`, the base exception for the package.

Exception Hierarchy:
- ArgmatchError
    ├── ConfigError
    └── ArgumentParseError
        ├── MissingArgumentError
        └── InvalidArgumentError
            ├── ArgumentRejectedError
            └── UnexpectedArgumentError

A `FirstOfArgument` may recover locally from a child's `ArgumentParseError` by
trying its next alternative. Everything else propagates to the caller.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argmatch.parser.argument import CommandArgument


class ArgmatchError(Exception):
    """Base exception for argmatch."""


class ConfigError(ArgmatchError):
    """Exception raised when a settings or roster file is invalid."""


class ArgumentParseError(ArgmatchError):
    """Exception raised when an argument could not be parsed from the input."""

    def __init__(self, argument: CommandArgument | None, message: str) -> None:
        super().__init__(message)
        self.argument = argument
        self.message = message


class MissingArgumentError(ArgumentParseError):
    """Exception raised when the input ran out where a value was required."""


class InvalidArgumentError(ArgumentParseError):
    """Exception raised when a token is present but not acceptable."""

    def __init__(
        self, argument: CommandArgument | None, message: str, token: str | None = None
    ) -> None:
        super().__init__(argument, message)
        self.token = token


class ArgumentRejectedError(InvalidArgumentError):
    """
    Exception raised when a value parsed fine but got refused afterwards,
    either by an argument filter or because the input was ambiguous.
    """


class UnexpectedArgumentError(InvalidArgumentError):
    """Exception raised when tokens are left over after all arguments were parsed."""
