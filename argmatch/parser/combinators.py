# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Combinator arguments that compose other arguments.

- FirstOfArgument: Alternatives under one name. The first child that parses wins.
  If every child fails, the most specific error is raised:
  `ArgumentRejectedError` > `InvalidArgumentError` > `MissingArgumentError`,
  with ties going to the earlier child. A rejection means the user typed
  something recognizable that is not allowed, which deserves a more precise
  message than "nothing matched".
- SequenceArgument: Children parsed one after another. The value is a dict of
  the children's values. Children are not re-parented, so their errors keep
  their own names.
- OptionalArgument: Wraps an argument that may be left out. Missing input, or
  invalid input that a later argument may still take, yields the default
  without consuming tokens. Rejections always propagate.

Combinators parse children against a forked context and commit it only after
they succeeded, so a failed parse never leaves values behind.
"""
from __future__ import annotations

from typing import Any, Sequence

from argmatch.completion import finalize_suggestions
from argmatch.exceptions import (
    ArgumentParseError,
    ArgumentRejectedError,
    InvalidArgumentError,
    MissingArgumentError,
)
from argmatch.logger import logger
from argmatch.parser.argument import CommandArgument
from argmatch.parser.context import ParseContext
from argmatch.parser.cursor import TokenCursor


def _error_rank(error: ArgumentParseError) -> int:
    if isinstance(error, ArgumentRejectedError):
        return 3
    if isinstance(error, InvalidArgumentError):
        return 2
    if isinstance(error, MissingArgumentError):
        return 1
    return 0


def most_specific_error(errors: Sequence[ArgumentParseError]) -> ArgumentParseError:
    """Return the highest ranked error. Earlier errors win ties."""
    if not errors:
        raise ValueError("errors is empty")
    best = errors[0]
    for error in errors[1:]:
        if _error_rank(error) > _error_rank(best):
            best = error
    return best


class FirstOfArgument(CommandArgument):
    """
    Accepts the value of the first child argument that parses successfully.

    Args:
        name (str): The name the value is stored under.
        arguments (Sequence[CommandArgument]): The alternatives, in order.
        join_formats (bool): If True, `format` lists the alternatives
            (`<a>|<b>`), otherwise it is `<name>`.
    """

    def __init__(
        self,
        name: str,
        arguments: Sequence[CommandArgument],
        join_formats: bool = True,
    ) -> None:
        super().__init__(name)
        if not arguments:
            raise ValueError("FirstOfArgument requires at least one argument.")
        self.arguments: tuple[CommandArgument, ...] = tuple(arguments)
        self.join_formats: bool = join_formats
        for argument in self.arguments:
            argument.set_parent(self)

    @property
    def format(self) -> str:
        if self.join_formats:
            return "|".join(argument.format for argument in self.arguments)
        return super().format

    def is_optional(self) -> bool:
        return any(argument.is_optional() for argument in self.arguments)

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        snapshot = cursor.snapshot()
        errors: list[ArgumentParseError] = []
        for argument in self.arguments:
            forked = context.fork()
            try:
                value = argument.parse(forked, cursor)
            except ArgumentParseError as error:
                cursor.restore(snapshot)
                errors.append(error)
                continue
            forked.commit()
            return value

        if all(isinstance(error, MissingArgumentError) for error in errors):
            raise self.missing_argument_error(context)
        error = most_specific_error(errors)
        logger.debug(
            "All alternatives of '%s' failed, raising %s from '%s'.",
            self.name,
            type(error).__name__,
            error.argument.name if error.argument else None,
        )
        raise error

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        suggestions: list[str] = []
        for argument in self.arguments:
            suggestions.extend(argument.complete(context, cursor))
        return finalize_suggestions(suggestions, context.settings.max_suggestions)


class SequenceArgument(CommandArgument):
    """
    Parses its child arguments in order.

    The value is a dict mapping each child's name to its parsed value. Each child
    also stores its own value in the context.

    An `OptionalArgument` child that refuses the final token as invalid is
    skipped (its default is used) if a later child could still take that token.
    """

    def __init__(self, name: str, arguments: Sequence[CommandArgument]) -> None:
        super().__init__(name)
        if not arguments:
            raise ValueError("SequenceArgument requires at least one argument.")
        self.arguments: tuple[CommandArgument, ...] = tuple(arguments)

    @property
    def format(self) -> str:
        return " ".join(argument.format for argument in self.arguments)

    def is_optional(self) -> bool:
        return all(argument.is_optional() for argument in self.arguments)

    def _can_skip(self, index: int, error: ArgumentParseError) -> bool:
        return (
            isinstance(self.arguments[index], OptionalArgument)
            and not isinstance(error, ArgumentRejectedError)
            and index < len(self.arguments) - 1
        )

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        forked = context.fork()
        values: dict[str, Any] = {}
        for index, argument in enumerate(self.arguments):
            try:
                values[argument.name] = argument.parse(forked, cursor)
            except InvalidArgumentError as error:
                if not self._can_skip(index, error):
                    raise
                logger.debug(
                    "Optional argument '%s' left '%s' to the next argument.",
                    argument.name,
                    error.token,
                )
                values[argument.name] = argument.skip(forked)
        forked.commit()
        return values

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        """
        Suggest completions for the final token.

        Walks the children the way a command line is completed:
        - A child that fails is asked for suggestions (the final token may just be
          incomplete) and the walk stops, unless it is an optional argument that
          a later child may stand in for.
        - A child that consumes the final token is asked for alternatives to it
          and the walk stops.
        - A child that succeeds without consuming anything (skipped optional) adds
          its suggestions and the walk continues with the same token.
        """
        scratch = context.fork()
        suggestions: list[str] = []
        for index, argument in enumerate(self.arguments):
            remaining = cursor.remaining_count()
            if remaining == 0:
                break
            snapshot = cursor.snapshot()
            try:
                argument.parse(scratch, cursor)
            except ArgumentParseError as error:
                cursor.restore(snapshot)
                suggestions.extend(argument.complete(scratch, cursor))
                if self._can_skip(index, error):
                    continue
                break
            if not cursor.has_next():
                cursor.restore(snapshot)
                suggestions.extend(argument.complete(scratch, cursor))
                break
            if cursor.remaining_count() == remaining:
                suggestions.extend(argument.complete(scratch, cursor))
        return finalize_suggestions(suggestions, context.settings.max_suggestions)


class OptionalArgument(CommandArgument):
    """
    Makes the wrapped argument optional.

    Missing input yields `default`. Invalid input yields `default` without
    consuming anything as long as more tokens follow it, since a later argument
    may take them. An invalid final token is reported as is, and
    `ArgumentRejectedError` is never swallowed.
    """

    def __init__(self, argument: CommandArgument, default: Any = None) -> None:
        super().__init__(argument.name)
        self.argument: CommandArgument = argument
        self.default: Any = default
        argument.set_parent(self)

    @property
    def format(self) -> str:
        return f"[{self.argument.format}]"

    def is_optional(self) -> bool:
        return True

    def skip(self, context: ParseContext) -> Any:
        """Store and return the default, as if the argument had been left out."""
        if self.default is not None:
            context.put(self.name, self.default)
        return self.default

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        snapshot = cursor.snapshot()
        forked = context.fork()
        try:
            value = self.argument.parse(forked, cursor)
        except ArgumentRejectedError:
            raise
        except InvalidArgumentError as error:
            cursor.restore(snapshot)
            if cursor.remaining_count() <= 1:
                raise
            logger.debug("Optional argument '%s' skipped: %s", self.name, error)
            return self.default
        except ArgumentParseError as error:
            logger.debug("Optional argument '%s' skipped: %s", self.name, error)
            cursor.restore(snapshot)
            return self.default
        forked.commit()
        return value

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        return self.argument.complete(context, cursor)
