# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry points for parsing and completing one command line.

`ArgumentEngine` binds an `ArgmatchSettings` value and exposes:
- `parse(argument, tokens, caller=None)`: Parse the whole command line into a
  `ParseContext`. Raises an `ArgumentParseError` subclass on failure, including
  `UnexpectedArgumentError` when tokens are left over.
- `complete(argument, tokens, caller=None)`: Suggestions for the final token.
  Never raises; any internal error degrades to an empty list.

`tokens` may be a list of tokens, a raw string (split on whitespace, keeping an
empty final token after trailing whitespace) or a `TokenCursor`.

Module-level `parse` and `complete` use a default engine.

Example:
    roster = Roster([User(id=1, name="Anna"), User(id=2, name="Annabelle")])
    user = CandidateArgument("user", roster, matcher=STARTS_WITH)
    engine = ArgumentEngine()
    engine.parse(user, ["anna"])["user"]   # User(id=1, name='Anna')
    engine.complete(user, "ann")            # ['Anna', 'Annabelle']
"""
from __future__ import annotations

from typing import Any, Sequence

from argmatch.completion import finalize_suggestions
from argmatch.config import ArgmatchSettings
from argmatch.debug import COMMANDS, COMPLETIONS
from argmatch.exceptions import ArgumentParseError, UnexpectedArgumentError
from argmatch.logger import logger
from argmatch.parser.argument import CommandArgument
from argmatch.parser.context import ParseContext
from argmatch.parser.cursor import TokenCursor

Tokens = Sequence[str] | str | TokenCursor


def _as_cursor(tokens: Tokens | None) -> TokenCursor:
    if isinstance(tokens, TokenCursor):
        return tokens
    if isinstance(tokens, str):
        return TokenCursor.from_text(tokens)
    return TokenCursor(tokens or ())


class ArgumentEngine:
    """
    Parses and completes command lines against an argument tree.

    Args:
        settings (ArgmatchSettings | None): Settings for every request handled by
            this engine. Defaults to `ArgmatchSettings()`.
    """

    def __init__(self, settings: ArgmatchSettings | None = None) -> None:
        self.settings: ArgmatchSettings = settings or ArgmatchSettings()

    def new_context(self, caller: Any = None) -> ParseContext:
        return ParseContext(caller=caller, settings=self.settings)

    def parse(
        self, argument: CommandArgument, tokens: Tokens | None, caller: Any = None
    ) -> ParseContext:
        """
        Parse `tokens` with `argument`.

        Returns:
            ParseContext: The parsed values.

        Raises:
            ArgumentParseError: If the input could not be parsed.
        """
        cursor = _as_cursor(tokens)
        context = self.new_context(caller)
        debug = self.settings.debug.is_enabled(COMMANDS)
        if debug:
            logger.debug("[%s] Parsing %s", argument.name, list(cursor.tokens))
        try:
            argument.parse(context, cursor)
            if cursor.has_next():
                token = cursor.peek() or ""
                message = self.settings.messages.render(
                    "argument_unexpected", argument=token
                )
                raise UnexpectedArgumentError(None, message, token)
        except ArgumentParseError as error:
            if debug:
                logger.debug(
                    "[%s] Parse failed (%s): %s",
                    argument.name,
                    type(error).__name__,
                    error.message,
                )
            raise
        if debug:
            logger.debug("[%s] Parsed %s", argument.name, context)
        return context

    def complete(
        self, argument: CommandArgument, tokens: Tokens | None, caller: Any = None
    ) -> list[str]:
        """
        Suggest completions for the final token of `tokens`.

        Suggestions are only produced when exactly one token remains for the
        argument to look at. The result is deduplicated and capped at
        `settings.max_suggestions`.
        """
        try:
            cursor = _as_cursor(tokens)
            context = self.new_context(caller)
            suggestions = argument.complete(context, cursor)
            if self.settings.debug.is_enabled(COMPLETIONS):
                logger.debug("[%s] Raw suggestions: %s", argument.name, suggestions)
            suggestions = finalize_suggestions(suggestions, self.settings.max_suggestions)
        except Exception as error:
            logger.warning(
                "[%s] Completion failed: %s", argument.name, error, exc_info=True
            )
            return []
        if self.settings.debug.is_enabled(COMMANDS):
            logger.debug(
                "[%s] Completed %s -> %s", argument.name, list(cursor.tokens), suggestions
            )
        return suggestions


_default_engine = ArgumentEngine()


def parse(
    argument: CommandArgument, tokens: Tokens | None, caller: Any = None
) -> ParseContext:
    """Parse `tokens` with `argument` using default settings."""
    return _default_engine.parse(argument, tokens, caller)


def complete(
    argument: CommandArgument, tokens: Tokens | None, caller: Any = None
) -> list[str]:
    """Suggest completions for the final token using default settings."""
    return _default_engine.complete(argument, tokens, caller)
