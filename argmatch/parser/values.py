# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueArgument`, a single-token argument coerced to a Python type.

Examples:
    ValueArgument("amount", type=int)
    ValueArgument("mode", choices=["buy", "sell"])
    ValueArgument("until", type=datetime, suggestions=["tomorrow"])
"""
from __future__ import annotations

from typing import Any, Sequence

from argmatch.parser.argument import CommandArgument
from argmatch.parser.context import ParseContext
from argmatch.parser.cursor import TokenCursor
from argmatch.parser.filters import ArgumentFilter
from argmatch.parser.utils import coerce_value
from argmatch.text import normalize


class ValueArgument(CommandArgument):
    """
    Consumes one token and coerces it with `coerce_value`.

    Args:
        name (str): The name the value is stored under.
        type (Any): Target type or converter callable. Defaults to `str`.
        choices (Sequence[Any] | None): Allowed values after coercion.
        suggestions (Sequence[str] | None): Completion suggestions. Defaults to
            the string form of `choices`.
        filter (ArgumentFilter | None): Additional semantic check.
    """

    def __init__(
        self,
        name: str,
        type: Any = str,
        choices: Sequence[Any] | None = None,
        suggestions: Sequence[str] | None = None,
        filter: ArgumentFilter | None = None,
    ) -> None:
        super().__init__(name)
        self.type: Any = type
        self.choices: tuple[Any, ...] | None = tuple(choices) if choices else None
        if suggestions is None and self.choices:
            suggestions = [str(choice) for choice in self.choices]
        self.suggestions: tuple[str, ...] = tuple(suggestions or ())
        self.filter: ArgumentFilter = filter or ArgumentFilter.accept_any()

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        if not cursor.has_next():
            raise self.missing_argument_error(context)
        token = cursor.next()
        try:
            value = coerce_value(token, self.type)
        except ValueError as error:
            raise self.invalid_argument_error(
                context, token, "invalid_value", reason=error
            ) from error
        if self.choices is not None and value not in self.choices:
            raise self.invalid_argument_error(
                context,
                token,
                "invalid_choice",
                choices=", ".join(str(choice) for choice in self.choices),
            )
        if not self.filter.test(context.caller, value):
            raise self.filter.rejected_error(self, context, token, value)
        return value

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        if cursor.remaining_count() != 1:
            return []
        partial = normalize(cursor.next())
        limit = context.settings.max_suggestions
        return [
            suggestion
            for suggestion in self.suggestions
            if normalize(suggestion).startswith(partial)
        ][:limit]
