# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentFilter`, the semantic check applied after a value was parsed.

A filter wraps a `(caller, value) -> bool` predicate, typically a visibility or
permission check supplied by the host. It is evaluated on every call and never
cached. Values the predicate refuses are reported as `ArgumentRejectedError`
using either a custom template or the catalog's `argument_rejected` message.
"""
from __future__ import annotations

from typing import Any, Callable

from argmatch.exceptions import ArgumentRejectedError
from argmatch.messages import format_template
from argmatch.parser.context import ParseContext
from argmatch.protocols import CandidatePredicate


class ArgumentFilter:
    """
    A predicate over parsed values.

    Args:
        predicate (Callable[[Any, Any], bool] | None): `(caller, value) -> bool`.
            None accepts everything.
        rejected_message (str | None): Template for rejections. Supports the
            `{argument}`, `{argument_name}` and `{value}` placeholders.
    """

    def __init__(
        self,
        predicate: CandidatePredicate | None = None,
        rejected_message: str | None = None,
    ) -> None:
        self.predicate: CandidatePredicate | None = predicate
        self.rejected_message: str | None = rejected_message

    @classmethod
    def accept_any(cls) -> ArgumentFilter:
        return cls()

    def test(self, caller: Any, value: Any) -> bool:
        if self.predicate is None:
            return True
        return bool(self.predicate(caller, value))

    def bind(self, caller: Any) -> Callable[[Any], bool]:
        """Return a single-argument predicate for the given caller."""
        return lambda value: self.test(caller, value)

    def rejected_error(
        self, argument: Any, context: ParseContext, token: str, value: Any
    ) -> ArgumentRejectedError:
        arguments = argument.error_arguments(argument=token, value=value)
        if self.rejected_message:
            message = format_template(self.rejected_message, **arguments)
        else:
            message = context.settings.messages.render("argument_rejected", **arguments)
        return argument.rejected_argument_error(message, token)

    def __and__(self, other: ArgumentFilter) -> ArgumentFilter:
        def both(caller: Any, value: Any) -> bool:
            return self.test(caller, value) and other.test(caller, value)

        return ArgumentFilter(both, self.rejected_message or other.rejected_message)

    def __repr__(self) -> str:
        return f"ArgumentFilter(predicate={self.predicate!r})"
