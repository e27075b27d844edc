# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandArgument`, the grammar unit every argument kind derives from.

Each argument supports two operations:
- `parse(context, cursor)`: Consume tokens, produce a value, store it in the
  context under the argument's name. Raises an `ArgumentParseError` subclass on
  failure and leaves the context untouched in that case.
- `complete(context, cursor)`: Return suggestions for the final token. Never
  raises, and the cursor is back at its starting position afterwards.

Subclasses implement `parse_value` and `suggest`. Arguments are immutable once
built. A child argument may point at its parent through a weak reference, which
is only used to qualify error messages with the name the user actually sees.
"""
from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import Any

from argmatch.exceptions import (
    ArgumentRejectedError,
    InvalidArgumentError,
    MissingArgumentError,
)
from argmatch.logger import logger
from argmatch.parser.context import ParseContext
from argmatch.parser.cursor import TokenCursor


class CommandArgument(ABC):
    """
    Base class for all arguments.

    Attributes:
        name (str): The key this argument's value is stored under.
        missing_message (str): Message catalog key used for missing input.
        invalid_message (str): Message catalog key used for invalid input.
    """

    missing_message: str = "argument_missing"
    invalid_message: str = "argument_invalid"

    def __init__(self, name: str) -> None:
        if not name or any(char.isspace() for char in name):
            raise ValueError(f"Invalid argument name: {name!r}")
        self.name: str = name
        self._parent: weakref.ReferenceType[CommandArgument] | None = None

    @property
    def parent(self) -> CommandArgument | None:
        return self._parent() if self._parent is not None else None

    def set_parent(self, parent: CommandArgument | None) -> None:
        if parent is None:
            self._parent = None
            return
        if parent is self:
            raise ValueError("An argument cannot be its own parent.")
        current = self.parent
        if current is not None and current is not parent:
            raise ValueError(f"Argument '{self.name}' already has a parent.")
        self._parent = weakref.ref(parent)

    @property
    def root(self) -> CommandArgument:
        """The outermost argument this one is nested in."""
        argument: CommandArgument = self
        while argument.parent is not None:
            argument = argument.parent
        return argument

    @property
    def format(self) -> str:
        return f"<{self.name}>"

    def is_optional(self) -> bool:
        return False

    def parse(self, context: ParseContext, cursor: TokenCursor) -> Any:
        value = self.parse_value(context, cursor)
        if value is not None:
            context.put(self.name, value)
        return value

    @abstractmethod
    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        """Parse a value from the cursor. Only writes to the context on success."""
        raise NotImplementedError

    def complete(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        snapshot = cursor.snapshot()
        try:
            return list(self.suggest(context, cursor))
        except Exception as error:
            logger.warning(
                "Completion for argument '%s' failed: %s", self.name, error, exc_info=True
            )
            return []
        finally:
            cursor.restore(snapshot)

    @abstractmethod
    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        """Return suggestions for the final token. May move the cursor."""
        raise NotImplementedError

    def error_arguments(self, **extra: Any) -> dict[str, Any]:
        root = self.root
        arguments = {"argument_name": root.name, "argument_format": root.format}
        arguments.update(extra)
        return arguments

    def missing_argument_error(self, context: ParseContext) -> MissingArgumentError:
        message = context.settings.messages.render(
            self.missing_message, **self.error_arguments()
        )
        return MissingArgumentError(self, message)

    def invalid_argument_error(
        self, context: ParseContext, token: str, message_key: str | None = None, **extra
    ) -> InvalidArgumentError:
        message = context.settings.messages.render(
            message_key or self.invalid_message,
            **self.error_arguments(argument=token, **extra),
        )
        return InvalidArgumentError(self, message, token)

    def rejected_argument_error(
        self, message: str, token: str | None = None
    ) -> ArgumentRejectedError:
        return ArgumentRejectedError(self, message, token)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
