# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseContext`, the ordered store of parsed argument values.

A context belongs to exactly one parse attempt. Besides the values it carries
the `caller` (whoever typed the command, handed to argument filters) and the
`ArgmatchSettings` in effect for the request.

Combinators parse their children against a `fork()` of the context and only
`commit()` the fork once the whole combinator succeeded, which keeps failed
alternatives from leaving partial values behind.
"""
from __future__ import annotations

from typing import Any, Iterator

from argmatch.config import ArgmatchSettings


class ParseContext:
    """
    Maps argument names to parsed values, in insertion order.

    Attributes:
        caller (Any): The entity the command is parsed for. May be None.
        settings (ArgmatchSettings): Settings for this request.
    """

    def __init__(
        self,
        caller: Any = None,
        settings: ArgmatchSettings | None = None,
        parent: ParseContext | None = None,
    ) -> None:
        self.caller: Any = caller
        self.settings: ArgmatchSettings = settings or ArgmatchSettings()
        self._parent: ParseContext | None = parent
        self._values: dict[str, Any] = {}

    def put(self, key: str, value: Any) -> None:
        """Store a value. Later writes for the same key overwrite earlier ones."""
        self._values.pop(key, None)
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._values:
            return self._values[key]
        if self._parent is not None:
            return self._parent.get(key, default)
        return default

    def has(self, key: str) -> bool:
        return key in self._values or (self._parent is not None and self._parent.has(key))

    def fork(self) -> ParseContext:
        """Return a buffered child context. Reads fall through to this context."""
        return ParseContext(caller=self.caller, settings=self.settings, parent=self)

    def commit(self) -> None:
        """Write the buffered values of a forked context into its parent."""
        if self._parent is None:
            raise RuntimeError("Only a forked context can be committed.")
        for key, value in self._values.items():
            self._parent.put(key, value)

    def as_dict(self) -> dict[str, Any]:
        values = self._parent.as_dict() if self._parent is not None else {}
        for key, value in self._values.items():
            values.pop(key, None)
            values[key] = value
        return values

    def keys(self) -> list[str]:
        return list(self.as_dict())

    def items(self):
        return self.as_dict().items()

    def __getitem__(self, key: str) -> Any:
        if not self.has(key):
            raise KeyError(key)
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_dict())

    def __len__(self) -> int:
        return len(self.as_dict())

    def __repr__(self) -> str:
        return f"ParseContext({self.as_dict()!r})"
