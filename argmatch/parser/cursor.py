# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TokenCursor`, a forward-only, peekable view over whitespace-split input.

One cursor is created per parse or completion request and shared by every
argument in the tree for that request. Arguments consume tokens with `next()`
after checking `has_next()`. Combinators that need to try an alternative take a
`snapshot()` before delegating and `restore()` it afterwards; nothing else
moves the offset backwards.
"""
from __future__ import annotations

from typing import Sequence


class TokenCursor:
    """
    A cursor over a sequence of string tokens.

    Attributes:
        tokens (tuple[str, ...]): The tokens of the command line (without the command itself).
        offset (int): Index of the next token `next()` will return.
    """

    def __init__(self, tokens: Sequence[str] | None = None) -> None:
        self.tokens: tuple[str, ...] = tuple(tokens or ())
        self.offset: int = 0

    @classmethod
    def from_text(cls, text: str) -> TokenCursor:
        """
        Split `text` on whitespace.

        If the text ends in whitespace an empty final token is appended, since the
        user has started a new argument that is still empty.
        """
        tokens = text.split()
        if text and text[-1].isspace():
            tokens.append("")
        return cls(tokens)

    def has_next(self) -> bool:
        return self.offset < len(self.tokens)

    def next(self) -> str:
        """Consume and return the next token."""
        if not self.has_next():
            raise IndexError("No tokens left.")
        token = self.tokens[self.offset]
        self.offset += 1
        return token

    def peek(self) -> str | None:
        """Return the next token without consuming it."""
        if not self.has_next():
            return None
        return self.tokens[self.offset]

    def remaining_count(self) -> int:
        return len(self.tokens) - self.offset

    def remaining(self) -> list[str]:
        return list(self.tokens[self.offset :])

    def snapshot(self) -> int:
        return self.offset

    def restore(self, snapshot: int) -> None:
        if not 0 <= snapshot <= len(self.tokens):
            raise ValueError(f"Invalid cursor snapshot: {snapshot}")
        self.offset = snapshot

    def __repr__(self) -> str:
        return f"TokenCursor(tokens={list(self.tokens)!r}, offset={self.offset})"
