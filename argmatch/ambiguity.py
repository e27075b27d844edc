# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Detects and reports ambiguous name input.

`AmbiguousNameHandler` inspects the `(id, name)` pairs a name matcher produced.
Zero or one entry is not ambiguous. Two or more entries are: the handler builds a
bounded report listing at most `max_entries` of them, each tagged with its id so
the user can retype an identifier instead, followed by an "...and N more" line
when the list was cut short.

The entries iterable is consumed exactly once.
"""
from __future__ import annotations

from typing import Hashable, Iterable

from argmatch.config import DEFAULT_AMBIGUOUS_MAX_ENTRIES
from argmatch.messages import MessageCatalog


class AmbiguousNameHandler:
    """
    Decides whether `name` resolved ambiguously and formats the report.

    Attributes:
        name (str): The input that was matched.
        max_entries (int): Maximum number of entries listed in the report.
        is_ambiguous (bool): True if two or more entries were given.
        match_count (int): Number of entries given.
        error_message (str | None): The formatted report, if ambiguous.
    """

    def __init__(
        self,
        name: str,
        entries: Iterable[tuple[Hashable, str]],
        max_entries: int = DEFAULT_AMBIGUOUS_MAX_ENTRIES,
        messages: MessageCatalog | None = None,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.name: str = name
        self.max_entries: int = max_entries
        self.messages: MessageCatalog = messages or MessageCatalog()
        self.match_count: int = 0
        self.error_message: str | None = None

        listed: list[tuple[Hashable, str]] = []
        for entry in entries:
            self.match_count += 1
            if len(listed) < max_entries:
                listed.append(entry)

        self.is_ambiguous: bool = self.match_count > 1
        if self.is_ambiguous:
            self.error_message = self._build_error_message(listed)

    def _build_error_message(self, listed: list[tuple[Hashable, str]]) -> str:
        lines = [self.messages.render("ambiguous_name", name=self.name)]
        for entry_id, entry_name in listed:
            lines.append(
                self.messages.render("ambiguous_name_entry", name=entry_name, id=entry_id)
            )
        remaining = self.match_count - len(listed)
        if remaining > 0:
            lines.append(self.messages.render("ambiguous_name_more", count=remaining))
        return "\n".join(lines)


def handle_ambiguous_name(
    name: str,
    entries: Iterable[tuple[Hashable, str]],
    max_entries: int = DEFAULT_AMBIGUOUS_MAX_ENTRIES,
    messages: MessageCatalog | None = None,
) -> tuple[bool, str | None]:
    """
    Check `entries` for ambiguity.

    Returns:
        tuple[bool, str | None]: Whether the input was ambiguous, and the report if so.
    """
    handler = AmbiguousNameHandler(name, entries, max_entries, messages)
    return handler.is_ambiguous, handler.error_message
