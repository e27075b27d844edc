# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Debug options for argmatch.

`DebugOptions` is an immutable set of enabled debug option names. It is built
once at startup (usually from `ArgmatchSettings.debug_options`) and handed to
the components that consult it. There is no process-wide registry.

Options:
- commands: Log every parse and completion request and its outcome.
- name-matching: Log the candidates each name matcher selected.
- completions: Log raw suggestion lists before deduplication and truncation.
"""
from __future__ import annotations

from typing import Iterable

from argmatch.logger import logger

COMMANDS = "commands"
NAME_MATCHING = "name-matching"
COMPLETIONS = "completions"


class DebugOptions:
    """An immutable set of enabled debug options."""

    ALL: tuple[str, ...] = (COMMANDS, NAME_MATCHING, COMPLETIONS)

    def __init__(self, enabled: Iterable[str] = ()) -> None:
        options = set()
        for option in enabled:
            normalized = option.strip().lower()
            if normalized not in self.ALL:
                logger.warning("Ignoring unknown debug option: '%s'", option)
                continue
            options.add(normalized)
        self._enabled: frozenset[str] = frozenset(options)

    @classmethod
    def everything(cls) -> DebugOptions:
        return cls(cls.ALL)

    def is_enabled(self, option: str) -> bool:
        return option in self._enabled

    @property
    def enabled(self) -> frozenset[str]:
        return self._enabled

    def __bool__(self) -> bool:
        return bool(self._enabled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DebugOptions):
            return NotImplemented
        return self._enabled == other._enabled

    def __hash__(self) -> int:
        return hash(self._enabled)

    def __repr__(self) -> str:
        return f"DebugOptions({sorted(self._enabled)})"
