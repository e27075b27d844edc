# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ArgumentCompleter`, a Prompt Toolkit completer backed by an argmatch
argument tree.

The text before the cursor is split with `TokenCursor.from_text`, handed to
`ArgumentEngine.complete`, and the suggestions are yielded as completions for
the final (possibly empty) token. When all suggestions share a prefix longer
than what was typed, that prefix is offered first so a single TAB extends the
input as far as it is unambiguous.
"""
from __future__ import annotations

import os
from typing import Any, Callable, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from argmatch.engine import ArgumentEngine
from argmatch.parser.argument import CommandArgument
from argmatch.parser.cursor import TokenCursor


class ArgumentCompleter(Completer):
    """
    Prompt Toolkit completer for one argument tree.

    Args:
        argument (CommandArgument): The argument tree to complete against.
        engine (ArgumentEngine | None): Engine (and settings) used for completion.
        caller (Callable[[], Any] | None): Returns the current caller, passed to
            argument filters on every request.
    """

    def __init__(
        self,
        argument: CommandArgument,
        engine: ArgumentEngine | None = None,
        caller: Callable[[], Any] | None = None,
    ) -> None:
        self.argument = argument
        self.engine = engine or ArgumentEngine()
        self.caller = caller

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Yield completions for the token under the cursor.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event, not used here.
        """
        text = document.text_before_cursor
        cursor = TokenCursor.from_text(text)
        if not cursor.tokens:
            cursor = TokenCursor([""])
        stub = cursor.tokens[-1]
        caller = self.caller() if self.caller else None
        suggestions = self.engine.complete(self.argument, cursor, caller)
        yield from self._yield_lcp_completions(suggestions, stub)

    def _yield_lcp_completions(self, suggestions: list[str], stub: str):
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.

        Suggestions are matched case-insensitively, so the typed stub is replaced
        by the suggestion's own spelling.
        """
        if not suggestions:
            return

        lcp = os.path.commonprefix(suggestions)

        if len(suggestions) == 1:
            yield Completion(
                suggestions[0], start_position=-len(stub), display=suggestions[0]
            )
        elif len(lcp) > len(stub):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for suggestion in suggestions:
                yield Completion(suggestion, start_position=-len(stub), display=suggestion)
        else:
            for suggestion in suggestions:
                yield Completion(suggestion, start_position=-len(stub), display=suggestion)
