# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Leaf arguments that resolve candidates from a `CandidatePool`.

- CandidateByNameArgument: Resolves a name through a `NameMatcher`, rejects
  ambiguous input, then applies the filter.
- CandidateByIdArgument: Resolves an identifier through the pool's id lookup,
  then applies the filter.
- CandidateArgument: A candidate given either by name or by identifier.
- CandidateNameArgument: Any name (not necessarily of a visible candidate), with
  completion for the names of visible candidates.

The pool may be given directly or as a zero-argument callable that returns the
currently visible candidates; a callable is invoked once per parse or completion.

Every leaf has a minimum completion input length. Shorter partial input gets no
suggestions at all, which keeps completion cheap while the input is still too
short to narrow anything down.
"""
from __future__ import annotations

from typing import Any, Callable, Hashable

from argmatch.ambiguity import AmbiguousNameHandler
from argmatch.completion import suggest_candidate_ids, suggest_candidate_names
from argmatch.debug import NAME_MATCHING
from argmatch.logger import logger
from argmatch.matching import EXACT, NameMatcher
from argmatch.parser.argument import CommandArgument
from argmatch.parser.combinators import FirstOfArgument
from argmatch.parser.context import ParseContext
from argmatch.parser.cursor import TokenCursor
from argmatch.parser.filters import ArgumentFilter
from argmatch.parser.utils import coerce_value
from argmatch.protocols import CandidatePool

PoolSource = CandidatePool | Callable[[], CandidatePool]


def _pool_provider(pool: PoolSource) -> Callable[[], CandidatePool]:
    if callable(pool):
        return pool
    return lambda: pool


class CandidateByNameArgument(CommandArgument):
    """
    A candidate specified by name.

    Args:
        name (str): The name the candidate is stored under.
        pool (CandidatePool | Callable): The visible candidates.
        matcher (NameMatcher): How names are matched. Defaults to `EXACT`.
        filter (ArgumentFilter | None): Visibility/permission check.
        min_completion_input (int | None): Minimum partial length before names are
            suggested. Defaults to the settings' `name_min_completion_input`.
        include_display_names (bool | None): Suggest display names. Defaults to
            whether the matcher matches display names.
        ambiguous_max_entries (int | None): Entries listed for ambiguous input.
            Defaults to the settings' `ambiguous_max_entries`.
    """

    missing_message = "candidate_missing"

    def __init__(
        self,
        name: str,
        pool: PoolSource,
        matcher: NameMatcher = EXACT,
        filter: ArgumentFilter | None = None,
        min_completion_input: int | None = None,
        include_display_names: bool | None = None,
        ambiguous_max_entries: int | None = None,
    ) -> None:
        super().__init__(name)
        self.get_pool: Callable[[], CandidatePool] = _pool_provider(pool)
        self.matcher: NameMatcher = matcher
        self.filter: ArgumentFilter = filter or ArgumentFilter.accept_any()
        self.min_completion_input: int | None = min_completion_input
        if include_display_names is None:
            include_display_names = matcher.match_display_names
        self.include_display_names: bool = include_display_names
        self.ambiguous_max_entries: int | None = ambiguous_max_entries

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        if not cursor.has_next():
            raise self.missing_argument_error(context)
        token = cursor.next()
        candidate = self.get_candidate(context, token)
        if candidate is None:
            raise self.invalid_argument_error(context, token, "candidate_not_found")
        if not self.filter.test(context.caller, candidate):
            raise self.filter.rejected_error(self, context, token, candidate)
        return candidate

    def get_candidate(self, context: ParseContext, token: str) -> Any | None:
        """
        Resolve `token` to a single candidate.

        Returns:
            The candidate, or None if nothing matched.

        Raises:
            ArgumentRejectedError: If the name matched more than one candidate.
        """
        result = self.matcher.match(token, self.get_pool())
        if context.settings.debug.is_enabled(NAME_MATCHING):
            logger.debug(
                "[%s] '%s' matched %s (exact=%s)",
                self.name,
                token,
                [candidate.name for candidate in result],
                result.exact,
            )
        if result.is_empty:
            return None

        max_entries = self.ambiguous_max_entries or context.settings.ambiguous_max_entries
        handler = AmbiguousNameHandler(
            token,
            ((candidate.id, candidate.name) for candidate in result),
            max_entries=max_entries,
            messages=context.settings.messages,
        )
        if handler.is_ambiguous:
            raise self.rejected_argument_error(handler.error_message or "", token)
        return result.first()

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        if cursor.remaining_count() != 1:
            return []
        partial = cursor.next()
        min_input = self.min_completion_input
        if min_input is None:
            min_input = context.settings.name_min_completion_input
        if len(partial) < min_input:
            return []
        return suggest_candidate_names(
            self.get_pool(),
            partial,
            min_input=min_input,
            accept=self.filter.bind(context.caller),
            include_display_names=self.include_display_names,
            limit=context.settings.max_suggestions,
        )


class CandidateByIdArgument(CommandArgument):
    """
    A candidate specified by identifier.

    Args:
        name (str): The name the candidate is stored under.
        pool (CandidatePool | Callable): The visible candidates.
        id_type (Any): Type the token is coerced to before the lookup.
        filter (ArgumentFilter | None): Visibility/permission check.
        min_completion_input (int | None): Minimum partial length before ids are
            suggested. Defaults to the settings' `id_min_completion_input`.
    """

    missing_message = "candidate_missing"

    def __init__(
        self,
        name: str,
        pool: PoolSource,
        id_type: Any = str,
        filter: ArgumentFilter | None = None,
        min_completion_input: int | None = None,
    ) -> None:
        super().__init__(name)
        self.get_pool: Callable[[], CandidatePool] = _pool_provider(pool)
        self.id_type: Any = id_type
        self.filter: ArgumentFilter = filter or ArgumentFilter.accept_any()
        self.min_completion_input: int | None = min_completion_input

    def parse_id(self, context: ParseContext, token: str) -> Hashable:
        try:
            return coerce_value(token.strip(), self.id_type)
        except ValueError as error:
            raise self.invalid_argument_error(
                context, token, "candidate_id_invalid"
            ) from error

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        if not cursor.has_next():
            raise self.missing_argument_error(context)
        token = cursor.next()
        candidate_id = self.parse_id(context, token)
        candidate = self.get_pool().get_by_id(candidate_id)
        if candidate is None:
            raise self.invalid_argument_error(context, token, "candidate_not_found")
        if not self.filter.test(context.caller, candidate):
            raise self.filter.rejected_error(self, context, token, candidate)
        return candidate

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        if cursor.remaining_count() != 1:
            return []
        partial = cursor.next()
        min_input = self.min_completion_input
        if min_input is None:
            min_input = context.settings.id_min_completion_input
        if len(partial) < min_input:
            return []
        return suggest_candidate_ids(
            self.get_pool(),
            partial,
            min_input=min_input,
            accept=self.filter.bind(context.caller),
            limit=context.settings.max_suggestions,
        )


class CandidateArgument(FirstOfArgument):
    """
    A candidate specified by either name or identifier.

    Tries the name first, then the identifier. Completion offers both names and
    identifiers. The children store their values under `<name>:name` and
    `<name>:id`; the resolved candidate is stored under `name`.
    """

    missing_message = "candidate_missing"

    def __init__(
        self,
        name: str,
        pool: PoolSource,
        matcher: NameMatcher = EXACT,
        filter: ArgumentFilter | None = None,
        id_type: Any = str,
        name_min_completion_input: int | None = None,
        id_min_completion_input: int | None = None,
    ) -> None:
        self.by_name = CandidateByNameArgument(
            f"{name}:name",
            pool,
            matcher=matcher,
            filter=filter,
            min_completion_input=name_min_completion_input,
        )
        self.by_id = CandidateByIdArgument(
            f"{name}:id",
            pool,
            id_type=id_type,
            filter=filter,
            min_completion_input=id_min_completion_input,
        )
        super().__init__(name, [self.by_name, self.by_id], join_formats=False)


class CandidateNameArgument(CommandArgument):
    """
    Accepts any single name token.

    The name does not have to belong to a visible candidate; use the `filter`
    (called with the name string) to restrict it. Completion suggests the names
    and display names of visible candidates.
    """

    missing_message = "candidate_missing"

    def __init__(
        self,
        name: str,
        pool: PoolSource,
        filter: ArgumentFilter | None = None,
        min_completion_input: int | None = None,
    ) -> None:
        super().__init__(name)
        self.get_pool: Callable[[], CandidatePool] = _pool_provider(pool)
        self.filter: ArgumentFilter = filter or ArgumentFilter.accept_any()
        self.min_completion_input: int | None = min_completion_input

    def parse_value(self, context: ParseContext, cursor: TokenCursor) -> Any:
        if not cursor.has_next():
            raise self.missing_argument_error(context)
        token = cursor.next()
        if not token.strip():
            raise self.invalid_argument_error(context, token)
        if not self.filter.test(context.caller, token):
            raise self.filter.rejected_error(self, context, token, token)
        return token

    def suggest(self, context: ParseContext, cursor: TokenCursor) -> list[str]:
        if cursor.remaining_count() != 1:
            return []
        min_input = self.min_completion_input
        if min_input is None:
            min_input = context.settings.name_min_completion_input
        return suggest_candidate_names(
            self.get_pool(),
            cursor.next(),
            min_input=min_input,
            limit=context.settings.max_suggestions,
        )
