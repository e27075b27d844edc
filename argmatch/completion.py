# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Suggestion helpers shared by the candidate arguments.

Completion runs on every keystroke, so every helper here is bounded:
- Input shorter than the minimum completion length returns immediately, before
  the pool is touched.
- Scans stop as soon as `limit` suggestions were collected.

Functions:
- suggest_candidate_names: Names (or display names) of visible candidates.
- suggest_candidate_ids: Identifiers of visible candidates.
- finalize_suggestions: Deduplicate in first-seen order and truncate.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from argmatch.config import DEFAULT_MAX_SUGGESTIONS
from argmatch.protocols import CandidatePool
from argmatch.text import normalize, normalize_keep_case, strip_markup
from argmatch.utils import unique_everseen

CandidateFilter = Callable[[Any], bool]


def _accept_any(_: Any) -> bool:
    return True


def suggest_candidate_names(
    pool: CandidatePool,
    partial: str,
    *,
    min_input: int = 0,
    accept: CandidateFilter | None = None,
    include_display_names: bool = True,
    limit: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """
    Suggest names of visible candidates that start with `partial`.

    A candidate's name is suggested as is if its normalized form starts with the
    normalized partial input. Otherwise, with `include_display_names`, its display
    name is stripped of markup and suggested in whitespace-normalized form. Never
    both for the same candidate.

    Args:
        pool (CandidatePool): The visible candidates.
        partial (str): The partial token typed so far.
        min_input (int): Below this input length nothing is suggested.
        accept (Callable): Visibility filter for candidates.
        include_display_names (bool): Also consider display names.
        limit (int): Maximum number of suggestions.

    Returns:
        list[str]: Suggestions in pool order.
    """
    if len(partial) < min_input or limit <= 0:
        return []
    accept = accept or _accept_any
    normalized_partial = normalize(partial)
    suggestions: list[str] = []
    for candidate in pool:
        if len(suggestions) >= limit:
            break
        if not accept(candidate):
            continue
        name = candidate.name
        if normalize(name).startswith(normalized_partial):
            suggestions.append(name)
            continue
        if not include_display_names:
            continue
        display_name = getattr(candidate, "display_name", None)
        if not display_name:
            continue
        display_name = normalize_keep_case(strip_markup(display_name))
        if display_name and display_name.casefold().startswith(normalized_partial):
            suggestions.append(display_name)
    return suggestions


def suggest_candidate_ids(
    pool: CandidatePool,
    partial: str,
    *,
    min_input: int = 0,
    accept: CandidateFilter | None = None,
    limit: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """Suggest identifiers of visible candidates that start with `partial`."""
    if len(partial) < min_input or limit <= 0:
        return []
    accept = accept or _accept_any
    normalized_partial = partial.strip().casefold()
    suggestions: list[str] = []
    for candidate in pool:
        if len(suggestions) >= limit:
            break
        if not accept(candidate):
            continue
        candidate_id = str(candidate.id)
        if candidate_id.casefold().startswith(normalized_partial):
            suggestions.append(candidate_id)
    return suggestions


def finalize_suggestions(
    suggestions: Iterable[str], limit: int = DEFAULT_MAX_SUGGESTIONS
) -> list[str]:
    """Deduplicate `suggestions` keeping first-seen order, then truncate to `limit`."""
    finalized: list[str] = []
    for suggestion in unique_everseen(suggestions):
        if len(finalized) >= limit:
            break
        finalized.append(suggestion)
    return finalized
