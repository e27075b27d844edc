# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name matching strategies used to resolve typed text into candidates.

A `NameMatcher` takes raw input and a `CandidatePool` and returns a `MatchResult`.
The concrete matchers only differ in how a single normalized name is tested:

- ExactMatcher: the normalized name equals the normalized input.
- PrefixMatcher: the normalized name starts with the normalized input.
- SubstringMatcher: the normalized name contains the normalized input.
- NameLookupMatcher: only the pool's case-insensitive exact name lookup.

Scan rules (shared by every scanning matcher):
- A "perfect" match is one where the matched normalized text has the same length
  as the normalized input. The first perfect match discards all imperfect matches
  collected so far, and from then on only perfect matches are accepted. A result
  therefore never mixes perfect and imperfect matches.
- If a candidate's name does not match and the matcher considers display names,
  the markup-stripped display name is tested with the same rule. A candidate is
  added at most once.

Shortcuts (an exact name lookup before scanning, and returning the first perfect
name match early) are only taken when they cannot hide an ambiguity: the pool
must guarantee unique names and display names must not take part in matching.

Module constants provide the common configurations:
    EXACT, STARTS_WITH, CONTAINS (including display names)
    NAME_EXACT, NAME_STARTS_WITH, NAME_CONTAINS (names only)
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from argmatch.logger import logger
from argmatch.protocols import CandidatePool
from argmatch.text import normalize, strip_markup


@dataclass(frozen=True)
class MatchResult:
    """
    The candidates matched for one input.

    Attributes:
        candidates (tuple): Matched candidates in pool order.
        exact (bool): True if every candidate is a perfect match of the input.
            A candidate matched through its display name counts as perfect
            when the stripped display name equals the input, even if its
            primary name does not.
    """

    candidates: tuple[Any, ...] = field(default_factory=tuple)
    exact: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.candidates

    @property
    def is_unique(self) -> bool:
        return len(self.candidates) == 1

    def first(self) -> Any | None:
        return self.candidates[0] if self.candidates else None

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self):
        return iter(self.candidates)


class _ScanState:
    """Accumulates matches while enforcing the perfect-match promotion rule."""

    def __init__(self, input_length: int) -> None:
        self.input_length = input_length
        self.matches: list[Any] = []
        self.only_perfect: bool = False

    def offer(self, candidate: Any, normalized_name: str, matched: bool) -> bool:
        """Record `candidate` if it is acceptable. Returns True if it was added."""
        if not matched:
            return False
        if len(normalized_name) == self.input_length:
            if not self.only_perfect:
                self.matches.clear()
            self.only_perfect = True
            self.matches.append(candidate)
            return True
        if self.only_perfect:
            return False
        self.matches.append(candidate)
        return True


class NameMatcher(ABC):
    """Base class for name matching strategies."""

    def __init__(self, match_display_names: bool = True) -> None:
        self.match_display_names = match_display_names

    def can_shortcut(self, pool: CandidatePool) -> bool:
        """Whether a single perfect name match proves the result is unambiguous."""
        return not self.match_display_names and bool(getattr(pool, "unique_names", False))

    def match(self, text: str, pool: CandidatePool) -> MatchResult:
        normalized_input = normalize(text or "")
        if not normalized_input:
            return MatchResult()

        shortcut = self.can_shortcut(pool)
        if shortcut:
            exact_match = pool.get_by_name(text.strip())
            if exact_match is not None:
                return MatchResult((exact_match,), exact=True)

        state = _ScanState(len(normalized_input))
        for candidate in pool:
            normalized_name = normalize(candidate.name)
            if state.offer(
                candidate,
                normalized_name,
                self.matches(normalized_input, normalized_name),
            ):
                if shortcut and state.only_perfect:
                    return MatchResult((candidate,), exact=True)
                continue

            if not self.match_display_names:
                continue
            display_name = getattr(candidate, "display_name", None)
            if not display_name:
                continue
            normalized_display_name = normalize(strip_markup(display_name))
            state.offer(
                candidate,
                normalized_display_name,
                self.matches(normalized_input, normalized_display_name),
            )

        logger.debug(
            "%s matched %d candidates for '%s' (perfect=%s).",
            type(self).__name__,
            len(state.matches),
            text,
            state.only_perfect,
        )
        return MatchResult(tuple(state.matches), exact=state.only_perfect)

    @abstractmethod
    def matches(self, normalized_input: str, normalized_name: str) -> bool:
        """Test a single normalized name against the normalized input."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(match_display_names={self.match_display_names})"


class ExactMatcher(NameMatcher):
    def matches(self, normalized_input: str, normalized_name: str) -> bool:
        return normalized_name == normalized_input


class PrefixMatcher(NameMatcher):
    def matches(self, normalized_input: str, normalized_name: str) -> bool:
        return normalized_name.startswith(normalized_input)


class SubstringMatcher(NameMatcher):
    def matches(self, normalized_input: str, normalized_name: str) -> bool:
        return normalized_input in normalized_name


class NameLookupMatcher(NameMatcher):
    """Only uses the pool's case-insensitive exact name lookup. Never scans."""

    def __init__(self) -> None:
        super().__init__(match_display_names=False)

    def match(self, text: str, pool: CandidatePool) -> MatchResult:
        if not text or not text.strip():
            return MatchResult()
        exact_match = pool.get_by_name(text.strip())
        if exact_match is None:
            return MatchResult()
        return MatchResult((exact_match,), exact=True)

    def matches(self, normalized_input: str, normalized_name: str) -> bool:
        return normalized_name == normalized_input


EXACT: NameMatcher = ExactMatcher()
STARTS_WITH: NameMatcher = PrefixMatcher()
CONTAINS: NameMatcher = SubstringMatcher()
NAME_EXACT: NameMatcher = NameLookupMatcher()
NAME_STARTS_WITH: NameMatcher = PrefixMatcher(match_display_names=False)
NAME_CONTAINS: NameMatcher = SubstringMatcher(match_display_names=False)

def get_matcher(strategy: str, match_display_names: bool = True) -> NameMatcher:
    """Return a matcher for one of `exact`, `prefix` or `contains`."""
    matcher_types: dict[str, type[NameMatcher]] = {
        "exact": ExactMatcher,
        "prefix": PrefixMatcher,
        "contains": SubstringMatcher,
    }
    try:
        matcher_type = matcher_types[strategy.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Invalid matching strategy: '{strategy}'. "
            f"Must be one of: {', '.join(matcher_types)}"
        ) from None
    return matcher_type(match_display_names=match_display_names)
