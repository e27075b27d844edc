# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
In-memory candidate pool for argmatch.

`User` is a pydantic model satisfying the `Candidate` protocol, and `Roster` is a
`CandidatePool` built from a list of candidates. Roster keeps a case-insensitive
name index for O(1) exact lookups and decides for itself whether names are
unique, which is what the name matchers rely on before taking any shortcut.

Rosters are typically loaded from YAML or TOML via `argmatch.config.load_roster`.
"""
from __future__ import annotations

from typing import Any, Hashable, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, field_validator

from argmatch.logger import logger
from argmatch.text import normalize
from argmatch.utils import CaseInsensitiveDict


class User(BaseModel):
    """A connected user that can be referenced by name or identifier."""

    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str
    display_name: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value or any(char.isspace() for char in value):
            raise ValueError("User names must be non-empty and contain no whitespace.")
        return value

    def __str__(self) -> str:
        return self.name


class Roster:
    """
    A `CandidatePool` over a fixed list of candidates.

    Iteration order is insertion order. Name lookups are case-insensitive; if two
    candidates share a name, the first one wins the index and `unique_names` is
    False so matchers fall back to a full scan.
    """

    def __init__(self, candidates: Iterable[Any] | None = None) -> None:
        self._candidates: list[Any] = []
        self._by_name: CaseInsensitiveDict = CaseInsensitiveDict()
        self._by_id: dict[Hashable, Any] = {}
        self._normalized_names: set[str] = set()
        self._unique_names: bool = True
        for candidate in candidates or ():
            self.add(candidate)

    @property
    def unique_names(self) -> bool:
        return self._unique_names

    def add(self, candidate: Any) -> None:
        if candidate.id in self._by_id:
            raise ValueError(f"Duplicate candidate id: {candidate.id!r}")
        self._index_name(candidate)
        self._by_id[candidate.id] = candidate
        self._candidates.append(candidate)

    def remove(self, candidate_id: Hashable) -> Any | None:
        candidate = self._by_id.pop(candidate_id, None)
        if candidate is None:
            return None
        self._candidates.remove(candidate)
        self._rebuild_name_index()
        return candidate

    def _index_name(self, candidate: Any) -> None:
        normalized_name = normalize(candidate.name)
        if normalized_name in self._normalized_names:
            logger.debug(
                "Roster name '%s' is not unique, disabling name shortcuts.",
                candidate.name,
            )
            self._unique_names = False
        self._normalized_names.add(normalized_name)
        self._by_name.setdefault(candidate.name, candidate)

    def _rebuild_name_index(self) -> None:
        self._by_name = CaseInsensitiveDict()
        self._normalized_names = set()
        self._unique_names = True
        for candidate in self._candidates:
            self._index_name(candidate)

    def get_by_name(self, name: str) -> Any | None:
        return self._by_name.get(name)

    def get_by_id(self, candidate_id: Hashable) -> Any | None:
        return self._by_id.get(candidate_id)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._candidates

    def __repr__(self) -> str:
        return f"Roster({len(self._candidates)} candidates)"
