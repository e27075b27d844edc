# Argmatch Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the external collaborators argmatch reads from.

These runtime-checkable `Protocol` classes specify the interfaces the engine
expects from the host environment. Nothing here owns entity state; the engine
only reads candidates for the duration of one parse or completion call.

Protocols:
- Candidate: An entity that can be matched by identifier, name or display name.
- CandidatePool: The currently visible candidates plus optional fast lookups.
- CandidatePredicate: `(caller, candidate) -> bool` visibility/permission check.
"""
from __future__ import annotations

from typing import Any, Hashable, Iterator, Protocol, runtime_checkable


@runtime_checkable
class Candidate(Protocol):
    """
    A matchable entity.

    Assumptions:
    - `id` is stable and unique.
    - `name` is unique among visible candidates and contains no whitespace or markup.
    - `display_name` may contain whitespace, color codes and markup, and is not unique.
    """

    @property
    def id(self) -> Hashable: ...

    @property
    def name(self) -> str: ...

    @property
    def display_name(self) -> str | None: ...


@runtime_checkable
class CandidatePool(Protocol):
    """Currently visible candidates. Valid for the duration of one call."""

    @property
    def unique_names(self) -> bool:
        """True if names are guaranteed unique (case-insensitive) within the pool."""
        ...

    def __iter__(self) -> Iterator[Any]: ...

    def get_by_name(self, name: str) -> Any | None:
        """Case-insensitive exact name lookup."""
        ...

    def get_by_id(self, candidate_id: Hashable) -> Any | None: ...


@runtime_checkable
class CandidatePredicate(Protocol):
    def __call__(self, caller: Any, candidate: Any) -> bool: ...
