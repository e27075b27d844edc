"""
Argmatch Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import CommandArgument
from .candidates import (
    CandidateArgument,
    CandidateByIdArgument,
    CandidateByNameArgument,
    CandidateNameArgument,
)
from .combinators import FirstOfArgument, OptionalArgument, SequenceArgument
from .context import ParseContext
from .cursor import TokenCursor
from .filters import ArgumentFilter
from .values import ValueArgument

__all__ = [
    "ArgumentFilter",
    "CandidateArgument",
    "CandidateByIdArgument",
    "CandidateByNameArgument",
    "CandidateNameArgument",
    "CommandArgument",
    "FirstOfArgument",
    "OptionalArgument",
    "ParseContext",
    "SequenceArgument",
    "TokenCursor",
    "ValueArgument",
]
