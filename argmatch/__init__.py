"""
Argmatch Argument Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .engine import ArgumentEngine, complete, parse
from .roster import Roster, User

logger = logging.getLogger("argmatch")


__all__ = [
    "ArgumentEngine",
    "Roster",
    "User",
    "complete",
    "parse",
]
