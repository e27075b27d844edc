"""resolve_demo.py"""
from argmatch import complete, parse
from argmatch.config import load_roster
from argmatch.exceptions import ArgumentParseError
from argmatch.matching import EXACT, NAME_EXACT, STARTS_WITH
from argmatch.parser import CandidateArgument

roster = load_roster("users.yaml")

for matcher in (EXACT, STARTS_WITH, NAME_EXACT):
    user = CandidateArgument("user", roster, matcher=matcher, id_type=int)
    print(f"--- {matcher!r}")
    for line in ("anna", "annab", "bob", "jon-doe", "4", "nobody"):
        try:
            print(f"{line!r:>10} -> {parse(user, line)['user']!r}")
        except ArgumentParseError as error:
            print(f"{line!r:>10} -> {type(error).__name__}: {error.message}")
    print(f"completions for 'an': {complete(user, 'an')}")
