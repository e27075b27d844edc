import pytest

from argmatch.matching import (
    CONTAINS,
    EXACT,
    NAME_CONTAINS,
    NAME_EXACT,
    NAME_STARTS_WITH,
    STARTS_WITH,
    ExactMatcher,
    PrefixMatcher,
    SubstringMatcher,
    get_matcher,
)
from argmatch.roster import Roster, User


def names(result):
    return [candidate.name for candidate in result]


class ListPool:
    """A pool without an exact name index."""

    unique_names = False

    def __init__(self, candidates):
        self.candidates = list(candidates)

    def __iter__(self):
        return iter(self.candidates)

    def get_by_name(self, name):
        raise AssertionError("lookup must not be used")

    def get_by_id(self, candidate_id):
        return None


def test_perfect_match_discards_earlier_prefix_matches():
    roster = Roster([User(id=1, name="Albert"), User(id=2, name="Al")])
    result = STARTS_WITH.match("al", roster)
    assert names(result) == ["Al"]
    assert result.exact


def test_perfect_match_stops_later_imperfect_matches():
    roster = Roster([User(id=1, name="Al"), User(id=2, name="Albert")])
    result = STARTS_WITH.match("AL", roster)
    assert names(result) == ["Al"]


def test_prefix_matches_without_perfect_match():
    roster = Roster([User(id=1, name="Anna"), User(id=2, name="Annabelle")])
    result = STARTS_WITH.match("ann", roster)
    assert names(result) == ["Anna", "Annabelle"]
    assert not result.exact
    assert not result.is_unique


@pytest.mark.parametrize("matcher", [EXACT, STARTS_WITH, CONTAINS])
def test_unique_perfect_match_for_every_strategy(matcher):
    roster = Roster(
        [
            User(id=1, name="Joanna"),
            User(id=2, name="Annabelle"),
            User(id=3, name="Anna"),
        ]
    )
    result = matcher.match("anna", roster)
    assert names(result) == ["Anna"]
    assert result.is_unique
    assert result.first().id == 3


def test_contains():
    roster = Roster([User(id=1, name="Joanna"), User(id=2, name="Annabelle")])
    assert names(CONTAINS.match("nna", roster)) == ["Joanna", "Annabelle"]


def test_exact_finds_every_equal_name():
    roster = Roster([User(id=1, name="Steve"), User(id=2, name="steve")])
    assert not roster.unique_names
    assert names(EXACT.match("STEVE", roster)) == ["Steve", "steve"]


def test_name_only_scan_on_non_unique_pool_finds_all():
    roster = Roster([User(id=1, name="Al"), User(id=2, name="AL")])
    assert names(NAME_STARTS_WITH.match("al", roster)) == ["Al", "AL"]


def test_display_name_collision_is_ambiguous():
    roster = Roster(
        [
            User(id=1, name="Bob", display_name="§aBob§r"),
            User(id=2, name="Rob", display_name="Bob"),
        ]
    )
    assert names(EXACT.match("bob", roster)) == ["Bob", "Rob"]
    assert names(NAME_STARTS_WITH.match("bob", roster)) == ["Bob"]


def test_display_name_perfect_match_wins():
    roster = Roster(
        [
            User(id=1, name="Annabelle"),
            User(id=2, name="Zed", display_name="[bold]Anna[/bold]"),
        ]
    )
    result = STARTS_WITH.match("anna", roster)
    assert names(result) == ["Zed"]
    assert result.exact


def test_display_name_keeps_bracketed_label():
    roster = Roster([User(id=1, name="alice", display_name="[vip] Alice")])
    assert names(CONTAINS.match("vip", roster)) == ["alice"]
    assert names(STARTS_WITH.match("[vip]-al", roster)) == ["alice"]


def test_candidate_added_once():
    roster = Roster([User(id=1, name="Anna", display_name="Anna")])
    assert len(STARTS_WITH.match("ann", roster)) == 1


def test_input_is_normalized():
    roster = Roster([User(id=1, name="jdoe", display_name="Jon Doe")])
    assert names(EXACT.match(" jon_doe ", roster)) == ["jdoe"]
    assert names(EXACT.match("JON-DOE", roster)) == ["jdoe"]


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_input_matches_nothing(text):
    roster = Roster([User(id=1, name="Anna")])
    for matcher in (EXACT, STARTS_WITH, CONTAINS, NAME_EXACT):
        assert matcher.match(text, roster).is_empty


def test_shortcut_requires_unique_names_and_no_display_names():
    unique = Roster([User(id=1, name="Anna")])
    duplicated = Roster([User(id=1, name="Anna"), User(id=2, name="anna")])
    assert NAME_STARTS_WITH.can_shortcut(unique)
    assert NAME_CONTAINS.can_shortcut(unique)
    assert not NAME_STARTS_WITH.can_shortcut(duplicated)
    assert not STARTS_WITH.can_shortcut(unique)
    assert not EXACT.can_shortcut(unique)


def test_scan_without_shortcut_never_uses_lookup():
    pool = ListPool([User(id=1, name="Anna"), User(id=2, name="Annabelle")])
    assert names(NAME_STARTS_WITH.match("anna", pool)) == ["Anna"]
    assert names(EXACT.match("anna", pool)) == ["Anna"]


def test_name_lookup_only():
    roster = Roster([User(id=1, name="Anna"), User(id=2, name="Annabelle")])
    assert names(NAME_EXACT.match("ANNA", roster)) == ["Anna"]
    assert NAME_EXACT.match("ann", roster).is_empty


def test_get_matcher():
    assert isinstance(get_matcher("exact"), ExactMatcher)
    assert isinstance(get_matcher(" Prefix "), PrefixMatcher)
    matcher = get_matcher("contains", match_display_names=False)
    assert isinstance(matcher, SubstringMatcher)
    assert not matcher.match_display_names
    with pytest.raises(ValueError):
        get_matcher("fuzzy")
