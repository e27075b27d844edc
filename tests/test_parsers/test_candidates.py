import pytest

from argmatch.config import ArgmatchSettings
from argmatch.engine import ArgumentEngine
from argmatch.exceptions import (
    ArgumentRejectedError,
    InvalidArgumentError,
    MissingArgumentError,
)
from argmatch.matching import EXACT, NAME_EXACT, STARTS_WITH
from argmatch.parser import (
    ArgumentFilter,
    CandidateArgument,
    CandidateByIdArgument,
    CandidateByNameArgument,
    CandidateNameArgument,
)
from argmatch.roster import Roster, User


@pytest.fixture
def roster():
    return Roster(
        [
            User(id=1, name="Anna"),
            User(id=2, name="Annabelle"),
            User(id=3, name="Bob", display_name="§aBob§r"),
            User(id=4, name="Rob", display_name="Bob"),
        ]
    )


@pytest.fixture
def engine():
    return ArgumentEngine()


def not_self():
    return ArgumentFilter(
        lambda caller, user: caller is None or user.id != caller.id,
        rejected_message="You cannot target yourself.",
    )


def test_by_name_prefers_the_perfect_match(engine, roster):
    user = CandidateByNameArgument("user", roster, matcher=STARTS_WITH)
    assert engine.parse(user, ["anna"])["user"].id == 1
    assert engine.parse(user, ["ANNAB"])["user"].id == 2


def test_by_name_not_found(engine, roster):
    user = CandidateByNameArgument("user", roster)
    with pytest.raises(InvalidArgumentError) as exc_info:
        engine.parse(user, ["carl"])
    assert exc_info.value.message == "No user found for 'carl'."


def test_by_name_missing(engine, roster):
    user = CandidateByNameArgument("user", roster)
    with pytest.raises(MissingArgumentError) as exc_info:
        engine.parse(user, [])
    assert exc_info.value.message == "Missing user '<user>'."


def test_by_name_ambiguous_label_collision(engine, roster):
    user = CandidateByNameArgument("user", roster, matcher=EXACT)
    with pytest.raises(ArgumentRejectedError) as exc_info:
        engine.parse(user, ["bob"])
    lines = exc_info.value.message.splitlines()
    assert lines[0] == "There are multiple matches for the name 'bob'!"
    assert lines[1:] == ["  - Bob (3)", "  - Rob (4)"]


def test_by_name_primary_names_only(engine, roster):
    user = CandidateByNameArgument("user", roster, matcher=NAME_EXACT)
    assert engine.parse(user, ["bob"])["user"].id == 3


def test_by_name_ambiguous_same_names(engine):
    roster = Roster([User(id=1, name="Steve"), User(id=2, name="steve")])
    user = CandidateByNameArgument("user", roster, matcher=EXACT)
    with pytest.raises(ArgumentRejectedError) as exc_info:
        engine.parse(user, ["Steve"])
    assert "Steve (1)" in exc_info.value.message
    assert "steve (2)" in exc_info.value.message


def test_by_name_filter_runs_after_ambiguity_check(engine, roster):
    everyone_hidden = ArgumentFilter(lambda caller, user: False)
    user = CandidateByNameArgument("user", roster, filter=everyone_hidden)
    with pytest.raises(ArgumentRejectedError) as exc_info:
        engine.parse(user, ["bob"])
    assert "multiple matches" in exc_info.value.message


def test_by_name_with_pool_provider(engine, roster):
    calls = []

    def visible():
        calls.append(1)
        return roster

    user = CandidateByNameArgument("user", visible)
    engine.parse(user, ["rob"])
    engine.complete(user, ["r"])
    assert len(calls) == 2


def test_by_id(engine, roster):
    user = CandidateByIdArgument("user", roster, id_type=int)
    assert engine.parse(user, ["2"])["user"].name == "Annabelle"
    with pytest.raises(InvalidArgumentError) as exc_info:
        engine.parse(user, ["two"])
    assert exc_info.value.message == "Invalid user id 'two'."
    with pytest.raises(InvalidArgumentError) as exc_info:
        engine.parse(user, ["99"])
    assert exc_info.value.message == "No user found for '99'."


def test_by_id_suggestions_need_three_characters(engine):
    roster = Roster([User(id=1000, name="a"), User(id=1001, name="b"), User(id=2000, name="c")])
    user = CandidateByIdArgument("user", roster, id_type=int)
    assert engine.complete(user, ["10"]) == []
    assert engine.complete(user, ["100"]) == ["1000", "1001"]


def test_candidate_by_name_or_id(engine, roster):
    user = CandidateArgument("user", roster, matcher=STARTS_WITH, id_type=int)
    context = engine.parse(user, ["anna"])
    assert context["user"].id == 1
    assert context["user:name"].id == 1
    context = engine.parse(user, ["2"])
    assert context["user"].id == 2
    assert context["user:id"].id == 2
    assert "user:name" not in context


def test_candidate_ambiguity_beats_invalid_id(engine, roster):
    user = CandidateArgument("user", roster, matcher=EXACT, id_type=int)
    with pytest.raises(ArgumentRejectedError) as exc_info:
        engine.parse(user, ["bob"])
    assert "Rob (4)" in exc_info.value.message


def test_candidate_unknown_reports_name_error(engine, roster):
    user = CandidateArgument("user", roster, id_type=int)
    with pytest.raises(InvalidArgumentError) as exc_info:
        engine.parse(user, ["99"])
    assert not isinstance(exc_info.value, ArgumentRejectedError)
    assert exc_info.value.argument is user.by_name


def test_candidate_missing_message(engine, roster):
    user = CandidateArgument("user", roster)
    with pytest.raises(MissingArgumentError) as exc_info:
        engine.parse(user, [])
    assert exc_info.value.argument is user
    assert exc_info.value.message == "Missing user '<user>'."


def test_candidate_filter_rejection(engine, roster):
    anna = roster.get_by_id(1)
    user = CandidateArgument("user", roster, filter=not_self(), id_type=int)
    for token in ("anna", "1"):
        with pytest.raises(ArgumentRejectedError) as exc_info:
            engine.parse(user, [token], caller=anna)
        assert exc_info.value.message == "You cannot target yourself."
    assert engine.parse(user, ["anna"], caller=roster.get_by_id(2))["user"] is anna


def test_candidate_completion(engine, roster):
    user = CandidateArgument("user", roster, matcher=STARTS_WITH, id_type=int)
    assert engine.complete(user, ["ann"]) == ["Anna", "Annabelle"]
    assert engine.complete(user, ["b"]) == ["Bob"]
    assert engine.complete(user, [""]) == ["Anna", "Annabelle", "Bob", "Rob"]


def test_candidate_completion_hides_filtered(engine, roster):
    hide_annabelle = ArgumentFilter(lambda caller, user: user.id != 2)
    user = CandidateArgument("user", roster, filter=hide_annabelle)
    assert engine.complete(user, ["ann"]) == ["Anna"]


def test_candidate_completion_minimum_input(engine, roster):
    user = CandidateArgument("user", roster, name_min_completion_input=2)
    assert engine.complete(user, ["a"]) == []
    assert engine.complete(user, ["an"]) == ["Anna", "Annabelle"]


def test_candidate_completion_minimum_from_settings(roster):
    engine = ArgumentEngine(ArgmatchSettings(name_min_completion_input=3))
    user = CandidateArgument("user", roster)
    for partial in ("a", "an"):
        assert engine.complete(user, [partial]) == []
    assert engine.complete(user, ["ann"]) == ["Anna", "Annabelle"]


@pytest.mark.parametrize("matcher", [EXACT, STARTS_WITH])
def test_completions_parse_back_to_their_candidate(engine, roster, matcher):
    user = CandidateArgument("user", roster, matcher=matcher, id_type=int)
    for suggestion in engine.complete(user, ["an"]):
        assert engine.parse(user, [suggestion])["user"].name == suggestion


def test_display_name_suggestions_are_normalized(engine):
    roster = Roster([User(id=1, name="jdoe", display_name="§bJon Doe")])
    user = CandidateByNameArgument("user", roster)
    assert engine.complete(user, ["jon"]) == ["Jon-Doe"]
    assert engine.parse(user, ["Jon-Doe"])["user"].id == 1


def test_candidate_name_accepts_unknown_names(engine, roster):
    name = CandidateNameArgument("name", roster)
    assert engine.parse(name, ["Zed"])["name"] == "Zed"
    assert engine.complete(name, ["an"]) == ["Anna", "Annabelle"]


def test_candidate_name_filter(engine, roster):
    taken = ArgumentFilter(
        lambda caller, value: roster.get_by_name(value) is None,
        rejected_message="The name '{argument}' is taken.",
    )
    name = CandidateNameArgument("name", roster, filter=taken)
    with pytest.raises(ArgumentRejectedError) as exc_info:
        engine.parse(name, ["ANNA"])
    assert exc_info.value.message == "The name 'ANNA' is taken."
