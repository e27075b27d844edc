import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from argmatch.completer import ArgumentCompleter
from argmatch.matching import STARTS_WITH
from argmatch.parser import (
    ArgumentFilter,
    CandidateArgument,
    OptionalArgument,
    SequenceArgument,
    ValueArgument,
)
from argmatch.roster import Roster, User


@pytest.fixture
def roster():
    return Roster(
        [
            User(id=1, name="Anna"),
            User(id=2, name="Annabelle"),
            User(id=3, name="Bob"),
        ]
    )


@pytest.fixture
def command(roster):
    return SequenceArgument(
        "command",
        [
            CandidateArgument("user", roster, matcher=STARTS_WITH, id_type=int),
            OptionalArgument(ValueArgument("mode", choices=["buy", "sell"])),
        ],
    )


def texts(completions):
    return [completion.text for completion in completions]


def test_empty_document_lists_all_names(command):
    completer = ArgumentCompleter(command)
    results = list(completer.get_completions(Document(""), None))
    assert all(isinstance(completion, Completion) for completion in results)
    assert texts(results) == ["Anna", "Annabelle", "Bob"]


def test_common_prefix_offered_first(command):
    completer = ArgumentCompleter(command)
    results = list(completer.get_completions(Document("an"), None))
    assert texts(results) == ["Anna", "Anna", "Annabelle"]
    assert all(completion.start_position == -2 for completion in results)


def test_single_match_replaces_stub(command):
    completer = ArgumentCompleter(command)
    results = list(completer.get_completions(Document("bo"), None))
    assert texts(results) == ["Bob"]
    assert results[0].start_position == -2


def test_completes_the_next_argument_after_whitespace(command):
    completer = ArgumentCompleter(command)
    results = list(completer.get_completions(Document("anna "), None))
    assert texts(results) == ["buy", "sell"]
    assert results[0].start_position == 0


def test_no_match(command):
    completer = ArgumentCompleter(command)
    assert not list(completer.get_completions(Document("zz"), None))
    assert not list(completer.get_completions(Document("anna buy x"), None))


def test_caller_is_resolved_per_request(roster):
    hide_self = ArgumentFilter(lambda caller, user: user.id != caller.id)
    argument = CandidateArgument("user", roster, filter=hide_self)
    current = {"caller": roster.get_by_id(1)}
    completer = ArgumentCompleter(argument, caller=lambda: current["caller"])
    assert texts(completer.get_completions(Document("ann"), None)) == ["Annabelle"]
    current["caller"] = roster.get_by_id(2)
    assert texts(completer.get_completions(Document("ann"), None)) == ["Anna"]


def test_lcp_without_shared_prefix():
    completer = ArgumentCompleter(ValueArgument("mode"))
    results = list(completer._yield_lcp_completions(["buy", "sell"], ""))
    assert texts(results) == ["buy", "sell"]
