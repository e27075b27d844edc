import pytest

from argmatch.ambiguity import AmbiguousNameHandler, handle_ambiguous_name
from argmatch.messages import MessageCatalog


def entries(count):
    return [(index, f"Steve{index}") for index in range(1, count + 1)]


def test_single_entry_is_not_ambiguous():
    handler = AmbiguousNameHandler("steve", entries(1))
    assert not handler.is_ambiguous
    assert handler.match_count == 1
    assert handler.error_message is None


def test_no_entries_is_not_ambiguous():
    assert handle_ambiguous_name("steve", []) == (False, None)


def test_two_entries_are_listed():
    ambiguous, message = handle_ambiguous_name("steve", entries(2))
    assert ambiguous
    assert message.splitlines() == [
        "There are multiple matches for the name 'steve'!",
        "  - Steve1 (1)",
        "  - Steve2 (2)",
    ]


def test_report_is_bounded():
    handler = AmbiguousNameHandler("steve", entries(7))
    lines = handler.error_message.splitlines()
    assert handler.match_count == 7
    assert len(lines) == 7
    assert lines[1:6] == [f"  - Steve{index} ({index})" for index in range(1, 6)]
    assert lines[-1] == "  ...and 2 more"


def test_no_more_line_when_everything_fits():
    handler = AmbiguousNameHandler("steve", entries(3), max_entries=3)
    assert "more" not in handler.error_message


def test_entries_are_consumed_once():
    consumed = []

    def generate():
        for entry in entries(4):
            consumed.append(entry)
            yield entry

    handler = AmbiguousNameHandler("steve", generate(), max_entries=2)
    assert handler.match_count == 4
    assert len(consumed) == 4
    assert handler.error_message.endswith("...and 2 more")


def test_custom_messages():
    messages = MessageCatalog(
        ambiguous_name="'{name}' is ambiguous:",
        ambiguous_name_entry="* {name}#{id}",
    )
    handler = AmbiguousNameHandler("bo", [(1, "Bob"), (2, "Bo")], messages=messages)
    assert handler.error_message == "'bo' is ambiguous:\n* Bob#1\n* Bo#2"


def test_max_entries_must_be_positive():
    with pytest.raises(ValueError):
        AmbiguousNameHandler("steve", entries(2), max_entries=0)
