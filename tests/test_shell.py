import io

import pytest
from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from rich.console import Console

from argmatch.engine import ArgumentEngine
from argmatch.matching import STARTS_WITH
from argmatch.roster import Roster, User
from argmatch.shell import build_user_argument, render_context, resolve_line, run_shell


@pytest.fixture
def argument():
    roster = Roster([User(id=1, name="Anna"), User(id=2, name="Annabelle")])
    return build_user_argument(roster, STARTS_WITH)


@pytest.fixture
def target():
    return Console(file=io.StringIO(), width=120)


def test_build_user_argument(argument):
    assert argument.format == "<user> [<amount>]"


def test_resolve_line(argument, target):
    context = resolve_line(ArgumentEngine(), argument, "annab 3", target)
    assert context["amount"] == 3
    output = target.file.getvalue()
    assert "Annabelle (id 2)" in output
    assert "command" not in output


def test_resolve_line_error(argument, target):
    assert resolve_line(ArgumentEngine(), argument, "zed", target) is None
    assert "No user found for 'zed'." in target.file.getvalue()


def test_render_context_escapes_markup(target):
    roster = Roster([User(id=1, name="Anna", display_name="[bold]Queen[/bold]")])
    context = ArgumentEngine().parse(build_user_argument(roster, STARTS_WITH), "anna")
    render_context(context, target)
    assert "as [bold]Queen[/bold]" in target.file.getvalue()


@pytest.mark.asyncio
async def test_run_shell(argument, target):
    with create_pipe_input() as pipe_input:
        pipe_input.send_text("anna\r\rnobody\r2 5\rexit\r")
        session = PromptSession(input=pipe_input, output=DummyOutput())
        parsed = await run_shell(ArgumentEngine(), argument, session=session, target=target)
    assert parsed == 2
    output = target.file.getvalue()
    assert "Anna (id 1)" in output
    assert "No user found for 'nobody'." in output
    assert "Annabelle (id 2)" in output


@pytest.mark.asyncio
async def test_run_shell_stops_on_eof(argument, target):
    with create_pipe_input() as pipe_input:
        pipe_input.send_text("anna\r")
        pipe_input.close()
        session = PromptSession(input=pipe_input, output=DummyOutput())
        parsed = await run_shell(ArgumentEngine(), argument, session=session, target=target)
    assert parsed == 1
