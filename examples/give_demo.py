"""give_demo.py

A `give <user> <item> [amount]` command with a permission filter and an
interactive prompt.
"""
import asyncio

from prompt_toolkit import PromptSession

from argmatch import ArgumentEngine, Roster, User
from argmatch.completer import ArgumentCompleter
from argmatch.config import ArgmatchSettings
from argmatch.exceptions import ArgumentParseError
from argmatch.matching import STARTS_WITH
from argmatch.parser import (
    ArgumentFilter,
    CandidateArgument,
    OptionalArgument,
    SequenceArgument,
    ValueArgument,
)

roster = Roster(
    [
        User(id=1, name="Anna"),
        User(id=2, name="Annabelle", display_name="§bBelle"),
        User(id=3, name="Bob"),
    ]
)
me = roster.get_by_id(1)

not_me = ArgumentFilter(
    lambda caller, user: user.id != caller.id,
    rejected_message="You cannot give items to yourself.",
)

give = SequenceArgument(
    "give",
    [
        CandidateArgument("target", roster, matcher=STARTS_WITH, filter=not_me, id_type=int),
        ValueArgument("item", choices=["apple", "bread", "sword"]),
        OptionalArgument(ValueArgument("amount", type=int), default=1),
    ],
)

engine = ArgumentEngine(ArgmatchSettings(max_suggestions=10))


async def main() -> None:
    session = PromptSession(
        message=f"give {give.format} > ",
        completer=ArgumentCompleter(give, engine, caller=lambda: me),
    )
    while True:
        try:
            line = await session.prompt_async()
        except (EOFError, KeyboardInterrupt):
            return
        try:
            context = engine.parse(give, line, caller=me)
        except ArgumentParseError as error:
            print(error.message)
            continue
        print(f"Gave {context['amount']} {context['item']} to {context['target']}.")


if __name__ == "__main__":
    asyncio.run(main())
