"""Command parser for tudu.

Turns the raw argument vector into one of the command types from
tudu.models. The first element is the program name and is ignored; the second
selects the command:

- (nothing): view today's tasks
- add <task> [date]
- remove <index> [date]
- set <index> <N|S|C|F|X> [date]
- complete <index> [date]
- edit <index> <task> [date]
- view <date>
- help
"""

from datetime import date
from typing import Callable, Dict, List, Optional, Sequence

from tudu.dates import Clock, TuduDate
from tudu.errors import InvalidArguments, InvalidCommand, InvalidIndex
from tudu.models import (
    AddCommand,
    Command,
    EditCommand,
    HelpCommand,
    RemoveCommand,
    SetCommand,
    TaskState,
    ViewCommand,
    validate_description,
)

USAGE = {
    "add": "tudu add <task> [date]",
    "remove": "tudu remove <index> [date]",
    "set": "tudu set <index> <N|S|C|F|X> [date]",
    "complete": "tudu complete <index> [date]",
    "edit": "tudu edit <index> <task> [date]",
    "view": "tudu view <date>",
}


def parse_index(text: str) -> int:
    """Parse a task reference index.

    Raises:
        InvalidIndex: If the text is not a non-negative whole number
    """
    if not (text.isascii() and text.isdigit()):
        raise InvalidIndex(f"'{text}' is not a number")
    return int(text)


def _optional_date(args: List[str], position: int, clock: Clock) -> Optional[TuduDate]:
    if len(args) > position:
        return TuduDate.parse(args[position], clock)
    return None


def _check_arity(name: str, args: List[str], low: int, high: int) -> None:
    if not low <= len(args) <= high:
        raise InvalidArguments(USAGE[name])


def parse_add(args: List[str], clock: Clock) -> AddCommand:
    _check_arity("add", args, 1, 2)
    task = validate_description(args[0])
    return AddCommand(task=task, date=_optional_date(args, 1, clock))


def parse_remove(args: List[str], clock: Clock) -> RemoveCommand:
    _check_arity("remove", args, 1, 2)
    index = parse_index(args[0])
    return RemoveCommand(index=index, date=_optional_date(args, 1, clock))


def parse_set(args: List[str], clock: Clock) -> SetCommand:
    _check_arity("set", args, 2, 3)
    index = parse_index(args[0])
    state = TaskState.from_code(args[1])
    return SetCommand(index=index, state=state, date=_optional_date(args, 2, clock))


def parse_complete(args: List[str], clock: Clock) -> SetCommand:
    _check_arity("complete", args, 1, 2)
    index = parse_index(args[0])
    return SetCommand(index=index, state=TaskState.COMPLETE, date=_optional_date(args, 1, clock))


def parse_edit(args: List[str], clock: Clock) -> EditCommand:
    _check_arity("edit", args, 2, 3)
    try:
        index = parse_index(args[0])
    except InvalidIndex as err:
        raise InvalidArguments(USAGE["edit"]) from err
    task = validate_description(args[1])
    return EditCommand(index=index, task=task, date=_optional_date(args, 2, clock))


def parse_view(args: List[str], clock: Clock) -> ViewCommand:
    _check_arity("view", args, 1, 1)
    return ViewCommand(date=TuduDate.parse(args[0], clock))


def parse_help(args: List[str], clock: Clock) -> HelpCommand:
    return HelpCommand()


PARSERS: Dict[str, Callable[[List[str], Clock], Command]] = {
    "add": parse_add,
    "remove": parse_remove,
    "set": parse_set,
    "complete": parse_complete,
    "edit": parse_edit,
    "view": parse_view,
    "help": parse_help,
    "-h": parse_help,
    "--help": parse_help,
}


def parse_command(args: Sequence[str], clock: Clock = date.today) -> Command:
    """Parse the full argument vector into a command.

    Args:
        args: Arguments including the program name at position 0
        clock: Source of the current date for relative and default dates

    Returns:
        The parsed command

    Raises:
        InvalidCommand: If the command name is unknown
        InvalidArguments: If a command gets the wrong number of arguments
        InvalidIndex, InvalidState, InvalidDate, InvalidTask: If a field is
            malformed
    """
    if len(args) <= 1:
        return ViewCommand(date=TuduDate.today(clock))

    name = args[1]
    parser = PARSERS.get(name)
    if parser is None:
        raise InvalidCommand(f"unknown command '{name}'")

    return parser(list(args[2:]), clock)
