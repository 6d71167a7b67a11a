"""Command-line interface for tudu.

This module executes parsed commands against the task list of a day and
prints the result. It supports the following commands:
- add: Add a task
- remove: Remove a task
- set / complete: Change the state of a task
- edit: Replace the description of a task
- view: Show the tasks of a day
- help: Show usage
"""

import logging
import sys
from datetime import date
from typing import List, Optional

from tudu.commands import parse_command
from tudu.config import load_settings
from tudu.dates import Clock, TuduDate
from tudu.errors import TuduError
from tudu.logging_setup import setup_logging
from tudu.models import (
    AddCommand,
    Command,
    EditCommand,
    HelpCommand,
    RemoveCommand,
    SetCommand,
    Task,
    TaskState,
    ViewCommand,
)
from tudu.storage import Storage, TextFileStorage, resolve_directory
from tudu.task_list import TaskList

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
`tudu` - see the tasks for today
`tudu view [date]` - see tasks on given date
`tudu add [task] *[date]` - add specified task on optional date
`tudu set [index] [state] *[date]` - set specified task to provided state on optional date
`tudu complete [index] *[date]` - mark specified task as complete on optional date
`tudu edit [index] [task] *[date]` - edit specified task to new task description on optional date
`tudu remove [index] *[date]` - remove specified task on optional date

Dates:
Dates can be written in the form 10-6-2023, 10-6 which uses the current year, or with relative date commands `yesterday/today/tomorrow`.
If a date is optional in a command and was not specified the command will use the current date

States:
◯ - [N]ot started
◐ - [S]tarted
● - [C]ompleted
► - Carry [F]orward
x - [X] Not doing
"""


def _resolve_date(requested: Optional[TuduDate], clock: Clock) -> TuduDate:
    return requested if requested is not None else TuduDate.today(clock)


def cmd_add(command: AddCommand, storage: Storage, clock: Clock) -> TaskList:
    """Handle the 'add' command.

    Args:
        command: Parsed add command
        storage: Storage backend
        clock: Source of today's date

    Returns:
        The updated task list
    """
    task_list = TaskList.for_date(_resolve_date(command.date, clock), storage)
    task_list.add_task(Task(command.task, TaskState.NOT_STARTED))
    task_list.write_to_file()
    return task_list


def cmd_remove(command: RemoveCommand, storage: Storage, clock: Clock) -> TaskList:
    """Handle the 'remove' command.

    Raises:
        InvalidIndex: If the index is not on the list
    """
    task_list = TaskList.for_date(_resolve_date(command.date, clock), storage)
    task_list.remove_task(command.index)
    task_list.write_to_file()
    return task_list


def cmd_set(command: SetCommand, storage: Storage, clock: Clock) -> TaskList:
    """Handle the 'set' and 'complete' commands."""
    task_list = TaskList.for_date(_resolve_date(command.date, clock), storage)
    task_list.set_task_state(command.index, command.state)
    task_list.write_to_file()
    return task_list


def cmd_edit(command: EditCommand, storage: Storage, clock: Clock) -> TaskList:
    task_list = TaskList.for_date(_resolve_date(command.date, clock), storage)
    task_list.edit_task(command.index, command.task)
    task_list.write_to_file()
    return task_list


def cmd_view(command: ViewCommand, storage: Storage, clock: Clock) -> TaskList:
    return TaskList.for_date(command.date, storage)


HANDLERS = {
    AddCommand: cmd_add,
    RemoveCommand: cmd_remove,
    SetCommand: cmd_set,
    EditCommand: cmd_edit,
    ViewCommand: cmd_view,
}


def execute(command: Command, storage: Storage, clock: Clock = date.today) -> TaskList:
    """Run a parsed command and return the resulting task list.

    Args:
        command: Any command except HelpCommand
        storage: Storage backend holding the task files
        clock: Source of today's date for commands without a date

    Returns:
        The task list after the command ran
    """
    handler = HANDLERS[type(command)]
    return handler(command, storage, clock)


def print_tasks(task_list: TaskList) -> None:
    print(task_list.get_formatted_tasks(), end="")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Full argument vector including the program name. If None,
              uses sys.argv

    Returns:
        Exit code (0 for success, 1 for error)
    """
    if argv is None:
        argv = sys.argv

    settings = load_settings()
    setup_logging(settings.log_level)

    try:
        command = parse_command(argv)

        if isinstance(command, HelpCommand):
            print(HELP_TEXT, end="")
            return 0

        storage = TextFileStorage(resolve_directory(settings))
        task_list = execute(command, storage)
    except TuduError as err:
        logger.debug("%s failed: %s", type(err).__name__, err.detail)
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print_tasks(task_list)
    return 0


if __name__ == "__main__":
    sys.exit(main())
