"""Core models for tudu.

This module defines the core data structures for daily task tracking:
- TaskState: Enum of the states a task moves through
- Task: A single task description with its state
- AddCommand, RemoveCommand, SetCommand, EditCommand, ViewCommand,
  HelpCommand: the typed commands produced by the command parser
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from tudu.dates import TuduDate
from tudu.errors import InvalidState, InvalidTask

FIELD_SEPARATOR = ","

_FORBIDDEN_CHARACTERS = (FIELD_SEPARATOR, "\n", "\r")


class TaskState(Enum):
    """Task states, valued by their single letter file code."""

    NOT_STARTED = "N"
    STARTED = "S"
    COMPLETE = "C"
    FORWARDED = "F"
    IGNORED = "X"

    @property
    def code(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @classmethod
    def from_code(cls, code: str) -> "TaskState":
        """Look up a state by its file code.

        Raises:
            InvalidState: If the code is not one of N, S, C, F, X
        """
        try:
            return cls(code)
        except ValueError:
            raise InvalidState(f"unknown state code '{code}'") from None


_ICONS = {
    TaskState.NOT_STARTED: "◯",
    TaskState.STARTED: "◐",
    TaskState.COMPLETE: "●",
    TaskState.FORWARDED: "►",
    TaskState.IGNORED: "x",
}


def validate_description(description: str) -> str:
    """Return the description unchanged if it can be stored in a task file.

    Raises:
        InvalidTask: If the description contains a comma or a line break
    """
    for character in _FORBIDDEN_CHARACTERS:
        if character in description:
            raise InvalidTask(f"description contains {character!r}")
    return description


@dataclass(frozen=True)
class Task:
    """A single task on a day's list.

    Attributes:
        description: What needs doing
        state: Where the task is at
    """

    description: str
    state: TaskState = TaskState.NOT_STARTED

    def __post_init__(self):
        validate_description(self.description)


@dataclass(frozen=True)
class AddCommand:
    task: str
    date: Optional[TuduDate] = None


@dataclass(frozen=True)
class RemoveCommand:
    index: int
    date: Optional[TuduDate] = None


@dataclass(frozen=True)
class SetCommand:
    index: int
    state: TaskState
    date: Optional[TuduDate] = None


@dataclass(frozen=True)
class EditCommand:
    index: int
    task: str
    date: Optional[TuduDate] = None


@dataclass(frozen=True)
class ViewCommand:
    date: TuduDate


@dataclass(frozen=True)
class HelpCommand:
    pass


Command = Union[AddCommand, RemoveCommand, SetCommand, EditCommand, ViewCommand, HelpCommand]
