"""Error kinds raised by tudu.

Every error the tool can report derives from TuduError. Each kind carries a
fixed, human-readable message; the optional detail is kept for logging.
"""

from typing import Optional


class TuduError(Exception):
    """Base class for all tudu errors."""

    message = "Something went wrong"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.message)
        self.detail = detail

    def __str__(self) -> str:
        return self.message


class InvalidTask(TuduError):
    message = "Task descriptions cannot contain commas or line breaks"


class InvalidDate(TuduError):
    message = "Invalid date, use DD-MM, DD-MM-YYYY, today, tomorrow or yesterday"


class InvalidArguments(TuduError):
    """Wrong number or shape of arguments for a command.

    The detail holds the usage line of the command and is shown to the user.
    """

    message = "Invalid arguments"

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}, usage: {self.detail}"
        return self.message


class InvalidIndex(TuduError):
    message = "Invalid task index"


class InvalidState(TuduError):
    message = "Invalid task state, expected one of N, S, C, F, X"


class InvalidCommand(TuduError):
    message = "Unknown command, run `tudu help` for usage"


UnknownCommand = InvalidCommand


class NoTaskFile(TuduError):
    message = "No task file for this date"


class FailedToReadFile(TuduError):
    message = "Failed to read task file"


class BadTaskFormat(TuduError):
    message = "Task file is badly formatted"


class FailedToWriteFile(TuduError):
    message = "Failed to write task file"


class InvalidTaskDirectory(TuduError):
    message = "Could not determine the task directory"


class FailedToMakeDirectory(TuduError):
    message = "Failed to create the task directory"
