"""Storage layer for tudu.

This module provides an abstract storage interface and a text file
implementation for persisting the tasks of one day. Each day lives in its own
file, one task per line in the form ``{state_code},{description}``.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from tudu.config import Settings
from tudu.errors import (
    BadTaskFormat,
    FailedToMakeDirectory,
    FailedToReadFile,
    FailedToWriteFile,
    InvalidState,
    InvalidTask,
    InvalidTaskDirectory,
    NoTaskFile,
)
from tudu.models import FIELD_SEPARATOR, Task, TaskState

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_NAME = ".tudu"


def resolve_directory(settings: Settings) -> Path:
    """Work out which directory holds the task files.

    An explicit TUDU_TASKS directory is used as is and must already exist.
    Otherwise $HOME/.tudu is used, and created if it is missing.

    Args:
        settings: Settings loaded from the environment

    Returns:
        Path to the task directory

    Raises:
        InvalidTaskDirectory: If neither TUDU_TASKS nor HOME is set
        FailedToMakeDirectory: If $HOME/.tudu cannot be created
    """
    if settings.tasks_dir is not None:
        if not settings.tasks_dir.is_dir():
            logger.warning("TUDU_TASKS directory %s does not exist", settings.tasks_dir)
        return settings.tasks_dir

    if settings.home is None:
        raise InvalidTaskDirectory("neither TUDU_TASKS nor HOME is set")

    directory = settings.home / DEFAULT_DIRECTORY_NAME
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise FailedToMakeDirectory(f"{directory}: {err}") from err

    return directory


class Storage(ABC):
    """Abstract base class for task storage implementations."""

    @abstractmethod
    def save(self, filename: str, tasks: List[Task]) -> None:
        """Save tasks to storage, replacing whatever was stored before.

        Args:
            filename: Name of the day's task file
            tasks: Tasks in display order
        """
        pass

    @abstractmethod
    def load(self, filename: str) -> List[Task]:
        """Load tasks from storage.

        Args:
            filename: Name of the day's task file

        Returns:
            Tasks in display order

        Raises:
            NoTaskFile: If nothing has been stored under this name
        """
        pass


def parse_task_line(line: str) -> Task:
    """Turn one line of a task file into a Task.

    Raises:
        BadTaskFormat: If the line is not exactly two comma separated fields
        FailedToReadFile: If the state code is unknown
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) != 2:
        raise BadTaskFormat(f"expected 2 fields, got {len(parts)}: {line!r}")

    code, description = parts
    try:
        state = TaskState.from_code(code)
    except InvalidState as err:
        raise FailedToReadFile(f"unknown state code {code!r}") from err

    try:
        return Task(description=description, state=state)
    except InvalidTask as err:
        raise BadTaskFormat(f"bad description {description!r}") from err


def format_task_line(task: Task) -> str:
    return f"{task.state.code}{FIELD_SEPARATOR}{task.description}\n"


class TextFileStorage(Storage):
    """Plain text storage, one file per day inside a directory.

    Writes truncate the file and are not atomic, and there is no locking:
    when two processes write the same day the last one wins.

    Attributes:
        directory: Directory holding the task files
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, filename: str) -> Path:
        return self.directory / filename

    def save(self, filename: str, tasks: List[Task]) -> None:
        """Write tasks to the day's file, one line per task.

        Raises:
            FailedToWriteFile: If the file cannot be created or written
        """
        path = self.path_for(filename)
        try:
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.writelines(format_task_line(task) for task in tasks)
        except OSError as err:
            raise FailedToWriteFile(f"{path}: {err}") from err

        logger.debug("Saved %d tasks to %s", len(tasks), path)

    def load(self, filename: str) -> List[Task]:
        """Read the day's file.

        Blank lines are skipped.

        Raises:
            NoTaskFile: If the file does not exist
            FailedToReadFile: If the file cannot be read or decoded
            BadTaskFormat: If a line is malformed
        """
        path = self.path_for(filename)
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError as err:
            raise NoTaskFile(str(path)) from err
        except (OSError, UnicodeDecodeError) as err:
            raise FailedToReadFile(f"{path}: {err}") from err

        lines = (line.rstrip("\r") for line in content.split("\n"))
        tasks = [parse_task_line(line) for line in lines if line]
        logger.debug("Loaded %d tasks from %s", len(tasks), path)
        return tasks
