"""The task list of a single day.

TaskList is the aggregate the CLI works on: it is loaded from storage for a
date, mutated in memory and written back in full.
"""

from typing import Iterator, List, Optional

from tudu.dates import TuduDate
from tudu.errors import InvalidIndex, NoTaskFile
from tudu.models import Task, TaskState
from tudu.storage import Storage


class TaskList:
    """Ordered tasks for one date.

    Tasks are referred to by their 1-based position, the same number shown
    next to them on screen. Every mutator that takes an index raises
    InvalidIndex for a position outside the list and leaves it untouched.

    Attributes:
        date: The day these tasks belong to
        tasks: Tasks in display order
        storage: Storage backend used by write_to_file
    """

    def __init__(self, date: TuduDate, storage: Storage, tasks: Optional[List[Task]] = None):
        self.date = date
        self.storage = storage
        self.tasks = list(tasks) if tasks is not None else []

    @classmethod
    def for_date(cls, date: TuduDate, storage: Storage) -> "TaskList":
        """Load the task list for a date.

        A date without a task file simply has no tasks yet.

        Args:
            date: Day to load
            storage: Storage backend to read from

        Returns:
            The loaded TaskList
        """
        try:
            tasks = storage.load(date.to_filename())
        except NoTaskFile:
            tasks = []
        return cls(date, storage, tasks)

    @property
    def filename(self) -> str:
        return self.date.to_filename()

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self.tasks):
            raise InvalidIndex(f"{index} is not between 1 and {len(self.tasks)}")
        return index - 1

    def add_task(self, task: Task) -> None:
        self.tasks.append(task)

    def set_task_state(self, index: int, state: TaskState) -> None:
        position = self._position(index)
        self.tasks[position] = Task(self.tasks[position].description, state)

    def edit_task(self, index: int, description: str) -> None:
        position = self._position(index)
        self.tasks[position] = Task(description, self.tasks[position].state)

    def remove_task(self, index: int) -> Task:
        """Remove the task at a position and return it.

        Later tasks move up by one.
        """
        return self.tasks.pop(self._position(index))

    def get_formatted_tasks(self) -> str:
        """Render the list for display, one numbered line per task."""
        return "".join(
            f"{number}    {task.state.icon} - {task.description}\n"
            for number, task in enumerate(self.tasks, start=1)
        )

    def write_to_file(self) -> None:
        self.storage.save(self.filename, self.tasks)
