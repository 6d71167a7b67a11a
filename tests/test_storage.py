"""Comprehensive tests for storage layer."""

import os
import sys
from pathlib import Path

import pytest

from tudu.config import Settings
from tudu.errors import (
    BadTaskFormat,
    FailedToMakeDirectory,
    FailedToReadFile,
    FailedToWriteFile,
    InvalidTaskDirectory,
    NoTaskFile,
)
from tudu.models import Task, TaskState
from tudu.storage import Storage, TextFileStorage, resolve_directory

FILENAME = "2023-06-10.txt"


class TestTextFileStorage:
    """Test suite for TextFileStorage implementation."""

    @pytest.fixture
    def sample_tasks(self):
        """Create sample tasks for testing."""
        return [
            Task("Test task 1", TaskState.STARTED),
            Task("Test task 2", TaskState.COMPLETE),
            Task("Test task 3", TaskState.NOT_STARTED),
        ]

    def test_storage_is_abstract(self):
        """Test that Storage is an abstract base class."""
        with pytest.raises(TypeError):
            Storage()

    def test_save_creates_file(self, storage, sample_tasks):
        path = storage.path_for(FILENAME)
        assert not path.exists()
        storage.save(FILENAME, sample_tasks)
        assert path.exists()

    def test_save_writes_one_line_per_task(self, storage, sample_tasks):
        """Test that save writes the code,description line format."""
        storage.save(FILENAME, sample_tasks)

        content = storage.path_for(FILENAME).read_text(encoding="utf-8")
        assert content == "S,Test task 1\nC,Test task 2\nN,Test task 3\n"

    def test_load_missing_file(self, storage):
        """Test that load raises NoTaskFile when the file doesn't exist."""
        with pytest.raises(NoTaskFile):
            storage.load(FILENAME)

    def test_load_empty_file(self, storage):
        storage.path_for(FILENAME).touch()
        assert storage.load(FILENAME) == []

    def test_load_skips_blank_lines(self, storage):
        storage.path_for(FILENAME).write_text("N,First\n\nC,Second\n\n", encoding="utf-8")
        assert storage.load(FILENAME) == [
            Task("First", TaskState.NOT_STARTED),
            Task("Second", TaskState.COMPLETE),
        ]

    def test_load_accepts_crlf_line_endings(self, storage):
        storage.path_for(FILENAME).write_bytes(b"S,First\r\nF,Second\r\n")
        assert storage.load(FILENAME) == [
            Task("First", TaskState.STARTED),
            Task("Second", TaskState.FORWARDED),
        ]

    def test_save_and_load_roundtrip(self, storage, sample_tasks):
        """Test that data survives save-load roundtrip in order."""
        storage.save(FILENAME, sample_tasks)
        assert storage.load(FILENAME) == sample_tasks

    def test_roundtrip_every_state(self, storage):
        tasks = [Task(f"Task {state.name}", state) for state in TaskState]
        storage.save(FILENAME, tasks)
        assert storage.load(FILENAME) == tasks

    def test_roundtrip_unicode(self, storage):
        tasks = [Task("Café ☕ mit Jürgen", TaskState.STARTED), Task("日本語のタスク")]
        storage.save(FILENAME, tasks)
        assert storage.load(FILENAME) == tasks

    def test_save_overwrites_existing_data(self, storage, sample_tasks):
        storage.save(FILENAME, sample_tasks)
        storage.save(FILENAME, [Task("New task")])

        assert storage.load(FILENAME) == [Task("New task")]

    def test_save_empty_list(self, storage):
        storage.save(FILENAME, [])
        assert storage.path_for(FILENAME).read_text(encoding="utf-8") == ""
        assert storage.load(FILENAME) == []

    def test_files_are_separate_per_day(self, storage):
        storage.save("2023-06-10.txt", [Task("Tenth")])
        storage.save("2023-06-11.txt", [Task("Eleventh")])

        assert storage.load("2023-06-10.txt") == [Task("Tenth")]
        assert storage.load("2023-06-11.txt") == [Task("Eleventh")]

    @pytest.mark.parametrize("line", ["N", "just a description", "N,a,b", ",,"])
    def test_load_wrong_field_count(self, storage, line):
        """Test that lines without exactly two fields are rejected."""
        storage.path_for(FILENAME).write_text(line + "\n", encoding="utf-8")

        with pytest.raises(BadTaskFormat):
            storage.load(FILENAME)

    def test_load_unknown_state_code(self, storage):
        storage.path_for(FILENAME).write_text("Q,Mystery\n", encoding="utf-8")

        with pytest.raises(FailedToReadFile):
            storage.load(FILENAME)

    def test_load_invalid_utf8(self, storage):
        storage.path_for(FILENAME).write_bytes(b"N,\xff\xfe broken\n")

        with pytest.raises(FailedToReadFile):
            storage.load(FILENAME)

    def test_load_directory_in_place_of_file(self, storage):
        storage.path_for(FILENAME).mkdir()

        with pytest.raises(FailedToReadFile):
            storage.load(FILENAME)

    def test_save_into_missing_directory(self, tasks_dir):
        """Test that save does not create a missing task directory."""
        storage = TextFileStorage(tasks_dir / "missing")

        with pytest.raises(FailedToWriteFile):
            storage.save(FILENAME, [Task("Lost")])

    def test_large_task_list(self, storage):
        tasks = [Task(f"Task {i}") for i in range(1000)]
        storage.save(FILENAME, tasks)
        assert storage.load(FILENAME) == tasks


class TestResolveDirectory:
    """Tests for task directory resolution."""

    def test_explicit_directory_used_verbatim(self, tasks_dir):
        settings = Settings(tasks_dir=tasks_dir, home=Path("/nonexistent-home"))
        assert resolve_directory(settings) == tasks_dir

    def test_explicit_directory_is_not_created(self, tasks_dir):
        missing = tasks_dir / "not-there"
        settings = Settings(tasks_dir=missing, home=None)

        assert resolve_directory(settings) == missing
        assert not missing.exists()

    def test_default_directory_created_under_home(self, tasks_dir):
        home = tasks_dir / "home" / "user"
        settings = Settings(tasks_dir=None, home=home)

        directory = resolve_directory(settings)

        assert directory == home / ".tudu"
        assert directory.is_dir()

    def test_default_directory_already_present(self, tasks_dir):
        (tasks_dir / ".tudu").mkdir()
        settings = Settings(tasks_dir=None, home=tasks_dir)
        assert resolve_directory(settings) == tasks_dir / ".tudu"

    def test_no_home_and_no_tasks_dir(self):
        with pytest.raises(InvalidTaskDirectory):
            resolve_directory(Settings(tasks_dir=None, home=None))

    def test_default_directory_cannot_be_created(self, tasks_dir):
        """Test that a file blocking the directory path is reported."""
        (tasks_dir / ".tudu").write_text("not a directory")
        settings = Settings(tasks_dir=None, home=tasks_dir)

        with pytest.raises(FailedToMakeDirectory):
            resolve_directory(settings)

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permissions are not enforced",
    )
    def test_default_directory_permission_denied(self, tasks_dir):
        home = tasks_dir / "locked"
        home.mkdir()
        home.chmod(0o500)
        try:
            with pytest.raises(FailedToMakeDirectory):
                resolve_directory(Settings(tasks_dir=None, home=home))
        finally:
            home.chmod(0o700)
