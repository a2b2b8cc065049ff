#!/usr/bin/env python
"""
Manages loading and saving tasks from/to a delimited text file.
"""
import logging
import pathlib
import typing as _t

from .config_utils import load_cfg, get_tasks_file_path
from .record_codec import (
    Task,
    RecordError,
    encode_record,
    decode_record,
)

__all__ = ["Task", "TaskStore"]

# ───────────────────────────────────────── Task Store Class ────
class TaskStore:
    """
    Manages an ordered collection of tasks backed by a text file.

    The in-memory collection is the source of truth; the file is only read by
    load_tasks() and only written by save_tasks().
    """
    def __init__(self, file_path=None):
        """Initialize the task store with the given path or from config."""
        self._tasks: _t.List[Task] = []
        self.next_id = 1

        if file_path is None:
            self.file_path = get_tasks_file_path(load_cfg())
        else:
            self.file_path = pathlib.Path(file_path)

    def __len__(self) -> int:
        return len(self._tasks)

    def load_tasks(self) -> bool:
        """
        Replace the in-memory tasks with the contents of the task file.

        Lines that fail to decode are skipped with a warning. The next id is
        recomputed as one more than the highest id read.

        Returns:
            False if the file is missing or unreadable (tasks left untouched),
            True otherwise.
        """
        if not self.file_path.exists():
            logging.info(f"Tasks file {self.file_path} does not exist. Keeping current task list.")
            return False

        loaded: _t.List[Task] = []
        max_seen = 0
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                for lineno, raw in enumerate(f, start=1):
                    line = raw.strip(" \t\r\n")
                    if not line:
                        continue
                    try:
                        task = decode_record(line)
                    except RecordError as e:
                        logging.warning(f"Skipping line {lineno} of {self.file_path}: {e}")
                        continue
                    loaded.append(task)
                    max_seen = max(max_seen, task.id)
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"File access error loading tasks from {self.file_path}: {e}")
            return False

        self._tasks = loaded
        self.next_id = max_seen + 1
        logging.info(f"Loaded {len(self._tasks)} tasks from {self.file_path}")
        return True

    def save_tasks(self) -> bool:
        """Overwrite the task file with every task, one record per line."""
        try:
            # Encode up front so an unencodable task leaves the old file intact
            payload = "".join(encode_record(task) + "\n" for task in self._tasks).encode("utf-8")
        except UnicodeEncodeError as e:
            logging.error(f"Encoding error saving tasks to {self.file_path}: {e}")
            return False
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "wb") as f:
                f.write(payload)
        except OSError as e:
            logging.error(f"File access error saving tasks to {self.file_path}: {e}")
            return False
        logging.info(f"Saved {len(self._tasks)} tasks to {self.file_path}")
        return True

    def get_all_tasks(self) -> _t.Tuple[Task, ...]:
        """Get all tasks in their current order."""
        return tuple(self._tasks)

    def get_task_by_id(self, task_id: int) -> _t.Optional[Task]:
        """Get a task by its ID."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add_task(self, title: str, notes: str = "") -> int:
        """Append a new open task and return its freshly assigned ID."""
        task = Task(id=self.next_id, title=title, notes=notes, completed=False)
        self.next_id += 1
        self._tasks.append(task)
        return task.id

    def delete_task(self, task_id: int) -> bool:
        """Delete a task by its ID."""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                return True
        return False

    def toggle_complete(self, task_id: int) -> bool:
        """Flip the completed flag of a task."""
        task = self.get_task_by_id(task_id)
        if task is None:
            return False
        task.completed = not task.completed
        return True

    def edit_task(self, task_id: int, title: str = "", notes: str = "") -> bool:
        """
        Update a task's title and/or notes.

        An empty string leaves the corresponding field unchanged, so a field
        cannot be cleared through this method.
        """
        task = self.get_task_by_id(task_id)
        if task is None:
            return False
        if title:
            task.title = title
        if notes:
            task.notes = notes
        return True

    def clear_tasks(self) -> None:
        """Remove every task from memory. IDs keep counting from next_id."""
        self._tasks.clear()
