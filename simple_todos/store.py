"""Authoritative in-memory task collection.

Every mutating method writes the full collection through the persistence
adapter when it changes something and returns a falsy value, without
writing, when it does not. Unknown ids and blank titles are silent no-ops.
"""

import logging

from simple_todos.ids import new_id
from simple_todos.models import Task
from simple_todos.persistence import TaskPersistence, now_ms

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered task collection, newest first."""

    def __init__(self, persistence: TaskPersistence) -> None:
        """Load the collection from persistence."""
        self._persistence = persistence
        self._tasks: list[Task] = persistence.load()

    @property
    def tasks(self) -> list[Task]:
        """A shallow copy of the collection in display order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Get a task by its ID, or None if not found."""
        return next((t for t in self._tasks if t.id == task_id), None)

    def _commit(self) -> None:
        self._persistence.save(self._tasks)

    def add(self, raw_title: str) -> Task | None:
        """Prepend a new task. Returns None if the title is blank."""
        title = raw_title.strip()
        if not title:
            return None
        task = Task(id=new_id(), title=title, completed=False, created_at=now_ms())
        self._tasks.insert(0, task)
        self._commit()
        logger.debug("Added task %s", task.id)
        return task

    def toggle(self, task_id: str, completed: bool) -> bool:
        """Set a task's completion status. Returns False if not found."""
        task = self.get(task_id)
        if task is None:
            return False
        task.completed = completed
        self._commit()
        return True

    def edit(self, task_id: str, raw_title: str) -> bool:
        """Retitle a task.

        A blank title cancels the edit and leaves the task untouched.
        """
        title = raw_title.strip()
        if not title:
            return False
        task = self.get(task_id)
        if task is None:
            return False
        task.title = title
        self._commit()
        return True

    def remove(self, task_id: str) -> bool:
        """Delete a task. Returns True if deleted, False if not found."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                self._commit()
                logger.debug("Removed task %s", task_id)
                return True
        return False

    def clear_completed(self) -> int:
        """Drop every completed task at once. Returns how many were removed."""
        kept = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(kept)
        if removed:
            self._tasks = kept
            self._commit()
            logger.debug("Cleared %d completed tasks", removed)
        return removed
