"""Translates user actions into store calls and keeps the view in sync."""

import logging
from collections.abc import Callable

from simple_todos.models import Filter, Projection, Task
from simple_todos.projection import parse_filter, project
from simple_todos.store import TaskStore

logger = logging.getLogger(__name__)

Renderer = Callable[[Projection, Filter], None]


class TodoController:
    """Owns the active filter and re-projects after every action.

    Re-projection happens even when the store reports a no-op; only the
    persistence write is skipped in that case.
    """

    def __init__(self, store: TaskStore, renderer: Renderer | None = None) -> None:
        self.store = store
        self.filter = Filter.ALL
        self._renderer = renderer

    def get_projection(self, filter: str | Filter | None = None) -> Projection:
        """Projection for ``filter``, or for the active filter when omitted."""
        active = self.filter if filter is None else parse_filter(filter)
        return project(self.store.tasks, active)

    def refresh(self) -> Projection:
        projection = self.get_projection()
        if self._renderer is not None:
            self._renderer(projection, self.filter)
        return projection

    def set_filter(self, filter: str | Filter) -> Projection:
        self.filter = parse_filter(filter)
        return self.refresh()

    def add(self, title: str) -> Task | None:
        task = self.store.add(title)
        self.refresh()
        return task

    def toggle(self, task_id: str, completed: bool) -> bool:
        changed = self.store.toggle(task_id, completed)
        self.refresh()
        return changed

    def edit(self, task_id: str, title: str) -> bool:
        changed = self.store.edit(task_id, title)
        if not changed:
            logger.debug("Edit of %s cancelled", task_id)
        self.refresh()
        return changed

    def remove(self, task_id: str) -> bool:
        changed = self.store.remove(task_id)
        self.refresh()
        return changed

    def clear_completed(self) -> int:
        removed = self.store.clear_completed()
        self.refresh()
        return removed
