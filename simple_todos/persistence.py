"""Serialization of the task collection to a single storage slot.

The slot is an external boundary: it may be missing, edited by hand, or
truncated. Loading never raises; anything unusable yields an empty list and
individual records are coerced field by field.
"""

import json
import logging
import math
import time
from collections.abc import Sequence
from typing import Any

from pydantic import TypeAdapter

from simple_todos.config import STORAGE_KEY
from simple_todos.ids import new_id
from simple_todos.models import Task
from simple_todos.slots import SlotStore

logger = logging.getLogger(__name__)

_task_list = TypeAdapter(list[Task])

# Largest epoch-milliseconds value a JavaScript Date accepts.
MAX_TIMESTAMP_MS = 8_640_000_000_000_000


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _coerce_timestamp(value: Any) -> int:
    if isinstance(value, bool) or value is None or value == "":
        return now_ms()
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return now_ms()
    if isinstance(value, float):
        if not math.isfinite(value):
            return now_ms()
        value = int(value)
    if isinstance(value, int) and abs(value) <= MAX_TIMESTAMP_MS:
        return value
    return now_ms()


def coerce_task(raw: dict[str, Any]) -> Task:
    """Build a task from an untrusted stored object."""
    raw_id = raw.get("id")
    raw_title = raw.get("title")
    return Task(
        id=str(raw_id) if raw_id else new_id(),
        title=str(raw_title) if raw_title else "",
        completed=bool(raw.get("completed")),
        created_at=_coerce_timestamp(raw.get("createdAt")),
    )


class TaskPersistence:
    """Reads and writes the whole collection under one slot key."""

    def __init__(self, slots: SlotStore, key: str = STORAGE_KEY) -> None:
        self.slots = slots
        self.key = key

    def save(self, tasks: Sequence[Task]) -> None:
        """Overwrite the slot with the full collection.

        Storage errors propagate to the caller.
        """
        payload = _task_list.dump_json(list(tasks), by_alias=True).decode("utf-8")
        self.slots.set(self.key, payload)
        logger.debug("Saved %d tasks under %s", len(tasks), self.key)

    def load(self) -> list[Task]:
        """Read the collection, falling back to an empty list."""
        try:
            raw = self.slots.get(self.key)
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read slot %s; starting empty", self.key, exc_info=True)
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Slot %s does not hold valid JSON; starting empty", self.key)
            return []
        if not isinstance(data, list):
            logger.warning("Slot %s does not hold a list; starting empty", self.key)
            return []

        tasks: list[Task] = []
        seen: set[str] = set()
        for entry in data:
            if not isinstance(entry, dict):
                continue
            task = coerce_task(entry)
            if task.id in seen:
                task.id = new_id()
            seen.add(task.id)
            tasks.append(task)

        dropped = len(data) - len(tasks)
        if dropped:
            logger.warning("Dropped %d unusable entries from slot %s", dropped, self.key)
        return tasks
