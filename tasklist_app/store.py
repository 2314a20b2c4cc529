import logging
from dataclasses import dataclass
from typing import Callable, Optional

from tasklist_app.models import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreChange:
    """Describes one effective mutation of the store."""

    kind: str  # "added", "removed" or "updated"
    index: int
    task: Task
    snapshot: tuple


class TaskStore:
    """Ordered in-memory collection of tasks.

    Insertion order is display order. Lookups for remove/update match the
    first task that is structurally equal to the one given. Subscribers are
    notified after every mutation that actually changed the list.
    """

    def __init__(self, tasks=None):
        self._tasks = list(tasks or [])
        self._listeners = []

    # --- Reading ---
    def __len__(self):
        return len(self._tasks)

    def __iter__(self):
        return iter(tuple(self._tasks))

    def __getitem__(self, index):
        return self._tasks[index]

    def snapshot(self):
        return tuple(self._tasks)

    def index_of(self, task) -> Optional[int]:
        try:
            return self._tasks.index(task)
        except ValueError:
            return None

    # --- Subscriptions ---
    def subscribe(self, listener: Callable[[StoreChange], None]):
        """Register a listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind, index, task):
        change = StoreChange(kind=kind, index=index, task=task, snapshot=self.snapshot())
        for listener in list(self._listeners):
            listener(change)

    # --- Mutations ---
    def add(self, title, image_uri=None) -> Task:
        # Non-empty title is the caller's job (see AddForm.submit)
        task = Task(title=title, image_uri=image_uri)
        self._tasks.append(task)
        logger.debug("Added task %r at %d", task.title, len(self._tasks) - 1)
        self._emit("added", len(self._tasks) - 1, task)
        return task

    def remove(self, task) -> bool:
        index = self.index_of(task)
        if index is None:
            logger.debug("Remove ignored, task %r is not in the list", task)
            return False
        del self._tasks[index]
        logger.debug("Removed task %r from %d", task.title, index)
        self._emit("removed", index, task)
        return True

    def update(self, task, new_title, new_image_uri=None) -> bool:
        index = self.index_of(task)
        if index is None:
            # The task was deleted while it was being edited
            logger.debug("Update ignored, task %r is not in the list", task)
            return False
        updated = task.with_changes(title=new_title, image_uri=new_image_uri)
        self._tasks[index] = updated
        logger.debug("Updated task at %d to %r", index, updated.title)
        self._emit("updated", index, updated)
        return True
