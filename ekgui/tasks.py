"""Deferred task queue: tasks are dispatched once and run on the next update."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class Task:
    """A callable paired with the information it receives when run."""

    function: Callable[[Any], Any]
    info: Any = None
    tag: str = ""
    was_dispatched: bool = field(default=False, compare=False)

    def __call__(self) -> Any:
        return self.function(self.info)


class TaskHandler:
    """Queues dispatched tasks and runs them in dispatch order on update."""

    def __init__(self) -> None:
        self._pre_allocated: list[Task] = []
        self._queue: deque[Task] = deque()
        _log.debug("Initialising handler-service task system-based")

    @property
    def pre_allocated(self) -> tuple[Task, ...]:
        """The tasks kept for dispatch by index."""
        return tuple(self._pre_allocated)

    @property
    def pending(self) -> int:
        """Number of tasks waiting for the next update."""
        return len(self._queue)

    def allocate(self, task: Task) -> int:
        """Keep a task for later dispatch by index and return that index."""
        self._pre_allocated.append(task)
        return len(self._pre_allocated) - 1

    def dispatch(self, task: Task) -> None:
        """Queue a task unless it is already waiting to run."""
        if not task.was_dispatched:
            task.was_dispatched = True
            self._queue.append(task)

    def dispatch_pre_allocated(self, index: int) -> None:
        """Queue the pre-allocated task at ``index``; raises IndexError if absent."""
        if index < 0:
            raise IndexError(f"task index out of range: {index}")
        self.dispatch(self._pre_allocated[index])

    def on_update(self) -> None:
        """Run every queued task in order, leaving the queue empty."""
        while self._queue:
            task = self._queue.popleft()
            try:
                task()
            finally:
                task.was_dispatched = False