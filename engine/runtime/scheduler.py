"""Deferred one-shot task scheduler driven by an explicit clock."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

TaskCallback = Callable[[], None]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Task:
    task_id: int
    due_seconds: float
    callback: TaskCallback
    label: str
    cancelled: bool = False


class Scheduler:
    """Clock-advanced scheduler for deferred, cancellable callbacks.

    Nothing runs on its own: the host advances the clock (``advance`` or
    ``run_due``) from its single event loop, so callbacks never race with
    input handling.
    """

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    def call_later(self, delay_seconds: float, callback: TaskCallback, *, label: str = "") -> int:
        """Schedule a one-shot callback after delay and return its task id."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_seconds = self._now_seconds + delay_seconds
        self._tasks[task_id] = _Task(
            task_id=task_id,
            due_seconds=due_seconds,
            callback=callback,
            label=label,
        )
        heappush(self._queue, (due_seconds, task_id))
        return task_id

    def is_pending(self, task_id: int | None) -> bool:
        """Return whether a task is queued and not cancelled."""
        if task_id is None:
            return False
        task = self._tasks.get(task_id)
        return task is not None and not task.cancelled

    def cancel(self, task_id: int | None) -> bool:
        """Cancel a queued task. Returns whether a pending task was cancelled."""
        if not self.is_pending(task_id):
            return False
        task = self._tasks[task_id]
        task.cancelled = True
        logger.debug("scheduler_cancel task_id=%s label=%s", task_id, task.label)
        return True

    def advance(self, delta_seconds: float) -> int:
        """Advance scheduler clock and run due callbacks."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds`."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id, None)
            if task is None or task.cancelled:
                continue
            task.callback()
            executed += 1
        return executed
