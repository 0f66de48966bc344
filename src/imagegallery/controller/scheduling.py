"""
Deferred Execution
==================
Every delayed step of the widget (the update debounce, fades, the card
stagger, the modal focus and clear steps) goes through a Scheduler.

Why is this file needed?
------------------------
1. Responsiveness: Nothing ever sleeps. Work is resumed by the Qt event loop
   once the delay expires, so the GUI stays interactive between steps.
2. Determinism: Tests swap in ManualScheduler and fast-forward a virtual clock
   instead of waiting for real time to pass.

Classes:
    Scheduler: The interface consumed by the controller and the view.
    QtScheduler: Production implementation backed by QTimer.
    ManualScheduler: Virtual clock, advanced explicitly.
"""
from __future__ import annotations

import heapq
import itertools
import logging
from typing import Callable, Protocol

from PySide6.QtCore import QTimer

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callback) -> None: ...


class QtScheduler:
    """Runs callbacks from the Qt event loop after the given delay."""

    def call_later(self, delay_ms: int, callback: Callback) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")
        QTimer.singleShot(delay_ms, callback)


class ManualScheduler:
    """
    Scheduler driven by an explicit clock.

    Callbacks run in due-time order; callbacks due at the same instant run in
    the order they were scheduled. Callbacks scheduled while advancing run in
    the same `advance` call if they fall due before its end.
    """
    def __init__(self) -> None:
        self._now: int = 0
        self._queue: list[tuple[int, int, Callback]] = []
        self._sequence = itertools.count()

    @property
    def now(self) -> int:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay_ms: int, callback: Callback) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must not be negative, got {delay_ms}")
        heapq.heappush(self._queue, (self._now + delay_ms, next(self._sequence), callback))

    def advance(self, delay_ms: int) -> None:
        if delay_ms < 0:
            raise ValueError(f"Cannot move the clock backwards ({delay_ms} ms)")
        target = self._now + delay_ms
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            callback()
        self._now = target

    def run_all(self, max_steps: int = 10_000) -> None:
        """Advance until nothing is pending."""
        steps = 0
        while self._queue:
            steps += 1
            if steps > max_steps:
                raise RuntimeError("Scheduler did not settle; callbacks keep rescheduling.")
            due = self._queue[0][0]
            self.advance(due - self._now)
