"""
Phased Transitions
==================
Timed visual sequences, expressed as small state machines on top of a
Scheduler instead of nested timers.

Classes:
    TransitionPhase: IDLE -> FADING_OUT -> SWAPPING -> FADING_IN -> IDLE.
    PhasedTransition: Fade a region out, swap its content, fade it back in.
    StaggeredReveal: Entrance animation for a list of cards, one after another.
"""
from __future__ import annotations

import logging
from enum import Enum
from functools import partial
from typing import Callable, Optional, Sequence

from imagegallery.config import GalleryTimings, DEFAULT_TIMINGS
from imagegallery.controller.scheduling import Scheduler
from imagegallery.view.elements import Element

logger = logging.getLogger(__name__)

FADE_OUT_CLASS = "fade-out"
FADE_IN_CLASS = "fade-in"
REVEALING_CLASS = "revealing"
REVEALED_CLASS = "revealed"


class TransitionPhase(Enum):
    IDLE = "idle"
    FADING_OUT = "fading-out"
    SWAPPING = "swapping"
    FADING_IN = "fading-in"


class PhasedTransition:
    """
    Fade-out / swap / fade-in for one element.

    Only one sequence is in flight at a time. A run requested meanwhile is
    queued, and a newer request replaces an older queued one, so the region
    always ends up showing the most recent content.
    """
    def __init__(
        self,
        element: Element,
        scheduler: Scheduler,
        fade_out_ms: int,
        fade_in_ms: int,
    ) -> None:
        self.element = element
        self._scheduler = scheduler
        self._fade_out_ms = fade_out_ms
        self._fade_in_ms = fade_in_ms

        self._phase = TransitionPhase.IDLE
        self._queued: Optional[tuple[int, Callable[[], None]]] = None
        self._requested = 0
        self._completed = 0
        self._after_swap: list[tuple[int, Callable[[], None]]] = []

    @property
    def phase(self) -> TransitionPhase:
        return self._phase

    def run(self, swap: Callable[[], None]) -> None:
        self._requested += 1
        generation = self._requested
        if self._phase is not TransitionPhase.IDLE:
            if self._queued is not None:
                superseded = self._queued[0]
                logger.debug(f"Dropping superseded swap #{superseded} on {self.element.role}")
                # Its content never shows, so nothing waits on it any more
                self._after_swap = [(gen, cb) for gen, cb in self._after_swap if gen != superseded]
            self._queued = (generation, swap)
            return
        self._start(generation, swap)

    def after_swap(self, callback: Callable[[], None]) -> None:
        """Run `callback` once the most recently requested swap has happened."""
        if self._completed >= self._requested:
            callback()
            return
        self._after_swap.append((self._requested, callback))

    # --- PHASES ---

    def _start(self, generation: int, swap: Callable[[], None]) -> None:
        self._phase = TransitionPhase.FADING_OUT
        self.element.add_class(FADE_OUT_CLASS)
        self._scheduler.call_later(self._fade_out_ms, partial(self._swap, generation, swap))

    def _swap(self, generation: int, swap: Callable[[], None]) -> None:
        self._phase = TransitionPhase.SWAPPING
        swap()
        self._completed = generation

        self.element.remove_class(FADE_OUT_CLASS)
        self.element.add_class(FADE_IN_CLASS)
        self._phase = TransitionPhase.FADING_IN
        self._scheduler.call_later(self._fade_in_ms, self._finish)

        ready = [cb for gen, cb in self._after_swap if gen <= generation]
        self._after_swap = [(gen, cb) for gen, cb in self._after_swap if gen > generation]
        for callback in ready:
            callback()

    def _finish(self) -> None:
        self.element.remove_class(FADE_IN_CLASS)
        self._phase = TransitionPhase.IDLE
        if self._queued is not None:
            generation, swap = self._queued
            self._queued = None
            self._start(generation, swap)


class StaggeredReveal:
    """
    Entrance animation over a sequence of cards.

    Card `i` starts at `i * stagger_step_ms`, becomes visible after a further
    `reveal_settle_ms` and is done `reveal_duration_ms` after that.
    """
    def __init__(self, scheduler: Scheduler, timings: GalleryTimings = DEFAULT_TIMINGS) -> None:
        self._scheduler = scheduler
        self._timings = timings

    def run(self, cards: Sequence[Element]) -> None:
        for index, card in enumerate(cards):
            # Hide everything first so later cards do not flash before their turn
            card.remove_class(REVEALED_CLASS)
            card.set_style(opacity="0", transform="translateY(20px)")
            self._scheduler.call_later(index * self._timings.stagger_step_ms, partial(self._begin, card))

    def _begin(self, card: Element) -> None:
        if not card.is_attached:
            return
        card.add_class(REVEALING_CLASS)
        self._scheduler.call_later(self._timings.reveal_settle_ms, partial(self._show, card))

    def _show(self, card: Element) -> None:
        if not card.is_attached:
            return
        seconds = self._timings.reveal_duration_ms / 1000
        card.set_style(transition=f"all {seconds:g}s ease", opacity="1", transform="translateY(0)")
        self._scheduler.call_later(self._timings.reveal_duration_ms, partial(self._complete, card))

    def _complete(self, card: Element) -> None:
        if not card.is_attached:
            return
        card.remove_class(REVEALING_CLASS)
        card.add_class(REVEALED_CLASS)
