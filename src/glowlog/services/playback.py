"""Timed playback over a check-in timeline."""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from .timeline import TimelineFrame, TimelineSequencer

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 0.6  # seconds per frame


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` signature."""

    def call_later(
        self, delay: float, callback: Callable[..., Any], *args: Any
    ) -> TimerHandle: ...


class PlaybackState(str, Enum):
    """Playback controller state."""

    STOPPED = "stopped"
    PLAYING = "playing"


class PlaybackController:
    """Advances a timeline cursor one frame per interval until the end.

    At most one tick is ever scheduled. Every transition to Stopped
    cancels the pending tick and bumps a generation counter, so a tick
    that was already queued when playback stopped returns without
    touching the cursor.
    """

    def __init__(
        self,
        sequencer: TimelineSequencer,
        interval: float = DEFAULT_INTERVAL,
        scheduler: Scheduler | None = None,
        on_change: Callable[[TimelineFrame | None], None] | None = None,
    ):
        self.sequencer = sequencer
        self.interval = interval
        self.on_change = on_change
        self._scheduler = scheduler
        self._state = PlaybackState.STOPPED
        self._handle: TimerHandle | None = None
        self._generation = 0
        self._closed = False
        self._waiters: list[asyncio.Event] = []

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == PlaybackState.PLAYING

    @property
    def is_closed(self) -> bool:
        return self._closed

    def play(self) -> PlaybackState:
        """Start playback, restarting from the first frame when at the end.

        Timelines with fewer than two frames have nothing to animate and
        stay stopped.
        """
        if self._closed or len(self.sequencer) <= 1 or self.is_playing:
            return self._state

        if self.sequencer.is_at_end:
            self.sequencer.seek(0)
            self._notify()

        self._cancel_pending()
        self._state = PlaybackState.PLAYING
        logger.debug("Playback started at index %d", self.sequencer.index)
        self._schedule_next()
        return self._state

    def pause(self) -> PlaybackState:
        self._stop()
        return self._state

    def toggle(self) -> PlaybackState:
        """Play if stopped, pause if playing."""
        if self.is_playing:
            return self.pause()
        return self.play()

    def scrub(self, index: int) -> int:
        """Jump to a frame. Stops playback first."""
        self._stop()
        position = self.sequencer.seek(index)
        self._notify()
        return position

    def step(self, delta: int) -> int:
        """Manual previous/next. Stops playback first."""
        self._stop()
        position = self.sequencer.step(delta)
        self._notify()
        return position

    def close(self) -> None:
        """Tear down the viewer; no tick fires after this returns."""
        self._stop()
        self._closed = True

    async def run_to_end(self) -> TimelineFrame | None:
        """Play and wait until playback stops."""
        self.play()
        if self.is_playing:
            done = asyncio.Event()
            self._waiters.append(done)
            await done.wait()
        return self.sequencer.frame()

    def _scheduler_or_loop(self) -> Scheduler:
        if self._scheduler is not None:
            return self._scheduler
        return asyncio.get_running_loop()

    def _schedule_next(self) -> None:
        self._handle = self._scheduler_or_loop().call_later(
            self.interval, self._tick, self._generation
        )

    def _tick(self, generation: int) -> None:
        if generation != self._generation or not self.is_playing:
            return
        self._handle = None

        if self.sequencer.is_at_end:
            self._stop()
            return

        self.sequencer.step(1)
        self._notify()

        if self.sequencer.is_at_end:
            self._stop()
        else:
            self._schedule_next()

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _stop(self) -> None:
        self._cancel_pending()
        if self._state == PlaybackState.PLAYING:
            logger.debug("Playback stopped at index %d", self.sequencer.index)
        self._state = PlaybackState.STOPPED
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            waiter.set()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.sequencer.frame())
