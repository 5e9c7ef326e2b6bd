"""Playback loop - re-enters the playback engine once per frame."""

import asyncio
from typing import Callable, Optional, Sequence

from .commands import Command
from .playback_engine import PlaybackEngine


class PlaybackLoop:
    """
    Frame scheduler for a playback engine.

    Ticks the engine at a fixed frame rate whether or not playback is
    running, until stopped. The asyncio task is the cancellation handle and
    must be stopped when the owning session ends.
    """

    def __init__(self, engine: PlaybackEngine,
                 running_source: Callable[[], bool],
                 queue_source: Callable[[], Sequence[Command]],
                 fps: float = 60.0):
        """
        Initialize playback loop.

        Args:
            engine: Playback engine to tick
            running_source: Returns the host's run flag for this frame
            queue_source: Returns the host's command queue for this frame
            fps: Frame rate (10-120)
        """
        self.engine = engine
        self.running_source = running_source
        self.queue_source = queue_source
        self.fps = max(10.0, min(120.0, fps))
        self.frame_period = 1.0 / self.fps

        self.running = False
        self.frame_count = 0
        self._task: Optional[asyncio.Task] = None

        # Called before each tick (e.g. to pump window events)
        self._before_frame: Optional[Callable[[], Optional[bool]]] = None

    @property
    def is_running(self) -> bool:
        """Check if the loop is running."""
        return self.running

    def step(self) -> bool:
        """
        Run a single frame.

        Returns:
            False if the frame hook or the renderer asked to quit
        """
        if self._before_frame and self._before_frame() is False:
            return False

        result = self.engine.tick(self.running_source(), self.queue_source())
        self.frame_count += 1
        return result is not False

    async def _frame_loop(self):
        """Main frame loop."""
        try:
            while self.running:
                if not self.step():
                    break

                # Wait for next frame
                await asyncio.sleep(self.frame_period)
        finally:
            self.running = False

    def start(self):
        """Start the loop."""
        if not self.running:
            self.running = True
            self._task = asyncio.create_task(self._frame_loop())

    def stop(self):
        """Stop the loop."""
        self.running = False
        if self._task:
            self._task.cancel()

    async def wait_for_stop(self):
        """Wait for the loop to stop."""
        if self._task:
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    def set_before_frame(self, callback: Callable[[], Optional[bool]]):
        """
        Set hook called before every tick.

        Args:
            callback: Function returning False to stop the loop
        """
        self._before_frame = callback
