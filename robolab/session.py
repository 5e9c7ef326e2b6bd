"""Simulation session - host-side orchestration of one playback preview."""

import asyncio
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from experimenter.logger import Logger
from .commands import Command, commands_from_dicts
from .playback_engine import PlaybackEngine, PlaybackState
from .pose import Pose
from .simulation_loop import PlaybackLoop


class SimulationSession:
    """
    Host interface for a playback preview.

    Coordinates:
    - Command queue (supplied by the program editor)
    - Run flag (play/pause from the host)
    - Playback engine (pose and cursor)
    - Playback loop (frame scheduling)
    - Logger (optional)
    """

    def __init__(self, config,
                 render_callback: Optional[Callable[[Dict[str, Any]], Optional[bool]]] = None,
                 logger: Optional[Logger] = None):
        """
        Initialize session.

        Args:
            config: SimulationConfig
            render_callback: Renderer sink, called once per frame
            logger: Logger for lifecycle events
        """
        self.config = config
        self.logger = logger

        self.running = False
        self.queue: Tuple[Command, ...] = ()
        self.commands_completed = 0

        self.engine = PlaybackEngine(config, render_callback=render_callback)
        self.engine.set_command_callback(self._on_command_complete)
        self.loop = PlaybackLoop(
            self.engine,
            running_source=lambda: self.running,
            queue_source=lambda: self.queue,
            fps=config.fps
        )

    # ------------------------------------------------------------------
    # Host controls
    # ------------------------------------------------------------------
    def load_program(self, commands: Iterable[Any]):
        """
        Queue a program for playback.

        Args:
            commands: Commands or {'type', 'value'} mappings
        """
        self.queue = tuple(commands_from_dicts(commands))
        self.engine.restart_cursor()
        if self.logger:
            self.logger.log_program(self.queue)

    def play(self):
        self.running = True

    def pause(self):
        self.running = False

    def toggle(self):
        self.running = not self.running

    def reset(self):
        """Stop playback, clear the queue and return the robot to the origin."""
        self.running = False
        self.queue = ()
        self.commands_completed = 0
        self.engine.reset()
        self.engine.render()
        if self.logger:
            self.logger.log_reset(self.engine.pose)

    def resize(self, width: int, height: int):
        """Container resized: redraw now with the current pose."""
        return self.engine.resize(width, height, running=self.running, queue=self.queue)

    def step(self) -> bool:
        """Run one frame without the scheduler."""
        return self.loop.step()

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------
    @property
    def pose(self) -> Pose:
        return self.engine.pose.copy()

    @property
    def is_idle(self) -> bool:
        """Ready affordance: not running and nothing queued."""
        return not self.running and len(self.queue) == 0

    @property
    def is_finished(self) -> bool:
        return len(self.queue) > 0 and self.engine.is_finished(self.queue)

    @property
    def playback_state(self) -> PlaybackState:
        return self.engine.state(self.queue)

    def coordinate_readout(self) -> Tuple[int, int]:
        return self.engine.pose.rounded_position()

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------
    def start(self):
        if self.logger:
            self.logger.log_config(self.config)
        self.loop.start()

    async def close(self):
        """Tear down the frame loop."""
        self.loop.stop()
        await self.loop.wait_for_stop()
        if self.logger:
            self.logger.log_final(self)

    async def run(self, duration: Optional[float] = None):
        """
        Run the preview for specified duration.

        Args:
            duration: Duration in seconds (None = until the renderer quits)
        """
        self.start()
        try:
            if duration is not None:
                await asyncio.sleep(duration)
            else:
                while self.loop.is_running:
                    await asyncio.sleep(self.loop.frame_period)
        finally:
            await self.close()

    def _on_command_complete(self, index: int, command: Command, pose: Pose):
        self.commands_completed += 1
        if self.logger and self.config.log_commands:
            self.logger.log_command(index, command, pose)
