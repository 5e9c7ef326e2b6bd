"""Playback engine: advances the robot pose through a queue of motion commands."""

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

from .commands import Command, MoveForward, TurnLeft, TurnRight
from .pose import Pose

# Progress within this distance of 1 counts as complete
PROGRESS_EPSILON = 1e-9


class PlaybackState(Enum):
    """State of the command slot under the cursor."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class PlaybackCursor:
    """Which command is active, how far through it, and the pose it started from."""
    command_index: int
    progress: float
    segment_start_pose: Pose


def interpolate_pose(start: Pose, command: Command, progress: float) -> Optional[Pose]:
    """
    Pose reached after executing `progress` of `command` from `start`.

    Args:
        start: Pose snapshot taken when the command began
        command: Command being executed
        progress: Fraction of the command completed, clamped to [0, 1]

    Returns:
        Interpolated pose, or None when the command kind is not recognized
    """
    progress = min(max(progress, 0.0), 1.0)

    if isinstance(command, MoveForward):
        rad = np.deg2rad(start.heading)
        x = start.x + np.cos(rad) * command.distance * progress
        y = start.y + np.sin(rad) * command.distance * progress
        return Pose(float(x), float(y), start.heading)
    elif isinstance(command, TurnRight):
        return Pose(start.x, start.y, start.heading + command.angle_degrees * progress)
    elif isinstance(command, TurnLeft):
        return Pose(start.x, start.y, start.heading - command.angle_degrees * progress)
    return None


class PlaybackEngine:
    """
    Frame-driven playback of a command queue.

    Owns the single live Pose and the Playback Cursor. `tick` is meant to be
    called once per animation frame, running or not; it moves the pose only
    while running and commands remain, and always hands a frame to the
    render callback.

    Progress grows by a fixed amount per tick, so playback speed follows the
    frame rate rather than wall-clock time.
    """

    def __init__(self, config,
                 render_callback: Optional[Callable[[Dict[str, Any]], Optional[bool]]] = None):
        """
        Initialize playback engine.

        Args:
            config: SimulationConfig with origin, speed, surface and obstacles
            render_callback: Function called with render data every tick.
                Returning False asks the scheduler to stop.
        """
        self.config = config
        self.render_callback = render_callback
        self.speed = config.speed
        self.obstacles = list(config.obstacles)
        self.width, self.height = config.window_size

        self.pose = self.origin_pose()
        self.cursor = PlaybackCursor(0, 0.0, self.pose.copy())

        # Last values seen by tick(), used for redraws outside the loop
        self._last_running = False
        self._last_queue: Sequence[Command] = ()

        self._command_callback: Optional[Callable[[int, Command, Pose], None]] = None
        self._unknown_command_callback: Optional[Callable[[int, Command], None]] = None
        self._warned_unknown_slots = set()

    def origin_pose(self) -> Pose:
        return Pose(self.config.origin_x, self.config.origin_y, self.config.origin_heading)

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------
    def tick(self, running: bool, queue: Sequence[Command]) -> Optional[bool]:
        """
        Advance one animation frame.

        Args:
            running: Run flag supplied by the host this frame
            queue: Command queue; read only

        Returns:
            Result of the render callback (False means quit)
        """
        self._last_running = running
        self._last_queue = queue

        if running and not self.is_finished(queue):
            self._advance(queue)

        return self.render()

    def _advance(self, queue: Sequence[Command]):
        index = self.cursor.command_index
        command = queue[index]

        next_progress = self.cursor.progress + self.speed
        pose = interpolate_pose(self.cursor.segment_start_pose, command, next_progress)
        if pose is None:
            # Unrecognized command kind: no motion, no progress
            self._report_unknown(index, command)
            return

        self.cursor.progress = min(next_progress, 1.0)
        self.pose = pose

        if next_progress >= 1.0 - PROGRESS_EPSILON:
            self.pose = interpolate_pose(self.cursor.segment_start_pose, command, 1.0)
            self.cursor = PlaybackCursor(index + 1, 0.0, self.pose.copy())
            if self._command_callback:
                self._command_callback(index, command, self.pose.copy())

    def _report_unknown(self, index: int, command: Command):
        if self._unknown_command_callback:
            self._unknown_command_callback(index, command)
        if index not in self._warned_unknown_slots:
            warnings.warn(
                f"Command {index} has unrecognized type {command.type!r}; "
                "playback holds at this command.",
                RuntimeWarning,
                stacklevel=3
            )
            self._warned_unknown_slots.add(index)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self):
        """
        Return to the origin pose with the cursor at the first command.

        The host must clear its command queue alongside this call; the engine
        does not know which queue will be supplied next.
        """
        self.pose = self.origin_pose()
        self.cursor = PlaybackCursor(0, 0.0, self.pose.copy())
        self._warned_unknown_slots.clear()
        self._last_running = False
        self._last_queue = ()

    def restart_cursor(self):
        """Start a new run from the current pose, at the first command of the next queue."""
        self.cursor = PlaybackCursor(0, 0.0, self.pose.copy())
        self._warned_unknown_slots.clear()

    def resize(self, width: int, height: int, running: Optional[bool] = None,
               queue: Optional[Sequence[Command]] = None) -> Optional[bool]:
        """
        Update drawable dimensions and redraw immediately with the current pose.

        Args:
            width: New surface width in pixels
            height: New surface height in pixels
            running: Current run flag of the host, if known
            queue: Current command queue of the host, if known
        """
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        return self.render(running, queue)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_finished(self, queue: Sequence[Command]) -> bool:
        return self.cursor.command_index >= len(queue)

    def state(self, queue: Sequence[Command]) -> PlaybackState:
        if self.is_finished(queue) and len(queue) > 0:
            return PlaybackState.FINISHED
        if self.cursor.progress > 0.0:
            return PlaybackState.IN_PROGRESS
        return PlaybackState.PENDING

    def get_render_data(self) -> Dict[str, Any]:
        """
        Get data for rendering.

        Returns:
            Dictionary with render data
        """
        queue_length = len(self._last_queue)
        idle = not self._last_running and queue_length == 0
        return {
            'pose': self.pose.copy(),
            'width': self.width,
            'height': self.height,
            'obstacles': self.obstacles,
            'grid_size': self.config.grid_size,
            'command_index': self.cursor.command_index,
            'progress': self.cursor.progress,
            'queue_length': queue_length,
            'running': self._last_running,
            'idle': idle,
            'readout': self.pose.rounded_position(),
        }

    def render(self, running: Optional[bool] = None,
               queue: Optional[Sequence[Command]] = None) -> Optional[bool]:
        """Hand the current frame to the render callback, with the host state if given."""
        if running is not None:
            self._last_running = running
        if queue is not None:
            self._last_queue = queue
        if self.render_callback is None:
            return True
        return self.render_callback(self.get_render_data())

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def set_command_callback(self, callback: Callable[[int, Command, Pose], None]):
        """
        Set callback for completed commands.

        Args:
            callback: Function(index, command, final_pose)
        """
        self._command_callback = callback

    def set_unknown_command_callback(self, callback: Callable[[int, Command], None]):
        """
        Set diagnostic callback for unrecognized commands.

        Args:
            callback: Function(index, command), called on every tick spent on it
        """
        self._unknown_command_callback = callback
