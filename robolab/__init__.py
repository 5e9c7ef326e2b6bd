"""RoboLab - command playback preview for an educational robot builder."""

__version__ = "0.1.0"

from .commands import Command, MoveForward, TurnLeft, TurnRight, UnknownCommand
from .playback_engine import PlaybackCursor, PlaybackEngine, PlaybackState
from .pose import Pose
from .session import SimulationSession
from .simulation_loop import PlaybackLoop

__all__ = [
    'Command',
    'MoveForward',
    'TurnLeft',
    'TurnRight',
    'UnknownCommand',
    'PlaybackCursor',
    'PlaybackEngine',
    'PlaybackState',
    'Pose',
    'SimulationSession',
    'PlaybackLoop',
]
