"""Motion commands consumed by the playback engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping

# Wire tags used by the command queue source
MOVE_FORWARD = "move_forward"
TURN_RIGHT = "turn_right"
TURN_LEFT = "turn_left"


class Command(ABC):
    """Base class for one atomic motion instruction."""

    type: str = ""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Mapping in the queue source format {'type': tag, 'value': magnitude}."""
        pass


@dataclass(frozen=True)
class MoveForward(Command):
    """Drive along the current heading."""
    distance: float

    type = MOVE_FORWARD

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'value': self.distance}


@dataclass(frozen=True)
class TurnRight(Command):
    """Rotate clockwise on screen (heading increases)."""
    angle_degrees: float

    type = TURN_RIGHT

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'value': self.angle_degrees}


@dataclass(frozen=True)
class TurnLeft(Command):
    """Rotate counter-clockwise on screen (heading decreases)."""
    angle_degrees: float

    type = TURN_LEFT

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type, 'value': self.angle_degrees}


@dataclass(frozen=True)
class UnknownCommand(Command):
    """
    Command whose tag matched none of the known kinds.

    Kept in the queue so the engine can skip it as a no-op instead of
    dropping it or failing while decoding.
    """
    tag: str
    value: Any = None

    @property
    def type(self) -> str:
        return self.tag

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.tag, 'value': self.value}


_COMMAND_TYPES = {
    MOVE_FORWARD: MoveForward,
    TURN_RIGHT: TurnRight,
    TURN_LEFT: TurnLeft,
}


def command_from_dict(data: Mapping[str, Any]) -> Command:
    """
    Decode a command mapping of the form {'type': tag, 'value': magnitude}.

    Args:
        data: Command mapping from the queue source

    Returns:
        Typed command; UnknownCommand for unrecognized tags
    """
    tag = data.get('type')
    value = data.get('value')
    command_class = _COMMAND_TYPES.get(tag)
    if command_class is None:
        return UnknownCommand(tag=str(tag), value=value)
    try:
        magnitude = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Command {tag!r} needs a numeric value, got {value!r}")
    return command_class(magnitude)


def commands_from_dicts(items: Iterable[Any]) -> List[Command]:
    """Decode a program; items that are already Commands pass through."""
    return [item if isinstance(item, Command) else command_from_dict(item) for item in items]
