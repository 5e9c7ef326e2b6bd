"""Configuration parameters for the RoboLab playback simulator."""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class SimulationConfig:
    """Configuration for a playback simulation session."""

    # Origin pose (surface coordinates, heading in degrees)
    origin_x: float = 50.0
    origin_y: float = 50.0
    origin_heading: float = 0.0

    # Playback
    speed: float = 0.05  # Progress added per tick (fraction of one command)
    fps: float = 60.0  # Frame rate of the playback loop (10-120)

    # Rendering surface
    window_size: Tuple[int, int] = (800, 600)
    grid_size: int = 40  # Grid cell size in pixels
    # Static obstacles as (x, y, width, height) rectangles
    obstacles: List[Tuple[float, float, float, float]] = field(
        default_factory=lambda: [(200.0, 100.0, 40.0, 120.0), (350.0, 250.0, 120.0, 40.0)]
    )

    # Logging
    log_commands: bool = True  # Log each completed command

    def __post_init__(self):
        """Validate and adjust configuration."""
        if not 0.0 < self.speed <= 1.0:
            raise ValueError(f"speed must be in (0, 1], got {self.speed}")

        self.fps = max(10.0, min(120.0, self.fps))
        self.grid_size = max(1, int(self.grid_size))
        self.window_size = (max(0, int(self.window_size[0])), max(0, int(self.window_size[1])))
        self.obstacles = [tuple(float(v) for v in rect) for rect in self.obstacles]
        for rect in self.obstacles:
            if len(rect) != 4:
                raise ValueError(f"Obstacle must be (x, y, width, height), got {rect}")

    @property
    def ticks_per_command(self) -> int:
        """Number of ticks needed to finish one command."""
        return int(round(1.0 / self.speed))


def create_default_config(**overrides) -> SimulationConfig:
    """
    Create default configuration for the playback preview.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        Default SimulationConfig
    """
    values = dict(
        origin_x=50.0,
        origin_y=50.0,
        origin_heading=0.0,
        speed=0.05,
        fps=60.0,
        window_size=(800, 600),
        grid_size=40,
    )
    values.update(overrides)
    return SimulationConfig(**values)
