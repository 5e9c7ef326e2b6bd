"""Robot pose on the 2D simulation surface."""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Pose:
    """Position in surface coordinates and heading in degrees."""
    x: float
    y: float
    heading: float

    def copy(self) -> "Pose":
        return Pose(self.x, self.y, self.heading)

    def rounded_position(self) -> Tuple[int, int]:
        """Position rounded half-up, as shown in the coordinate readout."""
        return int(math.floor(self.x + 0.5)), int(math.floor(self.y + 0.5))
