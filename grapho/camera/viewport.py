"""Screen viewport rectangle with a clear color."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Viewport:
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    color: tuple[float, float, float, float] = (1.0, 0.0, 1.0, 0.0)
    depth: float = 1.0

    def aspect_ratio(self) -> float:
        """Width over height, with IEEE results for a zero height."""
        if self.height == 0:
            if self.width == 0 or math.isnan(self.width):
                return math.nan
            return math.copysign(math.inf, self.width) * math.copysign(1.0, self.height)
        return self.width / self.height

    def right(self) -> float:
        return self.left + self.width

    def bottom(self) -> float:
        return self.top + self.height