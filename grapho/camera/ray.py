"""A ray with an origin and a direction."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..vertexlayout import Float3


@dataclass
class Ray:
    origin: Float3 = field(default_factory=Float3)
    direction: Float3 = field(default_factory=Float3)

    def is_valid(self) -> bool:
        """True when every direction component is finite."""
        return all(math.isfinite(c) for c in self.direction)