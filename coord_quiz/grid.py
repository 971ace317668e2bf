from __future__ import annotations

import math
from dataclasses import dataclass

from .models import Coordinate


DEFAULT_SIZE = 320
DEFAULT_MARGIN = 36


def _round_half_up(value: float, decimals: int = 0) -> float:
    # halves go toward +infinity, so -2.5 -> -2 and 2.5 -> 3
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


@dataclass(frozen=True)
class GridTransform:
    """
    Affine map between world coordinates and surface pixels.

    The plotted area is the surface minus `margin` on every side, split into
    `2 * range` units per axis. Pixel y grows downward, world y grows upward.
    """

    range: int
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    margin: int = DEFAULT_MARGIN

    @property
    def unit_x(self) -> float:
        return (self.width - self.margin * 2) / (self.range * 2)

    @property
    def unit_y(self) -> float:
        return (self.height - self.margin * 2) / (self.range * 2)

    def to_canvas_x(self, x: float) -> float:
        return self.margin + (x + self.range) * self.unit_x

    def to_canvas_y(self, y: float) -> float:
        return self.margin + (self.range - y) * self.unit_y

    def to_world_x(self, cx: float) -> float:
        return _round_half_up((cx - self.margin) / self.unit_x - self.range, 1)

    def to_world_y(self, cy: float) -> float:
        return _round_half_up(self.range - (cy - self.margin) / self.unit_y, 1)

    def snap(self, cx: float, cy: float) -> Coordinate:
        """Nearest integer grid point to a click, clamped to [-range, range]."""
        wx = int(_round_half_up(self.to_world_x(cx)))
        wy = int(_round_half_up(self.to_world_y(cy)))
        wx = max(-self.range, min(self.range, wx))
        wy = max(-self.range, min(self.range, wy))
        return Coordinate(x=wx, y=wy)
