"""
Eye (vision model) for EvoForage.

The field of view is a cone centred on the animal's heading, split into
`cells` equal angular sectors. Each visible food item adds
(range - distance) / range to the sector it falls into, so the brain
gets one "how much food, how close" number per sector.

Angles: heading 0 looks along +y, positive angles turn counter-clockwise.
"""

import math

import numpy as np

from config import EYE_CELLS, FOV_ANGLE, FOV_RANGE
from exceptions import ConfigError


def wrap(value: float, low: float, high: float) -> float:
    """Wrap `value` into [low, high)."""
    span = high - low
    wrapped = low + (value - low) % span
    # tiny negatives round up to `high` under %
    return low if wrapped >= high else wrapped


def torus_delta(origin, target) -> tuple:
    """Shortest (dx, dy) from origin to target on the unit torus."""
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    dx -= round(dx)
    dy -= round(dy)
    return dx, dy


def heading_vector(rotation: float) -> np.ndarray:
    """Unit vector of a heading angle (0 → +y)."""
    return np.array([-math.sin(rotation), math.cos(rotation)])


class Eye:

    __slots__ = ("fov_range", "fov_angle", "cells")

    def __init__(self, fov_range: float = FOV_RANGE, fov_angle: float = FOV_ANGLE,
                 cells: int = EYE_CELLS):
        if fov_range <= 0.0:
            raise ConfigError(f"fov_range must be > 0, got {fov_range}")
        if not 0.0 < fov_angle <= 2 * math.pi:
            raise ConfigError(f"fov_angle must be in (0, 2pi], got {fov_angle}")
        if cells < 1:
            raise ConfigError(f"cells must be >= 1, got {cells}")
        self.fov_range = fov_range
        self.fov_angle = fov_angle
        self.cells     = cells

    @classmethod
    def from_config(cls, config) -> "Eye":
        return cls(config.fov_range, config.fov_angle, config.eye_cells)

    # ──────────────────────────────────────────────────────────────────────────

    def process_vision(self, position, rotation: float, foods) -> np.ndarray:
        """
        Args:
            position: (x, y) of the animal on the unit torus
            rotation: heading angle in radians (any magnitude)
            foods:    iterable of objects with a `.position` (x, y)

        Returns:
            float64 array of shape (cells,), values >= 0
        """
        cells = np.zeros(self.cells, dtype=np.float64)
        half_fov = self.fov_angle / 2.0

        for food in foods:
            dx, dy = torus_delta(position, food.position)
            dist = math.hypot(dx, dy)

            if dist > self.fov_range:
                continue

            # angle of (dx, dy) measured from +y, relative to the heading
            angle = wrap(math.atan2(-dx, dy) - rotation, -math.pi, math.pi)

            if angle < -half_fov or angle > half_fov:
                continue

            cell = int((angle + half_fov) / self.fov_angle * self.cells)
            cell = min(cell, self.cells - 1)

            cells[cell] += (self.fov_range - dist) / self.fov_range

        return cells

    def __repr__(self):
        return (f"Eye(range={self.fov_range}, angle={self.fov_angle:.3f}, "
                f"cells={self.cells})")
