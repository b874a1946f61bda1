"""
World for EvoForage.

The world is the unit torus [0,1) x [0,1). It owns every animal and every
food item; nothing else holds them. Renderers read `animals` and `foods`.
"""

import numpy as np

from animal import Animal
from eye import Eye


class Food:

    __slots__ = ("position",)

    def __init__(self, position):
        self.position = np.asarray(position, dtype=np.float64)

    @classmethod
    def random(cls, rng) -> "Food":
        return cls([rng.random(), rng.random()])

    def respawn(self, rng):
        """Move to a fresh random spot on the torus."""
        self.position = np.array([rng.random(), rng.random()])

    def __repr__(self):
        x, y = self.position
        return f"Food({x:.3f}, {y:.3f})"


class World:

    def __init__(self, animals: list, foods: list):
        self.animals = animals
        self.foods   = foods

    @classmethod
    def random(cls, rng, config) -> "World":
        eye = Eye.from_config(config)
        animals = [Animal.random(rng, eye, config.initial_speed)
                   for _ in range(config.num_animals)]
        foods = [Food.random(rng) for _ in range(config.num_foods)]
        return cls(animals, foods)

    # ──────────────────────────────────────────────────────────────────────────
    # Snapshot for visualisation
    # ──────────────────────────────────────────────────────────────────────────

    def snapshot(self) -> dict:
        """
        Plain arrays for an external renderer:
          animals: (N, 4) rows of x, y, rotation, speed
          foods:   (M, 2) rows of x, y
        """
        animals = np.array([[a.position[0], a.position[1], a.rotation, a.speed]
                            for a in self.animals], dtype=np.float64).reshape(-1, 4)
        foods = np.array([f.position for f in self.foods],
                         dtype=np.float64).reshape(-1, 2)
        return {"animals": animals, "foods": foods}
