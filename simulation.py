"""
Simulation Engine for EvoForage.

Each call to `step` runs one tick:
  1. Collisions  – animals eat food within reach, eaten food respawns
  2. Brains      – eye → network → speed / rotation changes
  3. Movement    – advance along the heading, wrap around the torus
  4. Generation  – after `generation_length` ticks, evolve the population

`train` fast-forwards to the next generation boundary.

The caller owns the random generator and passes it into every call that
needs randomness; the simulation never stores one.
"""

import math

from animal import AnimalIndividual
from config import SimulationConfig
from eye import wrap
from genetic_algorithm import (GaussianMutation, GeneticAlgorithm,
                               RouletteWheelSelection, UniformCrossover)
from world import World


class Simulation:
    """
    Main simulation controller.
    """

    def __init__(self, world: World, config: SimulationConfig = None):
        self.config = config if config is not None else SimulationConfig()
        self.world  = world
        self.ga     = GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(self.config.mutation_chance,
                             self.config.mutation_coeff),
        )

        self.age        = 0    # steps into the current generation
        self.generation = 0    # completed generations
        self.history    = []   # Statistics, one per completed generation

    @classmethod
    def random(cls, rng, config: SimulationConfig = None) -> "Simulation":
        config = config if config is not None else SimulationConfig()
        return cls(World.random(rng, config), config)

    # ──────────────────────────────────────────────────────────────────────────
    # Public API
    # ──────────────────────────────────────────────────────────────────────────

    def step(self, rng):
        """
        Advance by one tick.

        Returns:
            Statistics of the finished generation when a boundary is
            crossed, otherwise None.
        """
        self.process_collisions(rng)
        self.process_brains()
        self.process_movements()

        self.age += 1
        if self.age > self.config.generation_length:
            return self.evolve(rng)
        return None

    def train(self, rng):
        """Step until the next generation boundary and return its Statistics."""
        while True:
            stats = self.step(rng)
            if stats is not None:
                return stats

    # ──────────────────────────────────────────────────────────────────────────
    # Phases
    # ──────────────────────────────────────────────────────────────────────────

    def process_collisions(self, rng):
        radius = self.config.eat_radius
        for animal in self.world.animals:
            for food in self.world.foods:
                dx = animal.position[0] - food.position[0]
                dy = animal.position[1] - food.position[1]
                if math.hypot(dx, dy) <= radius:
                    food.respawn(rng)
                    animal.satiation += 1

    def process_brains(self):
        cfg = self.config
        for animal in self.world.animals:
            vision = animal.eye.process_vision(
                animal.position, animal.rotation, self.world.foods)
            response = animal.brain.nn.propagate(vision)

            speed    = _clamp(float(response[0]), -cfg.speed_accel, cfg.speed_accel)
            rotation = _clamp(float(response[1]), -cfg.rotation_accel, cfg.rotation_accel)

            animal.speed = _clamp(animal.speed + speed, cfg.speed_min, cfg.speed_max)
            animal.rotation += rotation

    def process_movements(self):
        for animal in self.world.animals:
            x, y = animal.position + animal.direction() * animal.speed
            animal.position[0] = wrap(x, 0.0, 1.0)
            animal.position[1] = wrap(y, 0.0, 1.0)

    # ──────────────────────────────────────────────────────────────────────────
    # Evolution
    # ──────────────────────────────────────────────────────────────────────────

    def evolve(self, rng):
        """
        Replace every animal with an evolved offspring, respawn all food and
        return the Statistics of the outgoing generation.
        """
        self.age = 0

        current_population = [AnimalIndividual.from_animal(a)
                              for a in self.world.animals]
        evolved_population, stats = self.ga.evolve(rng, current_population)

        self.world.animals = [
            individual.into_animal(rng, self.config.initial_speed)
            for individual in evolved_population
        ]

        # Fresh food makes the boundary visible to a renderer
        for food in self.world.foods:
            food.respawn(rng)

        self.generation += 1
        self.history.append(stats)
        return stats


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
