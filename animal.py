"""
Animal class for EvoForage.

Each animal has:
  - position on the unit torus, heading (rotation) and speed
  - an Eye that turns nearby food into a sensor vector
  - a Brain: a feed-forward network with eye.cells inputs and two outputs
    (speed change, rotation change)
  - satiation: food eaten since the last generation boundary

AnimalIndividual adapts an animal to the genetic algorithm: its fitness is
the satiation and its chromosome the flattened brain weights.
"""

import math

import numpy as np

from config import INITIAL_SPEED
from eye import heading_vector
from neural_network import LayerTopology, Network


# ──────────────────────────────────────────────────────────────────────────────
# Brain
# ──────────────────────────────────────────────────────────────────────────────

class Brain:
    """
    Topology: eye cells → 2 * eye cells (hidden) → 2 (speed, rotation)
    """

    __slots__ = ("nn",)

    def __init__(self, nn: Network):
        self.nn = nn

    @staticmethod
    def topology(eye) -> list:
        return [
            LayerTopology(eye.cells),
            LayerTopology(2 * eye.cells),
            LayerTopology(2),
        ]

    @classmethod
    def random(cls, rng, eye) -> "Brain":
        return cls(Network.random(rng, cls.topology(eye)))

    @classmethod
    def from_chromosome(cls, chromosome: list, eye) -> "Brain":
        return cls(Network.from_weights(cls.topology(eye), chromosome))

    def as_chromosome(self) -> list:
        return self.nn.weights()


# ──────────────────────────────────────────────────────────────────────────────
# Animal
# ──────────────────────────────────────────────────────────────────────────────

class Animal:

    __slots__ = ("position", "rotation", "speed", "eye", "brain", "satiation")

    def __init__(self, position, rotation: float, speed: float, eye, brain: Brain):
        self.position  = np.asarray(position, dtype=np.float64)
        self.rotation  = float(rotation)
        self.speed     = float(speed)
        self.eye       = eye
        self.brain     = brain
        self.satiation = 0

    @classmethod
    def random(cls, rng, eye, speed: float = INITIAL_SPEED) -> "Animal":
        brain = Brain.random(rng, eye)
        return cls._spawn(rng, eye, brain, speed)

    @classmethod
    def from_chromosome(cls, chromosome: list, rng, eye,
                        speed: float = INITIAL_SPEED) -> "Animal":
        brain = Brain.from_chromosome(chromosome, eye)
        return cls._spawn(rng, eye, brain, speed)

    @classmethod
    def _spawn(cls, rng, eye, brain: Brain, speed: float) -> "Animal":
        position = np.array([rng.random(), rng.random()])
        rotation = rng.uniform(0.0, 2 * math.pi)
        return cls(position, rotation, speed, eye, brain)

    def as_chromosome(self) -> list:
        return self.brain.as_chromosome()

    def direction(self) -> np.ndarray:
        """Unit heading vector; rotation 0 points along +y."""
        return heading_vector(self.rotation)

    def __repr__(self):
        x, y = self.position
        return (f"Animal(pos=({x:.3f}, {y:.3f}), rot={self.rotation:.3f}, "
                f"speed={self.speed:.4f}, satiation={self.satiation})")


# ──────────────────────────────────────────────────────────────────────────────
# Individual adapter
# ──────────────────────────────────────────────────────────────────────────────

class AnimalIndividual:
    """fitness + chromosome view of an animal for the genetic algorithm."""

    __slots__ = ("_fitness", "_chromosome", "_eye")

    def __init__(self, fitness: float, chromosome: list, eye):
        self._fitness    = fitness
        self._chromosome = chromosome
        self._eye        = eye

    @classmethod
    def from_animal(cls, animal: Animal) -> "AnimalIndividual":
        return cls(float(animal.satiation), animal.as_chromosome(), animal.eye)

    def create(self, chromosome: list) -> "AnimalIndividual":
        # Offspring have not lived yet and see through the same kind of eye
        return AnimalIndividual(0.0, chromosome, self._eye)

    def into_animal(self, rng, speed: float = INITIAL_SPEED) -> Animal:
        return Animal.from_chromosome(self._chromosome, rng, self._eye, speed)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> list:
        return self._chromosome
