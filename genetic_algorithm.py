"""
Genetic Algorithm for EvoForage.

Generic over anything that behaves like an Individual:

  individual.fitness()               → float >= 0, higher is better
  individual.chromosome()            → list of floats (the genome)
  individual.create(chromosome)      → new individual from a genome

One generation (`GeneticAlgorithm.evolve`):
  1. Summarise the outgoing population's fitness
  2. For every child slot: select two parents, cross them, mutate the child
  3. Rebuild individuals from the child genomes

The three operators are small strategy objects injected at construction.
"""

import numpy as np

from exceptions import ConfigError, EmptyPopulationError, GenomeLengthError


# ──────────────────────────────────────────────────────────────────────────────
# Selection
# ──────────────────────────────────────────────────────────────────────────────

class RouletteWheelSelection:
    """
    Fitness-proportional selection. When every fitness is zero there is
    nothing to be proportional to, so the pick is uniform instead.
    """

    def select(self, rng, population: list):
        if not population:
            raise EmptyPopulationError("cannot select from an empty population")

        cumulative = np.cumsum([ind.fitness() for ind in population])
        total = float(cumulative[-1])

        if total <= 0.0:
            return population[int(rng.integers(0, len(population)))]

        draw = rng.random() * total
        idx = int(np.searchsorted(cumulative, draw, side="right"))
        # float rounding can push the draw onto the last edge
        return population[min(idx, len(population) - 1)]


# ──────────────────────────────────────────────────────────────────────────────
# Crossover
# ──────────────────────────────────────────────────────────────────────────────

class UniformCrossover:
    """Each child gene comes from parent A or parent B with probability 0.5."""

    def crossover(self, rng, parent_a: list, parent_b: list) -> list:
        if len(parent_a) != len(parent_b):
            raise GenomeLengthError(
                f"parents differ in length: {len(parent_a)} vs {len(parent_b)}")
        return [a if rng.random() < 0.5 else b
                for a, b in zip(parent_a, parent_b)]


# ──────────────────────────────────────────────────────────────────────────────
# Mutation
# ──────────────────────────────────────────────────────────────────────────────

class GaussianMutation:
    """
    With probability `chance` per gene, nudge the gene by
    ±uniform(0, coeff). Mutates the chromosome in place.
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise ConfigError(f"chance must be in [0, 1], got {chance}")
        if coeff < 0.0:
            raise ConfigError(f"coeff must be >= 0, got {coeff}")
        self.chance = chance
        self.coeff  = coeff

    def mutate(self, rng, chromosome: list):
        for i in range(len(chromosome)):
            if rng.random() < self.chance:
                sign = -1.0 if rng.random() < 0.5 else 1.0
                chromosome[i] += sign * rng.uniform(0.0, self.coeff)


# ──────────────────────────────────────────────────────────────────────────────
# Statistics
# ──────────────────────────────────────────────────────────────────────────────

class Statistics:
    """Fitness summary of one population, taken before it is replaced."""

    __slots__ = ("min_fitness", "max_fitness", "avg_fitness",
                 "sum_fitness", "median_fitness")

    def __init__(self, population: list):
        if not population:
            raise EmptyPopulationError("cannot summarise an empty population")

        fitnesses = np.array([ind.fitness() for ind in population],
                             dtype=np.float64)
        self.min_fitness    = float(fitnesses.min())
        self.max_fitness    = float(fitnesses.max())
        self.sum_fitness    = float(fitnesses.sum())
        self.avg_fitness    = self.sum_fitness / len(fitnesses)
        self.median_fitness = float(np.median(fitnesses))

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.__slots__}

    def __str__(self):
        return (f"min={self.min_fitness:.2f}, "
                f"max={self.max_fitness:.2f}, "
                f"avg={self.avg_fitness:.2f}")

    def __repr__(self):
        return f"Statistics({self})"


# ──────────────────────────────────────────────────────────────────────────────
# Engine
# ──────────────────────────────────────────────────────────────────────────────

class GeneticAlgorithm:

    def __init__(self, selection, crossover, mutation):
        self.selection = selection
        self.crossover = crossover
        self.mutation  = mutation

    def evolve(self, rng, population: list):
        """
        Produce the next generation.

        Args:
            rng:        numpy Generator shared by all three operators
            population: non-empty list of individuals

        Returns:
            (new_population, Statistics of the input population)
        """
        if not population:
            raise EmptyPopulationError("cannot evolve an empty population")

        stats = Statistics(population)
        create = population[0].create

        new_population = []
        for _ in range(len(population)):
            parent_a = self.selection.select(rng, population).chromosome()
            parent_b = self.selection.select(rng, population).chromosome()

            child = self.crossover.crossover(rng, parent_a, parent_b)
            self.mutation.mutate(rng, child)

            new_population.append(create(child))

        return new_population, stats
