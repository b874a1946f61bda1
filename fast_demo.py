"""
Fast headless demo – 20 generations, default settings.
Prints one stats line per generation; nothing is written to disk.
"""
import time

import numpy as np

from config import SimulationConfig
from simulation import Simulation

GENERATIONS = 20
SEED        = 42


def main():
    rng = np.random.default_rng(SEED)
    config = SimulationConfig()
    sim = Simulation.random(rng, config)

    print("=" * 60)
    print("  EvoForage – food-seeking animals, evolved brains")
    print("=" * 60)
    print(f"  Animals    : {config.num_animals}")
    print(f"  Foods      : {config.num_foods}")
    print(f"  Steps/gen  : {config.generation_length}")
    print(f"  Eye cells  : {config.eye_cells}")
    print(f"  Mutation   : chance={config.mutation_chance}  coeff={config.mutation_coeff}")
    print("=" * 60)

    for _ in range(GENERATIONS):
        t0 = time.time()
        stats = sim.train(rng)
        print(f"Gen {sim.generation:>5}  |  {stats}  |  {time.time() - t0:.2f}s")

    best = max(s.avg_fitness for s in sim.history)
    print(f"\n=== Done: best average fitness {best:.2f} ===")
    print(sim.world.animals[0].brain.nn.summary())


if __name__ == "__main__":
    main()
