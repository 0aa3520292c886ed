"""
XOR Problem Implementation for evonet

This module evolves a fixed-topology 2-4-1 network to compute XOR, the
classic benchmark which cannot be solved without a hidden layer:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

    Maximum fitness of 4.0 is achieved when all four XOR cases produce exact outputs.

Each generation, the fittest genomes are kept unchanged (elitism), and the
rest of the population is replaced by offspring obtained through crossover
of the fitter half, followed by mutation and pruning. Population-wide
operations run in parallel (see 'num_jobs' in the configuration file) and are
reproducible given the seed.

Usage:
    python trial_XOR.py [config_file]
"""

import json
import logging
import sys
import numpy as np
from pathlib import Path

from evonet.genotype  import Genome
from evonet.phenotype import NetworkFast
from evonet.pool      import breed_population, mutate_population, prune_population, population_diversity
from evonet.run       import Config

POPULATION_SIZE   = 100
NUM_ELITES        = 10
MAX_GENERATIONS   = 300
FITNESS_THRESHOLD = 3.9

XOR_INPUTS  = np.array([[0.0, 0.0],
                        [0.0, 1.0],
                        [1.0, 0.0],
                        [1.0, 1.0]])
XOR_OUTPUTS = np.array([0.0, 1.0, 1.0, 0.0])

def evaluate_fitness(genome: Genome) -> float:
    outputs = NetworkFast(genome).forward_pass(XOR_INPUTS)[:, 0]   # all 4 cases in one batch
    return 4.0 - float(np.sum((outputs - XOR_OUTPUTS) ** 2))

def report(generation: int, best: Genome, best_fitness: float, population: list[Genome]):
    print(f"gen {generation:4d}: best fitness={best_fitness:.4f}, "
          f"diversity={population_diversity(population):.4f}")

def run(config: Config) -> Genome:
    """
    Evolve a population until the fitness threshold or the maximum number of generations is reached.

    Returns:
        The fittest genome of the final generation
    """
    rng = np.random.default_rng(config.seed)
    population = [Genome.from_config(config, rng) for _ in range(POPULATION_SIZE)]

    for generation in range(MAX_GENERATIONS):

        # Rank the population, fittest first
        scores = [evaluate_fitness(g) for g in population]
        order  = np.argsort(scores)[::-1]
        ranked = [population[i] for i in order]
        best, best_fitness = ranked[0], scores[order[0]]

        if generation % 10 == 0:
            report(generation, best, best_fitness, population)
        if best_fitness >= FITNESS_THRESHOLD:
            break

        # The elite survives unchanged; the fitter half reproduces
        elites  = [g.clone() for g in ranked[:NUM_ELITES]]
        parents = ranked[:POPULATION_SIZE // 2]
        pairs   = [(parents[rng.integers(len(parents))], parents[rng.integers(len(parents))])
                   for _ in range(POPULATION_SIZE - NUM_ELITES)]

        offspring = breed_population(pairs, config.crossover_rate,
                                     seed=int(rng.integers(2**32)), num_jobs=config.num_jobs)
        mutate_population(offspring, config.mutation_rate, config.mutation_amount,
                          seed=int(rng.integers(2**32)), num_jobs=config.num_jobs)
        prune_population(offspring, config.prune_threshold, num_jobs=config.num_jobs)

        population = elites + offspring

    report(generation, best, best_fitness, population)
    return best

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    config_file = sys.argv[1] if len(sys.argv) > 1 else Path(__file__).parent / "config_xor.ini"
    config = Config(str(config_file))

    best = run(config)

    print(best)
    for inputs, target, output in zip(XOR_INPUTS, XOR_OUTPUTS, best.forward(XOR_INPUTS)[:, 0]):
        print(f"  {inputs} => {output:.3f} (target {target:.0f})")
    print(json.dumps(best.to_dict()))
