"""
Evonet Population Sweep Module

This module implements population-wide applications of the genetic operators,
as carried out by a generation manager between two generations. Applying an
operator to many genomes (or many pairs of parents) is embarrassingly
parallel; the work is distributed with joblib.

Reproducibility does not depend on the degree of parallelism: every task
draws from its own random generator, spawned from a single seed, so running
a sweep with 'num_jobs=1' or 'num_jobs=8' gives identical results.

Parallelization (num_jobs):
     1:  Serial execution (no parallelization)
    >1:  Use specified number of parallel workers
    -1:  Use all available CPU cores

Threads are used as workers: mutation and pruning modify the genomes in
place, and every genome is handed to exactly one task. The same genome
must not appear twice in a population passed to an in-place sweep.

Functions:
    spawn_generators:     Independent random generators derived from one seed
    mutate_population:    Mutate every genome of a population (in place)
    breed_population:     Cross over pairs of parents into offspring
    prune_population:     Prune every genome of a population (in place)
    population_diversity: Mean pairwise difference within a population
"""

import logging
import numpy as np
from itertools import combinations
from joblib    import Parallel, delayed
from typing    import Sequence

from evonet.genotype import Genome

logger = logging.getLogger(__name__)

def spawn_generators(seed: 'int | np.random.SeedSequence | None', n: int) -> list[np.random.Generator]:
    """
    Create 'n' statistically independent random generators from a single seed.

    Parameters:
        seed: Root seed (if None, fresh entropy from the OS)
        n:    Number of generators

    Returns:
        List of 'n' numpy Generators
    """
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in seed.spawn(n)]

def _check_distinct(genomes: Sequence[Genome]) -> None:
    if len({id(g) for g in genomes}) != len(genomes):
        raise ValueError("The same genome appears more than once in the population")

def _mutate_one(genome: Genome, rate: float, amount: float, rng: np.random.Generator) -> None:
    genome.mutate(rate, amount, rng)

def mutate_population(genomes : Sequence[Genome],
                      rate    : float = 0.1,
                      amount  : float = 0.5,
                      seed    : 'int | None' = None,
                      num_jobs: int = 1) -> None:
    """
    Mutate every genome of a population in place.

    Parameters:
        genomes:  The genomes to mutate (each one at most once)
        rate:     Probability of perturbing any given weight or bias
        amount:   Half-width of the perturbation distribution
        seed:     Root seed of the per-genome generators
        num_jobs: Number of parallel workers

    Raises:
        ValueError: If 'rate'/'amount' are out of range, or a genome appears twice
    """
    # Validate before touching any genome
    if not 0.0 <= rate <= 1.0:
        raise ValueError(f"Mutation rate must be in [0, 1], got {rate}")
    if not amount >= 0.0:
        raise ValueError(f"Mutation amount must be non-negative, got {amount}")
    _check_distinct(genomes)

    rngs = spawn_generators(seed, len(genomes))
    Parallel(num_jobs, prefer="threads")(
        delayed(_mutate_one)(genome, rate, amount, rng) for genome, rng in zip(genomes, rngs)
    )
    logger.debug("Mutated %d genomes (rate=%g, amount=%g)", len(genomes), rate, amount)

def breed_population(pairs         : Sequence[tuple[Genome, Genome]],
                     crossover_rate: float = 0.5,
                     seed          : 'int | None' = None,
                     num_jobs      : int = 1) -> list[Genome]:
    """
    Create one offspring for every pair of parents.

    Parameters:
        pairs:          Sequence of (parent A, parent B); the offspring inherits A's activation
        crossover_rate: Probability of inheriting an element from parent A
        seed:           Root seed of the per-pair generators
        num_jobs:       Number of parallel workers

    Returns:
        List of offspring, in the same order as 'pairs'

    Raises:
        IncompatibleTopology: If the parents of any pair have different topologies
        ValueError:           If 'crossover_rate' is out of range
    """
    rngs = spawn_generators(seed, len(pairs))
    offspring = Parallel(num_jobs, prefer="threads")(
        delayed(parent_a.crossover)(parent_b, crossover_rate, rng)
        for (parent_a, parent_b), rng in zip(pairs, rngs)
    )
    logger.debug("Bred %d offspring (crossover_rate=%g)", len(offspring), crossover_rate)
    return list(offspring)

def prune_population(genomes  : Sequence[Genome],
                     threshold: float = 0.01,
                     num_jobs : int = 1) -> list[int]:
    """
    Prune every genome of a population in place.

    Parameters:
        genomes:   The genomes to prune (each one at most once)
        threshold: Weights with |w| < threshold are set to zero
        num_jobs:  Number of parallel workers

    Returns:
        Number of weights pruned in each genome
    """
    if not threshold >= 0.0:
        raise ValueError(f"Pruning threshold must be non-negative, got {threshold}")
    _check_distinct(genomes)

    counts = Parallel(num_jobs, prefer="threads")(
        delayed(genome.prune)(threshold) for genome in genomes
    )
    return list(counts)

def population_diversity(genomes: Sequence[Genome]) -> float:
    """
    Calculate the mean difference over all pairs of genomes in a population.

    Parameters:
        genomes: Genomes sharing the same topology

    Returns:
        Mean pairwise difference (0.0 for populations of fewer than two genomes)

    Raises:
        IncompatibleTopology: If the genomes do not all share the same topology
    """
    diffs = [g1.difference(g2) for g1, g2 in combinations(genomes, 2)]
    return sum(diffs) / len(diffs) if diffs else 0.0
