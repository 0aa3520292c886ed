"""
Evonet Pool Package

This package applies the genetic operators across a whole population,
in parallel and reproducibly.

Exported Functions:
    spawn_generators:     Independent random generators derived from one seed
    mutate_population:    Mutate every genome of a population (in place)
    breed_population:     Cross over pairs of parents into offspring
    prune_population:     Prune every genome of a population (in place)
    population_diversity: Mean pairwise difference within a population
"""

from evonet.pool.sweep import (
    spawn_generators,
    mutate_population,
    breed_population,
    prune_population,
    population_diversity
)

__all__ = ['spawn_generators',
           'mutate_population',
           'breed_population',
           'prune_population',
           'population_diversity']
