"""
Evonet Genotype Package

This package implements the genotype representation: the parameters of a
fixed-topology feed-forward network together with the genetic operators
(mutation, crossover, difference, pruning) and the flat record used to
serialize it.

Modules:
    genome: Genome class

Exported Classes:
    Genome: Topology, weights, biases and activation of one network

Exported Functions:
    as_generator: Turn a Generator, seed or None into a numpy Generator
"""

from evonet.genotype.genome import Genome, as_generator

__all__ = ['Genome',
           'as_generator']
