"""
Evonet - evolvable feed-forward networks.

This package provides a small feed-forward network evaluator and the genetic
operators used to evolve it: the decision-making genome of autonomous agents.
Networks have a fixed topology; evolution changes the values of their weights
and biases only.

Main components:
- activations: Activation functions (sigmoid, relu, tanh, leaky relu)
- genotype:    Genome (weights, biases, activation) and genetic operators
- phenotype:   Forward evaluation of a genome
- pool:        Population-wide, parallel and reproducible genetic operators
- run:         Configuration

Example:
    >>> import numpy as np
    >>> from evonet import Genome
    >>> rng = np.random.default_rng(42)
    >>> parent_a = Genome([4, 8, 3], "tanh", rng=rng)
    >>> parent_b = Genome([4, 8, 3], "tanh", rng=rng)
    >>> child = parent_a.crossover(parent_b, crossover_rate=0.5, rng=rng)
    >>> child.mutate(rate=0.1, amount=0.5, rng=rng)
    >>> child.forward([0.1, 0.2, 0.3, 0.4]).shape
    (3,)
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from evonet.activations import Activation, ActivationKind
from evonet.errors      import (EvonetError,
                                InvalidTopology,
                                DimensionMismatch,
                                IncompatibleTopology,
                                UnknownActivation)
from evonet.genotype    import Genome
from evonet.phenotype   import NetworkFast
from evonet.run.config  import Config

__all__ = [
    "Activation",
    "ActivationKind",
    "Config",
    "Genome",
    "NetworkFast",
    "EvonetError",
    "InvalidTopology",
    "DimensionMismatch",
    "IncompatibleTopology",
    "UnknownActivation",
]
