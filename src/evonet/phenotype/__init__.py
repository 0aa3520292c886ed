"""
Evonet Phenotype Package

This package expresses a genome as an executable neural network: it turns
the sensed-state vector supplied by the environment into the output vector
driving the agent's behavior.

Modules:
    network_fast: Vectorized feed-forward network implementation

Exported Classes:
    NetworkFast: Vectorized feed-forward evaluator of a Genome
"""

from evonet.phenotype.network_fast import NetworkFast

__all__ = ['NetworkFast']
