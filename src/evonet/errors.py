"""
Evonet Errors Module

This module defines the exceptions raised by the genome, the forward evaluator
and the serializer. All of them are raised synchronously, before any in-place
write to a genome takes place.

Classes:
    EvonetError:          Base class for all errors raised by this package
    InvalidTopology:      Topology has fewer than 2 layers or a non-positive width
    DimensionMismatch:    An array does not have the size the topology requires
    IncompatibleTopology: Two genomes with different topologies were combined
    UnknownActivation:    An activation name outside the supported set
"""

class EvonetError(Exception):
    """Base class for all errors raised by evonet."""


class InvalidTopology(EvonetError, ValueError):
    """
    Raised when a topology has fewer than two entries, or when
    one of its entries is not a positive integer.
    """


class DimensionMismatch(EvonetError, ValueError):
    """
    Raised when the length of a forward pass input differs from the width of
    the input layer, or when the weights/biases given to a genome do not have
    the shapes its topology requires.
    """


class IncompatibleTopology(EvonetError, ValueError):
    """
    Raised when crossover or difference is invoked on two
    genomes whose topologies are not identical.
    """


class UnknownActivation(EvonetError, ValueError):
    """
    Raised when an activation function is requested (for example while
    deserializing a genome) by a name which is not supported.
    """
