"""
Activations Package

This package provides the activation functions a genome can be bound to.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: sigmoid_activation, relu_activation,
                                     tanh_activation, leaky_relu_activation
    ActivationKind: Enumeration of the supported activation functions
    Activation:     Immutable activation specification dispatched by kind
"""

from evonet.activations.basic_activations import (
    activations,
    activation_codes,
    sigmoid_activation,
    relu_activation,
    tanh_activation,
    leaky_relu_activation
)
from evonet.activations.activation import Activation, ActivationKind

__all__ = [
    'activations',
    'activation_codes',
    'sigmoid_activation',
    'relu_activation',
    'tanh_activation',
    'leaky_relu_activation',
    'Activation',
    'ActivationKind'
]
