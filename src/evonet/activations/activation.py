"""
Activation Variant Module

This module implements the closed set of activation functions a genome can
be bound to. Rather than storing a function reference per genome, a genome
stores an Activation value (kind + parameters), which is dispatched to the
corresponding function through a pure lookup. Being a plain value, it can be
compared, copied and serialized without loss.

Classes:
    ActivationKind: Enumeration of the supported activation functions
    Activation:     Immutable activation specification (kind + leaky ReLU alpha)
"""

from dataclasses import dataclass
from enum        import Enum

from evonet.activations.basic_activations import activations, activation_codes, LEAKY_RELU_ALPHA
from evonet.errors                        import UnknownActivation

class ActivationKind(Enum):
    """
    The supported activation functions; values are their serialized names.
    """
    SIGMOID    = "sigmoid"
    RELU       = "relu"
    TANH       = "tanh"
    LEAKY_RELU = "leakyRelu"

# Closed interval containing every value an activation can return
_output_ranges = {
    ActivationKind.SIGMOID   : (0.0, 1.0),
    ActivationKind.RELU      : (0.0, float('inf')),
    ActivationKind.TANH      : (-1.0, 1.0),
    ActivationKind.LEAKY_RELU: (float('-inf'), float('inf'))
    }

@dataclass(frozen=True)
class Activation:
    """
    An activation function bound to a genome.

    Instances are callable and accept both scalars and numpy arrays.
    The 'alpha' attribute is only meaningful for leaky ReLU, and is
    normalized to the default value for every other kind, so that two
    activations of the same kind always compare equal.

    Public Attributes:
        kind:  Which activation function this is
        alpha: Slope of leaky ReLU for negative inputs

    Public Properties:
        name:         Serialized name (e.g. 'sigmoid', 'leakyRelu')
        code:         3-letter identifier
        output_range: (low, high) bounds of the function's values

    Class Methods:
        from_name(name, alpha): Look up an activation by its serialized name
    """
    kind : ActivationKind = ActivationKind.SIGMOID
    alpha: float          = LEAKY_RELU_ALPHA

    def __post_init__(self):
        if not isinstance(self.kind, ActivationKind):
            raise UnknownActivation(f"Unknown activation kind: {self.kind!r}")
        if self.kind != ActivationKind.LEAKY_RELU:
            object.__setattr__(self, 'alpha', LEAKY_RELU_ALPHA)
        object.__setattr__(self, 'alpha', float(self.alpha))

    @classmethod
    def from_name(cls, name: str, alpha: float | None = None) -> 'Activation':
        """
        Create an activation from its serialized name.

        Parameters:
            name:  One of 'sigmoid', 'relu', 'tanh', 'leakyRelu'
            alpha: Leaky ReLU slope (default 0.01; ignored for other kinds)

        Returns:
            The corresponding Activation

        Raises:
            UnknownActivation: If 'name' is not a supported activation
        """
        try:
            kind = ActivationKind(name)
        except ValueError:
            raise UnknownActivation(f"Unknown activation function '{name}'; "
                                    f"expected one of {sorted(activations)}") from None
        if alpha is None:
            return cls(kind)
        return cls(kind, alpha)

    @classmethod
    def coerce(cls, activation: 'Activation | ActivationKind | str') -> 'Activation':
        """
        Accept an Activation, an ActivationKind or a serialized name.
        """
        if isinstance(activation, Activation):
            return activation
        if isinstance(activation, ActivationKind):
            return cls(activation)
        if isinstance(activation, str):
            return cls.from_name(activation)
        raise UnknownActivation(f"Cannot interpret {activation!r} as an activation function")

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def code(self) -> str:
        return activation_codes[self.kind.value]

    @property
    def output_range(self) -> tuple[float, float]:
        return _output_ranges[self.kind]

    def __call__(self, z):
        if self.kind == ActivationKind.LEAKY_RELU:
            return activations[self.kind.value](z, self.alpha)
        return activations[self.kind.value](z)

    def __str__(self):
        if self.kind == ActivationKind.LEAKY_RELU:
            return f"{self.name}(alpha={self.alpha})"
        return self.name
