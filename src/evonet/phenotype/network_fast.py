"""
Evonet Fast Network Module

This module implements the forward evaluator of a genome. The network is
evaluated one layer transition at a time, each transition being a single
vectorized matrix-vector (or matrix-matrix, for batches) product:

    output = activation(W @ input + b)

This is the same computation as the straightforward per-neuron accumulation

    sum = b[j] + sum_k input[k] * W[j][k];  output[j] = activation(sum)

up to floating-point reassociation inside the dot product.

Classes:
    NetworkFast: Vectorized feed-forward evaluator of a Genome
"""

import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evonet.genotype import Genome
from evonet.errors import DimensionMismatch

class NetworkFast:
    """
    Vectorized implementation of the network encoded by a genome.

    The network does not copy the parameters of the genome: it reads them at
    every forward pass, so changes made to the genome (e.g. by mutation or
    pruning) are reflected in subsequent evaluations. Evaluation never
    modifies the genome, so different networks (or networks built on
    different genomes) can be evaluated concurrently.

    If 'keep_layer_outputs' is set, the output of every layer of the most
    recent forward pass is retained for inspection (e.g. visualization).
    This cache belongs to the network instance: a network keeping its layer
    outputs must not be evaluated from multiple threads at the same time.

    Public Methods:
        forward_pass(inputs): Process inputs through the network
                              Input:  (num_inputs,) or (batch_size, num_inputs)
                              Output: (num_outputs,) or (batch_size, num_outputs)

    Public Properties:
        layer_outputs:     Outputs of each layer in the last pass (raw input first)
        number_inputs:     Width of the input layer
        number_outputs:    Width of the output layer
        number_neurons:    Total number of neurons, input neurons included
        number_weights:    Total number of weights
        number_weights_nonzero: Number of weights which are not zero
    """

    def __init__(self, genome: 'Genome', keep_layer_outputs: bool = False):
        """
        Parameters:
            genome:             The Genome encoding the network
            keep_layer_outputs: Whether to retain the per-layer outputs of the last pass
        """
        self._genome             = genome
        self._keep_layer_outputs = keep_layer_outputs
        self._layer_outputs: list[np.ndarray] = []

    @property
    def number_inputs(self) -> int:
        return self._genome.topology[0]

    @property
    def number_outputs(self) -> int:
        return self._genome.topology[-1]

    @property
    def number_neurons(self) -> int:
        return sum(self._genome.topology)

    @property
    def number_weights(self) -> int:
        return sum(w.size for w in self._genome.weights)

    @property
    def number_weights_nonzero(self) -> int:
        return sum(int(np.count_nonzero(w)) for w in self._genome.weights)

    @property
    def layer_outputs(self) -> tuple[np.ndarray, ...]:
        """
        Per-layer outputs of the most recent forward pass, starting with the
        raw input. Empty if the network does not keep its layer outputs or
        has not been evaluated yet. The arrays are read-only.
        """
        return tuple(self._layer_outputs)

    def forward_pass(self, inputs) -> np.ndarray:
        """
        Perform a forward pass through the network.

        This method supports both non-batched (1D) and batched (2D) inputs.

        Parameters:
            inputs: Input values as numpy array or list
                    Shape: (num_inputs,) or (batch_size, num_inputs)

        Returns:
            Output values as numpy array
            Shape: (num_outputs,) or (batch_size, num_outputs)

        Raises:
            DimensionMismatch: If the number of inputs differs from the width of the input layer
            ValueError:        If the input is neither 1D nor 2D
        """
        values = np.array(inputs, dtype=np.float64)
        if values.ndim not in (1, 2):
            raise ValueError(f"Input must be 1D or 2D array, got {values.ndim}D")

        expected_inputs = self.number_inputs
        actual_inputs   = values.shape[-1]
        if actual_inputs != expected_inputs:
            raise DimensionMismatch(f"Expected {expected_inputs} inputs, got {actual_inputs}")

        activation = self._genome.activation
        if self._keep_layer_outputs:
            values.setflags(write=False)
            layer_outputs = [values]

        # Batches are stored one sample per row, hence the transposed product
        for weights, biases in zip(self._genome.weights, self._genome.biases):
            values = activation(values @ weights.T + biases)
            if self._keep_layer_outputs:
                values.setflags(write=False)
                layer_outputs.append(values)

        if self._keep_layer_outputs:
            self._layer_outputs = layer_outputs
            values = values.copy()

        return values

    def __repr__(self):
        return (f"NetworkFast(topology={list(self._genome.topology)}, "
                f"activation={self._genome.activation}, "
                f"weights={self.number_weights_nonzero}/{self.number_weights})")
