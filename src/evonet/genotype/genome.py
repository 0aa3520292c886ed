"""
Evonet Genome Module

This module implements the Genome class: the parameters of a fixed-topology,
fully connected feed-forward network, together with the genetic operators
used to evolve it.

Classes:
    Genome: Topology, weights, biases and activation of one network
"""

import logging
import numpy as np

from evonet.activations import Activation, ActivationKind
from evonet.errors      import DimensionMismatch, IncompatibleTopology, InvalidTopology
from evonet.run.config  import Config

logger = logging.getLogger(__name__)

# Biases of a freshly initialized genome are drawn from [-BIAS_INIT_RANGE, BIAS_INIT_RANGE]
BIAS_INIT_RANGE = 0.1

def as_generator(rng: 'np.random.Generator | int | None') -> np.random.Generator:
    """
    Return a numpy Generator for 'rng', which can be a Generator (returned
    unchanged), an integer seed, or None (fresh entropy from the OS).
    """
    return np.random.default_rng(rng)

class Genome:
    """
    The genome of a fully connected feed-forward neural network.

    The topology of the network (the width of each layer, from input to output)
    is fixed for the lifetime of the genome: evolution only ever changes the
    values of the weights and biases, never the structure of the network.

    For every transition 'i' between layer 'i' and layer 'i+1':
        weights[i] has shape (topology[i+1], topology[i])
        biases[i]  has shape (topology[i+1],)
    so that weights[i][j][k] is the weight of the connection from neuron 'k'
    of layer 'i' to neuron 'j' of layer 'i+1'.

    A genome exclusively owns its arrays: arrays passed to the constructor are
    copied, and every operator returning a genome returns one with freshly
    allocated storage. The only operators modifying a genome in place are
    mutate() and prune().

    Attributes:
        weights:    List of weight matrices, one per layer transition
        biases:     List of bias vectors, one per layer transition
        activation: Activation function shared by all non-input neurons

    Public Properties:
        topology:       Tuple of layer widths
        num_layers:     Number of layers (including the input layer)
        num_parameters: Total number of weights and biases

    Public Methods:
        forward(inputs):                      Evaluate the network on an input vector
        clone():                              Create an independent copy of this genome
        mutate(rate, amount, rng):            Randomly perturb weights and biases (in place)
        crossover(other, crossover_rate, rng): Create offspring by mixing with another genome
        difference(other):                    Mean absolute parameter difference to another genome
        prune(threshold):                     Zero small weights (in place)
        to_dict():                            Convert genome to a flat dictionary record

    Class Methods:
        from_dict(genome_dict):  Create a genome from a dictionary record
        from_config(config, rng): Create a random genome described by a Config
    """

    def __init__(self,
                 topology  : 'list[int] | tuple[int, ...]',
                 activation: 'Activation | ActivationKind | str' = ActivationKind.SIGMOID,
                 weights   : 'list | None' = None,
                 biases    : 'list | None' = None,
                 rng       : 'np.random.Generator | int | None' = None):
        """
        Initialize a Genome.

        If 'weights' and 'biases' are not specified, they are initialized
        randomly: the weights of transition 'i' are drawn uniformly from
        [-scale, scale], with scale = sqrt(2 / (topology[i] + topology[i+1]))
        (Xavier/Glorot initialization), and the biases uniformly from [-0.1, 0.1].

        Parameters:
            topology:   Width of each layer, from input to output
            activation: Activation function (Activation, ActivationKind or name)
            weights:    Weight matrices, one per layer transition (copied)
            biases:     Bias vectors, one per layer transition (copied)
            rng:        Random source for the initialization (Generator or seed)

        Raises:
            InvalidTopology:   If the topology has fewer than 2 layers or a non-positive width
            DimensionMismatch: If weights/biases do not match the topology
            ValueError:        If only one of 'weights' and 'biases' is specified
        """
        self._topology: tuple[int, ...] = self._validate_topology(topology)
        self.activation: Activation     = Activation.coerce(activation)

        if weights is None and biases is None:
            self.weights, self.biases = self._random_parameters(self._topology, as_generator(rng))
        elif weights is None or biases is None:
            raise ValueError("'weights' and 'biases' must be specified together")
        else:
            self.weights, self.biases = self._copy_parameters(self._topology, weights, biases)

    @classmethod
    def from_config(cls, config: Config, rng: 'np.random.Generator | int | None' = None) -> 'Genome':
        """
        Create a randomly initialized genome with the topology and
        activation function specified in the configuration.

        Parameters:
            config: Stores configuration parameters
            rng:    Random source (if None, a generator seeded with 'config.seed')

        Returns:
            A new randomly initialized Genome
        """
        activation = Activation.from_name(config.activation, config.leaky_relu_alpha)
        if rng is None:
            rng = config.seed
        return cls(config.topology, activation, rng=rng)

    @staticmethod
    def _validate_topology(topology) -> tuple[int, ...]:
        """
        Check that the topology has at least two layers, all of positive width.

        Raises:
            InvalidTopology: If the topology is not valid
        """
        try:
            widths = list(topology)
        except TypeError:
            raise InvalidTopology(f"Topology must be a sequence of layer widths, got {topology!r}") from None

        if len(widths) < 2:
            raise InvalidTopology(f"Topology must have at least 2 layers, got {len(widths)}")
        for width in widths:
            if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
                raise InvalidTopology(f"Layer widths must be integers, got {width!r}")
            if width <= 0:
                raise InvalidTopology(f"Layer widths must be positive, got {width}")

        return tuple(int(width) for width in widths)

    @staticmethod
    def _random_parameters(topology: tuple[int, ...], rng: np.random.Generator) -> tuple[list, list]:
        weights = []
        biases  = []
        for fan_in, fan_out in zip(topology[:-1], topology[1:]):
            scale = np.sqrt(2.0 / (fan_in + fan_out))
            weights.append(rng.uniform(-scale, scale, size=(fan_out, fan_in)))
            biases.append(rng.uniform(-BIAS_INIT_RANGE, BIAS_INIT_RANGE, size=fan_out))
        return weights, biases

    @staticmethod
    def _copy_parameters(topology: tuple[int, ...], weights, biases) -> tuple[list, list]:
        """
        Copy weights and biases into freshly allocated float64 arrays,
        checking that their shapes agree with the topology.

        Raises:
            DimensionMismatch: If the shapes do not agree with the topology
        """
        num_transitions = len(topology) - 1
        if len(weights) != num_transitions:
            raise DimensionMismatch(f"Expected {num_transitions} weight matrices, got {len(weights)}")
        if len(biases) != num_transitions:
            raise DimensionMismatch(f"Expected {num_transitions} bias vectors, got {len(biases)}")

        weights_copy = []
        biases_copy  = []
        for i in range(num_transitions):
            expected_w = (topology[i+1], topology[i])
            expected_b = (topology[i+1],)
            try:
                w = np.array(weights[i], dtype=np.float64)
                b = np.array(biases[i],  dtype=np.float64)
            except ValueError:
                raise DimensionMismatch(f"Weights or biases of layer {i} are not rectangular") from None

            if w.shape != expected_w:
                raise DimensionMismatch(f"Weights of layer {i} have shape {w.shape}, expected {expected_w}")
            if b.shape != expected_b:
                raise DimensionMismatch(f"Biases of layer {i} have shape {b.shape}, expected {expected_b}")

            weights_copy.append(w)
            biases_copy.append(b)

        return weights_copy, biases_copy

    @property
    def topology(self) -> tuple[int, ...]:
        return self._topology

    @property
    def num_layers(self) -> int:
        return len(self._topology)

    @property
    def num_parameters(self) -> int:
        return sum(w.size for w in self.weights) + sum(b.size for b in self.biases)

    def forward(self, inputs) -> np.ndarray:
        """
        Evaluate the network encoded by this genome.

        Shortcut for NetworkFast(genome).forward_pass(inputs); see there.
        """
        from evonet.phenotype.network_fast import NetworkFast
        return NetworkFast(self).forward_pass(inputs)

    def clone(self) -> 'Genome':
        """
        Create a copy of this genome sharing no storage with it.
        """
        return Genome(self._topology, self.activation, self.weights, self.biases)

    def _check_compatible(self, other: 'Genome') -> None:
        if self._topology != other._topology:
            raise IncompatibleTopology(f"Genomes have different topologies: "
                                       f"{list(self._topology)} vs {list(other._topology)}")

    def mutate(self,
               rate  : float = 0.1,
               amount: float = 0.5,
               rng   : 'np.random.Generator | int | None' = None) -> None:
        """
        Randomly perturb the weights and biases of this genome, in place.

        Each weight and each bias is perturbed independently with probability
        'rate'; a perturbation adds a value drawn from Uniform(-amount, amount).
        Elements which are not perturbed are left bit-for-bit unchanged.

        Parameters:
            rate:   Probability of perturbing any given element, in [0, 1]
            amount: Half-width of the perturbation distribution (>= 0)
            rng:    Random source (Generator or seed)

        Raises:
            ValueError: If 'rate' or 'amount' is out of range
        """
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Mutation rate must be in [0, 1], got {rate}")
        if not amount >= 0.0:
            raise ValueError(f"Mutation amount must be non-negative, got {amount}")

        rng = as_generator(rng)
        for array in self.weights + self.biases:
            mask  = rng.random(array.shape) < rate
            delta = rng.uniform(-amount, amount, size=array.shape)
            np.add(array, delta, out=array, where=mask)

    def crossover(self,
                  other         : 'Genome',
                  crossover_rate: float = 0.5,
                  rng           : 'np.random.Generator | int | None' = None) -> 'Genome':
        """
        Create an offspring by mixing the parameters of this genome with another.

        Every weight and every bias of the offspring is independently inherited
        from this genome with probability 'crossover_rate', and from 'other'
        otherwise. Hence crossover_rate=1.0 reproduces this genome and
        crossover_rate=0.0 reproduces 'other'.

        The offspring inherits the activation function of this genome.

        Parameters:
            other:          The other parent genome (must have the same topology)
            crossover_rate: Probability of inheriting an element from this genome, in [0, 1]
            rng:            Random source (Generator or seed)

        Returns:
            New offspring genome, owning freshly allocated arrays

        Raises:
            IncompatibleTopology: If the two genomes have different topologies
            ValueError:           If 'crossover_rate' is out of range
        """
        self._check_compatible(other)
        if not 0.0 <= crossover_rate <= 1.0:
            raise ValueError(f"Crossover rate must be in [0, 1], got {crossover_rate}")

        rng = as_generator(rng)

        def mix(mine: np.ndarray, theirs: np.ndarray) -> np.ndarray:
            take_mine = rng.random(mine.shape) < crossover_rate
            return np.where(take_mine, mine, theirs)

        weights = [mix(w1, w2) for w1, w2 in zip(self.weights, other.weights)]
        biases  = [mix(b1, b2) for b1, b2 in zip(self.biases,  other.biases)]

        # np.where() allocated new arrays; hand them over without copying again
        offspring = Genome.__new__(Genome)
        offspring._topology  = self._topology
        offspring.activation = self.activation
        offspring.weights    = weights
        offspring.biases     = biases
        return offspring

    def difference(self, other: 'Genome') -> float:
        """
        Calculate the mean absolute difference between the parameters of two genomes.

        The mean is taken over all weights and all biases.

        Parameters:
            other: The genome to compare with (must have the same topology)

        Returns:
            The mean absolute element-wise difference (0.0 if there are no elements)

        Raises:
            IncompatibleTopology: If the two genomes have different topologies
        """
        self._check_compatible(other)

        total_diff     = 0.0
        total_elements = 0
        for mine, theirs in zip(self.weights + self.biases, other.weights + other.biases):
            total_diff     += float(np.sum(np.abs(mine - theirs)))
            total_elements += mine.size

        return total_diff / total_elements if total_elements > 0 else 0.0

    def prune(self, threshold: float = 0.01) -> int:
        """
        Set to zero all weights whose magnitude is below 'threshold', in place.

        Biases are never pruned. Weights which are already zero are not
        counted, so pruning twice with the same threshold prunes nothing
        the second time.

        Parameters:
            threshold: Weights with |w| < threshold are pruned (>= 0)

        Returns:
            The number of weights set to zero

        Raises:
            ValueError: If 'threshold' is negative
        """
        if not threshold >= 0.0:
            raise ValueError(f"Pruning threshold must be non-negative, got {threshold}")

        num_pruned = 0
        for w in self.weights:
            mask = (np.abs(w) < threshold) & (w != 0.0)
            num_pruned += int(np.count_nonzero(mask))
            w[mask] = 0.0

        logger.debug("Pruned %d of %d weights (threshold=%g)",
                     num_pruned, sum(w.size for w in self.weights), threshold)
        return num_pruned

    def to_dict(self) -> dict:
        """
        Convert the genome to a flat dictionary record.

        This is the inverse operation of from_dict(). All values are plain
        Python objects (lists, ints, floats, strings), and floats are stored
        at full precision, so the round trip is exact.

        Returns:
            Dictionary with the following structure:
            {
                "topology"  : [2, 2, 1],
                "activation": "sigmoid",
                "weights"   : [[[1.0, 0.0], [0.0, 1.0]], [[1.0, 1.0]]],
                "biases"    : [[0.0, 0.0], [0.0]]
            }
            Genomes using the leaky ReLU activation also store its slope
            under the key "alpha".
        """
        result = {
            "topology"  : list(self._topology),
            "activation": self.activation.name,
            "weights"   : [w.tolist() for w in self.weights],
            "biases"    : [b.tolist() for b in self.biases]
        }
        if self.activation.kind == ActivationKind.LEAKY_RELU:
            result["alpha"] = self.activation.alpha
        return result

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary record, as produced by to_dict().

        Weights and biases are restored verbatim and the activation function
        is bound again from its name. For compatibility with older records,
        the keys "layers" and "activationName" are accepted in place of
        "topology" and "activation".

        Parameters:
            genome_dict: Dictionary describing the genome

        Returns:
            A new Genome object

        Raises:
            KeyError:          If required fields are missing from the dictionary
            UnknownActivation: If the activation name is not supported
            InvalidTopology:   If the topology is invalid
            DimensionMismatch: If weights/biases do not match the topology
        """
        topology = genome_dict["topology"] if "topology" in genome_dict else genome_dict["layers"]
        name     = genome_dict["activation"] if "activation" in genome_dict else genome_dict["activationName"]

        activation = Activation.from_name(name, genome_dict.get("alpha"))
        return cls(topology, activation, genome_dict["weights"], genome_dict["biases"])

    def __repr__(self):
        return (f"Genome(topology={list(self._topology)}, "
                f"activation={self.activation}, "
                f"parameters={self.num_parameters})")

    def __str__(self):
        lines = [f"Topology: {'-'.join(str(n) for n in self._topology)} [{self.activation.code}]"]
        for i, (w, b) in enumerate(zip(self.weights, self.biases)):
            lines.append(f"  Layer {i}->{i+1}: |w|={np.mean(np.abs(w)):.3f}, "
                         f"|b|={np.mean(np.abs(b)):.3f}, zeros={int(np.count_nonzero(w == 0.0))}")
        return "\n".join(lines)
