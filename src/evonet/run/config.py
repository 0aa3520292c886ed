import configparser
import os
from evonet.activations import activations
from evonet.errors      import UnknownActivation

class Config:

    @staticmethod
    def _parse_topology(raw_topology):
        """
        Parse the network topology from string to list.

        Parameters:
            raw_topology: Either a comma-separated list of layer widths, or already a list

        Returns:
            List of layer widths (input width first, output width last)
        """
        # If already a sequence, return as-is (validated when the genome is built)
        if isinstance(raw_topology, (list, tuple)):
            return list(raw_topology)

        try:
            return [int(width.strip()) for width in raw_topology.split(',')]
        except ValueError:
            raise ValueError(f"Invalid topology '{raw_topology}': expected comma-separated integers") from None

    @staticmethod
    def _check_activation(name):
        if name not in activations:
            raise UnknownActivation(f"Invalid activation function '{name}' in configuration")
        return name

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding default values.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.topology         = [3, 4, 2]
            self.activation       = 'sigmoid'
            self.leaky_relu_alpha = 0.01

            self.mutation_rate   = 0.1
            self.mutation_amount = 0.5
            self.crossover_rate  = 0.5
            self.prune_threshold = 0.01

            self.seed     = None
            self.num_jobs = 1
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The width of each layer, from the input layer to the output layer.
        # At least two layers are required; all widths must be positive.
        self.topology = get_value('NETWORK', 'topology', str)

        # Activation function shared by all neurons of the network.
        # Allowed values: "sigmoid", "relu", "tanh", "leakyRelu"
        self.activation = get_value('NETWORK', 'activation', str, default='sigmoid')

        # Slope applied to negative inputs by the leaky ReLU activation.
        # Ignored for every other activation function.
        self.leaky_relu_alpha = get_value('NETWORK', 'leaky_relu_alpha', float, default=0.01)

        # [MUTATION]

        # The probability that mutation perturbs any given weight or bias.
        self.mutation_rate = get_value('MUTATION', 'mutation_rate', float, default=0.1)

        # The half-width of the uniform distribution from
        # which a weight or bias perturbation is drawn.
        self.mutation_amount = get_value('MUTATION', 'mutation_amount', float, default=0.5)

        # [CROSSOVER]

        # The probability that the offspring inherits a given weight
        # or bias from the first parent (otherwise from the second).
        self.crossover_rate = get_value('CROSSOVER', 'crossover_rate', float, default=0.5)

        # [PRUNING]

        # Weights whose magnitude is below this threshold are set to zero when pruning.
        self.prune_threshold = get_value('PRUNING', 'prune_threshold', float, default=0.01)

        # [RANDOM]

        # Seed for the random number generators.
        # Use "None" to draw fresh entropy from the operating system.
        self.seed = get_value('RANDOM', 'seed', int, default=None)

        # [PARALLEL]

        # Number of parallel workers used for population-wide operations.
        #  1: serial execution
        # >1: use specified number of workers
        # -1: use all available CPU cores
        self.num_jobs = get_value('PARALLEL', 'num_jobs', int, default=1)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse and validate some values when set.
        This allows users to write config.topology = "4, 8, 3" and have it
        automatically converted to the list [4, 8, 3].
        """
        if name == 'topology':
            value = self._parse_topology(value)
        elif name == 'activation':
            value = self._check_activation(value)
        super().__setattr__(name, value)
