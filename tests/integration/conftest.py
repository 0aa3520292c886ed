"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np
from evonet.run.config import Config


@pytest.fixture
def xor_config():
    """Configuration for evolving a 2-4-1 network on XOR."""
    config = Config()
    config.topology        = [2, 4, 1]
    config.activation      = 'sigmoid'
    config.mutation_rate   = 0.3
    config.mutation_amount = 0.5
    config.crossover_rate  = 0.5
    config.prune_threshold = 0.01
    config.seed            = 42
    return config


@pytest.fixture
def xor_data():
    inputs  = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]])
    targets = np.array([0.0, 1.0, 1.0, 0.0])
    return inputs, targets
