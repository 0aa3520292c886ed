"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random generator, so that tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_genome(rng):
    """Create a randomly initialized 3-4-2 sigmoid genome."""
    from evonet.genotype.genome import Genome
    return Genome([3, 4, 2], "sigmoid", rng=rng)


@pytest.fixture
def reference_genome_dict():
    """2-2-1 sigmoid network with identity hidden weights and unit output weights."""
    return {
        "topology"  : [2, 2, 1],
        "activation": "sigmoid",
        "weights"   : [[[1.0, 0.0], [0.0, 1.0]], [[1.0, 1.0]]],
        "biases"    : [[0.0, 0.0], [0.0]]
    }
