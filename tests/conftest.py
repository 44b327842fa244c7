"""Shared fixtures for the econet test suite.

    small_web: 4-species food web with one isolated species (s4).
    pollination: 2 plants x 3 pollinators binary bipartite matrix.
    observed: 2 x 3 binary matrix with known connectance and degrees,
        used to check the null models by hand.
"""

import numpy as np
import pytest

from econet import BipartiteNetwork, UnipartiteNetwork


@pytest.fixture
def small_web():
    """s1 eats s2 and s3, s2 eats s3, s4 is isolated."""
    A = np.array(
        [
            [0, 1, 1, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0],
        ],
        dtype=bool,
    )
    return UnipartiteNetwork(A)


@pytest.fixture
def pollination():
    A = np.array([[1, 0, 1], [0, 1, 1]])
    return BipartiteNetwork(A, T=["bee", "fly"], B=["rose", "daisy", "clover"])


@pytest.fixture
def observed():
    """Connectance 0.5; out-degrees [2, 1]; in-degrees [1, 1, 1]."""
    return np.array([[1.0, 0.0, 1.0], [0.0, 1.0, 0.0]])


@pytest.fixture
def rng():
    return np.random.default_rng(42)
