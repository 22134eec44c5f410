# tests/conftest.py
import os
import sys

# Ensure project root is importable when running from a checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pytest


@pytest.fixture
def rng_factory():
    from nnfs_infer.random_init import RandomInitializer
    def make(seed=0, range_divisor=10):
        return RandomInitializer(seed=seed, range_divisor=range_divisor)
    return make


@pytest.fixture
def rng(rng_factory):
    return rng_factory()


@pytest.fixture
def layer_factory(rng):
    from nnfs_infer.layers import LayerDense
    def make(n_inputs, n_neurons, activation=None, weights=None, biases=None, **kwargs):
        kwargs.setdefault("rng", rng)
        layer = LayerDense(n_inputs, n_neurons, activation, **kwargs)
        if weights is not None:
            layer.weights.data[:] = np.ravel(weights)
        if biases is not None:
            layer.biases[:] = biases
        return layer
    return make


@pytest.fixture
def input_node():
    from nnfs_infer.layers import LayerInput
    def make(row):
        node = LayerInput()
        node.forward(row)
        return node
    return make
