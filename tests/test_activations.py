# tests/test_activations.py
import numpy as np
import pytest

from nnfs_infer.activations import (
    ActivationIdentity,
    ActivationReLU,
    ActivationSigmoid,
    ActivationSoftMax,
    softmax,
)
from nnfs_infer.errors import DimensionMismatch


def test_identity():
    values = np.array([-2.0, 0.0, 3.5])
    assert np.array_equal(ActivationIdentity().apply(values), values)
    assert ActivationIdentity()(1.25) == 1.25


def test_relu():
    relu = ActivationReLU()
    xs = np.linspace(-5, 5, 101)
    out = relu(xs)
    assert np.all(out[xs < 0] == 0)
    assert np.array_equal(out[xs >= 0], xs[xs >= 0])
    assert relu(-0.3) == 0
    assert relu(0.3) == 0.3


def test_sigmoid_open_interval():
    sigmoid = ActivationSigmoid()
    xs = np.linspace(-20, 20, 401)
    out = sigmoid(xs)
    assert np.all(out > 0) and np.all(out < 1)
    assert sigmoid(0.0) == pytest.approx(0.5)


def test_sigmoid_extremes_do_not_overflow():
    with np.errstate(over="raise", invalid="raise"):
        out = ActivationSigmoid()(np.array([-1000.0, 1000.0]))
    assert out[0] == pytest.approx(0.0)
    assert out[1] == pytest.approx(1.0)


def test_sigmoid_matches_formula():
    xs = np.array([-3.0, -0.5, 0.7, 4.0])
    assert np.allclose(ActivationSigmoid()(xs), 1 / (1 + np.exp(-xs)))


@pytest.mark.parametrize("seed", range(5))
def test_softmax_sums_to_one(seed):
    values = np.random.default_rng(seed).normal(0, 50, size=seed + 1)
    assert np.sum(softmax(values)) == pytest.approx(1.0, abs=1e-9)


def test_softmax_shift_invariant():
    values = np.array([1.0, -2.0, 0.5, 3.0])
    for c in (-100.0, 0.25, 700.0):
        assert np.allclose(softmax(values), softmax(values + c), atol=1e-12)


def test_softmax_keeps_order():
    values = np.array([0.3, -1.0, 2.0, 0.1])
    assert list(np.argsort(softmax(values))) == list(np.argsort(values))


def test_softmax_large_values_stay_finite():
    out = softmax([1000.0, 1001.0])
    assert np.all(np.isfinite(out))
    assert out[1] > out[0]


def test_softmax_empty():
    with pytest.raises(DimensionMismatch):
        softmax([])


def test_softmax_apply_in_place(layer_factory):
    layer = layer_factory(2, 3)
    layer.output[:] = [1.0, 2.0, 3.0]
    buffer = layer.output

    normalizer = ActivationSoftMax()
    normalizer.apply(layer)

    assert layer.output is buffer
    assert np.allclose(layer.output, softmax([1.0, 2.0, 3.0]))
    assert normalizer.total(layer) == pytest.approx(1.0, abs=1e-9)


def test_single_value_softmax_is_one(layer_factory):
    layer = layer_factory(2, 1)
    layer.output[:] = [-42.0]
    ActivationSoftMax().apply(layer)
    assert layer.output[0] == 1.0
