import numpy as np
import pytest

from backprop_net import sigmoid, sigmoid_prime


def test_sigmoid_at_zero():
    assert sigmoid(0.0) == 0.5


def test_sigmoid_known_values():
    assert sigmoid(2.0) == pytest.approx(1 / (1 + np.exp(-2.0)))
    assert sigmoid(-2.0) == pytest.approx(1 - sigmoid(2.0))


def test_sigmoid_is_elementwise():
    x = np.array([[-1.0, 0.0], [1.0, 3.0]])
    out = sigmoid(x)
    assert out.shape == x.shape
    assert np.all((out > 0) & (out < 1))
    assert out[0, 1] == 0.5


def test_sigmoid_saturates_for_large_inputs():
    assert sigmoid(800.0) == 1.0
    with np.errstate(over="ignore"):
        assert sigmoid(np.float64(-800.0)) == 0.0


def test_sigmoid_prime_peak_at_zero():
    assert sigmoid_prime(0.0) == 0.25
    x = np.linspace(-5, 5, 11)
    assert np.argmax(sigmoid_prime(x)) == 5


def test_sigmoid_prime_matches_definition():
    x = np.array([-3.0, -0.5, 0.7, 4.0])
    expected = sigmoid(x) * (1 - sigmoid(x))
    np.testing.assert_allclose(sigmoid_prime(x), expected)
