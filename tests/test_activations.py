import numpy as np
import pytest

from ffnet import activations

H = 1e-5
POINTS = np.array([-4.0, -1.5, -0.3, 0.2, 0.7, 2.5, 5.0])

PAIRS = [
    (activations.sigmoid, activations.sigmoid_derivative),
    (activations.relu, activations.relu_derivative),
    (activations.leaky_relu, activations.leaky_relu_derivative),
    (activations.tanh, activations.tanh_derivative),
]


@pytest.mark.parametrize("f, df", PAIRS)
def test_derivative_matches_finite_difference(f, df):
    numeric = (f(POINTS + H) - f(POINTS - H)) / (2 * H)

    np.testing.assert_allclose(df(POINTS), numeric, atol=1e-4)


def test_sigmoid_values():
    np.testing.assert_allclose(activations.sigmoid([0.0]), [0.5])
    assert activations.sigmoid([50.0])[0] == pytest.approx(1.0)
    assert activations.sigmoid([-50.0])[0] == pytest.approx(0.0, abs=1e-20)


def test_sigmoid_extreme_inputs_are_finite():
    with np.errstate(over="raise"):
        y = activations.sigmoid([-1000.0, 1000.0])

    assert np.all(np.isfinite(y))


def test_relu_boundary_convention():
    np.testing.assert_array_equal(activations.relu([-1.0, 0.0, 2.0]),
                                  [0.0, 0.0, 2.0])
    np.testing.assert_array_equal(activations.relu_derivative([-1.0, 0.0]),
                                  [0.0, 1.0])


def test_leaky_relu_uses_leak_rate():
    np.testing.assert_allclose(activations.leaky_relu([-2.0, 3.0]),
                               [-0.02, 3.0])
    np.testing.assert_allclose(
        activations.leaky_relu_derivative([-2.0, 0.0, 3.0]), [0.01, 1.0, 1.0])
    np.testing.assert_allclose(activations.leaky_relu([-2.0], alpha=0.5),
                               [-1.0])


def test_tanh_matches_exponential_form():
    x = np.array([-2.0, -0.5, 0.0, 1.0, 3.0])
    expected = (np.exp(x) - np.exp(-x)) / (np.exp(x) + np.exp(-x))

    np.testing.assert_allclose(activations.tanh(x), expected)
    np.testing.assert_allclose(activations.tanh_derivative(x), 1 - expected**2)
