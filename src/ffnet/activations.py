"""Elementwise activation functions and their derivatives.

Every function accepts a scalar or an array and is applied elementwise,
so the same callable serves as both the scalar and the vectorized form.
"""
import numpy as np

from ffnet.utils import ArrayLike

LEAKY_RELU_ALPHA = 0.01


def sigmoid(x: ArrayLike) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)
    e = np.exp(-np.abs(x))

    return np.where(x >= 0, 1.0 / (1.0 + e), e / (1.0 + e))


def sigmoid_derivative(x: ArrayLike) -> np.ndarray:
    s = sigmoid(x)

    return s * (1.0 - s)


def relu(x: ArrayLike) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)

    return np.where(x > 0, x, 0.0)


def relu_derivative(x: ArrayLike) -> np.ndarray:
    # Taken as 1 at x == 0.
    x = np.asarray(x, dtype=np.float64)

    return np.where(x >= 0, 1.0, 0.0)


def leaky_relu(x: ArrayLike, alpha: float = LEAKY_RELU_ALPHA) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)

    return np.where(x > 0, x, alpha * x)


def leaky_relu_derivative(x: ArrayLike,
                          alpha: float = LEAKY_RELU_ALPHA) -> np.ndarray:
    x = np.asarray(x, dtype=np.float64)

    return np.where(x >= 0, 1.0, alpha)


def tanh(x: ArrayLike) -> np.ndarray:
    return np.tanh(np.asarray(x, dtype=np.float64))


def tanh_derivative(x: ArrayLike) -> np.ndarray:
    return 1.0 - tanh(x)**2
