import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import numpy as np

from ffnet import activations
from ffnet.errors import ShapeMismatchError, UncalledForwardError
from ffnet.initializers import Initializer, RandomUniform
from ffnet.utils import ArrayLike, as_vector

logger = logging.getLogger(__name__)


class Layer(ABC):
    """A unit of the pipeline.

    ``forward`` caches its input; ``backward`` is defined relative to that
    cached input, returns the gradient with respect to it and, for
    trainable layers, applies one gradient-descent step to the layer's
    own parameters before returning.
    """

    trainable = False

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or self.__class__.__name__
        self._last_x: Optional[np.ndarray] = None

    @property
    def params(self) -> Dict[str, np.ndarray]:
        return {}

    @property
    def grads(self) -> Dict[str, np.ndarray]:
        return {}

    @abstractmethod
    def forward(self, x: ArrayLike) -> np.ndarray:
        pass

    @abstractmethod
    def backward(self, dL_dy: ArrayLike, eta: float) -> np.ndarray:
        pass

    def _check_forward_called(self) -> np.ndarray:
        if self._last_x is None:
            raise UncalledForwardError(self.name)

        return self._last_x


class Activation(Layer):

    def __init__(self, name: Optional[str] = None) -> None:
        super().__init__(name)
        self._last_y: Optional[np.ndarray] = None

        logger.info("%s activation layer initialized.", self.name)

    @abstractmethod
    def function(self, x: np.ndarray) -> np.ndarray:
        pass

    @abstractmethod
    def derivative(self, x: np.ndarray) -> np.ndarray:
        pass

    def forward(self, x: ArrayLike) -> np.ndarray:
        x = as_vector(x, f"{self.name} input")

        self._last_x = x
        self._last_y = self.function(x)

        logger.debug("%s forward pass: input_shape=%s, output_shape=%s.",
                     self.name, x.shape, self._last_y.shape)

        return self._last_y

    def backward(self, dL_dy: ArrayLike, eta: float) -> np.ndarray:
        x = self._check_forward_called()
        dL_dy = as_vector(dL_dy, f"{self.name} output gradient")

        if dL_dy.shape != x.shape:
            raise ShapeMismatchError(
                f"{self.name} output gradient shape mismatch. Expected "
                f"{x.shape}, got {dL_dy.shape}.")

        dL_dx = dL_dy * self.derivative(x)

        logger.debug("%s backward pass: dL_dy_shape=%s, dL_dx_shape=%s.",
                     self.name, dL_dy.shape, dL_dx.shape)

        return dL_dx


class Sigmoid(Activation):

    def function(self, x: np.ndarray) -> np.ndarray:
        return activations.sigmoid(x)

    def derivative(self, x: np.ndarray) -> np.ndarray:
        return activations.sigmoid_derivative(x)


class ReLU(Activation):

    def function(self, x: np.ndarray) -> np.ndarray:
        return activations.relu(x)

    def derivative(self, x: np.ndarray) -> np.ndarray:
        return activations.relu_derivative(x)


class LeakyReLU(Activation):

    def __init__(self,
                 alpha: float = activations.LEAKY_RELU_ALPHA,
                 name: Optional[str] = None) -> None:
        if alpha < 0:
            raise ValueError(f"Leak rate must be non-negative, got {alpha}.")

        self.alpha = alpha
        super().__init__(name)

    def function(self, x: np.ndarray) -> np.ndarray:
        return activations.leaky_relu(x, self.alpha)

    def derivative(self, x: np.ndarray) -> np.ndarray:
        return activations.leaky_relu_derivative(x, self.alpha)


class Tanh(Activation):

    def function(self, x: np.ndarray) -> np.ndarray:
        return activations.tanh(x)

    def derivative(self, x: np.ndarray) -> np.ndarray:
        return activations.tanh_derivative(x)


class Dense(Layer):
    """Affine layer computing ``y = W @ x + b``.

    ``W`` has shape ``(D_out, D_in)`` and ``b`` has shape ``(D_out,)``.
    Both are drawn from U[-1, 1] unless other initializers are given;
    ``seed`` makes the default draw reproducible.
    """

    trainable = True

    def __init__(self,
                 D_in: int,
                 D_out: int,
                 W_initializer: Optional[Initializer] = None,
                 b_initializer: Optional[Initializer] = None,
                 seed: Optional[int] = None,
                 name: Optional[str] = None) -> None:
        super().__init__(name)

        if D_in <= 0:
            raise ValueError(
                f"Input dimension (D_in) must be positive, got {D_in}.")

        if D_out <= 0:
            raise ValueError(
                f"Output dimension (D_out) must be positive, got {D_out}.")

        self.D_in = D_in
        self.D_out = D_out

        if W_initializer is None:
            W_initializer = RandomUniform(seed=seed)

        if b_initializer is None:
            b_initializer = W_initializer

        self.W_initializer = W_initializer
        self.b_initializer = b_initializer

        self._W = self.W_initializer.initialize((D_out, D_in))
        self._b = self.b_initializer.initialize((D_out,))

        self._dL_dW = np.zeros_like(self._W)
        self._dL_db = np.zeros_like(self._b)

        logger.info(
            "%s initialized with D_in=%d, D_out=%d, W_initializer=%s, "
            "b_initializer=%s.", self.name, self.D_in, self.D_out,
            self.W_initializer.name, self.b_initializer.name)

    @property
    def params(self) -> Dict[str, np.ndarray]:
        return {"W": self._W, "b": self._b}

    @property
    def grads(self) -> Dict[str, np.ndarray]:
        return {"W": self._dL_dW, "b": self._dL_db}

    def forward(self, x: ArrayLike) -> np.ndarray:
        x = as_vector(x, f"{self.name} input")

        if x.shape[0] != self.D_in:
            raise ShapeMismatchError(
                f"{self.name} input length mismatch. Expected {self.D_in}, "
                f"got {x.shape[0]}.")

        self._last_x = x

        y = self._W @ x + self._b

        logger.debug("%s forward pass: input_shape=%s, output_shape=%s.",
                     self.name, x.shape, y.shape)

        return y

    def backward(self, dL_dy: ArrayLike, eta: float) -> np.ndarray:
        x = self._check_forward_called()
        dL_dy = as_vector(dL_dy, f"{self.name} output gradient")

        if dL_dy.shape[0] != self.D_out:
            raise ShapeMismatchError(
                f"{self.name} output gradient length mismatch. Expected "
                f"{self.D_out}, got {dL_dy.shape[0]}.")

        if eta < 0:
            raise ValueError(f"Learning rate must be non-negative, got {eta}.")

        self._dL_db = dL_dy.copy()
        self._dL_dW = np.outer(dL_dy, x)

        # Propagated through the weights as they were before this update.
        dL_dx = self._W.T @ dL_dy

        self._b -= eta * self._dL_db
        self._W -= eta * self._dL_dW

        logger.debug(
            "%s backward pass: dL_dy_shape=%s, dL_dx_shape=%s, eta=%g.",
            self.name, dL_dy.shape, dL_dx.shape, eta)

        return dL_dx
