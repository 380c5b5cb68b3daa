import logging
from typing import Iterator, List, Optional, Sequence

import numpy as np

from ffnet.initializers import RandomUniform
from ffnet.layers import Dense, Layer, ReLU, Sigmoid
from ffnet.losses import BinaryCrossEntropy, Loss
from ffnet.utils import ArrayLike, as_matrix

logger = logging.getLogger(__name__)


class Sequential:

    def __init__(self,
                 layers: Optional[Sequence[Layer]] = None,
                 name: Optional[str] = None) -> None:
        self.name = name or self.__class__.__name__
        self._layers: List[Layer] = []

        for layer in layers or []:
            self.add(layer)

        logger.info("%s initialized with %d layers.", self.name,
                    len(self._layers))

    @property
    def layers(self) -> List[Layer]:
        return list(self._layers)

    @property
    def trainable_layers(self) -> List[Layer]:
        return [layer for layer in self._layers if layer.trainable]

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def add(self, layer: Layer) -> None:
        if not isinstance(layer, Layer):
            raise TypeError(
                f"Expected a Layer instance, got {type(layer).__name__}.")

        self._layers.append(layer)

        logger.debug("%s: added layer %d (%s).", self.name,
                     len(self._layers), layer.name)

    def forward(self, x: ArrayLike) -> np.ndarray:
        if not self._layers:
            raise RuntimeError(f"{self.name} has no layers.")

        z = x

        for layer in self._layers:
            z = layer.forward(z)

        return np.asarray(z)

    def predict(self, x: ArrayLike) -> np.ndarray:
        return self.forward(x)

    def back(self, dL_dy: ArrayLike, eta: float) -> np.ndarray:
        if not self._layers:
            raise RuntimeError(f"{self.name} has no layers.")

        gradient = dL_dy

        for layer in reversed(self._layers):
            gradient = layer.backward(gradient, eta)

        return np.asarray(gradient)

    def fit(self,
            x: ArrayLike,
            y: ArrayLike,
            num_epochs: int,
            eta: float,
            loss: Optional[Loss] = None,
            verbose: bool = True) -> List[float]:
        """Train with per-sample gradient descent.

        Samples are visited in their given order every epoch. Returns the
        summed loss of each epoch; when ``verbose`` is set, the same value
        is printed to stdout as ``Epoch: <i> Loss: <total>``.
        """
        x = as_matrix(x, "samples")
        y = as_matrix(y, "labels")

        if num_epochs <= 0:
            raise ValueError("Number of epochs must be positive.")

        if eta < 0:
            raise ValueError("Learning rate must be non-negative.")

        if x.shape[0] != y.shape[0]:
            raise ValueError(
                f"Number of samples ({x.shape[0]}) must match number of "
                f"labels ({y.shape[0]}).")

        loss = loss or BinaryCrossEntropy()
        history: List[float] = []

        if x.shape[0] == 0:
            logger.warning("Training data is empty. Skipping training.")
            return history

        logger.info(
            "Starting training for %s: %d epochs, %d samples, eta=%g, "
            "loss=%s.", self.name, num_epochs, x.shape[0], eta, loss.name)

        for epoch in range(num_epochs):
            total_loss = 0.0

            for x_i, y_i in zip(x, y):
                y_pred = self.forward(x_i)

                total_loss += loss.forward(y_i, y_pred)

                dL_dy = loss.backward(y_i, y_pred)
                self.back(dL_dy, eta)

            history.append(total_loss)

            if verbose:
                print(f"Epoch: {epoch} Loss: {total_loss}")

            logger.debug("Epoch %d/%d - Total Loss: %.6f", epoch + 1,
                         num_epochs, total_loss)

        logger.info("Training finished for %s. Final epoch loss: %.6f.",
                    self.name, history[-1])

        return history

    def evaluate(self,
                 x: ArrayLike,
                 y: ArrayLike,
                 threshold: float = 0.5) -> float:
        x = as_matrix(x, "samples")
        y = as_matrix(y, "labels")

        if x.shape[0] != y.shape[0]:
            raise ValueError(
                f"Number of samples ({x.shape[0]}) must match number of "
                f"labels ({y.shape[0]}).")

        if x.shape[0] == 0:
            raise ValueError("No samples to evaluate.")

        correct = 0
        total = 0

        for x_i, y_i in zip(x, y):
            y_pred = (self.predict(x_i) > threshold).astype(np.float64)

            if y_pred.shape != y_i.shape:
                raise ValueError(
                    f"Prediction shape {y_pred.shape} does not match label "
                    f"shape {y_i.shape}.")

            correct += int(np.sum(y_pred == y_i))
            total += y_i.shape[0]

        accuracy = correct / total

        logger.info("%s evaluation completed. Accuracy: %.4f (%d/%d correct).",
                    self.name, accuracy, correct, total)

        return accuracy


def create_xor_network(seed: Optional[int] = None,
                       name: str = "XORNet") -> Sequential:
    initializer = RandomUniform(seed=seed)

    layers = [
        Dense(2, 3, W_initializer=initializer),
        ReLU(),
        Dense(3, 3, W_initializer=initializer),
        ReLU(),
        Dense(3, 1, W_initializer=initializer),
        Sigmoid(),
    ]

    return Sequential(layers, name=name)
