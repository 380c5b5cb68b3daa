"""Binary cross-entropy loss.

Predictions are clamped to ``[EPSILON, 1 - EPSILON]`` before any logarithm
or division, so outputs of exactly 0 or 1 give finite values.

By default the gradient is computed for the first output only, which
restricts training to networks with a single scalar output. Passing
``elementwise=True`` returns the derivative of the mean loss for every
output instead.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from ffnet.errors import NumericDomainError
from ffnet.utils import ArrayLike, as_vector, check_same_length

logger = logging.getLogger(__name__)

EPSILON = 1e-12


def _prepare(labels: ArrayLike,
             predictions: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    y = as_vector(labels, "labels")
    p = as_vector(predictions, "predictions")
    check_same_length(y, p, "binary cross-entropy")

    if y.shape[0] == 0:
        raise ValueError("Labels and predictions must not be empty.")

    if not np.all(np.isfinite(p)):
        raise NumericDomainError(f"Predictions must be finite, got {p}.")

    if not np.all(np.isfinite(y)) or np.any(y < 0) or np.any(y > 1):
        raise NumericDomainError(f"Labels must lie in [0, 1], got {y}.")

    return y, np.clip(p, EPSILON, 1.0 - EPSILON)


def bce_loss(labels: ArrayLike, predictions: ArrayLike) -> float:
    y, p = _prepare(labels, predictions)

    log_likelihoods = y * np.log(p) + (1.0 - y) * np.log(1.0 - p)

    return float(-np.mean(log_likelihoods))


def bce_loss_gradient(labels: ArrayLike,
                      predictions: ArrayLike,
                      elementwise: bool = False) -> np.ndarray:
    y, p = _prepare(labels, predictions)

    if not elementwise:
        y, p = y[:1], p[:1]

        return (p - y) / (p * (1.0 - p))

    return (p - y) / (p * (1.0 - p) * y.shape[0])


class Loss(ABC):

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or self.__class__.__name__

    @abstractmethod
    def forward(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        pass

    @abstractmethod
    def backward(self, y_true: ArrayLike, y_pred: ArrayLike) -> np.ndarray:
        pass


class BinaryCrossEntropy(Loss):

    def __init__(self,
                 elementwise: bool = False,
                 name: Optional[str] = None) -> None:
        super().__init__(name)
        self.elementwise = elementwise

        logger.info("%s initialized with epsilon=%e, elementwise=%s.",
                    self.name, EPSILON, self.elementwise)

    def forward(self, y_true: ArrayLike, y_pred: ArrayLike) -> float:
        loss = bce_loss(y_true, y_pred)

        logger.debug("%s forward pass: loss=%.6f.", self.name, loss)

        return loss

    def backward(self, y_true: ArrayLike, y_pred: ArrayLike) -> np.ndarray:
        dL_dp = bce_loss_gradient(y_true, y_pred, self.elementwise)

        if not self.elementwise and np.size(y_pred) > 1:
            logger.warning(
                "%s computes the gradient for the first of %d outputs only. "
                "Use elementwise=True for multi-output networks.", self.name,
                np.size(y_pred))

        logger.debug("%s backward pass: dL_dp_shape=%s.", self.name,
                     dL_dp.shape)

        return dL_dp
