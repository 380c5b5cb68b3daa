import logging
from typing import Sequence, Union

import numpy as np

from ffnet.errors import ShapeMismatchError

logger = logging.getLogger(__name__)

ArrayLike = Union[np.ndarray, Sequence[float]]


def as_vector(x: ArrayLike, name: str = "vector") -> np.ndarray:
    v = np.array(x, dtype=np.float64)

    if v.ndim != 1:
        raise ShapeMismatchError(
            f"{name} shape mismatch. Expected 1D buffer, got {v.ndim}D "
            f"array with shape {v.shape}.")

    return v


def as_matrix(m: ArrayLike, name: str = "matrix") -> np.ndarray:
    try:
        a = np.asarray(m, dtype=np.float64)
    except ValueError as e:
        raise ShapeMismatchError(
            f"{name} rows must all have the same length.") from e

    if a.ndim != 2:
        raise ShapeMismatchError(
            f"{name} shape mismatch. Expected 2D buffer, got {a.ndim}D "
            f"array with shape {a.shape}.")

    return a


def check_same_length(a: np.ndarray, b: np.ndarray, what: str) -> None:
    if a.shape[0] != b.shape[0]:
        raise ShapeMismatchError(
            f"Length mismatch in {what}: {a.shape[0]} != {b.shape[0]}.")


def dot(a: ArrayLike, b: ArrayLike) -> float:
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    check_same_length(a, b, "dot product")

    return float(np.dot(a, b))


def subtract(a: ArrayLike, b: ArrayLike) -> np.ndarray:
    a = as_vector(a, "a")
    b = as_vector(b, "b")
    check_same_length(a, b, "elementwise subtraction")

    return a - b


def scale(a: ArrayLike, k: float) -> np.ndarray:
    # Returns a new buffer; the argument is never modified.
    return as_vector(a, "a") * k


def transpose(m: ArrayLike) -> np.ndarray:
    a = as_matrix(m)

    logger.debug("Transposing matrix with shape %s.", a.shape)

    return a.T.copy()
