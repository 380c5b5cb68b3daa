import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class Initializer(ABC):

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or self.__class__.__name__

    @abstractmethod
    def initialize(self, shape: Tuple[int, ...]) -> np.ndarray:
        pass


class RandomUniform(Initializer):

    def __init__(self,
                 minval: float = -1.0,
                 maxval: float = 1.0,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 name: Optional[str] = None) -> None:
        super().__init__(name)

        if minval >= maxval:
            raise ValueError("Minimum value must be less than maximum value")

        if seed is not None and rng is not None:
            raise ValueError("Pass either a seed or a generator, not both.")

        self.minval = minval
        self.maxval = maxval
        self.seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)

        logger.info(
            "%s initializer created with minval=%.4f, maxval=%.4f, "
            "seed=%s.", self.name, self.minval, self.maxval,
            self.seed if self.seed is not None else "None")

    def initialize(self, shape: Tuple[int, ...]) -> np.ndarray:
        if any(dim <= 0 for dim in shape):
            raise ValueError(
                f"All dimensions must be positive, got shape {shape}.")

        weights = self._rng.uniform(self.minval, self.maxval,
                                    shape).astype(np.float64)

        logger.debug(
            "%s initialized weights with shape %s from uniform "
            "distribution.", self.name, shape)

        return weights


def initialize_weights(
        rows: int,
        cols: int,
        rng: Optional[np.random.Generator] = None) -> np.ndarray:
    return RandomUniform(rng=rng).initialize((rows, cols))


def initialize_bias(size: int,
                    rng: Optional[np.random.Generator] = None) -> np.ndarray:
    return RandomUniform(rng=rng).initialize((size,))
