import logging
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)


def xor_dataset() -> Tuple[np.ndarray, np.ndarray]:
    x = np.array([[0, 0], [0, 1], [1, 0], [1, 1]], dtype=np.float64)
    y = np.array([[0], [1], [1], [0]], dtype=np.float64)

    logger.debug("Built XOR dataset with %d samples.", x.shape[0])

    return x, y
