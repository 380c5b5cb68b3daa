import logging

import numpy as np
import pytest


@pytest.fixture(autouse=True)
def quiet_logging():
    logging.getLogger("ffnet").setLevel(logging.CRITICAL)

    yield

    logging.getLogger("ffnet").setLevel(logging.NOTSET)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
