import numpy as np
import pytest

from ffnet.initializers import (RandomUniform, initialize_bias,
                                initialize_weights)


def test_initialize_weights_shape_and_range(rng):
    w = initialize_weights(4, 7, rng=rng)

    assert w.shape == (4, 7)
    assert w.dtype == np.float64
    assert np.all(w >= -1.0) and np.all(w <= 1.0)


def test_initialize_bias_shape_and_range(rng):
    b = initialize_bias(5, rng=rng)

    assert b.shape == (5,)
    assert np.all(b >= -1.0) and np.all(b <= 1.0)


def test_initializers_without_rng():
    assert initialize_weights(2, 2).shape == (2, 2)
    assert initialize_bias(3).shape == (3,)


def test_same_seed_reproduces_draws():
    a = RandomUniform(seed=7).initialize((3, 3))
    b = RandomUniform(seed=7).initialize((3, 3))

    np.testing.assert_array_equal(a, b)


def test_injected_generator_is_used():
    a = initialize_weights(2, 3, rng=np.random.default_rng(5))
    b = initialize_weights(2, 3, rng=np.random.default_rng(5))

    np.testing.assert_array_equal(a, b)


def test_draws_are_spread_over_interval():
    w = RandomUniform(seed=0).initialize((100, 100))

    assert w.min() < -0.9
    assert w.max() > 0.9
    assert abs(w.mean()) < 0.05


def test_invalid_bounds():
    with pytest.raises(ValueError):
        RandomUniform(minval=1.0, maxval=-1.0)


def test_seed_and_generator_are_exclusive(rng):
    with pytest.raises(ValueError):
        RandomUniform(seed=1, rng=rng)


def test_non_positive_shape():
    with pytest.raises(ValueError):
        RandomUniform(seed=0).initialize((0, 3))
