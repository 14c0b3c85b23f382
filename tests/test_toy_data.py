import dataclasses

import numpy as np
import pytest

from ridgelab.datasets.toy import (
    NOISE_BOUND,
    TRUE_COEFS,
    generate_observations,
    observations_to_arrays,
)


def test_generate_shape_ids_and_bounds():
    obs = generate_observations(50, rng=np.random.default_rng(0))
    assert len(obs) == 50
    assert [o.id for o in obs] == list(range(50))
    X, y = observations_to_arrays(obs)
    assert X.shape == (50, 3) and y.shape == (50,)
    assert np.all(X >= -5.0) and np.all(X <= 5.0)
    c = np.asarray(TRUE_COEFS)
    resid = y - (c[0] + X @ c[1:])
    assert np.all(np.abs(resid) <= NOISE_BOUND)


def test_default_size_is_50():
    assert len(generate_observations()) == 50


def test_seeded_rng_reproducible():
    a = generate_observations(20, rng=np.random.default_rng(7))
    b = generate_observations(20, rng=np.random.default_rng(7))
    c = generate_observations(20, rng=np.random.default_rng(8))
    assert a == b
    assert a != c


def test_zero_noise_is_exact():
    obs = generate_observations(10, noise=0.0, rng=np.random.default_rng(1))
    for o in obs:
        expected = 2.0 + o.x1 + 0.5 * o.x2 + 0.1 * o.x3
        assert o.y == pytest.approx(expected, abs=1e-12)


def test_observations_immutable():
    o = generate_observations(1, rng=np.random.default_rng(0))[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        o.y = 0.0


@pytest.mark.parametrize("n", [0, -3, 2.5])
def test_bad_n_rejected(n):
    with pytest.raises(ValueError):
        generate_observations(n)


def test_negative_noise_rejected():
    with pytest.raises(ValueError):
        generate_observations(5, noise=-1.0)
