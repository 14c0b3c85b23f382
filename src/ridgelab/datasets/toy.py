from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

# Ground truth: y = 2 + 1*x1 + 0.5*x2 + 0.1*x3 + noise
TRUE_COEFS: tuple[float, float, float, float] = (2.0, 1.0, 0.5, 0.1)
FEATURE_LOW = -5.0
FEATURE_HIGH = 5.0
NOISE_BOUND = 1.5
N_FEATURES = 3


@dataclass(frozen=True)
class Observation:
    id: int
    x1: float
    x2: float
    x3: float
    y: float

    @property
    def features(self) -> tuple[float, float, float]:
        return (self.x1, self.x2, self.x3)


ObservationSet = tuple[Observation, ...]


def generate_observations(
    n: int = 50,
    noise: float = NOISE_BOUND,
    rng: np.random.Generator | None = None,
) -> ObservationSet:
    """
    Draw n observations with x1, x2, x3 ~ U[-5, 5] and
    y = 2 + x1 + 0.5*x2 + 0.1*x3 + U[-noise, noise].

    Pass a seeded `rng` for reproducible sets; the default is a fresh
    entropy-seeded generator.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        raise ValueError(f"n must be a positive integer, got {n!r}")
    if noise < 0:
        raise ValueError(f"noise bound must be non-negative, got {noise}")
    rng = np.random.default_rng() if rng is None else rng

    X = rng.uniform(FEATURE_LOW, FEATURE_HIGH, size=(int(n), N_FEATURES))
    eps = rng.uniform(-noise, noise, size=int(n))
    c = np.asarray(TRUE_COEFS, dtype=np.float64)
    y = c[0] + X @ c[1:] + eps

    return tuple(
        Observation(id=i, x1=float(row[0]), x2=float(row[1]), x3=float(row[2]), y=float(t))
        for i, (row, t) in enumerate(zip(X, y))
    )


def observations_to_arrays(observations: Sequence[Observation]) -> tuple[np.ndarray, np.ndarray]:
    """Return (X, y) with X the (n, 3) feature block and y the (n,) targets."""
    X = np.array([o.features for o in observations], dtype=np.float64).reshape(-1, N_FEATURES)
    y = np.array([o.y for o in observations], dtype=np.float64)
    return X, y
