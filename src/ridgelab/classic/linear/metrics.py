from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from ridgelab.classic.linear.errors import DimensionMismatch, LengthMismatch
from ridgelab.classic.linear.ridge_lasso import (
    COEF_NAMES,
    N_COEFS,
    RegressionResult,
    design_matrix,
)
from ridgelab.datasets.toy import Observation

MODELS = ("ols", "ridge", "lasso")


def _coef_vector(coefs) -> np.ndarray:
    c = np.asarray(coefs, dtype=np.float64).reshape(-1)
    if c.shape[0] != N_COEFS:
        raise DimensionMismatch(f"expected {N_COEFS} coefficients, got {c.shape[0]}")
    return c


def predict(coefs: Sequence[float], obs: Observation) -> float:
    """c0 + c1*x1 + c2*x2 + c3*x3"""
    c = _coef_vector(coefs)
    return float(c[0] + c[1] * obs.x1 + c[2] * obs.x2 + c[3] * obs.x3)


def predict_many(coefs: Sequence[float], observations: Sequence[Observation]) -> np.ndarray:
    return design_matrix(observations) @ _coef_vector(coefs)


def mean_squared_error(predictions: Sequence[float], actuals: Sequence[float]) -> float:
    p = np.asarray(predictions, dtype=np.float64).reshape(-1)
    a = np.asarray(actuals, dtype=np.float64).reshape(-1)
    if p.shape[0] != a.shape[0]:
        raise LengthMismatch(f"{p.shape[0]} predictions vs {a.shape[0]} actuals")
    if p.shape[0] == 0:
        raise LengthMismatch("need at least one prediction")
    diff = p - a
    return float((diff @ diff) / diff.shape[0])


def evaluate(observations: Sequence[Observation], result: RegressionResult) -> dict[str, float]:
    """In-sample MSE for each of the three fits."""
    y = [o.y for o in observations]
    return {
        name: mean_squared_error(predict_many(getattr(result, name), observations), y)
        for name in MODELS
    }


def coefficient_frame(result: RegressionResult) -> pd.DataFrame:
    """Rows Intercept/X1/X2/X3, one column per model."""
    return pd.DataFrame(
        {name: np.asarray(getattr(result, name), dtype=np.float64) for name in MODELS},
        index=pd.Index(COEF_NAMES, name="coef"),
    )


def prediction_frame(observations: Sequence[Observation], result: RegressionResult) -> pd.DataFrame:
    """
    Per-observation predictions of all three fits next to the actual y,
    ordered by x1 for plotting against that axis.
    """
    df = pd.DataFrame(
        {
            "id": [o.id for o in observations],
            "x1": [o.x1 for o in observations],
            "y": [o.y for o in observations],
        }
    )
    for name in MODELS:
        df[name] = predict_many(getattr(result, name), observations)
    return df.sort_values("x1", kind="mergesort").reset_index(drop=True)
