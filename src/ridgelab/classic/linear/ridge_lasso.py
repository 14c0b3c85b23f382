from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from ridgelab.classic.linear.errors import DimensionMismatch
from ridgelab.classic.linear.matrix import multiply, solve_linear_system, transpose
from ridgelab.datasets.toy import Observation, observations_to_arrays

log = logging.getLogger("ridgelab.linear")

N_COEFS = 4  # intercept + x1, x2, x3
COEF_NAMES = ("Intercept", "X1", "X2", "X3")
LASSO_PASSES = 100
LASSO_LAMBDA_SCALE = 20.0  # per-pass threshold is lam / 20


def _check_lambda(lam: float) -> float:
    lam = float(lam)
    if not np.isfinite(lam) or lam < 0:
        raise ValueError(f"lambda must be a finite non-negative number, got {lam}")
    return lam


def design_matrix(observations: Sequence[Observation]) -> np.ndarray:
    """Rows [1, x1, x2, x3]; the leading column of ones is the intercept."""
    X, _ = observations_to_arrays(observations)
    return np.c_[np.ones((X.shape[0], 1)), X]


def _normal_equations(X: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    X = np.asarray(X, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64).reshape(-1)
    if X.ndim != 2 or X.shape[1] != N_COEFS:
        raise DimensionMismatch(f"design matrix must be (n, {N_COEFS}), got {X.shape}")
    if X.shape[0] != y.shape[0]:
        raise DimensionMismatch(f"X has {X.shape[0]} rows but y has {y.shape[0]} entries")
    Xt = transpose(X)
    return multiply(Xt, X), multiply(Xt, y)  # (4, 4), (4,)


def fit_ols(X: np.ndarray, y: np.ndarray) -> np.ndarray:
    """beta = (X^T X)^-1 X^T y, via the pivoting solver."""
    XtX, Xty = _normal_equations(X, y)
    return solve_linear_system(XtX, Xty)


def fit_ridge(X: np.ndarray, y: np.ndarray, lam: float) -> np.ndarray:
    """
    Solve (X^T X + lam * I) beta = X^T y.

    Every diagonal entry gets `lam`, the intercept's included, so large lam
    shrinks the intercept as well. lam = 0 gives exactly the OLS system.
    """
    lam = _check_lambda(lam)
    XtX, Xty = _normal_equations(X, y)
    A = XtX + lam * np.eye(N_COEFS)
    return solve_linear_system(A, Xty)


def soft_threshold(z: float, thr: float) -> float:
    """Soft-thresholding operator S(z, thr)."""
    if z > thr:
        return z - thr
    if z < -thr:
        return z + thr
    return 0.0


def fit_lasso_shrinkage(
    ols_coefs: Sequence[float], lam: float, n_passes: int = LASSO_PASSES
) -> np.ndarray:
    """
    Simplified lasso: repeatedly soft-threshold the OLS slopes.

    Each pass applies S(v, lam/20) to the *current* value of every slope, so the
    shrinkage compounds across passes and slopes stick at zero once
    |v| <= lam/20. The intercept is never touched.

    This is a demonstration of L1-style shrinkage, not a lasso solver: nothing is
    re-fit against residuals and the L1-penalized objective is not minimized.
    """
    lam = _check_lambda(lam)
    coefs = np.array(ols_coefs, dtype=np.float64).reshape(-1)
    if coefs.shape[0] != N_COEFS:
        raise DimensionMismatch(f"expected {N_COEFS} coefficients, got {coefs.shape[0]}")
    thr = lam / LASSO_LAMBDA_SCALE
    for _ in range(n_passes):
        for j in range(1, N_COEFS):  # skip intercept
            coefs[j] = soft_threshold(coefs[j], thr)
    return coefs


@dataclass(frozen=True, eq=False)
class RegressionResult:
    ols: np.ndarray  # (4,)
    ridge: np.ndarray  # (4,)
    lasso: np.ndarray  # (4,)
    ridge_lambda: float = 0.0
    lasso_lambda: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RegressionResult):
            return NotImplemented
        return (
            self.ridge_lambda == other.ridge_lambda
            and self.lasso_lambda == other.lasso_lambda
            and all(
                np.array_equal(getattr(self, name), getattr(other, name))
                for name in ("ols", "ridge", "lasso")
            )
        )

    __hash__ = None  # array fields

    def as_dict(self) -> dict[str, list[float]]:
        return {
            "ols": [float(v) for v in self.ols],
            "ridge": [float(v) for v in self.ridge],
            "lasso": [float(v) for v in self.lasso],
        }


def compute_regressions(
    observations: Sequence[Observation], ridge_lambda: float, lasso_lambda: float
) -> RegressionResult:
    """
    Fit OLS, ridge and (simplified) lasso on one observation set.

    Pure: the design matrix is rebuilt on every call and nothing is cached.
    """
    ridge_lambda = _check_lambda(ridge_lambda)
    lasso_lambda = _check_lambda(lasso_lambda)
    if len(observations) < N_COEFS:
        raise DimensionMismatch(
            f"need at least {N_COEFS} observations, got {len(observations)}"
        )

    X = design_matrix(observations)
    _, y = observations_to_arrays(observations)

    ols = fit_ols(X, y)
    ridge = fit_ridge(X, y, ridge_lambda)
    lasso = fit_lasso_shrinkage(ols, lasso_lambda)
    log.debug(
        "n=%d ridge_lam=%.3f lasso_lam=%.3f ols=%s ridge=%s lasso=%s",
        len(observations), ridge_lambda, lasso_lambda, ols, ridge, lasso,
    )
    return RegressionResult(ols, ridge, lasso, ridge_lambda, lasso_lambda)


def coefficient_path(
    observations: Sequence[Observation], lambdas: Iterable[float], method: str = "ridge"
) -> pd.DataFrame:
    """
    Coefficients for each lambda in `lambdas` (ridge or lasso).

    Returns a frame indexed by lambda with columns Intercept, X1, X2, X3.
    """
    if method not in ("ridge", "lasso"):
        raise ValueError(f"method must be 'ridge' or 'lasso', got {method!r}")
    lams = [_check_lambda(lam) for lam in lambdas]

    X = design_matrix(observations)
    _, y = observations_to_arrays(observations)
    ols = fit_ols(X, y) if method == "lasso" else None

    rows = []
    for lam in lams:
        if method == "ridge":
            rows.append(fit_ridge(X, y, lam))
        else:
            rows.append(fit_lasso_shrinkage(ols, lam))
    log.debug("%s path over %d lambdas", method, len(lams))
    frame = pd.DataFrame(
        np.array(rows, dtype=np.float64).reshape(-1, N_COEFS),
        index=pd.Index(lams, name="lambda"),
        columns=list(COEF_NAMES),
    )
    return frame
