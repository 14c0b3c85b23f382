from __future__ import annotations

import numpy as np

from ridgelab.classic.linear.errors import DimensionMismatch, SingularMatrix

# relative to the largest |A_ij|; below this a pivot counts as zero
PIVOT_TOL = 1e-12


def _as_matrix(M, name: str = "M") -> np.ndarray:
    try:
        arr = np.array(M, dtype=np.float64)  # always a copy
    except ValueError as exc:  # ragged rows
        raise DimensionMismatch(f"{name} must have equal-length rows") from exc
    if arr.ndim != 2:
        raise DimensionMismatch(f"{name} must be 2-D, got shape {arr.shape}")
    return arr


def transpose(M) -> np.ndarray:
    """r x c -> c x r, as a fresh array."""
    return _as_matrix(M).T.copy()


def multiply(A, B) -> np.ndarray:
    """
    Matrix product A @ B.

    B may be a matrix or a 1-D column vector; in the latter case the result is a
    1-D vector of length rows(A).
    """
    A = _as_matrix(A, "A")
    try:
        B = np.array(B, dtype=np.float64)
    except ValueError as exc:
        raise DimensionMismatch("B must have equal-length rows") from exc
    if B.ndim not in (1, 2):
        raise DimensionMismatch(f"B must be a matrix or a vector, got shape {B.shape}")
    if A.shape[1] != B.shape[0]:
        raise DimensionMismatch(f"cannot multiply {A.shape} by {B.shape}")
    return A @ B


def solve_linear_system(A, b) -> np.ndarray:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Works on copies of A and b, so the caller's inputs are never modified.
    Raises SingularMatrix when a pivot is (numerically) zero.
    """
    A = _as_matrix(A, "A")
    n = A.shape[0]
    if A.shape[1] != n:
        raise DimensionMismatch(f"A must be square, got shape {A.shape}")
    try:
        b = np.array(b, dtype=np.float64)
    except ValueError as exc:
        raise DimensionMismatch("b must be a vector") from exc
    # a single (n, 1) column is accepted as a vector
    if b.ndim == 2 and b.shape[1] == 1:
        b = b[:, 0]
    if b.ndim != 1 or b.shape[0] != n:
        raise DimensionMismatch(f"b must be a length-{n} vector, got shape {b.shape}")

    scale = float(np.abs(A).max()) if A.size else 0.0
    if scale == 0.0:
        raise SingularMatrix("A is all zeros")
    tol = PIVOT_TOL * scale

    for i in range(n):
        # ---- pivot: largest |A[r, i]| for r in [i, n) ----
        p = i + int(np.argmax(np.abs(A[i:, i])))
        if abs(A[p, i]) < tol:
            raise SingularMatrix(f"zero pivot in column {i}")
        if p != i:
            A[[i, p]] = A[[p, i]]
            b[[i, p]] = b[[p, i]]

        # ---- eliminate column i below the pivot ----
        for j in range(i + 1, n):
            factor = A[j, i] / A[i, i]
            if factor == 0.0:
                continue
            A[j, i:] -= factor * A[i, i:]
            b[j] -= factor * b[i]

    # ---- back substitution ----
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        s = float(A[i, i + 1 :] @ x[i + 1 :])
        x[i] = (b[i] - s) / A[i, i]

    if not np.all(np.isfinite(x)):
        raise SingularMatrix("solution is not finite")
    return x
