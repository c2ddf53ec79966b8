"""Dense vector and matrix helpers and a restarted GMRES solver."""

from __future__ import annotations

import logging
import math

import numpy as np

from .compressed import ZERO
from .sparse import Sparse

logger = logging.getLogger(__name__)

#: Residual below which GMRES stops.
TOLERANCE = 1.0e-12

#: Krylov size after which GMRES restarts from a single vector.
RESTART = 50

#: Largest number of GMRES iterations.
MAX_ITERATIONS = 10_000


def _vector(x, name: str = "vector") -> np.ndarray:
    values = np.asarray(x)
    if values.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional")
    if not np.issubdtype(values.dtype, np.number):
        raise TypeError(f"{name} must hold numbers")
    return values


def _matrix(x, name: str = "matrix") -> np.ndarray:
    values = np.asarray(x)
    if values.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional")
    if not np.issubdtype(values.dtype, np.number):
        raise TypeError(f"{name} must hold numbers")
    return values


def _same_size(x: np.ndarray, y: np.ndarray) -> None:
    if x.size != y.size:
        raise ValueError(f"sizes {x.size} and {y.size} differ")


# Vectors.


def dot(x, y):
    """Dot product; the second vector is conjugated when complex."""
    left, right = _vector(x), _vector(y)
    _same_size(left, right)
    return np.sum(left * np.conj(right))


def cross(x, y) -> np.ndarray:
    """Cross product of two vectors of size 3."""
    left, right = _vector(x), _vector(y)
    if left.size != 3 or right.size != 3:
        raise ValueError("cross product needs two vectors of size 3")
    return np.array(
        [
            left[1] * right[2] - left[2] * right[1],
            left[2] * right[0] - left[0] * right[2],
            left[0] * right[1] - left[1] * right[0],
        ]
    )


def norm(x) -> float:
    """Euclidean norm."""
    values = _vector(x)
    return math.sqrt(float(np.sum(np.abs(values) ** 2)))


def flipped(x) -> np.ndarray:
    """The vector in reverse order."""
    return _vector(x)[::-1].copy()


def stacked(x, y) -> np.ndarray:
    """The first vector followed by the second."""
    return np.concatenate([_vector(x), _vector(y)])


def stepped(a, b, step=1) -> np.ndarray:
    """Values ``a, a + step, ...`` up to and including ``b``."""
    if not ((a < b and step > ZERO) or (a > b and step < -ZERO)):
        raise ValueError("step must move from a towards b")
    values = []
    current = a
    if step > ZERO:
        while current <= b + ZERO:
            values.append(current)
            current += step
    else:
        while current >= b - ZERO:
            values.append(current)
            current += step
    return np.array(values)


def kronecker(x, y) -> np.ndarray:
    """Kronecker product of two vectors or of two matrices."""
    left, right = np.asarray(x), np.asarray(y)
    if left.ndim != right.ndim or left.ndim not in (1, 2):
        raise ValueError("kronecker needs two vectors or two matrices")
    return np.kron(left, right)


# Matrices.


def r_scale(vector, matrix) -> np.ndarray:
    """Each row of the matrix multiplied entrywise by the vector."""
    scale, values = _vector(vector), _matrix(matrix)
    if scale.size != values.shape[1]:
        raise ValueError(
            f"vector of size {scale.size} does not match {values.shape[1]} columns"
        )
    return values * scale[np.newaxis, :]


def c_scale(vector, matrix) -> np.ndarray:
    """Each column of the matrix multiplied entrywise by the vector."""
    scale, values = _vector(vector), _matrix(matrix)
    if scale.size != values.shape[0]:
        raise ValueError(
            f"vector of size {scale.size} does not match {values.shape[0]} rows"
        )
    return values * scale[:, np.newaxis]


# Solvers.


def _shape(a) -> tuple[int, int]:
    if isinstance(a, Sparse):
        return a.rows, a.columns
    return _matrix(a, "system matrix").shape


def gmres(
    a,
    b,
    *,
    tolerance: float = TOLERANCE,
    restart: int = RESTART,
    max_iterations: int = MAX_ITERATIONS,
) -> np.ndarray:
    """Solve ``a x = b`` with restarted GMRES of growing Krylov size."""
    rows, columns = _shape(a)
    if rows != columns:
        raise ValueError(f"system matrix must be square, got {rows}x{columns}")
    rhs_vector = np.asarray(_vector(b, "right-hand side"), dtype=float)
    if rhs_vector.size != rows:
        raise ValueError(
            f"right-hand side of size {rhs_vector.size} does not match {rows} rows"
        )
    if max_iterations < 1:
        raise ValueError("max_iterations must be positive")

    x = np.zeros(columns)
    residual = rhs_vector - a @ x
    logger.debug("GMRES started, residual %g", norm(residual))

    iterations = 0
    m = 1

    while True:
        iterations += 1
        residual_norm = norm(residual)
        if residual_norm == 0.0:
            break

        hessenberg = np.zeros((m + 1, m))
        basis = [residual / residual_norm]

        for j in range(m):
            w = np.asarray(a @ basis[j], dtype=float)
            for k in range(j + 1):
                hessenberg[k, j] = float(np.dot(w, basis[k]))
                w = w - hessenberg[k, j] * basis[k]
            hessenberg[j + 1, j] = norm(w)
            if hessenberg[j + 1, j] == 0.0:
                m = j + 1
                break
            basis.append(w / hessenberg[j + 1, j])

        hessenberg = hessenberg[: m + 1, :m]
        krylov = np.column_stack(basis[:m])

        rhs = np.zeros(m + 1)
        rhs[0] = residual_norm

        for j in range(m):
            first, second = hessenberg[j, j], hessenberg[j + 1, j]
            radius = math.hypot(first, second)
            c, s = first / radius, second / radius
            upper, lower = hessenberg[j].copy(), hessenberg[j + 1].copy()
            hessenberg[j] = c * upper + s * lower
            hessenberg[j + 1] = -s * upper + c * lower
            rhs[j], rhs[j + 1] = c * rhs[j] + s * rhs[j + 1], -s * rhs[j] + c * rhs[j + 1]

        y = np.zeros(m)
        for j in range(m - 1, -1, -1):
            total = float(np.dot(y[j + 1 :], hessenberg[j, j + 1 : m]))
            y[j] = (rhs[j] - total) / hessenberg[j, j]

        x = x + krylov @ y
        residual = rhs_vector - a @ x

        if abs(rhs[m]) < tolerance:
            break

        m = 1 if m > restart else m + 1
        if m == 1:
            logger.debug("GMRES restarting, residual %g", norm(residual))

        if iterations >= max_iterations:
            break

    logger.debug("GMRES exited after %d iterations, residual %g", iterations, norm(residual))
    return x


def solve(a, b) -> np.ndarray:
    """Solve ``a x = b`` for ``x``."""
    return gmres(a, b)