"""Gauss-Jordan matrix inversion with partial pivoting, plus matrix multiply.

The benchmark inverts a fixed 3x3 matrix and multiplies it by another.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

Matrix = tuple[tuple[float, ...], ...]

EPS = 1.0e-6
_MAX_ROWS = 500
_TOLERANCE = 1.0e-5

A_REF: Matrix = (
    (3.0, -6.0, 7.0),
    (9.0, 0.0, -5.0),
    (5.0, -8.0, 6.0),
)

B: Matrix = (
    (-3.0, 0.0, 2.0),
    (3.0, -2.0, 0.0),
    (0.0, 2.0, -3.0),
)

EXPECTED_PRODUCT: Matrix = (
    (-27.0, 26.0, -15.0),
    (-27.0, -10.0, 33.0),
    (-39.0, 28.0, -8.0),
)

EXPECTED_INVERSE: Matrix = (
    (0.133333325, -0.199999958, 0.2666665910),
    (-0.519999862, 0.113333330, 0.5266665220),
    (0.479999840, -0.359999895, 0.0399999917),
)

EXPECTED_DET = -16.6666718


class SingularMatrixError(ArithmeticError):
    """A pivot fell to or below the tolerance; ``det`` holds the partial determinant."""

    def __init__(self, det: float) -> None:
        super().__init__(f"matrix is singular to working precision (det={det})")
        self.det = det


@dataclass(frozen=True)
class MinverResult:
    """Product, inverse and determinant left by one pass of the benchmark."""

    product: Matrix
    inverse: Matrix
    det: float


def mmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Matrix product ``a @ b``."""
    if not a or not b or not b[0]:
        raise ValueError("matrices must not be empty")
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of a must match rows of b")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("rows of b must all have the same length")
    columns = list(zip(*b))
    return tuple(
        tuple(float(sum(x * y for x, y in zip(row, column))) for column in columns)
        for row in a
    )


def minver(matrix: Sequence[Sequence[float]], eps: float = EPS) -> tuple[Matrix, float]:
    """Invert a square matrix in place of a copy; return ``(inverse, det)``.

    Raises :class:`ValueError` for a size outside 2..500 or a non-positive
    ``eps``, and :class:`SingularMatrixError` when a pivot is not above ``eps``.
    """
    n = len(matrix)
    if n < 2 or n > _MAX_ROWS or eps <= 0.0:
        raise ValueError("matrix must have 2 to 500 rows and eps must be positive")
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")

    a = [[float(value) for value in row] for row in matrix]
    work = list(range(n))
    w1 = 1.0
    r = 0
    w = 0.0

    for k in range(n):
        wmax = 0.0
        for i in range(k, n):
            w = abs(a[i][k])
            if w > wmax:
                wmax = w
                r = i
        pivot = a[r][k]
        if abs(pivot) <= eps:
            raise SingularMatrixError(w1)
        w1 *= pivot
        if r != k:
            w1 = -w
            work[k], work[r] = work[r], work[k]
            a[k], a[r] = a[r], a[k]
        a[k] = [value / pivot for value in a[k]]
        for i in range(n):
            if i == k:
                continue
            factor = a[i][k]
            if factor != 0.0:
                a[i] = [
                    value if j == k else value - factor * a[k][j]
                    for j, value in enumerate(a[i])
                ]
                a[i][k] = -factor / pivot
        a[k][k] = 1.0 / pivot

    for i in range(n):
        while (k := work[i]) != i:
            work[k], work[i] = work[i], work[k]
            row = a[k]
            for _ in range(n):
                row[i], row[k] = row[k], row[i]

    return tuple(tuple(row) for row in a), w1


def _run_once() -> MinverResult:
    inverse, det = minver(A_REF, EPS)
    product = mmul(A_REF, B)
    return MinverResult(product=product, inverse=inverse, det=det)


def run(repeat: int) -> MinverResult:
    """Run the benchmark ``repeat`` times; return the state of the last run."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    result = _run_once()
    for _ in range(repeat - 1):
        result = _run_once()
    return result


def _close(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=_TOLERANCE, abs_tol=_TOLERANCE)


def _matrices_close(found: Sequence[Sequence[float]], expected: Matrix) -> bool:
    return len(found) == len(expected) and all(
        len(row) == len(exp_row) and all(_close(x, y) for x, y in zip(row, exp_row))
        for row, exp_row in zip(found, expected)
    )


def verify(result: MinverResult) -> bool:
    """True when product, inverse and determinant match the known-good values."""
    return (
        _matrices_close(result.product, EXPECTED_PRODUCT)
        and _matrices_close(result.inverse, EXPECTED_INVERSE)
        and _close(result.det, EXPECTED_DET)
    )