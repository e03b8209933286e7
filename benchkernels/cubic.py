"""Closed-form real roots of cubic polynomials.

The benchmark solves a fixed set of cubics, two of them with known roots,
and keeps the roots of those two for verification.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = 4.0 * math.atan(1.0)

EXPECTED_FIRST = (2.0, 6.0, 2.5)
EXPECTED_SECOND = (2.5,)

_TOLERANCE = 1.0e-6

_FIXED_EQUATIONS = (
    (1.0, -10.5, 32.0, -30.0),
    (1.0, -4.5, 17.0, -30.0),
    (1.0, -3.5, 22.0, -31.0),
    (1.0, -13.7, 1.0, -35.0),
)


@dataclass(frozen=True)
class CubicResult:
    """Roots found for the two cubics whose solutions are known."""

    first: tuple[float, ...]
    second: tuple[float, ...]


def solve_cubic(a: float, b: float, c: float, d: float) -> tuple[float, ...]:
    """Real roots of ``a*x**3 + b*x**2 + c*x + d``.

    Returns three roots when the discriminant allows it, otherwise one.
    Degenerate inputs that have no defined angle yield NaN roots.
    """
    if a == 0:
        raise ValueError("leading coefficient must be non-zero")
    a1 = b / a
    a2 = c / a
    a3 = d / a
    q = (a1 * a1 - 3.0 * a2) / 9.0
    r = (2.0 * a1 * a1 * a1 - 9.0 * a1 * a2 + 27.0 * a3) / 54.0
    q3 = q * q * q
    r2_q3 = r * r - q3

    if r2_q3 <= 0:
        ratio = r / math.sqrt(q3) if q3 > 0 else math.nan
        theta = math.acos(ratio) if -1.0 <= ratio <= 1.0 else math.nan
        scale = -2.0 * math.sqrt(q)
        return tuple(
            scale * math.cos((theta + 2.0 * PI * turn) / 3.0) - a1 / 3.0
            for turn in range(3)
        )

    root = (math.sqrt(r2_q3) + abs(r)) ** (1.0 / 3.0)
    root += q / root
    root *= 1.0 if r < 0.0 else -1.0
    root -= a1 / 3.0
    return (root,)


def _solve_grid() -> None:
    for a in (1.0, 2.0):
        for b in (10.0, 9.0):
            for c in (5.0, 5.5):
                for d in (-1.0, -2.0):
                    solve_cubic(a, b, c, d)


def _run_once() -> CubicResult:
    first, second, *others = (solve_cubic(*coeffs) for coeffs in _FIXED_EQUATIONS)
    _solve_grid()
    return CubicResult(first=first, second=second)


def run(repeat: int) -> CubicResult:
    """Run the benchmark ``repeat`` times; return the roots of the last run."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    result = _run_once()
    for _ in range(repeat - 1):
        result = _run_once()
    return result


def _close(x: float, y: float) -> bool:
    return math.isclose(x, y, rel_tol=_TOLERANCE, abs_tol=_TOLERANCE)


def _matches(found: tuple[float, ...], expected: tuple[float, ...]) -> bool:
    return len(found) == len(expected) and all(
        _close(x, y) for x, y in zip(found, expected)
    )


def verify(result: CubicResult) -> bool:
    """True when both known cubics produced their expected roots."""
    return _matches(result.first, EXPECTED_FIRST) and _matches(
        result.second, EXPECTED_SECOND
    )