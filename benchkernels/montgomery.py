"""Montgomery modular multiplication on 64-bit unsigned integers.

The benchmark raises ``a*b`` to the fourth power modulo ``m`` twice: once by
plain multiply-and-reduce and once through Montgomery multiplication. It then
checks that the two results agree.
"""

from __future__ import annotations

MASK64 = (1 << 64) - 1

IN_M = 0xFAE849273928F89F  # must be odd
IN_B = 0x14736DEFB9330573  # must be smaller than m
IN_A = 0x0549372187237FEF  # must be smaller than m

_HALF_R = 1 << 63


def mulul64(u: int, v: int) -> tuple[int, int]:
    """Multiply two 64-bit values and return the 128-bit product as ``(hi, lo)``."""
    product = (u & MASK64) * (v & MASK64)
    return product >> 64, product & MASK64


def modul64(x: int, y: int, z: int) -> int:
    """Return the remainder of the 128-bit value ``x || y`` divided by ``z``.

    ``x`` must be smaller than ``z`` for the result to be the true remainder.
    The division runs bit by bit on 64-bit words.
    """
    x &= MASK64
    y &= MASK64
    z &= MASK64
    for _ in range(64):
        top_set = x >> 63
        x = ((x << 1) | (y >> 63)) & MASK64
        y = (y << 1) & MASK64
        if top_set or x >= z:
            x = (x - z) & MASK64
            y = (y + 1) & MASK64
    return x


def montmul(abar: int, bbar: int, m: int, mprime: int) -> int:
    """Montgomery product of ``abar`` and ``bbar`` modulo ``m`` with ``r = 2**64``."""
    t = (abar & MASK64) * (bbar & MASK64)
    tm = ((t & MASK64) * mprime) & MASK64
    u = t + tm * m
    overflow = u >> 128
    result = (u >> 64) & MASK64
    if overflow or result >= m:
        result = (result - m) & MASK64
    return result


def xbingcd(a: int, b: int) -> tuple[int, int]:
    """Extended binary GCD for ``a`` a power of two (or 0 for ``2**64``) and odd ``b``.

    Returns ``(u, v)`` such that ``u*(2a) - v*b == 1``.
    """
    u, v = 1, 0
    alpha, beta = a & MASK64, b & MASK64
    a &= MASK64
    while a > 0:
        a >>= 1
        if u & 1 == 0:
            u >>= 1
            v >>= 1
        else:
            u = (((u ^ beta) >> 1) + (u & beta)) & MASK64
            v = ((v >> 1) + alpha) & MASK64
    return u, v


def _fourth_power_direct(a: int, b: int, m: int) -> int:
    p = modul64(*mulul64(a, b), m)
    for _ in range(2):
        p = modul64(*mulul64(p, p), m)
    return p


def _run_once(a: int, b: int, m: int) -> int:
    errors = 0
    expected = _fourth_power_direct(a, b, m)

    rinv, mprime = xbingcd(_HALF_R, m)
    if (2 * _HALF_R * rinv - m * mprime) & MASK64 != 1:
        errors = 1

    abar = modul64(a, 0, m)
    bbar = modul64(b, 0, m)
    p = montmul(abar, bbar, m, mprime)
    p = montmul(p, p, m, mprime)
    p = montmul(p, p, m, mprime)

    p = modul64(*mulul64(p, rinv), m)
    if p != expected:
        errors = 1
    return errors


def run(repeat: int) -> int:
    """Run the benchmark ``repeat`` times; return the error flag of the last run."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    errors = 0
    for _ in range(repeat):
        errors = _run_once(IN_A, IN_B, IN_M)
    return errors


def verify(result: int) -> bool:
    """True when the benchmark reported no errors."""
    return result == 0