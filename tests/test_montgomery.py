import pytest

from benchkernels import montgomery
from benchkernels.montgomery import MASK64, modul64, montmul, mulul64, xbingcd

M = montgomery.IN_M
A = montgomery.IN_A
B = montgomery.IN_B


@pytest.mark.parametrize(
    "u, v",
    [(0, 0), (1, MASK64), (MASK64, MASK64), (A, B), (M, 0x123456789ABCDEF)],
)
def test_mulul64_matches_full_product(u, v):
    hi, lo = mulul64(u, v)
    assert (hi << 64) | lo == u * v
    assert 0 <= hi <= MASK64 and 0 <= lo <= MASK64


@pytest.mark.parametrize(
    "x, y, z",
    [(0, 5, 3), (A, 0, M), (B, MASK64, M), (M - 1, MASK64, M), (0x7, 0x99, 0x11)],
)
def test_modul64_is_remainder(x, y, z):
    assert modul64(x, y, z) == ((x << 64) | y) % z


def test_modul64_handles_high_bit_dividend():
    z = MASK64 - 2
    x = z - 1
    assert modul64(x, MASK64, z) == ((x << 64) | MASK64) % z


def test_xbingcd_identity():
    u, v = xbingcd(1 << 63, M)
    assert (1 << 64) * u - v * M == 1


@pytest.mark.parametrize("m", [3, 0x10001, M, MASK64])
def test_xbingcd_identity_various_moduli(m):
    u, v = xbingcd(1 << 63, m)
    assert (1 << 64) * u - v * m == 1


@pytest.mark.parametrize("x, y", [(A, B), (1, 1), (M - 1, M - 2), (0, B)])
def test_montmul_is_montgomery_product(x, y):
    _, mprime = xbingcd(1 << 63, M)
    abar = modul64(x, 0, M)
    bbar = modul64(y, 0, M)
    result = montmul(abar, bbar, M, mprime)
    assert result == (abar * bbar * pow(1 << 64, -1, M)) % M
    assert result < M


def test_montgomery_roundtrip_equals_direct_power():
    rinv, mprime = xbingcd(1 << 63, M)
    abar = modul64(A, 0, M)
    bbar = modul64(B, 0, M)
    p = montmul(abar, bbar, M, mprime)
    p = montmul(p, p, M, mprime)
    p = montmul(p, p, M, mprime)
    assert modul64(*mulul64(p, rinv), M) == pow(A * B, 4, M)


def test_run_reports_no_errors():
    result = montgomery.run(2)
    assert result == 0
    assert montgomery.verify(result) is True


def test_verify_rejects_errors():
    assert montgomery.verify(1) is False


def test_run_requires_positive_repeat():
    with pytest.raises(ValueError):
        montgomery.run(0)