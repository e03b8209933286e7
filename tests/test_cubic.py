import math

import pytest

from benchkernels.cubic import (
    EXPECTED_FIRST,
    EXPECTED_SECOND,
    CubicResult,
    run,
    solve_cubic,
    verify,
)


def _residual_ok(a, b, c, d, x):
    value = ((a * x + b) * x + c) * x + d
    scale = (abs(a) + abs(b) + abs(c) + abs(d)) * max(1.0, abs(x)) ** 3
    return abs(value) <= 1e-9 * scale


def test_three_known_roots():
    roots = solve_cubic(1.0, -10.5, 32.0, -30.0)
    assert len(roots) == 3
    for found, expected in zip(roots, (2.0, 6.0, 2.5)):
        assert found == pytest.approx(expected, abs=1e-9)


def test_single_known_root():
    roots = solve_cubic(1.0, -4.5, 17.0, -30.0)
    assert len(roots) == 1
    assert roots[0] == pytest.approx(2.5, abs=1e-9)


def test_scaling_coefficients_keeps_roots():
    plain = solve_cubic(1.0, -10.5, 32.0, -30.0)
    scaled = solve_cubic(2.0, -21.0, 64.0, -60.0)
    assert scaled == pytest.approx(plain, abs=1e-9)


@pytest.mark.parametrize(
    "coeffs",
    [
        (1.0, -3.5, 22.0, -31.0),
        (1.0, -13.7, 1.0, -35.0),
        (1.0, 10.0, 5.0, -1.0),
        (2.0, 9.0, 5.5, -2.0),
        (1.0, -10.5, 32.0, -30.0),
    ],
)
def test_roots_satisfy_polynomial(coeffs):
    roots = solve_cubic(*coeffs)
    assert len(roots) in (1, 3)
    for root in roots:
        assert _residual_ok(*coeffs, root)


def test_zero_leading_coefficient_rejected():
    with pytest.raises(ValueError):
        solve_cubic(0.0, 1.0, 2.0, 3.0)


def test_triple_root_at_zero_gives_nan():
    roots = solve_cubic(1.0, 0.0, 0.0, 0.0)
    assert len(roots) == 3
    assert all(math.isnan(root) for root in roots)


def test_run_verifies():
    result = run(1)
    assert verify(result)
    assert len(result.first) == 3


def test_run_repeated_is_stable():
    assert run(3) == run(1)


def test_run_rejects_zero_repeat():
    with pytest.raises(ValueError):
        run(0)


def test_verify_accepts_expected_values():
    assert verify(CubicResult(first=EXPECTED_FIRST, second=EXPECTED_SECOND))


def test_verify_rejects_missing_root():
    assert not verify(CubicResult(first=(2.0, 6.0), second=EXPECTED_SECOND))


def test_verify_rejects_wrong_root():
    assert not verify(CubicResult(first=EXPECTED_FIRST, second=(2.6,)))