import math

import pytest

from benchkernels import nbody
from benchkernels.nbody import Body


def _momentum(bodies):
    return [sum(b.v[k] * b.mass for b in bodies) for k in range(3)]


def test_solar_bodies_sun_first():
    bodies = nbody.solar_bodies()
    assert len(bodies) == 5
    assert bodies[0].mass == nbody.SOLAR_MASS
    assert bodies[0].x == [0.0, 0.0, 0.0]


def test_solar_bodies_are_independent_copies():
    first = nbody.solar_bodies()
    first[1].x[0] = 1.0e6
    second = nbody.solar_bodies()
    assert second[1].x[0] == pytest.approx(4.84143144246472090e00)


def test_offset_momentum_cancels_total_momentum():
    bodies = nbody.solar_bodies()
    nbody.offset_momentum(bodies)
    for component in _momentum(bodies):
        assert abs(component) < 1e-12


def test_offset_momentum_only_changes_first_body():
    bodies = nbody.solar_bodies()
    before = [list(b.v) for b in bodies[1:]]
    nbody.offset_momentum(bodies)
    assert [b.v for b in bodies[1:]] == before


def test_offset_momentum_rejects_empty():
    with pytest.raises(ValueError):
        nbody.offset_momentum([])


def test_energy_translation_invariant():
    bodies = nbody.solar_bodies()
    shifted = nbody.solar_bodies()
    for body in shifted:
        body.x = [p + 3.5 for p in body.x]
    assert nbody.bodies_energy(shifted) == pytest.approx(
        nbody.bodies_energy(bodies), rel=1e-12
    )


def test_single_resting_body_has_no_energy():
    assert nbody.bodies_energy([Body(mass=2.0)]) == 0.0


def test_body_requires_three_components():
    with pytest.raises(ValueError):
        Body(x=[0.0, 1.0], mass=1.0)


def test_run_matches_known_energy():
    energy, bodies = nbody.run(1)
    assert math.isclose(energy, -16.907516382852478, rel_tol=1e-9)
    assert nbody.verify((energy, bodies))


def test_run_repeated_still_verifies():
    assert nbody.verify(nbody.run(3))


def test_run_rejects_zero_repeat():
    with pytest.raises(ValueError):
        nbody.run(0)


def test_verify_rejects_wrong_energy():
    _, bodies = nbody.run(1)
    assert not nbody.verify((nbody.EXPECTED_ENERGY + 1.0, bodies))


def test_verify_rejects_perturbed_body():
    energy, bodies = nbody.run(1)
    bodies[2].v[1] += 0.5
    assert not nbody.verify((energy, bodies))


def test_verify_rejects_missing_body():
    energy, bodies = nbody.run(1)
    assert not nbody.verify((energy, bodies[:-1]))