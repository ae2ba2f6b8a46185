from __future__ import annotations

import pytest

from boltpattern import InvalidArgumentError, Load


def test_equivalent_at_transfers_moments() -> None:
    load = Load(Fx=10.0, Fy=20.0, Fz=30.0, location=(1.0, 2.0, 3.0))
    eq = load.equivalent_at((0.0, 0.0, 0.0))

    # M = r x F with r = (1, 2, 3)
    assert eq.force == (10.0, 20.0, 30.0)
    assert eq.moment == pytest.approx((2.0 * 30.0 - 3.0 * 20.0, 3.0 * 10.0 - 1.0 * 30.0, 1.0 * 20.0 - 2.0 * 10.0))
    assert eq.location == (0.0, 0.0, 0.0)


def test_equivalent_at_same_point_is_identity() -> None:
    load = Load(Fy=5.0, Mz=7.0, location=(4.0, 4.0, 0.0))

    assert load.equivalent_at((4.0, 4.0, 0.0)).moment == (0.0, 0.0, 7.0)


def test_load_without_location_acts_at_target() -> None:
    load = Load(Fz=100.0, Mx=3.0)
    eq = load.equivalent_at((50.0, -20.0, 0.0))

    assert eq.moment == (3.0, 0.0, 0.0)
    assert eq.location == (50.0, -20.0, 0.0)


def test_from_vectors() -> None:
    load = Load.from_vectors((1.0, 2.0, 3.0), (4.0, 5.0, 6.0))

    assert load == Load(Fx=1.0, Fy=2.0, Fz=3.0, Mx=4.0, My=5.0, Mz=6.0)
    assert load.shear_magnitude == pytest.approx(5.0**0.5)

    with pytest.raises(InvalidArgumentError):
        Load.from_vectors((1.0, 2.0), (0.0, 0.0, 0.0))


def test_location_must_be_3d() -> None:
    with pytest.raises(InvalidArgumentError, match="location"):
        Load(Fz=1.0, location=(1.0, 2.0))
