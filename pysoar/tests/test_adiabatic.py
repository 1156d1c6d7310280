import numpy as np
from numpy.testing import assert_allclose
import pytest

from pysoar import (T0, P0, gamma, kappa, DomainError, NumericError,
                    adiabatic_cooling, potential_temperature,
                    dry_adiabatic_temperature,
                    pressure_from_standard_altitude)


# ======================================================================

def test_lapse_rate_from_rising_parcel():
    """
    A parcel at ISA sea level rising 100 m cools at the dry adiabatic
    lapse rate.
    """
    p1 = pressure_from_standard_altitude(100, P0)
    p2 = pressure_from_standard_altitude(0, P0)
    gamma_calc = (T0 - adiabatic_cooling(T0, p1, p2)) / 100
    assert abs(gamma_calc - gamma) < 1e-5

    # Same using the default sea level pressure.
    gamma_calc = (T0 - adiabatic_cooling(
        T0, pressure_from_standard_altitude(100),
        pressure_from_standard_altitude(0))) / 100
    assert abs(gamma_calc - gamma) < 1e-5


@pytest.mark.parametrize("T", [180.0, 250.0, T0, 320.0])
@pytest.mark.parametrize("P", [100.0, 500.0, P0, 1050.0])
def test_adiabatic_identity(T: float, P: float):
    assert adiabatic_cooling(T, P, P) == T


def test_adiabatic_cooling_values():
    T = adiabatic_cooling(300.0, 500.0, 1000.0)
    assert T == pytest.approx(300.0 * 0.5 ** kappa)
    assert T < 300.0

    # Reverse path restores the start temperature.
    assert adiabatic_cooling(T, 1000.0, 500.0) == pytest.approx(300.0)

    # Ratio only, so the pressure unit does not matter.
    assert adiabatic_cooling(300.0, 50000.0, 100000.0) == pytest.approx(T)


def test_adiabatic_cooling_arrays():
    P = np.array([1000.0, 900.0, 800.0, 700.0])
    T = adiabatic_cooling(T0, P, 1000.0)
    assert isinstance(T, np.ndarray)
    assert T[0] == T0
    assert np.all(np.diff(T) < 0)


def test_adiabatic_domain():
    for bad in (0.0, -1.0, np.nan, np.inf):
        with pytest.raises(DomainError):
            adiabatic_cooling(T0, bad, P0)
        with pytest.raises(DomainError):
            adiabatic_cooling(T0, P0, bad)
        with pytest.raises(DomainError):
            adiabatic_cooling(bad, P0, P0)

    with pytest.raises(DomainError):
        adiabatic_cooling(T0, [900.0, 0.0], P0)

    with pytest.raises(NumericError):
        adiabatic_cooling(1e300, 1e300, 1e-300)  # Overflow.

    # Pressure ratio underflows, result would be 0 K.
    with pytest.raises(NumericError):
        adiabatic_cooling(300.0, 1e-300, 1e300)
    with pytest.raises(NumericError):
        potential_temperature(300.0, 1e300, 1e-300)


def test_adiabatic_shape_mismatch():
    with pytest.raises(DomainError):
        adiabatic_cooling(T0, [900.0, 800.0], [1000.0, 950.0, 900.0])
    with pytest.raises(DomainError):
        potential_temperature([T0, 280.0, 270.0], [900.0, 800.0])
    with pytest.raises(DomainError):
        dry_adiabatic_temperature([T0, 280.0], [0.0, 100.0, 200.0])

    # Compatible shapes broadcast.
    T = adiabatic_cooling([[T0], [300.0]], [900.0, 800.0, 700.0], 1000.0)
    assert T.shape == (2, 3)


def test_potential_temperature():
    assert potential_temperature(T0, 1000.0) == T0
    assert potential_temperature(273.15, 850.0) == pytest.approx(
        273.15 * (1000 / 850) ** kappa)
    assert potential_temperature(T0, P0, P0) == T0

    # Potential temperature is conserved along a dry adiabat.
    T_up = adiabatic_cooling(T0, 700.0, 1000.0)
    assert potential_temperature(T_up, 700.0) == pytest.approx(
        potential_temperature(T0, 1000.0))

    with pytest.raises(DomainError):
        potential_temperature(T0, 0.0)


def test_dry_adiabatic_temperature():
    assert dry_adiabatic_temperature(T0, 0.0) == T0
    assert dry_adiabatic_temperature(298.15, 500) == pytest.approx(
        298.15 - 500 * gamma)
    assert dry_adiabatic_temperature(T0, -1000) > T0
    assert_allclose(dry_adiabatic_temperature(T0, [0, 1000]),
                    [T0, T0 - 1000 * gamma])

    with pytest.raises(DomainError):
        dry_adiabatic_temperature(T0, 40000.0)
    with pytest.raises(DomainError):
        dry_adiabatic_temperature(-5.0, 100.0)
