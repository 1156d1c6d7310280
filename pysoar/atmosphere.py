"""
Standard Atmosphere (:mod:`pysoar.atmosphere`)
==============================================

.. currentmodule:: pysoar.atmosphere

Pressure / altitude relations for the lowest (tropospheric) layer of the
ISO 2533-1975 International Standard Atmosphere (ISA), flight levels and
dry air density.

Notes
-----
- Pressures are in hPa, temperatures in K and altitudes in m.  Functions
  using a ratio of two pressures work with any consistent pressure unit.
- All functions accept scalars or array-likes.  Scalar arguments give a
  `float` result, otherwise an array is returned (NumPy broadcasting
  rules apply).
- The ISA troposphere has a constant lapse rate `L` up to `H_TROPO` =
  11 km.  Above that the same formulae are extrapolated with a warning.
  Where the linear temperature profile would reach 0 K (≈ 44.3 km) a
  `DomainError` is raised.
- Altitudes are geopotential.  No humidity is included.
"""
from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysoar._checks import (check_finite, check_positive, check_broadcast,
                            check_result, as_output)
from pysoar.constants import T0, P0, L, R_d, STD_EXP, H_TROPO, FT
from pysoar.exception import DomainError

__all__ = ['pressure_from_standard_altitude',
           'altitude_from_standard_pressure',
           'temperature_from_standard_altitude',
           'pressure_from_altitude', 'altitude_from_pressure',
           'fl_from_pressure', 'pressure_from_fl', 'air_density']


# ======================================================================

def pressure_from_standard_altitude(altitude: ArrayLike,
                                    pressure0: ArrayLike = P0
                                    ) -> NDArray | float:
    r"""
    Pressure at a given altitude in the ISA troposphere using the
    barometric formula (ISO 2533-1975 Eqn 12):

    .. math:: P = P_0 \left(1 - \frac{L h}{T_0}\right)^{g_n / (R L)}

    Parameters
    ----------
    altitude : array_like
        Geopotential altitude above the level where `pressure0` applies
        (m).  May be negative.
    pressure0 : array_like, default = P0
        Pressure at zero altitude, i.e. QNH or sea level pressure of the
        day.  The default is the ISA sea level pressure (1013.25 hPa).

    Returns
    -------
    float or ndarray
        Pressure at `altitude` in the same units as `pressure0`.

    Raises
    ------
    DomainError
        If `altitude` is not finite, `pressure0` <= 0, or `altitude` is
        at / above the point where the layer temperature would reach 0 K.
    NumericError
        If the result underflows to zero.
    """
    h = check_finite('altitude', altitude)
    P_b = check_positive('pressure0', pressure0)
    h, P_b = check_broadcast(h, P_b)

    P = _std_press(h, P_b)
    _warn_above_tropo(h)
    return as_output(P)


def altitude_from_standard_pressure(pressure: ArrayLike,
                                    pressure0: ArrayLike = P0
                                    ) -> NDArray | float:
    """
    Altitude at which the ISA troposphere has the given pressure.  This
    is the inverse of `pressure_from_standard_altitude`; refer to that
    function for details.  With `pressure0` = 1013.25 hPa this is the
    pressure altitude.

    Raises
    ------
    DomainError
        If either pressure is <= 0 or not finite.
    """
    P = check_positive('pressure', pressure)
    P_b = check_positive('pressure0', pressure0)
    P, P_b = check_broadcast(P, P_b)

    h = _std_alt(P, P_b)
    _warn_above_tropo(h)
    return as_output(h)


def temperature_from_standard_altitude(altitude: ArrayLike
                                       ) -> NDArray | float:
    """
    ISA temperature at the given altitude, :math:`T = T_0 - L h` (K).
    """
    h = check_finite('altitude', altitude)
    T_ratio = _std_temp_ratio(h)
    _warn_above_tropo(h)
    return as_output(T0 * T_ratio)


# ----------------------------------------------------------------------

def pressure_from_altitude(altitude: ArrayLike, pressure0: ArrayLike = P0,
                           temperature: ArrayLike = T0) -> NDArray | float:
    r"""
    Pressure at a given altitude using the hypsometric formula with an
    actual air temperature, assuming the ISA lapse rate between the
    reference level and the altitude:

    .. math:: P = P_0 \left(\frac{T}{T + L h}\right)^{g_n / (R L)}

    Parameters
    ----------
    altitude : array_like
        Height above the level where `pressure0` applies (m).
    pressure0 : array_like, default = P0
        Pressure at the reference level.
    temperature : array_like, default = T0
        Air temperature at `altitude` (K).

    Returns
    -------
    float or ndarray
        Pressure in the same units as `pressure0`.

    Raises
    ------
    DomainError
        For non-finite / non-positive arguments, incompatible array
        shapes or if the implied reference level temperature
        :math:`T + L h` is <= 0 K.
    NumericError
        If the result overflows or underflows to zero.
    """
    h = check_finite('altitude', altitude)
    P_b = check_positive('pressure0', pressure0)
    T = check_positive('temperature', temperature)
    h, P_b, T = check_broadcast(h, P_b, T)

    T_b = T + L * h
    if np.any(T_b <= 0):
        raise DomainError("Reference level temperature below 0 K.",
                          value=T_b)

    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        P = P_b * (T / T_b) ** STD_EXP

    return as_output(check_result('pressure', P, positive=True))


def altitude_from_pressure(pressure: ArrayLike, pressure0: ArrayLike = P0,
                           temperature: ArrayLike = T0) -> NDArray | float:
    r"""
    Height of the given pressure above the reference level using the
    hypsometric formula.  This is the inverse of `pressure_from_altitude`:

    .. math:: h = \left[\left(\frac{P_0}{P}\right)^{R L / g_n} - 1\right]
              \frac{T}{L}
    """
    P = check_positive('pressure', pressure)
    P_b = check_positive('pressure0', pressure0)
    T = check_positive('temperature', temperature)
    P, P_b, T = check_broadcast(P, P_b, T)

    with np.errstate(over='ignore', invalid='ignore'):
        h = ((P_b / P) ** (1 / STD_EXP) - 1) * T / L

    return as_output(check_result('altitude', h))


# ----------------------------------------------------------------------

def fl_from_pressure(pressure: ArrayLike) -> NDArray | int:
    """
    Closest flight level (hundreds of feet of pressure altitude, i.e.
    altimeter set to 1013.25 hPa) for the given pressure.
    """
    P = check_positive('pressure', pressure)
    h = _std_alt(P, P0)
    _warn_above_tropo(h)

    fl = np.rint(h / FT / 100).astype(int)
    if np.ndim(fl) == 0:
        return int(fl)
    return fl


def pressure_from_fl(fl: ArrayLike) -> NDArray | float:
    """
    Pressure corresponding to a flight level, e.g. ``pressure_from_fl(115)``
    gives the pressure at 11,500 ft pressure altitude.
    """
    h = check_finite('fl', fl) * 100 * FT
    P = _std_press(h, P0)
    _warn_above_tropo(h)
    return as_output(P)


# ----------------------------------------------------------------------

def air_density(pressure: ArrayLike, temperature: ArrayLike
                ) -> NDArray | float:
    r"""
    Density of dry air from the ideal gas law,
    :math:`ρ = P / (R T)`.

    Parameters
    ----------
    pressure : array_like
        Pressure (hPa).
    temperature : array_like
        Temperature (K).

    Returns
    -------
    float or ndarray
        Density (kg/m³).
    """
    P = check_positive('pressure', pressure)
    T = check_positive('temperature', temperature)
    P, T = check_broadcast(P, T)

    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        ρ = 100.0 * P / (R_d * T)  # hPa -> Pa.

    return as_output(check_result('density', ρ, positive=True))


# ======================================================================

def _std_temp_ratio(h: NDArray) -> NDArray:
    # Returns T/T0 = 1 - L.h/T0 for the ISA troposphere, checking that the
    # layer is still above 0 K.
    T_ratio = 1 - L * h / T0
    if np.any(T_ratio <= 0):
        raise DomainError(f"Altitude must be below {T0 / L:.1f} m where "
                          f"the standard layer reaches 0 K.", value=h)
    return T_ratio


def _std_press(h: NDArray, P_b: NDArray | float) -> NDArray:
    # ISO 2533-1975 Eqn 12 for the troposphere.  No tropopause warning.
    T_ratio = _std_temp_ratio(h)
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        P = P_b * T_ratio ** STD_EXP

    return check_result('pressure', P, positive=True)


def _std_alt(P: NDArray, P_b: NDArray | float) -> NDArray:
    # Inverse of _std_press.
    with np.errstate(over='ignore', invalid='ignore'):
        h = (T0 / L) * (1 - (P / P_b) ** (1 / STD_EXP))

    return check_result('altitude', h)


def _warn_above_tropo(h: NDArray):
    # Only call directly from public functions so that the warning points
    # at the caller.
    if np.any(h > H_TROPO):
        warnings.warn(f"Altitude above the tropopause ({H_TROPO:.0f} m), "
                      f"tropospheric values extrapolated.", stacklevel=3)
