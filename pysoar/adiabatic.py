"""
Dry Adiabatic Processes (:mod:`pysoar.adiabatic`)
=================================================

.. currentmodule:: pysoar.adiabatic

Temperature changes of a parcel of dry air that rises or sinks without
exchanging heat or moisture with its surroundings.  Uses the Poisson
relation with the constant dry air exponent :math:`κ = R / c_p`.
Temperatures are in K; pressures in any consistent unit (hPa for
`potential_temperature` defaults).
"""
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysoar._checks import (check_finite, check_positive, check_broadcast,
                            check_result, as_output)
from pysoar.constants import kappa, gamma, P_REF
from pysoar.exception import DomainError

__all__ = ['adiabatic_cooling', 'potential_temperature',
           'dry_adiabatic_temperature']


# ======================================================================

def adiabatic_cooling(temperature: ArrayLike, pressure_start: ArrayLike,
                      pressure_end: ArrayLike) -> NDArray | float:
    r"""
    Temperature change of dry air moving adiabatically between two
    pressure levels:

    .. math:: T_{out} = T \left(\frac{P_{start}}{P_{end}}\right)^{R/c_p}

    `temperature` is the parcel temperature at `pressure_end` and the
    result is the parcel temperature at `pressure_start`.  For example
    the cooling of a parcel at ISA sea level rising 100 m is::

        >>> from pysoar import T0, P0, pressure_from_standard_altitude
        >>> p1 = pressure_from_standard_altitude(100)
        >>> T0 - adiabatic_cooling(T0, p1, P0)  # doctest: +ELLIPSIS
        0.9755...

    When both pressures are equal the temperature is returned unchanged.

    Parameters
    ----------
    temperature : array_like
        Starting temperature (K).
    pressure_start : array_like
        Pressure at the level the result is required.
    pressure_end : array_like
        Pressure at the level where the parcel has `temperature`.

    Returns
    -------
    float or ndarray
        Temperature (K).

    Raises
    ------
    DomainError
        If any argument is non-finite or <= 0, or if the array shapes
        do not broadcast together.
    NumericError
        If the result overflows or underflows to zero.
    """
    T = check_positive('temperature', temperature)
    P_s = check_positive('pressure_start', pressure_start)
    P_e = check_positive('pressure_end', pressure_end)
    T, P_s, P_e = check_broadcast(T, P_s, P_e)

    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        T_out = T * (P_s / P_e) ** kappa

    return as_output(check_result('temperature', T_out, positive=True))


def potential_temperature(temperature: ArrayLike, pressure: ArrayLike,
                          pressure_ref: ArrayLike = P_REF
                          ) -> NDArray | float:
    r"""
    Potential temperature :math:`θ = T (P_{ref} / P)^{R/c_p}`, i.e. the
    temperature dry air would have if brought adiabatically to
    `pressure_ref` (default 1000 hPa).
    """
    T = check_positive('temperature', temperature)
    P = check_positive('pressure', pressure)
    P_r = check_positive('pressure_ref', pressure_ref)
    T, P, P_r = check_broadcast(T, P, P_r)

    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        θ = T * (P_r / P) ** kappa

    return as_output(check_result('potential temperature', θ, positive=True))


def dry_adiabatic_temperature(temperature: ArrayLike, height: ArrayLike
                              ) -> NDArray | float:
    """
    Temperature of a dry parcel after rising `height` metres (negative
    for descent) at the dry adiabatic lapse rate `gamma`.
    """
    T = check_positive('temperature', temperature)
    h = check_finite('height', height)
    T, h = check_broadcast(T, h)

    T_out = T - gamma * h
    if np.any(T_out <= 0):
        raise DomainError("Parcel temperature would be <= 0 K.",
                          value=T_out)

    return as_output(T_out)
