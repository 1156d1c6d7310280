"""
Physical Constants (:mod:`pysoar.constants`)
============================================

.. currentmodule:: pysoar.constants

Fixed values for the ICAO / ISO 2533-1975 standard atmosphere and for dry
air.  These are created once at import and cannot be changed.

Notes
-----
- `gamma` is the *dry adiabatic* lapse rate :math:`g_n / c_p` (K per metre
  of ascent).  It is the cooling of a rising parcel of dry air.  The ISA
  *environmental* lapse rate of the troposphere is the separate value `L`.
- Pressures are in hPa, temperatures in K and altitudes in m.
"""
from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ['AirConstants', 'ISA', 'T0', 'P0', 'g_n', 'R_d', 'c_p', 'kappa',
           'L', 'gamma', 'STD_EXP', 'H_TROPO', 'P_REF', 'FT']


# ======================================================================

# noinspection PyPep8Naming
@dataclass(frozen=True)
class AirConstants:
    """
    Standard atmosphere and dry air constants.  The derived values
    (`c_p`, `kappa`, `gamma`, `std_exp`) are computed from the primary
    ones on construction.
    """
    T0: float = 288.15  # Sea level temperature (K), ISO 2533 Table 1.
    P0: float = 1013.25  # Sea level pressure (hPa), ISO 2533 Table 1.
    g_n: float = 9.80665  # Standard gravity (m/s²).
    R_d: float = 287.05287  # Gas constant for dry air (J/kg/K).
    ratio_heats: float = 1.4  # γ = C_p/C_v for dry air.
    L: float = 0.0065  # Troposphere lapse rate (K/m), ISO 2533 Table 4.
    H_tropo: float = 11000.0  # Tropopause (m).
    P_ref: float = 1000.0  # Potential temperature reference (hPa).

    c_p: float = field(init=False)
    kappa: float = field(init=False)
    gamma: float = field(init=False)
    std_exp: float = field(init=False)

    def __post_init__(self):
        if self.T0 <= 0 or self.P0 <= 0 or self.L <= 0:
            raise ValueError("Require T0, P0, L > 0.")

        c_p = self.ratio_heats * self.R_d / (self.ratio_heats - 1)

        # Frozen instance, so set derived fields directly.
        object.__setattr__(self, 'c_p', c_p)
        object.__setattr__(self, 'kappa', self.R_d / c_p)
        object.__setattr__(self, 'gamma', self.g_n / c_p)
        object.__setattr__(self, 'std_exp', self.g_n / (self.R_d * self.L))


# ----------------------------------------------------------------------

ISA = AirConstants()

T0 = ISA.T0
P0 = ISA.P0
g_n = ISA.g_n
R_d = ISA.R_d
c_p = ISA.c_p
kappa = ISA.kappa  # R/c_p ≈ 0.2857.
L = ISA.L
gamma = ISA.gamma  # ≈ 0.00976 K/m.
STD_EXP = ISA.std_exp  # ≈ 5.2559.
H_TROPO = ISA.H_tropo
P_REF = ISA.P_ref
FT = 0.3048  # Metres per foot.
