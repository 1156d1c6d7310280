"""
.. This module acts as the top-level API documentation.

.. module: pysoar

Basic thermodynamics for soaring flight: the ICAO standard atmosphere,
flight levels and dry adiabatic processes.

.. autosummary::
    :toctree: generated/

    constants
    atmosphere
    adiabatic
    exception

Units are hPa for pressure, K for temperature and m for altitude unless
noted otherwise.
"""

__version__ = "0.1.0"

import sys

from pysoar.constants import (AirConstants, ISA, T0, P0, g_n, R_d, c_p,
                              kappa, L, gamma, STD_EXP, H_TROPO, P_REF, FT)
from pysoar.exception import AtmosphereError, DomainError, NumericError
from pysoar.atmosphere import (pressure_from_standard_altitude,
                               altitude_from_standard_pressure,
                               temperature_from_standard_altitude,
                               pressure_from_altitude, altitude_from_pressure,
                               fl_from_pressure, pressure_from_fl,
                               air_density)
from pysoar.adiabatic import (adiabatic_cooling, potential_temperature,
                              dry_adiabatic_temperature)

# ======================================================================

assert sys.version_info >= (3, 9)
