#!/usr/bin/env python3

# A dry thermal rising through an ISA atmosphere.

import numpy as np

import pysoar as ps

T_ground = 30.0 + 273.15  # Parcel temperature leaving the ground [K].

# Follow the parcel up in 100 m steps.  Its temperature follows the dry
# adiabat while the surrounding air follows the ISA.
H = np.arange(0.0, 4000.0, 100.0)
P = ps.pressure_from_standard_altitude(H)
T_parcel = ps.adiabatic_cooling(T_ground, P, ps.P0)
T_env = ps.temperature_from_standard_altitude(H)

for h, p, T_p, T_e in zip(H[::5], P[::5], T_parcel[::5], T_env[::5]):
    print(f"H = {h:6.0f} m, P = {p:6.1f} hPa -> parcel {T_p - 273.15:5.1f}°C,"
          f" air {T_e - 273.15:5.1f}°C")

# The thermal stops rising where it is no longer warmer than its
# surroundings.
warmer = T_parcel > T_env
if np.all(warmer):
    print("The parcel is still rising.")
else:
    print(f"Thermal ceiling reached near {H[np.argmin(warmer)]:.0f} m")

# Same thing using the linear dry adiabatic lapse rate.
T_500 = ps.dry_adiabatic_temperature(T_ground, 500.0)
print(f"At 500 m the parcel is {T_500 - 273.15:.1f}°C "
      f"(θ = {ps.potential_temperature(T_500, P[5]):.1f} K)")
