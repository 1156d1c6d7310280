#!/usr/bin/env python3

# Examples of altimetry from a barometer reading.

import pysoar as ps

barometer = 821.0  # Current barometer reading [hPa].
qnh = 1017.0  # Sea level pressure of the day [hPa].
T_here = 23.0 + 273.15  # Air temperature at the aircraft [K].

# Rough estimate of height using only the pressure, rounded to 50 m.
alt = round(ps.altitude_from_standard_pressure(barometer) / 50) * 50
print(f"Rough estimate of altitude = {alt} m")

# Better estimate using the sea level pressure of the day.
alt2 = ps.altitude_from_pressure(barometer, qnh)
print(f"Better estimate of altitude = {alt2:.0f} m")

# Even better estimate also using the temperature.
alt3 = ps.altitude_from_pressure(barometer, qnh, T_here)
print(f"Even better estimate of altitude = {alt3:.0f} m")

# Flight levels are pressure altitudes, so only the barometer is needed.
print(f"Closest flight level = FL{ps.fl_from_pressure(barometer):03d}")

# Where is FL115 today?
P_fl115 = ps.pressure_from_fl(115)
print(f"FL115 -> P = {P_fl115:.0f} hPa")

alt_fl115 = ps.altitude_from_pressure(P_fl115, qnh, T_here)
print(f"Today FL115 is at {alt_fl115:.0f} m, {alt_fl115 - alt3:.0f} m "
      f"above the aircraft.")

# Most pessimistic (lowest) FL115 for 1000 hPa and -20°C.
alt_min = ps.altitude_from_pressure(P_fl115, 1000.0, 253.15)
print(f"FL115 should not be below {alt_min:.0f} m even in bad weather.")
