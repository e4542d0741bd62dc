"""
Constants declarations for atseptools
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_B = 6356752.314245  # Minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Vincenty iteration parameters
VINCENTY_CONVERGENCE = 1e-12
VINCENTY_MAX_ITERATIONS = 100

# Helmert series numerators, as (denominator, c1, c2, c3, c4)
VINCENTY_A_SERIES = (16384, 4096, -768, 320, -175)
VINCENTY_B_SERIES = (1024, 256, -128, 74, -47)

# ICAO Standard Atmosphere (Doc 7488/3)
STANDARD_PRESSURE_HPA = 1013.25
STANDARD_TEMP_K = 288.15
TEMP_LAPSE_RATE = 0.0065  # K/m
GRAVITY = 9.80665  # m/s^2
GAS_CONSTANT_DRY_AIR = 287.05287  # J/(kg.K)

# Sea level pressure policy limits (hPa)
PRESSURE_HARD_MIN = 850.
PRESSURE_HARD_MAX = 1100.
PRESSURE_WARNING_MIN = 920.
PRESSURE_WARNING_MAX = 1060.

# Conversion factors
INHG_TO_HPA = 33.86389
FEET_TO_METERS = 0.3048
METERS_PER_NM = 1852.

ERROR_MESSAGES = {
    'INVALID_PRESSURE': 'Please enter a valid positive pressure value.',
    'PRESSURE_OUT_OF_RANGE': 'Pressure outside realistic limits (850-1100 hPa).',
    'ANTIPODAL_POINTS': (
        'Calculation failed: Points are nearly antipodal (opposite sides of Earth).'
    ),
    'CONVERGENCE_FAILED': 'Calculation failed: Formula did not converge.',
    'NEGATIVE_RANGE': 'Range cannot be negative.',
    'INVALID_NUMBER': 'Must be a number.',
    'LATITUDE_RANGE': 'Latitude must be between -90° and +90°.',
    'LONGITUDE_RANGE': 'Longitude must be between -180° and +180°.',
}
