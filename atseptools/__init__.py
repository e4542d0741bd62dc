
from atseptools._version import __version__  # noqa: F401
from atseptools.utils.logging import LOGGER
from atseptools.coordinates import GeodeticPoint
from atseptools.ellipsoid import Ellipsoid, WGS84
from atseptools.exceptions import AtsepToolsError, ConvergenceError, InvalidInput, OutOfRange
from atseptools.geodesic import (
    DirectResult, InverseResult, direct, inverse, vincenty_direct, vincenty_inverse
)
from atseptools.atmosphere import AtmosphereResult, calculate_atmosphere

__all__ = [
    'AtmosphereResult',
    'AtsepToolsError',
    'ConvergenceError',
    'DirectResult',
    'Ellipsoid',
    'GeodeticPoint',
    'InvalidInput',
    'InverseResult',
    'OutOfRange',
    'WGS84',
    'calculate_atmosphere',
    'direct',
    'inverse',
    'vincenty_direct',
    'vincenty_inverse',
    'LOGGER',
]
