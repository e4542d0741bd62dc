"""
Representation of a specific point on the WGS-84 ellipsoid
"""

__all__ = ['GeodeticPoint', 'wrap_longitude']

import math
from typing import Tuple

from atseptools._const import ERROR_MESSAGES
from atseptools.exceptions import InvalidInput
from atseptools.utils.functions import validate_numbers


def wrap_longitude(lon: float) -> float:
    """Brings a longitude in degrees back into [-180, 180] across the antimeridian"""
    while not -180 <= lon <= 180:
        lon = lon - 360 if lon > 180 else lon + 360

    return lon


class GeodeticPoint:
    """
    Representation of a geodetic position (i.e., a lat/lon pair), in degrees.

    Points are immutable; equality and hashing use both coordinates.

    Args:
        latitude:
            The latitude in degrees, between -90 and 90 inclusive

        longitude:
            The longitude in degrees, between -180 and 180 inclusive
    """

    __slots__ = ('_latitude', '_longitude')

    @validate_numbers
    def __init__(self, latitude: float, longitude: float):
        if not math.isfinite(latitude) or not math.isfinite(longitude):
            raise InvalidInput(ERROR_MESSAGES['INVALID_NUMBER'])

        if not -90 <= latitude <= 90:
            raise InvalidInput(ERROR_MESSAGES['LATITUDE_RANGE'])

        if not -180 <= longitude <= 180:
            raise InvalidInput(ERROR_MESSAGES['LONGITUDE_RANGE'])

        object.__setattr__(self, '_latitude', latitude)
        object.__setattr__(self, '_longitude', longitude)

    def __setattr__(self, key, value):
        raise AttributeError('GeodeticPoint is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeodeticPoint({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def to_float(self) -> Tuple[float, float]:
        """Returns the point as a (latitude, longitude) tuple of degrees"""
        return self._latitude, self._longitude

    def to_radians(self) -> Tuple[float, float]:
        """Returns the point as a (latitude, longitude) tuple of radians"""
        return math.radians(self._latitude), math.radians(self._longitude)
