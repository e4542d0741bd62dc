# atseptools/geodesic.py
"""
Geodesic calculations on the reference ellipsoid using Vincenty's formulae.

References:
    Vincenty, T. (1975). "Direct and Inverse Solutions of Geodesics on the
    Ellipsoid with application of nested equations". Survey Review. 23 (176): 88-93.
"""

__all__ = [
    'DirectResult', 'InverseResult',
    'vincenty_direct', 'vincenty_inverse', 'direct', 'inverse',
    'bearing_degrees', 'destination_point', 'distance_meters', 'geodesic_waypoints',
]

import math
from typing import List, Tuple

import numpy as np

from atseptools._const import (
    ERROR_MESSAGES, VINCENTY_A_SERIES, VINCENTY_B_SERIES,
    VINCENTY_CONVERGENCE, VINCENTY_MAX_ITERATIONS
)
from atseptools.coordinates import GeodeticPoint, wrap_longitude
from atseptools.ellipsoid import Ellipsoid, WGS84
from atseptools.exceptions import ConvergenceError, InvalidInput
from atseptools.utils.functions import is_finite_number, validate_numbers
from atseptools.utils.logging import LOGGER


class InverseResult:
    """
    Solution of the inverse geodesic problem.

    Args:
        distance:
            The geodesic distance, in meters

        initial_bearing:
            The forward azimuth at the first point, in degrees [0, 360)

        is_coincident:
            True if both points are the same location (distance and bearing are then 0)
    """

    __slots__ = ('distance', 'initial_bearing', 'is_coincident')

    def __init__(self, distance: float, initial_bearing: float, is_coincident: bool = False):
        self.distance = distance
        self.initial_bearing = initial_bearing
        self.is_coincident = is_coincident

    def __eq__(self, other):
        if not isinstance(other, InverseResult):
            return False

        return (
            self.distance == other.distance and
            self.initial_bearing == other.initial_bearing and
            self.is_coincident == other.is_coincident
        )

    def __repr__(self):
        return (
            f'<InverseResult(distance={self.distance}, '
            f'initial_bearing={self.initial_bearing}, is_coincident={self.is_coincident})>'
        )

    @classmethod
    def coincident(cls) -> 'InverseResult':
        return cls(0.0, 0.0, True)


class DirectResult:
    """Solution of the direct geodesic problem"""

    __slots__ = ('destination', )

    def __init__(self, destination: GeodeticPoint):
        self.destination = destination

    def __eq__(self, other):
        if not isinstance(other, DirectResult):
            return False

        return self.destination == other.destination

    def __repr__(self):
        return f'<DirectResult({self.destination.latitude}, {self.destination.longitude})>'

    @property
    def lat(self) -> float:
        return self.destination.latitude

    @property
    def lon(self) -> float:
        return self.destination.longitude


# -------------------------------------------------------------------------
# Shared Vincenty terms
# -------------------------------------------------------------------------

def _reduced_latitude(lat: float, ellipsoid: Ellipsoid) -> Tuple[float, float, float]:
    """Returns (tanU, sinU, cosU) for a latitude in radians"""
    tanU = (1 - ellipsoid.f) * math.tan(lat)
    cosU = 1 / math.sqrt(1 + tanU ** 2)
    return tanU, tanU * cosU, cosU


def _series_coefficients(cosSqAlpha: float, ellipsoid: Ellipsoid) -> Tuple[float, float]:
    """Vincenty's A and B coefficients (eq. 3 and 4)"""
    uSq = cosSqAlpha * ellipsoid.second_eccentricity_sq

    a_denom, a1, a2, a3, a4 = VINCENTY_A_SERIES
    b_denom, b1, b2, b3, b4 = VINCENTY_B_SERIES
    A = 1 + uSq / a_denom * (a1 + uSq * (a2 + uSq * (a3 + a4 * uSq)))
    B = uSq / b_denom * (b1 + uSq * (b2 + uSq * (b3 + b4 * uSq)))
    return A, B


def _delta_sigma(B: float, sinSigma: float, cosSigma: float, cos2SigmaM: float) -> float:
    """eq. 6"""
    return B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )


def _lambda_correction(
    f: float,
    cosSqAlpha: float,
    sinAlpha: float,
    sigma: float,
    sinSigma: float,
    cosSigma: float,
    cos2SigmaM: float,
) -> float:
    """(1 - C) * f * sin(alpha) * (...), the difference between lambda and L (eq. 10, 11)"""
    C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
    return (1 - C) * f * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
    )


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def vincenty_inverse(
    start: GeodeticPoint,
    end: GeodeticPoint,
    ellipsoid: Ellipsoid = WGS84,
) -> InverseResult:
    """
    Calculate the geodesic distance and initial bearing between two points using
    Vincenty's inverse formula.

    Args:
        start:
            The starting GeodeticPoint

        end:
            The ending GeodeticPoint

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        InverseResult

    Raises:
        ConvergenceError: the points are nearly antipodal and lambda failed to converge
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()
    f = ellipsoid.f

    _, sinU1, cosU1 = _reduced_latitude(lat1, ellipsoid)
    _, sinU2, cosU2 = _reduced_latitude(lat2, ellipsoid)
    L = lon2 - lon1
    Lambda = L

    for iteration in range(1, VINCENTY_MAX_ITERATIONS + 1):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return InverseResult.coincident()

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18; equatorial lines have cos^2(alpha) == 0
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            cos2SigmaM = 0

        Lambda_prev = Lambda
        Lambda = L + _lambda_correction(
            f, cosSqAlpha, sinAlpha, sigma, sinSigma, cosSigma, cos2SigmaM
        )

        if abs(Lambda - Lambda_prev) <= VINCENTY_CONVERGENCE:
            break
    else:
        LOGGER.debug(
            'Inverse formula did not converge after %s iterations (%r -> %r)',
            VINCENTY_MAX_ITERATIONS, start, end
        )
        raise ConvergenceError(
            ERROR_MESSAGES['ANTIPODAL_POINTS'],
            operation='inverse',
            iterations=VINCENTY_MAX_ITERATIONS,
        )

    LOGGER.debug('Inverse formula converged after %s iterations', iteration)

    A, B = _series_coefficients(cosSqAlpha, ellipsoid)
    deltaSigma = _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)
    distance = ellipsoid.b * A * (sigma - deltaSigma)

    # eq. 20
    alpha1 = math.atan2(
        cosU2 * math.sin(Lambda),
        cosU1 * sinU2 - sinU1 * cosU2 * math.cos(Lambda)
    )

    return InverseResult(distance, (math.degrees(alpha1) + 360) % 360)


def vincenty_direct(
    start: GeodeticPoint,
    distance: float,
    bearing_degrees: float,
    ellipsoid: Ellipsoid = WGS84,
) -> DirectResult:
    """
    Calculate the destination point using Vincenty's direct formula. The final
    bearing is not computed.

    Args:
        start:
            The starting GeodeticPoint

        distance:
            The distance of travel, in meters

        bearing_degrees:
            The initial bearing, in degrees clockwise from true north

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        DirectResult

    Raises:
        InvalidInput: the distance is negative, or either number is not finite
        ConvergenceError: sigma failed to converge
    """
    if not is_finite_number(distance) or not is_finite_number(bearing_degrees):
        raise InvalidInput(ERROR_MESSAGES['INVALID_NUMBER'])

    if distance < 0:
        raise InvalidInput(ERROR_MESSAGES['NEGATIVE_RANGE'])

    if distance == 0:
        return DirectResult(start)

    lat1, lon1 = start.to_radians()
    alpha1 = math.radians(bearing_degrees)
    f, b = ellipsoid.f, ellipsoid.b

    sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)
    tanU1, sinU1, cosU1 = _reduced_latitude(lat1, ellipsoid)

    sigma1 = math.atan2(tanU1, cosAlpha1)
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    A, B = _series_coefficients(cosSqAlpha, ellipsoid)

    sigma = distance / (b * A)

    for iteration in range(1, VINCENTY_MAX_ITERATIONS + 1):
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        deltaSigma = _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)

        sigma_prev = sigma
        sigma = distance / (b * A) + deltaSigma
        if abs(sigma - sigma_prev) <= VINCENTY_CONVERGENCE:
            break
    else:
        LOGGER.debug(
            'Direct formula did not converge after %s iterations (%r, %s m, %s deg)',
            VINCENTY_MAX_ITERATIONS, start, distance, bearing_degrees
        )
        raise ConvergenceError(
            ERROR_MESSAGES['CONVERGENCE_FAILED'],
            operation='direct',
            iterations=VINCENTY_MAX_ITERATIONS,
        )

    LOGGER.debug('Direct formula converged after %s iterations', iteration)

    sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
    cos2SigmaM = math.cos(2 * sigma1 + sigma)

    # eq. 8
    tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
    lat2 = math.atan2(
        sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
        (1 - f) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
    )

    # eq. 9
    lambda_val = math.atan2(
        sinSigma * sinAlpha1,
        cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
    )
    L = lambda_val - _lambda_correction(
        f, cosSqAlpha, sinAlpha, sigma, sinSigma, cosSigma, cos2SigmaM
    )
    lon2 = lon1 + L

    return DirectResult(
        GeodeticPoint(
            max(-90., min(90., math.degrees(lat2))),
            wrap_longitude(math.degrees(lon2))
        )
    )


# -------------------------------------------------------------------------
# Flat entry points
# -------------------------------------------------------------------------

@validate_numbers
def inverse(lat1: float, lon1: float, lat2: float, lon2: float) -> InverseResult:
    """
    Distance and initial bearing from (lat1, lon1) to (lat2, lon2) on WGS84.
    All angles are in degrees.
    """
    return vincenty_inverse(GeodeticPoint(lat1, lon1), GeodeticPoint(lat2, lon2))


@validate_numbers
def direct(lat1: float, lon1: float, distance_meters: float, bearing_degrees: float) -> DirectResult:
    """
    Destination reached by travelling distance_meters from (lat1, lon1) along the
    initial bearing bearing_degrees on WGS84.
    """
    return vincenty_direct(GeodeticPoint(lat1, lon1), distance_meters, bearing_degrees)


# -------------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------------

def distance_meters(start: GeodeticPoint, end: GeodeticPoint) -> float:
    """Geodesic distance between two points, in meters"""
    return vincenty_inverse(start, end).distance


def bearing_degrees(start: GeodeticPoint, end: GeodeticPoint) -> float:
    """Initial bearing (forward azimuth) from start to end, in degrees [0, 360)"""
    return vincenty_inverse(start, end).initial_bearing


def destination_point(
    start: GeodeticPoint,
    bearing_degrees: float,
    distance: float,
) -> GeodeticPoint:
    """Destination reached from start along bearing_degrees after distance meters"""
    return vincenty_direct(start, distance, bearing_degrees).destination


def geodesic_waypoints(
    start: GeodeticPoint,
    end: GeodeticPoint,
    count: int,
    ellipsoid: Ellipsoid = WGS84,
) -> List[GeodeticPoint]:
    """
    Evenly spaced points along the geodesic from start to end, both included.

    Args:
        start:
            The first GeodeticPoint

        end:
            The last GeodeticPoint

        count:
            The total number of points to return; at least 2

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        List[GeodeticPoint]
    """
    if count < 2:
        raise ValueError('At least two waypoints are required.')

    leg = vincenty_inverse(start, end, ellipsoid=ellipsoid)
    if leg.is_coincident:
        return [start] * count

    waypoints = [start]
    for offset in np.linspace(0., leg.distance, count)[1:-1]:
        waypoints.append(
            vincenty_direct(
                start, float(offset), leg.initial_bearing, ellipsoid=ellipsoid
            ).destination
        )
    waypoints.append(end)

    return waypoints
