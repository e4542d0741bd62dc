"""
Module for unit conversions
"""
__all__ = [
    'convert_from_meters', 'convert_to_meters', 'feet_to_meters',
    'hpa_to_inhg', 'inhg_to_hpa', 'meters_to_feet',
]

from atseptools._const import FEET_TO_METERS, INHG_TO_HPA, METERS_PER_NM

_METERS_PER_UNIT = {
    'm': 1.,
    'km': 1000.,
    'mi': 1609.344,
    'ft': FEET_TO_METERS,
    'nmi': METERS_PER_NM,
    'yd': 0.9144,
}


def _meters_per_unit(unit: str) -> float:
    unit = unit.lower()
    if unit not in _METERS_PER_UNIT:
        raise ValueError(
            f"Unknown distance unit '{unit}'. Options: {list(_METERS_PER_UNIT.keys())}"
        )

    return _METERS_PER_UNIT[unit]


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _meters_per_unit(unit)


def convert_from_meters(meters: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit. Accepts the same units as
    convert_to_meters.
    """
    return meters / _meters_per_unit(unit)


def feet_to_meters(feet: float) -> float:
    return feet * FEET_TO_METERS


def meters_to_feet(meters: float) -> float:
    return meters / FEET_TO_METERS


def inhg_to_hpa(inhg: float) -> float:
    """Inches of mercury to hectopascals"""
    return inhg * INHG_TO_HPA


def hpa_to_inhg(hpa: float) -> float:
    """Hectopascals to inches of mercury"""
    return hpa / INHG_TO_HPA
