"""
Pure ICAO Standard Atmosphere calculations for QNH altitude correction.

Constants as published by ICAO in the Manual of the ICAO Standard Atmosphere, Doc 7488/3.
"""

__all__ = [
    'AltitudeUnit', 'AtmosphereResult', 'ICAO_PRESSURE_LIMITS', 'ISA',
    'PressureLimits', 'PressureUnit', 'StandardAtmosphere',
    'calculate_atmosphere', 'normalize_pressure', 'qnh_correction_feet',
]

from typing import Dict, Literal, Tuple

from atseptools._const import (
    ERROR_MESSAGES, GAS_CONSTANT_DRY_AIR, GRAVITY, PRESSURE_HARD_MAX, PRESSURE_HARD_MIN,
    PRESSURE_WARNING_MAX, PRESSURE_WARNING_MIN, STANDARD_PRESSURE_HPA, STANDARD_TEMP_K,
    TEMP_LAPSE_RATE
)
from atseptools.conversion import feet_to_meters, inhg_to_hpa
from atseptools.exceptions import InvalidInput, OutOfRange
from atseptools.utils.functions import is_finite_number, round_to_int
from atseptools.utils.logging import LOGGER, warn_once

PressureUnit = Literal['hPa', 'inHg']
AltitudeUnit = Literal['FL', 'feet', 'meters']

_TO_HPA = {
    'hPa': lambda x: x,
    'inHg': inhg_to_hpa,
}

# Output unit -> (conversion from feet, result tag)
_FROM_FEET: Dict[str, Tuple] = {
    'FL': (lambda x: x / 100, 'FL'),
    'feet': (lambda x: x, 'ft'),
    'meters': (feet_to_meters, 'm'),
}


class StandardAtmosphere:
    """
    Parameters of the troposphere layer of a standard atmosphere.

    Args:
        pressure_hpa:
            Sea level pressure, in hPa

        temperature_k:
            Sea level temperature, in Kelvin

        lapse_rate:
            Temperature lapse rate, in K/m

        gravity:
            Gravitational acceleration, in m/s^2

        gas_constant:
            Specific gas constant for dry air, in J/(kg.K)
    """

    __slots__ = ('_pressure_hpa', '_temperature_k', '_lapse_rate', '_gravity', '_gas_constant')

    def __init__(
        self,
        pressure_hpa: float,
        temperature_k: float,
        lapse_rate: float,
        gravity: float,
        gas_constant: float,
    ):
        object.__setattr__(self, '_pressure_hpa', pressure_hpa)
        object.__setattr__(self, '_temperature_k', temperature_k)
        object.__setattr__(self, '_lapse_rate', lapse_rate)
        object.__setattr__(self, '_gravity', gravity)
        object.__setattr__(self, '_gas_constant', gas_constant)

    def __setattr__(self, key, value):
        raise AttributeError('StandardAtmosphere parameters are read-only')

    def __repr__(self):
        return (
            f'<StandardAtmosphere({self.pressure_hpa} hPa, {self.temperature_k} K, '
            f'{self.lapse_rate} K/m)>'
        )

    @property
    def pressure_hpa(self) -> float:
        return self._pressure_hpa

    @property
    def temperature_k(self) -> float:
        return self._temperature_k

    @property
    def lapse_rate(self) -> float:
        return self._lapse_rate

    @property
    def gravity(self) -> float:
        return self._gravity

    @property
    def gas_constant(self) -> float:
        return self._gas_constant

    @property
    def exponent(self) -> float:
        """Rs * L / g (~0.190263 for ISA)"""
        return self._gas_constant * self._lapse_rate / self._gravity

    @property
    def scale_height_feet(self) -> float:
        """T0 / L, expressed in feet"""
        return self._temperature_k / self._lapse_rate / feet_to_meters(1.)


class PressureLimits:
    """
    Plausibility bounds for a sea level pressure, in hPa.

    Pressures outside [hard_min, hard_max] are rejected. Pressures below warning_min or
    above warning_max are accepted but flagged.
    """

    __slots__ = ('hard_min', 'hard_max', 'warning_min', 'warning_max')

    def __init__(
        self,
        hard_min: float,
        hard_max: float,
        warning_min: float,
        warning_max: float,
    ):
        if not hard_min <= warning_min <= warning_max <= hard_max:
            raise ValueError(
                'Pressure limits must satisfy hard_min <= warning_min <= warning_max <= hard_max'
            )

        object.__setattr__(self, 'hard_min', hard_min)
        object.__setattr__(self, 'hard_max', hard_max)
        object.__setattr__(self, 'warning_min', warning_min)
        object.__setattr__(self, 'warning_max', warning_max)

    def __setattr__(self, key, value):
        raise AttributeError('PressureLimits are read-only')

    def __repr__(self):
        return (
            f'<PressureLimits([{self.hard_min}, {self.hard_max}], '
            f'warning outside [{self.warning_min}, {self.warning_max}])>'
        )

    def check(self, pressure_hpa: float) -> bool:
        """
        Validates a pressure against the limits.

        Returns:
            True if the pressure is within the hard limits but outside the warning band

        Raises:
            OutOfRange: the pressure is outside the hard limits
        """
        if pressure_hpa < self.hard_min or pressure_hpa > self.hard_max:
            raise OutOfRange(ERROR_MESSAGES['PRESSURE_OUT_OF_RANGE'], pressure_hpa)

        return pressure_hpa < self.warning_min or pressure_hpa > self.warning_max


ISA = StandardAtmosphere(
    STANDARD_PRESSURE_HPA,
    STANDARD_TEMP_K,
    TEMP_LAPSE_RATE,
    GRAVITY,
    GAS_CONSTANT_DRY_AIR,
)

ICAO_PRESSURE_LIMITS = PressureLimits(
    PRESSURE_HARD_MIN,
    PRESSURE_HARD_MAX,
    PRESSURE_WARNING_MIN,
    PRESSURE_WARNING_MAX,
)


class AtmosphereResult:
    """
    Result of a QNH correction.

    Args:
        correction:
            The altitude correction, rounded in the output unit. Negative when the
            pressure is below standard (true altitude below indicated).

        pressure_altitude:
            The altitude at which standard pressure equals the input pressure,
            rounded in the output unit

        unit:
            The output unit tag; one of 'FL', 'ft', 'm'

        warning:
            True if the pressure is plausible but unusual
    """

    __slots__ = ('correction', 'pressure_altitude', 'unit', 'warning')

    error = False

    def __init__(self, correction: int, pressure_altitude: int, unit: str, warning: bool = False):
        self.correction = correction
        self.pressure_altitude = pressure_altitude
        self.unit = unit
        self.warning = warning

    def __eq__(self, other):
        if not isinstance(other, AtmosphereResult):
            return False

        return (
            self.correction == other.correction and
            self.pressure_altitude == other.pressure_altitude and
            self.unit == other.unit and
            self.warning == other.warning
        )

    def __repr__(self):
        return (
            f'<AtmosphereResult(correction={self.correction} {self.unit}, '
            f'pressure_altitude={self.pressure_altitude} {self.unit}, warning={self.warning})>'
        )


def normalize_pressure(raw_value: float, input_unit: PressureUnit) -> float:
    """
    Converts a raw pressure reading to hPa.

    Raises:
        InvalidInput: the value is not a finite positive number, or the unit is unknown
    """
    if not is_finite_number(raw_value) or raw_value <= 0:
        raise InvalidInput(ERROR_MESSAGES['INVALID_PRESSURE'])

    if input_unit not in _TO_HPA:
        raise InvalidInput(
            f"Unknown pressure unit '{input_unit}'. Options: {list(_TO_HPA.keys())}"
        )

    return _TO_HPA[input_unit](raw_value)


def qnh_correction_feet(pressure_hpa: float, atmosphere: StandardAtmosphere = ISA) -> float:
    """
    Unrounded altitude correction, in feet, for a sea level pressure in hPa
    (barometric formula).
    """
    ratio = pressure_hpa / atmosphere.pressure_hpa
    return (ratio ** atmosphere.exponent - 1) * atmosphere.scale_height_feet


def calculate_atmosphere(
    raw_value: float,
    input_unit: PressureUnit,
    output_unit: AltitudeUnit,
    atmosphere: StandardAtmosphere = ISA,
    limits: PressureLimits = ICAO_PRESSURE_LIMITS,
) -> AtmosphereResult:
    """
    Calculates the altitude correction and pressure altitude for a QNH setting.

    Args:
        raw_value:
            The pressure reading

        input_unit:
            The unit of raw_value; 'hPa' or 'inHg'

        output_unit:
            The unit of the results; 'FL', 'feet' or 'meters'

        atmosphere:
            (Default ISA) The standard atmosphere model

        limits:
            (Default ICAO_PRESSURE_LIMITS) The plausibility bounds for the pressure

    Returns:
        AtmosphereResult

    Raises:
        InvalidInput: the pressure is not a finite positive number, or a unit is unknown
        OutOfRange: the pressure, in hPa, is outside the hard limits
    """
    if output_unit not in _FROM_FEET:
        raise InvalidInput(
            f"Unknown output unit '{output_unit}'. Options: {list(_FROM_FEET.keys())}"
        )

    pressure_hpa = normalize_pressure(raw_value, input_unit)
    warning = limits.check(pressure_hpa)
    if warning:
        warn_once('Abnormal sea level pressure; results flagged with a warning.')

    correction_feet = qnh_correction_feet(pressure_hpa, atmosphere)
    LOGGER.debug('QNH %.2f hPa -> correction %.3f ft', pressure_hpa, correction_feet)

    convert, tag = _FROM_FEET[output_unit]
    return AtmosphereResult(
        correction=round_to_int(convert(correction_feet)),
        pressure_altitude=round_to_int(convert(-correction_feet)),
        unit=tag,
        warning=warning,
    )
