import pytest
from atseptools.conversion import *


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1.0, 'km', 1000.0),
        (1.0, 'mi', 1609.344),
        (1.0, 'ft', 0.3048),
        (1.0, 'nmi', 1852.0),
        (1.0, 'NMI', 1852.0),
        (1.0, 'yd', 0.9144),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    with pytest.raises(ValueError):
        convert_to_meters(1.0, 'furlong')


def test_convert_from_meters():
    assert convert_from_meters(1852.0, 'nmi') == pytest.approx(1.0)
    assert convert_from_meters(343_556.0, 'km') == pytest.approx(343.556)

    with pytest.raises(ValueError):
        convert_from_meters(1.0, 'furlong')


def test_altitude_conversions():
    assert feet_to_meters(1000.) == pytest.approx(304.8)
    assert meters_to_feet(304.8) == pytest.approx(1000.)


def test_pressure_conversions():
    assert inhg_to_hpa(1.0) == pytest.approx(33.86389)
    assert hpa_to_inhg(1013.25) == pytest.approx(29.9213, abs=1e-4)
