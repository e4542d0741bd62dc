import pytest
from pytest import approx

from atseptools import AtmosphereResult, InvalidInput, OutOfRange, calculate_atmosphere
from atseptools.atmosphere import *


def test_isa():
    assert ISA.pressure_hpa == 1013.25
    assert ISA.exponent == approx(0.190263, abs=1e-6)

    with pytest.raises(AttributeError):
        ISA.gravity = 9.81


def test_standard_pressure():
    for output_unit, tag in (('feet', 'ft'), ('FL', 'FL'), ('meters', 'm')):
        result = calculate_atmosphere(1013.25, 'hPa', output_unit)
        assert result == AtmosphereResult(0, 0, tag, False)
        assert result.error is False


def test_low_pressure():
    result = calculate_atmosphere(1000, 'hPa', 'feet')
    assert result.correction == -364
    assert result.pressure_altitude == 364
    assert result.unit == 'ft'
    assert not result.warning

    result = calculate_atmosphere(1000, 'hPa', 'meters')
    assert result.correction == -111
    assert result.pressure_altitude == 111
    assert result.unit == 'm'

    result = calculate_atmosphere(1000, 'hPa', 'FL')
    assert result.correction == -4
    assert result.pressure_altitude == 4
    assert result.unit == 'FL'


def test_high_pressure():
    result = calculate_atmosphere(1030, 'hPa', 'feet')
    assert result.correction > 0
    assert result.pressure_altitude == -result.correction
    assert not result.warning


def test_inhg():
    result = calculate_atmosphere(29.92, 'inHg', 'FL')
    assert result.correction == 0
    assert result.pressure_altitude == 0
    assert result.unit == 'FL'

    result = calculate_atmosphere(29.92, 'inHg', 'feet')
    assert result.correction == -1


def test_warning_band():
    assert calculate_atmosphere(900, 'hPa', 'feet').warning
    assert calculate_atmosphere(850, 'hPa', 'feet').warning
    assert calculate_atmosphere(1080, 'hPa', 'feet').warning
    assert calculate_atmosphere(1100, 'hPa', 'feet').warning

    assert not calculate_atmosphere(920, 'hPa', 'feet').warning
    assert not calculate_atmosphere(1060, 'hPa', 'feet').warning


def test_out_of_range():
    with pytest.raises(OutOfRange) as exc:
        calculate_atmosphere(700, 'hPa', 'feet')

    assert exc.value.pressure_hpa == 700
    assert '850-1100' in str(exc.value)

    with pytest.raises(OutOfRange):
        calculate_atmosphere(1100.1, 'hPa', 'feet')

    # 35 inHg ~ 1185 hPa
    with pytest.raises(OutOfRange):
        calculate_atmosphere(35, 'inHg', 'feet')


def test_invalid_input():
    for value in (0, -1013.25, float('nan'), float('inf'), None, 'abc', True):
        with pytest.raises(InvalidInput):
            calculate_atmosphere(value, 'hPa', 'feet')

    with pytest.raises(InvalidInput):
        calculate_atmosphere(1013.25, 'mbar', 'feet')

    with pytest.raises(InvalidInput):
        calculate_atmosphere(1013.25, 'hPa', 'yards')


def test_custom_limits():
    limits = PressureLimits(800, 1200, 900, 1100)
    result = calculate_atmosphere(820, 'hPa', 'feet', limits=limits)
    assert result.warning
    assert result.correction < 0

    with pytest.raises(ValueError):
        PressureLimits(900, 1100, 850, 1060)


def test_qnh_correction_feet():
    assert qnh_correction_feet(1013.25) == 0.
    assert qnh_correction_feet(1000) == approx(-363.8, abs=0.1)


def test_normalize_pressure():
    assert normalize_pressure(29.92, 'inHg') == approx(1013.2076, abs=1e-4)
    assert normalize_pressure(1000, 'hPa') == 1000


def test_abnormal_pressure_logged(caplog, monkeypatch):
    import atseptools.utils.logging

    monkeypatch.setattr(atseptools.utils.logging, '_WARNINGS', set())

    calculate_atmosphere(1000, 'hPa', 'feet')
    assert 'Abnormal sea level pressure' not in caplog.text

    calculate_atmosphere(880, 'hPa', 'feet')
    calculate_atmosphere(1090, 'hPa', 'feet')
    assert caplog.text.count('Abnormal sea level pressure') == 1
