import math

import pytest
from pytest import approx

from atseptools import GeodeticPoint, InvalidInput
from atseptools.coordinates import wrap_longitude


def test_point_init():
    p = GeodeticPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    # Bounds are inclusive
    assert GeodeticPoint(90, 180).to_float() == (90., 180.)
    assert GeodeticPoint(-90, -180).to_float() == (-90., -180.)


def test_point_init_invalid():
    with pytest.raises(InvalidInput):
        GeodeticPoint(90.1, 0.)

    with pytest.raises(InvalidInput):
        GeodeticPoint(-91, 0.)

    with pytest.raises(InvalidInput):
        GeodeticPoint(0., 180.5)

    with pytest.raises(InvalidInput):
        GeodeticPoint(0., -361)

    with pytest.raises(InvalidInput):
        GeodeticPoint(float('nan'), 0.)

    with pytest.raises(InvalidInput):
        GeodeticPoint(0., float('inf'))

    # Not a number at all; strings and booleans are not coerced
    with pytest.raises(InvalidInput):
        GeodeticPoint('north', 0.)

    with pytest.raises(InvalidInput):
        GeodeticPoint('1.0', 0.)

    with pytest.raises(InvalidInput):
        GeodeticPoint(True, 0.)

    with pytest.raises(InvalidInput):
        GeodeticPoint(None, 0.)


def test_point_immutable():
    p = GeodeticPoint(1., 2.)
    with pytest.raises(AttributeError):
        p.latitude = 5.

    with pytest.raises(AttributeError):
        p.foo = 'bar'


def test_point_eq_hash():
    assert GeodeticPoint(0., 0.) == GeodeticPoint(0., 0.)
    assert GeodeticPoint(0., 0.) != GeodeticPoint(1., 0.)
    assert GeodeticPoint(0., 0.) != (0., 0.)

    points = [
        GeodeticPoint(0., 0.),
        GeodeticPoint(0., 0.),
        GeodeticPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeodeticPoint(1., 1.) in set(points)


def test_point_repr():
    assert repr(GeodeticPoint(1., 0.)) == '<GeodeticPoint(1.0, 0.0)>'


def test_point_to_radians():
    lat, lon = GeodeticPoint(90., -180.).to_radians()
    assert lat == approx(math.pi / 2)
    assert lon == approx(-math.pi)


def test_wrap_longitude():
    assert wrap_longitude(0.) == 0.
    assert wrap_longitude(180.) == 180.
    assert wrap_longitude(181.) == -179.
    assert wrap_longitude(-181.) == 179.
    assert wrap_longitude(541.) == -179.
