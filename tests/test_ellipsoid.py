import pytest
from pytest import approx

from atseptools import Ellipsoid, WGS84


def test_wgs84():
    assert WGS84.a == 6378137.0
    assert WGS84.b == 6356752.314245
    assert WGS84.f == 1 / 298.257223563
    assert WGS84.second_eccentricity_sq == approx(0.00673949674, abs=1e-11)


def test_ellipsoid_read_only():
    with pytest.raises(AttributeError):
        WGS84.a = 1.

    with pytest.raises(AttributeError):
        WGS84._a = 1.


def test_ellipsoid_eq():
    assert Ellipsoid(6378137.0, 6356752.314245, 1 / 298.257223563) == WGS84
    assert Ellipsoid(6371000., 6371000., 0.) != WGS84
    assert WGS84 != 'WGS84'
    assert hash(Ellipsoid(6371000., 6371000., 0.)) == hash(Ellipsoid(6371000., 6371000., 0.))


def test_ellipsoid_invalid():
    with pytest.raises(ValueError):
        Ellipsoid(6356752., 6378137., 0.)

    with pytest.raises(ValueError):
        Ellipsoid(1., 0., 1.)
