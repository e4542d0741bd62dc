"""
Reference ellipsoid definitions
"""

__all__ = ['Ellipsoid', 'WGS84']

from atseptools._const import WGS84_A, WGS84_B, WGS84_F


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-axes and flattening.

    Args:
        a:
            The semi-major (equatorial) axis, in meters

        b:
            The semi-minor (polar) axis, in meters

        f:
            The flattening, (a - b) / a
    """

    __slots__ = ('_a', '_b', '_f')

    def __init__(self, a: float, b: float, f: float):
        if not a >= b > 0:
            raise ValueError(f'Invalid ellipsoid axes: a={a}, b={b}')

        object.__setattr__(self, '_a', float(a))
        object.__setattr__(self, '_b', float(b))
        object.__setattr__(self, '_f', float(f))

    def __setattr__(self, key, value):
        raise AttributeError('Ellipsoid parameters are read-only')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (self.a, self.b, self.f) == (other.a, other.b, other.f)

    def __hash__(self):
        return hash((self.a, self.b, self.f))

    def __repr__(self):
        return f'<Ellipsoid(a={self.a}, b={self.b}, f=1/{1 / self.f:.9f})>'

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def f(self) -> float:
        return self._f

    @property
    def second_eccentricity_sq(self) -> float:
        """(a² - b²) / b², used to derive u² in Vincenty's formulae"""
        return (self._a ** 2 - self._b ** 2) / (self._b ** 2)


WGS84 = Ellipsoid(WGS84_A, WGS84_B, WGS84_F)
