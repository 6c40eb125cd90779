
import math
from dataclasses import dataclass, replace
from numbers import Real
from typing import Iterator, Union

import numpy as np

from ssection.core.defaults import DISPLAY_EPS
from ssection.core.errors import DegenerateVector

__all__ = [
    'Point3',
    'Vector3',
    'add',
    'cross',
    'divide',
    'dot',
    'length',
    'negate',
    'normalize',
    'point_from_vector',
    'scale',
    'subtract',
    'vector_from_point',
]


@dataclass(frozen=True)
class Point3:
    """A location in 3D space.

    Parameters
    ----------
    x, y, z : :any:`float`
        Coordinates of the point.

    Notes
    -----
    A point shares its three components with :any:`Vector3`, but has the
    role of a location instead of a direction or displacement. Use
    :py:func:`vector_from_point` and :py:func:`point_from_vector` to switch
    between both roles.
    """

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'z': self.z}

    @classmethod
    def from_dict(cls, data: dict) -> 'Point3':
        return cls(float(data['x']), float(data['y']), float(data['z']))


@dataclass(frozen=True)
class Vector3:
    r"""An immutable vector in 3D space.

    Parameters
    ----------
    x, y, z : :any:`float`
        Components of the vector.

    Notes
    -----
    The usual arithmetic is available as operators

    >>> a, b = Vector3(1, 0, 0), Vector3(0, 1, 0)
    >>> a + b
    Vector3(x=1, y=1, z=0)
    >>> a - b
    Vector3(x=1, y=-1, z=0)
    >>> -a
    Vector3(x=-1, y=0, z=0)
    >>> 2 * a
    Vector3(x=2, y=0, z=0)
    >>> a / 2
    Vector3(x=0.5, y=0.0, z=0.0)

    and as free functions of this module (:py:func:`add`,
    :py:func:`scale`, ...). Since the type is frozen, "changing" a component
    with :py:meth:`with_x` and friends returns a new vector.
    """

    x: float
    y: float
    z: float

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> 'Vector3':
        return cls(x, y, z)

    @classmethod
    def from_point(cls, point: Point3) -> 'Vector3':
        """Reinterprets the location ``point`` as a vector from the
        origin."""
        return cls(point.x, point.y, point.z)

    def to_point(self) -> Point3:
        """Reinterprets this vector as a location."""
        return Point3(self.x, self.y, self.z)

    @classmethod
    def zero(cls) -> 'Vector3':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def i(cls) -> 'Vector3':
        """Unit vector in x-direction."""
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def j(cls) -> 'Vector3':
        """Unit vector in y-direction."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def k(cls) -> 'Vector3':
        """Unit vector in z-direction."""
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_i(cls) -> 'Vector3':
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def negative_j(cls) -> 'Vector3':
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def negative_k(cls) -> 'Vector3':
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def unit_scale(cls) -> 'Vector3':
        """The vector (1, 1, 1)."""
        return cls(1.0, 1.0, 1.0)

    def with_x(self, x: float) -> 'Vector3':
        return replace(self, x=x)

    def with_y(self, y: float) -> 'Vector3':
        return replace(self, y=y)

    def with_z(self, z: float) -> 'Vector3':
        return replace(self, z=z)

    @property
    def length(self) -> float:
        r"""Euclidean norm :math:`\sqrt{x^2 + y^2 + z^2}`."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: 'Vector3') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3') -> 'Vector3':
        r"""Right-handed cross product ``self`` :math:`\times` ``other``.

        Examples
        --------
        >>> Vector3.i().cross(Vector3.j())
        Vector3(x=0.0, y=0.0, z=1.0)
        """
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def unit(self) -> 'Vector3':
        """Returns the vector of length one pointing in the same direction.

        Raises
        ------
        DegenerateVector
            If the vector has zero length.

        Examples
        --------
        >>> Vector3(3, 4, 0).unit()
        Vector3(x=0.6, y=0.8, z=0.0)
        """
        n = self.length
        if n == 0:
            raise DegenerateVector(
                "Can not normalize a vector whose length is zero."
            )
        return self / n

    def as_array(self) -> np.ndarray:
        """The components as a numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=float)

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'z': self.z}

    @classmethod
    def from_dict(cls, data: dict) -> 'Vector3':
        return cls(float(data['x']), float(data['y']), float(data['z']))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, c):
        if not isinstance(c, Real):
            return NotImplemented
        return Vector3(self.x * c, self.y * c, self.z * c)

    __rmul__ = __mul__

    def __truediv__(self, c):
        if not isinstance(c, Real):
            return NotImplemented
        if c == 0:
            raise ZeroDivisionError("Can not divide a vector by zero.")
        return Vector3(self.x / c, self.y / c, self.z / c)

    def __str__(self):
        return ", ".join(_display(c) for c in self)


def _display(value: float) -> str:
    if value != 0 and abs(value) < DISPLAY_EPS:
        return "~0"
    return str(value)


def vector_from_point(point: Point3) -> Vector3:
    return Vector3.from_point(point)


def point_from_vector(vector: Vector3) -> Point3:
    return vector.to_point()


def add(a: Vector3, b: Vector3) -> Vector3:
    return a + b


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return a - b


def negate(v: Vector3) -> Vector3:
    return -v


def scale(v: Union[Vector3, float], c: Union[Vector3, float]) -> Vector3:
    """Multiplies a vector by a scalar. The arguments may be given in either
    order, i.e. ``scale(v, c) == scale(c, v)``."""
    if isinstance(v, Vector3):
        return v * c
    return c * v


def divide(v: Vector3, c: float) -> Vector3:
    """Divides every component of ``v`` by ``c``.

    Raises
    ------
    ZeroDivisionError
        If ``c`` is zero.
    """
    return v / c


def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def length(v: Vector3) -> float:
    return v.length


def normalize(v: Vector3) -> Vector3:
    """See :py:meth:`Vector3.unit`."""
    return v.unit()
