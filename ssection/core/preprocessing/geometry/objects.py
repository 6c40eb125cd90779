
from dataclasses import asdict, dataclass
from functools import cached_property
from numbers import Real
from typing import Iterator, Sequence, Tuple

import numpy as np

from shapely.geometry import LinearRing
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.polygon import orient

from ssection.core.defaults import AREA_RTOL
from ssection.core.errors import OpenContour, UndefinedGeometry
from ssection.core.logger_mixin import LoggerMixin, table_properties


@dataclass(frozen=True)
class SectionProperties:
    r"""
    Geometric properties of a cross-section.

    Parameters
    ----------
    iz : float
        Second moment of area of the z-coordinate,
        :math:`I_z = \int_A z^2 \, \mathrm{d}A`.
    iy : float
        Second moment of area of the y-coordinate,
        :math:`I_y = \int_A y^2 \, \mathrm{d}A`.
    j : float
        Product moment of area :math:`\int_A y z \, \mathrm{d}A`. It takes
        the third position of the property array, which is why it is named
        ``j``.
    a : float
        Cross-sectional area.
    ay, az : float
        Shear areas in y- and z-direction. Both are taken as the full
        area ``a``.
    """

    iz: float
    iy: float
    j: float
    a: float
    ay: float
    az: float

    HEADERS = ('Iz', 'Iy', 'J', 'A', 'Ay', 'Az')

    def as_array(self) -> np.ndarray:
        """The properties in the order ``[Iz, Iy, J, A, Ay, Az]``."""
        return np.array(
            [self.iz, self.iy, self.j, self.a, self.ay, self.az]
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def table(self, label: str = '') -> str:
        return table_properties(
            [self.as_array()], self.HEADERS, labels=[label]
        )


class SectionPolygon(LoggerMixin):
    r"""
    Closed contour of a cross-section in the local y-z plane.

    Parameters
    ----------
    points : sequence of tuple of float
        The (y, z) coordinates of the contour in traversal order. The
        first and the last point must be identical. Both clockwise and
        counterclockwise contours are accepted.
    debug : bool, optional
        Enables debug logging. Default is False.

    Raises
    ------
    ValueError
        If a point is not a pair of real numbers.
    OpenContour
        If no points are given or the first and the last point differ.

    Notes
    -----
    The points are validated once and exposed through read-only
    attributes, so derived values are cached. The contour is assumed to be
    simple; whether it is, is checked by :py:meth:`section_properties`.

    Examples
    --------
    >>> p = SectionPolygon([(0, 0), (4, 0), (4, 2), (0, 2), (0, 0)])
    >>> p.section_properties().as_array()
    array([10.66666667, 42.66666667, 16.        ,  8.        ,  8.        ,
            8.        ])
    """

    def __init__(
        self, points: Sequence[Tuple[float, float]], debug: bool = False
    ):
        LoggerMixin.__init__(self, debug=debug)
        self.debug = debug
        self._points = self._validate_points(points)
        self._y, self._z = self._extract_coord()

    def _validate_points(self, points) -> Tuple[Tuple[float, float], ...]:
        self.logger.debug("Validating %d contour points.", len(points))
        validated = []
        for i, pt in enumerate(points):
            if (isinstance(pt, (str, bytes)) or not hasattr(pt, '__len__')
                    or len(pt) != 2):
                self.logger.error("Point #%d is malformed: %s", i, pt)
                raise ValueError(
                    f"Point #{i} is not a valid (y, z) pair: {pt}"
                )
            if not all(isinstance(c, Real) for c in pt):
                self.logger.error("Point #%d is not numeric: %s", i, pt)
                raise ValueError(
                    f"Coordinates of point #{i} must be numeric: {pt}"
                )
            validated.append((float(pt[0]), float(pt[1])))

        if not validated:
            self.logger.error("Empty contour.")
            raise OpenContour("A contour needs at least one point.")
        if validated[0] != validated[-1]:
            self.logger.error(
                "Contour is open: %s != %s", validated[0], validated[-1]
            )
            raise OpenContour(
                "The first and last point of a contour must be the same to "
                "close the shape."
            )
        return tuple(validated)

    def _extract_coord(self) -> Tuple[np.ndarray, np.ndarray]:
        """Read-only coordinate arrays (y, z) of all points, including the
        closing point."""
        y = np.array([p[0] for p in self._points], dtype=float)
        z = np.array([p[1] for p in self._points], dtype=float)
        y.setflags(write=False)
        z.setflags(write=False)
        return y, z

    @property
    def points(self) -> Tuple[Tuple[float, float], ...]:
        """The validated (y, z) points, including the closing point."""
        return self._points

    @property
    def y(self) -> np.ndarray:
        return self._y

    @property
    def z(self) -> np.ndarray:
        return self._z

    def __repr__(self) -> str:
        return f"SectionPolygon(points={self._points!r})"

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, i) -> Tuple[float, float]:
        return self._points[i]

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(self._points)

    @cached_property
    def signed_area(self) -> float:
        r"""Area by the shoelace formula, without taking the absolute value.

        .. math::
            A_s = \frac{1}{2} \sum_{i=0}^{n-1} (y_i z_{i+1} - y_{i+1} z_i)

        Positive for counterclockwise, negative for clockwise contours.
        """
        y0, y1, z0, z1 = self._edges()
        return 0.5 * float(np.sum(y0 * z1 - y1 * z0))

    @property
    def is_counterclockwise(self) -> bool:
        return self.signed_area > 0

    @cached_property
    def is_simple(self) -> bool:
        """Whether the contour is free of self-intersections, as reported
        by Shapely."""
        return bool(LinearRing(self._points).is_simple)

    @cached_property
    def width(self) -> float:
        """Extent of the contour in y-direction."""
        return float(self._y.max() - self._y.min())

    @cached_property
    def height(self) -> float:
        """Extent of the contour in z-direction."""
        return float(self._z.max() - self._z.min())

    def _edges(self):
        return self._y[:-1], self._y[1:], self._z[:-1], self._z[1:]

    def section_properties(self) -> SectionProperties:
        r"""
        Computes the section properties about the origin of the input
        coordinates in one pass over the edges of the contour.

        Returns
        -------
        SectionProperties
            :math:`[I_z, I_y, J, A, A_y, A_z]` with :math:`A_y = A_z = A`.

        Raises
        ------
        UndefinedGeometry
            If the contour encloses no area or intersects itself.

        Notes
        -----
        By Green's theorem, each area integral becomes a sum over the edges
        :math:`(y_i, z_i) \to (y_{i+1}, z_{i+1})`:

        .. math::
            a = \sum (y_i z_{i+1} - y_{i+1} z_i)

            i_z = \sum (y_i - y_{i+1})(z_{i+1} + z_i)(z_{i+1}^2 + z_i^2)

            i_y = \sum (z_{i+1} - z_i)(y_{i+1} + y_i)(y_{i+1}^2 + y_i^2)

            i_{yz} = \sum (y_i - y_{i+1})(3 y_{i+1} z_{i+1}^2
            + y_i z_{i+1}^2 + 2 y_{i+1} z_i z_{i+1} + 2 y_i z_i z_{i+1}
            + y_{i+1} z_i^2 + 3 y_i z_i^2)

        and :math:`I_z = i_z/12 = \int_A z^2 \, \mathrm{d}A`,
        :math:`I_y = i_y/12 = \int_A y^2 \, \mathrm{d}A`,
        :math:`J = i_{yz}/24`, :math:`A = a/2`.

        All four sums change sign with the traversal direction. For
        clockwise contours (:math:`a < 0`) all values are negated, so the
        result does not depend on the winding.
        """
        self._validate_geometry()

        y0, y1, z0, z1 = self._edges()
        self.logger.debug("Integrating over %d edges.", len(y0))

        a = np.sum(y0 * z1 - y1 * z0)
        iz = np.sum((y0 - y1) * (z1 + z0) * (z1 ** 2 + z0 ** 2))
        iy = np.sum((z1 - z0) * (y1 + y0) * (y1 ** 2 + y0 ** 2))
        iyz = np.sum(
            (y0 - y1) * (
                3 * y1 * z1 ** 2 + y0 * z1 ** 2 + 2 * y1 * z0 * z1
                + 2 * y0 * z0 * z1 + y1 * z0 ** 2 + 3 * y0 * z0 ** 2
            )
        )

        values = np.array(
            [iz / 12, iy / 12, iyz / 24, a / 2, a / 2, a / 2]
        )
        if a < 0:
            self.logger.debug("Clockwise contour, negating results.")
            values = -values

        props = SectionProperties(*(float(v) for v in values))
        self.logger.debug("Section properties:\n%s", props.table('origin'))
        self.logger.info("Section properties computed.")
        return props

    def _validate_geometry(self) -> None:
        if abs(self.signed_area) <= AREA_RTOL * self.width * self.height:
            self.logger.error("Contour encloses no area.")
            raise UndefinedGeometry(
                "The contour encloses no area; it is collinear or has fewer "
                "than three distinct points."
            )
        if not self.is_simple:
            self.logger.error("Contour intersects itself.")
            raise UndefinedGeometry(
                "The contour must not intersect itself."
            )

    @cached_property
    def static_moment(self) -> Tuple[float, float]:
        r"""
        First moments of area :math:`(S_y, S_z)` about the axes through
        the origin.

        .. math::
            S_y = \int_A z \, \mathrm{d}A
            = \frac{1}{6} \sum (y_i z_{i+1} - y_{i+1} z_i)(z_i + z_{i+1})

            S_z = \int_A y \, \mathrm{d}A
            = \frac{1}{6} \sum (y_i z_{i+1} - y_{i+1} z_i)(y_i + y_{i+1})

        Like the area, both are independent of the winding.
        """
        y0, y1, z0, z1 = self._edges()
        cross = y0 * z1 - y1 * z0
        sign = -1.0 if self.signed_area < 0 else 1.0
        return (
            sign * float(np.dot(cross, z0 + z1)) / 6,
            sign * float(np.dot(cross, y0 + y1)) / 6,
        )

    @cached_property
    def center_of_mass_y(self) -> float:
        r""":math:`\bar{y} = S_z / A`

        Raises
        ------
        UndefinedGeometry
            If the contour encloses no area or intersects itself.
        """
        self._validate_geometry()
        return self.static_moment[1] / abs(self.signed_area)

    @cached_property
    def center_of_mass_z(self) -> float:
        r""":math:`\bar{z} = S_y / A`

        Raises
        ------
        UndefinedGeometry
            If the contour encloses no area or intersects itself.
        """
        self._validate_geometry()
        return self.static_moment[0] / abs(self.signed_area)

    def centroidal_properties(self) -> SectionProperties:
        r"""
        Section properties about axes through the centroid.

        Notes
        -----
        The values of :py:meth:`section_properties` are shifted with the
        parallel axis theorem (Steiner's theorem):

        .. math::
            I_{z,c} = I_z - A \bar{z}^2, \quad
            I_{y,c} = I_y - A \bar{y}^2, \quad
            J_c = J - A \bar{y} \bar{z}
        """
        p = self.section_properties()
        yc, zc = self.center_of_mass_y, self.center_of_mass_z
        props = SectionProperties(
            iz=p.iz - p.a * zc ** 2,
            iy=p.iy - p.a * yc ** 2,
            j=p.j - p.a * yc * zc,
            a=p.a, ay=p.ay, az=p.az,
        )
        self.logger.debug(
            "Centroid at (%s, %s):\n%s", yc, zc, props.table('centroid')
        )
        return props

    def reversed(self) -> 'SectionPolygon':
        """The same contour traversed in the opposite direction."""
        return SectionPolygon(self._points[::-1], debug=self.debug)

    @property
    def shapely_polygon(self) -> ShapelyPolygon:
        """The contour as a counterclockwise Shapely polygon."""
        return orient(ShapelyPolygon(shell=self._points), sign=1.0)

    def to_dict(self) -> dict:
        """Plain data holding the ordered points as the only field."""
        return {'points': [list(p) for p in self._points]}

    @classmethod
    def from_dict(cls, data: dict, debug: bool = False) -> 'SectionPolygon':
        return cls([tuple(p) for p in data['points']], debug=debug)
