
__all__ = [
    'GeometryError',
    'DegenerateVector',
    'OpenContour',
    'UndefinedGeometry',
]


class GeometryError(ValueError):
    """Base class of all errors raised by the geometric primitives.

    Derives from :any:`ValueError` so that callers already guarding
    against invalid input values keep working.
    """


class DegenerateVector(GeometryError, ZeroDivisionError):
    """A direction was requested from a vector of zero length.

    Raised by :py:func:`~ssection.core.preprocessing.vector.normalize` and
    by :py:func:`~ssection.core.utils.local_axes` if no unique direction can
    be derived from the input.
    """


class OpenContour(GeometryError):
    """The boundary of a :any:`SectionPolygon` does not close, i.e. the
    first and the last point are not coordinate-equal."""


class UndefinedGeometry(GeometryError):
    """The section properties of a contour are not defined, because the
    contour intersects itself or encloses no area."""
