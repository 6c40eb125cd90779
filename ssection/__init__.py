from ssection.core import (
    DegenerateVector, GeometryError, OpenContour, Point3, SectionPolygon,
    SectionProperties, UndefinedGeometry, Vector3, local_axes
)

__all__ = [
    'DegenerateVector',
    'GeometryError',
    'local_axes',
    'OpenContour',
    'Point3',
    'SectionPolygon',
    'SectionProperties',
    'UndefinedGeometry',
    'Vector3',
]
