
from ssection.core.preprocessing import geometry
from ssection.core.preprocessing.geometry import *  # noqa: F401, F403
from ssection.core.preprocessing.vector import (
    Point3,
    Vector3,
    add,
    cross,
    divide,
    dot,
    length,
    negate,
    normalize,
    point_from_vector,
    scale,
    subtract,
    vector_from_point,
)


__all__ = [
    'add',
    'cross',
    'divide',
    'dot',
    'geometry',
    'length',
    'negate',
    'normalize',
    'Point3',
    'point_from_vector',
    'scale',
    'SectionPolygon',
    'SectionProperties',
    'subtract',
    'Vector3',
    'vector_from_point',
]
