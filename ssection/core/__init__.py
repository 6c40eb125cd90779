
from ssection.core import preprocessing
from ssection.core.errors import (
    DegenerateVector, GeometryError, OpenContour, UndefinedGeometry
)
from ssection.core.preprocessing import *  # noqa: F401, F403
from ssection.core.utils import local_axes

__all__ = [
    'DegenerateVector',
    'GeometryError',
    'local_axes',
    'OpenContour',
    'preprocessing',
    'UndefinedGeometry',
]
