
from ssection.core.preprocessing.geometry.objects import (
    SectionPolygon, SectionProperties
)


__all__ = [
    'SectionPolygon',
    'SectionProperties',
]
