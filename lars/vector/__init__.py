"""
Vector types: Vec2, Vec3 and their semantic aliases.
"""

from lars.vector.scalar import Scalar
from lars.vector.vector2 import Point2D, Vec2
from lars.vector.vector3 import Colour, Point3D, Vec3

__all__ = [
    "Scalar",
    "Vec2",
    "Point2D",
    "Vec3",
    "Point3D",
    "Colour",
]
