"""
lars — Linear Algebra for Rendering and Simulation

Фиксированные 2D/3D векторы и матрицы 2×2/3×3 без тяжёлых зависимостей:
арифметика через операторы, скалярное/векторное произведение, нормализация,
определитель и обращение.

Example:
    >>> from lars import Mat2, Vec2
    >>> Mat2(1.0, 2.0, 3.0, 4.0) * Vec2(1.0, 1.0)
    Vec2(x=3.0, y=7.0)
"""

import logging

# Numerical core
from lars.core import (
    DEFAULT_TOLERANCE,
    EPS_MAT_EQ,
    EPS_UNIT_LENGTH,
    UNIT_LENGTH_TOLERANCE,
    LinalgDomainViolation,
    SingularMatrixViolation,
    ToleranceConfig,
    ZeroMagnitudeViolation,
)

# Matrices
from lars.matrix import Mat2, Mat3

# Vectors
from lars.vector import Colour, Point2D, Point3D, Scalar, Vec2, Vec3

__all__ = [
    # Vectors
    "Scalar",
    "Vec2",
    "Vec3",
    "Point2D",
    "Point3D",
    "Colour",
    # Matrices
    "Mat2",
    "Mat3",
    # Exceptions
    "LinalgDomainViolation",
    "SingularMatrixViolation",
    "ZeroMagnitudeViolation",
    # Tolerance
    "EPS_MAT_EQ",
    "EPS_UNIT_LENGTH",
    "DEFAULT_TOLERANCE",
    "UNIT_LENGTH_TOLERANCE",
    "ToleranceConfig",
]

# Библиотека не настраивает логирование сама: без явной конфигурации
# со стороны приложения записи не выводятся.
logging.getLogger(__name__).addHandler(logging.NullHandler())
