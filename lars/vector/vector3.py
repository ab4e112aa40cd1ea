"""
Vec3 — трёхмерный вектор

3D вектор для компьютерной графики, трассировки лучей и физики:
арифметика, скалярное и векторное произведение, нормализация,
именованные константы. Тот же тип используется для точек (Point3D)
и цветов (Colour).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable value type (frozen dataclass): все операции возвращают новый Vec3
2. Равенство точное (без epsilon); для приближённого — approx_eq()
3. cross() возвращает вектор, перпендикулярный обоим (правило правой руки)
4. Деление на скаляр 0.0 даёт ±inf/NaN, исключения нет
5. normalize() нулевого вектора → ZeroMagnitudeViolation
6. Vec3() и Vec3.default() равны Vec3.ZERO

ФОРМУЛЫ:
    cross(a, b) = (a.y*b.z - a.z*b.y,
                   a.z*b.x - a.x*b.z,
                   a.x*b.y - a.y*b.x)
"""

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from lars.core.numerical_safeguards import (
    ensure_nonzero_magnitude,
    ieee_divide,
    is_scalar,
)
from lars.core.tolerance import DEFAULT_TOLERANCE, UNIT_LENGTH_TOLERANCE, ToleranceConfig
from lars.vector.scalar import Scalar


# =============================================================================
# VEC3
# =============================================================================


@dataclass(frozen=True, order=True)
class Vec3:
    """
    Трёхмерный вектор.

    Поддерживает +, -, унарный -, умножение на скаляр в обоих порядках,
    покомпонентное умножение (удобно для смешивания цветов), деление
    на скаляр. str() даёт форму (x, y, z).

    Examples:
        >>> a = Vec3(1.0, 0.0, 0.0)
        >>> b = Vec3(0.0, 1.0, 0.0)
        >>> a.cross(b)
        Vec3(x=0.0, y=0.0, z=1.0)
        >>> a.dot(b)
        0.0
    """

    x: Scalar = 0.0
    y: Scalar = 0.0
    z: Scalar = 0.0

    # Нулевой вектор (0, 0, 0)
    ZERO: ClassVar["Vec3"]
    # Единичный по всем осям (1, 1, 1)
    ONE: ClassVar["Vec3"]
    # Базисные орты
    UNIT_X: ClassVar["Vec3"]
    UNIT_Y: ClassVar["Vec3"]
    UNIT_Z: ClassVar["Vec3"]

    @classmethod
    def default(cls) -> "Vec3":
        """Нулевой вектор (0.0, 0.0, 0.0)."""
        return cls.ZERO

    # -------------------------------------------------------------------------
    # Длина и произведения
    # -------------------------------------------------------------------------

    def mag(self) -> float:
        """
        Длина (евклидова норма) вектора.

        Examples:
            >>> Vec3(3.0, 4.0, 0.0).mag()
            5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def mag_sq(self) -> float:
        """Квадрат длины вектора (без sqrt)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: "Vec3") -> float:
        """
        Скалярное произведение.

        Examples:
            >>> Vec3(1.0, 2.0, 3.0).dot(Vec3(4.0, -5.0, 6.0))
            12.0
        """
        return (self.x * other.x) + (self.y * other.y) + (self.z * other.z)

    def cross(self, other: "Vec3") -> "Vec3":
        """
        Векторное произведение.

        Результат перпендикулярен обоим векторам, его длина равна площади
        параллелограмма, направление по правилу правой руки.
        """
        x = (self.y * other.z) - (self.z * other.y)
        y = (self.z * other.x) - (self.x * other.z)
        z = (self.x * other.y) - (self.y * other.x)
        return Vec3(x, y, z)

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[float], float]) -> "Vec3":
        """Применение функции к каждой компоненте (x, y, z)."""
        return Vec3(f(self.x), f(self.y), f(self.z))

    def normalize(self) -> "Vec3":
        """
        Вектор единичной длины того же направления.

        Каждая компонента делится на длину вектора.

        Raises:
            ZeroMagnitudeViolation: если длина вектора равна 0.0

        Examples:
            >>> Vec3(3.0, 0.0, 0.0).normalize()
            Vec3(x=1.0, y=0.0, z=0.0)
        """
        m = ensure_nonzero_magnitude(self.mag(), self)
        return self.map(lambda c: c / m)

    def is_unit(self, tolerance: ToleranceConfig = UNIT_LENGTH_TOLERANCE) -> bool:
        return tolerance.close(self.mag(), 1.0)

    # -------------------------------------------------------------------------
    # Точки
    # -------------------------------------------------------------------------

    def dist(self, other: "Vec3") -> float:
        """Беззнаковое расстояние между двумя точками."""
        return abs((self - other).mag())

    def dist_sq(self, other: "Vec3") -> float:
        """Квадрат расстояния между двумя точками."""
        return abs((self - other).mag_sq())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def approx_eq(self, other: "Vec3", tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
        """Покомпонентное сравнение с абсолютной толерантностью."""
        if not isinstance(other, Vec3):
            raise TypeError(f"Cannot compare Vec3 with {type(other).__name__}")
        return tolerance.all_close(tuple(self), tuple(other))

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: object) -> "Vec3":
        # Vec3 * Vec3 — покомпонентно (Hadamard)
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if is_scalar(other):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec3":
        if not is_scalar(other):
            return NotImplemented
        return Vec3(other * self.x, other * self.y, other * self.z)

    def __truediv__(self, other: object) -> "Vec3":
        if not is_scalar(other):
            return NotImplemented
        return Vec3(
            ieee_divide(self.x, other),
            ieee_divide(self.y, other),
            ieee_divide(self.z, other),
        )

    def __rtruediv__(self, other: object) -> "Vec3":
        if not is_scalar(other):
            return NotImplemented
        return Vec3(
            ieee_divide(other, self.x),
            ieee_divide(other, self.y),
            ieee_divide(other, self.z),
        )

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.UNIT_X = Vec3(1.0, 0.0, 0.0)
Vec3.UNIT_Y = Vec3(0.0, 1.0, 0.0)
Vec3.UNIT_Z = Vec3(0.0, 0.0, 1.0)


# RGB цвет, компоненты по соглашению в [0.0, 1.0] (не проверяется).
Colour = Vec3

# Точка в пространстве: позиция, а не смещение.
Point3D = Vec3
