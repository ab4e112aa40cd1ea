"""
Vec2 — двумерный вектор

Простой 2D вектор для геометрии, графики и игровой логики:
сложение, вычитание, масштабирование, скалярное и псевдовекторное
произведение, нормализация.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable value type (frozen dataclass): все операции возвращают новый Vec2
2. Равенство точное (без epsilon); для приближённого — approx_eq()
3. cross() возвращает СКАЛЯР (z-компоненту 3D-вложения), не вектор
4. Деление на скаляр 0.0 даёт ±inf/NaN, исключения нет
5. normalize() нулевого вектора → ZeroMagnitudeViolation

ФОРМУЛЫ:
    dot(a, b)   = a.x*b.x + a.y*b.y
    cross(a, b) = a.x*b.y - a.y*b.x
    mag(a)      = sqrt(a.x² + a.y²)
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
# VEC2
# =============================================================================


@dataclass(frozen=True, order=True)
class Vec2:
    """
    Двумерный вектор.

    Поддерживает +, -, унарный -, умножение на скаляр в обоих порядках,
    покомпонентное умножение (Vec2 * Vec2), деление на скаляр.
    Сравнение <, > лексикографическое по (x, y).

    Examples:
        >>> a = Vec2(3.0, 4.0)
        >>> a.mag()
        5.0
        >>> 2.0 * Vec2(1.0, 2.0)
        Vec2(x=2.0, y=4.0)
    """

    x: Scalar = 0.0
    y: Scalar = 0.0

    ZERO: ClassVar["Vec2"]
    ONE: ClassVar["Vec2"]
    UNIT_X: ClassVar["Vec2"]
    UNIT_Y: ClassVar["Vec2"]

    @classmethod
    def default(cls) -> "Vec2":
        """Нулевой вектор (0.0, 0.0)."""
        return cls.ZERO

    # -------------------------------------------------------------------------
    # Длина и произведения
    # -------------------------------------------------------------------------

    def mag(self) -> float:
        """
        Длина (евклидова норма) вектора.

        Examples:
            >>> Vec2(3.0, 4.0).mag()
            5.0
        """
        return math.sqrt(self.x * self.x + self.y * self.y)

    def mag_sq(self) -> float:
        """
        Квадрат длины вектора (без sqrt).

        Examples:
            >>> Vec2(3.0, 4.0).mag_sq()
            25.0
        """
        return self.x * self.x + self.y * self.y

    def dot(self, other: "Vec2") -> float:
        """
        Скалярное произведение.

        Examples:
            >>> Vec2(1.0, 2.0).dot(Vec2(3.0, 4.0))
            11.0
        """
        return (self.x * other.x) + (self.y * other.y)

    def cross(self, other: "Vec2") -> Scalar:
        """
        Псевдовекторное (2D cross) произведение.

        В отличие от 3D, возвращает скаляр: знаковую площадь
        параллелограмма, натянутого на два вектора (z-компонента
        произведения их 3D-вложений).

        Examples:
            >>> Vec2(1.0, 0.0).cross(Vec2(0.0, 1.0))
            1.0
            >>> Vec2(0.0, 1.0).cross(Vec2(1.0, 0.0))
            -1.0
        """
        return self.x * other.y - self.y * other.x

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[float], float]) -> "Vec2":
        """
        Применение функции к каждой компоненте.

        Examples:
            >>> Vec2(1.0, 2.0).map(lambda c: c * c)
            Vec2(x=1.0, y=4.0)
        """
        return Vec2(f(self.x), f(self.y))

    def normalize(self) -> "Vec2":
        """
        Вектор единичной длины того же направления.

        Raises:
            ZeroMagnitudeViolation: если длина вектора равна 0.0

        Examples:
            >>> Vec2(3.0, 0.0).normalize()
            Vec2(x=1.0, y=0.0)
        """
        m = ensure_nonzero_magnitude(self.mag(), self)
        return self.map(lambda c: c / m)

    def is_unit(self, tolerance: ToleranceConfig = UNIT_LENGTH_TOLERANCE) -> bool:
        """Проверка единичной длины (по умолчанию с точностью EPS_UNIT_LENGTH)."""
        return tolerance.close(self.mag(), 1.0)

    # -------------------------------------------------------------------------
    # Точки
    # -------------------------------------------------------------------------

    def dist(self, other: "Vec2") -> float:
        """
        Беззнаковое расстояние между двумя точками.

        Examples:
            >>> Point2D(1.0, 0.0).dist(Point2D(0.0, 0.0))
            1.0
        """
        return abs((self - other).mag())

    def dist_sq(self, other: "Vec2") -> float:
        """
        Квадрат расстояния между двумя точками.

        Examples:
            >>> Point2D(2.0, 0.0).dist_sq(Point2D(0.0, 0.0))
            4.0
        """
        return abs((self - other).mag_sq())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def approx_eq(self, other: "Vec2", tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
        """Покомпонентное сравнение с абсолютной толерантностью."""
        if not isinstance(other, Vec2):
            raise TypeError(f"Cannot compare Vec2 with {type(other).__name__}")
        return tolerance.all_close(tuple(self), tuple(other))

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: object) -> "Vec2":
        # Vec2 * Vec2 — покомпонентно (Hadamard)
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if is_scalar(other):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Vec2":
        if not is_scalar(other):
            return NotImplemented
        return Vec2(other * self.x, other * self.y)

    def __truediv__(self, other: object) -> "Vec2":
        if not is_scalar(other):
            return NotImplemented
        return Vec2(ieee_divide(self.x, other), ieee_divide(self.y, other))

    def __rtruediv__(self, other: object) -> "Vec2":
        if not is_scalar(other):
            return NotImplemented
        return Vec2(ieee_divide(other, self.x), ieee_divide(other, self.y))

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.UNIT_X = Vec2(1.0, 0.0)
Vec2.UNIT_Y = Vec2(0.0, 1.0)


# Точка на плоскости. Псевдоним Vec2: позиция, а не смещение.
Point2D = Vec2
