"""
Mat3 — матрица 3×3

Небольшая самодостаточная матрица 3×3 для линейных преобразований
пространства. В паре с Vec3.

Хранение построчное (row-major):

    | a  b  c |
    | d  e  f |
    | g  h  i |

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable value type (frozen dataclass)
2. Равенство с толерантностью DEFAULT_TOLERANCE (abs < 1e-9) покомпонентно.
   Отношение нетранзитивно, поэтому Mat3 не хешируется
   Порядок (<, <=, >, >=) лексикографический по a..i, без толерантности
3. inverse() при det == 0.0 (точно) → SingularMatrixViolation
4. Умножение матриц некоммутативно

ФОРМУЛЫ:
    det(M) = a(ei - fh) - b(di - fg) + c(dh - eg)

             1        | ei - fh   ch - bi   bf - ce |
    M⁻¹ = -------  x  | fg - di   ai - cg   cd - af |
           det(M)     | dh - eg   bg - ah   ae - bd |
"""

from dataclasses import astuple, dataclass
from typing import ClassVar

from lars.core.numerical_safeguards import (
    ensure_invertible,
    ieee_divide,
    is_scalar,
)
from lars.core.tolerance import DEFAULT_TOLERANCE, ToleranceConfig
from lars.vector.scalar import Scalar
from lars.vector.vector3 import Vec3


# =============================================================================
# MAT3
# =============================================================================


@dataclass(frozen=True, eq=False)
class Mat3:
    """
    Матрица 3×3 из float.

    Examples:
        >>> m = Mat3(1.0, 2.0, 3.0, 3.0, 2.0, 1.0, 2.0, 1.0, 3.0)
        >>> m.determinant()
        -12.0
        >>> m.inverse() == Mat3(-5.0, 3.0, 4.0, 7.0, 3.0, -8.0, 1.0, -3.0, 4.0) / 12.0
        True
    """

    # Первая строка
    a: Scalar
    b: Scalar
    c: Scalar
    # Вторая строка
    d: Scalar
    e: Scalar
    f: Scalar
    # Третья строка
    g: Scalar
    h: Scalar
    i: Scalar

    IDENTITY: ClassVar["Mat3"]
    ZERO: ClassVar["Mat3"]

    def determinant(self) -> float:
        """Определитель: разложение по первой строке."""
        return (
            self.a * (self.e * self.i - self.f * self.h)
            - self.b * (self.d * self.i - self.f * self.g)
            + self.c * (self.d * self.h - self.e * self.g)
        )

    def inverse(self) -> "Mat3":
        """
        Обратная матрица через присоединённую (adjugate).

        Raises:
            SingularMatrixViolation: если определитель точно равен 0.0
        """
        inv_det = 1.0 / ensure_invertible(self.determinant())

        return Mat3(
            (self.e * self.i - self.f * self.h) * inv_det,
            (self.c * self.h - self.b * self.i) * inv_det,
            (self.b * self.f - self.c * self.e) * inv_det,
            (self.f * self.g - self.d * self.i) * inv_det,
            (self.a * self.i - self.c * self.g) * inv_det,
            (self.c * self.d - self.a * self.f) * inv_det,
            (self.d * self.h - self.e * self.g) * inv_det,
            (self.b * self.g - self.a * self.h) * inv_det,
            (self.a * self.e - self.b * self.d) * inv_det,
        )

    def transpose(self) -> "Mat3":
        return Mat3(
            self.a, self.d, self.g,
            self.b, self.e, self.h,
            self.c, self.f, self.i,
        )

    def rows(self) -> tuple[tuple[Scalar, Scalar, Scalar], ...]:
        """Строки матрицы: ((a, b, c), (d, e, f), (g, h, i))."""
        return (
            (self.a, self.b, self.c),
            (self.d, self.e, self.f),
            (self.g, self.h, self.i),
        )

    def approx_eq(self, other: "Mat3", tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
        """Покомпонентное сравнение с явно заданной толерантностью."""
        if not isinstance(other, Mat3):
            raise TypeError(f"Cannot compare Mat3 with {type(other).__name__}")
        return tolerance.all_close(astuple(self), astuple(other))

    # -------------------------------------------------------------------------
    # Равенство и порядок
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return DEFAULT_TOLERANCE.all_close(astuple(self), astuple(other))

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return astuple(self) < astuple(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return astuple(self) <= astuple(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return astuple(self) > astuple(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return astuple(self) >= astuple(other)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Mat3":
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(x + y for x, y in zip(astuple(self), astuple(other))))

    def __sub__(self, other: object) -> "Mat3":
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(x - y for x, y in zip(astuple(self), astuple(other))))

    def __mul__(self, other: object) -> "Mat3 | Vec3":
        if isinstance(other, Mat3):
            return Mat3(
                self.a * other.a + self.b * other.d + self.c * other.g,
                self.a * other.b + self.b * other.e + self.c * other.h,
                self.a * other.c + self.b * other.f + self.c * other.i,
                self.d * other.a + self.e * other.d + self.f * other.g,
                self.d * other.b + self.e * other.e + self.f * other.h,
                self.d * other.c + self.e * other.f + self.f * other.i,
                self.g * other.a + self.h * other.d + self.i * other.g,
                self.g * other.b + self.h * other.e + self.i * other.h,
                self.g * other.c + self.h * other.f + self.i * other.i,
            )
        if isinstance(other, Vec3):
            return Vec3(
                self.a * other.x + self.b * other.y + self.c * other.z,
                self.d * other.x + self.e * other.y + self.f * other.z,
                self.g * other.x + self.h * other.y + self.i * other.z,
            )
        if is_scalar(other):
            return Mat3(*(x * other for x in astuple(self)))
        return NotImplemented

    def __rmul__(self, other: object) -> "Mat3":
        if not is_scalar(other):
            return NotImplemented
        return Mat3(*(other * x for x in astuple(self)))

    def __truediv__(self, other: object) -> "Mat3":
        if not is_scalar(other):
            return NotImplemented
        return Mat3(*(ieee_divide(x, other) for x in astuple(self)))


Mat3.IDENTITY = Mat3(
    1.0, 0.0, 0.0,
    0.0, 1.0, 0.0,
    0.0, 0.0, 1.0,
)
Mat3.ZERO = Mat3(
    0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,
    0.0, 0.0, 0.0,
)
