"""
Mat2 — матрица 2×2

Небольшая самодостаточная матрица 2×2 для линейных преобразований
плоскости: сложение, вычитание, умножение на скаляр, вектор и матрицу,
определитель и обращение. В паре с Vec2.

Хранение построчное (row-major):

    | a  b |
    | c  d |

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Immutable value type (frozen dataclass)
2. Равенство точное (без epsilon), в отличие от Mat3
3. inverse() при det == 0.0 (точно) → SingularMatrixViolation
4. Умножение матриц некоммутативно: порядок операндов важен
5. Порядок (<, <=, >, >=) лексикографический по (a, b, c, d)

ФОРМУЛЫ:
    det(M)  = ad - bc
    M⁻¹     = (1/det(M)) * | d  -b |
                           | -c  a |
"""

from dataclasses import astuple, dataclass
from typing import ClassVar

from lars.core.numerical_safeguards import ensure_invertible, ieee_divide, is_scalar
from lars.core.tolerance import DEFAULT_TOLERANCE, ToleranceConfig
from lars.vector.scalar import Scalar
from lars.vector.vector2 import Vec2


# =============================================================================
# MAT2
# =============================================================================


@dataclass(frozen=True, order=True)
class Mat2:
    """
    Матрица 2×2 из float.

    Examples:
        >>> m = Mat2(1.0, 2.0, 3.0, 4.0)
        >>> m * Vec2(1.0, 1.0)
        Vec2(x=3.0, y=7.0)
    """

    # Верхний левый
    a: Scalar
    # Верхний правый
    b: Scalar
    # Нижний левый
    c: Scalar
    # Нижний правый
    d: Scalar

    IDENTITY: ClassVar["Mat2"]
    ZERO: ClassVar["Mat2"]

    def determinant(self) -> float:
        """
        Определитель матрицы: ad - bc.

        Examples:
            >>> Mat2(7.0, 2.0, 6.0, 2.0).determinant()
            2.0
        """
        return self.a * self.d - self.b * self.c

    def inverse(self) -> "Mat2":
        """
        Обратная матрица.

        M⁻¹ = (1/det(M)) * [[d, -b], [-c, a]]

        Raises:
            SingularMatrixViolation: если определитель точно равен 0.0

        Examples:
            >>> Mat2(7.0, 2.0, 6.0, 2.0).inverse()
            Mat2(a=1.0, b=-1.0, c=-3.0, d=3.5)
        """
        rec_det = 1.0 / ensure_invertible(self.determinant())
        return rec_det * Mat2(self.d, -self.b, -self.c, self.a)

    def transpose(self) -> "Mat2":
        return Mat2(self.a, self.c, self.b, self.d)

    def rows(self) -> tuple[tuple[Scalar, Scalar], tuple[Scalar, Scalar]]:
        """Строки матрицы: ((a, b), (c, d))."""
        return ((self.a, self.b), (self.c, self.d))

    def approx_eq(self, other: "Mat2", tolerance: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
        """Покомпонентное сравнение с абсолютной толерантностью."""
        if not isinstance(other, Mat2):
            raise TypeError(f"Cannot compare Mat2 with {type(other).__name__}")
        return tolerance.all_close(astuple(self), astuple(other))

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Mat2":
        if not isinstance(other, Mat2):
            return NotImplemented
        return Mat2(self.a + other.a, self.b + other.b, self.c + other.c, self.d + other.d)

    def __sub__(self, other: object) -> "Mat2":
        if not isinstance(other, Mat2):
            return NotImplemented
        return Mat2(self.a - other.a, self.b - other.b, self.c - other.c, self.d - other.d)

    def __mul__(self, other: object) -> "Mat2 | Vec2":
        if isinstance(other, Mat2):
            a = self.a * other.a + self.b * other.c
            b = self.a * other.b + self.b * other.d
            c = self.c * other.a + self.d * other.c
            d = self.c * other.b + self.d * other.d
            return Mat2(a, b, c, d)
        if isinstance(other, Vec2):
            x = self.a * other.x + self.b * other.y
            y = self.c * other.x + self.d * other.y
            return Vec2(x, y)
        if is_scalar(other):
            return Mat2(self.a * other, self.b * other, self.c * other, self.d * other)
        return NotImplemented

    def __rmul__(self, other: object) -> "Mat2":
        # Только скаляр: Vec2 * Mat2 не определено
        if not is_scalar(other):
            return NotImplemented
        return Mat2(self.a * other, self.b * other, self.c * other, self.d * other)

    def __truediv__(self, other: object) -> "Mat2":
        if not is_scalar(other):
            return NotImplemented
        return Mat2(
            ieee_divide(self.a, other),
            ieee_divide(self.b, other),
            ieee_divide(self.c, other),
            ieee_divide(self.d, other),
        )


Mat2.IDENTITY = Mat2(1.0, 0.0, 0.0, 1.0)
Mat2.ZERO = Mat2(0.0, 0.0, 0.0, 0.0)
