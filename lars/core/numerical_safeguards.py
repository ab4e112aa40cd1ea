"""
Numerical Safeguards — численные примитивы для векторов и матриц

Модуль содержит всё, что нужно векторной и матричной арифметике сверх
встроенного float:
- Epsilon-параметры для сравнений
- IEEE-754 деление (Python бросает ZeroDivisionError, нам нужны inf/NaN)
- Domain-исключения и guard-функции для inverse() и normalize()

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика тотальна: деление на 0.0 даёт ±inf/NaN, а не исключение
2. Вырожденная матрица (det == 0.0 точно) → SingularMatrixViolation
3. Нормализация нулевого вектора (mag == 0.0 точно) → ZeroMagnitudeViolation
4. Никаких tolerance-полос для domain-проверок: только точный ноль
"""

import logging
import math
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность покомпонентного сравнения матриц (Mat3.__eq__)
EPS_MAT_EQ: Final[float] = 1e-9

# Толерантность проверки единичной длины вектора (is_unit)
EPS_UNIT_LENGTH: Final[float] = 1e-10


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LinalgDomainViolation(ArithmeticError):
    """
    Операция вызвана вне своей области определения.

    Базовый класс для всех domain-ошибок библиотеки. Ошибки не
    перехватываются внутри библиотеки и сразу пропагируют к вызывающему.
    """


class SingularMatrixViolation(LinalgDomainViolation):
    """Обращение матрицы с определителем, точно равным 0.0."""


class ZeroMagnitudeViolation(LinalgDomainViolation):
    """Нормализация вектора нулевой длины."""


# =============================================================================
# FLOAT-ПРЕДИКАТЫ
# =============================================================================


def is_scalar(value: object) -> bool:
    """
    Проверка, может ли значение выступать скаляром в арифметике.

    bool исключён: True * v выглядит как ошибка, а не как масштабирование.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 вместо ZeroDivisionError.

    Правила для denominator == 0.0 (знак нуля учитывается):
        - numerator == 0.0 или NaN → NaN
        - иначе → ±inf, знак = sign(numerator) * sign(denominator)

    Examples:
        >>> ieee_divide(6.0, 3.0)
        2.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator

    if math.isnan(numerator) or numerator == 0.0:
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# DOMAIN GUARDS
# =============================================================================


def ensure_invertible(determinant: float) -> float:
    """
    Проверка, что матрица с данным определителем обратима.

    Только точный ноль считается вырожденным: почти-вырожденные матрицы
    обращаются и дают большие (но конечные) элементы.

    Args:
        determinant: Определитель матрицы

    Returns:
        determinant без изменений

    Raises:
        SingularMatrixViolation: если determinant == 0.0
    """
    if determinant == 0.0:
        logger.debug("Refusing to invert singular matrix (det=%r)", determinant)
        raise SingularMatrixViolation(
            f"Matrix is singular and cannot be inverted (det={determinant!r})"
        )

    return determinant


def ensure_nonzero_magnitude(magnitude: float, vector: object) -> float:
    """
    Проверка, что вектор можно нормализовать.

    Args:
        magnitude: Длина вектора
        vector: Сам вектор (для сообщения об ошибке)

    Returns:
        magnitude без изменений

    Raises:
        ZeroMagnitudeViolation: если magnitude == 0.0
    """
    if magnitude == 0.0:
        logger.debug("Refusing to normalize zero-length vector %r", vector)
        raise ZeroMagnitudeViolation(
            f"Cannot normalize zero-length vector {vector!r}"
        )

    return magnitude
