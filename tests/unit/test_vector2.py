"""
Тесты для Vec2 / Point2D

Проверяемые инварианты:
1. Покомпонентная арифметика и оба порядка умножения на скаляр
2. cross() возвращает скаляр
3. mag_sq() == dot(self), mag() == sqrt(mag_sq())
4. normalize() даёт единичный вектор, нулевой → ZeroMagnitudeViolation
5. Деление на 0.0 даёт inf/NaN без исключения
6. Точное равенство, хешируемость, immutability
"""

import dataclasses
import math

import pytest

from lars import Point2D, Vec2, Vec3, ZeroMagnitudeViolation
from lars.core.tolerance import ToleranceConfig


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def sample_vectors() -> list[Vec2]:
    """Набор ненулевых векторов разных направлений и масштабов."""
    return [
        Vec2(3.0, 4.0),
        Vec2(-1.0, 2.5),
        Vec2(1e-3, -7.0),
        Vec2(123.456, 0.001),
        Vec2(-5.0, -5.0),
    ]


# =============================================================================
# ТЕСТЫ: Конструирование и константы
# =============================================================================


class TestVec2Construction:
    """Конструирование, константы, представление."""

    def test_fields(self) -> None:
        v = Vec2(1.0, 2.0)
        assert v.x == 1.0
        assert v.y == 2.0

    def test_keyword_construction(self) -> None:
        assert Vec2(y=2.0, x=1.0) == Vec2(1.0, 2.0)

    def test_default_is_zero(self) -> None:
        assert Vec2() == Vec2.ZERO
        assert Vec2.default() == Vec2(0.0, 0.0)

    def test_constants(self) -> None:
        assert Vec2.ONE == Vec2(1.0, 1.0)
        assert Vec2.UNIT_X == Vec2(1.0, 0.0)
        assert Vec2.UNIT_Y == Vec2(0.0, 1.0)

    def test_point_is_alias(self) -> None:
        """Point2D — тот же класс, что Vec2"""
        assert Point2D is Vec2
        assert Point2D(1.0, 2.0) == Vec2(1.0, 2.0)

    def test_str(self) -> None:
        assert str(Vec2(1.0, -2.5)) == "(1.0, -2.5)"

    def test_iteration(self) -> None:
        x, y = Vec2(1.0, 2.0)
        assert (x, y) == (1.0, 2.0)
        assert tuple(Vec2(3.0, 4.0)) == (3.0, 4.0)

    def test_immutable(self) -> None:
        v = Vec2(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestVec2Arithmetic:
    """Операторы +, -, *, /, унарный -."""

    def test_add(self) -> None:
        assert Vec2(1.0, 2.0) + Vec2(3.0, 4.0) == Vec2(4.0, 6.0)

    def test_sub(self) -> None:
        assert Vec2(1.0, 2.0) - Vec2(3.0, 5.0) == Vec2(-2.0, -3.0)

    def test_neg(self) -> None:
        assert -Vec2(1.0, -2.0) == Vec2(-1.0, 2.0)

    def test_scalar_mul_left(self) -> None:
        assert 2.0 * Vec2(1.0, 2.0) == Vec2(2.0, 4.0)

    def test_scalar_mul_right(self) -> None:
        assert Vec2(1.0, 2.0) * 2.0 == Vec2(2.0, 4.0)

    def test_scalar_mul_commutative(self, sample_vectors: list[Vec2]) -> None:
        """s * v == v * s"""
        for v in sample_vectors:
            for s in (0.0, -1.5, 3.0, 1e6):
                assert s * v == v * s

    def test_int_scalar(self) -> None:
        assert 3 * Vec2(1.0, 2.0) == Vec2(3.0, 6.0)

    def test_component_mul(self) -> None:
        """Vec2 * Vec2 — покомпонентно"""
        assert Vec2(2.0, 3.0) * Vec2(4.0, 5.0) == Vec2(8.0, 15.0)

    def test_scalar_div(self) -> None:
        assert Vec2(2.0, 4.0) / 2.0 == Vec2(1.0, 2.0)

    def test_scalar_rdiv(self) -> None:
        """s / v делит скаляр на каждую компоненту"""
        assert 1.0 / Vec2(2.0, 4.0) == Vec2(0.5, 0.25)

    def test_div_by_zero_gives_inf(self) -> None:
        """Деление на 0.0 — IEEE семантика, без исключения"""
        v = Vec2(1.0, -1.0) / 0.0
        assert v.x == math.inf
        assert v.y == -math.inf

    def test_zero_div_by_zero_gives_nan(self) -> None:
        v = Vec2(0.0, 2.0) / 0.0
        assert math.isnan(v.x)
        assert v.y == math.inf

    def test_unsupported_operands(self) -> None:
        """Неподдерживаемые типы → TypeError"""
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0) + 1.0  # type: ignore[operator]
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0) * "2"  # type: ignore[operator]
        with pytest.raises(TypeError):
            Vec2(1.0, 2.0) * True  # type: ignore[operator]


# =============================================================================
# ТЕСТЫ: Произведения и длина
# =============================================================================


class TestVec2Products:
    """dot, cross, mag, mag_sq."""

    def test_mag(self) -> None:
        assert Vec2(3.0, 4.0).mag() == 5.0

    def test_mag_sq(self) -> None:
        assert Vec2(3.0, 4.0).mag_sq() == 25.0

    def test_dot(self) -> None:
        assert Vec2(1.0, 2.0).dot(Vec2(3.0, 4.0)) == 11.0

    def test_cross_is_scalar(self) -> None:
        """2D cross возвращает скаляр"""
        result = Vec2(1.0, 0.0).cross(Vec2(0.0, 1.0))
        assert result == 1.0
        assert isinstance(result, float)

    def test_cross_antisymmetric(self) -> None:
        a = Vec2(2.0, 1.0)
        b = Vec2(-1.0, 3.0)
        assert a.cross(b) == -b.cross(a)
        assert a.cross(a) == 0.0

    def test_mag_relations(self, sample_vectors: list[Vec2]) -> None:
        """mag_sq == dot(self), mag == sqrt(mag_sq)"""
        for v in sample_vectors:
            assert v.mag_sq() == v.dot(v)
            assert v.mag() == math.sqrt(v.mag_sq())


# =============================================================================
# ТЕСТЫ: map и normalize
# =============================================================================


class TestVec2Normalize:
    """map, normalize, is_unit."""

    def test_map(self) -> None:
        assert Vec2(1.0, 2.0).map(lambda c: c * c) == Vec2(1.0, 4.0)

    def test_map_returns_new_vector(self) -> None:
        v = Vec2(-1.0, 2.0)
        mapped = v.map(abs)
        assert mapped == Vec2(1.0, 2.0)
        assert v == Vec2(-1.0, 2.0)

    def test_normalize_axis(self) -> None:
        assert Vec2(3.0, 0.0).normalize() == Vec2(1.0, 0.0)

    def test_normalize_unit_length(self, sample_vectors: list[Vec2]) -> None:
        for v in sample_vectors:
            assert abs(v.normalize().mag() - 1.0) < 1e-10
            assert v.normalize().is_unit()

    def test_normalize_zero_raises(self) -> None:
        with pytest.raises(ZeroMagnitudeViolation):
            Vec2(0.0, 0.0).normalize()

    def test_is_unit(self) -> None:
        assert Vec2.UNIT_X.is_unit()
        assert not Vec2(1.0, 1.0).is_unit()
        assert Vec2(1.0, 1.0).normalize().is_unit()

    def test_is_unit_custom_tolerance(self) -> None:
        assert Vec2(1.05, 0.0).is_unit(ToleranceConfig(abs_eps=0.1))


# =============================================================================
# ТЕСТЫ: Точки
# =============================================================================


class TestPoint2D:
    """dist, dist_sq."""

    def test_dist(self) -> None:
        assert Point2D(1.0, 2.0).dist(Point2D(1.0, 0.0)) == 2.0

    def test_dist_sq(self) -> None:
        assert Point2D(1.0, 2.0).dist_sq(Point2D(1.0, 0.0)) == 4.0

    def test_dist_symmetric(self) -> None:
        a = Point2D(-1.0, 5.0)
        b = Point2D(2.0, 1.0)
        assert a.dist(b) == b.dist(a) == 5.0

    def test_dist_to_self_is_zero(self) -> None:
        p = Point2D(4.0, -3.0)
        assert p.dist(p) == 0.0
        assert p.dist_sq(p) == 0.0


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestVec2Equality:
    """Точное равенство, approx_eq, порядок, хеш."""

    def test_exact_equality(self) -> None:
        """Равенство без epsilon"""
        assert Vec2(1.0, 2.0) == Vec2(1.0, 2.0)
        assert Vec2(1.0, 2.0) != Vec2(1.0, 2.0 + 1e-12)

    def test_approx_eq(self) -> None:
        assert Vec2(1.0, 2.0).approx_eq(Vec2(1.0, 2.0 + 1e-12))
        assert not Vec2(1.0, 2.0).approx_eq(Vec2(1.0, 2.1))

    def test_approx_eq_custom_tolerance(self) -> None:
        assert Vec2(1.0, 2.0).approx_eq(Vec2(1.0, 2.1), ToleranceConfig(abs_eps=0.2))

    def test_approx_eq_wrong_type(self) -> None:
        """Сравнение не с Vec2 — TypeError независимо от длины операнда"""
        with pytest.raises(TypeError, match="Cannot compare Vec2 with tuple"):
            Vec2(1.0, 2.0).approx_eq((1.0, 2.0))  # type: ignore[arg-type]

        with pytest.raises(TypeError, match="Cannot compare Vec2 with Vec3"):
            Vec2(1.0, 2.0).approx_eq(Vec3(1.0, 2.0, 3.0))  # type: ignore[arg-type]

    def test_lexicographic_order(self) -> None:
        assert Vec2(1.0, 2.0) < Vec2(1.0, 3.0)
        assert Vec2(0.0, 9.0) < Vec2(1.0, 0.0)
        assert sorted([Vec2(2.0, 0.0), Vec2(1.0, 5.0)]) == [Vec2(1.0, 5.0), Vec2(2.0, 0.0)]

    def test_hashable(self) -> None:
        assert len({Vec2(1.0, 2.0), Vec2(1.0, 2.0), Vec2(2.0, 1.0)}) == 2
