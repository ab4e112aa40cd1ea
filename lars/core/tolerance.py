"""
ToleranceConfig — конфигурация приближённых сравнений

Immutable Pydantic модель с валидацией epsilon. Передаётся явно в
approx_eq()/is_unit(); глобального изменяемого состояния нет.
"""

from typing import Final

from pydantic import BaseModel, Field

from lars.core.numerical_safeguards import EPS_MAT_EQ, EPS_UNIT_LENGTH


class ToleranceConfig(BaseModel):
    """
    Абсолютная толерантность покомпонентного сравнения.

    Два числа считаются равными, если abs(a - b) < abs_eps.
    """

    abs_eps: float = Field(
        default=EPS_MAT_EQ,
        gt=0,
        allow_inf_nan=False,
        description="Абсолютная толерантность (строго положительная, конечная)",
    )

    model_config = {"frozen": True}  # Immutable

    def close(self, a: float, b: float) -> bool:
        """Сравнение двух компонент: abs(a - b) < abs_eps."""
        return abs(a - b) < self.abs_eps

    def all_close(self, left: tuple[float, ...], right: tuple[float, ...]) -> bool:
        """
        Покомпонентное сравнение двух наборов одинаковой длины.

        Raises:
            ValueError: если длины различаются
        """
        if len(left) != len(right):
            raise ValueError(
                f"Cannot compare {len(left)} components with {len(right)}"
            )

        return all(self.close(a, b) for a, b in zip(left, right))


# =============================================================================
# DEFAULTS
# =============================================================================

# Толерантность approx_eq() по умолчанию; через неё же работает Mat3.__eq__
DEFAULT_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig(abs_eps=EPS_MAT_EQ)

# Толерантность is_unit() по умолчанию
UNIT_LENGTH_TOLERANCE: Final[ToleranceConfig] = ToleranceConfig(
    abs_eps=EPS_UNIT_LENGTH
)
