"""
Core numerical primitives for lars.

Epsilon constants, IEEE-754 helpers, domain-violation exceptions and the
tolerance configuration shared by the vector and matrix modules.
"""

from lars.core.numerical_safeguards import (
    EPS_MAT_EQ,
    EPS_UNIT_LENGTH,
    LinalgDomainViolation,
    SingularMatrixViolation,
    ZeroMagnitudeViolation,
    ensure_invertible,
    ensure_nonzero_magnitude,
    ieee_divide,
    is_scalar,
)
from lars.core.tolerance import DEFAULT_TOLERANCE, UNIT_LENGTH_TOLERANCE, ToleranceConfig

__all__ = [
    # Epsilon constants
    "EPS_MAT_EQ",
    "EPS_UNIT_LENGTH",
    # Exceptions
    "LinalgDomainViolation",
    "SingularMatrixViolation",
    "ZeroMagnitudeViolation",
    # Guards
    "ensure_invertible",
    "ensure_nonzero_magnitude",
    # Float helpers
    "ieee_divide",
    "is_scalar",
    # Tolerance config
    "DEFAULT_TOLERANCE",
    "UNIT_LENGTH_TOLERANCE",
    "ToleranceConfig",
]
