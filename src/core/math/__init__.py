"""
Core math modules

Математические примитивы над коэффициентами полиномов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Finiteness
    all_finite,
    is_valid_float,
    # Epsilon comparisons
    is_close,
    sequences_close,
)

# Coefficients
from src.core.math.coefficients import (
    ZERO_COEFFICIENTS,
    add_coefficients,
    convolve_coefficients,
    horner_evaluate,
    is_zero_coefficients,
    negate_coefficients,
    pad_coefficients,
    strip_trailing_zeros,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Finiteness
    "all_finite",
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "sequences_close",
    # Coefficients — Constants
    "ZERO_COEFFICIENTS",
    # Coefficients — Functions
    "add_coefficients",
    "convolve_coefficients",
    "horner_evaluate",
    "is_zero_coefficients",
    "negate_coefficients",
    "pad_coefficients",
    "strip_trailing_zeros",
]
