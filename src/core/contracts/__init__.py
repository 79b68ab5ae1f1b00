"""
Contract Validation Module

Модуль для валидации JSON контрактов полиномов.
"""

from .validators import (
    ContractValidator,
    PolynomialValidator,
    SchemaLoader,
    validate_polynomial,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PolynomialValidator",
    # Functions
    "validate_polynomial",
]
