"""
Polynomial — Полином одной переменной с вещественными коэффициентами

Immutable Pydantic модель. Коэффициенты хранятся как кортеж float,
индекс i — коэффициент при члене степени i.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализация при создании: нет нулевых коэффициентов старших степеней
2. Нулевой полином всегда представлен как (0.0,), никогда как ()
3. Степень нулевого полинома = -1
4. Все операции возвращают новый экземпляр, операнды не изменяются

Результаты арифметических операций (add/subtract/multiply) всегда получают
символ DEFAULT_INDETERMINATE, символы операндов не наследуются.
"""

import operator
from typing import Any, Final, Iterable

from pydantic import BaseModel, Field, StrictFloat, field_validator

from src.core.contracts.validators import validate_polynomial
from src.core.domain.rendering import (
    DEFAULT_RENDER_CONFIG,
    RenderConfig,
    describe_polynomial,
    render,
)
from src.core.math.coefficients import (
    ZERO_COEFFICIENTS,
    add_coefficients,
    convolve_coefficients,
    horner_evaluate,
    is_zero_coefficients,
    negate_coefficients,
    strip_trailing_zeros,
)
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_finite,
    sequences_close,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символ переменной по умолчанию и для результатов арифметики
DEFAULT_INDETERMINATE: Final[str] = "x"


# =============================================================================
# POLYNOMIAL MODEL
# =============================================================================


class Polynomial(BaseModel):
    """
    Полином одной переменной над float.

    Immutable модель (frozen=True). Поддерживает операторы:
    - p + q, p - q, p * q, -p
    - p(value) — значение в точке
    - str(p) — каноническая строка "f(x) = 1 + 2x + 3x^3"
    """

    # StrictFloat: int допустим, str и bool отклоняются
    coefficients: tuple[StrictFloat, ...] = Field(
        default=ZERO_COEFFICIENTS,
        description="Коэффициенты, индекс = степень члена",
    )
    indeterminate: str = Field(
        default=DEFAULT_INDETERMINATE,
        min_length=1,
        max_length=1,
        description="Символ переменной (только для вывода)",
    )

    model_config = {"frozen": True}

    @field_validator("coefficients")
    @classmethod
    def normalize_coefficients(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Удаление нулей старших степеней, пустой вход → (0.0,)"""
        return tuple(float(c) for c in strip_trailing_zeros(v))

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls, coefficients: Iterable[float], indeterminate: str = DEFAULT_INDETERMINATE
    ) -> "Polynomial":
        """
        Создание нормализованного полинома из произвольной последовательности.

        Args:
            coefficients: Коэффициенты (может быть пустой, содержать нули)
            indeterminate: Символ переменной

        Returns:
            Нормализованный Polynomial

        Examples:
            >>> Polynomial.create([1, 2, 0, 3, 0, 0]).coefficients
            (1.0, 2.0, 0.0, 3.0)
            >>> Polynomial.create([]).coefficients
            (0.0,)
        """
        return cls(coefficients=tuple(coefficients), indeterminate=indeterminate)

    @classmethod
    def from_integers(
        cls, coefficients: Iterable[int], indeterminate: str = DEFAULT_INDETERMINATE
    ) -> "Polynomial":
        """
        Создание из целых коэффициентов.

        Нормализация выполняется по целому нулю, затем значения
        конвертируются в float.

        Raises:
            TypeError: Если элемент не является целым числом
            OverflowError: Если целое не представимо в float (например, 10**400)
        """
        stripped = strip_trailing_zeros(operator.index(c) for c in coefficients)
        return cls(coefficients=tuple(float(c) for c in stripped), indeterminate=indeterminate)

    @classmethod
    def zero(cls, indeterminate: str = DEFAULT_INDETERMINATE) -> "Polynomial":
        return cls(coefficients=ZERO_COEFFICIENTS, indeterminate=indeterminate)

    @classmethod
    def from_contract(cls, data: dict[str, Any]) -> "Polynomial":
        """
        Создание из JSON контракта polynomial.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
            ValueError: Если коэффициенты содержат NaN/Inf
        """
        validate_polynomial(data)
        if not all_finite(data["coefficients"]):
            raise ValueError(f"Contract coefficients must be finite, got {data['coefficients']}")
        return cls.model_validate(data)

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в JSON контракт polynomial.

        Контракт определён только для конечных коэффициентов:
        NaN/Inf не являются JSON числами.

        Raises:
            ValueError: Если коэффициенты содержат NaN/Inf
        """
        if not all_finite(self.coefficients):
            raise ValueError(
                f"Polynomial with non-finite coefficients {self.coefficients} "
                f"cannot be serialized to contract"
            )
        return self.model_dump(mode="json")

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def degree(self) -> int:
        """
        Степень полинома.

        Returns:
            len(coefficients) - 1, для нулевого полинома -1
        """
        if self.is_zero():
            return -1
        return len(self.coefficients) - 1

    def is_zero(self) -> bool:
        return is_zero_coefficients(self.coefficients)

    def with_indeterminate(self, indeterminate: str) -> "Polynomial":
        """Новый полином с теми же коэффициентами и другим символом переменной."""
        return type(self)(coefficients=self.coefficients, indeterminate=indeterminate)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Polynomial") -> "Polynomial":
        """
        Сумма полиномов.

        Короткая последовательность дополняется нулями, результат
        нормализуется повторно (старшие члены могут сократиться).
        """
        return Polynomial(coefficients=add_coefficients(self.coefficients, other.coefficients))

    def negate(self) -> "Polynomial":
        return Polynomial(
            coefficients=negate_coefficients(self.coefficients),
            indeterminate=self.indeterminate,
        )

    def subtract(self, other: "Polynomial") -> "Polynomial":
        """Разность: self + negate(other)."""
        return self.add(other.negate())

    def multiply(self, other: "Polynomial") -> "Polynomial":
        """
        Произведение полиномов (свёртка коэффициентов).

        degree(a * b) = degree(a) + degree(b), если ни один множитель
        не является нулевым полиномом; иначе результат — нулевой полином.
        """
        if self.is_zero() or other.is_zero():
            return Polynomial.zero()

        return Polynomial(
            coefficients=convolve_coefficients(self.coefficients, other.coefficients)
        )

    def evaluate_at(self, value: float) -> float:
        """
        Значение полинома в точке (схема Горнера).

        Examples:
            >>> Polynomial.create([1, 2, 3, 4]).evaluate_at(5.0)
            586.0
        """
        return horner_evaluate(self.coefficients, value)

    def is_close(
        self,
        other: "Polynomial",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое равенство коэффициентов (символ переменной не учитывается).

        Полиномы разной степени никогда не считаются близкими.
        """
        return sequences_close(
            self.coefficients, other.coefficients, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def render(self, config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
        return render(self, config)

    def describe(self) -> str:
        return describe_polynomial(self)

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "Polynomial":
        return self.negate()

    def __call__(self, value: float) -> float:
        return self.evaluate_at(value)

    def __str__(self) -> str:
        return render(self)
