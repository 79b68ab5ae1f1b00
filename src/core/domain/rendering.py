"""
Rendering — Строковое представление полиномов

Каноническая форма:
    f(<indeterminate>) = <term_0> + <term_1> + ... + <term_n>

Правила для члена степени d с коэффициентом c:
- d == 0: число c (выводится всегда, даже если c == 0)
- d == 1: <c><indeterminate>
- d >= 2: <c><indeterminate>^<d>
- члены с нулевым коэффициентом при d >= 1 опускаются
  (если не включён RenderConfig.show_zero_terms)

Числа выводятся в кратчайшей десятичной форме без экспоненты:
1.0 → "1", 2.5 → "2.5", 1e-07 → "0.0000001".
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Final, Sequence

from src.core.math.numerical_safeguards import is_valid_float

if TYPE_CHECKING:
    from src.core.domain.polynomial import Polynomial


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация строкового представления.

    - function_name: имя функции в левой части ("f" → "f(x) = ...")
    - show_zero_terms: выводить нулевые члены степени >= 1 ("+ 0x^2")
    - term_separator: разделитель членов
    """
    function_name: str = "f"
    show_zero_terms: bool = False
    term_separator: str = " + "


DEFAULT_RENDER_CONFIG: Final[RenderConfig] = RenderConfig()


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_coefficient(value: float) -> str:
    """
    Кратчайшая десятичная запись float без экспоненты.

    Examples:
        >>> format_coefficient(3.0)
        '3'
        >>> format_coefficient(-2.5)
        '-2.5'
        >>> format_coefficient(1e-07)
        '0.0000001'
        >>> format_coefficient(-0.0)
        '-0'
        >>> format_coefficient(float('nan'))
        'NaN'
    """
    if not is_valid_float(value):
        if value != value:
            return "NaN"
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_term(coefficient: float, degree: int, indeterminate: str) -> str:
    """Один член полинома: "3", "2x", "5x^3"."""
    number = format_coefficient(coefficient)
    if degree == 0:
        return number
    if degree == 1:
        return f"{number}{indeterminate}"
    return f"{number}{indeterminate}^{degree}"


def render_coefficients(
    coefficients: Sequence[float],
    indeterminate: str,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> str:
    """
    Строковое представление последовательности коэффициентов.

    Args:
        coefficients: Нормализованные коэффициенты (индекс = степень)
        indeterminate: Символ переменной
        config: Конфигурация вывода

    Returns:
        Строка вида "f(x) = 1 + 2x + 3x^3"
    """
    terms = []
    for degree, coeff in enumerate(coefficients):
        if degree > 0 and coeff == 0 and not config.show_zero_terms:
            continue
        terms.append(format_term(coeff, degree, indeterminate))

    return f"{config.function_name}({indeterminate}) = {config.term_separator.join(terms)}"


def render(polynomial: "Polynomial", config: RenderConfig = DEFAULT_RENDER_CONFIG) -> str:
    """Каноническое строковое представление полинома."""
    return render_coefficients(polynomial.coefficients, polynomial.indeterminate, config)


# =============================================================================
# ДИАГНОСТИКА
# =============================================================================


def describe_polynomial(polynomial: "Polynomial") -> str:
    """
    Диагностическое представление: сырые коэффициенты, символ, степень
    и каноническая строка.

    Example:
        Polynomial {
            coefficients: [1.0, 2.0, 0.0, 3.0]
            indeterminate: 'x'
            degree: 3
            string: f(x) = 1 + 2x + 3x^3
        }
    """
    return "\n".join(
        [
            "Polynomial {",
            f"    coefficients: {list(polynomial.coefficients)!r}",
            f"    indeterminate: {polynomial.indeterminate!r}",
            f"    degree: {polynomial.degree()}",
            f"    string: {render(polynomial)}",
            "}",
        ]
    )
