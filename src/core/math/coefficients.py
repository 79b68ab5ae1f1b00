"""
Coefficients — Арифметика последовательностей коэффициентов

Чистые функции над кортежами коэффициентов полинома одной переменной.
Индекс i — коэффициент при члене степени i.

Модуль обеспечивает:
- Нормализацию (удаление нулей старших степеней)
- Выравнивание длин (padding нулями)
- Поэлементную сумму и отрицание
- Свёртку (умножение полиномов)
- Вычисление значения по схеме Горнера

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат нормализации никогда не пуст: нулевой полином = (0.0,)
2. Нули в середине последовательности сохраняются
3. Нормализация идемпотентна
4. Функции не мутируют входные данные

ФОРМУЛЫ:
    sum[k]        = a[k] + b[k]                (после padding)
    convolve[k]   = Σ a[i] * b[j], i + j = k,  k ∈ [0, len(a) + len(b) - 2]
    horner(x)     = (...((c_n * x + c_{n-1}) * x + c_{n-2}) ...) * x + c_0
"""

import logging
from typing import Final, Iterable, Sequence

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Каноническое представление нулевого полинома
ZERO_COEFFICIENTS: Final[tuple[float, ...]] = (0.0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_trailing_zeros(coefficients: Iterable[float]) -> tuple[float, ...]:
    """
    Удаление нулевых коэффициентов старших степеней.

    Нули удаляются с конца последовательности, пока последний элемент
    не станет ненулевым или последовательность не закончится.

    Args:
        coefficients: Коэффициенты (может быть пустым, содержать нули)

    Returns:
        Нормализованный кортеж. Если все коэффициенты нулевые или вход пуст,
        возвращается ZERO_COEFFICIENTS.

    Examples:
        >>> strip_trailing_zeros([1.0, 2.0, 0.0, 3.0, 0.0, 0.0])
        (1.0, 2.0, 0.0, 3.0)
        >>> strip_trailing_zeros([])
        (0.0,)
        >>> strip_trailing_zeros([0.0, 0.0])
        (0.0,)
    """
    values = tuple(coefficients)

    end = len(values)
    while end > 0 and values[end - 1] == 0:
        end -= 1

    if end == 0:
        logger.debug("Coefficients %r normalized to zero polynomial", values)
        return ZERO_COEFFICIENTS

    return values[:end]


def is_zero_coefficients(coefficients: Sequence[float]) -> bool:
    """Нормализованные коэффициенты представляют нулевой полином."""
    return tuple(coefficients) == ZERO_COEFFICIENTS


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def pad_coefficients(coefficients: Sequence[float], length: int) -> tuple[float, ...]:
    """
    Дополнение последовательности нулями старших степеней до длины length.

    Args:
        coefficients: Исходные коэффициенты
        length: Требуемая длина

    Returns:
        Кортеж длины max(len(coefficients), length)
    """
    missing = length - len(coefficients)
    if missing <= 0:
        return tuple(coefficients)

    return tuple(coefficients) + (0.0,) * missing


def add_coefficients(a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    """
    Поэлементная сумма с выравниванием длин.

    Результат НЕ нормализован: сумма может обнулить старшие члены.

    Examples:
        >>> add_coefficients([1.0, 2.0, 0.0, 3.0], [1.0, 2.0, 0.0, 3.0, 4.0])
        (2.0, 4.0, 0.0, 6.0, 4.0)
    """
    length = max(len(a), len(b))
    padded_a = pad_coefficients(a, length)
    padded_b = pad_coefficients(b, length)

    return tuple(x + y for x, y in zip(padded_a, padded_b))


def negate_coefficients(coefficients: Sequence[float]) -> tuple[float, ...]:
    """Умножение каждого коэффициента на -1."""
    return tuple(-1.0 * c for c in coefficients)


def convolve_coefficients(a: Sequence[float], b: Sequence[float]) -> tuple[float, ...]:
    """
    Свёртка двух последовательностей коэффициентов.

    Буфер результата имеет длину len(a) + len(b) - 1.
    Результат НЕ нормализован.

    Args:
        a: Коэффициенты первого множителя (непустые)
        b: Коэффициенты второго множителя (непустые)

    Returns:
        Коэффициенты произведения

    Examples:
        >>> convolve_coefficients([1.0, 2.0, 3.0], [3.0, 2.0, 1.0])
        (3.0, 8.0, 14.0, 8.0, 3.0)
    """
    if not a or not b:
        return ZERO_COEFFICIENTS

    result = [0.0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i + j] += x * y

    return tuple(result)


# =============================================================================
# ВЫЧИСЛЕНИЕ ЗНАЧЕНИЯ
# =============================================================================


def horner_evaluate(coefficients: Sequence[float], value: float) -> float:
    """
    Значение полинома в точке по схеме Горнера.

    Переполнение и NaN распространяются по IEEE семантике,
    санитизация не выполняется.

    Args:
        coefficients: Коэффициенты (индекс = степень)
        value: Точка вычисления

    Returns:
        Σ coefficients[d] * value^d

    Examples:
        >>> horner_evaluate([1.0, 2.0, 3.0, 4.0], 5.0)
        586.0
        >>> horner_evaluate([1.0, 2.0, 3.0], 0.0)
        1.0
    """
    result = 0.0
    for coeff in reversed(coefficients):
        result = result * value + coeff
    return result
