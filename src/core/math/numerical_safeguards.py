"""
Numerical Safeguards — Float Primitives для коэффициентов

Модуль содержит численные примитивы, общие для всех операций над полиномами:
- Проверка конечности float (NaN/Inf)
- Epsilon-сравнения float с учётом машинной точности
- Поэлементное сравнение последовательностей коэффициентов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf НЕ санитизируются: они распространяются по стандартной IEEE семантике
2. Нормализация коэффициентов использует точное сравнение с нулём,
   epsilon-сравнения применяются только в явных проверках близости
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для сравнений около нуля
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКА КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def all_finite(values: Sequence[float]) -> bool:
    """Все значения последовательности конечны."""
    return all(is_valid_float(v) for v in values)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность отрицательная

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(f"tolerances must be non-negative, got rel={rel_tol}, abs={abs_tol}")

    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def sequences_close(
    a: Sequence[float],
    b: Sequence[float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух последовательностей float.

    Последовательности разной длины никогда не считаются близкими:
    длина последовательности коэффициентов определяет степень полинома.

    Args:
        a: Первая последовательность
        b: Вторая последовательность
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если длины совпадают и каждая пара значений близка

    Examples:
        >>> sequences_close([1.0, 2.0], [1.0, 2.0 + 1e-12])
        True
        >>> sequences_close([1.0], [1.0, 0.0])
        False
    """
    if len(a) != len(b):
        return False

    return all(is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol) for x, y in zip(a, b))
