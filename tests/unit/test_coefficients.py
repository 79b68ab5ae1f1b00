"""
Тесты для модуля Coefficients

Проверяет:
1. Нормализацию (удаление нулей старших степеней)
2. Выравнивание длин и поэлементную сумму
3. Отрицание коэффициентов
4. Свёртку
5. Схему Горнера
"""

import logging
import math

import pytest

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

# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestStripTrailingZeros:
    """Тесты для strip_trailing_zeros"""

    def test_trailing_zeros_removed(self) -> None:
        """Нули старших степеней удаляются, нули в середине сохраняются"""
        assert strip_trailing_zeros([1.0, 2.0, 0.0, 3.0, 0.0, 0.0]) == (1.0, 2.0, 0.0, 3.0)

    def test_leading_zeros_kept(self) -> None:
        """Нули младших степеней сохраняются"""
        assert strip_trailing_zeros([0.0, 0.0, 5.0]) == (0.0, 0.0, 5.0)

    def test_empty_input_is_zero(self) -> None:
        assert strip_trailing_zeros([]) == ZERO_COEFFICIENTS

    def test_all_zeros_is_zero(self) -> None:
        assert strip_trailing_zeros([0.0, 0.0, 0.0]) == ZERO_COEFFICIENTS

    def test_negative_zero_stripped(self) -> None:
        """-0.0 == 0 и тоже удаляется"""
        assert strip_trailing_zeros([1.0, -0.0]) == (1.0,)

    def test_already_normalized_unchanged(self) -> None:
        assert strip_trailing_zeros((4.0, -1.0)) == (4.0, -1.0)

    @pytest.mark.parametrize(
        "values",
        [[], [0.0], [1.0, 0.0], [0.0, 1.0, 0.0, 0.0], [3.0, -2.0, 1.0]],
    )
    def test_idempotent(self, values: list[float]) -> None:
        """Повторная нормализация не меняет результат"""
        once = strip_trailing_zeros(values)
        assert strip_trailing_zeros(once) == once

    def test_accepts_generator(self) -> None:
        assert strip_trailing_zeros(float(i) for i in [1, 0]) == (1.0,)

    def test_integer_zero(self) -> None:
        """Целые нули удаляются так же, как float"""
        assert strip_trailing_zeros([1, 2, 0]) == (1, 2)

    def test_nan_is_not_zero(self) -> None:
        result = strip_trailing_zeros([1.0, float("nan")])
        assert len(result) == 2
        assert math.isnan(result[1])

    def test_is_zero_coefficients(self) -> None:
        assert is_zero_coefficients(ZERO_COEFFICIENTS)
        assert not is_zero_coefficients((0.0, 1.0))

    def test_collapse_to_zero_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Схлопывание в нулевой полином фиксируется DEBUG записью"""
        with caplog.at_level(logging.DEBUG, logger="src.core.math.coefficients"):
            assert strip_trailing_zeros([0.0, 0.0]) == ZERO_COEFFICIENTS

        records = [r for r in caplog.records if r.name == "src.core.math.coefficients"]
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert "zero polynomial" in records[0].getMessage()

    def test_non_zero_result_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.math.coefficients"):
            strip_trailing_zeros([1.0, 0.0])

        assert not [r for r in caplog.records if r.name == "src.core.math.coefficients"]


# =============================================================================
# ТЕСТЫ ПОЭЛЕМЕНТНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestElementwise:
    """Тесты для pad/add/negate"""

    def test_pad_extends_with_zeros(self) -> None:
        assert pad_coefficients([1.0, 2.0], 4) == (1.0, 2.0, 0.0, 0.0)

    def test_pad_never_truncates(self) -> None:
        assert pad_coefficients([1.0, 2.0, 3.0], 2) == (1.0, 2.0, 3.0)

    def test_add_with_padding(self) -> None:
        result = add_coefficients([1.0, 2.0, 0.0, 3.0], [1.0, 2.0, 0.0, 3.0, 4.0])
        assert result == (2.0, 4.0, 0.0, 6.0, 4.0)

    def test_add_is_not_normalized(self) -> None:
        """Сокращение старших членов оставляет нули, нормализует вызывающий"""
        assert add_coefficients([1.0, 2.0], [0.0, -2.0]) == (1.0, 0.0)

    def test_add_commutative(self) -> None:
        a, b = [1.0, -2.5, 3.0], [0.5, 4.0]
        assert add_coefficients(a, b) == add_coefficients(b, a)

    def test_negate(self) -> None:
        assert negate_coefficients([1.0, -2.0, 3.0]) == (-1.0, 2.0, -3.0)


# =============================================================================
# ТЕСТЫ СВЁРТКИ
# =============================================================================


class TestConvolve:
    """Тесты для convolve_coefficients"""

    def test_convolution(self) -> None:
        result = convolve_coefficients([1.0, 2.0, 3.0], [3.0, 2.0, 1.0])
        assert result == (3.0, 8.0, 14.0, 8.0, 3.0)

    def test_buffer_length(self) -> None:
        """Длина результата = len(a) + len(b) - 1"""
        assert len(convolve_coefficients([1.0] * 4, [1.0] * 3)) == 6

    def test_binomial_square(self) -> None:
        """(1 + x)^2 = 1 + 2x + x^2"""
        assert convolve_coefficients([1.0, 1.0], [1.0, 1.0]) == (1.0, 2.0, 1.0)

    def test_empty_operand_is_zero(self) -> None:
        assert convolve_coefficients([], [1.0, 2.0]) == ZERO_COEFFICIENTS


# =============================================================================
# ТЕСТЫ СХЕМЫ ГОРНЕРА
# =============================================================================


class TestHornerEvaluate:
    """Тесты для horner_evaluate"""

    def test_cubic(self) -> None:
        assert horner_evaluate([1.0, 2.0, 3.0, 4.0], 5.0) == 586.0

    def test_at_zero_returns_constant(self) -> None:
        assert horner_evaluate([1.0, 2.0, 3.0], 0.0) == 1.0

    def test_negative_point(self) -> None:
        assert horner_evaluate([-1.0, 2.0, -3.0, 4.0], -5.0) == -586.0

    def test_matches_power_sum(self) -> None:
        """Горнер совпадает с прямым суммированием степеней"""
        coeffs = [0.5, -1.25, 2.0, 0.0, 3.5]
        x = 1.7
        direct = sum(c * x**d for d, c in enumerate(coeffs))
        assert math.isclose(horner_evaluate(coeffs, x), direct, rel_tol=1e-12)

    def test_overflow_propagates(self) -> None:
        """Переполнение не санитизируется"""
        assert horner_evaluate([0.0, 0.0, 1.0], 1e200) == math.inf

    def test_nan_propagates(self) -> None:
        assert math.isnan(horner_evaluate([1.0, 1.0], float("nan")))
