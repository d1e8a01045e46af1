"""
Тесты для модуля Rounding

Проверяет:
1. Проверки типов и валидности float
2. Порядок величины (включая ноль и точные степени десяти)
3. Округление half-away-from-zero до десятичного разряда
4. Фиксированное и точное форматирование
"""

import math

import pytest

from src.core.math.rounding import (
    ZERO_ORDER_OF_MAGNITUDE,
    decimal_mantissa,
    format_exact,
    format_fixed,
    is_integral,
    is_real_number,
    is_valid_float,
    order_of_magnitude,
    round_half_away_from_zero,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРОК
# =============================================================================


class TestTypeChecks:
    """Тесты для is_real_number / is_integral / is_valid_float"""

    def test_numbers_accepted(self) -> None:
        """int и float считаются вещественными числами"""
        assert is_real_number(3)
        assert is_real_number(3.5)

    def test_bool_rejected(self) -> None:
        """bool не считается числом"""
        assert not is_real_number(True)
        assert not is_integral(False)

    def test_non_numbers_rejected(self) -> None:
        """Строки и None не являются числами"""
        assert not is_real_number("3")
        assert not is_real_number(None)

    def test_integral_without_coercion(self) -> None:
        """Целый float не считается целым числом"""
        assert is_integral(2)
        assert not is_integral(2.0)

    def test_valid_float(self) -> None:
        """NaN и Inf невалидны"""
        assert is_valid_float(1.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


# =============================================================================
# ТЕСТЫ ПОРЯДКА ВЕЛИЧИНЫ
# =============================================================================


class TestOrderOfMagnitude:
    """Тесты для order_of_magnitude"""

    def test_positive_values(self) -> None:
        assert order_of_magnitude(1200.0) == 3
        assert order_of_magnitude(3.49) == 0
        assert order_of_magnitude(0.005) == -3

    def test_powers_of_ten(self) -> None:
        """Точные степени десяти не теряют единицу порядка"""
        assert order_of_magnitude(1000.0) == 3
        assert order_of_magnitude(1.0) == 0
        assert order_of_magnitude(0.1) == -1

    def test_just_below_power_of_ten(self) -> None:
        assert order_of_magnitude(999.0) == 2

    def test_negative_uses_absolute_value(self) -> None:
        assert order_of_magnitude(-45.0) == 1

    def test_zero(self) -> None:
        """Ноль получает фиксированный порядок"""
        assert order_of_magnitude(0.0) == ZERO_ORDER_OF_MAGNITUDE
        assert order_of_magnitude(0.0) == 0

    def test_largest_float(self) -> None:
        """Максимальный float не вызывает переполнения"""
        assert order_of_magnitude(1.7e308) == 308

    def test_returns_int(self) -> None:
        assert isinstance(order_of_magnitude(123.0), int)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundHalfAwayFromZero:
    """Тесты для round_half_away_from_zero"""

    def test_fractional_place(self) -> None:
        assert round_half_away_from_zero(4.65, -1) == pytest.approx(4.7)
        assert round_half_away_from_zero(3.14159, -2) == pytest.approx(3.14)

    def test_half_rounds_away_from_zero(self) -> None:
        """Половина округляется от нуля (не к чётному)"""
        assert round_half_away_from_zero(2.5, 0) == 3.0
        assert round_half_away_from_zero(-2.5, 0) == -3.0
        assert round_half_away_from_zero(0.125, -2) == pytest.approx(0.13)

    def test_integer_places(self) -> None:
        assert round_half_away_from_zero(1249.0, 2) == 1200.0
        assert round_half_away_from_zero(1250.0, 2) == 1300.0

    def test_units_place(self) -> None:
        assert round_half_away_from_zero(7.4, 0) == 7.0

    def test_idempotent(self) -> None:
        """Повторное округление не меняет результат"""
        once = round_half_away_from_zero(9.87654, -3)
        assert round_half_away_from_zero(once, -3) == once

    def test_small_value_rounds_to_zero(self) -> None:
        assert round_half_away_from_zero(0.01, -1) == 0.0

    def test_negative_result_rounding_to_zero_has_no_sign(self) -> None:
        result = round_half_away_from_zero(-0.04, -1)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_place_below_float_power_range(self) -> None:
        """Разряд 10**-309 не представим степенью float"""
        assert round_half_away_from_zero(1.5e-308, -309) == 1.5e-308
        assert round_half_away_from_zero(1.0, -399) == 1.0

    def test_place_at_float_power_limit(self) -> None:
        assert round_half_away_from_zero(1.2e308, 308) == 1e308

    def test_carry_past_float_max_is_infinite(self) -> None:
        """Перенос за 1.8e308 даёт inf; rounded() это учитывает"""
        assert round_half_away_from_zero(1.7e308, 308) == math.inf


class TestDecimalMantissa:
    """Тесты для decimal_mantissa"""

    def test_positive_exponent(self) -> None:
        assert decimal_mantissa(1230.0, 3) == 1.23

    def test_negative_exponent(self) -> None:
        assert decimal_mantissa(0.00123, -3) == 1.23

    def test_exponent_beyond_float_powers(self) -> None:
        assert decimal_mantissa(1.5e-308, -308) == 1.5
        assert decimal_mantissa(1.7e308, 308) == 1.7


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ
# =============================================================================


class TestFormatting:
    """Тесты для format_fixed / format_exact"""

    def test_fixed_decimals(self) -> None:
        assert format_fixed(4.7, 1) == "4.7"
        assert format_fixed(0.005, 4) == "0.0050"

    def test_fixed_no_decimals(self) -> None:
        assert format_fixed(1200.0, 0) == "1200"

    def test_fixed_negative_decimals_clamped(self) -> None:
        """Отрицательное число знаков трактуется как ноль"""
        assert format_fixed(2.0, -3) == "2"

    def test_exact_drops_trailing_zeros(self) -> None:
        assert format_exact(5.0) == "5"
        assert format_exact(2.5) == "2.5"
        assert format_exact(100.0) == "100"

    def test_exact_without_exponent(self) -> None:
        """Точная запись никогда не использует экспоненту"""
        assert format_exact(1e-7) == "0.0000001"
        assert format_exact(1.5e6) == "1500000"

    def test_exact_negative_zero(self) -> None:
        assert format_exact(-0.0) == "0"
