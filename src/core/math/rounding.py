"""
Rounding — десятичные примитивы для значащих цифр

Модуль содержит численные примитивы, на которых построена модель SigFigNumber:
- Проверки валидности float (не NaN, не Inf) и целочисленности
- Порядок величины (floor(log10(|x|)))
- Округление half-away-from-zero до заданного десятичного разряда
- Фиксированное и "точное" (exact) текстовое представление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не принимаются как величина
2. bool не считается числом (True/False отклоняются)
3. Округление детерминировано и идемпотентно
"""

import math
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порядок величины, присваиваемый нулю (log10(0) не определён)
ZERO_ORDER_OF_MAGNITUDE: Final[int] = 0


# =============================================================================
# ПРОВЕРКИ ТИПОВ И ВАЛИДНОСТИ
# =============================================================================


def is_real_number(value: object) -> bool:
    """
    Проверка, является ли значение вещественным числом (int или float, но не bool).

    Args:
        value: Проверяемое значение

    Returns:
        True для int/float, False для bool, str, None и прочего
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечно
    """
    return math.isfinite(value)


def is_integral(value: object) -> bool:
    """Целое число без приведения: int, но не bool и не float."""
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# ПОРЯДОК ВЕЛИЧИНЫ
# =============================================================================


def order_of_magnitude(value: float) -> int:
    """
    Десятичный порядок старшей цифры: floor(log10(|value|)).

    Для нуля возвращает ZERO_ORDER_OF_MAGNITUDE, чтобы точность и
    последний значащий разряд нулевой величины оставались согласованными.

    Examples:
        >>> order_of_magnitude(1200.0)
        3
        >>> order_of_magnitude(0.0050)
        -3
        >>> order_of_magnitude(0.0)
        0
    """
    if value == 0:
        return ZERO_ORDER_OF_MAGNITUDE

    order = math.floor(math.log10(abs(value)))

    # log10 может ошибиться на единицу у точных степеней десяти
    if order < sys.float_info.max_10_exp and 10.0 ** (order + 1) <= abs(value):
        order += 1
    elif 10.0 ** order > abs(value):
        order -= 1

    return order


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float, place: int) -> float:
    """
    Округление до десятичного разряда 10**place (half away from zero).

    Округление выполняется в Decimal по кратчайшей записи repr(value),
    поэтому разряд не ограничен диапазоном степеней десяти float
    (1.5e-308 с разрядом -309, литералы из сотен цифр).

    Args:
        value: Значение для округления
        place: Десятичный разряд (-1 = десятые, 0 = единицы, 2 = сотни)

    Returns:
        Округлённое значение

    Examples:
        >>> round_half_away_from_zero(4.65, -1)
        4.7
        >>> round_half_away_from_zero(-2.5, 0)
        -3.0
        >>> round_half_away_from_zero(1249.0, 2)
        1200.0
    """
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(place)

    with localcontext() as ctx:
        # quantize требует, чтобы все цифры результата помещались в prec
        ctx.prec = max(ctx.prec, exact.adjusted() - place + 2)
        result = exact.quantize(quantum, rounding=ROUND_HALF_UP)

    if result.is_zero():
        return 0.0
    return float(result)


def decimal_mantissa(value: float, exponent: int) -> float:
    """
    Мантисса value / 10**exponent, вычисленная сдвигом десятичной точки.

    Examples:
        >>> decimal_mantissa(1230.0, 3)
        1.23
        >>> decimal_mantissa(1.5e-308, -308)
        1.5
    """
    return float(Decimal(repr(value)).scaleb(-exponent))


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_fixed(value: float, decimals: int) -> str:
    """
    Фиксированная запись с заданным числом знаков после точки.

    Examples:
        >>> format_fixed(4.7, 1)
        '4.7'
        >>> format_fixed(1200.0, 0)
        '1200'
    """
    return f"{value:.{max(0, decimals)}f}"


def format_exact(value: float) -> str:
    """
    Кратчайшая фиксированная запись float без экспоненты и лишних нулей.

    Используется для величин с бесконечной точностью, где число знаков
    после точки не ограничено последним значащим разрядом.

    Examples:
        >>> format_exact(5.0)
        '5'
        >>> format_exact(2.5)
        '2.5'
        >>> format_exact(1e-7)
        '0.0000001'
    """
    text = format(Decimal(repr(value)).normalize(), "f")
    if text == "-0":
        return "0"
    return text
