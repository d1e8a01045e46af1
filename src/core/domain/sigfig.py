"""
SigFigNumber — величина с явной точностью в значащих цифрах

Значение хранится как пара (magnitude, last_sig_place):
- magnitude: конечное вещественное значение величины
- last_sig_place: десятичный разряд младшей значащей цифры
  (-1 = десятые, 0 = единицы, 2 = сотни; -inf для точной величины)

Точность (precision) не хранится, а выводится из той же пары:

    precision = floor(log10(|magnitude|)) - last_sig_place + 1

Поэтому precision и last_sig_place — два представления одного инварианта:
присваивание одного пересчитывает другое от текущей magnitude.

Правила арифметики:
- умножение / деление: precision = min(a.precision, b.precision), EXACT = +inf
- сложение / вычитание: last_sig_place = max(a.last_sig_place, b.last_sig_place)

Все операции возвращают новый экземпляр, операнды не изменяются.
"""

from __future__ import annotations

import math
from typing import Any, Final, Optional, Union

from src.core.domain.literal import (
    EXACT_MARKER,
    count_sig_figs,
    normalize_literal,
    read_leading_float,
    split_exponent,
)
from src.core.log import get_logger
from src.core.math.rounding import (
    decimal_mantissa,
    format_exact,
    format_fixed,
    is_integral,
    is_real_number,
    is_valid_float,
    order_of_magnitude,
    round_half_away_from_zero,
)

__all__ = [
    "EXACT",
    "LiteralParseError",
    "Precision",
    "SigFigNumber",
    "SigFigValidationError",
    "add",
    "divide",
    "multiply",
    "parse_sigfig_literal",
    "subtract",
]

logger = get_logger(__name__)

# Бесконечная точность (точная величина, например счётное число)
EXACT: Final[float] = math.inf

Precision = Union[int, float]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SigFigValidationError(ValueError):
    """
    Некорректное прямое построение SigFigNumber.

    Ошибка программиста, а не данных: нечисловая или бесконечная величина,
    точность не целое положительное и не EXACT, последний значащий разряд
    не целый и не -inf. Значения никогда не приводятся молча.
    """


class LiteralParseError(ValueError):
    """Текст не соответствует грамматике литерала со значащими цифрами."""


# =============================================================================
# SIGFIG NUMBER
# =============================================================================


class SigFigNumber:
    """
    Величина с точностью в значащих цифрах.

    Examples:
        >>> SigFigNumber(3.49, 3).display()
        '3.49'
        >>> (SigFigNumber.from_literal("1.2") + SigFigNumber.from_literal("3.45")).display()
        '4.7'
    """

    __slots__ = ("_magnitude", "_last_sig_place")

    def __init__(self, magnitude: float, precision: Precision = EXACT):
        self._magnitude = _validate_magnitude(magnitude)
        self._last_sig_place: Precision = -math.inf
        self.precision = precision

    @classmethod
    def with_last_sig_place(cls, magnitude: float, last_sig_place: Precision) -> "SigFigNumber":
        """
        Построение по последнему значащему разряду вместо точности.

        Используется для результатов сложения/вычитания и округления, где
        выведенная точность может оказаться неположительной (после
        сокращения разрядов или для нулевой величины).
        """
        number = cls.__new__(cls)
        number._magnitude = _validate_magnitude(magnitude)
        number.last_sig_place = last_sig_place
        return number

    @classmethod
    def from_literal(cls, text: str) -> "SigFigNumber":
        """
        Строгий разбор литерала.

        Raises:
            LiteralParseError: Если текст не соответствует грамматике литерала
        """
        number = parse_sigfig_literal(text)
        if number is None:
            raise LiteralParseError(f"Invalid significant-figure literal: {text!r}")
        return number

    # -------------------------------------------------------------------------
    # Поля
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        return self._magnitude

    @property
    def last_sig_place(self) -> Precision:
        """Десятичный разряд младшей значащей цифры (-inf для точной величины)."""
        return self._last_sig_place

    @last_sig_place.setter
    def last_sig_place(self, value: Precision) -> None:
        if not (is_integral(value) or value == -math.inf):
            raise SigFigValidationError(f"Invalid last significant place: {value!r}")
        self._last_sig_place = value

    @property
    def precision(self) -> Precision:
        """Количество значащих цифр (EXACT для точной величины)."""
        if self._last_sig_place == -math.inf:
            return EXACT
        return order_of_magnitude(self._magnitude) - self._last_sig_place + 1

    @precision.setter
    def precision(self, value: Precision) -> None:
        if value == EXACT:
            self._last_sig_place = -math.inf
            return

        if not is_integral(value) or value < 1:
            raise SigFigValidationError(f"Invalid number of significant figures: {value!r}")

        self._last_sig_place = order_of_magnitude(self._magnitude) - value + 1

    @property
    def is_exact(self) -> bool:
        return self._last_sig_place == -math.inf

    # -------------------------------------------------------------------------
    # Округление и отображение
    # -------------------------------------------------------------------------

    def rounded(self) -> "SigFigNumber":
        """
        Округление величины до последнего значащего разряда.

        Количество значащих цифр сохраняется, последний разряд пересчитывается
        от округлённой величины (9.96 с 2 цифрами → 10 с разрядом 0).
        Точная величина возвращается копией. Если округление у границы
        float даёт бесконечность, величина остаётся неокруглённой.
        """
        if self.is_exact:
            return self.copy()

        value = round_half_away_from_zero(self._magnitude, self._last_sig_place)
        if not is_valid_float(value):
            value = self._magnitude
        precision = self.precision

        if precision < 1:
            return SigFigNumber.with_last_sig_place(value, self._last_sig_place)

        return SigFigNumber(value, precision)

    def float_string(self) -> str:
        """Фиксированная запись с max(0, -last_sig_place) знаками после точки."""
        if self.is_exact:
            return format_exact(self._magnitude)

        num = self.rounded()
        return format_fixed(num.magnitude, -self._last_sig_place)

    def scientific(self, html: bool = False) -> str:
        """
        Научная запись: "<мантисса>e<порядок>" или "<мантисса><sup>порядок</sup>".

        Мантисса форматируется с precision - 1 знаками после точки.
        """
        if self._magnitude == 0:
            return "0"

        precision = self.precision
        if precision < 1:
            return "0"

        value = self.rounded().magnitude
        exponent = order_of_magnitude(value)
        mantissa = decimal_mantissa(value, exponent)

        if precision == EXACT:
            mantissa_text = format_exact(mantissa)
        else:
            mantissa_text = format_fixed(mantissa, precision - 1)

        if html:
            return f"{mantissa_text}<sup>{exponent}</sup>"
        return f"{mantissa_text}e{exponent}"

    def display(self, html: bool = False) -> str:
        """
        Текстовое представление, читаемое обратно той же грамматикой литерала.

        Порядок:
        1. Округление
        2. Точная величина → фиксированная запись + маркер "c"
        3. Дробный последний разряд → фиксированная запись
        4. Разряд единиц и величина кратна 10 → запись с завершающей точкой ("20.")
        5. Разряд единиц → фиксированная запись
        6. Иначе фиксированная запись, если её повторный разбор даёт ту же
           точность; в противном случае научная запись
        """
        num = self.rounded()

        if num.is_exact:
            return num.float_string() + EXACT_MARKER

        last_sig_place = num.last_sig_place

        if last_sig_place < 0:
            return num.float_string()

        # Ноль с разрядом единиц тоже даёт "0.": у литерала нуля нет значащих
        # цифр, так что эта запись не разбирается обратно
        if last_sig_place == 0 and num.magnitude % 10 == 0:
            return num.float_string() + "."

        if last_sig_place == 0:
            return num.float_string()

        fixed = num.float_string()
        reparsed = parse_sigfig_literal(fixed)
        if reparsed is None or reparsed.precision != num.precision:
            logger.debug("Ambiguous trailing zeros in %r, using scientific notation", fixed)
            return num.scientific(html)

        return fixed

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def multiply(self, other: "SigFigNumber") -> "SigFigNumber":
        return multiply(self, other)

    def divide(self, other: "SigFigNumber") -> "SigFigNumber":
        return divide(self, other)

    def add(self, other: "SigFigNumber") -> "SigFigNumber":
        return add(self, other)

    def subtract(self, other: "SigFigNumber") -> "SigFigNumber":
        return subtract(self, other)

    def __mul__(self, other: Any) -> "SigFigNumber":
        if not isinstance(other, SigFigNumber):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other: Any) -> "SigFigNumber":
        if not isinstance(other, SigFigNumber):
            return NotImplemented
        return divide(self, other)

    def __add__(self, other: Any) -> "SigFigNumber":
        if not isinstance(other, SigFigNumber):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Any) -> "SigFigNumber":
        if not isinstance(other, SigFigNumber):
            return NotImplemented
        return subtract(self, other)

    # -------------------------------------------------------------------------
    # Служебное
    # -------------------------------------------------------------------------

    def copy(self) -> "SigFigNumber":
        return SigFigNumber.with_last_sig_place(self._magnitude, self._last_sig_place)

    def to_contract(self) -> dict[str, Any]:
        """
        Сериализация в словарь контракта quantity.

        Returns:
            {"magnitude", "precision" (int или "exact"), "last_sig_place"
            (int или None для точной величины), "display"}
        """
        if self.is_exact:
            return {
                "magnitude": self._magnitude,
                "precision": "exact",
                "last_sig_place": None,
                "display": self.display(),
            }

        return {
            "magnitude": self._magnitude,
            "precision": self.precision,
            "last_sig_place": self._last_sig_place,
            "display": self.display(),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SigFigNumber):
            return NotImplemented
        return (
            self._magnitude == other._magnitude
            and self._last_sig_place == other._last_sig_place
        )

    def __hash__(self) -> int:
        return hash((self._magnitude, self._last_sig_place))

    def __repr__(self) -> str:
        precision = "EXACT" if self.is_exact else self.precision
        return f"SigFigNumber({self._magnitude!r}, {precision})"

    def __str__(self) -> str:
        return self.display()


def _validate_magnitude(value: Any) -> float:
    if not is_real_number(value):
        raise SigFigValidationError(f"Invalid value: {value!r}")
    if not is_valid_float(value):
        raise SigFigValidationError(f"Value must be finite, got {value!r}")
    return float(value)


# =============================================================================
# РАЗБОР ЛИТЕРАЛА
# =============================================================================


def parse_sigfig_literal(text: str) -> Optional[SigFigNumber]:
    """
    Построение SigFigNumber из текстового литерала.

    Алгоритм:
    1. Маркер "c" → точная величина (EXACT), значащие цифры не считаются
    2. Величина читается из ведущей числовой части
    3. При наличии экспоненты цифры считаются только в мантиссе
    4. Иначе цифры считаются по всей записи

    Args:
        text: Литерал (регистр и пробелы не важны)

    Returns:
        SigFigNumber или None, если литерал не распознан

    Examples:
        >>> parse_sigfig_literal("100").precision
        1
        >>> parse_sigfig_literal("5c").is_exact
        True
        >>> parse_sigfig_literal("abc") is None
        True
    """
    literal = normalize_literal(text)

    if EXACT_MARKER in literal:
        value = read_leading_float(literal.replace(EXACT_MARKER, "", 1))
        if value is None or not is_valid_float(value):
            return None
        return SigFigNumber(value, EXACT)

    value = read_leading_float(literal)
    if value is None or not is_valid_float(value):
        return None

    mantissa, _exponent = split_exponent(literal)
    sig_figs = count_sig_figs(mantissa)
    if sig_figs is None:
        return None

    return SigFigNumber(value, sig_figs)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def multiply(a: SigFigNumber, b: SigFigNumber) -> SigFigNumber:
    """Произведение; точность = min(a.precision, b.precision)."""
    return _with_precision(a.magnitude * b.magnitude, min(a.precision, b.precision))


def divide(a: SigFigNumber, b: SigFigNumber) -> SigFigNumber:
    """
    Частное; точность = min(a.precision, b.precision).

    Raises:
        ZeroDivisionError: Если делитель равен нулю
    """
    if b.magnitude == 0:
        raise ZeroDivisionError(f"Division of {a!r} by zero quantity")
    return _with_precision(a.magnitude / b.magnitude, min(a.precision, b.precision))


def add(a: SigFigNumber, b: SigFigNumber) -> SigFigNumber:
    """Сумма; последний значащий разряд = max(a.last_sig_place, b.last_sig_place)."""
    return SigFigNumber.with_last_sig_place(
        a.magnitude + b.magnitude,
        max(a.last_sig_place, b.last_sig_place),
    )


def subtract(a: SigFigNumber, b: SigFigNumber) -> SigFigNumber:
    """Разность; последний значащий разряд = max(a.last_sig_place, b.last_sig_place)."""
    return SigFigNumber.with_last_sig_place(
        a.magnitude - b.magnitude,
        max(a.last_sig_place, b.last_sig_place),
    )


def _with_precision(value: float, precision: Precision) -> SigFigNumber:
    # Операнд после сокращения разрядов может иметь precision < 1
    if precision == EXACT or precision >= 1:
        return SigFigNumber(value, precision)
    return SigFigNumber.with_last_sig_place(value, order_of_magnitude(value) - precision + 1)
