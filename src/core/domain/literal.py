"""
Literal — грамматика числовых литералов со значащими цифрами

Грамматика литерала (без учёта регистра, пробелы удаляются):

    [-]digits[.digits] | [-].digits   мантисса
    e[-]digits                        необязательная экспонента
    c                                 необязательный маркер точной величины

Правило подсчёта значащих цифр (только по мантиссе):
- целое без точки: отбрасываются ведущие и ВСЕ хвостовые нули ("100" → 1)
- с точкой и цифрой перед ней: хвостовые нули значимы, точка не считается
  ("100.0" → 4, "20." → 2)
- вида ".000ddd" / "0.000ddd": счёт с первой ненулевой цифры (".0050" → 2)

Литерал, не подходящий ни под одну форму (например "0" или "0.00"),
не имеет значащих цифр.
"""

from __future__ import annotations

import re
from typing import Final, Optional

__all__ = [
    "EXACT_MARKER",
    "EXPONENT_MARKER",
    "count_sig_figs",
    "normalize_literal",
    "read_leading_float",
    "split_exponent",
]

EXACT_MARKER: Final[str] = "c"
EXPONENT_MARKER: Final[str] = "e"

# Три альтернативы соответствуют трём формам правила подсчёта.
# Ровно одна группа захватывает значащие цифры.
_SIG_FIG_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"-?0*"
    r"(?:"
    r"((?:[1-9][0-9]*)?[1-9])0*"
    r"|([1-9][0-9]*(?:\.[0-9]+)?)\.?"
    r"|\.0*([1-9][0-9]*)"
    r")"
)

# Ведущая числовая часть строки, как её прочитал бы разборщик float
_LEADING_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?"
)

_WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def normalize_literal(text: str) -> str:
    """Удаление пробельных символов и приведение к нижнему регистру."""
    return _WHITESPACE_PATTERN.sub("", text).lower()


def count_sig_figs(numeral: str) -> Optional[int]:
    """
    Подсчёт значащих цифр в записи числа без экспоненты.

    Args:
        numeral: Мантисса или целая запись числа (например "100.0", "-.0050")

    Returns:
        Количество значащих цифр или None, если запись не подходит
        ни под одну форму правила

    Examples:
        >>> count_sig_figs("100")
        1
        >>> count_sig_figs("100.0")
        4
        >>> count_sig_figs(".0050")
        2
        >>> count_sig_figs("0") is None
        True
    """
    match = _SIG_FIG_PATTERN.fullmatch(numeral)
    if match is None:
        return None

    digits = next(group for group in match.groups() if group is not None)
    return len(digits.replace(".", ""))


def read_leading_float(text: str) -> Optional[float]:
    """
    Чтение float из ведущей числовой части строки.

    Хвост после числа игнорируется ("5e" → 5.0, "3.2x" → 3.2).
    Бесконечности и NaN не распознаются.

    Returns:
        Значение или None, если строка не начинается с числа
    """
    match = _LEADING_FLOAT_PATTERN.match(text)
    if match is None:
        return None
    return float(match.group(0))


def split_exponent(literal: str) -> tuple[str, Optional[str]]:
    """
    Разделение литерала на мантиссу и экспоненту.

    Examples:
        >>> split_exponent("1.20e3")
        ('1.20', '3')
        >>> split_exponent("42")
        ('42', None)
    """
    if EXPONENT_MARKER not in literal:
        return literal, None

    mantissa, exponent = literal.split(EXPONENT_MARKER, 1)
    return mantissa, exponent
