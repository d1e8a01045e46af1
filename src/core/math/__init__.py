"""
Core math modules

Десятичные примитивы для модели значащих цифр.
"""

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

__all__ = [
    # Constants
    "ZERO_ORDER_OF_MAGNITUDE",
    # Validation
    "is_integral",
    "is_real_number",
    "is_valid_float",
    # Rounding
    "order_of_magnitude",
    "round_half_away_from_zero",
    "decimal_mantissa",
    # Formatting
    "format_exact",
    "format_fixed",
]
