"""
Domain models and value objects.

Contains the precision-aware number (SigFigNumber), literal grammar helpers,
and lexer token models.
"""

from src.core.domain.literal import (
    EXACT_MARKER,
    EXPONENT_MARKER,
    count_sig_figs,
    normalize_literal,
    read_leading_float,
    split_exponent,
)
from src.core.domain.sigfig import (
    EXACT,
    LiteralParseError,
    SigFigNumber,
    SigFigValidationError,
    add,
    divide,
    multiply,
    parse_sigfig_literal,
    subtract,
)
from src.core.domain.token import OPERATOR_KINDS, PAREN_KINDS, Token, TokenKind

__all__ = [
    # Literal grammar
    "EXACT_MARKER",
    "EXPONENT_MARKER",
    "count_sig_figs",
    "normalize_literal",
    "read_leading_float",
    "split_exponent",
    # SigFigNumber
    "EXACT",
    "SigFigNumber",
    "SigFigValidationError",
    "LiteralParseError",
    "parse_sigfig_literal",
    "multiply",
    "divide",
    "add",
    "subtract",
    # Token model
    "Token",
    "TokenKind",
    "OPERATOR_KINDS",
    "PAREN_KINDS",
]
