"""Tokenizer: ordered pattern matchers over an arithmetic expression.

На каждой позиции сканер пробует матчеры в фиксированном порядке:
whitespace, multiply, divide, add, subtract, open_paren, close_paren, quantity.
Побеждает первый матчер, совпавший с непустым префиксом; сканирование
сдвигается на длину совпадения.

Особенности:
- Ведущий "-" всегда лексема subtract, а не часть величины
- Quantity сразу преобразуется в SigFigNumber
- Лексемы выдаются лениво; повторный вызов на той же строке даёт тот же поток
"""

import re
from dataclasses import dataclass
from typing import Iterator

from src.core.domain.sigfig import parse_sigfig_literal
from src.core.domain.token import Token, TokenKind
from src.core.log import get_logger

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LexError(ValueError):
    """
    Ни один матчер не совпал на текущей позиции.

    Выражение не может быть разобрано частично, поэтому ошибка терминальна
    и несёт позицию и окно контекста исходного текста.
    """

    def __init__(self, position: int, context: str, message: str | None = None):
        self.position = position
        self.context = context
        super().__init__(
            message or f"Unknown token at character index {position}: ... {context} ..."
        )


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class LexerConfig:
    """Конфигурация лексера."""

    # Радиус окна контекста в сообщении об ошибке (символов с каждой стороны)
    context_radius: int = 3


# =============================================================================
# MATCHERS
# =============================================================================


@dataclass(frozen=True)
class Matcher:
    """Матчер одного вида лексем."""

    kind: TokenKind
    pattern: re.Pattern

    def match(self, expr: str, position: int) -> str | None:
        found = self.pattern.match(expr, position)
        if found is None or not found.group(0):
            return None
        return found.group(0)


# Порядок задаёт приоритет: первый совпавший матчер побеждает
MATCHERS: tuple[Matcher, ...] = (
    Matcher(TokenKind.WHITESPACE, re.compile(r"\s")),
    Matcher(TokenKind.MULTIPLY, re.compile(r"\*")),
    Matcher(TokenKind.DIVIDE, re.compile(r"/")),
    Matcher(TokenKind.ADD, re.compile(r"\+")),
    Matcher(TokenKind.SUBTRACT, re.compile(r"-")),
    Matcher(TokenKind.OPEN_PAREN, re.compile(r"\(")),
    Matcher(TokenKind.CLOSE_PAREN, re.compile(r"\)")),
    Matcher(TokenKind.QUANTITY, re.compile(r"(?:[0-9]+\.?[0-9]*|[0-9]*\.?[0-9]+)(?:e[0-9]*)?c?")),
)


# =============================================================================
# TOKENIZE
# =============================================================================


def _context(expr: str, position: int, radius: int) -> str:
    return expr[max(0, position - radius):min(position + radius, len(expr))]


def _make_token(kind: TokenKind, position: int, text: str, expr: str, config: LexerConfig) -> Token:
    if kind != TokenKind.QUANTITY:
        return Token(kind=kind, position=position, text=text, payload=text)

    quantity = parse_sigfig_literal(text)
    if quantity is None:
        # Паттерн quantity допускает запись без значащих цифр ("0", "00.0")
        logger.debug("Quantity literal %r at index %d has no significant figures", text, position)
        raise LexError(
            position,
            _context(expr, position, config.context_radius),
            f"Invalid quantity {text!r} at character index {position}",
        )

    return Token(kind=kind, position=position, text=text, payload=quantity)


def tokenize(expr: str, config: LexerConfig | None = None) -> Iterator[Token]:
    """
    Ленивое разбиение выражения на лексемы.

    Args:
        expr: Исходное выражение (например "3.49 + (5c * 3c)")
        config: Конфигурация лексера (default: LexerConfig())

    Yields:
        Token в порядке исходного текста, включая пробельные

    Raises:
        LexError: Если на текущей позиции не совпал ни один матчер
    """
    config = config or LexerConfig()
    position = 0

    while position < len(expr):
        for matcher in MATCHERS:
            text = matcher.match(expr, position)
            if text is not None:
                break
        else:
            logger.debug("No token matches at character index %d of %r", position, expr)
            raise LexError(position, _context(expr, position, config.context_radius))

        yield _make_token(matcher.kind, position, text, expr, config)
        position += len(text)


__all__ = ["LexError", "LexerConfig", "MATCHERS", "Matcher", "tokenize"]
