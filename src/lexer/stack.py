"""Flat token stack assembled from the tokenizer output.

Стек — линейная последовательность операторов, скобок и уже разобранных
величин в порядке исходного текста. Пробельные лексемы отбрасываются.
Дерево выражения и вычисление строятся внешним потребителем.

Пример: "3.49 + (5c * 3c)" →

    [3.49, +, (, 5c, *, 3c, )]
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.sigfig import SigFigNumber
from src.core.domain.token import OPERATOR_KINDS, PAREN_KINDS, Token, TokenKind
from src.lexer.tokenizer import LexerConfig, tokenize


@dataclass(frozen=True)
class StackEntry:
    """Элемент плоского стека лексем."""

    kind: TokenKind
    position: int

    # Только для kind == QUANTITY
    quantity: Optional[SigFigNumber] = None

    @property
    def is_operator(self) -> bool:
        return self.kind in OPERATOR_KINDS

    @property
    def is_paren(self) -> bool:
        return self.kind in PAREN_KINDS

    @classmethod
    def from_token(cls, token: Token) -> "StackEntry":
        if token.kind == TokenKind.QUANTITY:
            return cls(kind=token.kind, position=token.position, quantity=token.payload)
        return cls(kind=token.kind, position=token.position)


def build_token_stack(expr: str, config: LexerConfig | None = None) -> list[StackEntry]:
    """
    Разбор выражения в плоский стек.

    Args:
        expr: Исходное выражение
        config: Конфигурация лексера

    Returns:
        Список StackEntry без пробельных лексем

    Raises:
        LexError: Если выражение содержит нераспознанный символ
    """
    return [
        StackEntry.from_token(token)
        for token in tokenize(expr, config)
        if not token.is_whitespace
    ]


__all__ = ["StackEntry", "build_token_stack"]
