"""
Token — лексема арифметического выражения

Immutable Pydantic модель, представляющая одну лексему, выданную лексером.
Лексемы выдаются в порядке исходного текста; пробельные лексемы тоже
выдаются, но не несут смысловой нагрузки.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from src.core.domain.sigfig import SigFigNumber


# =============================================================================
# ENUMS
# =============================================================================


class TokenKind(str, Enum):
    """Вид лексемы"""

    WHITESPACE = "whitespace"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    ADD = "add"
    SUBTRACT = "subtract"
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"
    QUANTITY = "quantity"


OPERATOR_KINDS = frozenset(
    {TokenKind.MULTIPLY, TokenKind.DIVIDE, TokenKind.ADD, TokenKind.SUBTRACT}
)
PAREN_KINDS = frozenset({TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN})


# =============================================================================
# TOKEN MODEL
# =============================================================================


class Token(BaseModel):
    """
    Лексема с позицией в исходном тексте.

    Для quantity payload — разобранный SigFigNumber, для остальных видов —
    совпавший текст.
    """

    kind: TokenKind = Field(..., description="Вид лексемы")
    position: int = Field(..., ge=0, description="Смещение начала лексемы в тексте")
    text: str = Field(..., min_length=1, description="Совпавший исходный текст")
    payload: Union[SigFigNumber, str] = Field(..., description="Величина или текст лексемы")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("payload")
    @classmethod
    def validate_payload_kind(cls, v: Union[SigFigNumber, str], info) -> Union[SigFigNumber, str]:
        """Проверка, что quantity несёт SigFigNumber, а остальные лексемы — текст"""
        kind = info.data.get("kind")
        if kind == TokenKind.QUANTITY and not isinstance(v, SigFigNumber):
            raise ValueError("quantity token payload must be a SigFigNumber")
        if kind is not None and kind != TokenKind.QUANTITY and not isinstance(v, str):
            raise ValueError(f"{kind.value} token payload must be the matched text")
        return v

    @property
    def end(self) -> int:
        """Смещение сразу за лексемой"""
        return self.position + len(self.text)

    @property
    def is_whitespace(self) -> bool:
        return self.kind == TokenKind.WHITESPACE

    def to_contract(self) -> dict[str, Any]:
        """Сериализация в словарь контракта token."""
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "position": self.position,
            "text": self.text,
        }
        if isinstance(self.payload, SigFigNumber):
            data["quantity"] = self.payload.to_contract()
        return data
