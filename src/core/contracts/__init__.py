"""
Contract Validation Module

Модуль для валидации JSON контрактов: сериализованных величин и лексем.
"""

from .validators import (
    ContractValidator,
    QuantityValidator,
    SchemaLoader,
    TokenValidator,
    quantity_from_contract,
    validate_quantity,
    validate_token,
    validate_token_stream,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "QuantityValidator",
    "TokenValidator",
    # Functions
    "validate_quantity",
    "validate_token",
    "validate_token_stream",
    "quantity_from_contract",
]
