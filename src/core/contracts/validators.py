"""
JSON Schema Contract Validators

Модуль для валидации сериализованных величин и лексем согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema для проверки
соответствия данных схемам.

Схемы:
- quantity.json (SigFigNumber.to_contract)
- token.json (Token.to_contract, ссылается на quantity.json)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource

from src.core.domain.sigfig import EXACT, SigFigNumber


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'quantity')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """Реестр всех схем каталога для разрешения $ref между контрактами."""
        resources = [
            (f"{path.stem}.json", Resource.from_contents(self.load_schema(path.stem)))
            for path in sorted(self._schema_dir.glob("*.json"))
        ]
        return Registry().with_resources(resources)


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=_SCHEMA_LOADER.registry())

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class QuantityValidator(ContractValidator):
    """Валидатор для quantity контракта."""

    def __init__(self):
        super().__init__("quantity")


class TokenValidator(ContractValidator):
    """Валидатор для token контракта."""

    def __init__(self):
        super().__init__("token")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quantity(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной величины.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    QuantityValidator().validate(data)


def validate_token(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной лексемы.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    TokenValidator().validate(data)


def validate_token_stream(tokens: Iterable[Dict[str, Any]]) -> None:
    """
    Валидация потока лексем: каждая лексема по схеме, позиции строго возрастают.

    Raises:
        ValidationError: Если лексема не соответствует схеме или нарушен порядок
    """
    validator = TokenValidator()
    previous_end = 0

    for index, token in enumerate(tokens):
        validator.validate(token)
        if token["position"] < previous_end:
            raise ValidationError(
                f"Token {index} at position {token['position']} overlaps previous token "
                f"ending at {previous_end}"
            )
        previous_end = token["position"] + len(token["text"])


def quantity_from_contract(data: Dict[str, Any]) -> SigFigNumber:
    """
    Восстановление SigFigNumber из контракта quantity.

    Величина строится по last_sig_place, а не по precision, поэтому
    восстанавливаются и результаты арифметики с неположительной точностью.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_quantity(data)

    if data["precision"] == "exact":
        return SigFigNumber(data["magnitude"], EXACT)

    return SigFigNumber.with_last_sig_place(data["magnitude"], data["last_sig_place"])
