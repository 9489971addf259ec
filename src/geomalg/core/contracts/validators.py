"""
JSON Schema Contract Validators

Модуль для валидации словарей (to_dict / from_dict) согласно JSON Schema
контрактам значений geomalg. Использует библиотеку jsonschema.

Схемы (core/contracts/schema/):
- vector2.json, vector3.json, vector4.json
- spinor2.json, spinor3.json
- geometric2.json, geometric3.json

Имя схемы совпадает с полем kind снимка.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'vector3')

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

        logger.debug("loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


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
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class Vector2Validator(ContractValidator):
    def __init__(self):
        super().__init__("vector2")


class Vector3Validator(ContractValidator):
    def __init__(self):
        super().__init__("vector3")


class Vector4Validator(ContractValidator):
    def __init__(self):
        super().__init__("vector4")


class Spinor2Validator(ContractValidator):
    def __init__(self):
        super().__init__("spinor2")


class Spinor3Validator(ContractValidator):
    def __init__(self):
        super().__init__("spinor3")


class Geometric2Validator(ContractValidator):
    def __init__(self):
        super().__init__("geometric2")


class Geometric3Validator(ContractValidator):
    def __init__(self):
        super().__init__("geometric3")


# Валидатор для каждого kind
_VALIDATORS: Dict[str, type[ContractValidator]] = {
    "vector2": Vector2Validator,
    "vector3": Vector3Validator,
    "vector4": Vector4Validator,
    "spinor2": Spinor2Validator,
    "spinor3": Spinor3Validator,
    "geometric2": Geometric2Validator,
    "geometric3": Geometric3Validator,
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def get_validator(kind: str) -> ContractValidator:
    """
    Валидатор контракта по kind.

    Raises:
        KeyError: Если kind неизвестен
    """
    try:
        validator_type = _VALIDATORS[kind]
    except KeyError:
        raise KeyError(f"Unknown contract kind: {kind!r}") from None
    return validator_type()


def validate_contract(kind: str, data: Dict[str, Any]) -> None:
    """
    Валидация словаря значения вида kind.

    Args:
        kind: Вид значения ('vector3', 'geometric3', ...)
        data: Данные для валидации

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    get_validator(kind).validate(data)


def validate_vector3(data: Dict[str, Any]) -> None:
    Vector3Validator().validate(data)


def validate_geometric3(data: Dict[str, Any]) -> None:
    Geometric3Validator().validate(data)
