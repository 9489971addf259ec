"""
Contract Validation Module

Валидация словарей значений geomalg против JSON Schema контрактов.
"""

from .validators import (
    ContractValidator,
    Geometric2Validator,
    Geometric3Validator,
    SchemaLoader,
    Spinor2Validator,
    Spinor3Validator,
    Vector2Validator,
    Vector3Validator,
    Vector4Validator,
    get_validator,
    validate_contract,
    validate_geometric3,
    validate_vector3,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "Vector2Validator",
    "Vector3Validator",
    "Vector4Validator",
    "Spinor2Validator",
    "Spinor3Validator",
    "Geometric2Validator",
    "Geometric3Validator",
    # Functions
    "get_validator",
    "validate_contract",
    "validate_geometric3",
    "validate_vector3",
]
