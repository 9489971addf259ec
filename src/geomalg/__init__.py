"""
geomalg — геометрическая алгебра евклидовых пространств G2 и G3

Изменяемые векторы, спиноры и мультивекторы с блокировкой (lock/unlock),
снимками (pydantic) и JSON Schema контрактами.
"""

import logging

from geomalg.algebra import (
    Geometric2,
    Geometric3,
    Multivector,
    Spinor2,
    Spinor3,
    Vector2,
    Vector3,
    Vector4,
)
from geomalg.core.errors import (
    GeomalgError,
    InvalidArgumentError,
    LockedTargetError,
    NotInvertibleError,
    ReadOnlyPropertyError,
    UnlockError,
)
from geomalg.core.math.gauss import gauss

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Values
    "Vector2",
    "Vector3",
    "Vector4",
    "Spinor2",
    "Spinor3",
    "Multivector",
    "Geometric2",
    "Geometric3",
    # Errors
    "GeomalgError",
    "InvalidArgumentError",
    "LockedTargetError",
    "NotInvertibleError",
    "ReadOnlyPropertyError",
    "UnlockError",
    # Numerics
    "gauss",
]
