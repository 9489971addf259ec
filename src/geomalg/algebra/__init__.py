"""
Algebra — векторы, спиноры и мультивекторы G2/G3.
"""

from geomalg.algebra.vector2 import Vector2
from geomalg.algebra.vector3 import Vector3
from geomalg.algebra.vector4 import Vector4
from geomalg.algebra.spinor2 import Spinor2
from geomalg.algebra.spinor3 import Spinor3
from geomalg.algebra.multivector import Multivector
from geomalg.algebra.geometric2 import Geometric2
from geomalg.algebra.geometric3 import Geometric3

__all__ = [
    # Vectors
    "Vector2",
    "Vector3",
    "Vector4",
    # Spinors
    "Spinor2",
    "Spinor3",
    # Multivectors
    "Multivector",
    "Geometric2",
    "Geometric3",
]
