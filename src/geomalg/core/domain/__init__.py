"""
Immutable snapshots of geomalg values.
"""

from geomalg.core.domain.snapshots import (
    Geometric2Snapshot,
    Geometric3Snapshot,
    Spinor2Snapshot,
    Spinor3Snapshot,
    ValueSnapshot,
    Vector2Snapshot,
    Vector3Snapshot,
    Vector4Snapshot,
)

__all__ = [
    # Base
    "ValueSnapshot",
    # Vectors
    "Vector2Snapshot",
    "Vector3Snapshot",
    "Vector4Snapshot",
    # Spinors
    "Spinor2Snapshot",
    "Spinor3Snapshot",
    # Multivectors
    "Geometric2Snapshot",
    "Geometric3Snapshot",
]
