"""
Snapshots — неизменяемые снимки значений

Immutable Pydantic модели, представляющие снимок вектора, спинора или
мультивектора: именованные координаты, вид значения (kind) и состояние
блокировки. Полная совместимость с JSON Schema (core/contracts/schema/*.json).

Снимок не зависит от алгебраических типов: преобразование значение ↔ снимок
выполняет Coords.to_snapshot() / from_snapshot().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Снимок неизменяем (frozen)
2. NaN/Inf в координатах отклоняются при валидации
3. Порядок FIELDS совпадает с порядком хранения координат в значении
"""

from typing import ClassVar, Literal

from pydantic import BaseModel, Field


# =============================================================================
# BASE
# =============================================================================


class ValueSnapshot(BaseModel):
    """
    Общая часть всех снимков.

    Подклассы задают KIND (совпадает с полем kind и именем JSON Schema)
    и FIELDS (имена координат в порядке хранения).
    """

    KIND: ClassVar[str] = ""
    FIELDS: ClassVar[tuple[str, ...]] = ()

    locked: bool = Field(False, description="Значение было заблокировано")

    model_config = {"frozen": True, "allow_inf_nan": False, "extra": "forbid"}

    def coordinates(self) -> list[float]:
        """Координаты в порядке хранения."""
        return [getattr(self, name) for name in self.FIELDS]


# =============================================================================
# VECTORS
# =============================================================================


class Vector2Snapshot(ValueSnapshot):
    """Снимок Vector2."""

    KIND: ClassVar[str] = "vector2"
    FIELDS: ClassVar[tuple[str, ...]] = ("x", "y")

    kind: Literal["vector2"] = Field("vector2", description="Вид значения")
    x: float = Field(..., description="Координата e1")
    y: float = Field(..., description="Координата e2")


class Vector3Snapshot(ValueSnapshot):
    """Снимок Vector3."""

    KIND: ClassVar[str] = "vector3"
    FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z")

    kind: Literal["vector3"] = Field("vector3", description="Вид значения")
    x: float = Field(..., description="Координата e1")
    y: float = Field(..., description="Координата e2")
    z: float = Field(..., description="Координата e3")


class Vector4Snapshot(ValueSnapshot):
    """Снимок Vector4."""

    KIND: ClassVar[str] = "vector4"
    FIELDS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")

    kind: Literal["vector4"] = Field("vector4", description="Вид значения")
    x: float = Field(..., description="Координата e1")
    y: float = Field(..., description="Координата e2")
    z: float = Field(..., description="Координата e3")
    w: float = Field(..., description="Координата e4")


# =============================================================================
# SPINORS
# =============================================================================


class Spinor2Snapshot(ValueSnapshot):
    """Снимок Spinor2: скаляр и бивектор e12."""

    KIND: ClassVar[str] = "spinor2"
    FIELDS: ClassVar[tuple[str, ...]] = ("a", "b")

    kind: Literal["spinor2"] = Field("spinor2", description="Вид значения")
    a: float = Field(..., description="Скалярная часть")
    b: float = Field(..., description="Координата e12")


class Spinor3Snapshot(ValueSnapshot):
    """Снимок Spinor3 (порядок хранения: yz, zx, xy, a)."""

    KIND: ClassVar[str] = "spinor3"
    FIELDS: ClassVar[tuple[str, ...]] = ("yz", "zx", "xy", "a")

    kind: Literal["spinor3"] = Field("spinor3", description="Вид значения")
    yz: float = Field(..., description="Координата e23")
    zx: float = Field(..., description="Координата e31")
    xy: float = Field(..., description="Координата e12")
    a: float = Field(..., description="Скалярная часть")


# =============================================================================
# MULTIVECTORS
# =============================================================================


class Geometric2Snapshot(ValueSnapshot):
    """Снимок Geometric2."""

    KIND: ClassVar[str] = "geometric2"
    FIELDS: ClassVar[tuple[str, ...]] = ("a", "x", "y", "b")

    kind: Literal["geometric2"] = Field("geometric2", description="Вид значения")
    a: float = Field(..., description="Скалярная часть")
    x: float = Field(..., description="Координата e1")
    y: float = Field(..., description="Координата e2")
    b: float = Field(..., description="Псевдоскаляр e12")


class Geometric3Snapshot(ValueSnapshot):
    """Снимок Geometric3."""

    KIND: ClassVar[str] = "geometric3"
    FIELDS: ClassVar[tuple[str, ...]] = ("a", "x", "y", "z", "yz", "zx", "xy", "b")

    kind: Literal["geometric3"] = Field("geometric3", description="Вид значения")
    a: float = Field(..., description="Скалярная часть")
    x: float = Field(..., description="Координата e1")
    y: float = Field(..., description="Координата e2")
    z: float = Field(..., description="Координата e3")
    yz: float = Field(..., description="Координата e23")
    zx: float = Field(..., description="Координата e31")
    xy: float = Field(..., description="Координата e12")
    b: float = Field(..., description="Псевдоскаляр e123")
