"""
Vector4 — четырёхкомпонентный вектор [x, y, z, w]

Неполная реализация: доступны только аддитивные операции, масштабирование
и интерполяция. reflect, rotate, magnitude, squared_norm и строковые
представления не реализованы и бросают NotImplementedError.
"""

from typing import Final, Sequence

from geomalg.core.coords import Coords
from geomalg.core.domain.snapshots import Vector4Snapshot
from geomalg.core.errors import InvalidArgumentError

COORD_X: Final[int] = 0
COORD_Y: Final[int] = 1
COORD_Z: Final[int] = 2
COORD_W: Final[int] = 3


class Vector4(Coords):
    """Вектор [x, y, z, w] с аддитивными операциями и интерполяцией."""

    snapshot_type = Vector4Snapshot

    def __init__(self, coords: Sequence[float] = (0, 0, 0, 0), modified: bool = False):
        super().__init__(coords, modified, length=4)

    @property
    def x(self) -> float:
        return self.get_component(COORD_X)

    @x.setter
    def x(self, value: float) -> None:
        self.set_component(COORD_X, value, "set x")

    @property
    def y(self) -> float:
        return self.get_component(COORD_Y)

    @y.setter
    def y(self, value: float) -> None:
        self.set_component(COORD_Y, value, "set y")

    @property
    def z(self) -> float:
        return self.get_component(COORD_Z)

    @z.setter
    def z(self, value: float) -> None:
        self.set_component(COORD_Z, value, "set z")

    @property
    def w(self) -> float:
        return self.get_component(COORD_W)

    @w.setter
    def w(self, value: float) -> None:
        self.set_component(COORD_W, value, "set w")

    def set_w(self, w: float) -> "Vector4":
        self.w = w
        return self

    def add(self, v, alpha: float = 1) -> "Vector4":
        self.x += v.x * alpha
        self.y += v.y * alpha
        self.z += v.z * alpha
        self.w += v.w * alpha
        return self

    def add2(self, a, b) -> "Vector4":
        self.x = a.x + b.x
        self.y = a.y + b.y
        self.z = a.z + b.z
        self.w = a.w + b.w
        return self

    def sub(self, v, alpha: float = 1) -> "Vector4":
        self.x -= v.x * alpha
        self.y -= v.y * alpha
        self.z -= v.z * alpha
        self.w -= v.w * alpha
        return self

    def sub2(self, a, b) -> "Vector4":
        self.x = a.x - b.x
        self.y = a.y - b.y
        self.z = a.z - b.z
        self.w = a.w - b.w
        return self

    def scale(self, alpha: float) -> "Vector4":
        self.x *= alpha
        self.y *= alpha
        self.z *= alpha
        self.w *= alpha
        return self

    def div_by_scalar(self, alpha: float) -> "Vector4":
        """
        Raises:
            ZeroDivisionError: Если alpha == 0
        """
        self.x /= alpha
        self.y /= alpha
        self.z /= alpha
        self.w /= alpha
        return self

    def neg(self) -> "Vector4":
        return self.scale(-1)

    def stress(self, sigma) -> "Vector4":
        self.x *= sigma.x
        self.y *= sigma.y
        self.z *= sigma.z
        self.w *= sigma.w
        return self

    def lerp(self, target, alpha: float) -> "Vector4":
        self.x += (target.x - self.x) * alpha
        self.y += (target.y - self.y) * alpha
        self.z += (target.z - self.z) * alpha
        self.w += (target.w - self.w) * alpha
        return self

    def lerp2(self, a, b, alpha: float) -> "Vector4":
        """self ← a + (b - a) * alpha; a и b могут совпадать с self."""
        target = Vector4([b.x, b.y, b.z, b.w])
        return self.copy(a).lerp(target, alpha)

    def dot(self, v) -> float:
        return self.x * v.x + self.y * v.y + self.z * v.z + self.w * v.w

    def clone(self) -> "Vector4":
        return Vector4(self.to_list(), self.modified)

    def copy(self, v) -> "Vector4":
        if v is None:
            raise InvalidArgumentError("source for copy must be a vector")
        self.x = v.x
        self.y = v.y
        self.z = v.z
        self.w = v.w
        return self

    def set_zero(self) -> "Vector4":
        self.x = 0
        self.y = 0
        self.z = 0
        self.w = 0
        return self

    # =========================================================================
    # НЕ РЕАЛИЗОВАНО
    # =========================================================================

    def reflect(self, n) -> "Vector4":
        raise NotImplementedError("Vector4.reflect")

    def rotate(self, rotor) -> "Vector4":
        raise NotImplementedError("Vector4.rotate")

    def magnitude(self) -> float:
        raise NotImplementedError("Vector4.magnitude")

    def squared_norm(self) -> float:
        raise NotImplementedError("Vector4.squared_norm")

    def to_exponential(self, fraction_digits: int | None = None) -> str:
        raise NotImplementedError("Vector4.to_exponential")

    def to_fixed(self, fraction_digits: int = 0) -> str:
        raise NotImplementedError("Vector4.to_fixed")

    def to_precision(self, precision: int | None = None) -> str:
        raise NotImplementedError("Vector4.to_precision")

    def to_string(self, radix: int | None = None) -> str:
        raise NotImplementedError("Vector4.to_string")
