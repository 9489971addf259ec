"""
Spinor3 — чётный элемент G3: a + yz*e23 + zx*e31 + xy*e12

Используется Vector3.rotate(). Координаты хранятся в порядке [yz, zx, xy, a].

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Произведение замкнуто в чётной подалгебре (кватернионы)
2. mask_g3: 0x1 скаляр, 0x4 бивектор; только для чтения
3. rotor_from_directions(a, b) даёт единичный спинор
"""

import math
from typing import Final, Sequence

from geomalg.algebra.rotors import rotor_from_directions_e3
from geomalg.core.coords import Coords
from geomalg.core.domain.snapshots import Spinor3Snapshot
from geomalg.core.errors import InvalidArgumentError, ReadOnlyPropertyError
from geomalg.core.lockable import lock
from geomalg.core.math.formatting import (
    LABELS_SPINOR3,
    string_from_coordinates,
    to_exponential,
    to_fixed,
    to_precision,
    to_string,
)
from geomalg.core.math.numerical_safeguards import (
    RANDOM_RANGE_MAX,
    RANDOM_RANGE_MIN,
    random_range,
)
from geomalg.core.math.primitives import wedge_xy, wedge_yz, wedge_zx

COORD_YZ: Final[int] = 0
COORD_ZX: Final[int] = 1
COORD_XY: Final[int] = 2
COORD_SCALAR: Final[int] = 3


class Spinor3(Coords):
    """
    Спинор в 3D.

    Args:
        coords: Координаты [yz, zx, xy, a] (default: единица)
        modified: Начальное значение флага modified

    Examples:
        >>> e12 = Spinor3.spinor(0, 0, 1, 0)
        >>> e12.clone().mul(e12).a
        -1
    """

    snapshot_type = Spinor3Snapshot

    def __init__(self, coords: Sequence[float] = (0, 0, 0, 1), modified: bool = False):
        super().__init__(coords, modified, length=4)

    # =========================================================================
    # КООРДИНАТЫ
    # =========================================================================

    @property
    def yz(self) -> float:
        return self.get_component(COORD_YZ)

    @yz.setter
    def yz(self, value: float) -> None:
        self.set_component(COORD_YZ, value, "set yz")

    @property
    def zx(self) -> float:
        return self.get_component(COORD_ZX)

    @zx.setter
    def zx(self, value: float) -> None:
        self.set_component(COORD_ZX, value, "set zx")

    @property
    def xy(self) -> float:
        return self.get_component(COORD_XY)

    @xy.setter
    def xy(self, value: float) -> None:
        self.set_component(COORD_XY, value, "set xy")

    @property
    def a(self) -> float:
        return self.get_component(COORD_SCALAR)

    @a.setter
    def a(self, value: float) -> None:
        self.set_component(COORD_SCALAR, value, "set a")

    @property
    def mask_g3(self) -> int:
        scalar = 0x1 if self.a != 0 else 0x0
        bivector = 0x4 if (self.yz != 0 or self.zx != 0 or self.xy != 0) else 0x0
        return scalar | bivector

    @mask_g3.setter
    def mask_g3(self, unused: int) -> None:
        raise ReadOnlyPropertyError("mask_g3")

    def _set(self, a: float, yz: float, zx: float, xy: float) -> "Spinor3":
        self.a = a
        self.yz = yz
        self.zx = zx
        self.xy = xy
        return self

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def add(self, spinor, alpha: float = 1) -> "Spinor3":
        return self._set(
            self.a + spinor.a * alpha,
            self.yz + spinor.yz * alpha,
            self.zx + spinor.zx * alpha,
            self.xy + spinor.xy * alpha,
        )

    def sub(self, spinor, alpha: float = 1) -> "Spinor3":
        return self.add(spinor, -alpha)

    def scale(self, alpha: float) -> "Spinor3":
        return self._set(self.a * alpha, self.yz * alpha, self.zx * alpha, self.xy * alpha)

    def div_by_scalar(self, alpha: float) -> "Spinor3":
        return self._set(self.a / alpha, self.yz / alpha, self.zx / alpha, self.xy / alpha)

    def neg(self) -> "Spinor3":
        return self.scale(-1)

    def rev(self) -> "Spinor3":
        """Реверсия: бивекторная часть меняет знак."""
        return self._set(self.a, -self.yz, -self.zx, -self.xy)

    def mul(self, rhs) -> "Spinor3":
        return self.mul2(self, rhs)

    def mul2(self, lhs, rhs) -> "Spinor3":
        """self ← lhs * rhs"""
        La, Lyz, Lzx, Lxy = lhs.a, lhs.yz, lhs.zx, lhs.xy
        Ra, Ryz, Rzx, Rxy = rhs.a, rhs.yz, rhs.zx, rhs.xy
        return self._set(
            La * Ra - Lyz * Ryz - Lzx * Rzx - Lxy * Rxy,
            La * Ryz + Lyz * Ra - Lzx * Rxy + Lxy * Rzx,
            La * Rzx + Lzx * Ra - Lxy * Ryz + Lyz * Rxy,
            La * Rxy + Lxy * Ra - Lyz * Rzx + Lzx * Ryz,
        )

    def wedge(self, a, b) -> "Spinor3":
        """self ← a ∧ b для векторов a и b."""
        return self._set(0, wedge_yz(a, b), wedge_zx(a, b), wedge_xy(a, b))

    def squared_norm(self) -> float:
        return self.a * self.a + self.yz * self.yz + self.zx * self.zx + self.xy * self.xy

    def magnitude(self) -> float:
        return math.hypot(self.a, self.yz, self.zx, self.xy)

    def normalize(self) -> "Spinor3":
        return self.div_by_scalar(self.magnitude())

    def is_one(self) -> bool:
        return self.a == 1 and self.yz == 0 and self.zx == 0 and self.xy == 0

    def is_zero(self) -> bool:
        return self.a == 0 and self.yz == 0 and self.zx == 0 and self.xy == 0

    def equals(self, other) -> bool:
        if isinstance(other, Spinor3):
            return self.to_list() == other.to_list()
        return False

    def set_one(self) -> "Spinor3":
        return self._set(1, 0, 0, 0)

    def set_zero(self) -> "Spinor3":
        return self._set(0, 0, 0, 0)

    def set_rotor_from_directions(self, a, b, B=None) -> "Spinor3":
        """
        self ← ротор, переводящий направление a в направление b.

        Args:
            a: Начальное направление
            b: Конечное направление
            B: Плоскость поворота для противоположных a и b
        """
        return self._set(*rotor_from_directions_e3(a, b, B))

    def clone(self) -> "Spinor3":
        return Spinor3(self.to_list())

    def copy(self, spinor) -> "Spinor3":
        if spinor is None:
            raise InvalidArgumentError("source for copy must be a spinor")
        return self._set(spinor.a, spinor.yz, spinor.zx, spinor.xy)

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_exponential(self, fraction_digits: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_exponential(c, fraction_digits), LABELS_SPINOR3
        )

    def to_fixed(self, fraction_digits: int = 0) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_fixed(c, fraction_digits), LABELS_SPINOR3
        )

    def to_precision(self, precision: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_precision(c, precision), LABELS_SPINOR3
        )

    def to_string(self, radix: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_string(c, radix), LABELS_SPINOR3
        )

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __mul__(self, rhs):
        if isinstance(rhs, Spinor3):
            return lock(self.clone().mul(rhs))
        if isinstance(rhs, (int, float)):
            return lock(self.clone().scale(rhs))
        return NotImplemented

    def __rmul__(self, lhs):
        if isinstance(lhs, (int, float)):
            return lock(self.clone().scale(lhs))
        return NotImplemented

    def __neg__(self):
        return lock(self.clone().neg())

    def __invert__(self):
        return lock(self.clone().rev())

    def __eq__(self, other):
        if isinstance(other, Spinor3):
            return self.equals(other)
        return NotImplemented

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def spinor(cls, yz: float, zx: float, xy: float, a: float) -> "Spinor3":
        return cls([yz, zx, xy, a])

    @classmethod
    def one(cls) -> "Spinor3":
        return cls([0, 0, 0, 1])

    @classmethod
    def zero(cls) -> "Spinor3":
        return cls([0, 0, 0, 0])

    @classmethod
    def from_spinor(cls, spinor) -> "Spinor3":
        return cls([spinor.yz, spinor.zx, spinor.xy, spinor.a])

    @classmethod
    def from_wedge(cls, a, b) -> "Spinor3":
        return cls.zero().wedge(a, b)

    @classmethod
    def rotor_from_directions(cls, a, b, B=None) -> "Spinor3":
        return cls.zero().set_rotor_from_directions(a, b, B)

    @classmethod
    def random(cls) -> "Spinor3":
        """Единичный спинор случайной ориентации."""
        coords = [random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX) for _ in range(4)]
        return cls(coords).normalize()
