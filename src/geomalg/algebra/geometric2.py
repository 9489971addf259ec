"""
Geometric2 — мультивектор евклидовой алгебры G2 = Cl(2, 0)

Координаты: [a, x, y, b] по базису 1, e1, e2, I = e12.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dual(M) = M ⌋ inv(I): 1 → -I, e1 → -e2, e2 → e1, I → 1
2. mask_g2: 0x1 скаляр, 0x2 вектор, 0x4 псевдоскаляр
3. Константы Geometric2.ZERO, ONE, E1, E2, PSEUDO заблокированы
"""

import math
from typing import ClassVar, Final, Sequence

from geomalg.algebra.multivector import Multivector
from geomalg.algebra.rotors import rotor_from_directions_e2, sandwich_e2
from geomalg.algebra.spinor2 import Spinor2
from geomalg.algebra.vector2 import Vector2
from geomalg.core.domain.snapshots import Geometric2Snapshot
from geomalg.core.errors import InvalidArgumentError, ReadOnlyPropertyError
from geomalg.core.lockable import copy_on_write
from geomalg.core.math.formatting import LABELS_G2

COORD_SCALAR: Final[int] = 0
COORD_X: Final[int] = 1
COORD_Y: Final[int] = 2
COORD_PSEUDO: Final[int] = 3


# =============================================================================
# ТАБЛИЦЫ ПРОИЗВЕДЕНИЙ
# =============================================================================


def _mul(L: Sequence[float], R: Sequence[float]) -> list[float]:
    a0, a1, a2, a3 = L
    b0, b1, b2, b3 = R
    return [
        a0 * b0 + a1 * b1 + a2 * b2 - a3 * b3,
        a0 * b1 + a1 * b0 - a2 * b3 + a3 * b2,
        a0 * b2 + a2 * b0 + a1 * b3 - a3 * b1,
        a0 * b3 + a3 * b0 + a1 * b2 - a2 * b1,
    ]


def _ext(L: Sequence[float], R: Sequence[float]) -> list[float]:
    a0, a1, a2, a3 = L
    b0, b1, b2, b3 = R
    return [
        a0 * b0,
        a0 * b1 + a1 * b0,
        a0 * b2 + a2 * b0,
        a0 * b3 + a3 * b0 + a1 * b2 - a2 * b1,
    ]


def _lco(L: Sequence[float], R: Sequence[float]) -> list[float]:
    a0, a1, a2, a3 = L
    b0, b1, b2, b3 = R
    return [
        a0 * b0 + a1 * b1 + a2 * b2 - a3 * b3,
        a0 * b1 - a2 * b3,
        a0 * b2 + a1 * b3,
        a0 * b3,
    ]


def _rco(L: Sequence[float], R: Sequence[float]) -> list[float]:
    a0, a1, a2, a3 = L
    b0, b1, b2, b3 = R
    return [
        a0 * b0 + a1 * b1 + a2 * b2 - a3 * b3,
        a1 * b0 + a3 * b2,
        a2 * b0 - a3 * b1,
        a3 * b0,
    ]


class Geometric2(Multivector):
    """
    Мультивектор на плоскости.

    Examples:
        >>> Geometric2.e1().mul(Geometric2.e2()).b
        1
    """

    snapshot_type = Geometric2Snapshot

    COORD_NAMES: ClassVar[tuple[str, ...]] = ("a", "x", "y", "b")
    GRADES: ClassVar[tuple[int, ...]] = (0, 1, 1, 2)
    VECTOR_NAMES: ClassVar[tuple[str, ...]] = ("x", "y")
    SPINOR_NAMES: ClassVar[tuple[str, ...]] = ("a", "b")
    LABELS: ClassVar[tuple[str, ...]] = LABELS_G2
    CLOSED_FORM_INVERSE_MASKS: ClassVar[frozenset[int]] = frozenset({0x2, 0x4, 0x5})

    _mul_table = staticmethod(_mul)
    _ext_table = staticmethod(_ext)
    _lco_table = staticmethod(_lco)
    _rco_table = staticmethod(_rco)

    ZERO: ClassVar["Geometric2"]
    ONE: ClassVar["Geometric2"]
    E1: ClassVar["Geometric2"]
    E2: ClassVar["Geometric2"]
    PSEUDO: ClassVar["Geometric2"]

    def __init__(self, coords: Sequence[float] = (0, 0, 0, 0), modified: bool = False):
        super().__init__(coords, modified, length=4)

    @property
    def a(self) -> float:
        return self.get_component(COORD_SCALAR)

    @a.setter
    def a(self, value: float) -> None:
        self.set_component(COORD_SCALAR, value, "set a")

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
    def b(self) -> float:
        return self.get_component(COORD_PSEUDO)

    @b.setter
    def b(self, value: float) -> None:
        self.set_component(COORD_PSEUDO, value, "set b")

    @property
    def mask_g2(self) -> int:
        return self.mask

    @mask_g2.setter
    def mask_g2(self, unused: int) -> None:
        raise ReadOnlyPropertyError("mask_g2")

    # =========================================================================
    # ОПЕРАЦИИ, ЗАВИСЯЩИЕ ОТ РАЗМЕРНОСТИ
    # =========================================================================

    @copy_on_write
    def dual(self) -> "Geometric2":
        """self ← self ⌋ inv(I)"""
        a, x, y, b = self.to_list()
        return self._assign([b, y, -x, -a])

    @copy_on_write
    def stress(self, sigma) -> "Geometric2":
        a, x, y, b = self.to_list()
        return self._assign([a, x * sigma.x, y * sigma.y, b * sigma.x * sigma.y])

    @copy_on_write
    def rotate(self, R) -> "Geometric2":
        """
        self ← R * self * rev(R)

        Args:
            R: Спинор с атрибутами a, b (Spinor2, Geometric2)
        """
        a, x, y, b = self.to_list()
        x, y = sandwich_e2(R, x, y)
        k = R.a * R.a + R.b * R.b
        return self._assign([a * k, x, y, b * k])

    @copy_on_write
    def exp(self) -> "Geometric2":
        """
        self ← exp(self)

        Raises:
            NotImplementedError: Если присутствуют и вектор, и псевдоскаляр
        """
        a, x, y, b = self.to_list()
        ea = math.exp(a)
        if x != 0 or y != 0:
            if b != 0:
                raise NotImplementedError("exp of vector plus pseudoscalar")
            m = math.hypot(x, y)
            s = ea * math.sinh(m) / m
            return self._assign([ea * math.cosh(m), x * s, y * s, 0])
        return self._assign([ea * math.cos(b), 0, 0, ea * math.sin(b)])

    @copy_on_write
    def log(self) -> "Geometric2":
        """
        self ← log(self) для спинора a + b*I: log|R| + I * atan2(b, a).

        Raises:
            NotImplementedError: Если self содержит векторную часть
            InvalidArgumentError: Если self — неположительный скаляр
        """
        if self.mask & ~0x5:
            raise NotImplementedError("log of non-spinor multivector")
        a, b = self.a, self.b
        if b == 0 and a <= 0:
            raise InvalidArgumentError("log is undefined for non-positive scalar")
        return self._assign([math.log(math.hypot(a, b)), 0, 0, math.atan2(b, a)])

    # =========================================================================
    # РОТОРЫ
    # =========================================================================

    @copy_on_write
    def set_rotor_from_directions(self, a, b) -> "Geometric2":
        """self ← ротор, переводящий направление a в направление b."""
        s, p = rotor_from_directions_e2(a, b)
        return self._assign([s, 0, 0, p])

    @copy_on_write
    def set_rotor_from_generator_angle(self, B, theta: float) -> "Geometric2":
        """
        self ← exp(-B * theta / 2) для псевдоскаляра B (атрибут b).
        """
        m = abs(B.b)
        if m == 0:
            return self.set_one()
        phi = m * theta / 2
        return self._assign([math.cos(phi), 0, 0, -B.b * math.sin(phi) / m])

    @classmethod
    def _coerce(cls, value):
        if isinstance(value, Vector2):
            return cls.from_vector(value)
        if isinstance(value, Spinor2):
            return cls.from_spinor(value)
        return super()._coerce(value)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def e1(cls, locked: bool = False) -> "Geometric2":
        return cls._basis("x", locked)

    @classmethod
    def e2(cls, locked: bool = False) -> "Geometric2":
        return cls._basis("y", locked)

    @classmethod
    def vector(cls, x: float, y: float) -> "Geometric2":
        return cls([0, x, y, 0])

    @classmethod
    def spinor(cls, a: float, b: float) -> "Geometric2":
        return cls([a, 0, 0, b])

    @classmethod
    def from_cartesian(cls, a: float, x: float, y: float, b: float) -> "Geometric2":
        return cls([a, x, y, b])

    @classmethod
    def rotor_from_directions(cls, a, b) -> "Geometric2":
        return cls.zero().set_rotor_from_directions(a, b)

    @classmethod
    def rotor_from_generator_angle(cls, B, theta: float) -> "Geometric2":
        return cls.zero().set_rotor_from_generator_angle(B, theta)


Geometric2.ZERO = Geometric2.zero(locked=True)
Geometric2.ONE = Geometric2.one(locked=True)
Geometric2.E1 = Geometric2.e1(locked=True)
Geometric2.E2 = Geometric2.e2(locked=True)
Geometric2.PSEUDO = Geometric2.I(locked=True)
