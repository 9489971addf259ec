"""
Spinor2 — чётный элемент G2: a + b*e12

Используется Vector2.rotate(). Единичный спинор задаёт поворот плоскости.
"""

import math
from typing import Final, Sequence

from geomalg.algebra.rotors import rotor_from_directions_e2
from geomalg.core.coords import Coords
from geomalg.core.domain.snapshots import Spinor2Snapshot
from geomalg.core.errors import InvalidArgumentError, ReadOnlyPropertyError
from geomalg.core.lockable import lock
from geomalg.core.math.formatting import (
    LABELS_SPINOR2,
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

COORD_SCALAR: Final[int] = 0
COORD_PSEUDO: Final[int] = 1


class Spinor2(Coords):
    """
    Спинор на плоскости [a, b].

    Examples:
        >>> Spinor2.spinor(0, 1).mul(Spinor2.spinor(0, 1)).to_list()
        [-1, 0]
    """

    snapshot_type = Spinor2Snapshot

    def __init__(self, coords: Sequence[float] = (1, 0), modified: bool = False):
        super().__init__(coords, modified, length=2)

    @property
    def a(self) -> float:
        return self.get_component(COORD_SCALAR)

    @a.setter
    def a(self, value: float) -> None:
        self.set_component(COORD_SCALAR, value, "set a")

    @property
    def b(self) -> float:
        return self.get_component(COORD_PSEUDO)

    @b.setter
    def b(self, value: float) -> None:
        self.set_component(COORD_PSEUDO, value, "set b")

    @property
    def mask_g2(self) -> int:
        return (0x1 if self.a != 0 else 0x0) | (0x4 if self.b != 0 else 0x0)

    @mask_g2.setter
    def mask_g2(self, unused: int) -> None:
        raise ReadOnlyPropertyError("mask_g2")

    # =========================================================================
    # ОПЕРАЦИИ
    # =========================================================================

    def add(self, spinor, alpha: float = 1) -> "Spinor2":
        self.a += spinor.a * alpha
        self.b += spinor.b * alpha
        return self

    def sub(self, spinor, alpha: float = 1) -> "Spinor2":
        self.a -= spinor.a * alpha
        self.b -= spinor.b * alpha
        return self

    def scale(self, alpha: float) -> "Spinor2":
        self.a *= alpha
        self.b *= alpha
        return self

    def div_by_scalar(self, alpha: float) -> "Spinor2":
        self.a /= alpha
        self.b /= alpha
        return self

    def neg(self) -> "Spinor2":
        return self.scale(-1)

    def rev(self) -> "Spinor2":
        """Реверсия: e12 меняет знак."""
        self.b = -self.b
        return self

    def mul(self, rhs) -> "Spinor2":
        """self ← self * rhs (произведение в чётной подалгебре)."""
        return self.mul2(self, rhs)

    def mul2(self, lhs, rhs) -> "Spinor2":
        La, Lb = lhs.a, lhs.b
        Ra, Rb = rhs.a, rhs.b
        self.a = La * Ra - Lb * Rb
        self.b = La * Rb + Lb * Ra
        return self

    def squared_norm(self) -> float:
        return self.a * self.a + self.b * self.b

    def magnitude(self) -> float:
        return math.hypot(self.a, self.b)

    def normalize(self) -> "Spinor2":
        return self.div_by_scalar(self.magnitude())

    def is_one(self) -> bool:
        return self.a == 1 and self.b == 0

    def is_zero(self) -> bool:
        return self.a == 0 and self.b == 0

    def equals(self, other) -> bool:
        if isinstance(other, Spinor2):
            return self.a == other.a and self.b == other.b
        return False

    def set_one(self) -> "Spinor2":
        self.a = 1
        self.b = 0
        return self

    def set_zero(self) -> "Spinor2":
        self.a = 0
        self.b = 0
        return self

    def set_rotor_from_directions(self, a, b) -> "Spinor2":
        """self ← ротор, переводящий направление a в направление b."""
        self.a, self.b = rotor_from_directions_e2(a, b)
        return self

    def clone(self) -> "Spinor2":
        return Spinor2([self.a, self.b])

    def copy(self, spinor) -> "Spinor2":
        if spinor is None:
            raise InvalidArgumentError("source for copy must be a spinor")
        self.a = spinor.a
        self.b = spinor.b
        return self

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_exponential(self, fraction_digits: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_exponential(c, fraction_digits), LABELS_SPINOR2
        )

    def to_fixed(self, fraction_digits: int = 0) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_fixed(c, fraction_digits), LABELS_SPINOR2
        )

    def to_precision(self, precision: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_precision(c, precision), LABELS_SPINOR2
        )

    def to_string(self, radix: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_string(c, radix), LABELS_SPINOR2
        )

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __mul__(self, rhs):
        if isinstance(rhs, Spinor2):
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
        if isinstance(other, Spinor2):
            return self.equals(other)
        return NotImplemented

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def spinor(cls, a: float, b: float) -> "Spinor2":
        return cls([a, b])

    @classmethod
    def one(cls) -> "Spinor2":
        return cls([1, 0])

    @classmethod
    def zero(cls) -> "Spinor2":
        return cls([0, 0])

    @classmethod
    def rotor_from_directions(cls, a, b) -> "Spinor2":
        return cls.zero().set_rotor_from_directions(a, b)

    @classmethod
    def random(cls) -> "Spinor2":
        """Единичный спинор случайного направления."""
        a = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        b = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        return cls([a, b]).normalize()
