"""
Vector3 — вектор трёхмерного евклидова пространства (grade 1 в G3)

Изменяемый вектор [x, y, z]. Мутирующие методы изменяют self и возвращают
self; операторы возвращают новое заблокированное значение.

Поворот (rotate) выполняется спинором R в замкнутой форме R v R~, где
R = a + yz*e23 + zx*e31 + xy*e12 (Spinor3 или Geometric3).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. div_by_scalar(0) обнуляет вектор (не порождает inf/nan)
2. normalize() нулевого вектора оставляет его нулевым
3. reflect(n) предполагает |n| = 1 (ответственность вызывающего)
4. mask_g3: 0x0 для нулевого вектора, иначе 0x2; только для чтения
"""

import math
from typing import Final, Sequence

from geomalg.algebra.rotors import sandwich_e3
from geomalg.core.coords import Coords
from geomalg.core.domain.snapshots import Vector3Snapshot
from geomalg.core.errors import InvalidArgumentError, ReadOnlyPropertyError
from geomalg.core.lockable import lock
from geomalg.core.math.formatting import (
    LABELS_E3,
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
from geomalg.core.math.primitives import dot_vector_e3, wedge_xy, wedge_yz, wedge_zx

COORD_X: Final[int] = 0
COORD_Y: Final[int] = 1
COORD_Z: Final[int] = 2


class Vector3(Coords):
    """
    Вектор в 3D.

    Args:
        coords: Координаты [x, y, z] (default: нулевой вектор)
        modified: Начальное значение флага modified

    Examples:
        >>> Vector3.e1().cross(Vector3.e2()).to_list()
        [0, 0, 1]
    """

    snapshot_type = Vector3Snapshot

    def __init__(self, coords: Sequence[float] = (0, 0, 0), modified: bool = False):
        super().__init__(coords, modified, length=3)

    # =========================================================================
    # КООРДИНАТЫ
    # =========================================================================

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
    def mask_g3(self) -> int:
        return 0x0 if self.is_zero() else 0x2

    @mask_g3.setter
    def mask_g3(self, unused: int) -> None:
        raise ReadOnlyPropertyError("mask_g3")

    def set_xyz(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    # =========================================================================
    # АДДИТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def add(self, v, alpha: float = 1) -> "Vector3":
        """self ← self + alpha * v"""
        self.x += v.x * alpha
        self.y += v.y * alpha
        self.z += v.z * alpha
        return self

    def add2(self, a, b) -> "Vector3":
        self.x = a.x + b.x
        self.y = a.y + b.y
        self.z = a.z + b.z
        return self

    def sub(self, v, alpha: float = 1) -> "Vector3":
        """self ← self - alpha * v"""
        self.x -= v.x * alpha
        self.y -= v.y * alpha
        self.z -= v.z * alpha
        return self

    def sub2(self, a, b) -> "Vector3":
        self.x = a.x - b.x
        self.y = a.y - b.y
        self.z = a.z - b.z
        return self

    def scale(self, alpha: float) -> "Vector3":
        self.x *= alpha
        self.y *= alpha
        self.z *= alpha
        return self

    def div_by_scalar(self, alpha: float) -> "Vector3":
        """
        self ← self / alpha

        Деление на ноль обнуляет вектор.
        """
        if alpha != 0:
            inv_scalar = 1 / alpha
            self.x *= inv_scalar
            self.y *= inv_scalar
            self.z *= inv_scalar
        else:
            self.x = 0
            self.y = 0
            self.z = 0
        return self

    def neg(self) -> "Vector3":
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def stress(self, sigma) -> "Vector3":
        self.x *= sigma.x
        self.y *= sigma.y
        self.z *= sigma.z
        return self

    def lerp(self, target, alpha: float) -> "Vector3":
        """self ← self + (target - self) * alpha"""
        self.x += (target.x - self.x) * alpha
        self.y += (target.y - self.y) * alpha
        self.z += (target.z - self.z) * alpha
        return self

    def lerp2(self, a, b, alpha: float) -> "Vector3":
        target = Vector3.from_vector(b)
        return self.copy(a).lerp(target, alpha)

    # =========================================================================
    # ПОКОМПОНЕНТНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def min(self, v) -> "Vector3":
        self.x = min(self.x, v.x)
        self.y = min(self.y, v.y)
        self.z = min(self.z, v.z)
        return self

    def max(self, v) -> "Vector3":
        self.x = max(self.x, v.x)
        self.y = max(self.y, v.y)
        self.z = max(self.z, v.z)
        return self

    def floor(self) -> "Vector3":
        self.set_xyz(math.floor(self.x), math.floor(self.y), math.floor(self.z))
        return self

    def ceil(self) -> "Vector3":
        self.set_xyz(math.ceil(self.x), math.ceil(self.y), math.ceil(self.z))
        return self

    def round(self) -> "Vector3":
        self.set_xyz(
            math.floor(self.x + 0.5),
            math.floor(self.y + 0.5),
            math.floor(self.z + 0.5),
        )
        return self

    def round_to_zero(self) -> "Vector3":
        self.set_xyz(*(math.trunc(c) for c in self.to_list()))
        return self

    # =========================================================================
    # МЕТРИКА
    # =========================================================================

    def dot(self, v) -> float:
        return dot_vector_e3(self, v)

    def squared_norm(self) -> float:
        # scp(v, rev(v)) = scp(v, v)
        return dot_vector_e3(self, self)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> "Vector3":
        m = self.magnitude()
        if m != 0:
            return self.div_by_scalar(m)
        return self.set_zero()

    def quadrance_to(self, point) -> float:
        dx = self.x - point.x
        dy = self.y - point.y
        dz = self.z - point.z
        return dx * dx + dy * dy + dz * dz

    def distance_to(self, point) -> float:
        return math.hypot(self.x - point.x, self.y - point.y, self.z - point.z)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def equals(self, other) -> bool:
        """Точное покомпонентное сравнение; False для не-Vector3."""
        if isinstance(other, Vector3):
            return self.x == other.x and self.y == other.y and self.z == other.z
        return False

    # =========================================================================
    # ГЕОМЕТРИЯ
    # =========================================================================

    def cross(self, v) -> "Vector3":
        return self.cross2(self, v)

    def cross2(self, a, b) -> "Vector3":
        """self ← a × b (правая тройка)"""
        x = wedge_yz(a, b)
        y = wedge_zx(a, b)
        z = wedge_xy(a, b)
        return self.set_xyz(x, y, z)

    def dual(self, B, change_sign: bool = False) -> "Vector3":
        """
        self ← ±dual(B) для бивектора B.

        Args:
            B: Объект с атрибутами yz, zx, xy
            change_sign: True → (B.yz, B.zx, B.xy), иначе со знаком минус
        """
        if change_sign:
            return self.set_xyz(B.yz, B.zx, B.xy)
        return self.set_xyz(-B.yz, -B.zx, -B.xy)

    def reflect(self, n) -> "Vector3":
        """
        Отражение в плоскости с единичной нормалью n: self ← self - 2(self·n)n.
        """
        ax, ay, az = self.x, self.y, self.z
        nx, ny, nz = n.x, n.y, n.z
        dot2 = (ax * nx + ay * ny + az * nz) * 2
        return self.set_xyz(ax - dot2 * nx, ay - dot2 * ny, az - dot2 * nz)

    def rotate(self, R) -> "Vector3":
        """
        self ← R * self * rev(R)

        Args:
            R: Спинор с атрибутами a, yz, zx, xy (Spinor3, Geometric3)
        """
        return self.set_xyz(*sandwich_e3(R, self.x, self.y, self.z))

    # =========================================================================
    # КОПИРОВАНИЕ
    # =========================================================================

    def clone(self) -> "Vector3":
        """Копия с тем же флагом modified; блокировка не копируется."""
        return Vector3([self.x, self.y, self.z], self.modified)

    def copy(self, source) -> "Vector3":
        """
        self ← source

        Raises:
            InvalidArgumentError: Если source is None
        """
        if source is None:
            raise InvalidArgumentError("source for copy must be a vector")
        return self.set_xyz(source.x, source.y, source.z)

    def copy_coordinates(self, coordinates: Sequence[float]) -> "Vector3":
        return self.set_xyz(
            coordinates[COORD_X], coordinates[COORD_Y], coordinates[COORD_Z]
        )

    def set_zero(self) -> "Vector3":
        return self.set_xyz(0, 0, 0)

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_exponential(self, fraction_digits: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_exponential(c, fraction_digits), LABELS_E3
        )

    def to_fixed(self, fraction_digits: int = 0) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_fixed(c, fraction_digits), LABELS_E3
        )

    def to_precision(self, precision: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_precision(c, precision), LABELS_E3
        )

    def to_string(self, radix: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_string(c, radix), LABELS_E3
        )

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, rhs):
        if isinstance(rhs, Vector3):
            return lock(self.clone().add(rhs))
        return NotImplemented

    def __sub__(self, rhs):
        if isinstance(rhs, Vector3):
            return lock(self.clone().sub(rhs))
        return NotImplemented

    def __mul__(self, rhs):
        if isinstance(rhs, (int, float)):
            return lock(self.clone().scale(rhs))
        return NotImplemented

    def __rmul__(self, lhs):
        if isinstance(lhs, (int, float)):
            return lock(self.clone().scale(lhs))
        return NotImplemented

    def __truediv__(self, rhs):
        if isinstance(rhs, (int, float)):
            return lock(self.clone().div_by_scalar(rhs))
        return NotImplemented

    def __pos__(self):
        return lock(Vector3.from_vector(self))

    def __neg__(self):
        return lock(Vector3.from_vector(self).neg())

    def __eq__(self, other):
        if isinstance(other, Vector3):
            return self.equals(other)
        return NotImplemented

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_vector(cls, v) -> "Vector3":
        return cls([v.x, v.y, v.z])

    @classmethod
    def from_dual(cls, B) -> "Vector3":
        """Вектор, дуальный бивектору B: [B.yz, B.zx, B.xy]."""
        return cls([B.yz, B.zx, B.xy])

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "Vector3":
        return cls([x, y, z])

    @classmethod
    def zero(cls) -> "Vector3":
        return cls([0, 0, 0])

    @classmethod
    def e1(cls) -> "Vector3":
        return cls([1, 0, 0])

    @classmethod
    def e2(cls) -> "Vector3":
        return cls([0, 1, 0])

    @classmethod
    def e3(cls) -> "Vector3":
        return cls([0, 0, 1])

    @classmethod
    def random(cls) -> "Vector3":
        """Единичный вектор случайного направления."""
        x = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        y = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        z = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        return cls([x, y, z]).normalize()
