"""
Geometric3 — мультивектор евклидовой алгебры G3 = Cl(3, 0)

Координаты: [a, x, y, z, yz, zx, xy, b] по базису
    1, e1, e2, e3, e23, e31, e12, I = e123

Произведения (mul, ext, lco, rco) задаются явными таблицами над
8 координатами. Поворот вектора и бивектора выполняется в замкнутой форме
R M R~, скаляр и псевдоскаляр масштабируются на |R|².

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dual(M) = M ⌋ inv(I): 1 → -I, e1 → -e23, e23 → e1, I → 1
2. cross(v) = dual(self ∧ v): e1 × e2 = e3
3. mask_g3: 0x1 скаляр, 0x2 вектор, 0x4 бивектор, 0x8 псевдоскаляр
4. Роторы нормированы: R * rev(R) = 1
5. Константы Geometric3.ZERO, ONE, E1, E2, E3, PSEUDO заблокированы
"""

import logging
import math
from typing import ClassVar, Final, Sequence

from geomalg.algebra.multivector import Multivector
from geomalg.algebra.rotors import rotor_from_directions_e3, sandwich_e3
from geomalg.algebra.spinor3 import Spinor3
from geomalg.algebra.vector3 import Vector3
from geomalg.core.domain.snapshots import Geometric3Snapshot
from geomalg.core.errors import InvalidArgumentError, ReadOnlyPropertyError
from geomalg.core.lockable import copy_on_write
from geomalg.core.math.formatting import LABELS_G3
from geomalg.core.math.primitives import dot_vector_e3

logger = logging.getLogger(__name__)

COORD_SCALAR: Final[int] = 0
COORD_X: Final[int] = 1
COORD_Y: Final[int] = 2
COORD_Z: Final[int] = 3
COORD_YZ: Final[int] = 4
COORD_ZX: Final[int] = 5
COORD_XY: Final[int] = 6
COORD_PSEUDO: Final[int] = 7


# =============================================================================
# ТАБЛИЦЫ ПРОИЗВЕДЕНИЙ
# =============================================================================


def _mul(L: Sequence[float], R: Sequence[float]) -> list[float]:
    """Геометрическое произведение L * R."""
    a0, a1, a2, a3, a4, a5, a6, a7 = L
    b0, b1, b2, b3, b4, b5, b6, b7 = R
    return [
        a0 * b0 + a1 * b1 + a2 * b2 + a3 * b3 - a4 * b4 - a5 * b5 - a6 * b6 - a7 * b7,
        a0 * b1 + a1 * b0 - a2 * b6 + a3 * b5 + a6 * b2 - a5 * b3 - a4 * b7 - a7 * b4,
        a0 * b2 + a2 * b0 + a1 * b6 - a3 * b4 - a6 * b1 + a4 * b3 - a5 * b7 - a7 * b5,
        a0 * b3 + a3 * b0 - a1 * b5 + a2 * b4 + a5 * b1 - a4 * b2 - a6 * b7 - a7 * b6,
        a0 * b4 + a4 * b0 + a2 * b3 - a3 * b2 + a1 * b7 + a7 * b1 - a5 * b6 + a6 * b5,
        a0 * b5 + a5 * b0 + a3 * b1 - a1 * b3 + a2 * b7 + a7 * b2 - a6 * b4 + a4 * b6,
        a0 * b6 + a6 * b0 + a1 * b2 - a2 * b1 + a3 * b7 + a7 * b3 - a4 * b5 + a5 * b4,
        a0 * b7 + a7 * b0 + a1 * b4 + a4 * b1 + a2 * b5 + a5 * b2 + a3 * b6 + a6 * b3,
    ]


def _ext(L: Sequence[float], R: Sequence[float]) -> list[float]:
    """Внешнее произведение L ∧ R."""
    a0, a1, a2, a3, a4, a5, a6, a7 = L
    b0, b1, b2, b3, b4, b5, b6, b7 = R
    return [
        a0 * b0,
        a0 * b1 + a1 * b0,
        a0 * b2 + a2 * b0,
        a0 * b3 + a3 * b0,
        a0 * b4 + a4 * b0 + a2 * b3 - a3 * b2,
        a0 * b5 + a5 * b0 + a3 * b1 - a1 * b3,
        a0 * b6 + a6 * b0 + a1 * b2 - a2 * b1,
        a0 * b7 + a7 * b0 + a1 * b4 + a4 * b1 + a2 * b5 + a5 * b2 + a3 * b6 + a6 * b3,
    ]


def _lco(L: Sequence[float], R: Sequence[float]) -> list[float]:
    """Левая свёртка L ⌋ R."""
    a0, a1, a2, a3, a4, a5, a6, a7 = L
    b0, b1, b2, b3, b4, b5, b6, b7 = R
    return [
        a0 * b0 + a1 * b1 + a2 * b2 + a3 * b3 - a4 * b4 - a5 * b5 - a6 * b6 - a7 * b7,
        a0 * b1 - a2 * b6 + a3 * b5 - a4 * b7,
        a0 * b2 + a1 * b6 - a3 * b4 - a5 * b7,
        a0 * b3 - a1 * b5 + a2 * b4 - a6 * b7,
        a0 * b4 + a1 * b7,
        a0 * b5 + a2 * b7,
        a0 * b6 + a3 * b7,
        a0 * b7,
    ]


def _rco(L: Sequence[float], R: Sequence[float]) -> list[float]:
    """Правая свёртка L ⌊ R."""
    a0, a1, a2, a3, a4, a5, a6, a7 = L
    b0, b1, b2, b3, b4, b5, b6, b7 = R
    return [
        a0 * b0 + a1 * b1 + a2 * b2 + a3 * b3 - a4 * b4 - a5 * b5 - a6 * b6 - a7 * b7,
        a1 * b0 + a6 * b2 - a5 * b3 - a7 * b4,
        a2 * b0 - a6 * b1 + a4 * b3 - a7 * b5,
        a3 * b0 + a5 * b1 - a4 * b2 - a7 * b6,
        a4 * b0 + a7 * b1,
        a5 * b0 + a7 * b2,
        a6 * b0 + a7 * b3,
        a7 * b0,
    ]


class Geometric3(Multivector):
    """
    Мультивектор в 3D.

    Args:
        coords: Координаты [a, x, y, z, yz, zx, xy, b] (default: ноль)
        modified: Начальное значение флага modified

    Examples:
        >>> str(Geometric3.e1().mul(Geometric3.e2()))
        '1*e12'
        >>> Geometric3.ONE.dual().b
        -1
    """

    snapshot_type = Geometric3Snapshot

    COORD_NAMES: ClassVar[tuple[str, ...]] = ("a", "x", "y", "z", "yz", "zx", "xy", "b")
    GRADES: ClassVar[tuple[int, ...]] = (0, 1, 1, 1, 2, 2, 2, 3)
    VECTOR_NAMES: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    SPINOR_NAMES: ClassVar[tuple[str, ...]] = ("a", "yz", "zx", "xy")
    LABELS: ClassVar[tuple[str, ...]] = LABELS_G3
    CLOSED_FORM_INVERSE_MASKS: ClassVar[frozenset[int]] = frozenset(
        {0x2, 0x4, 0x8, 0x5, 0x9, 0xA}
    )

    _mul_table = staticmethod(_mul)
    _ext_table = staticmethod(_ext)
    _lco_table = staticmethod(_lco)
    _rco_table = staticmethod(_rco)

    ZERO: ClassVar["Geometric3"]
    ONE: ClassVar["Geometric3"]
    E1: ClassVar["Geometric3"]
    E2: ClassVar["Geometric3"]
    E3: ClassVar["Geometric3"]
    PSEUDO: ClassVar["Geometric3"]

    def __init__(self, coords: Sequence[float] = (0, 0, 0, 0, 0, 0, 0, 0), modified: bool = False):
        super().__init__(coords, modified, length=8)

    # =========================================================================
    # КООРДИНАТЫ
    # =========================================================================

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
    def z(self) -> float:
        return self.get_component(COORD_Z)

    @z.setter
    def z(self, value: float) -> None:
        self.set_component(COORD_Z, value, "set z")

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
    def b(self) -> float:
        return self.get_component(COORD_PSEUDO)

    @b.setter
    def b(self, value: float) -> None:
        self.set_component(COORD_PSEUDO, value, "set b")

    @property
    def mask_g3(self) -> int:
        return self.mask

    @mask_g3.setter
    def mask_g3(self, unused: int) -> None:
        raise ReadOnlyPropertyError("mask_g3")

    # =========================================================================
    # ОПЕРАЦИИ, ЗАВИСЯЩИЕ ОТ РАЗМЕРНОСТИ
    # =========================================================================

    @copy_on_write
    def dual(self) -> "Geometric3":
        """self ← self ⌋ inv(I) = -self * I"""
        a, x, y, z, yz, zx, xy, b = self.to_list()
        return self._assign([b, yz, zx, xy, -x, -y, -z, -a])

    @copy_on_write
    def cross(self, v) -> "Geometric3":
        """self ← self × v = dual(self ∧ v) для векторов."""
        return self.ext(v).dual()

    @copy_on_write
    def stress(self, sigma) -> "Geometric3":
        """
        Растяжение вдоль осей: векторная часть умножается на sigma покомпонентно,
        старшие grade преобразуются как внешние степени.
        """
        sx, sy, sz = sigma.x, sigma.y, sigma.z
        a, x, y, z, yz, zx, xy, b = self.to_list()
        return self._assign(
            [a, x * sx, y * sy, z * sz, yz * sy * sz, zx * sz * sx, xy * sx * sy, b * sx * sy * sz]
        )

    @copy_on_write
    def rotate(self, R) -> "Geometric3":
        """
        self ← R * self * rev(R)

        Args:
            R: Спинор с атрибутами a, yz, zx, xy (Spinor3, Geometric3)
        """
        a, x, y, z, yz, zx, xy, b = self.to_list()
        x, y, z = sandwich_e3(R, x, y, z)
        yz, zx, xy = sandwich_e3(R, yz, zx, xy)
        k = R.a * R.a + R.yz * R.yz + R.zx * R.zx + R.xy * R.xy
        return self._assign([a * k, x, y, z, yz, zx, xy, b * k])

    @copy_on_write
    def exp(self) -> "Geometric3":
        """
        self ← exp(self)

        Скаляр и псевдоскаляр коммутируют со всем, поэтому
        exp(a + v + B + bI) = e^a * exp(v + B) * (cos b + I sin b).

        Raises:
            NotImplementedError: Если присутствуют и вектор, и бивектор
        """
        a, x, y, z, yz, zx, xy, b = self.to_list()
        has_vector = x != 0 or y != 0 or z != 0
        has_bivector = yz != 0 or zx != 0 or xy != 0
        if has_vector and has_bivector:
            raise NotImplementedError("exp of vector plus bivector")

        if has_vector:
            m = math.hypot(x, y, z)
            s = math.sinh(m) / m
            first = [math.cosh(m), x * s, y * s, z * s, 0, 0, 0, 0]
        else:
            theta = math.hypot(yz, zx, xy)
            s = math.sin(theta) / theta if theta != 0 else 1
            first = [math.cos(theta), 0, 0, 0, yz * s, zx * s, xy * s, 0]

        ea = math.exp(a)
        pseudo = [ea * math.cos(b), 0, 0, 0, 0, 0, 0, ea * math.sin(b)]
        return self._assign(_mul(first, pseudo))

    @copy_on_write
    def log(self) -> "Geometric3":
        """
        self ← log(self) для спинора a + B.

        log(a + B) = log|R| + B * atan2(|B|, a) / |B|

        Raises:
            NotImplementedError: Если self не спинор
            InvalidArgumentError: Если self — неположительный скаляр
        """
        if self.mask & ~0x5:
            raise NotImplementedError("log of non-spinor multivector")
        a, yz, zx, xy = self.a, self.yz, self.zx, self.xy
        bb = math.hypot(yz, zx, xy)
        if bb == 0:
            if a <= 0:
                raise InvalidArgumentError("log is undefined for non-positive scalar")
            return self.copy_scalar(math.log(a))
        f = math.atan2(bb, a) / bb
        return self._assign([math.log(math.hypot(a, bb)), 0, 0, 0, yz * f, zx * f, xy * f, 0])

    # =========================================================================
    # РОТОРЫ
    # =========================================================================

    @copy_on_write
    def set_rotor_from_directions(self, a, b, B=None) -> "Geometric3":
        """
        self ← ротор, переводящий направление a в направление b.

        Args:
            a: Начальное направление
            b: Конечное направление
            B: Плоскость поворота для противоположных a и b
        """
        return self.copy_spinor(Spinor3.zero().set_rotor_from_directions(a, b, B))

    @copy_on_write
    def set_rotor_from_axis_angle(self, axis, theta: float) -> "Geometric3":
        """
        self ← поворот на угол theta вокруг оси axis (правило правой руки).

        Нулевая ось даёт единичный ротор.
        """
        m = math.hypot(axis.x, axis.y, axis.z)
        if m == 0:
            return self.set_one()
        phi = theta / 2
        s = math.sin(phi) / m
        return self._assign([math.cos(phi), 0, 0, 0, -axis.x * s, -axis.y * s, -axis.z * s, 0])

    @copy_on_write
    def set_rotor_from_generator_angle(self, B, theta: float) -> "Geometric3":
        """
        self ← exp(-B * theta / 2)

        |B| масштабирует угол; нулевой B даёт единичный ротор.
        """
        m = math.hypot(B.yz, B.zx, B.xy)
        if m == 0:
            return self.set_one()
        phi = m * theta / 2
        s = math.sin(phi) / m
        return self._assign([math.cos(phi), 0, 0, 0, -B.yz * s, -B.zx * s, -B.xy * s, 0])

    @copy_on_write
    def set_rotor_from_frame_to_frame(self, es: Sequence, fs: Sequence) -> "Geometric3":
        """
        self ← ротор, переводящий ортонормированный базис es в базис fs.

        Сначала совмещается пара векторов с наибольшим косинусом, затем
        поворотом вокруг уже совмещённого вектора совмещается следующая пара.
        """
        if len(es) != 3 or len(fs) != 3:
            raise InvalidArgumentError("frames must contain 3 vectors")
        cosines = [dot_vector_e3(e, f) for e, f in zip(es, fs)]
        i = cosines.index(max(cosines))
        j = (i + 1) % 3
        logger.debug("aligning frames on pair %d, then pair %d", i, j)

        R1 = Geometric3.rotor_from_directions(es[i], fs[i])
        v = Vector3.from_vector(es[j]).rotate(R1)
        B = Geometric3.from_vector(fs[i]).dual()
        R2 = Geometric3.rotor_from_directions(v, fs[j], B)
        return self.copy(R2.mul(R1))

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    @classmethod
    def _coerce(cls, value):
        if isinstance(value, Vector3):
            return cls.from_vector(value)
        if isinstance(value, Spinor3):
            return cls.from_spinor(value)
        return super()._coerce(value)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def e1(cls, locked: bool = False) -> "Geometric3":
        return cls._basis("x", locked)

    @classmethod
    def e2(cls, locked: bool = False) -> "Geometric3":
        return cls._basis("y", locked)

    @classmethod
    def e3(cls, locked: bool = False) -> "Geometric3":
        return cls._basis("z", locked)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> "Geometric3":
        return cls([0, x, y, z, 0, 0, 0, 0])

    @classmethod
    def bivector(cls, yz: float, zx: float, xy: float) -> "Geometric3":
        return cls([0, 0, 0, 0, yz, zx, xy, 0])

    @classmethod
    def spinor(cls, yz: float, zx: float, xy: float, a: float) -> "Geometric3":
        return cls([a, 0, 0, 0, yz, zx, xy, 0])

    @classmethod
    def from_cartesian(
        cls, a: float, x: float, y: float, z: float, yz: float, zx: float, xy: float, b: float
    ) -> "Geometric3":
        return cls([a, x, y, z, yz, zx, xy, b])

    @classmethod
    def from_bivector(cls, B) -> "Geometric3":
        return cls.bivector(B.yz, B.zx, B.xy)

    @classmethod
    def rotor_from_directions(cls, a, b, B=None) -> "Geometric3":
        return cls.zero().set_rotor_from_directions(a, b, B)

    @classmethod
    def rotor_from_axis_angle(cls, axis, theta: float) -> "Geometric3":
        return cls.zero().set_rotor_from_axis_angle(axis, theta)

    @classmethod
    def rotor_from_generator_angle(cls, B, theta: float) -> "Geometric3":
        return cls.zero().set_rotor_from_generator_angle(B, theta)

    @classmethod
    def rotor_from_frame_to_frame(cls, es: Sequence, fs: Sequence) -> "Geometric3":
        return cls.zero().set_rotor_from_frame_to_frame(es, fs)


Geometric3.ZERO = Geometric3.zero(locked=True)
Geometric3.ONE = Geometric3.one(locked=True)
Geometric3.E1 = Geometric3.e1(locked=True)
Geometric3.E2 = Geometric3.e2(locked=True)
Geometric3.E3 = Geometric3.e3(locked=True)
Geometric3.PSEUDO = Geometric3.I(locked=True)
