"""
Vector2 — вектор евклидовой плоскости (grade 1 в G2)

Изменяемый вектор [x, y] с цепочечными операциями: каждый мутирующий метод
изменяет self и возвращает self. Операторы (+, -, *, /, унарные) возвращают
новое заблокированное значение и не изменяют операнды.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Запись координаты заблокированного вектора → LockedTargetError('set x'/'set y')
2. div_by_scalar(0) — обычное деление float (ZeroDivisionError в Python)
3. reflect() не реализован → NotImplementedError
4. min(v) покомпонентно оставляет меньшее из self и v, max(v) — большее
"""

import math
from typing import ClassVar, Final, Sequence

from geomalg.algebra.rotors import sandwich_e2
from geomalg.core.coords import Coords
from geomalg.core.domain.snapshots import Vector2Snapshot
from geomalg.core.errors import InvalidArgumentError
from geomalg.core.lockable import lock
from geomalg.core.math.formatting import (
    LABELS_E2,
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
from geomalg.core.math.primitives import b2, b3

COORD_X: Final[int] = 0
COORD_Y: Final[int] = 1


class Vector2(Coords):
    """
    Вектор на плоскости.

    Args:
        coords: Координаты [x, y] (default: нулевой вектор)
        modified: Начальное значение флага modified

    Examples:
        >>> v = Vector2([2, 3])
        >>> str(v)
        '2*e1+3*e2'
        >>> v.add(Vector2([1, 1])).x
        3
    """

    snapshot_type = Vector2Snapshot

    ZERO: ClassVar["Vector2"]

    def __init__(self, coords: Sequence[float] = (0, 0), modified: bool = False):
        super().__init__(coords, modified, length=2)

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

    # =========================================================================
    # АДДИТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def add(self, v, alpha: float = 1) -> "Vector2":
        """self ← self + alpha * v"""
        self.x += v.x * alpha
        self.y += v.y * alpha
        return self

    def add2(self, a, b) -> "Vector2":
        """self ← a + b"""
        self.x = a.x + b.x
        self.y = a.y + b.y
        return self

    def sub(self, v, alpha: float = 1) -> "Vector2":
        """self ← self - alpha * v"""
        self.x -= v.x * alpha
        self.y -= v.y * alpha
        return self

    def sub2(self, a, b) -> "Vector2":
        """self ← a - b"""
        self.x = a.x - b.x
        self.y = a.y - b.y
        return self

    def scale(self, alpha: float) -> "Vector2":
        self.x *= alpha
        self.y *= alpha
        return self

    def div_by_scalar(self, alpha: float) -> "Vector2":
        """
        self ← self / alpha

        Raises:
            ZeroDivisionError: Если alpha == 0
        """
        self.x /= alpha
        self.y /= alpha
        return self

    def neg(self) -> "Vector2":
        self.x = -self.x
        self.y = -self.y
        return self

    def stress(self, sigma) -> "Vector2":
        """Покомпонентное умножение на sigma (анизотропное масштабирование)."""
        self.x *= sigma.x
        self.y *= sigma.y
        return self

    def lerp(self, v, alpha: float) -> "Vector2":
        """self ← self + (v - self) * alpha"""
        self.x += (v.x - self.x) * alpha
        self.y += (v.y - self.y) * alpha
        return self

    def lerp2(self, a, b, alpha: float) -> "Vector2":
        """self ← a + (b - a) * alpha; a и b могут совпадать с self."""
        target = Vector2.from_vector(b)
        return self.copy(a).lerp(target, alpha)

    # =========================================================================
    # ПОКОМПОНЕНТНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def min(self, v) -> "Vector2":
        if self.x > v.x:
            self.x = v.x
        if self.y > v.y:
            self.y = v.y
        return self

    def max(self, v) -> "Vector2":
        if self.x < v.x:
            self.x = v.x
        if self.y < v.y:
            self.y = v.y
        return self

    def floor(self) -> "Vector2":
        self.x = math.floor(self.x)
        self.y = math.floor(self.y)
        return self

    def ceil(self) -> "Vector2":
        self.x = math.ceil(self.x)
        self.y = math.ceil(self.y)
        return self

    def round(self) -> "Vector2":
        # Половина округляется вверх: round(-2.5) == -2
        self.x = math.floor(self.x + 0.5)
        self.y = math.floor(self.y + 0.5)
        return self

    def round_to_zero(self) -> "Vector2":
        self.x = math.ceil(self.x) if self.x < 0 else math.floor(self.x)
        self.y = math.ceil(self.y) if self.y < 0 else math.floor(self.y)
        return self

    # =========================================================================
    # МЕТРИКА
    # =========================================================================

    def dot(self, v) -> float:
        return self.x * v.x + self.y * v.y

    def squared_norm(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2":
        """
        Деление на magnitude().

        Raises:
            ZeroDivisionError: Для нулевого вектора
        """
        return self.div_by_scalar(self.magnitude())

    def quadrance_to(self, point) -> float:
        dx = self.x - point.x
        dy = self.y - point.y
        return dx * dx + dy * dy

    def distance_to(self, point) -> float:
        return math.hypot(self.x - point.x, self.y - point.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def equals(self, v) -> bool:
        """Точное покомпонентное сравнение, без допусков."""
        return v.x == self.x and v.y == self.y

    # =========================================================================
    # ГЕОМЕТРИЯ
    # =========================================================================

    def reflect(self, n) -> "Vector2":
        raise NotImplementedError("reflect")

    def rotate(self, spinor) -> "Vector2":
        """
        Поворот спинором R = a + b*e12 (действие R v R~).

        Args:
            spinor: Любой объект с атрибутами a и b (Spinor2, Geometric2)
        """
        self.x, self.y = sandwich_e2(spinor, self.x, self.y)
        return self

    def quadratic_bezier(self, t: float, control_point, end_point) -> "Vector2":
        """self ← квадратичная кривая Безье (self, control_point, end_point) в точке t"""
        x = b2(t, self.x, control_point.x, end_point.x)
        y = b2(t, self.y, control_point.y, end_point.y)
        self.x = x
        self.y = y
        return self

    def cubic_bezier(self, t: float, control_begin, control_end, end_point) -> "Vector2":
        x = b3(t, self.x, control_begin.x, control_end.x, end_point.x)
        y = b3(t, self.y, control_begin.y, control_end.y, end_point.y)
        self.x = x
        self.y = y
        return self

    # =========================================================================
    # КОПИРОВАНИЕ
    # =========================================================================

    def clone(self) -> "Vector2":
        """Копия с тем же флагом modified; блокировка не копируется."""
        return Vector2([self.x, self.y], self.modified)

    def copy(self, v) -> "Vector2":
        """
        self ← v

        Raises:
            InvalidArgumentError: Если v is None
        """
        if v is None:
            raise InvalidArgumentError("source for copy must be a vector")
        self.x = v.x
        self.y = v.y
        return self

    def copy_coordinates(self, coordinates: Sequence[float]) -> "Vector2":
        self.x = coordinates[COORD_X]
        self.y = coordinates[COORD_Y]
        return self

    def from_array(self, array: Sequence[float], offset: int = 0) -> "Vector2":
        self.x = array[offset]
        self.y = array[offset + 1]
        return self

    def set_zero(self) -> "Vector2":
        self.x = 0
        self.y = 0
        return self

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_exponential(self, fraction_digits: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_exponential(c, fraction_digits), LABELS_E2
        )

    def to_fixed(self, fraction_digits: int = 0) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_fixed(c, fraction_digits), LABELS_E2
        )

    def to_precision(self, precision: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_precision(c, precision), LABELS_E2
        )

    def to_string(self, radix: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_string(c, radix), LABELS_E2
        )

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, rhs):
        if isinstance(rhs, Vector2):
            return lock(self.clone().add(rhs))
        return NotImplemented

    def __sub__(self, rhs):
        if isinstance(rhs, Vector2):
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

    def __neg__(self):
        return lock(self.clone().neg())

    def __pos__(self):
        return lock(self.clone())

    def __eq__(self, other):
        if isinstance(other, Vector2):
            return self.equals(other)
        return NotImplemented

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def vector(cls, x: float, y: float) -> "Vector2":
        return cls([x, y])

    @classmethod
    def from_vector(cls, v) -> "Vector2":
        return cls([v.x, v.y])

    @classmethod
    def zero(cls) -> "Vector2":
        return cls([0, 0])

    @classmethod
    def random(cls) -> "Vector2":
        """Единичный вектор случайного направления."""
        x = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        y = random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)
        return cls([x, y]).normalize()


Vector2.ZERO = lock(Vector2.zero())
