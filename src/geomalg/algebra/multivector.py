"""
Multivector — общая часть Geometric2 и Geometric3

Мультивектор хранит координаты по базису алгебры в порядке возрастания
grade. Подкласс задаёт имена координат (COORD_NAMES), grade каждой
координаты (GRADES), таблицы произведений и всё, что зависит от размерности
(dual, rotate, exp, log, stress, роторы).

Мутирующие методы изменяют self и возвращают self. Если self заблокирован,
метод применяется к копии и возвращает новое заблокированное значение
(copy_on_write), поэтому Geometric3.ONE.dual() — это заблокированный -I.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операнды — числа (скаляр) или объекты с атрибутами координат (Vector3,
   Spinor3, ...); отсутствующие координаты считаются нулевыми, объект без
   единой координаты → InvalidArgumentError
2. inv(): замкнутая форма rev(M)/|M|², если M*rev(M) — скаляр,
   иначе решение системы L·x = 1 методом Гаусса
3. Нулевой мультивектор или вырожденная система → NotInvertibleError
4. equals() — точное сравнение координат, только с тем же типом
"""

import logging
import math
import sys
from typing import Callable, ClassVar, Sequence

from geomalg.core.coords import Coords
from geomalg.core.errors import InvalidArgumentError, NotInvertibleError, ReadOnlyPropertyError
from geomalg.core.lockable import copy_on_write, lock
from geomalg.core.math.formatting import (
    string_from_coordinates,
    to_exponential,
    to_fixed,
    to_precision,
    to_string,
)
from geomalg.core.math.gauss import gauss
from geomalg.core.math.numerical_safeguards import (
    RANDOM_RANGE_MAX,
    RANDOM_RANGE_MIN,
    random_range,
)

logger = logging.getLogger(__name__)

Product = Callable[[Sequence[float], Sequence[float]], list[float]]


def _sign_rev(grade: int) -> int:
    """Знак реверсии для grade k: (-1)^(k(k-1)/2)."""
    return -1 if (grade * (grade - 1) // 2) % 2 else 1


def _sign_conj(grade: int) -> int:
    """Знак сопряжения Клиффорда для grade k: (-1)^(k(k+1)/2)."""
    return -1 if (grade * (grade + 1) // 2) % 2 else 1


class Multivector(Coords):
    """
    Базовый класс мультивекторов.

    Подклассы задают:
        COORD_NAMES: имена координат в порядке хранения
        GRADES: grade каждой координаты
        VECTOR_NAMES / SPINOR_NAMES: координаты векторной и чётной частей
        LABELS: метки базиса для строкового представления
        CLOSED_FORM_INVERSE_MASKS: маски, для которых M*rev(M) — скаляр
        _mul_table, _ext_table, _lco_table, _rco_table: произведения
    """

    COORD_NAMES: ClassVar[tuple[str, ...]] = ()
    GRADES: ClassVar[tuple[int, ...]] = ()
    VECTOR_NAMES: ClassVar[tuple[str, ...]] = ()
    SPINOR_NAMES: ClassVar[tuple[str, ...]] = ()
    LABELS: ClassVar[tuple[str, ...]] = ()
    CLOSED_FORM_INVERSE_MASKS: ClassVar[frozenset[int]] = frozenset()

    _mul_table: ClassVar[Product]
    _ext_table: ClassVar[Product]
    _lco_table: ClassVar[Product]
    _rco_table: ClassVar[Product]

    # =========================================================================
    # КООРДИНАТЫ
    # =========================================================================

    @classmethod
    def _coords_of(cls, M) -> list[float]:
        """
        Координаты операнда в порядке COORD_NAMES.

        Число трактуется как скаляр.

        Raises:
            InvalidArgumentError: Если у M нет ни одной координаты мультивектора
        """
        if isinstance(M, (int, float)):
            return [M if name == "a" else 0 for name in cls.COORD_NAMES]
        if not any(hasattr(M, name) for name in cls.COORD_NAMES):
            raise InvalidArgumentError(
                f"operand of type {type(M).__name__} has no {cls.__name__} coordinates"
            )
        return [getattr(M, name, 0) for name in cls.COORD_NAMES]

    def _assign(self, values: Sequence[float]):
        for i, (name, value) in enumerate(zip(self.COORD_NAMES, values)):
            self.set_component(i, value, f"set {name}")
        return self

    @property
    def mask(self) -> int:
        """Битовая маска присутствующих grade: бит k установлен, если grade k ненулевой."""
        m = 0
        for grade, value in zip(self.GRADES, self.to_list()):
            if value != 0:
                m |= 1 << grade
        return m

    @mask.setter
    def mask(self, unused: int) -> None:
        raise ReadOnlyPropertyError("mask")

    # =========================================================================
    # АДДИТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    @copy_on_write
    def add(self, M, alpha: float = 1):
        """self ← self + alpha * M"""
        rhs = self._coords_of(M)
        return self._assign([l + r * alpha for l, r in zip(self.to_list(), rhs)])

    @copy_on_write
    def add2(self, a, b):
        """self ← a + b"""
        return self._assign([l + r for l, r in zip(self._coords_of(a), self._coords_of(b))])

    @copy_on_write
    def sub(self, M, alpha: float = 1):
        """self ← self - alpha * M"""
        rhs = self._coords_of(M)
        return self._assign([l - r * alpha for l, r in zip(self.to_list(), rhs)])

    @copy_on_write
    def sub2(self, a, b):
        """self ← a - b"""
        return self._assign([l - r for l, r in zip(self._coords_of(a), self._coords_of(b))])

    @copy_on_write
    def add_scalar(self, a: float, alpha: float = 1):
        self.a += a * alpha
        return self

    @copy_on_write
    def sub_scalar(self, a: float, alpha: float = 1):
        self.a -= a * alpha
        return self

    @copy_on_write
    def add_pseudo(self, b: float, alpha: float = 1):
        self.b += b * alpha
        return self

    @copy_on_write
    def add_vector(self, v, alpha: float = 1):
        for name in self.VECTOR_NAMES:
            setattr(self, name, getattr(self, name) + getattr(v, name) * alpha)
        return self

    @copy_on_write
    def sub_vector(self, v, alpha: float = 1):
        for name in self.VECTOR_NAMES:
            setattr(self, name, getattr(self, name) - getattr(v, name) * alpha)
        return self

    @copy_on_write
    def scale(self, alpha: float):
        return self._assign([c * alpha for c in self.to_list()])

    @copy_on_write
    def div_by_scalar(self, alpha: float):
        return self._assign([c / alpha for c in self.to_list()])

    @copy_on_write
    def neg(self):
        return self._assign([-c for c in self.to_list()])

    @copy_on_write
    def lerp(self, target, alpha: float):
        """self ← self + (target - self) * alpha"""
        rhs = self._coords_of(target)
        return self._assign([l + (r - l) * alpha for l, r in zip(self.to_list(), rhs)])

    @copy_on_write
    def lerp2(self, a, b, alpha: float):
        """self ← a + (b - a) * alpha; a и b могут совпадать с self."""
        target = self._from_coords(self._coords_of(b))
        return self.copy(a).lerp(target, alpha)

    # =========================================================================
    # КОПИРОВАНИЕ
    # =========================================================================

    def clone(self):
        """Незаблокированная копия."""
        return type(self)(self.to_list())

    @copy_on_write
    def copy(self, M):
        """
        self ← M

        Raises:
            InvalidArgumentError: Если M is None
        """
        if M is None:
            raise InvalidArgumentError("source for copy must be a multivector")
        return self._assign(self._coords_of(M))

    @copy_on_write
    def copy_coordinates(self, coordinates: Sequence[float]):
        if len(coordinates) != self.length:
            raise InvalidArgumentError(
                f"coordinates must have length {self.length}, got {len(coordinates)}"
            )
        return self._assign(coordinates)

    @copy_on_write
    def copy_scalar(self, a: float):
        """self ← a (остальные координаты обнуляются)."""
        return self._assign([a if name == "a" else 0 for name in self.COORD_NAMES])

    @copy_on_write
    def copy_vector(self, v):
        """self ← v (векторная часть; остальные координаты обнуляются)."""
        return self._assign(
            [getattr(v, name) if name in self.VECTOR_NAMES else 0 for name in self.COORD_NAMES]
        )

    @copy_on_write
    def copy_spinor(self, spinor):
        """self ← spinor (чётная часть; остальные координаты обнуляются)."""
        return self._assign(
            [getattr(spinor, name) if name in self.SPINOR_NAMES else 0 for name in self.COORD_NAMES]
        )

    @copy_on_write
    def set_zero(self):
        return self._assign([0] * self.length)

    @copy_on_write
    def set_one(self):
        return self.copy_scalar(1)

    @copy_on_write
    def approx(self, n: int):
        return super().approx(n)

    # =========================================================================
    # ПРОИЗВЕДЕНИЯ
    # =========================================================================

    @copy_on_write
    def mul(self, rhs):
        """self ← self * rhs (геометрическое произведение)"""
        return self.mul2(self, rhs)

    @copy_on_write
    def mul2(self, a, b):
        return self._assign(type(self)._mul_table(self._coords_of(a), self._coords_of(b)))

    @copy_on_write
    def ext(self, rhs):
        """self ← self ∧ rhs"""
        return self.ext2(self, rhs)

    @copy_on_write
    def ext2(self, a, b):
        return self._assign(type(self)._ext_table(self._coords_of(a), self._coords_of(b)))

    @copy_on_write
    def lco(self, rhs):
        """self ← self ⌋ rhs (левая свёртка)"""
        return self.lco2(self, rhs)

    @copy_on_write
    def lco2(self, a, b):
        return self._assign(type(self)._lco_table(self._coords_of(a), self._coords_of(b)))

    @copy_on_write
    def rco(self, rhs):
        """self ← self ⌊ rhs (правая свёртка)"""
        return self.rco2(self, rhs)

    @copy_on_write
    def rco2(self, a, b):
        return self._assign(type(self)._rco_table(self._coords_of(a), self._coords_of(b)))

    @copy_on_write
    def scp(self, rhs):
        """self ← scalar(self * rhs)"""
        return self.scp2(self, rhs)

    @copy_on_write
    def scp2(self, a, b):
        return self.copy_scalar(type(self)._mul_table(self._coords_of(a), self._coords_of(b))[0])

    @copy_on_write
    def div(self, rhs):
        """
        self ← self * inv(rhs)

        Raises:
            NotInvertibleError: Если rhs не обратим
        """
        return self.mul(self._from_coords(self._coords_of(rhs)).inv())

    @copy_on_write
    def div2(self, a, b):
        return self.copy(a).div(b)

    @copy_on_write
    def versor(self, a, b):
        """self ← a * b для векторов a и b."""
        return self.mul2(a, b)

    # =========================================================================
    # УНАРНЫЕ ОПЕРАЦИИ
    # =========================================================================

    @copy_on_write
    def rev(self):
        """Реверсия: grade k умножается на (-1)^(k(k-1)/2)."""
        return self._assign([c * _sign_rev(g) for g, c in zip(self.GRADES, self.to_list())])

    @copy_on_write
    def conj(self):
        """Сопряжение Клиффорда: grade k умножается на (-1)^(k(k+1)/2)."""
        return self._assign([c * _sign_conj(g) for g, c in zip(self.GRADES, self.to_list())])

    @copy_on_write
    def grade(self, n: int):
        """Оставляет только компоненты grade n."""
        return self._assign([c if g == n else 0 for g, c in zip(self.GRADES, self.to_list())])

    @copy_on_write
    def inv(self):
        """
        self ← inv(self), такой что self * inv(self) = 1.

        Raises:
            NotInvertibleError: Если self нулевой или не обратим
        """
        mask = self.mask
        if mask == 0x0:
            raise NotInvertibleError("zero multivector has no inverse")
        if mask == 0x1:
            return self.copy_scalar(1 / self.a)
        if mask in self.CLOSED_FORM_INVERSE_MASKS:
            q = self.squared_norm()
            if q < sys.float_info.min:
                # |M|² ушёл в субнормальные числа
                m = self.magnitude()
                return self.rev().div_by_scalar(m).div_by_scalar(m)
            return self.rev().div_by_scalar(q)

        logger.debug("no closed-form inverse for mask 0x%x, solving linear system", mask)
        n = self.length
        lhs = self.to_list()
        columns = [
            type(self)._mul_table(lhs, [1 if i == j else 0 for i in range(n)])
            for j in range(n)
        ]
        A = [[columns[j][i] for j in range(n)] for i in range(n)]
        b = [1] + [0] * (n - 1)
        return self._assign(gauss(A, b))

    def squared_norm(self) -> float:
        """scalar(self * rev(self)) — сумма квадратов координат."""
        return sum(c * c for c in self.to_list())

    def quaditude(self) -> float:
        return self.squared_norm()

    def magnitude(self) -> float:
        return math.hypot(*self.to_list())

    @copy_on_write
    def norm(self):
        """self ← |self|"""
        return self.copy_scalar(self.magnitude())

    @copy_on_write
    def normalize(self):
        return self.div_by_scalar(self.magnitude())

    @copy_on_write
    def div_by_norm(self):
        return self.div_by_scalar(self.magnitude())

    # =========================================================================
    # ГЕОМЕТРИЯ
    # =========================================================================

    @copy_on_write
    def reflect(self, n):
        """
        Отражение в гиперплоскости с нормалью n: self ← -n * self * n.

        Для неединичного n результат масштабирован на |n|².
        """
        N = self._from_coords(
            [getattr(n, name) if name in self.VECTOR_NAMES else 0 for name in self.COORD_NAMES]
        )
        return self.copy(N.clone().mul(self).mul(N).scale(-1))

    def quadrance_to(self, point) -> float:
        """Квадрат расстояния между векторными частями."""
        return sum((getattr(self, name) - getattr(point, name)) ** 2 for name in self.VECTOR_NAMES)

    def distance_to(self, point) -> float:
        return math.hypot(*(getattr(self, name) - getattr(point, name) for name in self.VECTOR_NAMES))

    # =========================================================================
    # ПРЕДИКАТЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return all(c == 0 for c in self.to_list())

    def is_one(self) -> bool:
        return self.a == 1 and self.is_scalar()

    def is_scalar(self) -> bool:
        return all(c == 0 for name, c in zip(self.COORD_NAMES, self.to_list()) if name != "a")

    def equals(self, other) -> bool:
        if isinstance(other, type(self)):
            return self.to_list() == other.to_list()
        return False

    # =========================================================================
    # СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_exponential(self, fraction_digits: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_exponential(c, fraction_digits), self.LABELS
        )

    def to_fixed(self, fraction_digits: int = 0) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_fixed(c, fraction_digits), self.LABELS
        )

    def to_precision(self, precision: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_precision(c, precision), self.LABELS
        )

    def to_string(self, radix: int | None = None) -> str:
        return string_from_coordinates(
            self.to_list(), lambda c: to_string(c, radix), self.LABELS
        )

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    @classmethod
    def _coerce(cls, value):
        """Операнд как мультивектор этого типа или None, если тип не поддержан."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (int, float)):
            return cls.scalar(value)
        return None

    def _binary(self, rhs, operation: str):
        M = self._coerce(rhs)
        if M is None:
            return NotImplemented
        return lock(getattr(self.clone(), operation)(M))

    def _reflected(self, lhs, operation: str):
        M = self._coerce(lhs)
        if M is None:
            return NotImplemented
        return lock(getattr(M.clone(), operation)(self))

    def __add__(self, rhs):
        return self._binary(rhs, "add")

    def __radd__(self, lhs):
        return self._reflected(lhs, "add")

    def __sub__(self, rhs):
        return self._binary(rhs, "sub")

    def __rsub__(self, lhs):
        return self._reflected(lhs, "sub")

    def __mul__(self, rhs):
        return self._binary(rhs, "mul")

    def __rmul__(self, lhs):
        return self._reflected(lhs, "mul")

    def __truediv__(self, rhs):
        return self._binary(rhs, "div")

    def __rtruediv__(self, lhs):
        return self._reflected(lhs, "div")

    def __xor__(self, rhs):
        return self._binary(rhs, "ext")

    def __rxor__(self, lhs):
        return self._reflected(lhs, "ext")

    def __lshift__(self, rhs):
        return self._binary(rhs, "lco")

    def __rlshift__(self, lhs):
        return self._reflected(lhs, "lco")

    def __rshift__(self, rhs):
        return self._binary(rhs, "rco")

    def __rrshift__(self, lhs):
        return self._reflected(lhs, "rco")

    def __or__(self, rhs):
        return self._binary(rhs, "scp")

    def __ror__(self, lhs):
        return self._reflected(lhs, "scp")

    def __neg__(self):
        return lock(self.clone().neg())

    def __pos__(self):
        return lock(self.clone())

    def __invert__(self):
        return lock(self.clone().rev())

    def __eq__(self, other):
        if isinstance(other, type(self)):
            return self.equals(other)
        return NotImplemented

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def _from_coords(cls, coords: Sequence[float]):
        return cls(list(coords))

    @classmethod
    def _basis(cls, name: str, locked: bool):
        value = cls._from_coords([1 if n == name else 0 for n in cls.COORD_NAMES])
        return lock(value) if locked else value

    @classmethod
    def zero(cls, locked: bool = False):
        value = cls._from_coords([0] * len(cls.COORD_NAMES))
        return lock(value) if locked else value

    @classmethod
    def one(cls, locked: bool = False):
        return cls._basis("a", locked)

    @classmethod
    def I(cls, locked: bool = False):  # noqa: E743
        return cls._basis("b", locked)

    @classmethod
    def scalar(cls, a: float):
        return cls.zero().copy_scalar(a)

    @classmethod
    def from_scalar(cls, scalar):
        return cls.scalar(scalar.a)

    @classmethod
    def pseudo(cls, b: float):
        value = cls.zero()
        value.b = b
        return value

    @classmethod
    def from_vector(cls, v):
        return cls.zero().copy_vector(v)

    @classmethod
    def from_spinor(cls, spinor):
        return cls.zero().copy_spinor(spinor)

    @classmethod
    def from_wedge(cls, a, b):
        """a ∧ b для векторов a и b."""
        return cls.from_vector(a).ext(cls.from_vector(b))

    @classmethod
    def random(cls):
        """Мультивектор со случайными координатами из [RANDOM_RANGE_MIN, RANDOM_RANGE_MAX)."""
        return cls._from_coords(
            [random_range(RANDOM_RANGE_MIN, RANDOM_RANGE_MAX) for _ in cls.COORD_NAMES]
        )
