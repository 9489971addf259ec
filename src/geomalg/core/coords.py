"""
Coords — хранилище координат фиксированной длины

Базовый класс всех векторов, спиноров и мультивекторов. Хранит упорядоченный
список компонент, флаг modified и собственное состояние блокировки (LockState).
Именованные свойства (x, y, a, xy, ...) подклассов — это представления над
конкретными индексами этого списка.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина задаётся при создании и больше не меняется
2. modified «липкий»: становится True только при реальном изменении значения
   и сбрасывается только явным присваиванием modified = False
3. Любая запись в заблокированное значение → LockedTargetError(operation)
4. get_component(i) вне [0, length) → IndexError
"""

from typing import Any, ClassVar, Dict, Sequence

from geomalg.core.contracts.validators import validate_contract
from geomalg.core.domain.snapshots import ValueSnapshot
from geomalg.core.errors import InvalidArgumentError
from geomalg.core.lockable import LockState
from geomalg.core.math.numerical_safeguards import approx_value


class Coords:
    """
    Координаты фиксированной длины с флагом modified и блокировкой.

    Args:
        coords: Начальные значения (копируются)
        modified: Начальное значение флага modified
        length: Ожидаемая длина (если задана, проверяется)

    Raises:
        InvalidArgumentError: Если длина coords не совпадает с length

    Examples:
        >>> c = Coords([1, 2, 3])
        >>> c.get_component(1)
        2
        >>> c.set_component(1, 5, "set y")
        >>> c.modified
        True
    """

    # Тип снимка задаётся подклассом
    snapshot_type: ClassVar[type[ValueSnapshot]] = ValueSnapshot

    def __init__(
        self,
        coords: Sequence[float],
        modified: bool = False,
        length: int | None = None,
    ) -> None:
        if coords is None:
            raise InvalidArgumentError("coords must be defined")
        values = list(coords)
        if length is not None and len(values) != length:
            raise InvalidArgumentError(
                f"coords must have length {length}, got {len(values)}"
            )
        self._coords = values
        self._modified = bool(modified)
        self._lock = LockState()

    # =========================================================================
    # LOCKABLE
    # =========================================================================

    def is_locked(self) -> bool:
        return self._lock.is_locked()

    def lock(self) -> int:
        return self._lock.lock()

    def unlock(self, token: int) -> None:
        self._lock.unlock(token)

    # =========================================================================
    # ДОСТУП К КОМПОНЕНТАМ
    # =========================================================================

    @property
    def length(self) -> int:
        return len(self._coords)

    @property
    def modified(self) -> bool:
        return self._modified

    @modified.setter
    def modified(self, value: bool) -> None:
        self._lock.guard("set modified")
        self._modified = bool(value)

    def get_component(self, index: int) -> float:
        """
        Компонента по индексу.

        Raises:
            IndexError: Если index вне [0, length)
        """
        if not 0 <= index < len(self._coords):
            raise IndexError(
                f"index must be in range [0, {len(self._coords)}), got {index}"
            )
        return self._coords[index]

    def set_component(self, index: int, value: float, operation: str) -> None:
        """
        Запись компоненты с проверкой блокировки.

        Args:
            index: Индекс компоненты
            value: Новое значение
            operation: Имя операции для LockedTargetError (например, 'set x')
        """
        self._lock.guard(operation)
        if not 0 <= index < len(self._coords):
            raise IndexError(
                f"index must be in range [0, {len(self._coords)}), got {index}"
            )
        self._modified = self._modified or self._coords[index] != value
        self._coords[index] = value

    def approx(self, n: int):
        """Округляет все компоненты до n знаков после запятой (на месте)."""
        for i, value in enumerate(self._coords):
            self.set_component(i, approx_value(value, n), "approx")
        return self

    def to_list(self) -> list[float]:
        return list(self._coords)

    # =========================================================================
    # СНИМКИ И КОНТРАКТЫ
    # =========================================================================

    def to_snapshot(self) -> ValueSnapshot:
        """Неизменяемый снимок координат и состояния блокировки."""
        fields = dict(zip(self.snapshot_type.FIELDS, self._coords))
        return self.snapshot_type(**fields, locked=self.is_locked())

    @classmethod
    def from_snapshot(cls, snapshot: ValueSnapshot):
        """
        Значение из снимка; блокировка восстанавливается.

        Raises:
            InvalidArgumentError: Если снимок другого вида
        """
        if not isinstance(snapshot, cls.snapshot_type):
            raise InvalidArgumentError(
                f"expected {cls.snapshot_type.__name__}, got {type(snapshot).__name__}"
            )
        value = cls(snapshot.coordinates())
        if snapshot.locked:
            value.lock()
        return value

    def to_dict(self) -> Dict[str, Any]:
        return self.to_snapshot().model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Значение из словаря.

        Raises:
            jsonschema.ValidationError: Если data нарушает контракт
            pydantic.ValidationError: Если координаты не конечны
        """
        validate_contract(cls.snapshot_type.KIND, data)
        return cls.from_snapshot(cls.snapshot_type.model_validate(data))

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self):
        return iter(list(self._coords))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._coords!r})"
