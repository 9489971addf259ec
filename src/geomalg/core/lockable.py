"""
Lockable — защита значений от изменения

Любой тип координат (векторы, спиноры, мультивекторы) владеет собственным
LockState и делегирует ему is_locked()/lock()/unlock(token). Это позволяет
создавать разделяемые константы (ZERO, ONE, E1, ...) один раз при импорте
модуля и блокировать их сразу после создания.

Протокол:
    token = value.lock()      # unlocked → locked, возвращает token
    value.unlock(token)       # locked → unlocked, только с тем же token

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lock() заблокированного значения → LockedTargetError('lock')
2. unlock() с неверным token или в состоянии unlocked → UnlockError
3. guard(operation) в состоянии locked → LockedTargetError(operation)
4. Блокировка — кооперативный протокол, а не примитив синхронизации
"""

import functools
import itertools
import logging
from typing import Callable, Final, TypeVar

from geomalg.core.errors import LockedTargetError, UnlockError

logger = logging.getLogger(__name__)

# Источник token для lock(); token никогда не равен 0
_TOKENS: Final = itertools.count(1)

T = TypeVar("T")


class LockState:
    """
    Состояние блокировки одного значения.

    Хранит флаг и token, выданный последним вызовом lock().
    """

    __slots__ = ("_token",)

    def __init__(self) -> None:
        self._token: int | None = None

    def is_locked(self) -> bool:
        return self._token is not None

    def lock(self) -> int:
        """
        Перевод в состояние locked.

        Returns:
            token, который нужно передать в unlock()

        Raises:
            LockedTargetError: Если значение уже заблокировано
        """
        if self._token is not None:
            raise LockedTargetError("lock")
        self._token = next(_TOKENS)
        logger.debug("locked with token %d", self._token)
        return self._token

    def unlock(self, token: int) -> None:
        """
        Перевод в состояние unlocked.

        Raises:
            UnlockError: Если значение не заблокировано или token не совпадает
        """
        if self._token is None:
            raise UnlockError("unlock is not permitted: target is not locked")
        if token != self._token:
            raise UnlockError("unlock is not permitted: wrong token")
        self._token = None
        logger.debug("unlocked with token %d", token)

    def guard(self, operation: str) -> None:
        """Бросает LockedTargetError(operation), если значение заблокировано."""
        if self._token is not None:
            raise LockedTargetError(operation)


def lock(value: T) -> T:
    """
    Блокирует значение и возвращает его же.

    Используется операторами (+, -, *, ...), которые всегда возвращают
    новое заблокированное значение.
    """
    value.lock()
    return value


def copy_on_write(method: Callable[..., T]) -> Callable[..., T]:
    """
    Декоратор мутирующих методов мультивекторов.

    Если получатель заблокирован, метод применяется к незаблокированной копии
    (clone()), а результат блокируется и возвращается. Сам получатель при этом
    не изменяется.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.is_locked():
            return lock(method(self.clone(), *args, **kwargs))
        return method(self, *args, **kwargs)

    return wrapper
