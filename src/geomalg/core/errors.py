"""
Errors — типизированные исключения geomalg

Все ошибки библиотеки наследуются от GeomalgError. Там, где ошибка по смыслу
совпадает со встроенным исключением Python, класс наследуется и от него,
чтобы вызывающий код мог ловить привычный тип (ValueError, AttributeError,
ZeroDivisionError).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки никогда не подавляются внутри библиотеки
2. LockedTargetError всегда несёт имя операции, которую пытались выполнить
3. Заглушки (Vector2.reflect, Vector4.*) бросают встроенный NotImplementedError
"""


class GeomalgError(Exception):
    """Базовая ошибка библиотеки."""


class LockedTargetError(GeomalgError):
    """
    Попытка изменить заблокированное (locked) значение.

    Бросается любым сеттером координат и сеттером modified, если
    is_locked() == True.

    Attributes:
        operation: Имя операции (например, 'set x', 'set modified')
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"target of operation '{operation}' is locked")


class UnlockError(GeomalgError):
    """Недопустимый unlock: значение не заблокировано или неверный token."""


class InvalidArgumentError(GeomalgError, ValueError):
    """Отсутствующий или некорректный аргумент (например, copy(None))."""


class ReadOnlyPropertyError(GeomalgError, AttributeError):
    """Попытка присвоить значение вычисляемому свойству (mask_g2, mask_g3)."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Property `{name}` is readonly.")


class NotInvertibleError(GeomalgError, ZeroDivisionError):
    """
    Значение не имеет обратного элемента.

    Бросается inv()/div() для нулевого мультивектора и методом gauss()
    для вырожденной системы.
    """
