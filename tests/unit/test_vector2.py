"""
Тесты для модуля Vector2

Проверяет:
1. Создание, координаты и флаг modified
2. Аддитивные операции и масштабирование
3. Покомпонентные операции (min, max, floor, ceil, round)
4. Поворот спинором и кривые Безье
5. Строковое представление
6. Операторы и заблокированную константу ZERO
"""

import math

import pytest

from geomalg.algebra import Spinor2, Vector2
from geomalg.core.errors import InvalidArgumentError, LockedTargetError


# =============================================================================
# СОЗДАНИЕ
# =============================================================================


class TestVector2Construction:
    """Тесты создания Vector2"""

    def test_get_component(self) -> None:
        """Координаты доступны по индексу"""
        v = Vector2([0.25, 0.75])
        assert v.get_component(0) == 0.25
        assert v.get_component(1) == 0.75

    def test_default_is_zero(self) -> None:
        """По умолчанию — нулевой вектор"""
        v = Vector2()
        assert v.is_zero()
        assert v.modified is False
        assert v.is_locked() is False

    def test_from_array_with_offset(self) -> None:
        """from_array читает две координаты начиная с offset"""
        v = Vector2().from_array([9, 8, 7, 6], 2)
        assert v.to_list() == [7, 6]

    def test_copy_none_raises(self) -> None:
        """copy(None) → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError):
            Vector2().copy(None)

    def test_clone_is_independent(self) -> None:
        """clone() не связан с исходным вектором"""
        v = Vector2([1, 2])
        c = v.clone()
        c.x = 10
        assert v.x == 1

    def test_clone_keeps_modified(self) -> None:
        """clone() копирует флаг modified, но не блокировку"""
        v = Vector2([1, 2])
        v.x = 5
        v.lock()
        c = v.clone()
        assert c.modified is True
        assert c.is_locked() is False


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestVector2Arithmetic:
    """Тесты аддитивных операций"""

    def test_add_with_alpha(self) -> None:
        """add(v, alpha) прибавляет alpha * v и возвращает self"""
        v = Vector2([1, 2])
        assert v.add(Vector2([1, 1]), 2) is v
        assert v.to_list() == [3, 4]

    def test_sub2(self) -> None:
        """sub2(a, b) = a - b"""
        v = Vector2().sub2(Vector2([5, 5]), Vector2([1, 2]))
        assert v.to_list() == [4, 3]

    def test_div_by_zero_raises(self) -> None:
        """div_by_scalar(0) — обычное деление float"""
        with pytest.raises(ZeroDivisionError):
            Vector2([1, 2]).div_by_scalar(0)

    def test_lerp2(self) -> None:
        """lerp2(a, b, 0.5) — середина отрезка"""
        v = Vector2().lerp2(Vector2([0, 0]), Vector2([4, 2]), 0.5)
        assert v.to_list() == [2, 1]

    def test_lerp2_with_self_as_target(self) -> None:
        """lerp2, где b — сам self"""
        v = Vector2([4, 2])
        assert v.lerp2(Vector2(), v, 0.5).to_list() == [2, 1]

    def test_stress(self) -> None:
        """stress умножает покомпонентно"""
        assert Vector2([2, 3]).stress(Vector2([5, 7])).to_list() == [10, 21]

    def test_normalize(self) -> None:
        """normalize() даёт единичный вектор"""
        v = Vector2([3, 4]).normalize()
        assert v.to_list() == [0.6, 0.8]
        assert v.magnitude() == pytest.approx(1.0)

    def test_normalize_tiny(self) -> None:
        """Координаты 1e-170: |v|² уходит в ноль, normalize() — нет"""
        v = Vector2([0, 1e-170])
        assert v.magnitude() == 1e-170
        assert v.normalize().to_list() == [0, 1]

    def test_distance(self) -> None:
        """distance_to и quadrance_to"""
        a = Vector2([1, 1])
        b = Vector2([4, 5])
        assert a.quadrance_to(b) == 25
        assert a.distance_to(b) == 5


class TestVector2Componentwise:
    """Тесты покомпонентных операций"""

    def test_min_max(self) -> None:
        """min оставляет меньшее, max — большее по каждой оси"""
        assert Vector2([1, 5]).min(Vector2([3, 2])).to_list() == [1, 2]
        assert Vector2([1, 5]).max(Vector2([3, 2])).to_list() == [3, 5]

    def test_floor_ceil(self) -> None:
        """floor и ceil по каждой оси"""
        assert Vector2([1.5, -1.5]).floor().to_list() == [1, -2]
        assert Vector2([1.5, -1.5]).ceil().to_list() == [2, -1]

    def test_round_half_up(self) -> None:
        """round: половина округляется вверх"""
        assert Vector2([2.5, -2.5]).round().to_list() == [3, -2]

    def test_round_to_zero(self) -> None:
        """round_to_zero отбрасывает дробную часть"""
        assert Vector2([2.7, -2.7]).round_to_zero().to_list() == [2, -2]


# =============================================================================
# ГЕОМЕТРИЯ
# =============================================================================


class TestVector2Geometry:
    """Тесты поворота, отражения и кривых Безье"""

    def test_rotate_quarter_turn(self) -> None:
        """Ротор e1 → e2 переводит e1 в e2"""
        R = Spinor2.rotor_from_directions(Vector2([1, 0]), Vector2([0, 1]))
        v = Vector2([1, 0]).rotate(R)
        assert v.x == pytest.approx(0.0, abs=1e-15)
        assert v.y == pytest.approx(1.0)

    def test_rotate_by_one_is_identity(self) -> None:
        """Единичный спинор не меняет вектор"""
        assert Vector2([2, 3]).rotate(Spinor2.one()).to_list() == [2, 3]

    def test_reflect_not_implemented(self) -> None:
        """reflect() не реализован"""
        with pytest.raises(NotImplementedError, match="reflect"):
            Vector2([1, 0]).reflect(Vector2([0, 1]))

    def test_quadratic_bezier(self) -> None:
        """Квадратичная кривая в середине параметра"""
        v = Vector2([0, 0]).quadratic_bezier(0.5, Vector2([1, 2]), Vector2([2, 0]))
        assert v.to_list() == [1, 1]

    def test_cubic_bezier_endpoint(self) -> None:
        """Кубическая кривая при t = 1 — конечная точка"""
        v = Vector2([0, 0]).cubic_bezier(1.0, Vector2([1, 2]), Vector2([2, 2]), Vector2([3, 0]))
        assert v.to_list() == [3, 0]


# =============================================================================
# СТРОКИ
# =============================================================================


class TestVector2Strings:
    """Тесты строкового представления"""

    def test_to_string(self) -> None:
        """Линейная комбинация базисных векторов"""
        assert Vector2([2, 3]).to_string() == "2*e1+3*e2"
        assert str(Vector2([2, 3])) == "2*e1+3*e2"

    def test_to_fixed(self) -> None:
        """Заданное число знаков после запятой"""
        assert Vector2([2, 3]).to_fixed(4) == "2.0000*e1+3.0000*e2"

    def test_to_exponential(self) -> None:
        """Экспоненциальная запись"""
        assert Vector2([2, 3]).to_exponential() == "2e+0*e1+3e+0*e2"

    def test_negative_and_zero(self) -> None:
        """Нулевые координаты пропускаются, знак выводится перед числом"""
        assert Vector2([0, -3]).to_string() == "-3*e2"
        assert Vector2([0, 0]).to_string() == "0"


# =============================================================================
# ОПЕРАТОРЫ
# =============================================================================


class TestVector2Operators:
    """Тесты операторов"""

    def test_add_returns_new_locked(self) -> None:
        """a + b — новое заблокированное значение, операнды не меняются"""
        a = Vector2([1, 2])
        b = Vector2([3, 4])
        c = a + b
        assert c.to_list() == [4, 6]
        assert c.is_locked() is True
        assert a.to_list() == [1, 2]
        assert b.to_list() == [3, 4]

    def test_scalar_operators(self) -> None:
        """Умножение и деление на число"""
        v = Vector2([2, 4])
        assert (v * 2).to_list() == [4, 8]
        assert (2 * v).to_list() == [4, 8]
        assert (v / 2).to_list() == [1, 2]

    def test_unary(self) -> None:
        """Унарные - и +"""
        v = Vector2([1, -2])
        assert (-v).to_list() == [-1, 2]
        assert (+v).to_list() == [1, -2]
        assert (+v) is not v

    def test_unsupported_operand(self) -> None:
        """Неподдержанный операнд → TypeError"""
        with pytest.raises(TypeError):
            Vector2([1, 2]) + 1
        with pytest.raises(TypeError):
            1 / Vector2([1, 2])

    def test_equality(self) -> None:
        """== — точное сравнение координат"""
        assert Vector2([1, 2]) == Vector2([1, 2])
        assert Vector2([1, 2]) != Vector2([1, 2.5])

    def test_zero_constant_is_locked(self) -> None:
        """Vector2.ZERO заблокирован"""
        assert Vector2.ZERO.is_locked() is True
        with pytest.raises(LockedTargetError, match="set x"):
            Vector2.ZERO.x = 1


class TestVector2Random:
    """Тесты random()"""

    def test_random_is_unit(self) -> None:
        """random() — единичный вектор"""
        assert math.isclose(Vector2.random().magnitude(), 1.0)
