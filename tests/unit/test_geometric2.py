"""
Тесты для модуля Geometric2

Проверяет:
1. Конструктор, базисные константы и блокировку
2. Произведения, дуальность, обратный элемент, деление
3. Роторы, поворот, отражение, stress, exp/log
4. Операторы и строковое представление
"""

import math

import pytest

from geomalg.algebra import Geometric2, Spinor2, Vector2
from geomalg.core.errors import (
    InvalidArgumentError,
    LockedTargetError,
    NotInvertibleError,
    ReadOnlyPropertyError,
)

one = Geometric2.ONE
e1 = Geometric2.E1
e2 = Geometric2.E2
I = Geometric2.PSEUDO  # noqa: E741


# =============================================================================
# КОНСТРУКТОР И КОНСТАНТЫ
# =============================================================================


class TestConstruction:
    """Тесты конструктора и фабрик"""

    def test_default_is_zero(self) -> None:
        """Geometric2() — ноль, modified = False"""
        M = Geometric2()
        assert M.to_list() == [0, 0, 0, 0]
        assert M.modified is False
        assert M.is_locked() is False

    def test_coordinates(self) -> None:
        """Координаты [a, x, y, b]"""
        M = Geometric2([1, 2, 3, 4])
        assert (M.a, M.x, M.y, M.b) == (1, 2, 3, 4)

    def test_wrong_length_raises(self) -> None:
        """Длина координат отличная от 4 → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError):
            Geometric2([1, 2, 3])

    def test_basis_factories(self) -> None:
        """e1, e2, one, I с флагом locked"""
        assert Geometric2.e1().to_list() == [0, 1, 0, 0]
        assert Geometric2.e2().to_list() == [0, 0, 1, 0]
        assert Geometric2.one().to_list() == [1, 0, 0, 0]
        assert Geometric2.I().to_list() == [0, 0, 0, 1]
        assert Geometric2.e1().is_locked() is False
        assert Geometric2.e1(locked=True).is_locked() is True
        assert Geometric2.I(locked=True).is_locked() is True

    def test_constants_are_locked(self) -> None:
        """ZERO, ONE, E1, E2, PSEUDO заблокированы"""
        for constant in (Geometric2.ZERO, one, e1, e2, I):
            assert constant.is_locked() is True

    def test_locked_setter_raises(self) -> None:
        """Запись координаты константы → LockedTargetError"""
        with pytest.raises(LockedTargetError, match="set b"):
            I.b = 2

    def test_locked_method_returns_copy(self) -> None:
        """Мутирующий метод константы не меняет её"""
        result = e1.scale(3)
        assert result.to_list() == [0, 3, 0, 0]
        assert result.is_locked() is True
        assert e1.to_list() == [0, 1, 0, 0]


# =============================================================================
# ПРОИЗВЕДЕНИЯ И ДУАЛЬНОСТЬ
# =============================================================================


class TestProducts:
    """Тесты произведений"""

    def test_basis_products(self) -> None:
        """e1 * e2 = I, e2 * e1 = -I, I * I = -1"""
        assert e1.clone().mul(e2) == I.clone()
        assert e2.clone().mul(e1).b == -1
        assert I.clone().mul(I).to_list() == [-1, 0, 0, 0]

    def test_vector_product_is_dot_plus_wedge(self) -> None:
        """a * b = a · b + a ∧ b"""
        a = Geometric2.vector(1, 2)
        b = Geometric2.vector(3, 4)
        assert a.clone().mul(b).to_list() == [11, 0, 0, -2]
        assert a.clone().ext(b).to_list() == [0, 0, 0, -2]
        assert a.clone().scp(b).to_list() == [11, 0, 0, 0]

    def test_contractions(self) -> None:
        """e1 ⌋ I = e2, I ⌊ e2 = e1"""
        assert e1.clone().lco(I) == e2.clone()
        assert I.clone().rco(e2) == e1.clone()
        assert I.clone().lco(e1).is_zero()


class TestDual:
    """Тесты dual"""

    def test_dual_table(self) -> None:
        """1 → -I, e1 → -e2, e2 → e1, I → 1"""
        assert one.dual().to_list() == [0, 0, 0, -1]
        assert e1.dual().to_list() == [0, 0, -1, 0]
        assert e2.dual().to_list() == [0, 1, 0, 0]
        assert I.dual().to_list() == [1, 0, 0, 0]

    def test_dual_of_locked_is_locked(self) -> None:
        """dual() константы — новое заблокированное значение"""
        result = one.dual()
        assert result is not one
        assert result.is_locked() is True
        assert one.is_one()

    @pytest.mark.parametrize("element", [one, e1, e2, I], ids=["1", "e1", "e2", "I"])
    def test_dual_is_lco_with_inverse_pseudoscalar(self, element) -> None:
        """dual(M) = M ⌋ inv(I)"""
        assert element.dual().to_list() == element.lco(I.inv()).to_list()


class TestInverse:
    """Тесты inv и div"""

    def test_scalar(self) -> None:
        """inv(2) = 0.5"""
        assert Geometric2.scalar(2).inv().a == 0.5

    def test_pseudoscalar(self) -> None:
        """inv(I) = -I"""
        assert I.inv().to_list() == [0, 0, 0, -1]

    def test_vector(self) -> None:
        """inv(2 e1) = 0.5 e1"""
        assert Geometric2.vector(2, 0).inv().to_list() == [0, 0.5, 0, 0]

    def test_spinor(self) -> None:
        """inv(3 + 4I) = (3 - 4I) / 25"""
        assert Geometric2.spinor(3, 4).inv().to_list() == [0.12, 0, 0, -0.16]

    def test_general_multivector(self) -> None:
        """inv(2 + e1) = (2 - e1) / 3"""
        M = Geometric2.from_cartesian(2, 1, 0, 0)
        assert M.clone().inv().to_list() == pytest.approx([2 / 3, -1 / 3, 0, 0], abs=1e-15)

    def test_zero_raises(self) -> None:
        """inv(0) → NotInvertibleError"""
        with pytest.raises(NotInvertibleError):
            Geometric2.ZERO.inv()

    def test_null_multivector_raises(self) -> None:
        """1 + e1 необратим"""
        with pytest.raises(NotInvertibleError):
            Geometric2.from_cartesian(1, 1, 0, 0).inv()

    def test_div(self) -> None:
        """e1 / e2 = e1 * e2 = I"""
        assert str(e1.div(e2)) == "1*I"
        assert str(one.div(Geometric2.scalar(4))) == "0.25"

    def test_numbers_are_scalars(self) -> None:
        """Число в именованных методах трактуется как скаляр"""
        assert Geometric2.e1().copy(5).to_list() == [5, 0, 0, 0]
        assert Geometric2.scalar(3).mul(2).to_list() == [6, 0, 0, 0]

    def test_operand_without_coordinates_raises(self) -> None:
        """Операнд без координат → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="has no Geometric2 coordinates"):
            Geometric2.e1().add(object())

    def test_lerp2_with_self_as_target(self) -> None:
        """lerp2, где b — сам self"""
        M = Geometric2.vector(2, 0)
        assert M.lerp2(Geometric2.zero(), M, 0.5).to_list() == [0, 1, 0, 0]


class TestMaskG2:
    """Тесты mask_g2"""

    def test_values(self) -> None:
        """0x1 скаляр, 0x2 вектор, 0x4 псевдоскаляр"""
        assert Geometric2.zero().mask_g2 == 0x0
        assert one.mask_g2 == 0x1
        assert e2.mask_g2 == 0x2
        assert I.mask_g2 == 0x4
        assert Geometric2.spinor(1, 1).mask_g2 == 0x5

    def test_readonly(self) -> None:
        """Присваивание mask_g2 → ReadOnlyPropertyError"""
        with pytest.raises(ReadOnlyPropertyError):
            Geometric2.one().mask_g2 = 1


# =============================================================================
# МЕТРИКА И ГЕОМЕТРИЯ
# =============================================================================


class TestMetric:
    """Тесты magnitude, distance_to"""

    def test_magnitude(self) -> None:
        """|1 + 2e1 + 3e2 + 4I| = √30"""
        M = Geometric2.from_cartesian(1, 2, 3, 4)
        assert M.squared_norm() == 30
        assert M.magnitude() == pytest.approx(math.sqrt(30))

    def test_norm(self) -> None:
        """norm() заменяет self скаляром |self|"""
        assert Geometric2.vector(3, 4).norm().to_list() == [5, 0, 0, 0]

    def test_distance_to(self) -> None:
        """Расстояние между векторными частями"""
        a = Geometric2.vector(1, 2)
        b = Geometric2.from_cartesian(9, 4, 6, 9)
        assert a.quadrance_to(b) == 25
        assert a.distance_to(b) == 5


class TestReflect:
    """Тесты reflect"""

    def test_reflect_in_line(self) -> None:
        """-n * S * n для единичного n"""
        S = Geometric2.from_cartesian(2, 3, 5, 7)
        n = Geometric2.vector(1, 2).normalize()
        T = S.reflect(n)
        assert T is S
        assert T.to_list() == pytest.approx([-2, -2.2, -5.4, 7])

    def test_reflect_with_vector2_normal(self) -> None:
        """Нормаль задаётся Vector2"""
        S = Geometric2.vector(2, 3)
        assert S.reflect(Vector2([0, 1])).to_list() == [0, 2, -3, 0]


class TestRotors:
    """Тесты роторов и поворота"""

    def test_rotor_from_directions(self) -> None:
        """Ротор e1 → e2 поворачивает e1 в e2"""
        R = Geometric2.rotor_from_directions(e1, e2)
        assert R.mask_g2 == 0x5
        assert R.magnitude() == pytest.approx(1.0)
        v = e1.clone().rotate(R)
        assert v.to_list() == pytest.approx([0, 0, 1, 0], abs=1e-15)

    def test_antiparallel(self) -> None:
        """e1 → -e1: поворот на π"""
        R = Geometric2.rotor_from_directions(Vector2([1, 0]), Vector2([-2, 0]))
        assert R.to_list() == [0, 0, 0, -1]

    @pytest.mark.parametrize("d", [1e-6, 1e-7, 1e-9])
    def test_nearly_antiparallel(self, d) -> None:
        """Почти противоположные направления: точность сохраняется"""
        b = Vector2([-math.cos(d), math.sin(d)])
        R = Geometric2.rotor_from_directions(Vector2([1, 0]), b)
        assert R.magnitude() == pytest.approx(1.0, abs=1e-15)
        v = Geometric2.vector(1, 0).rotate(R)
        assert v.to_list() == pytest.approx([0, b.x, b.y, 0], abs=1e-13)

    def test_rotor_from_generator_angle(self) -> None:
        """(I, π) переводит e1 в -e1"""
        R = Geometric2.rotor_from_generator_angle(I, math.pi)
        v = e1.clone().rotate(R)
        assert v.to_list() == pytest.approx([0, -1, 0, 0], abs=1e-15)

    def test_spinor2_rotor(self) -> None:
        """Spinor2 как ротор; скаляр и псевдоскаляр сохраняются"""
        R = Spinor2.rotor_from_directions(Vector2([1, 0]), Vector2([0, 1]))
        M = Geometric2.from_cartesian(2, 1, 0, 3).rotate(R)
        assert M.to_list() == pytest.approx([2, 0, 1, 3], abs=1e-15)

    def test_matches_sandwich_product(self) -> None:
        """rotate(R) = R * M * rev(R)"""
        R = Geometric2.rotor_from_directions(Vector2([1, 0]), Vector2([0.6, 0.8]))
        M = Geometric2.from_cartesian(0.1, 0.2, -0.3, 0.4)
        expected = R.clone().mul(M).mul(R.clone().rev())
        assert M.clone().rotate(R).to_list() == pytest.approx(expected.to_list(), abs=1e-15)


class TestStressExpLog:
    """Тесты stress, exp, log"""

    def test_stress(self) -> None:
        """Вектор покомпонентно, псевдоскаляр на произведение"""
        M = Geometric2.from_cartesian(1, 2, 3, 4).stress(Vector2([5, 7]))
        assert M.to_list() == [1, 10, 21, 140]

    def test_exp_pseudoscalar(self) -> None:
        """exp(θ I) = cos θ + I sin θ"""
        M = Geometric2.pseudo(0.4).exp()
        assert M.to_list() == pytest.approx([math.cos(0.4), 0, 0, math.sin(0.4)])

    def test_exp_vector(self) -> None:
        """exp(t e2) = cosh t + e2 sinh t"""
        M = Geometric2.vector(0, 0.5).exp()
        assert M.to_list() == pytest.approx([math.cosh(0.5), 0, math.sinh(0.5), 0])

    def test_exp_tiny_vector(self) -> None:
        """exp(t e1) при t = 1e-170 не делит на ноль"""
        M = Geometric2.vector(1e-170, 0).exp()
        assert M.a == 1
        assert M.x == pytest.approx(1e-170, rel=1e-12)

    def test_exp_vector_plus_pseudoscalar_not_implemented(self) -> None:
        """Вектор и псевдоскаляр одновременно не поддерживаются"""
        with pytest.raises(NotImplementedError):
            Geometric2.from_cartesian(0, 1, 0, 1).exp()

    def test_log_inverts_exp(self) -> None:
        """log(exp(a + θ I)) = a + θ I"""
        M = Geometric2.spinor(0.3, -1.2)
        assert M.clone().exp().log().to_list() == pytest.approx(M.to_list())

    def test_log_negative_scalar_raises(self) -> None:
        """log(-2) → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError):
            Geometric2.scalar(-2).log()

    def test_log_vector_not_implemented(self) -> None:
        """log вектора не поддерживается"""
        with pytest.raises(NotImplementedError):
            Geometric2.vector(1, 0).log()


# =============================================================================
# ОПЕРАТОРЫ И СТРОКИ
# =============================================================================


class TestOperators:
    """Тесты операторов"""

    def test_vector2_operands(self) -> None:
        """Vector2 приводится к мультивектору"""
        M = Geometric2.from_cartesian(1, 2, 3, 4)
        v = Vector2([1, 1])
        assert (M + v).to_list() == [1, 3, 4, 4]
        assert (v + M).to_list() == [1, 3, 4, 4]
        assert (v * M).to_list() == Geometric2.vector(1, 1).mul(M).to_list()

    def test_spinor2_operands(self) -> None:
        """Spinor2 приводится к мультивектору"""
        s = Spinor2.spinor(0, 1)
        assert (e1 * s).to_list() == [0, 0, 1, 0]
        assert (s * e1).to_list() == [0, 0, -1, 0]

    def test_number_operands(self) -> None:
        """Числа — скаляры"""
        assert (e1 * 3).to_list() == [0, 3, 0, 0]
        assert (3 + e1).to_list() == [3, 1, 0, 0]
        assert str(1 / Geometric2.scalar(2)) == "0.5"

    def test_results_are_locked(self) -> None:
        """Результат оператора заблокирован, операнды не меняются"""
        M = Geometric2.vector(1, 2)
        result = M ^ e2
        assert result.is_locked() is True
        assert result.to_list() == [0, 0, 0, 1]
        assert M.to_list() == [0, 1, 2, 0]

    def test_reverse_operator(self) -> None:
        """~ — реверсия"""
        assert (~Geometric2.from_cartesian(1, 2, 3, 4)).to_list() == [1, 2, 3, -4]


class TestStrings:
    """Тесты строкового представления"""

    def test_to_string(self) -> None:
        """Метки 1, e1, e2, I"""
        assert str(Geometric2.from_cartesian(1, -2, 0, 3)) == "1-2*e1+3*I"
        assert str(Geometric2.zero()) == "0"

    def test_to_exponential(self) -> None:
        """Экспоненциальная запись"""
        assert Geometric2.vector(2, 0).to_exponential() == "2e+0*e1"

    def test_to_precision(self) -> None:
        """Заданное число значащих цифр"""
        assert Geometric2.spinor(2, 0.5).to_precision(2) == "2.0+0.50*I"
