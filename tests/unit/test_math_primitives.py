"""
Тесты для модулей gauss и primitives

Проверяет:
1. gauss: решение систем, выбор главного элемента, вырожденность
2. Скалярное и внешнее произведения координат
3. Базисы Бернштейна b2/b3
"""

import pytest

from geomalg.algebra import Vector3
from geomalg.core.errors import InvalidArgumentError, NotInvertibleError
from geomalg.core.math.gauss import gauss
from geomalg.core.math.primitives import b2, b3, dot_vector_e3, wedge_xy, wedge_yz, wedge_zx


# =============================================================================
# GAUSS
# =============================================================================


class TestGauss:
    """Тесты для gauss"""

    def test_one_by_one(self) -> None:
        assert gauss([[4]], [8]) == [2.0]

    def test_two_by_two_with_pivoting(self) -> None:
        """Строки переставляются по модулю главного элемента"""
        assert gauss([[1, 1], [2, 1]], [10, 16]) == [6.0, 4.0]

    def test_zero_leading_element(self) -> None:
        """Нулевой A[0][0] не мешает решению"""
        assert gauss([[0, 1], [1, 0]], [3, 5]) == [5.0, 3.0]

    def test_three_by_three(self) -> None:
        A = [[2, 1, -1], [-3, -1, 2], [-2, 1, 2]]
        b = [8, -11, -3]
        assert gauss(A, b) == pytest.approx([2.0, 3.0, -1.0])

    def test_inputs_not_modified(self) -> None:
        A = [[1, 1], [2, 1]]
        b = [10, 16]
        gauss(A, b)
        assert A == [[1, 1], [2, 1]]
        assert b == [10, 16]

    def test_singular_raises(self) -> None:
        """Вырожденная матрица → NotInvertibleError"""
        with pytest.raises(NotInvertibleError, match="singular"):
            gauss([[1, 2], [2, 4]], [1, 2])

    def test_zero_matrix_raises(self) -> None:
        with pytest.raises(NotInvertibleError):
            gauss([[0, 0], [0, 0]], [0, 0])

    def test_size_mismatch_raises(self) -> None:
        """Несогласованные размеры → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError):
            gauss([[1, 0], [0, 1]], [1])
        with pytest.raises(InvalidArgumentError):
            gauss([[1, 0], [0]], [1, 2])


# =============================================================================
# PRIMITIVES
# =============================================================================


class TestProducts:
    """Тесты dot/wedge"""

    def test_dot(self) -> None:
        assert dot_vector_e3(Vector3([1, 2, 3]), Vector3([4, 5, 6])) == 32

    def test_wedge_of_basis(self) -> None:
        """e1 ∧ e2 = e12, e2 ∧ e3 = e23, e3 ∧ e1 = e31"""
        e1, e2, e3 = Vector3.e1(), Vector3.e2(), Vector3.e3()
        assert wedge_xy(e1, e2) == 1
        assert wedge_yz(e2, e3) == 1
        assert wedge_zx(e3, e1) == 1
        assert wedge_xy(e2, e1) == -1

    def test_wedge_is_antisymmetric(self) -> None:
        a = Vector3([1, 2, 3])
        b = Vector3([-2, 0.5, 4])
        assert wedge_yz(a, b) == -wedge_yz(b, a)
        assert wedge_zx(a, a) == 0


class TestBernstein:
    """Тесты b2/b3"""

    def test_quadratic_endpoints(self) -> None:
        assert b2(0, 1.0, 5.0, 3.0) == 1.0
        assert b2(1, 1.0, 5.0, 3.0) == 3.0

    def test_quadratic_midpoint(self) -> None:
        assert b2(0.5, 0.0, 1.0, 0.0) == 0.5

    def test_cubic(self) -> None:
        assert b3(0, 2.0, 0.0, 0.0, 7.0) == 2.0
        assert b3(1.0, 0.0, 1.0, 2.0, 3.0) == 3.0
        assert b3(0.5, 0.0, 1.0, 2.0, 3.0) == 1.5
