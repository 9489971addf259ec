"""
Тесты для модуля Formatting

Проверяет:
1. to_string, to_fixed, to_exponential, to_precision
2. Основание системы счисления (radix)
3. string_from_coordinates: знаки, пропуск нулей, метка скаляра
"""

import math

import pytest

from geomalg.core.math.formatting import (
    LABELS_G3,
    LABELS_SPINOR2,
    string_from_coordinates,
    to_exponential,
    to_fixed,
    to_precision,
    to_string,
)


class TestToString:
    """Тесты для to_string"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2, "2"),
            (2.0, "2"),
            (0.5, "0.5"),
            (-1.5, "-1.5"),
            (0, "0"),
            (123.456, "123.456"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
            (1.5e22, "1.5e+22"),
        ],
    )
    def test_decimal(self, value, expected) -> None:
        assert to_string(value) == expected

    def test_non_finite(self) -> None:
        assert to_string(math.nan) == "NaN"
        assert to_string(math.inf) == "Infinity"
        assert to_string(-math.inf) == "-Infinity"

    def test_radix(self) -> None:
        assert to_string(255, 16) == "ff"
        assert to_string(-10, 2) == "-1010"
        assert to_string(0.5, 2) == "0.1"
        assert to_string(35, 36) == "z"
        assert to_string(7, 10) == "7"

    def test_invalid_radix(self) -> None:
        with pytest.raises(ValueError, match="radix"):
            to_string(5, 1)


class TestToFixed:
    """Тесты для to_fixed"""

    def test_digits(self) -> None:
        assert to_fixed(2, 4) == "2.0000"
        assert to_fixed(3.14159, 2) == "3.14"

    def test_default_no_fraction(self) -> None:
        assert to_fixed(2.7) == "3"

    def test_large_values_use_exponent(self) -> None:
        assert to_fixed(1e21, 2) == "1e+21"


class TestToExponential:
    """Тесты для to_exponential"""

    def test_shortest(self) -> None:
        assert to_exponential(2) == "2e+0"
        assert to_exponential(0.00015) == "1.5e-4"
        assert to_exponential(-1234.5) == "-1.2345e+3"
        assert to_exponential(0) == "0e+0"

    def test_fraction_digits(self) -> None:
        assert to_exponential(1234.5, 2) == "1.23e+3"
        assert to_exponential(2, 1) == "2.0e+0"


class TestToPrecision:
    """Тесты для to_precision"""

    def test_precision(self) -> None:
        assert to_precision(2, 3) == "2.00"
        assert to_precision(123456, 2) == "1.2e+5"
        assert to_precision(0.000123, 2) == "0.00012"
        assert to_precision(0, 3) == "0.00"

    def test_none_is_to_string(self) -> None:
        assert to_precision(0.5) == "0.5"

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="precision"):
            to_precision(1.0, 0)


class TestStringFromCoordinates:
    """Тесты для string_from_coordinates"""

    def test_vector(self) -> None:
        assert string_from_coordinates([2, 3], to_string, ["e1", "e2"]) == "2*e1+3*e2"

    def test_leading_negative(self) -> None:
        assert string_from_coordinates([-2, 3], to_string, ["e1", "e2"]) == "-2*e1+3*e2"

    def test_zeros_skipped(self) -> None:
        assert string_from_coordinates([0, 0, 4], to_string, ["e1", "e2", "e3"]) == "4*e3"

    def test_all_zero(self) -> None:
        assert string_from_coordinates([0, 0], to_string, ["e1", "e2"]) == "0"

    def test_scalar_label_omitted(self) -> None:
        assert string_from_coordinates([1, -2], to_string, LABELS_SPINOR2) == "1-2*e12"

    def test_multivector_labels(self) -> None:
        coords = [0, 0, 0, 0, 1, -1, 0, 2]
        assert string_from_coordinates(coords, to_string, LABELS_G3) == "1*e23-1*e31+2*I"

    def test_custom_formatter(self) -> None:
        result = string_from_coordinates([0.5, 0], lambda c: to_fixed(c, 2), ["e1", "e2"])
        assert result == "0.50*e1"
