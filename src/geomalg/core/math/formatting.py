"""
Formatting — строковое представление координат

Координаты выводятся как линейная комбинация базисных меток:
    [2, 3] с метками ['e1', 'e2'] → "2*e1+3*e2"

Числа форматируются по правилам Number.prototype.toString / toFixed /
toExponential / toPrecision, чтобы строковое представление было одинаковым
независимо от того, хранится координата как int или float:
    2 → "2", 2.0 → "2", to_fixed(2, 4) → "2.0000", to_exponential(2) → "2e+0"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевые координаты пропускаются; все нулевые → "0"
2. Знак выводится перед числом, число форматируется по модулю
3. Метка скаляра "1" не выводится: терм скаляра — это само число
"""

import math
from decimal import Decimal
from typing import Callable, Final, Sequence

# =============================================================================
# БАЗИСНЫЕ МЕТКИ
# =============================================================================

SCALAR_LABEL: Final[str] = "1"

LABELS_E2: Final[tuple[str, ...]] = ("e1", "e2")
LABELS_E3: Final[tuple[str, ...]] = ("e1", "e2", "e3")
LABELS_G2: Final[tuple[str, ...]] = ("1", "e1", "e2", "I")
LABELS_G3: Final[tuple[str, ...]] = ("1", "e1", "e2", "e3", "e23", "e31", "e12", "I")
LABELS_SPINOR2: Final[tuple[str, ...]] = ("1", "e12")
LABELS_SPINOR3: Final[tuple[str, ...]] = ("e23", "e31", "e12", "1")

# Граница, начиная с которой toString/toFixed переходят к экспоненте
_EXPONENT_THRESHOLD: Final[float] = 1e21

_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Максимум разрядов дробной части при выводе в системе radix
_MAX_RADIX_FRACTION_DIGITS: Final[int] = 52


# =============================================================================
# ФОРМАТИРОВАНИЕ ЧИСЕЛ
# =============================================================================


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return None


def _js_exponent(mantissa: str, exponent: int) -> str:
    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def _shortest_digits(value: float) -> tuple[str, int]:
    """
    Кратчайшие значащие цифры и десятичный порядок числа.

    Returns:
        (digits, exponent), где value = 0.d1d2... * 10^(exponent + 1)
    """
    d = Decimal(repr(abs(float(value)))).normalize()
    sign, digits, _ = d.as_tuple()
    return "".join(str(x) for x in digits), d.adjusted()


def to_string(value: float, radix: int | None = None) -> str:
    """
    Number.prototype.toString(radix).

    Args:
        value: Число
        radix: Основание системы счисления 2..36 (default: 10)

    Examples:
        >>> to_string(2.0)
        '2'
        >>> to_string(0.5)
        '0.5'
        >>> to_string(255, 16)
        'ff'
    """
    special = _non_finite(value)
    if special is not None:
        return special
    if radix is not None and radix != 10:
        return _to_radix(value, radix)
    if value == 0:
        return "0"

    digits, exponent = _shortest_digits(value)
    sign = "-" if value < 0 else ""
    if exponent >= 21 or exponent < -6:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return sign + _js_exponent(mantissa, exponent)
    if exponent < 0:
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"
    if len(digits) <= exponent + 1:
        return sign + digits + "0" * (exponent + 1 - len(digits))
    return f"{sign}{digits[:exponent + 1]}.{digits[exponent + 1:]}"


def _to_radix(value: float, radix: int) -> str:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be in range [2, 36], got {radix}")
    sign = "-" if value < 0 else ""
    value = abs(value)
    integer = int(value)
    fraction = value - integer

    out = []
    while True:
        integer, r = divmod(integer, radix)
        out.append(_DIGITS[r])
        if integer == 0:
            break
    result = "".join(reversed(out))

    if fraction:
        frac = []
        while fraction and len(frac) < _MAX_RADIX_FRACTION_DIGITS:
            fraction *= radix
            d = int(fraction)
            frac.append(_DIGITS[d])
            fraction -= d
        result += "." + "".join(frac)
    return sign + result


def to_fixed(value: float, fraction_digits: int = 0) -> str:
    """
    Number.prototype.toFixed(fractionDigits).

    Examples:
        >>> to_fixed(2, 4)
        '2.0000'
    """
    special = _non_finite(value)
    if special is not None:
        return special
    if abs(value) >= _EXPONENT_THRESHOLD:
        return to_string(value)
    return f"{value:.{fraction_digits}f}"


def to_exponential(value: float, fraction_digits: int | None = None) -> str:
    """
    Number.prototype.toExponential(fractionDigits).

    Без fraction_digits используется столько цифр, сколько нужно для
    однозначного представления числа.

    Examples:
        >>> to_exponential(2)
        '2e+0'
        >>> to_exponential(1234.5, 2)
        '1.23e+3'
    """
    special = _non_finite(value)
    if special is not None:
        return special
    if fraction_digits is None:
        if value == 0:
            return "0e+0"
        digits, exponent = _shortest_digits(value)
        sign = "-" if value < 0 else ""
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        return sign + _js_exponent(mantissa, exponent)
    mantissa, exponent = f"{value:.{fraction_digits}e}".split("e")
    return _js_exponent(mantissa, int(exponent))


def to_precision(value: float, precision: int | None = None) -> str:
    """
    Number.prototype.toPrecision(precision).

    Examples:
        >>> to_precision(2, 3)
        '2.00'
        >>> to_precision(123456, 2)
        '1.2e+5'
        >>> to_precision(0.000123, 2)
        '0.00012'
    """
    if precision is None:
        return to_string(value)
    special = _non_finite(value)
    if special is not None:
        return special
    if not 1 <= precision <= 100:
        raise ValueError(f"precision must be in range [1, 100], got {precision}")
    if value == 0:
        return "0" if precision == 1 else "0." + "0" * (precision - 1)

    mantissa, exp_text = f"{value:.{precision - 1}e}".split("e")
    exponent = int(exp_text)
    if exponent < -6 or exponent >= precision:
        return _js_exponent(mantissa, exponent)
    return f"{value:.{precision - 1 - exponent}f}"


# =============================================================================
# ЛИНЕЙНАЯ КОМБИНАЦИЯ БАЗИСНЫХ МЕТОК
# =============================================================================


def string_from_coordinates(
    coordinates: Sequence[float],
    number_to_string: Callable[[float], str],
    labels: Sequence[str],
) -> str:
    """
    Строка вида "2*e1+3*e2" из координат и базисных меток.

    Args:
        coordinates: Координаты
        number_to_string: Форматирование модуля координаты
        labels: Метки базиса (той же длины, что coordinates)

    Returns:
        Линейная комбинация; "0", если все координаты нулевые

    Examples:
        >>> string_from_coordinates([2, 3], to_string, ["e1", "e2"])
        '2*e1+3*e2'
        >>> string_from_coordinates([1, -2], to_string, ["1", "e12"])
        '1-2*e12'
    """
    sb: list[str] = []
    for coordinate, label in zip(coordinates, labels):
        if coordinate == 0:
            continue
        if coordinate < 0:
            sb.append("-")
        elif sb:
            sb.append("+")
        n = number_to_string(abs(coordinate))
        if label == SCALAR_LABEL:
            sb.append(n)
        else:
            sb.append(f"{n}*{label}")
    return "".join(sb) if sb else "0"
