"""
Gauss — решение линейных систем методом Гаусса

Используется Geometric2/Geometric3.inv() для мультивекторов, у которых нет
обратного в замкнутой форме: решается система L·x = 1, где L — матрица
левого умножения на мультивектор.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные A и b не изменяются
2. Частичный выбор главного элемента (partial pivoting) по модулю
3. Нулевой главный элемент → NotInvertibleError (система вырождена)
"""

from typing import Sequence

from geomalg.core.errors import InvalidArgumentError, NotInvertibleError


def gauss(A: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """
    Решение системы A·x = b.

    Args:
        A: Квадратная матрица n×n (список строк)
        b: Правая часть длины n

    Returns:
        Вектор решения x длины n

    Raises:
        InvalidArgumentError: Если размеры A и b не согласованы
        NotInvertibleError: Если матрица вырождена

    Examples:
        >>> gauss([[1, 1], [2, 1]], [10, 16])
        [6.0, 4.0]
    """
    n = len(A)
    if len(b) != n or any(len(row) != n for row in A):
        raise InvalidArgumentError(
            f"A must be {n}x{n} and b must have length {n}"
        )

    # Расширенная матрица [A | b]
    m = [[float(v) for v in row] + [float(b[i])] for i, row in enumerate(A)]

    for col in range(n):
        pivot = max(range(col, n), key=lambda r: abs(m[r][col]))
        if m[pivot][col] == 0:
            raise NotInvertibleError("matrix is singular")
        if pivot != col:
            m[col], m[pivot] = m[pivot], m[col]

        for row in range(col + 1, n):
            factor = m[row][col] / m[col][col]
            if factor == 0:
                continue
            for k in range(col, n + 1):
                m[row][k] -= factor * m[col][k]

    # Обратная подстановка
    x = [0.0] * n
    for row in range(n - 1, -1, -1):
        acc = m[row][n]
        for k in range(row + 1, n):
            acc -= m[row][k] * x[k]
        x[row] = acc / m[row][row]
    return x
