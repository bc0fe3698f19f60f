"""
Arithmetic — сдвиг, сложение и вычитание DecimalBigNat

Модуль содержит примитивы, на которых строятся все стратегии умножения:
- shift_left: умножение на 10^k дописыванием k нулей справа
- add: поразрядное сложение с переносом
- subtract: вычитание через дополнение до девяток (переиспользует add)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые: операнды не изменяются, результат — новый экземпляр
2. add и subtract возвращают нормализованный результат
3. shift_left НЕ нормализует ("0" << 2 даёт "000")
4. subtract при a <= b возвращает ZERO (clamp), исключение не выбрасывается
"""

from bignat.core.domain.decimal_nat import (
    BASE,
    MAX_DIGIT,
    ONE,
    ZERO,
    DecimalBigNat,
    normalize,
)
from bignat.core.math.comparison import equal, less_than

# =============================================================================
# SHIFT
# =============================================================================


def shift_left(x: DecimalBigNat, k: int) -> DecimalBigNat:
    """
    x * 10^k: исходные цифры, за которыми следуют k нулей.

    Args:
        x: Сдвигаемое значение
        k: Количество дописываемых нулей (>= 0)

    Raises:
        ValueError: Если k < 0

    Examples:
        >>> str(shift_left(DecimalBigNat.from_string("12"), 3))
        '12000'
    """
    if k < 0:
        raise ValueError(f"Shift amount must be non-negative, got {k}")
    return DecimalBigNat(x.digits + (0,) * k)


# =============================================================================
# ADDITION
# =============================================================================


def add(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    """
    Сумма a + b поразрядно с переносом, начиная с младшей цифры.

    Результат до нормализации имеет max(len(a), len(b)) + 1 цифр:
    старшая позиция принимает финальный перенос (0 или 1).
    Операнды могут быть ненормализованными.

    Examples:
        >>> str(add(DecimalBigNat.from_string("999"), DecimalBigNat.from_string("1")))
        '1000'
        >>> str(add(DecimalBigNat.from_string("0"), DecimalBigNat.from_string("0")))
        '0'
    """
    digits_a = a.digits
    digits_b = b.digits
    len_a = len(digits_a)
    len_b = len(digits_b)
    size = max(len_a, len_b) + 1

    result = [0] * size
    carry = 0
    for i in range(size):
        column = carry
        if len_a - i - 1 >= 0:
            column += digits_a[len_a - i - 1]
        if len_b - i - 1 >= 0:
            column += digits_b[len_b - i - 1]
        result[size - i - 1] = column % BASE
        carry = column // BASE

    return normalize(DecimalBigNat(tuple(result)))


# =============================================================================
# SUBTRACTION
# =============================================================================


def subtract(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    """
    Разность a - b через дополнение до девяток.

    ПРЕДУСЛОВИЕ: оба операнда нормализованы (используется less_than).

    Если a < b или a == b, возвращается ZERO: underflow молча
    ограничивается нулём, отрицательных значений нет.

    Для d = len(a):
        a - b = a + (10^d - 1 - b) + 1 - 10^d
    Дополнение (10^d - 1 - b) получается заменой каждой цифры b на 9 - digit
    (с дополнением b до d цифр девятками). Вычитание 10^d — отбрасывание
    старшей цифры суммы.

    Examples:
        >>> str(subtract(DecimalBigNat.from_string("1000"), DecimalBigNat.from_string("1")))
        '999'
        >>> str(subtract(DecimalBigNat.from_string("5"), DecimalBigNat.from_string("9")))
        '0'
    """
    if less_than(a, b) or equal(a, b):
        return ZERO

    width = len(a.digits)
    digits_b = b.digits
    complement = [MAX_DIGIT] * width
    for i in range(len(digits_b)):
        complement[width - i - 1] -= digits_b[len(digits_b) - i - 1]

    total = add(a, DecimalBigNat(tuple(complement)))
    total = add(total, ONE)

    # a > b гарантирует, что сумма имеет ровно width + 1 цифр со старшей 1
    return normalize(DecimalBigNat.from_range(total, 1, len(total.digits)))
