"""
Comparison — равенство и порядок DecimalBigNat

ПРЕДУСЛОВИЕ: оба операнда нормализованы.

Алгоритм сравнивает сначала длины, затем цифры от старшей к младшей.
Для ненормализованных значений ("007" vs "12") результат некорректен:
более длинная последовательность считается большей независимо от
ведущих нулей. Нормализацию выполняет вызывающий код.
"""

from bignat.core.domain.decimal_nat import DecimalBigNat


def equal(a: DecimalBigNat, b: DecimalBigNat) -> bool:
    """
    True если последовательности цифр совпадают по длине и попарно.

    Examples:
        >>> equal(DecimalBigNat.from_string("42"), DecimalBigNat.from_string("42"))
        True
        >>> equal(DecimalBigNat.from_string("042"), DecimalBigNat.from_string("42"))
        False
    """
    if len(a.digits) != len(b.digits):
        return False

    for digit_a, digit_b in zip(a.digits, b.digits):
        if digit_a != digit_b:
            return False
    return True


def less_than(a: DecimalBigNat, b: DecimalBigNat) -> bool:
    """
    True если a < b.

    Более короткая последовательность меньше; при равной длине решает
    первая отличающаяся цифра (старшие первыми).

    Examples:
        >>> less_than(DecimalBigNat.from_string("99"), DecimalBigNat.from_string("100"))
        True
        >>> less_than(DecimalBigNat.from_string("123"), DecimalBigNat.from_string("123"))
        False
    """
    if len(a.digits) > len(b.digits):
        return False
    if len(a.digits) < len(b.digits):
        return True

    for digit_a, digit_b in zip(a.digits, b.digits):
        if digit_a < digit_b:
            return True
        if digit_a > digit_b:
            return False
    return False
