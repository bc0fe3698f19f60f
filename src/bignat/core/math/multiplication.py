"""
Multiplication — четыре взаимозаменяемые стратегии умножения

Все стратегии удовлетворяют одному контракту: для неотрицательных a, b
возвращают нормализованное значение a × b. Отличаются только алгоритмом
и асимптотикой:

- ITERATIVE_ADDITION: повторное сложение, O(value(min)) сложений
- STANDARD: умножение "в столбик", O(len(a) × len(b))
- RECURSIVE: наивный divide-and-conquer, 4 рекурсивных произведения
- RECURSIVE_FAST: Karatsuba-style, 3 рекурсивных произведения,
  асимметричное разбиение для операндов разной длины

Операнды нормализуются на входе. Встроенный * применяется только к
отдельным цифрам (произведение <= 81).
"""

import logging
from enum import Enum
from typing import Callable, Final

from bignat.core.domain.decimal_nat import (
    BASE,
    ONE,
    ZERO,
    DecimalBigNat,
    normalize,
)
from bignat.core.math.arithmetic import add, shift_left, subtract
from bignat.core.math.comparison import equal

logger = logging.getLogger(__name__)

MultiplyFn = Callable[[DecimalBigNat, DecimalBigNat], DecimalBigNat]


# =============================================================================
# STRATEGIES
# =============================================================================


class MultiplicationStrategy(str, Enum):
    """Стратегия умножения. Значение — имя колонки в таблице бенчмарка."""

    ITERATIVE_ADDITION = "iterativeAddition"
    STANDARD = "standardMultiplication"
    RECURSIVE = "recursiveMultiplication"
    RECURSIVE_FAST = "recursiveFastMultiplication"


# =============================================================================
# REPEATED ADDITION
# =============================================================================


def iterative_addition(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    """
    Умножение повторным сложением.

    Операнд с меньшим числом цифр становится границей счётчика; другой
    операнд прибавляется к сумме, пока счётчик (увеличивается на ONE
    через add) не станет равен границе.

    Стоимость пропорциональна ЗНАЧЕНИЮ меньшего операнда, а не его длине:
    используется только для сравнения асимптотик.
    """
    a = normalize(a)
    b = normalize(b)

    if len(a.digits) <= len(b.digits):
        bound, addend = a, b
    else:
        bound, addend = b, a

    counter = ZERO
    product = ZERO
    while not equal(bound, counter):
        product = add(product, addend)
        counter = add(counter, ONE)

    return product


# =============================================================================
# GRADE-SCHOOL
# =============================================================================


def standard_multiplication(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    """
    Умножение "в столбик".

    Для каждой цифры a (от младшей) b умножается на неё с переносом в
    частичное произведение длины len(a) + len(b). Частичное произведение
    сдвигается на позицию цифры и прибавляется к сумме.

    Examples:
        >>> str(standard_multiplication(DecimalBigNat.from_string("123"), DecimalBigNat.from_string("456")))
        '56088'
    """
    a = normalize(a)
    b = normalize(b)
    digits_a = a.digits
    digits_b = b.digits
    len_a = len(digits_a)
    len_b = len(digits_b)

    total = ZERO
    for i in range(len_a):
        digit_a = digits_a[len_a - i - 1]
        partial = [0] * (len_a + len_b)
        carry = 0
        for j in range(len_b):
            column = carry + digit_a * digits_b[len_b - j - 1]
            partial[len_a + len_b - j - 1] = column % BASE
            carry = column // BASE
        # Позиция сразу над старшей цифрой b
        partial[len_a - 1] = carry

        total = add(total, shift_left(DecimalBigNat(tuple(partial)), i))

    return total


# =============================================================================
# NAIVE DIVIDE-AND-CONQUER
# =============================================================================


def _split(x: DecimalBigNat) -> tuple[DecimalBigNat, DecimalBigNat | None]:
    """
    (high, low): high — первые len - len//2 цифр, low — последние len//2.

    Для одной цифры low отсутствует (None). Половины не нормализуются.
    """
    length = len(x.digits)
    if length == 1:
        return x, None
    cut = length - length // 2
    return DecimalBigNat.from_range(x, 0, cut), DecimalBigNat.from_range(x, cut, length)


def _recursive(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    k = len(a.digits)
    n = len(b.digits)
    if k == 1 and n == 1:
        return DecimalBigNat.from_int(a.digits[0] * b.digits[0])

    high_a, low_a = _split(a)
    high_b, low_b = _split(b)

    total = shift_left(_recursive(high_a, high_b), k // 2 + n // 2)
    if low_a is not None:
        total = add(total, shift_left(_recursive(low_a, high_b), n // 2))
    if low_b is not None:
        total = add(total, shift_left(_recursive(high_a, low_b), k // 2))
    if low_a is not None and low_b is not None:
        total = add(total, _recursive(low_a, low_b))

    return normalize(total)


def recursive_multiplication(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    """
    Наивный divide-and-conquer: 4 рекурсивных произведения на уровень.

    Каждый операнд разбивается на high/low по своей середине (точки
    разбиения могут различаться). Смещения:
        high×high — k/2 + n/2, low(a)×high(b) — n/2,
        high(a)×low(b) — k/2, low×low — без сдвига.
    Оптимизация Karatsuba намеренно не применяется.
    """
    return _recursive(normalize(a), normalize(b))


# =============================================================================
# KARATSUBA-STYLE DIVIDE-AND-CONQUER
# =============================================================================


def _recursive_fast(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    # Оба операнда нормализованы: subtract ниже требует нормализованных значений
    k = len(a.digits)
    n = len(b.digits)

    if k == 1:
        return standard_multiplication(a, b)
    if n < k:
        return _recursive_fast(b, a)

    # a короче (длина k), b длиннее (n >= k)
    high_a = normalize(DecimalBigNat.from_range(a, 0, k - k // 2))
    low_a = normalize(DecimalBigNat.from_range(a, k - k // 2, k))
    high_b = normalize(DecimalBigNat.from_range(b, 0, n - n // 2))
    low_b = normalize(DecimalBigNat.from_range(b, n - n // 2, n))

    # Разница смещений: b = high_b·10^(n/2) + low_b = (high_b·10^d)·10^(k/2) + low_b
    d = n // 2 - k // 2

    p_ll = _recursive_fast(low_a, low_b)
    p_hh = _recursive_fast(high_a, high_b)

    p_hh_scaled = normalize(shift_left(p_hh, d))
    b_folded = add(shift_left(high_b, d), low_b)
    p_mid = _recursive_fast(add(high_a, low_a), b_folded)
    p_mid = subtract(subtract(p_mid, p_hh_scaled), p_ll)

    result = add(shift_left(p_hh, k // 2 + n // 2), shift_left(p_mid, k // 2))
    return add(result, p_ll)


def recursive_fast_multiplication(a: DecimalBigNat, b: DecimalBigNat) -> DecimalBigNat:
    """
    Karatsuba-style умножение: 3 рекурсивных произведения на уровень.

    Короткий операнд a (длина k) разбивается по своей середине, длинный b
    (длина n) — по своей. При d = n/2 - k/2:
        p_ll  = low(a) × low(b)
        p_hh  = high(a) × high(b)
        p_mid = (high(a) + low(a)) × (high(b)·10^d + low(b)) - p_hh·10^d - p_ll
        a × b = p_hh·10^(k/2 + n/2) + p_mid·10^(k/2) + p_ll
    Операнды разной длины обрабатываются без дополнения до равной длины.
    Базовый случай (длина 1) — standard_multiplication.
    """
    return _recursive_fast(normalize(a), normalize(b))


# =============================================================================
# DISPATCH
# =============================================================================


STRATEGIES: Final[dict[MultiplicationStrategy, MultiplyFn]] = {
    MultiplicationStrategy.ITERATIVE_ADDITION: iterative_addition,
    MultiplicationStrategy.STANDARD: standard_multiplication,
    MultiplicationStrategy.RECURSIVE: recursive_multiplication,
    MultiplicationStrategy.RECURSIVE_FAST: recursive_fast_multiplication,
}


def get_strategy(strategy: MultiplicationStrategy | str) -> MultiplyFn:
    """
    Функция умножения для стратегии (enum или имя колонки).

    Raises:
        ValueError: Если стратегия неизвестна
    """
    return STRATEGIES[MultiplicationStrategy(strategy)]


def multiply(
    a: DecimalBigNat,
    b: DecimalBigNat,
    strategy: MultiplicationStrategy | str = MultiplicationStrategy.RECURSIVE_FAST,
) -> DecimalBigNat:
    """Произведение a × b выбранной стратегией."""
    fn = get_strategy(strategy)
    logger.debug("multiply len=%d×%d strategy=%s", len(a.digits), len(b.digits), fn.__name__)
    return fn(a, b)
