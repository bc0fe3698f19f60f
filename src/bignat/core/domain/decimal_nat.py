"""
DecimalBigNat — неотрицательное целое произвольной точности

Представление: последовательность десятичных цифр, старшая цифра первая.
Каждый элемент в диапазоне [0, 9], длина последовательности >= 1.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляры immutable: каждая операция возвращает новый экземпляр
2. Срез диапазона цифр всегда копирует (никакого aliasing с источником)
3. Нормализованная форма: без ведущих нулей, кроме канонического нуля [0]
4. Нормализация НЕ поддерживается автоматически всеми конструкторами
   (например, from_range не нормализует)

Знака нет: значение всегда >= 0.
"""

import random
from dataclasses import dataclass
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BASE: Final[int] = 10
MAX_DIGIT: Final[int] = BASE - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidDigit(ValueError):
    """
    Символ или значение не является десятичной цифрой.

    Возникает при разборе строки с недесятичным символом или при
    построении из последовательности, где элемент вне [0, 9].

    Attributes:
        value: Невалидный символ или значение
        position: Позиция в исходной строке/последовательности
    """

    def __init__(self, value: object, position: int):
        self.value = value
        self.position = position
        super().__init__(f"Invalid decimal digit {value!r} at position {position}")


# =============================================================================
# VALUE TYPE
# =============================================================================


@dataclass(frozen=True)
class DecimalBigNat:
    """
    Неотрицательное целое как кортеж десятичных цифр (старшая первая).

    Равенство (==) совпадает с equal(): одинаковая длина и одинаковые
    цифры попарно. Значения "007" и "7" НЕ равны до нормализации.

    Examples:
        >>> str(DecimalBigNat.from_string("00123"))
        '00123'
        >>> str(normalize(DecimalBigNat.from_string("00123")))
        '123'
    """

    digits: tuple[int, ...]

    def __post_init__(self) -> None:
        # Копия в tuple: вход может быть list или другим mutable iterable
        digits = tuple(self.digits)
        if not digits:
            raise ValueError("DecimalBigNat requires at least one digit")

        for position, digit in enumerate(digits):
            if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= MAX_DIGIT:
                raise InvalidDigit(digit, position)

        object.__setattr__(self, "digits", digits)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def with_length(cls, n: int) -> "DecimalBigNat":
        """Значение из n нулевых цифр (не нормализовано при n > 1)."""
        if n < 1:
            raise ValueError(f"Digit count must be >= 1, got {n}")
        return cls((0,) * n)

    @classmethod
    def from_string(cls, text: str) -> "DecimalBigNat":
        """
        Разбор десятичной строки: каждый символ — одна цифра.

        Ведущие нули сохраняются (нормализация — отдельная операция).

        Args:
            text: Строка из символов '0'-'9'

        Returns:
            Значение с len(text) цифрами

        Raises:
            InvalidDigit: Если символ не является десятичной цифрой
            ValueError: Если строка пустая

        Examples:
            >>> DecimalBigNat.from_string("042").digits
            (0, 4, 2)
        """
        if not text:
            raise ValueError("Cannot parse an empty string")

        digits = []
        for position, char in enumerate(text):
            # str.isdigit() пропускает не-ASCII цифры ('²', '٣'), поэтому явный диапазон
            if not "0" <= char <= "9":
                raise InvalidDigit(char, position)
            digits.append(ord(char) - ord("0"))

        return cls(tuple(digits))

    @classmethod
    def from_range(cls, source: "DecimalBigNat", start: int, stop: int) -> "DecimalBigNat":
        """
        Копия цифр source[start:stop] в новое значение.

        Результат НЕ нормализуется: срез "0123"[0:2] даёт "01".

        Raises:
            ValueError: Если не выполняется 0 <= start < stop <= len(source)
        """
        length = len(source.digits)
        if not 0 <= start <= stop <= length:
            raise ValueError(
                f"Invalid digit range [{start}, {stop}) for value of length {length}"
            )
        if stop - start < 1:
            raise ValueError(f"Digit range [{start}, {stop}) is empty")

        return cls(source.digits[start:stop])

    @classmethod
    def from_int(cls, value: int) -> "DecimalBigNat":
        """Построение из встроенного int (нормализованная форма)."""
        if value < 0:
            raise ValueError(f"DecimalBigNat cannot hold negative value {value}")
        return cls.from_string(str(value))

    # -------------------------------------------------------------------------
    # Свойства и представление
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.digits)

    def __str__(self) -> str:
        return "".join(chr(ord("0") + digit) for digit in self.digits)

    def __repr__(self) -> str:
        return f"DecimalBigNat('{self}')"

    def __int__(self) -> int:
        return int(str(self))

    @property
    def is_normalized(self) -> bool:
        """True если нет ведущего нуля (или значение — канонический ноль)."""
        return self.digits[0] != 0 or len(self.digits) == 1

    @property
    def is_zero(self) -> bool:
        return all(digit == 0 for digit in self.digits)


ZERO: Final[DecimalBigNat] = DecimalBigNat((0,))
ONE: Final[DecimalBigNat] = DecimalBigNat((1,))


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize(x: DecimalBigNat) -> DecimalBigNat:
    """
    Удаление ведущих нулей.

    Если первая цифра ненулевая, возвращается тот же экземпляр
    (значения immutable, разделение безопасно). Если все цифры нулевые,
    возвращается канонический ноль ZERO.

    Examples:
        >>> str(normalize(DecimalBigNat.from_string("000123")))
        '123'
        >>> normalize(DecimalBigNat.from_string("0000")) is ZERO
        True
    """
    digits = x.digits
    if digits[0] != 0:
        return x

    i = 1
    while i < len(digits) and digits[i] == 0:
        i += 1

    if i == len(digits):
        return ZERO
    return DecimalBigNat.from_range(x, i, len(digits))


# =============================================================================
# СЛУЧАЙНЫЕ ЗНАЧЕНИЯ (для тестов и бенчмарков)
# =============================================================================


def random_nat(n: int, rng: Optional[random.Random] = None) -> DecimalBigNat:
    """
    Равномерно случайное значение ровно из n цифр.

    Старшая цифра перевыбирается, пока она равна нулю, поэтому результат
    всегда нормализован и имеет ровно n цифр.

    Args:
        n: Количество цифр (>= 1)
        rng: Источник случайности (default: модуль random)

    Raises:
        ValueError: Если n < 1
    """
    if n < 1:
        raise ValueError(f"Digit count must be >= 1, got {n}")

    randrange = rng.randrange if rng is not None else random.randrange

    leading = 0
    while leading == 0:
        leading = randrange(BASE)

    rest = [randrange(BASE) for _ in range(n - 1)]
    return DecimalBigNat((leading, *rest))
