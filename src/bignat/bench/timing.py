"""Timing — замер одной партии умножений.

MeasurementSample связывает размер операндов (степень двойки) с временем
выполнения всей партии в микросекундах.
"""

import random
import time
from typing import Optional

from pydantic import BaseModel, Field

from bignat.core.domain.decimal_nat import random_nat
from bignat.core.math.multiplication import MultiplicationStrategy, get_strategy


class MeasurementSample(BaseModel):
    """Замер партии: size цифр в каждом операнде, elapsed_us на всю партию."""

    size: int = Field(..., ge=1, description="Цифр в каждом операнде")
    elapsed_us: int = Field(..., ge=0, description="Время партии (микросекунды)")

    model_config = {"frozen": True}


def time_batch(
    strategy: MultiplicationStrategy,
    size: int,
    operations: int,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Время (мкс) выполнения operations умножений size-значных операндов.

    На каждой итерации генерируется новая пара операндов; генерация
    входит в замер.
    """
    multiply = get_strategy(strategy)

    start_ns = time.perf_counter_ns()
    for _ in range(operations):
        a = random_nat(size, rng)
        b = random_nat(size, rng)
        multiply(a, b)
    return (time.perf_counter_ns() - start_ns) // 1000
