"""Benchmark config — параметры прогона стратегий умножения.

Immutable Pydantic модель. Размеры операндов — степени двойки
2^min_exponent .. 2^max_exponent (включительно).
"""

from pathlib import Path
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from bignat.core.math.multiplication import MultiplicationStrategy


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_MIN_EXPONENT: Final[int] = 1
DEFAULT_MAX_EXPONENT: Final[int] = 14

# Количество умножений в одной партии на каждый размер
DEFAULT_OPERATIONS_PER_SIZE: Final[int] = 1000

# Лимит времени на одну партию (30 минут)
DEFAULT_TIMEOUT_SECONDS: Final[float] = 1800.0

DEFAULT_OUTPUT_PATH: Final[str] = "results.csv"


# =============================================================================
# MODELS
# =============================================================================


class BenchmarkConfig(BaseModel):
    """Конфигурация бенчмарка.

    Превышение timeout_seconds для партии останавливает рост размера
    для этой стратегии; остальные стратегии продолжают.
    """

    min_exponent: int = Field(DEFAULT_MIN_EXPONENT, ge=1, description="Минимальный размер 2^min_exponent")
    max_exponent: int = Field(DEFAULT_MAX_EXPONENT, ge=1, description="Максимальный размер 2^max_exponent")
    operations_per_size: int = Field(DEFAULT_OPERATIONS_PER_SIZE, ge=1, description="Умножений в партии")
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0.0, description="Лимит на партию (сек)")
    strategies: tuple[MultiplicationStrategy, ...] = Field(
        tuple(MultiplicationStrategy),
        min_length=1,
        description="Стратегии в порядке прогона",
    )
    seed: Optional[int] = Field(None, description="Seed генератора операндов")
    output_path: Path = Field(Path(DEFAULT_OUTPUT_PATH), description="CSV файл результатов")

    model_config = {"frozen": True}

    @field_validator("strategies")
    @classmethod
    def _unique_strategies(cls, value: tuple[MultiplicationStrategy, ...]) -> tuple[MultiplicationStrategy, ...]:
        if len(set(value)) != len(value):
            raise ValueError(f"Duplicate strategies: {[s.value for s in value]}")
        return value

    @model_validator(mode="after")
    def _exponent_order(self) -> "BenchmarkConfig":
        if self.max_exponent < self.min_exponent:
            raise ValueError(
                f"max_exponent ({self.max_exponent}) must be >= min_exponent ({self.min_exponent})"
            )
        return self

    @property
    def sizes(self) -> list[int]:
        """Размеры операндов в цифрах: [2^min_exponent, ..., 2^max_exponent]."""
        return [2**exponent for exponent in range(self.min_exponent, self.max_exponent + 1)]
