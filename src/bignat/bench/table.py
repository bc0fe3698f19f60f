"""Benchmark table — результаты бенчмарка: строка на размер, колонка на стратегию.

Отсутствующий замер (партия превысила лимит или рост размера был
остановлен раньше) записывается как TIMEOUT_SENTINEL.
"""

import csv
from pathlib import Path
from typing import Any, Final, Mapping, Sequence

from pydantic import BaseModel, Field

from bignat.bench.timing import MeasurementSample
from bignat.core.contracts.validators import validate_benchmark_table
from bignat.core.math.multiplication import MultiplicationStrategy

# Значение ячейки для "превышен лимит времени"
TIMEOUT_SENTINEL: Final[int] = -1

SIZE_COLUMN: Final[str] = "size"


class BenchmarkRow(BaseModel):
    """Строка таблицы: размер операндов и время (мкс) по стратегиям."""

    size: int = Field(..., ge=1, description="Цифр в каждом операнде")
    timings_us: dict[MultiplicationStrategy, int] = Field(..., description="Время партии или TIMEOUT_SENTINEL")

    model_config = {"frozen": True}


class BenchmarkTable(BaseModel):
    """Таблица результатов. Порядок колонок — порядок strategies."""

    strategies: tuple[MultiplicationStrategy, ...] = Field(..., min_length=1)
    rows: tuple[BenchmarkRow, ...] = Field(default=())

    model_config = {"frozen": True}

    @classmethod
    def from_measurements(
        cls,
        measurements: Mapping[MultiplicationStrategy, Sequence[MeasurementSample]],
    ) -> "BenchmarkTable":
        """
        Сборка таблицы из замеров по стратегиям.

        Колонки упорядочены как MultiplicationStrategy; строки — все
        размеры, измеренные хотя бы одной стратегией, по возрастанию.
        """
        strategies = tuple(s for s in MultiplicationStrategy if s in measurements)
        by_strategy = {
            strategy: {sample.size: sample.elapsed_us for sample in measurements[strategy]}
            for strategy in strategies
        }
        sizes = sorted({size for timings in by_strategy.values() for size in timings})

        rows = tuple(
            BenchmarkRow(
                size=size,
                timings_us={
                    strategy: by_strategy[strategy].get(size, TIMEOUT_SENTINEL)
                    for strategy in strategies
                },
            )
            for size in sizes
        )
        return cls(strategies=strategies, rows=rows)

    @property
    def header(self) -> list[str]:
        return [SIZE_COLUMN, *(strategy.value for strategy in self.strategies)]

    def to_rows(self) -> list[list[Any]]:
        """Заголовок и строки данных в порядке колонок."""
        data = [
            [row.size, *(row.timings_us[strategy] for strategy in self.strategies)]
            for row in self.rows
        ]
        return [self.header, *data]

    def to_dict(self) -> dict[str, Any]:
        """JSON-представление (контракт benchmark_table)."""
        return {
            "strategies": [strategy.value for strategy in self.strategies],
            "rows": [
                {
                    "size": row.size,
                    "timings_us": {strategy.value: row.timings_us[strategy] for strategy in self.strategies},
                }
                for row in self.rows
            ],
        }

    def write_csv(self, path: Path | str) -> Path:
        """
        Запись таблицы в CSV (с заголовком).

        Перед записью таблица проверяется против контракта benchmark_table.

        Raises:
            jsonschema.ValidationError: Если таблица не соответствует контракту
        """
        validate_benchmark_table(self.to_dict())

        path = Path(path)
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerows(self.to_rows())
        return path
