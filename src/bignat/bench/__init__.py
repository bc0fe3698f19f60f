"""
Benchmark harness для стратегий умножения.

Генерирует случайные операнды размеров 2^i цифр, замеряет партии
умножений в отдельных процессах с лимитом времени и сохраняет таблицу
результатов в CSV.
"""

from bignat.bench.config import (
    DEFAULT_MAX_EXPONENT,
    DEFAULT_MIN_EXPONENT,
    DEFAULT_OPERATIONS_PER_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
    BenchmarkConfig,
)
from bignat.bench.runner import (
    BenchmarkWorkerError,
    run_all,
    run_batch,
    run_strategy,
)
from bignat.bench.table import (
    TIMEOUT_SENTINEL,
    BenchmarkRow,
    BenchmarkTable,
)
from bignat.bench.timing import (
    MeasurementSample,
    time_batch,
)

__all__ = [
    # Config
    "DEFAULT_MAX_EXPONENT",
    "DEFAULT_MIN_EXPONENT",
    "DEFAULT_OPERATIONS_PER_SIZE",
    "DEFAULT_TIMEOUT_SECONDS",
    "BenchmarkConfig",
    # Timing
    "MeasurementSample",
    "time_batch",
    # Table
    "TIMEOUT_SENTINEL",
    "BenchmarkRow",
    "BenchmarkTable",
    # Runner
    "BenchmarkWorkerError",
    "run_all",
    "run_batch",
    "run_strategy",
]
