"""
Тесты для benchmark harness

Покрывает:
- BenchmarkConfig: значения по умолчанию, валидация, frozen
- MeasurementSample / time_batch
- BenchmarkTable: сборка, sentinel для пропущенных замеров, CSV
- run_batch / run_strategy / run_all: отдельный процесс и лимит времени
- CLI bignat-bench
"""

import csv
import logging
import queue
import random

import pytest
from pydantic import ValidationError

from bignat.bench import (
    DEFAULT_MAX_EXPONENT,
    DEFAULT_MIN_EXPONENT,
    DEFAULT_OPERATIONS_PER_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
    TIMEOUT_SENTINEL,
    BenchmarkConfig,
    BenchmarkTable,
    MeasurementSample,
    run_all,
    run_batch,
    run_strategy,
    time_batch,
)
from bignat.bench.cli import EXIT_INVALID_CONFIG, EXIT_OK, main
from bignat.bench.runner import _batch_worker
from bignat.core.math import MultiplicationStrategy

STANDARD = MultiplicationStrategy.STANDARD
FAST = MultiplicationStrategy.RECURSIVE_FAST
ITERATIVE = MultiplicationStrategy.ITERATIVE_ADDITION


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def tiny_config(tmp_path):
    """Конфигурация на доли секунды: размеры 2 и 4, по 3 умножения."""
    return BenchmarkConfig(
        min_exponent=1,
        max_exponent=2,
        operations_per_size=3,
        timeout_seconds=60.0,
        strategies=(STANDARD, FAST),
        seed=42,
        output_path=tmp_path / "results.csv",
    )


# =============================================================================
# ТЕСТЫ: BenchmarkConfig
# =============================================================================


class TestBenchmarkConfig:
    """Тесты BenchmarkConfig."""

    def test_defaults(self):
        config = BenchmarkConfig()
        assert config.min_exponent == DEFAULT_MIN_EXPONENT == 1
        assert config.max_exponent == DEFAULT_MAX_EXPONENT == 14
        assert config.operations_per_size == DEFAULT_OPERATIONS_PER_SIZE == 1000
        assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 1800.0
        assert config.strategies == tuple(MultiplicationStrategy)
        assert config.seed is None

    def test_sizes_are_powers_of_two(self):
        config = BenchmarkConfig(min_exponent=2, max_exponent=5)
        assert config.sizes == [4, 8, 16, 32]

    def test_strategies_from_names(self):
        config = BenchmarkConfig(strategies=("standardMultiplication", "recursiveFastMultiplication"))
        assert config.strategies == (STANDARD, FAST)

    def test_exponent_order_validated(self):
        with pytest.raises(ValidationError):
            BenchmarkConfig(min_exponent=5, max_exponent=4)

    def test_non_positive_values_rejected(self):
        with pytest.raises(ValidationError):
            BenchmarkConfig(operations_per_size=0)
        with pytest.raises(ValidationError):
            BenchmarkConfig(timeout_seconds=0.0)
        with pytest.raises(ValidationError):
            BenchmarkConfig(min_exponent=0)

    def test_strategies_non_empty_and_unique(self):
        with pytest.raises(ValidationError):
            BenchmarkConfig(strategies=())
        with pytest.raises(ValidationError):
            BenchmarkConfig(strategies=(STANDARD, STANDARD))

    def test_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            BenchmarkConfig(strategies=("fftMultiplication",))

    def test_frozen(self):
        config = BenchmarkConfig()
        with pytest.raises(ValidationError):
            config.max_exponent = 3


# =============================================================================
# ТЕСТЫ: Timing
# =============================================================================


class TestTiming:
    """Тесты MeasurementSample и time_batch."""

    def test_time_batch_non_negative(self):
        elapsed = time_batch(STANDARD, 4, 5, random.Random(1))
        assert isinstance(elapsed, int)
        assert elapsed >= 0

    def test_sample_validation(self):
        sample = MeasurementSample(size=8, elapsed_us=1500)
        assert sample.size == 8
        with pytest.raises(ValidationError):
            MeasurementSample(size=0, elapsed_us=1)
        with pytest.raises(ValidationError):
            MeasurementSample(size=2, elapsed_us=-1)


# =============================================================================
# ТЕСТЫ: BenchmarkTable
# =============================================================================


class TestBenchmarkTable:
    """Тесты BenchmarkTable."""

    def test_missing_measurements_use_sentinel(self):
        """Стратегия, остановленная раньше, получает TIMEOUT_SENTINEL."""
        table = BenchmarkTable.from_measurements(
            {
                ITERATIVE: [MeasurementSample(size=2, elapsed_us=10)],
                STANDARD: [
                    MeasurementSample(size=2, elapsed_us=5),
                    MeasurementSample(size=4, elapsed_us=9),
                ],
            }
        )
        assert table.to_rows() == [
            ["size", "iterativeAddition", "standardMultiplication"],
            [2, 10, 5],
            [4, TIMEOUT_SENTINEL, 9],
        ]

    def test_column_order_follows_enum(self):
        """Колонки упорядочены как MultiplicationStrategy, не как вход."""
        table = BenchmarkTable.from_measurements(
            {
                FAST: [MeasurementSample(size=2, elapsed_us=1)],
                STANDARD: [MeasurementSample(size=2, elapsed_us=2)],
            }
        )
        assert table.header == ["size", "standardMultiplication", "recursiveFastMultiplication"]

    def test_no_measurements(self):
        table = BenchmarkTable.from_measurements({STANDARD: []})
        assert table.to_rows() == [["size", "standardMultiplication"]]

    def test_write_csv(self, tmp_path):
        table = BenchmarkTable.from_measurements(
            {
                MultiplicationStrategy.ITERATIVE_ADDITION: [MeasurementSample(size=2, elapsed_us=100)],
                MultiplicationStrategy.STANDARD: [MeasurementSample(size=2, elapsed_us=20)],
                MultiplicationStrategy.RECURSIVE: [MeasurementSample(size=2, elapsed_us=30)],
                MultiplicationStrategy.RECURSIVE_FAST: [MeasurementSample(size=2, elapsed_us=40)],
            }
        )
        path = table.write_csv(tmp_path / "out.csv")

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows == [
            [
                "size",
                "iterativeAddition",
                "standardMultiplication",
                "recursiveMultiplication",
                "recursiveFastMultiplication",
            ],
            ["2", "100", "20", "30", "40"],
        ]

    def test_to_dict(self):
        table = BenchmarkTable.from_measurements({STANDARD: [MeasurementSample(size=4, elapsed_us=7)]})
        assert table.to_dict() == {
            "strategies": ["standardMultiplication"],
            "rows": [{"size": 4, "timings_us": {"standardMultiplication": 7}}],
        }


# =============================================================================
# ТЕСТЫ: Runner
# =============================================================================


class TestRunner:
    """Тесты run_batch / run_strategy / run_all."""

    def test_run_batch_success(self):
        sample = run_batch(STANDARD, 4, 3, timeout_seconds=60.0, seed=1)
        assert sample is not None
        assert sample.size == 4
        assert sample.elapsed_us >= 0

    def test_run_batch_timeout(self):
        """Партия, не уложившаяся в лимит, завершается и даёт None."""
        sample = run_batch(ITERATIVE, 64, 1000, timeout_seconds=0.2)
        assert sample is None

    def test_worker_reports_errors(self):
        """Ошибка в партии передаётся текстом через очередь."""
        results = queue.Queue()
        _batch_worker(results, "fftMultiplication", 2, 1, None)
        status, payload = results.get_nowait()
        assert status == "error"
        assert "ValueError" in payload

    def test_worker_reports_elapsed(self):
        results = queue.Queue()
        _batch_worker(results, STANDARD, 2, 2, 5)
        status, payload = results.get_nowait()
        assert status == "ok"
        assert payload >= 0

    def test_run_strategy_stops_on_timeout(self, caplog):
        config = BenchmarkConfig(
            min_exponent=6,
            max_exponent=8,
            operations_per_size=1000,
            timeout_seconds=0.2,
            strategies=(ITERATIVE,),
        )
        with caplog.at_level(logging.WARNING, logger="bignat.bench.runner"):
            samples = run_strategy(ITERATIVE, config)

        assert samples == []
        assert "took too long" in caplog.text

    def test_run_all(self, tiny_config):
        table = run_all(tiny_config)
        assert table.strategies == (STANDARD, FAST)
        assert [row.size for row in table.rows] == [2, 4]
        for row in table.rows:
            assert all(value >= 0 for value in row.timings_us.values())


# =============================================================================
# ТЕСТЫ: CLI
# =============================================================================


class TestCli:
    """Тесты bignat-bench."""

    def test_writes_csv(self, tmp_path):
        output = tmp_path / "bench.csv"
        code = main(
            [
                "--min-exponent", "1",
                "--max-exponent", "2",
                "--operations", "2",
                "--strategy", "standardMultiplication",
                "--strategy", "recursiveMultiplication",
                "--seed", "3",
                "--output", str(output),
            ]
        )
        assert code == EXIT_OK

        with open(output, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["size", "standardMultiplication", "recursiveMultiplication"]
        assert [row[0] for row in rows[1:]] == ["2", "4"]

    def test_invalid_config(self, tmp_path, capsys):
        code = main(["--min-exponent", "3", "--max-exponent", "2", "--output", str(tmp_path / "x.csv")])
        assert code == EXIT_INVALID_CONFIG
        assert "Invalid benchmark configuration" in capsys.readouterr().err
        assert not (tmp_path / "x.csv").exists()

    def test_unknown_strategy_choice(self):
        with pytest.raises(SystemExit):
            main(["--strategy", "fftMultiplication"])
