"""Runner — прогон стратегий умножения по возрастающим размерам.

Каждая партия выполняется в отдельном процессе с жёстким wall-clock
лимитом. При превышении лимита процесс завершается (terminate), а рост
размера для этой стратегии прекращается.
"""

import logging
import multiprocessing
import queue
import random
from typing import Optional

from bignat.bench.config import BenchmarkConfig
from bignat.bench.table import BenchmarkTable
from bignat.bench.timing import MeasurementSample, time_batch
from bignat.core.math.multiplication import MultiplicationStrategy

logger = logging.getLogger(__name__)

# Ожидание результата из очереди после нормального завершения процесса
_RESULT_GRACE_SECONDS = 5.0


class BenchmarkWorkerError(RuntimeError):
    """Ошибка внутри процесса, выполняющего партию."""


def _batch_rng(seed: Optional[int], strategy: MultiplicationStrategy, size: int) -> Optional[random.Random]:
    if seed is None:
        return None
    # str seed детерминирован между процессами (в отличие от hash())
    return random.Random(f"{seed}:{strategy.value}:{size}")


def _batch_worker(
    results: "multiprocessing.Queue",
    strategy: MultiplicationStrategy,
    size: int,
    operations: int,
    seed: Optional[int],
) -> None:
    try:
        elapsed_us = time_batch(strategy, size, operations, _batch_rng(seed, strategy, size))
    except Exception as e:
        # Исключение может не сериализоваться через pickle, передаётся текстом
        results.put(("error", f"{type(e).__name__}: {e}"))
        return
    results.put(("ok", elapsed_us))


def run_batch(
    strategy: MultiplicationStrategy,
    size: int,
    operations: int,
    timeout_seconds: float,
    seed: Optional[int] = None,
) -> Optional[MeasurementSample]:
    """
    Одна партия в отдельном процессе.

    Returns:
        MeasurementSample или None при превышении timeout_seconds

    Raises:
        BenchmarkWorkerError: Если партия завершилась с ошибкой
    """
    results: multiprocessing.Queue = multiprocessing.Queue()
    process = multiprocessing.Process(
        target=_batch_worker,
        args=(results, strategy, size, operations, seed),
        daemon=True,
    )
    process.start()
    process.join(timeout_seconds)

    if process.is_alive():
        process.terminate()
        process.join()
        return None

    try:
        status, payload = results.get(timeout=_RESULT_GRACE_SECONDS)
    except queue.Empty:
        raise BenchmarkWorkerError(
            f"{strategy.value} size={size}: worker exited with code {process.exitcode} without a result"
        ) from None

    if status == "error":
        raise BenchmarkWorkerError(f"{strategy.value} size={size}: {payload}")

    return MeasurementSample(size=size, elapsed_us=payload)


def run_strategy(strategy: MultiplicationStrategy, config: BenchmarkConfig) -> list[MeasurementSample]:
    """
    Партии для всех размеров config.sizes, пока не превышен лимит.

    Returns:
        Замеры в порядке возрастания размера (может быть короче config.sizes)
    """
    samples: list[MeasurementSample] = []
    for size in config.sizes:
        logger.info("%s: size %d", strategy.value, size)
        sample = run_batch(
            strategy,
            size,
            config.operations_per_size,
            config.timeout_seconds,
            config.seed,
        )
        if sample is None:
            logger.warning(
                "%s: calculation took too long at size %d (limit %.1fs), stopping",
                strategy.value,
                size,
                config.timeout_seconds,
            )
            break

        logger.debug("%s: size %d took %d us", strategy.value, size, sample.elapsed_us)
        samples.append(sample)

    return samples


def run_all(config: BenchmarkConfig) -> BenchmarkTable:
    """Прогон всех стратегий config.strategies; результат — таблица."""
    measurements = {strategy: run_strategy(strategy, config) for strategy in config.strategies}
    return BenchmarkTable.from_measurements(measurements)
