"""
Contract Validation Module

Модуль для валидации JSON контрактов bignat.
"""

from .validators import (
    BenchmarkTableValidator,
    ContractValidator,
    SchemaLoader,
    validate_benchmark_table,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BenchmarkTableValidator",
    # Functions
    "validate_benchmark_table",
]
