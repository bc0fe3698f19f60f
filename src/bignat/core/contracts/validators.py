"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (каталог schema/ рядом с модулем):
- benchmark_table.json — таблица результатов бенчмарка умножения
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в bignat/core/contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'benchmark_table')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BenchmarkTableValidator(ContractValidator):
    """
    Валидатор для benchmark_table контракта.

    Дополнительно к схеме проверяет, что каждая строка содержит время
    для всех стратегий из заголовка и что размеры строго возрастают.
    """

    def __init__(self):
        super().__init__("benchmark_table")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)

        strategies = set(data["strategies"])
        previous_size = 0
        for index, row in enumerate(data["rows"]):
            if set(row["timings_us"]) != strategies:
                raise ValidationError(
                    f"rows[{index}].timings_us columns {sorted(row['timings_us'])} "
                    f"do not match strategies {sorted(strategies)}"
                )
            if row["size"] <= previous_size:
                raise ValidationError(
                    f"rows[{index}].size={row['size']} is not greater than previous size {previous_size}"
                )
            previous_size = row["size"]

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_benchmark_table(data: Dict[str, Any]) -> None:
    """
    Валидация benchmark_table данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BenchmarkTableValidator().validate(data)
