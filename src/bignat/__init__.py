"""
bignat — десятичная арифметика неотрицательных целых произвольной точности

Пакеты:
- bignat.core.domain    : тип значения DecimalBigNat и нормализация
- bignat.core.math      : сравнение, сдвиг, сложение, вычитание, умножение
- bignat.core.contracts : JSON Schema контракт таблицы бенчмарка
- bignat.bench          : бенчмарк стратегий умножения
"""

__version__ = "0.1.0"
