"""
Test suite for bignat

Contains:
- tests/unit/          : Unit tests for individual modules and the benchmark harness
"""
