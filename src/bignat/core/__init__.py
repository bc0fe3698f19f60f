"""
Core value type, arithmetic primitives, and contracts.

Everything under bignat.core is pure and single-threaded: values are
immutable and every operation returns a new instance.
"""
