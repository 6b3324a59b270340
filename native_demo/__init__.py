"""Plugin de demostración: saludo, Fibonacci y suma con aritmética de ancho fijo."""

__version__ = "0.1.0"

from native_demo.simple import (
    I64_MAX,
    I64_MIN,
    U32_MAX,
    U64_MAX,
    add_numbers,
    calculate_fibonacci,
    greet,
    wrap_i64,
    wrap_u64,
)

__all__ = [
    "add_numbers",
    "calculate_fibonacci",
    "greet",
    "wrap_i64",
    "wrap_u64",
    "I64_MAX",
    "I64_MIN",
    "U32_MAX",
    "U64_MAX",
    "__version__",
]
