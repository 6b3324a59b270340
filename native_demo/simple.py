"""Funciones simples del plugin: saludo, Fibonacci y suma de enteros.

Los resultados numéricos usan aritmética de ancho fijo (u64 / i64) y
desbordan en silencio (wraparound), igual que la biblioteca nativa.
"""

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def wrap_u64(value: int) -> int:
    """Reduce un entero a u64 (módulo 2**64)."""
    return value & U64_MAX


def wrap_i64(value: int) -> int:
    """Reduce un entero a i64 en complemento a dos."""
    value &= U64_MAX
    if value > I64_MAX:
        value -= 2**64
    return value


def _require_int(value: object, name: str) -> int:
    # bool es subclase de int, pero no es un operando válido
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} debe ser un entero, no {type(value).__name__}")
    return value


def greet(name: str) -> str:
    """Devuelve un saludo con el nombre tal cual, sin validarlo."""
    return f"Hello, {name}! 🦀"


def calculate_fibonacci(n: int) -> int:
    """Devuelve F(n) con F(0)=0 y F(1)=1.

    Versión iterativa O(n) con dos acumuladores. El índice es un u32 y el
    resultado un u64: a partir de F(94) el valor desborda y se devuelve
    F(n) módulo 2**64.

    Raises:
        TypeError: si n no es un entero.
        ValueError: si n está fuera del rango 0..U32_MAX.
    """
    _require_int(n, "n")
    if n < 0 or n > U32_MAX:
        raise ValueError(f"n fuera de rango (0..{U32_MAX}): {n}")
    if n < 2:
        return n
    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, wrap_u64(a + b)
    return b


def add_numbers(a: int, b: int) -> int:
    """Suma dos enteros i64; el desbordamiento da la vuelta en silencio.

    Raises:
        TypeError: si algún operando no es un entero.
        ValueError: si algún operando no cabe en un i64.
    """
    for value, name in ((a, "a"), (b, "b")):
        _require_int(value, name)
        if value < I64_MIN or value > I64_MAX:
            raise ValueError(f"{name} fuera del rango i64: {value}")
    return wrap_i64(a + b)
