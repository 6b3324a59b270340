#!/usr/bin/env python3
"""
native_demo_cli - CLI de demostración que llama a las tres funciones del plugin.
Solo usa la biblioteca estándar de Python.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime, timezone

from native_demo import add_numbers, calculate_fibonacci, greet

DEFAULT_NAME = "Flutter Developer"
DEFAULT_FIB = 20
DEFAULT_ADD = (42, 13)


def parse_args() -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        description="Llama a greet, calculate_fibonacci y add_numbers y muestra los resultados."
    )
    parser.add_argument(
        "--name",
        default=DEFAULT_NAME,
        help=f"Nombre para el saludo (default: {DEFAULT_NAME})",
    )
    parser.add_argument(
        "--fib",
        type=int,
        default=DEFAULT_FIB,
        metavar="N",
        help=f"Índice de Fibonacci a calcular (default: {DEFAULT_FIB})",
    )
    parser.add_argument(
        "--add",
        type=int,
        nargs=2,
        default=list(DEFAULT_ADD),
        metavar=("A", "B"),
        help="Operandos i64 a sumar (default: 42 13)",
    )
    parser.add_argument(
        "--out",
        choices=("json", "text"),
        default="json",
        help="Formato de salida: json o text (default: json)",
    )
    return parser.parse_args()


def build_report(name: str, n: int, a: int, b: int) -> dict:
    """Llama a las tres funciones y construye el reporte."""
    fib = calculate_fibonacci(n)
    total = add_numbers(a, b)
    return {
        "greeting": greet(name),
        "fibonacci": {"n": n, "value": fib, "label": f"Fibonacci({n}) = {fib}"},
        "addition": {"a": a, "b": b, "value": total, "label": f"{a} + {b} = {total}"},
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


def output_json(report: dict) -> None:
    """Imprime el reporte en JSON."""
    print(json.dumps(report, indent=2, ensure_ascii=False))


def output_text(report: dict) -> None:
    """Imprime el reporte como líneas de texto."""
    print(f"native_demo — {report['timestamp']}")
    print(report["greeting"])
    print(report["fibonacci"]["label"])
    print(report["addition"]["label"])


def main() -> int:
    """Punto de entrada."""
    args = parse_args()
    a, b = args.add

    try:
        report = build_report(args.name, args.fib, a, b)
    except (ValueError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.out == "text":
        output_text(report)
    else:
        output_json(report)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
