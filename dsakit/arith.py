"""Fibonacci numbers and fixed-width unsigned bitwise operations."""

from __future__ import annotations


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1."""
    if n < 1:
        raise ValueError("Invalid number of terms")
    terms: list[int] = []
    first, second = 0, 1
    for _ in range(n):
        terms.append(first)
        first, second = second, first + second
    return terms


def bitwise_operations(a: int, b: int, width: int = 32) -> dict[str, int]:
    """Apply &, |, ^, ~a, b<<1 and b>>1 as ``width``-bit unsigned integers."""
    if width < 1:
        raise ValueError("width must be positive")
    mask = (1 << width) - 1
    for name, value in (("a", a), ("b", b)):
        if not 0 <= value <= mask:
            raise ValueError(f"{name}={value} does not fit in {width} unsigned bits")
    return {
        "a&b": a & b,
        "a|b": a | b,
        "a^b": a ^ b,
        "~a": ~a & mask,
        "b<<1": (b << 1) & mask,
        "b>>1": b >> 1,
    }