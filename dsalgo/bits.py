"""Bit manipulation helpers."""

from __future__ import annotations


def get_bit(n: int, position: int) -> int:
    """Return the bit of ``n`` at ``position`` as 0 or 1."""
    return 1 if n & (1 << position) else 0


def set_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` set."""
    return n | (1 << position)


def clear_bit(n: int, position: int) -> int:
    """Return ``n`` with the bit at ``position`` cleared."""
    return n & ~(1 << position)


def update_bit(n: int, position: int, value: int) -> int:
    """Return ``n`` with the bit at ``position`` replaced by ``value``."""
    return clear_bit(n, position) | (value << position)


def clear_last_bits(n: int, count: int) -> int:
    """Return ``n`` with its lowest ``count`` bits cleared."""
    return n & (-1 << count)


def clear_bits_range(n: int, low: int, high: int) -> int:
    """Return ``n`` with bits ``low`` to ``high`` (inclusive) cleared."""
    mask = (-1 << (high + 1)) | ((1 << low) - 1)
    return n & mask


def _require_unsigned(n: int) -> None:
    if n < 0:
        raise ValueError("only non-negative numbers have a finite count of set bits")


def count_set_bits(n: int) -> int:
    """Count the set bits of ``n`` by shifting one bit at a time."""
    _require_unsigned(n)
    count = 0
    while n:
        count += n & 1
        n >>= 1
    return count


def count_set_bits_fast(n: int) -> int:
    """Count the set bits of ``n`` by repeatedly dropping the lowest set bit."""
    _require_unsigned(n)
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count