"""Population count of 64-bit values by table lookup."""

from __future__ import annotations

_MASK64 = (1 << 64) - 1


def _build_table() -> bytes:
    table = [0]
    for i in range(1, 256):
        table.append(table[i // 2] + (i & 1))
    return bytes(table)


_PC = _build_table()


def pop_count(x: int) -> int:
    """Return the number of set bits in the low 64 bits of x."""
    return sum(_PC[b] for b in (x & _MASK64).to_bytes(8, "little"))