"""Count Unicode characters and the lengths of their UTF-8 encodings."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

from primer.format import quote

UTF_MAX = 4


def _rune_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _runes(data: bytes) -> Iterator[tuple[str | None, int]]:
    """Yield (character, encoded length); an invalid byte yields (None, 1)."""
    i = 0
    while i < len(data):
        n = _rune_length(data[i])
        if n:
            try:
                ch = data[i : i + n].decode("utf-8")
            except UnicodeDecodeError:
                pass
            else:
                yield ch, n
                i += n
                continue
        yield None, 1
        i += 1


def _quote_rune(ch: str) -> str:
    if ch == "'":
        return "'\\''"
    if ch == '"':
        return "'\"'"
    return "'" + quote(ch)[1:-1] + "'"


def _empty_lengths() -> dict[int, int]:
    return {n: 0 for n in range(1, UTF_MAX + 1)}


@dataclass
class CharCounts:
    """Character counts, counts of encoding lengths, and invalid bytes seen."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: dict[int, int] = field(default_factory=_empty_lengths)
    invalid: int = 0

    def report(self) -> str:
        """Return the counts as a printable table."""
        lines = ["rune\tcount"]
        lines.extend(f"{_quote_rune(c)}\t{n}" for c, n in self.counts.items())
        lines.append("")
        lines.append("len\tcount")
        lines.extend(f"{i}\t{n}" for i, n in sorted(self.utflen.items()))
        text = "\n".join(lines) + "\n"
        if self.invalid > 0:
            text += f"\n{self.invalid} invalid UTF-8 characters\n"
        return text


def count_chars(data: bytes | str) -> CharCounts:
    """Count the characters of UTF-8 data; undecodable bytes count as invalid."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    result = CharCounts()
    for ch, n in _runes(data):
        if ch is None:
            result.invalid += 1
            continue
        result.counts[ch] += 1
        result.utflen[n] += 1
    return result


def main(argv: list[str] | None = None) -> int:
    """Count the characters of standard input and print the table."""
    try:
        data = sys.stdin.buffer.read()
    except OSError as err:
        print(f"charcount: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(count_chars(data).report())
    return 0