"""Text drawings of line-coding waveforms for a sequence of bits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from itertools import accumulate

__all__ = ["Scheme", "render", "render_all", "main"]

_HIGH = "___"
_BLANK = "   "
_PULSE = " | "

Rows = list[list[str]]


class Scheme(Enum):
    """Line-coding schemes, in the order they are drawn by :func:`render_all`."""

    UNIPOLAR_NRZ = "Unipolar NRZ"
    POLAR_NRZ_L = "Polar NRZ-L"
    POLAR_NRZ_I = "Polar NRZ-I"
    POLAR_RZ = "Polar RZ"
    MANCHESTER = "Manchester"
    DIFF_MANCHESTER = "Diff-Manchester"
    AMI = "AMI"
    PSEUDOTERNARY = "Pseudoternary"

    @property
    def title(self) -> str:
        return self.value


def _table(bits: Sequence[int], cells: Sequence[tuple[str, str]]) -> Rows:
    """One row per ``(cell for 0, cell for 1)`` pair."""
    return [[pair[bit] for bit in bits] for pair in cells]


def _levels(bits: Sequence[int], high_bit: int) -> Rows:
    top = [_HIGH if bit == high_bit else _BLANK for bit in bits]
    bottom = [_BLANK if bit == high_bit else _HIGH for bit in bits]
    return [top, bottom]


def _unipolar_nrz(bits: Sequence[int]) -> Rows:
    return _levels(bits, 1)


def _polar_nrz_l(bits: Sequence[int]) -> Rows:
    return _levels(bits, 0)


def _polar_nrz_i(bits: Sequence[int]) -> Rows:
    inverted = [count % 2 == 1 for count in accumulate(bits)]
    top = [_BLANK if flag else _HIGH for flag in inverted]
    bottom = [_HIGH if flag else _BLANK for flag in inverted]
    return [top, bottom]


def _polar_rz(bits: Sequence[int]) -> Rows:
    return _table(
        bits,
        [
            (_BLANK, "_  "),
            (_BLANK, _PULSE),
            (_BLANK, " |_"),
            ("  _", _BLANK),
            (_PULSE, _BLANK),
            ("_| ", _BLANK),
        ],
    )


def _manchester(bits: Sequence[int]) -> Rows:
    return _table(bits, [("_  ", "  _"), (_PULSE, _PULSE), (" |_", "_| ")])


def _diff_manchester(bits: Sequence[int]) -> Rows:
    top: list[str] = []
    bottom: list[str] = []
    high = False
    for index, bit in enumerate(bits):
        # The first bit always starts low; afterwards a 1 flips the phase.
        if index and bit == 1:
            high = not high
        top.append("_  " if high else "  _")
        bottom.append(" |_" if high else "_| ")
    return [top, [_PULSE] * len(bits), bottom]


def _alternate_mark(bits: Sequence[int], mark: int) -> Rows:
    top: list[str] = []
    middle: list[str] = []
    bottom: list[str] = []
    marks = 0
    for bit in bits:
        if bit == mark:
            marks += 1
            odd = marks % 2 == 1
            top.append(_HIGH if odd else _BLANK)
            middle.append(_BLANK)
            bottom.append(_BLANK if odd else _HIGH)
        else:
            top.append(_BLANK)
            middle.append(_HIGH)
            bottom.append(_BLANK)
    return [top, middle, bottom]


def _ami(bits: Sequence[int]) -> Rows:
    return _alternate_mark(bits, 1)


def _pseudoternary(bits: Sequence[int]) -> Rows:
    return _alternate_mark(bits, 0)


_DRAWERS: dict[Scheme, Callable[[Sequence[int]], Rows]] = {
    Scheme.UNIPOLAR_NRZ: _unipolar_nrz,
    Scheme.POLAR_NRZ_L: _polar_nrz_l,
    Scheme.POLAR_NRZ_I: _polar_nrz_i,
    Scheme.POLAR_RZ: _polar_rz,
    Scheme.MANCHESTER: _manchester,
    Scheme.DIFF_MANCHESTER: _diff_manchester,
    Scheme.AMI: _ami,
    Scheme.PSEUDOTERNARY: _pseudoternary,
}


def _check_bits(bits: Iterable[int]) -> tuple[int, ...]:
    checked = tuple(bits)
    for bit in checked:
        if bit not in (0, 1):
            raise ValueError(f"bit {bit!r} is neither 0 nor 1")
    return tuple(int(bit) for bit in checked)


def render(scheme: Scheme, bits: Iterable[int]) -> str:
    """Draw ``bits`` in ``scheme``: a row of the bits, then the waveform rows.

    Every bit takes three characters in every row.
    """
    checked = _check_bits(bits)
    header = "".join(f" {bit} " for bit in checked)
    rows = _DRAWERS[scheme](checked)
    return "\n".join([header, *("".join(row) for row in rows)])


def render_all(bits: Iterable[int]) -> str:
    """Draw ``bits`` in every scheme, each under its title."""
    checked = _check_bits(bits)
    return "\n\n\n".join(
        f"{scheme.title} : -\n\n{render(scheme, checked)}" for scheme in Scheme
    )


def _read_bits(stream) -> list[int]:
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("expected the number of bits")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("the number of bits must not be negative")
    values = tokens[1:1 + count]
    if len(values) < count:
        raise ValueError(f"expected {count} bits, got {len(values)}")
    return [int(value) for value in values]


def main(argv: Sequence[str] | None = None) -> int:
    """Draw the waveforms of bits given as arguments or read from standard input.

    Standard input holds the number of bits followed by the bits.
    """
    parser = argparse.ArgumentParser(
        prog="line-coding", description="Draw line-coding waveforms for bits."
    )
    parser.add_argument("bits", nargs="*", help="bits (0 or 1) to encode")
    args = parser.parse_args(argv)
    try:
        bits = [int(bit) for bit in args.bits] if args.bits else _read_bits(sys.stdin)
        report = render_all(bits)
    except ValueError as error:
        parser.error(str(error))
    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())