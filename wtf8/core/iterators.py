"""Iterators over WTF-8 bytes: code points and potentially ill-formed UTF-16."""

import copy
from typing import Iterable, Iterator, Optional, Tuple

from .codepoint import CodePoint
from .surrogates import decode_surrogate_pair, is_lead_surrogate, is_trail_surrogate

SizeHint = Tuple[int, Optional[int]]


def next_code_point(data, pos: int) -> Tuple[int, int]:
    """Decode the code point starting at ``pos``; return it and the next offset.

    Uses the UTF-8 lead byte table without range checks, so ``ED A0..BF xx``
    comes out as a surrogate. ``data`` must be well-formed WTF-8.
    """
    b0 = data[pos]
    if b0 < 0x80:
        return b0, pos + 1
    b1 = data[pos + 1] & 0x3F
    if b0 < 0xE0:
        return (b0 & 0x1F) << 6 | b1, pos + 2
    b2 = data[pos + 2] & 0x3F
    if b0 < 0xF0:
        return (b0 & 0x0F) << 12 | b1 << 6 | b2, pos + 3
    b3 = data[pos + 3] & 0x3F
    return (b0 & 0x07) << 18 | b1 << 12 | b2 << 6 | b3, pos + 4


class Wtf8CodePoints:
    """Iterator over the code points of a WTF-8 byte sequence.

    Created by ``Wtf8.code_points()``. ``copy.copy`` gives an independent
    iterator resuming from the same position.
    """

    def __init__(self, data) -> None:
        self._data = data
        self._pos = 0

    def __iter__(self) -> "Wtf8CodePoints":
        return self

    def __next__(self) -> CodePoint:
        if self._pos >= len(self._data):
            raise StopIteration
        value, self._pos = next_code_point(self._data, self._pos)
        return CodePoint._unchecked(value)

    def size_hint(self) -> SizeHint:
        remaining = len(self._data) - self._pos
        return (remaining + 3) // 4, remaining

    def __length_hint__(self) -> int:
        return self.size_hint()[0]


class EncodeWide:
    """Iterator of 16-bit code units for potentially ill-formed UTF-16.

    Supplementary code points become a surrogate pair, every other code point
    (lone surrogates included) a single unit.
    """

    def __init__(self, code_points: Wtf8CodePoints) -> None:
        self._code_points = code_points
        self._extra = 0

    def __iter__(self) -> "EncodeWide":
        return self

    def __next__(self) -> int:
        if self._extra:
            unit, self._extra = self._extra, 0
            return unit
        value = next(self._code_points).value
        if value < 0x10000:
            return value
        value -= 0x10000
        self._extra = 0xDC00 | (value & 0x3FF)
        return 0xD800 | (value >> 10)

    def __copy__(self) -> "EncodeWide":
        clone = EncodeWide(copy.copy(self._code_points))
        clone._extra = self._extra
        return clone

    def size_hint(self) -> SizeHint:
        low, high = self._code_points.size_hint()
        pending = 1 if self._extra else 0
        # one or two units per remaining code point
        return low + pending, None if high is None else high * 2 + pending

    def __length_hint__(self) -> int:
        return self.size_hint()[0]


def decode_utf16(units: Iterable[int]) -> Iterator[Tuple[int, bool]]:
    """Decode potentially ill-formed UTF-16.

    Yields ``(value, True)`` for scalar values, surrogate pairs already
    combined, and ``(surrogate, False)`` for every unpaired surrogate.
    """
    pending: Optional[int] = None
    for unit in units:
        if not 0 <= unit <= 0xFFFF:
            raise ValueError(f"{unit!r} is not a 16-bit code unit")
        if pending is not None:
            if is_trail_surrogate(unit):
                yield decode_surrogate_pair(pending, unit), True
                pending = None
                continue
            yield pending, False
            pending = None
        if is_lead_surrogate(unit):
            pending = unit
        elif is_trail_surrogate(unit):
            yield unit, False
        else:
            yield unit, True
    if pending is not None:
        yield pending, False
