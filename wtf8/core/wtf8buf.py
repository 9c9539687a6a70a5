"""Owned, growable WTF-8 strings."""

from __future__ import annotations

import logging
import operator
import sys
from typing import Iterable

from .codepoint import CodePoint
from .errors import SurrogateError
from .iterators import decode_utf16
from .surrogates import (
    REPLACEMENT_CHARACTER_UTF8,
    decode_surrogate_pair,
    encode_code_point,
    is_trail_surrogate,
)
from .wtf8 import Wtf8, is_code_point_boundary, slice_error_fail

log = logging.getLogger(__name__)

_MIN_NON_ZERO_CAPACITY = 8


class Wtf8Buf(Wtf8):
    """A mutable, growable string of well-formed WTF-8 data.

    Similar to ``Wtf8``, but owns a ``bytearray`` that can be appended to.
    Every read operation of ``Wtf8`` is available directly on the buffer.
    Appending code points or other WTF-8 strings replaces a lead surrogate
    followed by a trail surrogate with the supplementary code point they
    encode, like concatenating ill-formed UTF-16 would.
    """

    __slots__ = ("_capacity",)

    # mutable, like bytearray; use freeze() for a hashable key
    __hash__ = None

    def __init__(self) -> None:
        self._bytes = bytearray()
        self._capacity = 0

    @classmethod
    def _from_bytes_unchecked(cls, data) -> Wtf8Buf:
        buf = cls()
        buf._bytes = bytearray(data)
        buf._capacity = len(buf._bytes)
        return buf

    @classmethod
    def with_capacity(cls, capacity: int) -> Wtf8Buf:
        buf = cls()
        buf.reserve_exact(capacity)
        return buf

    @classmethod
    def from_str(cls, text: str) -> Wtf8Buf:
        """Create from UTF-8 text.

        Since WTF-8 is a superset of UTF-8, this always succeeds.
        """
        return cls._from_bytes_unchecked(text.encode("utf-8"))

    @classmethod
    def from_wtf8(cls, wtf8: Wtf8) -> Wtf8Buf:
        return cls._from_bytes_unchecked(wtf8._bytes)

    @classmethod
    def from_wide(cls, units: Iterable[int]) -> Wtf8Buf:
        """Create from potentially ill-formed UTF-16 code units.

        This is lossless: ``encode_wide()`` on the result gives back the
        original code units.
        """
        units = list(units)
        buf = cls.with_capacity(len(units))
        # pairs were already combined by decode_utf16, so unpaired
        # surrogates skip the concatenation check
        for value, _ in decode_utf16(units):
            buf._push_code_point_unchecked(value)
        return buf

    @classmethod
    def from_code_points(cls, code_points: Iterable[CodePoint]) -> Wtf8Buf:
        """Create from code points, combining surrogate pairs as ``push`` does."""
        buf = cls()
        buf.extend(code_points)
        return buf

    @classmethod
    def from_python_str(cls, text: str) -> Wtf8Buf:
        """Create from a ``str`` that may contain lone surrogate characters."""
        return cls.from_code_points(CodePoint.from_char(char) for char in text)

    def _frozen_bytes(self):
        return bytes(self._bytes)

    def _slice_unchecked(self, begin: int, end: int) -> Wtf8:
        return Wtf8._from_bytes_unchecked(bytes(self._bytes[begin:end]))

    def as_wtf8(self) -> Wtf8:
        """Return an immutable snapshot of the current content."""
        return Wtf8._from_bytes_unchecked(bytes(self._bytes))

    freeze = as_wtf8

    # ---------------- Capacity ----------------

    def capacity(self) -> int:
        """Number of bytes the buffer can hold without growing."""
        return self._capacity

    def _required(self, additional: int) -> int:
        if additional < 0:
            raise ValueError(f"cannot reserve a negative number of bytes: {additional}")
        required = len(self._bytes) + additional
        if required > sys.maxsize:
            raise OverflowError("capacity overflow")
        return required

    def reserve(self, additional: int) -> None:
        """Reserve room for at least ``additional`` more bytes.

        The capacity at least doubles when it grows, so repeated appends
        take amortized constant time.
        """
        required = self._required(additional)
        if required > self._capacity:
            self._capacity = max(required, self._capacity * 2, _MIN_NON_ZERO_CAPACITY)

    def reserve_exact(self, additional: int) -> None:
        required = self._required(additional)
        if required > self._capacity:
            self._capacity = required

    def shrink_to_fit(self) -> None:
        self._capacity = len(self._bytes)

    def clear(self) -> None:
        self._bytes.clear()

    def _extend_bytes(self, data) -> None:
        self.reserve(len(data))
        self._bytes += data

    # ---------------- Appending ----------------

    def _push_code_point_unchecked(self, value: int) -> None:
        # no surrogate pair check
        self._extend_bytes(encode_code_point(value))

    def push_str(self, text: str) -> None:
        """Append UTF-8 text.

        Well-formed text never starts with a trail surrogate, so no pairing
        can happen at the join.
        """
        self._extend_bytes(text.encode("utf-8"))

    def push_char(self, char: str) -> None:
        """Append a Unicode scalar value."""
        code_point = CodePoint.from_char(char)
        if code_point.is_surrogate():
            raise ValueError(f"{code_point!r} is a surrogate, use push() for code points")
        self._push_code_point_unchecked(code_point.value)

    def push(self, code_point: CodePoint) -> None:
        """Append a code point.

        A trail surrogate appended after a final lead surrogate replaces that
        lead surrogate with the supplementary code point the pair encodes.
        """
        trail = code_point.value
        if is_trail_surrogate(trail):
            lead = self._final_lead_surrogate()
            if lead is not None:
                del self._bytes[-3:]
                self._push_code_point_unchecked(decode_surrogate_pair(lead, trail))
                return
        self._push_code_point_unchecked(trail)

    def push_wtf8(self, other: Wtf8) -> None:
        """Append a WTF-8 string, pairing surrogates that meet at the join."""
        lead = self._final_lead_surrogate()
        trail = other._initial_trail_surrogate()
        if lead is None or trail is None:
            self._extend_bytes(other._frozen_bytes())
            return
        rest = bytes(other._bytes[3:])
        log.debug(
            "Joining U+%04X and U+%04X into one code point at byte %d",
            lead, trail, len(self._bytes) - 3,
        )
        del self._bytes[-3:]
        # 4 bytes for the supplementary code point
        self.reserve(4 + len(rest))
        self._push_code_point_unchecked(decode_surrogate_pair(lead, trail))
        self._extend_bytes(rest)

    def extend(self, code_points: Iterable[CodePoint]) -> None:
        """Append every code point with :meth:`push`."""
        # at least one byte per code point
        self.reserve(operator.length_hint(code_points))
        for code_point in code_points:
            self.push(code_point)

    def __iadd__(self, other) -> Wtf8Buf:
        if isinstance(other, str):
            self.push_str(other)
        elif isinstance(other, Wtf8):
            self.push_wtf8(other)
        elif isinstance(other, CodePoint):
            self.push(other)
        else:
            return NotImplemented
        return self

    def truncate(self, new_len: int) -> None:
        """Shorten the buffer to ``new_len`` bytes.

        ``new_len`` must be a code point boundary no greater than the current
        length.
        """
        if not is_code_point_boundary(self, new_len):
            raise slice_error_fail(self, 0, new_len)
        del self._bytes[new_len:]

    # ---------------- ASCII ----------------

    def make_ascii_uppercase(self) -> None:
        self._bytes[:] = self._bytes.upper()

    def make_ascii_lowercase(self) -> None:
        self._bytes[:] = self._bytes.lower()

    # ---------------- Conversions ----------------

    def into_string(self) -> str:
        """Convert to UTF-8 text.

        Raises :class:`SurrogateError` carrying this buffer, unchanged, if it
        contains a surrogate.
        """
        surrogate = self._next_surrogate(0)
        if surrogate is not None:
            raise SurrogateError(self, *surrogate)
        return self._bytes.decode("utf-8")

    def into_string_lossy(self) -> str:
        """Convert to UTF-8 text, replacing surrogates with U+FFFD.

        Each surrogate is overwritten in place, which is possible because
        both encodings are 3 bytes long. The buffer keeps the lossy content.
        """
        replaced = 0
        surrogate = self._next_surrogate(0)
        while surrogate is not None:
            pos = surrogate[0]
            self._bytes[pos:pos + 3] = REPLACEMENT_CHARACTER_UTF8
            replaced += 1
            surrogate = self._next_surrogate(pos + 3)
        if replaced:
            log.debug("Replaced %d surrogate(s) with U+FFFD", replaced)
        return self._bytes.decode("utf-8")
