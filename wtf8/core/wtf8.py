"""Immutable, well-formed WTF-8 strings.

A :class:`Wtf8` is to WTF-8 what ``str`` is to Unicode text, except that it may
additionally hold surrogate code points that are not part of a surrogate pair.
Its bytes are UTF-8 whenever no surrogate is present.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, List, Optional, Tuple

from .errors import CodePointBoundaryError, InvalidWtf8Error
from .iterators import EncodeWide, Wtf8CodePoints
from .surrogates import REPLACEMENT_CHARACTER_UTF8, decode_surrogate
from .validate import find_invalid_spans

if TYPE_CHECKING:
    from .wtf8buf import Wtf8Buf

_HASH_DISCRIMINATOR = 0xFE

_DEBUG_ESCAPES = {
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
}


def _escape_debug(text: str) -> str:
    out = []
    for char in text:
        if char in _DEBUG_ESCAPES:
            out.append(_DEBUG_ESCAPES[char])
        elif char.isprintable():
            out.append(char)
        else:
            out.append(f"\\u{{{ord(char):x}}}")
    return "".join(out)


def is_code_point_boundary(wtf8: Wtf8, index: int) -> bool:
    """True if ``index`` is where a code point starts, or the end of ``wtf8``."""
    if index == len(wtf8):
        return True
    if not 0 <= index < len(wtf8):
        return False
    b = wtf8._bytes[index]
    return b < 0x80 or b >= 0xC0


def slice_error_fail(wtf8: Wtf8, begin: int, end: int) -> CodePointBoundaryError:
    return CodePointBoundaryError(begin, end, repr(wtf8))


@functools.total_ordering
class Wtf8:
    """A well-formed WTF-8 string.

    Slicing never copies: ``view[begin:end]`` shares the underlying bytes.
    Both bounds must lie on code point boundaries.
    """

    __slots__ = ("_bytes",)

    def __init__(self, text: str = "") -> None:
        # UTF-8 is a subset of WTF-8
        self._bytes = text.encode("utf-8")

    @classmethod
    def _from_bytes_unchecked(cls, data) -> Wtf8:
        # data must already be well-formed WTF-8 that nobody else mutates
        wtf8 = cls.__new__(cls)
        wtf8._bytes = data
        return wtf8

    @classmethod
    def from_str(cls, text: str) -> Wtf8:
        """Create from UTF-8 text; always succeeds for text without lone surrogates."""
        return cls._from_bytes_unchecked(text.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: bytes) -> Wtf8:
        """Create from raw bytes, raising :class:`InvalidWtf8Error` if ill-formed."""
        spans = find_invalid_spans(data)
        if spans:
            raise InvalidWtf8Error(spans)
        return cls._from_bytes_unchecked(bytes(data))

    def _frozen_bytes(self):
        """Bytes that stay valid however the owner is mutated later."""
        return self._bytes

    # ---------------- Inspection ----------------

    def __len__(self) -> int:
        """Length in WTF-8 bytes."""
        return len(self._bytes)

    def is_empty(self) -> bool:
        return len(self._bytes) == 0

    def as_bytes(self) -> bytes:
        return bytes(self._bytes)

    def __bytes__(self) -> bytes:
        return bytes(self._bytes)

    def ascii_byte_at(self, position: int) -> int:
        """Return the byte at ``position`` if it is ASCII, or ``0xFF`` otherwise."""
        if not 0 <= position < len(self._bytes):
            raise IndexError(f"byte index {position} is out of range for length {len(self._bytes)}")
        b = self._bytes[position]
        return b if b <= 0x7F else 0xFF

    def is_code_point_boundary(self, index: int) -> bool:
        return is_code_point_boundary(self, index)

    def code_points(self) -> Wtf8CodePoints:
        return Wtf8CodePoints(self._frozen_bytes())

    def encode_wide(self) -> EncodeWide:
        """Convert to potentially ill-formed UTF-16 code units.

        This is lossless: ``Wtf8Buf.from_wide`` on the units returns the
        original string.
        """
        return EncodeWide(self.code_points())

    def to_wide(self) -> List[int]:
        return list(self.encode_wide())

    # ---------------- Surrogate scanning ----------------

    def _next_surrogate(self, pos: int) -> Optional[Tuple[int, int]]:
        """Return the offset and value of the first surrogate at or after ``pos``."""
        data = self._bytes
        n = len(data)
        while pos < n:
            b = data[pos]
            if b < 0x80:
                pos += 1
            elif b < 0xE0:
                pos += 2
            elif b == 0xED:
                if pos + 2 < n and data[pos + 1] >= 0xA0:
                    return pos, decode_surrogate(data[pos + 1], data[pos + 2])
                pos += 3
            elif b < 0xF0:
                pos += 3
            else:
                pos += 4
        return None

    def _final_lead_surrogate(self) -> Optional[int]:
        data = self._bytes
        if len(data) < 3:
            return None
        b1, b2, b3 = data[-3], data[-2], data[-1]
        if b1 == 0xED and 0xA0 <= b2 <= 0xAF:
            return decode_surrogate(b2, b3)
        return None

    def _initial_trail_surrogate(self) -> Optional[int]:
        data = self._bytes
        if len(data) < 3:
            return None
        b1, b2, b3 = data[0], data[1], data[2]
        if b1 == 0xED and 0xB0 <= b2 <= 0xBF:
            return decode_surrogate(b2, b3)
        return None

    # ---------------- Conversions ----------------

    def as_str(self) -> Optional[str]:
        """Return the content as ``str``, or ``None`` if it contains surrogates.

        Well-formed WTF-8 is well-formed UTF-8 if and only if it contains no
        surrogate.
        """
        if self._next_surrogate(0) is not None:
            return None
        return str(self._bytes, "utf-8")

    def to_string_lossy(self) -> str:
        """Convert to ``str``, replacing each surrogate with U+FFFD."""
        surrogate = self._next_surrogate(0)
        if surrogate is None:
            return str(self._bytes, "utf-8")
        data = self._bytes
        utf8 = bytearray()
        pos = 0
        while surrogate is not None:
            surrogate_pos = surrogate[0]
            utf8 += data[pos:surrogate_pos]
            utf8 += REPLACEMENT_CHARACTER_UTF8
            pos = surrogate_pos + 3
            surrogate = self._next_surrogate(pos)
        utf8 += data[pos:]
        return utf8.decode("utf-8")

    def as_python_str(self) -> str:
        """Return a ``str`` keeping unpaired surrogates as lone surrogate characters.

        Unlike :meth:`to_string_lossy` this loses nothing, but the result
        cannot be encoded as UTF-8 without an error handler.
        """
        return str(self._bytes, "utf-8", "surrogatepass")

    def to_owned(self) -> Wtf8Buf:
        from .wtf8buf import Wtf8Buf

        return Wtf8Buf._from_bytes_unchecked(self._bytes)

    def __add__(self, other) -> Wtf8Buf:
        if not isinstance(other, (Wtf8, str)):
            return NotImplemented
        result = self.to_owned()
        result += other
        return result

    # ---------------- Slicing ----------------

    def _slice_unchecked(self, begin: int, end: int) -> Wtf8:
        return Wtf8._from_bytes_unchecked(memoryview(self._bytes)[begin:end])

    def __getitem__(self, key) -> Wtf8:
        if not isinstance(key, slice):
            raise TypeError(f"{type(self).__name__} indices must be slices, not {type(key).__name__}")
        if key.step is not None:
            raise TypeError(f"{type(self).__name__} slices do not support a step")
        begin = 0 if key.start is None else key.start
        end = len(self) if key.stop is None else key.stop
        if begin <= end and self.is_code_point_boundary(begin) and self.is_code_point_boundary(end):
            return self._slice_unchecked(begin, end)
        raise slice_error_fail(self, begin, end)

    # ---------------- ASCII ----------------

    def is_ascii(self) -> bool:
        return bytes(self._bytes).isascii()

    def to_ascii_uppercase(self) -> Wtf8Buf:
        from .wtf8buf import Wtf8Buf

        # bytes.upper only touches a-z
        return Wtf8Buf._from_bytes_unchecked(bytes(self._bytes).upper())

    def to_ascii_lowercase(self) -> Wtf8Buf:
        from .wtf8buf import Wtf8Buf

        return Wtf8Buf._from_bytes_unchecked(bytes(self._bytes).lower())

    def eq_ignore_ascii_case(self, other: Wtf8) -> bool:
        return bytes(self._bytes).lower() == bytes(other._bytes).lower()

    # ---------------- Comparison ----------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Wtf8):
            return NotImplemented
        return bytes(self._bytes) == bytes(other._bytes)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Wtf8):
            return NotImplemented
        return bytes(self._bytes) < bytes(other._bytes)

    def __hash__(self) -> int:
        return hash((bytes(self._bytes), _HASH_DISCRIMINATOR))

    # ---------------- Formatting ----------------

    def __repr__(self) -> str:
        """Double quoted, with surrogates written as ``\\u{d800}``."""
        data = self._bytes
        parts = ['"']
        pos = 0
        surrogate = self._next_surrogate(pos)
        while surrogate is not None:
            surrogate_pos, value = surrogate
            parts.append(_escape_debug(str(data[pos:surrogate_pos], "utf-8")))
            parts.append(f"\\u{{{value:x}}}")
            pos = surrogate_pos + 3
            surrogate = self._next_surrogate(pos)
        parts.append(_escape_debug(str(data[pos:], "utf-8")))
        parts.append('"')
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string_lossy()
