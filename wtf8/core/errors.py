"""Exceptions raised by the WTF-8 types."""

from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from .wtf8 import Wtf8


class Wtf8Error(Exception):
    """Base class for every error raised by this package."""


class CodePointBoundaryError(Wtf8Error, IndexError):
    """A slice or truncation offset does not lie on a code point boundary."""

    def __init__(self, begin: int, end: int, debug: str) -> None:
        self.begin = begin
        self.end = end
        super().__init__(
            f"index {begin} and/or {end} in `{debug}` do not lie on character boundary"
        )


class SurrogateError(Wtf8Error, ValueError):
    """Strict UTF-8 was requested but the string holds an unpaired surrogate.

    The original content is kept on ``wtf8`` so nothing is lost.
    """

    def __init__(self, wtf8: "Wtf8", position: int, surrogate: int) -> None:
        self.wtf8 = wtf8
        self.position = position
        self.surrogate = surrogate
        super().__init__(
            f"unpaired surrogate U+{surrogate:04X} at byte {position} cannot be encoded as UTF-8"
        )


class InvalidWtf8Error(Wtf8Error, ValueError):
    """Raw bytes are not well-formed WTF-8."""

    def __init__(self, spans: List[Tuple[int, int]]) -> None:
        self.spans = spans
        start, end = spans[0]
        super().__init__(
            f"invalid WTF-8 in bytes {start}..{end} ({len(spans)} invalid span(s) in total)"
        )


class InvalidUtf16Error(Wtf8Error, ValueError):
    """Raw bytes cannot be split into UTF-16 code units."""
