"""Code points: integers from U+0000 to U+10FFFF, surrogates included."""

from dataclasses import dataclass
from typing import Optional

from .surrogates import MAX_CODE_POINT, is_surrogate


@dataclass(frozen=True, order=True)
class CodePoint:
    """A Unicode code point.

    Unlike a Python character produced by decoding well-formed text, a code
    point may be a surrogate (U+D800 to U+DFFF), which has no scalar value.
    """

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_CODE_POINT:
            raise ValueError(f"{self.value:#x} is not a code point")

    @classmethod
    def _unchecked(cls, value: int) -> "CodePoint":
        # callers have already proved 0 <= value <= 0x10FFFF
        code_point = cls.__new__(cls)
        object.__setattr__(code_point, "value", value)
        return code_point

    @classmethod
    def from_value(cls, value: int) -> Optional["CodePoint"]:
        """Return a code point, or ``None`` if ``value`` is out of range."""
        if 0 <= value <= MAX_CODE_POINT:
            return cls._unchecked(value)
        return None

    @classmethod
    def from_char(cls, char: str) -> "CodePoint":
        """Every character is a code point, so this always succeeds."""
        if len(char) != 1:
            raise TypeError(f"expected a single character, got {len(char)} characters")
        return cls._unchecked(ord(char))

    def is_surrogate(self) -> bool:
        return is_surrogate(self.value)

    def to_char(self) -> Optional[str]:
        """Return the scalar value as a character, or ``None`` for a surrogate."""
        if self.is_surrogate():
            return None
        return chr(self.value)

    def to_char_lossy(self) -> str:
        """Like :meth:`to_char`, with U+FFFD standing in for surrogates."""
        char = self.to_char()
        return "\uFFFD" if char is None else char

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"U+{self.value:04X}"
