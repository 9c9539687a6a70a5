"""Surrogate codec: the 3-byte WTF-8 form of a surrogate and pair combination."""

LEAD_SURROGATE_MIN = 0xD800
LEAD_SURROGATE_MAX = 0xDBFF
TRAIL_SURROGATE_MIN = 0xDC00
TRAIL_SURROGATE_MAX = 0xDFFF
MAX_CODE_POINT = 0x10FFFF

REPLACEMENT_CHARACTER_UTF8 = b"\xef\xbf\xbd"


def is_surrogate(value: int) -> bool:
    return LEAD_SURROGATE_MIN <= value <= TRAIL_SURROGATE_MAX


def is_lead_surrogate(value: int) -> bool:
    return LEAD_SURROGATE_MIN <= value <= LEAD_SURROGATE_MAX


def is_trail_surrogate(value: int) -> bool:
    return TRAIL_SURROGATE_MIN <= value <= TRAIL_SURROGATE_MAX


def encode_surrogate(surrogate: int) -> bytes:
    """Return the 3 bytes encoding ``surrogate``, laid out like 3-byte UTF-8."""
    if not is_surrogate(surrogate):
        raise ValueError(f"U+{surrogate:04X} is not a surrogate")
    return bytes(
        (
            0xE0 | (surrogate >> 12),
            0x80 | ((surrogate >> 6) & 0x3F),
            0x80 | (surrogate & 0x3F),
        )
    )


def decode_surrogate(second_byte: int, third_byte: int) -> int:
    """Decode the two continuation bytes following an ``0xED`` lead byte."""
    return 0xD800 | (second_byte & 0x3F) << 6 | third_byte & 0x3F


def decode_surrogate_pair(lead: int, trail: int) -> int:
    """Combine a lead and a trail surrogate into a supplementary code point."""
    return 0x10000 + ((lead - 0xD800) << 10 | (trail - 0xDC00))


def encode_code_point(value: int) -> bytes:
    """Generalized UTF-8: like UTF-8 but surrogates get their own 3 bytes."""
    # surrogatepass emits exactly the ED A0..BF xx form for lone surrogates
    return chr(value).encode("utf-8", "surrogatepass")
