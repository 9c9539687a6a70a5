"""Well-formedness checks for raw WTF-8 bytes."""

import logging
from typing import List, Tuple

log = logging.getLogger(__name__)

Span = Tuple[int, int]


def find_invalid_spans(data) -> List[Span]:
    """Return the ``(start, end)`` byte spans that are not well-formed WTF-8.

    WTF-8 follows the RFC 3629 lead byte rules (no overlongs, nothing above
    U+10FFFF) except that a surrogate may appear on its own as ``ED A0..BF xx``.
    A lead surrogate directly followed by a trail surrogate is rejected: that
    pair must be written as one supplementary code point.
    Noncharacters are fine.
    """
    spans: List[Span] = []
    pos = 0
    n = len(data)

    while pos < n:
        b0 = data[pos]

        # ASCII fast path
        if b0 <= 0x7F:
            pos += 1
            continue

        # Lone continuation bytes, and C0/C1 which can only start overlongs
        if b0 <= 0xC1:
            spans.append((pos, pos + 1))
            pos += 1
            continue

        # 0xF5..0xFF are invalid lead bytes
        if b0 >= 0xF5:
            spans.append((pos, pos + 1))
            pos += 1
            continue

        if b0 <= 0xDF:
            width = 2
        elif b0 <= 0xEF:
            width = 3
        else:
            width = 4

        if pos + width > n:
            # truncated tail: one span up to the end
            if all(0x80 <= b <= 0xBF for b in data[pos + 1:n]):
                spans.append((pos, n))
                break
        followers = data[pos + 1:pos + width]
        if len(followers) < width - 1 or not all(0x80 <= b <= 0xBF for b in followers):
            # invalid follower: minimal advance
            spans.append((pos, pos + 1))
            pos += 1
            continue

        b1 = followers[0]
        if (b0 == 0xE0 and b1 < 0xA0) or (b0 == 0xF0 and b1 < 0x90):
            # overlong
            spans.append((pos, pos + width))
        elif b0 == 0xF4 and b1 > 0x8F:
            # beyond U+10FFFF
            spans.append((pos, pos + width))
        elif b0 == 0xED and 0xA0 <= b1 <= 0xAF and _starts_with_trail_surrogate(data, pos + 3):
            # paired surrogates
            spans.append((pos, pos + 6))
            pos += 6
            continue
        pos += width

    if spans:
        log.debug("Found %d invalid WTF-8 span(s), first at %d..%d", len(spans), *spans[0])
    return spans


def _starts_with_trail_surrogate(data, pos: int) -> bool:
    return (
        pos + 3 <= len(data)
        and data[pos] == 0xED
        and 0xB0 <= data[pos + 1] <= 0xBF
        and 0x80 <= data[pos + 2] <= 0xBF
    )


def is_well_formed(data) -> bool:
    return not find_invalid_spans(data)
