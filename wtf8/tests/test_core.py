"""Basic tests for the code point, surrogate, iterator and validation modules."""

import copy

import pytest

from wtf8.core import CodePoint, Wtf8, decode_utf16, find_invalid_spans, is_well_formed
from wtf8.core.iterators import next_code_point
from wtf8.core.surrogates import (
    decode_surrogate,
    decode_surrogate_pair,
    encode_code_point,
    encode_surrogate,
    is_lead_surrogate,
    is_trail_surrogate,
)


def test_code_point_from_value_range():
    assert CodePoint.from_value(0).value == 0
    assert CodePoint.from_value(0x10FFFF).value == 0x10FFFF
    assert CodePoint.from_value(0xD800).value == 0xD800
    assert CodePoint.from_value(0x110000) is None
    assert CodePoint.from_value(-1) is None


def test_code_point_from_char_round_trips():
    for char in ("a", "\u00e9", "\uffff", "\U0001F4A9", "\U0010FFFF"):
        assert CodePoint.from_char(char).to_char() == char


def test_code_point_surrogate_has_no_char():
    surrogate = CodePoint.from_value(0xDC00)
    assert surrogate.is_surrogate()
    assert surrogate.to_char() is None
    assert surrogate.to_char_lossy() == "\uFFFD"
    assert CodePoint.from_char("a").to_char_lossy() == "a"


def test_code_point_repr():
    assert repr(CodePoint.from_char("a")) == "U+0061"
    assert repr(CodePoint.from_value(0x1F4A9)) == "U+1F4A9"
    assert repr(CodePoint.from_value(0x10FFFF)) == "U+10FFFF"


def test_code_point_ordering_and_int():
    assert CodePoint.from_value(0x61) < CodePoint.from_value(0x62)
    assert int(CodePoint.from_value(0xD800)) == 0xD800
    assert len({CodePoint.from_value(1), CodePoint.from_value(1)}) == 1


def test_encode_surrogate():
    assert encode_surrogate(0xD800) == b"\xed\xa0\x80"
    assert encode_surrogate(0xDFFF) == b"\xed\xbf\xbf"
    assert encode_code_point(0xDBFF) == encode_surrogate(0xDBFF)
    with pytest.raises(ValueError):
        encode_surrogate(0x61)


def test_decode_surrogate():
    assert decode_surrogate(0xA0, 0x80) == 0xD800
    assert decode_surrogate(0xBF, 0xBF) == 0xDFFF
    assert is_lead_surrogate(decode_surrogate(0xAF, 0xBF))
    assert is_trail_surrogate(decode_surrogate(0xB0, 0x80))


def test_decode_surrogate_pair():
    assert decode_surrogate_pair(0xD800, 0xDC00) == 0x10000
    assert decode_surrogate_pair(0xD83D, 0xDCA9) == 0x1F4A9
    assert decode_surrogate_pair(0xDBFF, 0xDFFF) == 0x10FFFF


def test_next_code_point_decodes_surrogates():
    assert next_code_point(b"\xed\xa0\x80", 0) == (0xD800, 3)
    assert next_code_point(b"a\xc3\xa9", 1) == (0xE9, 3)
    assert next_code_point(b"\xf0\x9f\x92\xa9", 0) == (0x1F4A9, 4)


def test_code_points_size_hint():
    code_points = Wtf8("aaaaa").code_points()
    assert code_points.size_hint() == (2, 5)
    next(code_points)
    assert code_points.size_hint() == (1, 4)
    assert Wtf8("").code_points().size_hint() == (0, 0)


def test_code_points_copy_is_independent():
    code_points = Wtf8("abc").code_points()
    next(code_points)
    clone = copy.copy(code_points)
    assert [cp.value for cp in code_points] == [0x62, 0x63]
    assert [cp.value for cp in clone] == [0x62, 0x63]


def test_encode_wide_splits_supplementary():
    units = Wtf8("\U0001F4A9").encode_wide()
    assert units.size_hint() == (1, 8)
    assert next(units) == 0xD83D
    assert units.size_hint() == (1, 1)
    assert list(units) == [0xDCA9]


def test_encode_wide_copy_keeps_pending_unit():
    units = Wtf8("\U0001F4A9a").encode_wide()
    next(units)
    clone = copy.copy(units)
    assert list(units) == [0xDCA9, 0x61]
    assert list(clone) == [0xDCA9, 0x61]


def test_decode_utf16_flags_unpaired_surrogates():
    steps = list(decode_utf16([0x61, 0xD800, 0xD83D, 0xDCA9, 0xDC00]))
    assert steps == [(0x61, True), (0xD800, False), (0x1F4A9, True), (0xDC00, False)]
    assert list(decode_utf16([0xD800, 0xD800])) == [(0xD800, False), (0xD800, False)]


def test_decode_utf16_rejects_wide_units():
    with pytest.raises(ValueError):
        list(decode_utf16([0x10000]))


@pytest.mark.parametrize(
    "data",
    [b"", b"abc", "\u00e9\U0001F4A9".encode("utf-8"), b"\xed\xa0\x80", b"\xed\xb0\x80\xed\xa0\x80", b"\xef\xbf\xbe"],
)
def test_well_formed(data):
    assert find_invalid_spans(data) == []
    assert is_well_formed(data)


@pytest.mark.parametrize(
    "data, spans",
    [
        (b"\xed\xa0\xbd\xed\xb2\xa9", [(0, 6)]),
        (b"\xc0\xaf", [(0, 1), (1, 2)]),
        (b"\xe0\x80\xaf", [(0, 3)]),
        (b"\xf0\x80\x80\xaf", [(0, 4)]),
        (b"\xf4\x90\x80\x80", [(0, 4)]),
        (b"a\x80b", [(1, 2)]),
        (b"\xe2\x82", [(0, 2)]),
        (b"\xe2a", [(0, 1)]),
        (b"\xff", [(0, 1)]),
    ],
)
def test_invalid_spans(data, spans):
    assert find_invalid_spans(data) == spans
    assert not is_well_formed(data)


def test_code_point_constructor_validates():
    assert CodePoint(0x61) == CodePoint.from_char("a")
    with pytest.raises(ValueError):
        CodePoint(0x110000)
