import pytest

from wtf8.core import (
    CodePointBoundaryError,
    InvalidWtf8Error,
    Wtf8,
    Wtf8Buf,
    is_code_point_boundary,
)

LONE_LEAD = b"\xed\xa0\x80"  # U+D800
LONE_TRAIL = b"\xed\xb0\x80"  # U+DC00


def wtf8(data: bytes) -> Wtf8:
    return Wtf8.from_bytes(data)


def test_from_str_is_utf8():
    view = Wtf8("aé\U0001F4A9")
    assert bytes(view) == "aé\U0001F4A9".encode("utf-8")
    assert len(view) == 7
    assert not view.is_empty()
    assert Wtf8().is_empty()
    assert Wtf8.from_str("abc") == Wtf8("abc")


def test_from_bytes_rejects_ill_formed():
    with pytest.raises(InvalidWtf8Error) as excinfo:
        Wtf8.from_bytes(b"a\xed\xa0\xbd\xed\xb2\xa9")
    assert excinfo.value.spans == [(1, 7)]
    assert isinstance(excinfo.value, ValueError)


def test_code_points():
    values = [cp.value for cp in wtf8(b"a\xc3\xa9" + LONE_LEAD + b"\xf0\x9f\x92\xa9").code_points()]
    assert values == [0x61, 0xE9, 0xD800, 0x1F4A9]


def test_code_points_restart():
    view = Wtf8("ab")
    assert list(view.code_points()) == list(view.code_points())


def test_as_str():
    assert Wtf8("aé").as_str() == "aé"
    assert wtf8(b"a" + LONE_LEAD).as_str() is None


def test_to_string_lossy():
    assert Wtf8("abc").to_string_lossy() == "abc"
    assert wtf8(b"a" + LONE_LEAD + b"b").to_string_lossy() == "a\uFFFDb"
    assert wtf8(LONE_TRAIL + b"x" + LONE_LEAD).to_string_lossy() == "\uFFFDx\uFFFD"


def test_lossy_replaces_only_the_surrogate():
    view = wtf8(b"\xc3\xa9" + LONE_LEAD + b"z")
    assert view.to_string_lossy().encode("utf-8") == b"\xc3\xa9\xef\xbf\xbdz"


def test_as_python_str_keeps_surrogates():
    assert wtf8(b"a" + LONE_LEAD).as_python_str() == "a\ud800"


def test_encode_wide():
    assert wtf8(b"a" + LONE_LEAD).to_wide() == [0x61, 0xD800]
    assert Wtf8("a\U0001F4A9").to_wide() == [0x61, 0xD83D, 0xDCA9]


def test_repr_escapes_surrogates():
    assert repr(wtf8(b"a" + LONE_LEAD)) == '"a\\u{d800}"'
    assert repr(wtf8(LONE_TRAIL + LONE_LEAD)) == '"\\u{dc00}\\u{d800}"'


def test_repr_escapes_controls_and_quotes():
    assert repr(Wtf8('a\tb"c\n')) == '"a\\tb\\"c\\n"'
    assert repr(Wtf8("\x00")) == '"\\u{0}"'
    assert repr(Wtf8("é")) == '"é"'


def test_str_replaces_surrogates():
    assert str(wtf8(b"a" + LONE_LEAD)) == "a\uFFFD"
    assert str(Wtf8("plain")) == "plain"


def test_ascii_byte_at():
    view = Wtf8("aé")
    assert view.ascii_byte_at(0) == 0x61
    assert view.ascii_byte_at(1) == 0xFF
    assert view.ascii_byte_at(2) == 0xFF
    with pytest.raises(IndexError):
        view.ascii_byte_at(3)


def test_slicing():
    view = Wtf8("aé\U0001F4A9")
    assert view[1:3] == Wtf8("é")
    assert view[3:] == Wtf8("\U0001F4A9")
    assert view[:1] == Wtf8("a")
    assert view[:] == view
    assert view[7:] == Wtf8()


def test_slicing_does_not_copy():
    data = "aé".encode("utf-8")
    view = Wtf8.from_bytes(data)
    piece = view[1:]
    assert isinstance(piece._bytes, memoryview)
    assert piece._bytes.obj is view._bytes


@pytest.mark.parametrize("begin, end", [(0, 2), (2, 3), (3, 1), (0, 8), (-1, 3)])
def test_slicing_off_boundary_fails(begin, end):
    view = Wtf8("aé\U0001F4A9")
    with pytest.raises(CodePointBoundaryError) as excinfo:
        view[begin:end]
    assert isinstance(excinfo.value, IndexError)
    assert f"index {begin} and/or {end}" in str(excinfo.value)
    assert '"aé\U0001F4A9"' in str(excinfo.value)


def test_slicing_inside_two_byte_sequence_fails():
    with pytest.raises(CodePointBoundaryError):
        Wtf8("é")[:1]


def test_slicing_requires_plain_slices():
    view = Wtf8("abc")
    with pytest.raises(TypeError):
        view[1]
    with pytest.raises(TypeError):
        view[::2]


def test_every_boundary_pair_slices():
    view = wtf8(b"a\xc3\xa9" + LONE_LEAD + b"\xf0\x9f\x92\xa9" + LONE_TRAIL)
    assert view.is_code_point_boundary(0)
    assert is_code_point_boundary(view, len(view))
    assert not view.is_code_point_boundary(len(view) + 1)
    boundaries = [i for i in range(len(view) + 1) if view.is_code_point_boundary(i)]
    assert boundaries == [0, 1, 3, 6, 10, 13]
    for begin in boundaries:
        for end in boundaries:
            if begin <= end:
                assert len(view[begin:end]) == end - begin


def test_ascii_case():
    view = wtf8(b"aB" + LONE_LEAD + b"\xc3\xa9")
    assert not view.is_ascii()
    assert Wtf8("aB").is_ascii()
    upper = view.to_ascii_uppercase()
    assert isinstance(upper, Wtf8Buf)
    assert bytes(upper) == b"AB" + LONE_LEAD + b"\xc3\xa9"
    assert bytes(view.to_ascii_lowercase()) == b"ab" + LONE_LEAD + b"\xc3\xa9"
    assert Wtf8("HeLLo").eq_ignore_ascii_case(Wtf8("hello"))
    assert not Wtf8("é").eq_ignore_ascii_case(Wtf8("É"))


def test_equality_and_ordering():
    assert Wtf8("a") == Wtf8Buf.from_str("a")
    assert Wtf8("a") != Wtf8("b")
    assert Wtf8("a") < Wtf8("b") <= Wtf8("b")
    assert Wtf8("ab") > Wtf8("a")
    assert Wtf8("a") != "a"


def test_hash_pairs_discriminator():
    assert hash(Wtf8("abc")) == hash((b"abc", 0xFE))
    assert Wtf8("abc") != b"abc\xfe"
    assert hash(Wtf8("abc")) == hash(Wtf8("abcd")[:3])
    assert len({Wtf8("a"), Wtf8("a"), Wtf8("b")}) == 2


def test_add_pairs_surrogates():
    joined = wtf8(b"\xed\xa0\xbd") + wtf8(b"\xed\xb2\xa9")
    assert isinstance(joined, Wtf8Buf)
    assert joined == Wtf8("\U0001F4A9")
    assert Wtf8("a") + "b" == Wtf8("ab")


def test_to_owned_copies():
    view = Wtf8("abc")
    owned = view.to_owned()
    owned.push_str("d")
    assert view == Wtf8("abc")
    assert owned == Wtf8("abcd")
