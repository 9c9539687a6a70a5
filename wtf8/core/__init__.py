"""Core modules for WTF-8 strings."""

from .codepoint import CodePoint  # noqa: F401
from .errors import (  # noqa: F401
    CodePointBoundaryError,
    InvalidUtf16Error,
    InvalidWtf8Error,
    SurrogateError,
    Wtf8Error,
)
from .files import (  # noqa: F401
    ConversionOptions,
    read_utf16_file,
    read_wtf8_file,
    units_from_bytes,
    units_to_bytes,
    write_utf16_file,
    write_utf8_file,
    write_wtf8_file,
)
from .iterators import EncodeWide, Wtf8CodePoints, decode_utf16  # noqa: F401
from .validate import find_invalid_spans, is_well_formed  # noqa: F401
from .wtf8 import Wtf8, is_code_point_boundary  # noqa: F401
from .wtf8buf import Wtf8Buf  # noqa: F401
