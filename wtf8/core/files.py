"""Reading and writing WTF-8 strings as UTF-16, WTF-8 and UTF-8 files."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Literal

from .errors import InvalidUtf16Error
from .wtf8 import Wtf8
from .wtf8buf import Wtf8Buf

log = logging.getLogger(__name__)

ByteOrder = Literal["little", "big"]

BYTE_ORDER_MARK = 0xFEFF
SWAPPED_BYTE_ORDER_MARK = 0xFFFE

_STRUCT_PREFIX = {"little": "<", "big": ">"}


@dataclass
class ConversionOptions:
    """How UTF-16 files are laid out and how surrogates are written as UTF-8."""

    byteorder: ByteOrder = "little"
    lossy: bool = False
    bom: bool = False

    def __post_init__(self) -> None:
        if self.byteorder not in _STRUCT_PREFIX:
            raise ValueError(f"byteorder must be 'little' or 'big', not {self.byteorder!r}")


def units_from_bytes(data: bytes, byteorder: ByteOrder = "little") -> List[int]:
    """Split raw UTF-16 bytes into 16-bit code units."""
    if len(data) % 2:
        raise InvalidUtf16Error(f"Incomplete encoding: {len(data)} bytes is not a whole number of code units")
    return list(struct.unpack(f"{_STRUCT_PREFIX[byteorder]}{len(data) // 2}H", data))


def units_to_bytes(units: Iterable[int], byteorder: ByteOrder = "little") -> bytes:
    units = list(units)
    return struct.pack(f"{_STRUCT_PREFIX[byteorder]}{len(units)}H", *units)


def _read_input(path: Path) -> bytes:
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    return path.read_bytes()


def _write_output(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    log.info("Wrote %d bytes to %s", len(data), path)


def read_utf16_file(path: Path, options: ConversionOptions) -> Wtf8Buf:
    """Read a potentially ill-formed UTF-16 file without losing anything."""
    units = units_from_bytes(_read_input(path), options.byteorder)
    if options.bom and units and units[0] == SWAPPED_BYTE_ORDER_MARK:
        raise InvalidUtf16Error(f"Byte order mark in {path} does not match byteorder={options.byteorder!r}")
    if options.bom and units and units[0] == BYTE_ORDER_MARK:
        units = units[1:]
    return Wtf8Buf.from_wide(units)


def write_utf16_file(path: Path, wtf8: Wtf8, options: ConversionOptions) -> None:
    units = wtf8.to_wide()
    if options.bom:
        units.insert(0, BYTE_ORDER_MARK)
    _write_output(path, units_to_bytes(units, options.byteorder))


def read_wtf8_file(path: Path) -> Wtf8Buf:
    """Read a WTF-8 file, raising ``InvalidWtf8Error`` if it is ill-formed."""
    return Wtf8Buf.from_bytes(_read_input(path))


def write_wtf8_file(path: Path, wtf8: Wtf8) -> None:
    _write_output(path, wtf8.as_bytes())


def write_utf8_file(path: Path, wtf8: Wtf8, options: ConversionOptions) -> None:
    """Write UTF-8, raising ``SurrogateError`` unless ``options.lossy`` is set."""
    buf = Wtf8Buf.from_wtf8(wtf8)
    text = buf.into_string_lossy() if options.lossy else buf.into_string()
    _write_output(path, text.encode("utf-8"))
