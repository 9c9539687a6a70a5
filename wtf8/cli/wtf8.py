"""wtf8 CLI entrypoint."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wtf8.core import (
    ConversionOptions,
    Wtf8Error,
    read_utf16_file,
    read_wtf8_file,
    write_utf16_file,
    write_utf8_file,
    write_wtf8_file,
)

log = logging.getLogger("wtf8.cli")

LOG_FORMAT = "%(asctime)s | %(message)s"


def configure_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if args.verbose else logging.WARNING
    if args.log_file:
        log_path = Path(args.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(filename=str(log_path), level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)


def options_from_args(args: argparse.Namespace) -> ConversionOptions:
    return ConversionOptions(
        byteorder=args.byteorder,
        lossy=getattr(args, "lossy", False),
        bom=args.bom,
    )


def from_utf16(args: argparse.Namespace) -> None:
    wtf8 = read_utf16_file(Path(args.source), options_from_args(args))
    log.info("from-utf16 %s -> %s", args.source, args.destination)
    write_wtf8_file(Path(args.destination), wtf8)


def to_utf16(args: argparse.Namespace) -> None:
    wtf8 = read_wtf8_file(Path(args.source))
    log.info("to-utf16 %s -> %s", args.source, args.destination)
    write_utf16_file(Path(args.destination), wtf8, options_from_args(args))


def to_utf8(args: argparse.Namespace) -> None:
    wtf8 = read_wtf8_file(Path(args.source))
    log.info("to-utf8 %s -> %s lossy=%s", args.source, args.destination, args.lossy)
    write_utf8_file(Path(args.destination), wtf8, options_from_args(args))


def inspect(args: argparse.Namespace) -> None:
    wtf8 = read_wtf8_file(Path(args.source))
    code_points = list(wtf8.code_points())
    surrogates = sum(1 for code_point in code_points if code_point.is_surrogate())
    print(repr(wtf8))
    print(
        f"bytes={len(wtf8)} code_points={len(code_points)} "
        f"utf16_units={len(wtf8.to_wide())} surrogates={surrogates}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert between WTF-8, UTF-8 and ill-formed UTF-16")
    parser.add_argument(
        "--byteorder", choices=("little", "big"), default="little", help="UTF-16 byte order"
    )
    parser.add_argument(
        "--bom",
        action="store_true",
        help="Write, and strip when reading, a UTF-16 byte order mark matching --byteorder",
    )
    parser.add_argument("--log-file", default="", help="Write log output to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages")
    subparsers = parser.add_subparsers(dest="command", required=True)

    from_parser = subparsers.add_parser("from-utf16", help="Convert a UTF-16 file to WTF-8")
    from_parser.add_argument("source", help="Path to the UTF-16 input")
    from_parser.add_argument("destination", help="Path for the WTF-8 output")
    from_parser.set_defaults(func=from_utf16)

    to_utf16_parser = subparsers.add_parser("to-utf16", help="Convert a WTF-8 file to UTF-16")
    to_utf16_parser.add_argument("source", help="Path to the WTF-8 input")
    to_utf16_parser.add_argument("destination", help="Path for the UTF-16 output")
    to_utf16_parser.set_defaults(func=to_utf16)

    to_utf8_parser = subparsers.add_parser("to-utf8", help="Convert a WTF-8 file to UTF-8")
    to_utf8_parser.add_argument("source", help="Path to the WTF-8 input")
    to_utf8_parser.add_argument("destination", help="Path for the UTF-8 output")
    to_utf8_parser.add_argument(
        "--lossy", action="store_true", help="Replace unpaired surrogates with U+FFFD"
    )
    to_utf8_parser.set_defaults(func=to_utf8)

    inspect_parser = subparsers.add_parser("inspect", help="Describe the contents of a WTF-8 file")
    inspect_parser.add_argument("source", help="Path to the WTF-8 input")
    inspect_parser.set_defaults(func=inspect)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args)
    try:
        args.func(args)
    except (Wtf8Error, FileNotFoundError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
