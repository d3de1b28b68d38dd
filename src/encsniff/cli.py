"""Command-line interface for encsniff."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import encsniff
from encsniff.archive import detect_archive_entry_names
from encsniff.enums import Encoding
from encsniff.stream import detect_range, detect_stream


def _format(encoding: Encoding, *, codec: bool) -> str:
    if codec:
        return str(encoding.codec_name)
    return str(encoding)


def _report(label: str, encoding: Encoding, args: argparse.Namespace) -> None:
    name = _format(encoding, codec=args.codec)
    if args.minimal:
        print(name)
    else:
        print(f"{label}: {name}")


def _detect_path(path: str, args: argparse.Namespace) -> Encoding:
    if args.archive:
        return detect_archive_entry_names(Path(path).read_bytes())
    with Path(path).open("rb") as f:
        return detect_range(f, args.offset, args.length)


def _detect_stdin(args: argparse.Namespace) -> Encoding:
    if args.archive:
        return detect_archive_entry_names(sys.stdin.buffer.read())
    if args.offset or args.length is not None:
        data = sys.stdin.buffer.read()
        end = None if args.length is None else args.offset + args.length
        data = data[args.offset : end]
        if not data:
            return Encoding.UNKNOWN
        return encsniff.detect(data)
    return detect_stream(sys.stdin.buffer)


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        msg = f"must be non-negative: {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def main(argv: list[str] | None = None) -> None:
    """Run the ``encsniff`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect whether text is UTF-8, CP932 or CP949."
    )
    parser.add_argument("files", nargs="*", help="Files to detect encoding of")
    parser.add_argument(
        "--archive",
        action="store_true",
        help="Treat inputs as ZIP/TAR archives and examine their entry names",
    )
    parser.add_argument(
        "--offset", type=_non_negative, default=0, help="First byte to examine"
    )
    parser.add_argument(
        "--length",
        type=_non_negative,
        default=None,
        help="Number of bytes to examine (default: to end of input)",
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "--codec",
        action="store_true",
        help="Output the Python codec name instead of the display name",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log detection details"
    )
    parser.add_argument(
        "--version", action="version", version=f"encsniff {encsniff.__version__}"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.files:
        _report("stdin", _detect_stdin(args), args)
        return

    failed = False
    for filepath in args.files:
        try:
            encoding = _detect_path(filepath, args)
        except OSError as e:
            print(f"encsniff: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        _report(filepath, encoding, args)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
