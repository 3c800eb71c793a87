from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Tuple

from ..copy_job import CopyJobBuilder, CopySettings, Payload, publish_payloads
from ..dib.formats import DibFormat, clipboard_format_for
from ..raster.demo import make_demo_image
from ..raster.palette import NAMED_COLORS, color_by_name
from ..settings import DEFAULT_BACKGROUND, OUTPUT_ENV_VAR, default_formats, default_output_dir
from ..transport import BmpDirectorySink, ClipboardSink, Sink
from .diagnostics import emit_startup_warnings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="dibclip: copy 32-bit images to the Windows clipboard as CF_DIB / CF_DIBV5."
    )
    parser.add_argument("path", nargs="?", help="Image file to copy (default: built-in demo image)")
    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=[fmt.cli_name for fmt in DibFormat],
        help="Output format, may be repeated (default: legacy and v5-long)",
    )
    parser.add_argument("--background", default=DEFAULT_BACKGROUND, help="Named background color of the demo image")
    parser.add_argument(
        "--output",
        metavar="DIR",
        help=f"Write .bmp files to DIR instead of the clipboard (default: ${OUTPUT_ENV_VAR})",
    )
    parser.add_argument("--dry-run", action="store_true", help="Encode and report sizes without publishing")
    parser.add_argument("--list-colors", action="store_true", help="List named colors and exit")
    parser.add_argument("--list-formats", action="store_true", help="List output formats and exit")
    return parser.parse_args(argv)


def list_colors() -> int:
    for name, color in NAMED_COLORS.items():
        print(f"{name:<11} r={color.r:02X} g={color.g:02X} b={color.b:02X} a={color.a:02X}")
    return 0


def list_formats() -> int:
    for fmt in DibFormat:
        print(f"{fmt.cli_name:<9} {clipboard_format_for(fmt).name}")
    return 0


def _resolve_formats(args: argparse.Namespace) -> Tuple[DibFormat, ...]:
    if args.formats:
        return tuple(DibFormat.from_name(name) for name in args.formats)
    return default_formats()


def _resolve_output(args: argparse.Namespace) -> Optional[str]:
    if args.output:
        return args.output
    return default_output_dir()


def build_payloads(args: argparse.Namespace) -> List[Payload]:
    builder = CopyJobBuilder(CopySettings(formats=_resolve_formats(args)))
    if args.path:
        return builder.build_from_file(args.path)
    return builder.build_from_raster(make_demo_image(color_by_name(args.background)))


def make_sink(output: Optional[str]) -> Sink:
    if output:
        return BmpDirectorySink(output)
    return ClipboardSink()


def report(payloads: List[Payload]) -> None:
    for payload in payloads:
        print(f"{payload.format.cli_name}: {payload.format_id.name}, {len(payload.data)} bytes")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.list_colors:
        return list_colors()
    if args.list_formats:
        return list_formats()
    try:
        output = _resolve_output(args)
        if not args.dry_run:
            emit_startup_warnings(needs_clipboard=output is None)
        payloads = build_payloads(args)
        report(payloads)
        if args.dry_run:
            print("Dry run: nothing published.")
            return 0
        sink = make_sink(output)
        publish_payloads(sink, payloads)
        if isinstance(sink, BmpDirectorySink):
            for path in sink.paths:
                print(f"Wrote {path}")
    except Exception as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    print("Successfully copied!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
