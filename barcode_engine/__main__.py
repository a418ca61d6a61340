"""
CLI interface for the barcode engine.

Usage:
    python -m barcode_engine SYMBOLOGY "<data>" [options]

Options:
    --format          ascii, json, svg, png, gif, webp or pdf (default: ascii)
    --height          Barcode height (default: 10)
    --xdim            Module width (default: 1)
    --checksum        Append the optional Code39 check character
    --charset         Code128 start alphabet: A, B or C
    --output          Write to a file instead of stdout
    --verbose         Enable debug logging
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.registry import available_symbologies, encoder_for
from .errors import BarcodeError
from .formatters import (
    RenderOptions,
    generate_ascii,
    generate_json,
    generate_pdf,
    generate_svg,
    image_bytes,
)

TEXT_FORMATS = ("ascii", "json", "svg")
BINARY_FORMATS = ("png", "gif", "webp", "pdf")


def render(bits: list, fmt: str, options: RenderOptions, title: str = ""):
    """Render bits in the requested format; returns str or bytes."""
    if fmt == "ascii":
        return generate_ascii(bits, options)
    if fmt == "json":
        return generate_json(bits, options)
    if fmt == "svg":
        return generate_svg(bits, options)
    if fmt == "pdf":
        return generate_pdf(bits, options, title=title)
    return image_bytes(bits, options, fmt.upper())


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='barcode_engine',
        description='Encode data as a 1D barcode'
    )

    parser.add_argument(
        'symbology',
        choices=available_symbologies(),
        type=str.lower,
        help='Barcode symbology'
    )

    parser.add_argument(
        'data',
        help='Data to encode'
    )

    parser.add_argument(
        '--format',
        choices=TEXT_FORMATS + BINARY_FORMATS,
        default='ascii',
        help='Output format'
    )

    parser.add_argument(
        '--height',
        type=int,
        default=10,
        help='Barcode height in rows, pixels or points'
    )

    parser.add_argument(
        '--xdim',
        type=int,
        default=1,
        help='Width of a single module'
    )

    parser.add_argument(
        '--checksum',
        action='store_true',
        help='Append the optional Code39 check character'
    )

    parser.add_argument(
        '--charset',
        choices=['A', 'B', 'C'],
        type=str.upper,
        default=None,
        help='Code128 start alphabet'
    )

    parser.add_argument(
        '--output',
        default=None,
        help='Output file (required for binary formats)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if args.format in BINARY_FORMATS and not args.output:
        parser.error(f"--output is required for {args.format} output")

    options = {}
    if args.checksum:
        options['checksum'] = True
    if args.charset:
        options['character_set'] = args.charset

    try:
        barcode = encoder_for(args.symbology, args.data, **options)
        render_options = RenderOptions(height=args.height, xdim=args.xdim)
        output = render(barcode.encode(), args.format, render_options, title=args.data)
    except BarcodeError as e:
        error = e.to_dict()
        if error["input"] is None:
            error["input"] = args.data
        print(json.dumps(error, indent=2, ensure_ascii=False))
        return 1
    except ValueError as e:
        print(json.dumps({"error": str(e), "input": args.data}, indent=2, ensure_ascii=False))
        return 1

    if args.output:
        path = Path(args.output)
        if isinstance(output, bytes):
            path.write_bytes(output)
        else:
            path.write_text(output, encoding="utf-8")
        print(f"Wrote {args.format} barcode to {path}")
    else:
        print(output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
