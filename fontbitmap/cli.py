#!/usr/bin/env python3
import argparse
import sys

from fontbitmap.config import BitNumbering, ConfigError, FontMetrics, OutputFormat, SourceCodeOptions
from fontbitmap.convert import FixedWidthFontConverter
from fontbitmap.image import read_image


def build_parser():
    # -h is the font height, so help is only available as --help
    parser = argparse.ArgumentParser(
        prog="fontbitmap",
        description="Converts font bitmap to array of bytes for use in embedded systems.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-h", "--height", type=int, required=True, dest="font_height",
                        help="font height in pixels")
    parser.add_argument("-w", "--width", type=int, required=True, dest="font_width",
                        help="font width in pixels")
    parser.add_argument("-f", "--format", default=OutputFormat.C.value,
                        choices=[f.value for f in OutputFormat],
                        help="output source code format (default: %(default)s)")
    parser.add_argument("-o", "--output", dest="output_file_path",
                        help="path to the output file (stdout if not present)")
    parser.add_argument("-m", "--msb", action="store_true",
                        help="store bytes in MSB mode (default is LSB)")
    parser.add_argument("-i", "--invert-bits", action="store_true",
                        help="invert bits in output")
    parser.add_argument("input_file_path", metavar="path-to-image",
                        help="path to the input image file")
    return parser


def run(args):
    options = SourceCodeOptions(
        bit_numbering=BitNumbering.MSB if args.msb else BitNumbering.LSB,
        invert_bits=args.invert_bits,
    )
    converter = FixedWidthFontConverter(
        FontMetrics(height=args.font_height, width=args.font_width),
        OutputFormat.from_name(args.format),
        options,
    )

    image = read_image(args.input_file_path)
    print(f"Image h:{image.height()} w:{image.width()}", file=sys.stderr)

    if args.output_file_path is None:
        try:
            count = converter.convert(image, sys.stdout)
        finally:
            sys.stdout.flush()
    else:
        with open(args.output_file_path, "w", encoding="utf-8") as f:
            count = converter.convert(image, f)
        print(f"{args.output_file_path} generated! ({count} glyphs)", file=sys.stderr)
    return count


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except (ConfigError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
