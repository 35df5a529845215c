"""palette-check: Mark every picture pixel whose colour is not in a palette image.

Usage: palette-check <palette-file> <picture-file> <marking-color> <output-file> [options]

The palette image's distinct pixel colours are the allowed set. Every pixel
of the picture that does not exactly match one of them (alpha included) is
replaced with the marking colour, and the result is written as a PNG.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, palette-check looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from palette_checker.core import image_io, pixel_filter
from palette_checker.core.colour import parse_colour
from palette_checker.core.colour_set import ColourSet
from palette_checker.core.env import FLIP_VAR, env_flag, load_env, output_format
from palette_checker.core.errors import PaletteCheckError, UsageError
from palette_checker.core.report import format_json, format_text
from palette_checker.core.types import FilterReport

PROG = 'palette-check'


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        f'  {PROG} palette.png sprite.png FF00FF marked.png\n'
        f'  {PROG} palette.png sprite.png "#00ff0080" marked.png --json\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  PALETTE_CHECK_FORMAT=json  same as --json\n'
        '  PALETTE_CHECK_FLIP=1       same as --flip\n'
    )
    parser = _ArgumentParser(
        prog=PROG,
        description='Replace picture pixels whose colour is not in the palette image with a marking colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('palette', help='Palette image; its pixel colours are the allowed set')
    parser.add_argument('picture', help='Picture image to check')
    parser.add_argument('colour', metavar='marking-color', help='Marking colour as RRGGBB or RRGGBBAA hex')
    parser.add_argument('output', help='Output PNG path')
    parser.add_argument('-j', '--json', action='store_true', help='Print the summary as JSON instead of text')
    parser.add_argument(
        '--flip',
        action='store_true',
        help='Flip rows vertically on load and save (default: off, or PALETTE_CHECK_FLIP)',
    )
    return parser


def run(palette_path: str, picture_path: str, colour: str, output_path: str, flip: bool = False) -> FilterReport:
    """Load, filter and save. Raises PaletteCheckError subclasses; nothing is written on failure."""
    marking = parse_colour(colour)

    palette = image_io.load_palette(palette_path, flip=flip)
    colour_set = ColourSet.build(palette)
    # Only the set is needed from here on
    del palette

    picture = image_io.load_picture(picture_path, flip=flip)
    height, width = picture.shape[:2]
    foreign = pixel_filter.foreign_colours(picture, colour_set)
    replaced = pixel_filter.apply(picture, colour_set, marking)

    image_io.save_png(output_path, picture, flip=flip)

    return FilterReport(
        palette_path=palette_path,
        picture_path=picture_path,
        output_path=output_path,
        width=width,
        height=height,
        palette_colours=len(colour_set),
        marking=marking.hex,
        replaced=replaced,
        foreign_colours=[c.hex for c in foreign],
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f'{PROG}: error: {e}', file=sys.stderr)
        sys.exit(e.exit_code)

    # Settings below read the environment, so .env goes first
    try:
        env_path = load_env(env_file=args.env_file)
    except UsageError as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        sys.exit(e.exit_code)
    if env_path:
        print(f'{PROG}: loaded {env_path}', file=sys.stderr)

    flip = args.flip or env_flag(FLIP_VAR)
    as_json = args.json or output_format() == 'json'

    try:
        report = run(args.palette, args.picture, args.colour, args.output, flip=flip)
    except PaletteCheckError as e:
        print(f'{PROG}: error: {e}', file=sys.stderr)
        sys.exit(e.exit_code)

    if as_json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
