"""
Allow running the package directly: python -m mandelbrot_explorer
"""

import argparse
import logging
from dataclasses import replace

from . import settings
from .colormaps import list_colormap_names
from .compute import list_evaluator_names
from .viewport import Viewport


def build_parser():
    parser = argparse.ArgumentParser(
        description="Interactive escape-time fractal explorer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--settings",
        help="JSON settings file to use instead of the bundled settings.json",
    )
    parser.add_argument("--width", type=int, help="window width in pixels")
    parser.add_argument("--height", type=int, help="window height in pixels")
    parser.add_argument(
        "--function",
        choices=list_evaluator_names(),
        help="escape-time evaluator",
    )
    parser.add_argument(
        "--color-mode",
        choices=list_colormap_names(),
        help="how escape indices are colored",
    )
    parser.add_argument("--sharpness", type=int, help="starting iteration budget")
    parser.add_argument("--threads", type=int, help="render worker threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.settings:
        settings.apply_settings(settings.load_settings(args.settings))
    initial = Viewport.default()
    if args.sharpness is not None:
        initial = replace(initial, sharpness=args.sharpness)

    threads = settings.THREADS
    if args.threads is not None:
        threads = settings.check_threads(args.threads)

    # Imported here so --help works without a display.
    from .app import run
    run(
        width=args.width or settings.WIDTH,
        height=args.height or settings.HEIGHT,
        function=args.function or settings.FUNCTION,
        color_mode=args.color_mode or settings.COLOR_MODE,
        initial=initial,
        threads=threads,
    )


if __name__ == "__main__":
    main()
