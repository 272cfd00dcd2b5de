"""
Module: bingo_builder.cli

Purpose:
    Command line entry point.

    Usage:
        bingo-builder [--overlay] <image_folder> <number_of_pages> <output_pdf>

Key Functions:
    - main(): Parse arguments, run the build, return exit status
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import SheetConfig
from .controller import build_sheets
from .errors import BingoError
from .layout.config import DEFAULT_COLS, DEFAULT_ROWS, GridConfig

logger = logging.getLogger("bingo_builder")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bingo-builder",
        description="Generate printable bingo sheets from a folder of images",
    )
    parser.add_argument("image_folder", type=Path, help="Folder with one image per item")
    parser.add_argument("num_pages", type=_positive_int, help="Number of pages to generate")
    parser.add_argument("output_pdf", type=Path, help="Path of the PDF to write")
    parser.add_argument(
        "--overlay",
        action="store_true",
        help="Overlay a white square with a black border on the bottom right of each image",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible sheets")
    parser.add_argument("--workers", type=_positive_int, default=None, help="Image loading threads")
    parser.add_argument("--rows", type=_positive_int, default=DEFAULT_ROWS, help="Grid rows")
    parser.add_argument("--cols", type=_positive_int, default=DEFAULT_COLS, help="Grid columns")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_load_progress(loaded: int, total: int) -> None:
    print(f"\rLoaded and resized {loaded}/{total} images", end="", flush=True)


def _print_page_progress(page: int, total: int) -> None:
    print(f"\rGenerated page {page}/{total}", end="", flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = SheetConfig(
            image_folder=args.image_folder,
            num_pages=args.num_pages,
            output_path=args.output_pdf,
            overlay=args.overlay,
            seed=args.seed,
            max_workers=args.workers,
            grid=GridConfig(rows=args.rows, cols=args.cols),
        )
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    # Set while a \r progress line is still open on stdout
    open_line = [False]

    def end_line() -> None:
        if open_line[0]:
            print()
            open_line[0] = False

    def on_load(loaded: int, total: int) -> None:
        _print_load_progress(loaded, total)
        open_line[0] = True

    def on_page(page: int, total: int) -> None:
        if page == 1:
            end_line()
        _print_page_progress(page, total)
        if page == total:
            print()

    try:
        result = build_sheets(config, load_progress=on_load, page_progress=on_page)
    except BingoError as e:
        end_line()
        logger.error(str(e))
        return 1

    print(f"Generated {result.page_count} pages from {result.image_count} images: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
