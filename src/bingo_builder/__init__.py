"""
Module: bingo_builder

Purpose:
    Printable bingo sheet generator. Loads a folder of item images,
    lays a shuffled grid of them onto each page and renders the
    result to a multi-page PDF.

Key Functions:
    - build_sheets(): Main entry point (Load → Compose → Render)

Key Classes:
    - SheetConfig: Run configuration
    - GridConfig: Grid geometry
    - SheetResult: Build result

Dependencies:
    - PIL: Image decoding and resizing
    - reportlab: PDF generation

Used By:
    - bingo_builder.cli: Command line entry point
"""


def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("bingo-builder")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .errors import BingoError
from .config import SheetConfig
from .layout.config import GridConfig
from .controller import build_sheets, SheetResult

__all__ = [
    "__version__",
    "BingoError",
    "SheetConfig",
    "GridConfig",
    "build_sheets",
    "SheetResult",
]
