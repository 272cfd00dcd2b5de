"""
Module: bingo_builder.layout.composer

Purpose:
    Compose bingo pages from a loaded ImageSet. Each page draws a fresh
    permutation of the set and fills the grid from it using a
    page-and-position index that wraps around the set size.

Key Functions:
    - cell_index(): Image index for a (page, row, col) cell
    - cell_origin(): Top-left mm coordinate of a cell
    - compose_page(): Build one PagePlan from an image order
    - compose_sheets(): Build all pages

Dependencies:
    - random (std): Per-page permutations

Used By:
    - bingo_builder.controller: Compose stage
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional, Sequence, Tuple

from bingo_builder.images.models import ImageAsset, ImageSet

from .config import GridConfig
from .models import CellPlacement, LayoutResult, PagePlan

logger = logging.getLogger(__name__)


def cell_index(page: int, row: int, col: int, rows: int, cols: int, count: int) -> int:
    """
    Calculate which image fills a cell.

    The flat position of the cell across all pages is wrapped around the
    image count, so small sets repeat within a page.

    Args:
        page: Page index (0-indexed)
        row: Grid row
        col: Grid column
        rows: Rows per page
        cols: Columns per page
        count: Number of images available

    Returns:
        Index in [0, count)

    Example:
        >>> cell_index(1, 0, 2, 5, 5, 3)
        0
    """
    return (page * rows * cols + row * cols + col) % count


def cell_origin(row: int, col: int, grid: GridConfig) -> Tuple[float, float]:
    """
    Calculate the top-left corner of a cell in mm.

    Args:
        row: Grid row
        col: Grid column
        grid: Grid configuration

    Returns:
        (x, y) in mm from the page's top-left corner
    """
    pitch = grid.cell_size + grid.spacing
    return grid.margin_left + col * pitch, grid.margin_top + row * pitch


def compose_page(
    order: Sequence[ImageAsset],
    page_index: int,
    grid: GridConfig,
) -> PagePlan:
    """
    Lay out one page from an image order.

    Args:
        order: Images for this page, already permuted
        page_index: Page number (0-indexed)
        grid: Grid configuration

    Returns:
        PagePlan with rows * cols placements in row-major order
    """
    count = len(order)
    size = grid.cell_size
    placements = []

    for row in range(grid.rows):
        for col in range(grid.cols):
            x, y = cell_origin(row, col, grid)
            idx = cell_index(page_index, row, col, grid.rows, grid.cols, count)
            placements.append(CellPlacement(order[idx], row, col, x, y, size))

    return PagePlan(index=page_index, placements=tuple(placements))


def compose_sheets(
    images: ImageSet,
    num_pages: int,
    grid: GridConfig,
    *,
    rng: Optional[random.Random] = None,
    progress: Optional[Callable[[int, int], None]] = None,
) -> LayoutResult:
    """
    Compose all bingo pages.

    The ImageSet is left untouched; every page gets its own
    permutation drawn from rng.

    Args:
        images: Loaded images
        num_pages: Number of pages to generate
        grid: Grid configuration
        rng: Random source (default: unseeded Random)
        progress: Called with (page, total) after each page, 1-indexed

    Returns:
        LayoutResult with num_pages pages

    Raises:
        ValueError: If num_pages is negative
    """
    if num_pages < 0:
        raise ValueError(f"num_pages must be non-negative: {num_pages}")

    rng = rng or random.Random()

    if len(images) < grid.cells_per_page:
        logger.info(
            f"{len(images)} images for {grid.cells_per_page} cells, "
            "images will repeat within a page"
        )

    pages = []
    for i in range(num_pages):
        order = images.permuted(rng)
        pages.append(compose_page(order, i, grid))
        if progress is not None:
            progress(i + 1, num_pages)

    logger.debug(f"Composed {num_pages} pages of {grid.rows}x{grid.cols}")
    return LayoutResult(pages=tuple(pages))
