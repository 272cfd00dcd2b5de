"""
Module: bingo_builder.controller

Purpose:
    Orchestrate the complete bingo sheet pipeline.
    Load → Compose → Render

Key Functions:
    - build_sheets(): Main entry point for building sheets

Key Classes:
    - SheetResult: Complete build result

Dependencies:
    - bingo_builder.images: Image loading
    - bingo_builder.layout: Page composition
    - bingo_builder.output: PDF rendering

Used By:
    - bingo_builder.cli: Command line entry point
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import SheetConfig
from .images import load_images
from .layout import compose_sheets
from .output import render_to_pdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SheetResult:
    """
    Complete build result (immutable).

    Attributes:
        output_path: Path to generated PDF
        page_count: Number of pages generated
        image_count: Number of images loaded
        placements: Total cells filled across all pages
        elapsed: Wall time in seconds
    """
    output_path: Path
    page_count: int
    image_count: int
    placements: int
    elapsed: float


def build_sheets(
    config: SheetConfig,
    *,
    load_progress: Optional[Callable[[int, int], None]] = None,
    page_progress: Optional[Callable[[int, int], None]] = None,
) -> SheetResult:
    """
    Build bingo sheets from start to finish.

    Pipeline:
    1. Load and resize images from the folder
    2. Compose num_pages shuffled grids
    3. Render to PDF

    Args:
        config: Build configuration
        load_progress: Called with (loaded, total) while loading
        page_progress: Called with (page, total) while composing

    Returns:
        SheetResult with path and counts

    Raises:
        DirectoryReadError: If the image folder cannot be read
        NoImagesFoundError: If no usable images were found
        IOWriteError: If the PDF cannot be written

    Example:
        >>> config = SheetConfig(Path("items"), 2, Path("bingo.pdf"))
        >>> result = build_sheets(config)
        >>> print(f"Generated {result.page_count} pages")
    """
    start_time = time.perf_counter()
    grid = config.grid

    logger.info(f"Loading images from folder: {config.image_folder}")

    # 1. Load
    images = load_images(
        config.image_folder,
        grid.cell_px,
        overlay=config.overlay,
        max_workers=config.max_workers,
        progress=load_progress,
    )
    logger.info(f"Loaded {len(images)} images ({images.unique_count} distinct)")

    # 2. Compose
    logger.info(f"Generating {config.num_pages} pages of {grid.rows}x{grid.cols}")
    rng = random.Random(config.seed)
    layout = compose_sheets(
        images,
        config.num_pages,
        grid,
        rng=rng,
        progress=page_progress,
    )

    # 3. Render
    render_to_pdf(layout, config.output_path, grid)

    elapsed = time.perf_counter() - start_time
    logger.info(f"PDF generated successfully in {elapsed:.2f}s: {config.output_path}")

    return SheetResult(
        output_path=config.output_path,
        page_count=layout.page_count,
        image_count=len(images),
        placements=layout.total_placements,
        elapsed=elapsed,
    )
