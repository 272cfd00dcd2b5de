"""
Module: bingo_builder.config

Purpose:
    Configuration dataclass for a bingo sheet run. Immutable
    configuration with validation on construction.

Key Classes:
    - SheetConfig: Main configuration for building sheets

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - bingo_builder.controller: Main build controller
    - bingo_builder.cli: Built from command line arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from bingo_builder.layout.config import GridConfig


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for building bingo sheets (immutable).

    Attributes:
        image_folder: Folder containing one image per item
        num_pages: Number of pages to generate
        output_path: Path of the PDF to write
        overlay: Stamp the corner marker on each image
        seed: Random seed for reproducible pages (None = unseeded)
        max_workers: Loader thread pool size (None = CPU count)
        grid: Grid geometry

    Example:
        >>> config = SheetConfig(
        ...     image_folder=Path("items"),
        ...     num_pages=10,
        ...     output_path=Path("bingo.pdf"),
        ... )
    """

    # Required
    image_folder: Path
    num_pages: int
    output_path: Path

    # Optional
    overlay: bool = False
    seed: Optional[int] = None
    max_workers: Optional[int] = None
    grid: GridConfig = field(default_factory=GridConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.num_pages < 1:
            raise ValueError(f"num_pages must be positive: {self.num_pages}")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive: {self.max_workers}")
