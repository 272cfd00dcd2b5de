"""
Module: bingo_builder.layout.config

Purpose:
    Grid geometry for bingo pages. All lengths are millimetres with a
    top-left origin, matching how the page is described on paper.

Key Classes:
    - GridConfig: Immutable grid configuration

Dependencies:
    - dataclasses (std)

Used By:
    - bingo_builder.layout.composer: Cell coordinates
    - bingo_builder.output.renderer: Page size
    - bingo_builder.images.loader: Raster size of each cell image
"""

from __future__ import annotations

from dataclasses import dataclass


# A4 portrait in millimetres
A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0

DEFAULT_ROWS = 5
DEFAULT_COLS = 5
DEFAULT_CELL_PX = 50


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for the bingo grid (immutable).

    The cell size is derived from the printable width so that cells are
    square, evenly spaced and fill the page width exactly.

    Attributes:
        rows: Number of grid rows
        cols: Number of grid columns
        page_width: Page width in mm
        page_height: Page height in mm
        margin_left: Left (and right) margin in mm
        margin_top: Top margin in mm
        spacing: Gap between neighbouring cells in mm
        cell_px: Pixel size each loaded image is resized to

    Example:
        >>> grid = GridConfig()
        >>> round(grid.cell_size, 2)
        36.4
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    # Page dimensions
    page_width: float = A4_WIDTH_MM
    page_height: float = A4_HEIGHT_MM

    # Margins and spacing
    margin_left: float = 10.0
    margin_top: float = 10.0
    spacing: float = 2.0

    # Raster size of each image before placement
    cell_px: int = DEFAULT_CELL_PX

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.rows < 1:
            raise ValueError(f"rows must be positive: {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be positive: {self.cols}")
        if self.cell_px < 1:
            raise ValueError(f"cell_px must be positive: {self.cell_px}")
        if self.page_width <= 0 or self.page_height <= 0:
            raise ValueError(
                f"page size must be positive: {self.page_width}x{self.page_height}"
            )
        if self.margin_left < 0 or self.margin_top < 0:
            raise ValueError("Margins must be non-negative")
        if self.spacing < 0:
            raise ValueError(f"spacing must be non-negative: {self.spacing}")
        if self.cell_size <= 0:
            raise ValueError("Margins and spacing exceed page width")
        if self.margin_top + self.grid_height > self.page_height:
            raise ValueError("Grid exceeds page height")

    @property
    def cells_per_page(self) -> int:
        """Number of cells on each page."""
        return self.rows * self.cols

    @property
    def cell_size(self) -> float:
        """Side length of one square cell in mm."""
        printable = self.page_width - 2 * self.margin_left - (self.cols - 1) * self.spacing
        return printable / self.cols

    @property
    def grid_height(self) -> float:
        """Total height of the grid in mm."""
        return self.rows * self.cell_size + (self.rows - 1) * self.spacing
