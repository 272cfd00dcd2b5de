"""
Module: bingo_builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing placements and pages.

Key Classes:
    - CellPlacement: Asset positioned in a grid cell
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Used By:
    - bingo_builder.layout.composer: Creates PagePlans
    - bingo_builder.output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass

from bingo_builder.images.models import ImageAsset


@dataclass(frozen=True)
class CellPlacement:
    """
    An asset positioned in one grid cell.

    Coordinates are millimetres from the page's top-left corner.

    Attributes:
        asset: The ImageAsset to draw
        row: Grid row (0-indexed)
        col: Grid column (0-indexed)
        x: Left edge in mm
        y: Top edge in mm
        size: Side length in mm
    """

    asset: ImageAsset
    row: int
    col: int
    x: float
    y: float
    size: float


@dataclass(frozen=True)
class PagePlan:
    """
    Layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Placements in row-major order
    """

    index: int
    placements: tuple[CellPlacement, ...]

    @property
    def placement_count(self) -> int:
        """Number of cells on this page."""
        return len(self.placements)


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Example:
        >>> result = LayoutResult(pages=(page1, page2))
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of placements across all pages."""
        return sum(p.placement_count for p in self.pages)

    @property
    def unique_assets(self) -> int:
        """Number of distinct images placed anywhere in the layout."""
        return len({
            placement.asset.content_hash
            for page in self.pages
            for placement in page.placements
        })
