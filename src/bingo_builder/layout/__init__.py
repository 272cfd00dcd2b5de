"""
Module: bingo_builder.layout

Purpose:
    Page layout for bingo sheets.
    Converts a loaded ImageSet into positioned page layouts.

Key Functions:
    - compose_sheets(): Main entry point for layout
    - compose_page(): Lay out a single page

Key Classes:
    - GridConfig: Grid geometry
    - CellPlacement: Image placed in a cell
    - PagePlan: Single page layout plan

Used By:
    - bingo_builder.controller: Main build controller
"""

from .config import GridConfig
from .models import CellPlacement, PagePlan, LayoutResult
from .composer import cell_index, cell_origin, compose_page, compose_sheets

__all__ = [
    # Config
    "GridConfig",
    # Models
    "CellPlacement",
    "PagePlan",
    "LayoutResult",
    # Functions
    "cell_index",
    "cell_origin",
    "compose_page",
    "compose_sheets",
]
