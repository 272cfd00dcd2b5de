"""
Module: bingo_builder.output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page with every cell image drawn at
    its grid position.

Key Classes:
    - PdfDocumentWriter: Page/placement/finalize wrapper over a canvas

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation

Used By:
    - bingo_builder.controller: Render stage
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, Tuple

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from bingo_builder.errors import IOWriteError
from bingo_builder.images.models import ImageAsset
from bingo_builder.layout.config import GridConfig
from bingo_builder.layout.models import LayoutResult, PagePlan

logger = logging.getLogger(__name__)


class PdfDocumentWriter:
    """
    Multi-page PDF document built in memory.

    Accepts page and image placement calls using millimetre
    coordinates with a top-left origin. Images are registered once per
    content hash, so placing the same bytes many times reuses one
    reader. Nothing touches disk until finalize().

    Attributes:
        page_size: (width, height) in mm
        page_count: Pages added so far
        image_count: Distinct images registered so far

    Example:
        >>> writer = PdfDocumentWriter((210, 297))
        >>> writer.add_page()
        >>> writer.place_image(asset, 10, 10, 36.4, 36.4)
        >>> writer.finalize(Path("bingo.pdf"))
    """

    def __init__(self, page_size: Tuple[float, float]) -> None:
        """
        Initialize writer.

        Args:
            page_size: (width, height) in mm
        """
        self.page_size = page_size
        self._page_width_pt = page_size[0] * mm
        self._page_height_pt = page_size[1] * mm
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(
            self._buffer,
            pagesize=(self._page_width_pt, self._page_height_pt),
        )
        self._readers: Dict[str, ImageReader] = {}
        self._image_count = 0
        self._page_open = False
        self._closed = False
        self.page_count = 0

    @property
    def image_count(self) -> int:
        """Number of distinct images registered."""
        return self._image_count

    def add_page(self) -> None:
        """Start a new blank page, closing the current one."""
        self._check_open()
        if self._page_open:
            self._canvas.showPage()
        self._page_open = True
        self.page_count += 1

    def place_image(
        self,
        asset: ImageAsset,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """
        Draw an image on the current page.

        Args:
            asset: Image to draw
            x: Left edge in mm from the page's left
            y: Top edge in mm from the page's top
            width: Width in mm
            height: Height in mm

        Raises:
            RuntimeError: If no page has been added or the document is closed
        """
        self._check_open()
        if not self._page_open:
            raise RuntimeError("add_page() must be called before place_image()")

        reader = self._readers.get(asset.content_hash)
        if reader is None:
            reader = ImageReader(io.BytesIO(asset.data))
            self._readers[asset.content_hash] = reader
            self._image_count += 1
            logger.debug(f"Registered image {asset.name}")

        self._canvas.drawImage(
            reader,
            x * mm,
            _transform_y(self._page_height_pt, y, height),
            width=width * mm,
            height=height * mm,
        )

    def finalize(self, output_path: Path) -> None:
        """
        Write the document to disk and close it.

        Args:
            output_path: Path to write the PDF

        Raises:
            IOWriteError: If the file cannot be written
            RuntimeError: If the document was already finalized
        """
        self._check_open()
        self._closed = True

        if self._page_open:
            self._canvas.showPage()
            self._page_open = False
        self._canvas.save()

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(self._buffer.getvalue())
        except OSError as e:
            raise IOWriteError(f"Failed to write {output_path}: {e}") from e
        finally:
            self._buffer.close()
            self._readers.clear()

        logger.info(f"Wrote {self.page_count} pages to {output_path}")

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Document already finalized")


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    grid: GridConfig,
) -> PdfDocumentWriter:
    """
    Render layout result to PDF file.

    Args:
        layout: Layout result from the composer
        output_path: Path to write PDF
        grid: Grid configuration (page size)

    Returns:
        The finalized writer, for its page and image counts

    Raises:
        IOWriteError: If PDF cannot be written

    Example:
        >>> render_to_pdf(layout, Path("output/bingo.pdf"), GridConfig())
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    writer = PdfDocumentWriter((grid.page_width, grid.page_height))
    for page in layout.pages:
        _render_page(writer, page)

    writer.finalize(output_path)
    logger.debug(
        f"Placed {layout.total_placements} images using {writer.image_count} distinct blobs"
    )
    return writer


def _render_page(writer: PdfDocumentWriter, page: PagePlan) -> None:
    """Add one page and draw all its placements."""
    writer.add_page()
    for placement in page.placements:
        writer.place_image(
            placement.asset,
            placement.x,
            placement.y,
            placement.size,
            placement.size,
        )


def _transform_y(page_height_pt: float, y_mm_top: float, height_mm: float) -> float:
    """
    Convert top-down mm Y coordinate to bottom-up PDF Y.

    Args:
        page_height_pt: Page height in points
        y_mm_top: Y position from top in mm
        height_mm: Height of element in mm

    Returns:
        Y position from bottom in points
    """
    return page_height_pt - (y_mm_top + height_mm) * mm
