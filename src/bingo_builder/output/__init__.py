"""
Module: bingo_builder.output

Purpose:
    PDF rendering for bingo sheets.
    Converts LayoutResult to a PDF file using ReportLab.

Key Functions:
    - render_to_pdf(): Render layout to PDF

Key Classes:
    - PdfDocumentWriter: In-memory PDF document

Dependencies:
    - reportlab: PDF generation

Used By:
    - bingo_builder.controller: Pipeline orchestration
"""

from .renderer import PdfDocumentWriter, render_to_pdf

__all__ = [
    "PdfDocumentWriter",
    "render_to_pdf",
]
