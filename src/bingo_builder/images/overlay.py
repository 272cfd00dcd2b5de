"""
Module: bingo_builder.images.overlay

Purpose:
    Stamp a marker square onto cell images. The marker is a white
    square with a 1px black border in the bottom-right corner, sized
    at 20% of the image width.

Key Functions:
    - apply_marker_overlay(): Add marker to image
    - marker_bbox(): Inclusive pixel box of the marker

Dependencies:
    - PIL: Image drawing

Used By:
    - bingo_builder.images.loader: When overlay mode is enabled
"""

from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)

MARKER_RATIO = 0.2
MARKER_FILL = "white"
MARKER_BORDER = "black"
MARKER_BORDER_WIDTH = 1


def marker_bbox(width: int, height: int) -> Tuple[int, int, int, int]:
    """
    Calculate the marker box for an image of the given size.

    Args:
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Inclusive (x1, y1, x2, y2) box anchored to the bottom-right corner

    Example:
        >>> marker_bbox(50, 50)
        (40, 40, 49, 49)
    """
    side = int(MARKER_RATIO * width)
    return (width - side, height - side, width - 1, height - 1)


def apply_marker_overlay(image: Image.Image) -> Image.Image:
    """
    Apply the corner marker to an image.

    Args:
        image: Source image (copied, not modified)

    Returns:
        New image of identical size with the marker drawn

    Example:
        >>> marked = apply_marker_overlay(img)
        >>> marked.size == img.size
        True
    """
    result = image.copy()
    width, height = result.size

    if int(MARKER_RATIO * width) == 0:
        logger.debug(f"Image {width}x{height} too small for marker, skipping")
        return result

    bbox = marker_bbox(width, height)
    draw = ImageDraw.Draw(result)
    draw.rectangle(
        bbox,
        fill=MARKER_FILL,
        outline=MARKER_BORDER,
        width=MARKER_BORDER_WIDTH,
    )
    return result
