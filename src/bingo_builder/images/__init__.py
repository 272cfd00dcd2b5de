"""
Module: bingo_builder.images

Purpose:
    Image loading for bingo sheets. Reads a folder of item images,
    resizes each to a square cell and optionally stamps a marker.

Key Classes:
    - ImageAsset: Encoded cell image with content hash
    - ImageSet: Non-empty collection of assets

Key Functions:
    - load_images(): Load a folder into an ImageSet
    - apply_marker_overlay(): Stamp the corner marker

Dependencies:
    - PIL: Image manipulation

Used By:
    - bingo_builder.controller: Loading stage
"""

from .models import ImageAsset, ImageSet
from .loader import load_images, load_image, find_image_files, IMAGE_EXTENSIONS
from .overlay import apply_marker_overlay, marker_bbox

__all__ = [
    "ImageAsset",
    "ImageSet",
    "load_images",
    "load_image",
    "find_image_files",
    "IMAGE_EXTENSIONS",
    "apply_marker_overlay",
    "marker_bbox",
]
