"""
Module: bingo_builder.images.loader

Purpose:
    Load every image in a folder, resize it to a square cell and
    re-encode it as PNG. Files are processed on a bounded thread pool;
    files that fail to decode are logged and skipped.

Key Functions:
    - find_image_files(): List candidate image files in a folder
    - load_image(): Decode, resize and encode a single file
    - load_images(): Load a whole folder into an ImageSet

Dependencies:
    - PIL: Decoding, resizing, encoding
    - concurrent.futures: Thread pool execution

Used By:
    - bingo_builder.controller: Loading stage
"""

from __future__ import annotations

import io
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional

from PIL import Image, UnidentifiedImageError

from bingo_builder.errors import DirectoryReadError, ImageDecodeError, NoImagesFoundError

from .models import ASSET_FORMAT, ImageAsset, ImageSet
from .overlay import apply_marker_overlay

logger = logging.getLogger(__name__)

# Matched case-sensitively against the file suffix
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".bmp"})

ProgressCallback = Callable[[int, int], None]


def is_image_file(path: Path) -> bool:
    """Check whether a path has a recognised image extension."""
    return path.suffix in IMAGE_EXTENSIONS


def find_image_files(folder: Path) -> List[Path]:
    """
    List candidate image files in a folder.

    Sub-directories and files without a recognised extension are
    skipped. Results are sorted by name.

    Args:
        folder: Directory to scan

    Returns:
        Paths of candidate image files

    Raises:
        DirectoryReadError: If the folder cannot be listed
    """
    try:
        entries = list(folder.iterdir())
    except OSError as e:
        raise DirectoryReadError(f"Cannot read image folder {folder}: {e}") from e

    files = [p for p in entries if not p.is_dir() and is_image_file(p)]
    logger.debug(f"Found {len(files)} candidate images out of {len(entries)} entries in {folder}")
    return sorted(files)


def load_image(path: Path, cell_px: int, *, overlay: bool = False) -> ImageAsset:
    """
    Load one image file as a cell-sized asset.

    Args:
        path: Image file to load
        cell_px: Target width and height in pixels
        overlay: Whether to stamp the corner marker

    Returns:
        ImageAsset holding the PNG-encoded result

    Raises:
        ImageDecodeError: If the file cannot be opened or decoded
    """
    buf = io.BytesIO()
    try:
        with Image.open(path) as img:
            resized = img.convert("RGB").resize((cell_px, cell_px), Image.Resampling.LANCZOS)
        if overlay:
            resized = apply_marker_overlay(resized)
        resized.save(buf, format=ASSET_FORMAT)
    except (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeError(f"Failed to decode {path}: {e}") from e

    return ImageAsset(data=buf.getvalue(), source=path)


def load_images(
    folder: Path,
    cell_px: int,
    *,
    overlay: bool = False,
    max_workers: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> ImageSet:
    """
    Load and resize every image in a folder.

    One task per candidate file runs on a thread pool capped at
    max_workers. Assets are collected in completion order, so the
    order of the returned set varies between runs.

    Args:
        folder: Directory containing the images
        cell_px: Target width and height in pixels
        overlay: Whether to stamp the corner marker on each image
        max_workers: Thread pool size (default: CPU count)
        progress: Called with (loaded, total) after each successful load

    Returns:
        ImageSet of all images that loaded successfully

    Raises:
        DirectoryReadError: If the folder cannot be listed
        NoImagesFoundError: If no image loaded successfully

    Example:
        >>> images = load_images(Path("items"), 50, overlay=True)
        >>> len(images)
        24
    """
    paths = find_image_files(folder)
    total = len(paths)
    workers = max_workers or os.cpu_count() or 1

    logger.info(f"Loading {total} images from {folder} with {workers} workers")

    assets: List[ImageAsset] = []
    if paths:
        with ThreadPoolExecutor(max_workers=min(workers, total)) as executor:
            future_to_path = {
                executor.submit(load_image, path, cell_px, overlay=overlay): path
                for path in paths
            }
            for future in as_completed(future_to_path):
                path = future_to_path[future]
                try:
                    assets.append(future.result())
                except ImageDecodeError as e:
                    logger.warning(f"Skipping {path.name}: {e}")
                    continue
                if progress is not None:
                    progress(len(assets), total)

    if not assets:
        raise NoImagesFoundError(f"No usable images found in {folder}")

    skipped = total - len(assets)
    if skipped:
        logger.info(f"Loaded {len(assets)} images, skipped {skipped}")
    else:
        logger.info(f"Loaded {len(assets)} images")

    return ImageSet(tuple(assets))
