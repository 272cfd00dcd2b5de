"""
Module: bingo_builder.images.models

Purpose:
    Immutable models for loaded images.

Key Classes:
    - ImageAsset: One encoded, cell-sized image
    - ImageSet: Non-empty ordered collection of assets

Dependencies:
    - hashlib (std): Content hash for deduplication

Used By:
    - bingo_builder.images.loader: Creates assets
    - bingo_builder.layout.composer: Draws permutations per page
    - bingo_builder.output.renderer: Dedups placements by content hash
"""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Iterator, Optional, Tuple

from bingo_builder.errors import NoImagesFoundError

# Format every asset is re-encoded to
ASSET_FORMAT = "PNG"


@dataclass(frozen=True)
class ImageAsset:
    """
    Encoded image ready for placement (immutable).

    Attributes:
        data: Encoded image bytes (PNG)
        source: File the image was loaded from
    """

    data: bytes
    source: Optional[Path] = field(default=None, compare=False)

    @cached_property
    def content_hash(self) -> str:
        """SHA-1 hex digest of the encoded bytes."""
        return hashlib.sha1(self.data).hexdigest()

    @property
    def name(self) -> str:
        """Stable document-level name derived from the content."""
        return f"img_{self.content_hash}"


@dataclass(frozen=True)
class ImageSet:
    """
    Ordered, non-empty collection of ImageAssets.

    Order is the arrival order from the loader. The set itself is never
    reordered; per-page shuffles are taken with permuted().

    Raises:
        NoImagesFoundError: If constructed with no assets

    Example:
        >>> images = ImageSet((a, b, c))
        >>> order = images.permuted(random.Random(1))
        >>> sorted(order, key=id) == sorted(images, key=id)
        True
    """

    assets: Tuple[ImageAsset, ...]

    def __post_init__(self) -> None:
        if not self.assets:
            raise NoImagesFoundError("Image set is empty")

    def __len__(self) -> int:
        return len(self.assets)

    def __iter__(self) -> Iterator[ImageAsset]:
        return iter(self.assets)

    def __getitem__(self, index: int) -> ImageAsset:
        return self.assets[index]

    def permuted(self, rng: random.Random) -> Tuple[ImageAsset, ...]:
        """Return a uniformly shuffled copy of the assets."""
        order = list(self.assets)
        rng.shuffle(order)
        return tuple(order)

    @property
    def unique_count(self) -> int:
        """Number of distinct images by content."""
        return len({asset.content_hash for asset in self.assets})
