"""
Module: bingo_builder.errors

Purpose:
    Exception types shared across the loading, layout and output stages.

Key Classes:
    - BingoError: Base class for all pipeline errors
    - DirectoryReadError: Image folder cannot be listed (fatal)
    - ImageDecodeError: Single file cannot be decoded (recovered)
    - NoImagesFoundError: No usable images after loading (fatal)
    - IOWriteError: Output document cannot be written (fatal)

Used By:
    - bingo_builder.images.loader
    - bingo_builder.output.renderer
    - bingo_builder.cli
"""


class BingoError(Exception):
    """Base error for the bingo sheet pipeline."""
    pass


class DirectoryReadError(BingoError):
    """Image folder is missing or unreadable."""
    pass


class ImageDecodeError(BingoError):
    """Image file could not be opened or decoded."""
    pass


class NoImagesFoundError(BingoError):
    """No usable images survived loading."""
    pass


class IOWriteError(BingoError):
    """Output document could not be written."""
    pass
