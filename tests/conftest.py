import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import bingo_builder
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from bingo_builder.images.models import ImageAsset  # noqa: E402


# Common test fixtures
@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def image_folder(tmp_path: Path):
    """Folder with four valid images, one corrupt file and one text file."""
    folder = tmp_path / "items"
    folder.mkdir()
    colors = ["red", "green", "blue", "yellow"]
    formats = [("a.png", "PNG"), ("b.jpg", "JPEG"), ("c.gif", "GIF"), ("d.bmp", "BMP")]
    for color, (name, fmt) in zip(colors, formats):
        Image.new("RGB", (120, 80), color=color).save(folder / name, format=fmt)
    (folder / "broken.png").write_bytes(b"not really a png")
    (folder / "notes.txt").write_text("shopping list")
    return folder


@pytest.fixture
def asset_factory():
    """Factory for small in-memory ImageAssets with distinct content."""
    def _create(tag: int) -> ImageAsset:
        return ImageAsset(data=f"asset-{tag}".encode())
    return _create
