"""
Tests for bingo_builder.layout.composer

Test Coverage:
- cell_index(): Page-and-position formula, wrap-around, determinism
- cell_origin(): Cell coordinates
- compose_page(): Row-major placements from an image order
- compose_sheets(): Page counts, per-page permutation, progress
"""
import random

import pytest

from bingo_builder.images.models import ImageSet
from bingo_builder.layout import (
    GridConfig,
    cell_index,
    cell_origin,
    compose_page,
    compose_sheets,
)


@pytest.fixture
def grid():
    """Standard 5x5 grid."""
    return GridConfig()


@pytest.fixture
def image_set(asset_factory):
    """Set of four distinct assets."""
    return ImageSet(tuple(asset_factory(i) for i in range(4)))


class TestCellIndex:
    """Tests for the cell index formula."""

    def test_cell_index_when_first_page_then_row_major(self):
        """Without wrap-around the index is the row-major position."""
        assert cell_index(0, 0, 0, 5, 5, 100) == 0
        assert cell_index(0, 0, 4, 5, 5, 100) == 4
        assert cell_index(0, 1, 0, 5, 5, 100) == 5
        assert cell_index(0, 4, 4, 5, 5, 100) == 24

    def test_cell_index_when_later_page_then_offset_by_page(self):
        """Each page starts rows*cols further along."""
        assert cell_index(1, 0, 0, 5, 5, 100) == 25
        assert cell_index(3, 2, 1, 5, 5, 100) == 86

    def test_cell_index_when_small_set_then_wraps(self):
        """Three images on a 25-cell grid always index into [0, 3)."""
        for page in range(4):
            for row in range(5):
                for col in range(5):
                    assert 0 <= cell_index(page, row, col, 5, 5, 3) < 3

    def test_cell_index_when_recomputed_then_same(self):
        """The mapping is a pure function of its inputs."""
        first = [cell_index(p, r, c, 5, 5, 7) for p in range(3) for r in range(5) for c in range(5)]
        second = [cell_index(p, r, c, 5, 5, 7) for p in range(3) for r in range(5) for c in range(5)]

        assert first == second


class TestCellOrigin:
    """Tests for cell coordinates."""

    def test_cell_origin_when_first_cell_then_at_margins(self, grid):
        """Cell (0, 0) sits at the top-left margins."""
        assert cell_origin(0, 0, grid) == (10.0, 10.0)

    def test_cell_origin_when_offset_then_steps_by_pitch(self, grid):
        """Each step adds cell_size + spacing."""
        # Act
        x, y = cell_origin(1, 2, grid)

        # Assert
        assert x == pytest.approx(10 + 2 * 38.4)
        assert y == pytest.approx(10 + 1 * 38.4)

    def test_cell_origin_when_last_column_then_ends_at_right_margin(self, grid):
        """The last column's right edge meets the right margin."""
        x, _ = cell_origin(0, grid.cols - 1, grid)

        assert x + grid.cell_size == pytest.approx(grid.page_width - grid.margin_left)


class TestComposePage:
    """Tests for single page composition."""

    def test_compose_page_when_5x5_then_25_placements(self, grid, image_set):
        """One placement per cell in row-major order."""
        # Act
        page = compose_page(image_set.assets, 0, grid)

        # Assert
        assert page.index == 0
        assert page.placement_count == 25
        assert [(p.row, p.col) for p in page.placements] == [
            (r, c) for r in range(5) for c in range(5)
        ]

    def test_compose_page_when_fixed_order_then_follows_index_formula(self, grid, image_set):
        """Each cell holds order[cell_index(...)]."""
        # Arrange
        order = image_set.assets

        # Act
        page = compose_page(order, 2, grid)

        # Assert
        for p in page.placements:
            expected = order[cell_index(2, p.row, p.col, 5, 5, len(order))]
            assert p.asset is expected

    def test_compose_page_when_placed_then_square_cells(self, grid, image_set):
        """Every placement uses the grid's cell size and origin."""
        page = compose_page(image_set.assets, 0, grid)

        for p in page.placements:
            assert p.size == pytest.approx(grid.cell_size)
            assert (p.x, p.y) == pytest.approx(cell_origin(p.row, p.col, grid))


class TestComposeSheets:
    """Tests for multi-page composition."""

    def test_compose_sheets_when_two_pages_then_two_full_pages(self, grid, image_set):
        """Produces exactly num_pages pages of rows*cols placements."""
        # Act
        result = compose_sheets(image_set, 2, grid, rng=random.Random(0))

        # Assert
        assert result.page_count == 2
        assert [p.index for p in result.pages] == [0, 1]
        assert all(p.placement_count == 25 for p in result.pages)
        assert result.total_placements == 50

    def test_compose_sheets_when_small_set_then_repeats_within_page(self, grid, image_set):
        """Four images fill 25 cells by repetition."""
        result = compose_sheets(image_set, 1, grid, rng=random.Random(0))

        assert result.unique_assets == 4

    def test_compose_sheets_when_done_then_image_set_untouched(self, grid, image_set):
        """Per-page shuffles never reorder the shared set."""
        # Arrange
        before = image_set.assets

        # Act
        compose_sheets(image_set, 5, grid, rng=random.Random(9))

        # Assert
        assert image_set.assets == before

    def test_compose_sheets_when_same_seed_then_same_layout(self, grid, asset_factory):
        """Seeded runs are reproducible."""
        # Arrange
        images = ImageSet(tuple(asset_factory(i) for i in range(30)))

        # Act
        a = compose_sheets(images, 3, grid, rng=random.Random(11))
        b = compose_sheets(images, 3, grid, rng=random.Random(11))

        # Assert
        assert [[p.asset for p in page.placements] for page in a.pages] == \
               [[p.asset for p in page.placements] for page in b.pages]

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 5), (3, 2), (4, 4)])
    def test_compose_sheets_when_various_grids_then_rows_times_cols(self, rows, cols, image_set):
        """Placement count follows the grid for any shape."""
        # Arrange
        grid = GridConfig(rows=rows, cols=cols)

        # Act
        result = compose_sheets(image_set, 3, grid)

        # Assert
        assert result.page_count == 3
        assert all(p.placement_count == rows * cols for p in result.pages)

    def test_compose_sheets_when_progress_then_called_per_page(self, grid, image_set):
        """Progress reports each page 1-indexed."""
        calls = []

        compose_sheets(image_set, 3, grid, progress=lambda page, total: calls.append((page, total)))

        assert calls == [(1, 3), (2, 3), (3, 3)]

    def test_compose_sheets_when_zero_pages_then_empty(self, grid, image_set):
        """Zero pages gives an empty layout."""
        result = compose_sheets(image_set, 0, grid)

        assert result.page_count == 0

    def test_compose_sheets_when_negative_pages_then_raises(self, grid, image_set):
        """Negative page counts are rejected."""
        with pytest.raises(ValueError, match="num_pages"):
            compose_sheets(image_set, -1, grid)
