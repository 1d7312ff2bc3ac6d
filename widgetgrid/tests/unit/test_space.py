"""
Unit tests for EmptySpaceFinder

Placement is first-fit in row-major order.
"""
import pytest

from widgetgrid.config import GridConfig
from widgetgrid.layout.collision import CollisionDetector
from widgetgrid.layout.space import EmptySpaceFinder, find_empty_space
from widgetgrid.layout.types import GridArea


class TestFindEmptySpace:
    """Tests for find_empty_space"""

    def test_empty_layout_uses_origin(self):
        assert find_empty_space([], 3, 1) == GridArea(0, 0, 3, 1)

    def test_first_fit_left_to_right(self, make_widget):
        """Gap at the end of the top row is preferred over the next row"""
        widgets = [make_widget('a', 0, 0, 3, 1), make_widget('b', 3, 0, 3, 1)]
        assert find_empty_space(widgets, 3, 1) == GridArea(6, 0, 3, 1)

    def test_top_rows_preferred(self, make_widget):
        """A hole on row 0 wins over open space further down"""
        widgets = [
            make_widget('a', 0, 0, 4, 1),
            make_widget('b', 6, 0, 6, 1),
            make_widget('c', 0, 1, 12, 1),
        ]
        assert find_empty_space(widgets, 2, 1) == GridArea(4, 0, 2, 1)

    def test_hole_too_small_is_skipped(self, make_widget):
        widgets = [
            make_widget('a', 0, 0, 4, 1),
            make_widget('b', 6, 0, 6, 1),
        ]
        # 2-wide hole at x=4 cannot take a 3-wide widget
        assert find_empty_space(widgets, 3, 1) == GridArea(0, 1, 3, 1)

    def test_height_must_fit(self, make_widget):
        """A tall widget needs every row of its rectangle free"""
        widgets = [
            make_widget('a', 0, 0, 6, 1),
            make_widget('b', 6, 1, 6, 1),
        ]
        assert find_empty_space(widgets, 6, 2) == GridArea(0, 1, 6, 2)

    def test_result_never_collides(self, make_widget):
        widgets = [
            make_widget('a', 0, 0, 3, 1),
            make_widget('b', 3, 0, 3, 2),
            make_widget('c', 6, 0, 6, 2),
            make_widget('d', 0, 2, 12, 2, locked=True),
        ]
        for w, h in [(1, 1), (3, 1), (6, 2), (12, 4)]:
            area = find_empty_space(widgets, w, h)
            assert not CollisionDetector.get_colliding_widgets(area, widgets)

    def test_append_fallback_when_grid_full(self, make_widget):
        """Fully packed scan range falls back to column 0 below the content"""
        config = GridConfig(scan_rows=4)
        widgets = [make_widget(f'row-{r}', 0, r, 12, 1) for r in range(5)]
        area = EmptySpaceFinder(config).find_empty_space(widgets, 3, 1)
        assert area == GridArea(0, 5, 3, 1)

    def test_append_fallback_for_tall_request(self, make_widget):
        config = GridConfig(scan_rows=3)
        widgets = [make_widget('a', 0, 0, 2, 1)]
        area = EmptySpaceFinder(config).find_empty_space(widgets, 2, 5)
        assert area == GridArea(0, 1, 2, 5)

    def test_widgets_beyond_scan_range_are_clipped(self, make_widget):
        config = GridConfig(scan_rows=2)
        widgets = [make_widget('a', 0, 1, 12, 10), make_widget('b', 0, 50, 12, 1)]
        area = EmptySpaceFinder(config).find_empty_space(widgets, 12, 1)
        assert area == GridArea(0, 0, 12, 1)

    def test_occupancy_grid_shape(self, make_widget):
        finder = EmptySpaceFinder(GridConfig(scan_rows=5))
        grid = finder.build_occupancy([make_widget('a', 2, 1, 3, 2)])
        assert grid.shape == (5, 12)
        assert grid.sum() == 6
        assert grid[1:3, 2:5].all()

    def test_invalid_sizes(self):
        with pytest.raises(ValueError):
            find_empty_space([], 0, 1)
        with pytest.raises(ValueError):
            find_empty_space([], 13, 1)
