"""
Unit tests for CompactionPass
"""
import pytest

from widgetgrid.layout.collision import has_any_collision
from widgetgrid.layout.compaction import compact_layout, index_widgets
from widgetgrid.layout.reflow import reflow_layout
from widgetgrid.layout.types import GridArea


def _areas(widgets):
    return {w.id: w.grid_area for w in widgets}


class TestCompactLayout:
    """Tests for compact_layout"""

    def test_closes_vertical_gap(self, make_widget):
        widgets = [make_widget('a', 0, 0, 6, 1), make_widget('b', 0, 4, 6, 2)]
        result = _areas(compact_layout(widgets))
        assert result['b'] == GridArea(0, 1, 6, 2)

    def test_moves_to_row_zero_when_column_free(self, make_widget):
        widgets = [make_widget('a', 0, 0, 6, 1), make_widget('b', 6, 3, 6, 1)]
        assert _areas(compact_layout(widgets))['b'].y == 0

    def test_locked_widget_stays_and_blocks(self, make_widget):
        widgets = [
            make_widget('lock', 0, 2, 12, 1, locked=True),
            make_widget('a', 0, 5, 4, 1),
        ]
        result = _areas(compact_layout(widgets))
        assert result['lock'] == GridArea(0, 2, 12, 1)
        # Rows 0-1 are free above the locked widget
        assert result['a'] == GridArea(0, 0, 4, 1)

    def test_tall_widget_cannot_squeeze_past_locked(self, make_widget):
        widgets = [
            make_widget('lock', 0, 1, 12, 1, locked=True),
            make_widget('a', 0, 4, 4, 2),
        ]
        assert _areas(compact_layout(widgets))['a'].y == 2

    def test_preserves_input_order(self, make_widget):
        widgets = [make_widget('b', 0, 5, 3, 1), make_widget('a', 0, 0, 3, 1)]
        assert [w.id for w in compact_layout(widgets)] == ['b', 'a']

    def test_does_not_mutate_input(self, make_widget):
        widgets = [make_widget('a', 0, 3, 3, 1)]
        compact_layout(widgets)
        assert widgets[0].grid_area.y == 3

    def test_idempotent(self, make_widget):
        widgets = [
            make_widget('a', 0, 2, 3, 1),
            make_widget('b', 3, 5, 6, 2),
            make_widget('c', 0, 9, 12, 1),
            make_widget('lock', 9, 3, 3, 2, locked=True),
            make_widget('d', 9, 8, 3, 1),
            make_widget('e', 2, 12, 2, 3),
        ]
        once = compact_layout(widgets)
        twice = compact_layout(once)
        assert _areas(once) == _areas(twice)
        assert not has_any_collision(once)

    def test_idempotent_on_overlapping_input(self, make_widget):
        """A widget overlapping a later one is not pinned by it"""
        widgets = [
            make_widget('w0', 5, 5, 2, 2),
            make_widget('w3', 4, 9, 6, 2),
            make_widget('w4', 0, 4, 6, 3),
        ]
        once = compact_layout(widgets)
        assert _areas(once) == {
            'w4': GridArea(0, 0, 6, 3),
            'w0': GridArea(5, 3, 2, 2),
            'w3': GridArea(4, 5, 6, 2),
        }
        assert _areas(compact_layout(once)) == _areas(once)
        assert not has_any_collision(once)

    def test_unlocked_widget_leaves_locked_overlap(self, make_widget):
        widgets = [
            make_widget('lock', 0, 3, 6, 2, locked=True),
            make_widget('a', 0, 4, 6, 2),
        ]
        once = compact_layout(widgets)
        assert _areas(once)['a'] == GridArea(0, 0, 6, 2)
        assert _areas(once)['lock'] == GridArea(0, 3, 6, 2)
        assert _areas(compact_layout(once)) == _areas(once)

    def test_idempotent_after_blocked_reflow(self, make_widget):
        """Residual overlap left by a locked widget compacts stably"""
        lock = make_widget('L', 0, 2, 6, 2, locked=True)
        d = make_widget('D', 0, 0, 6, 2)
        e = make_widget('E', 6, 0, 6, 1)
        f = make_widget('F', 0, 6, 6, 1)
        result = reflow_layout(d, GridArea(0, 0, 6, 3), [lock, d, e, f])

        assert result.converged is False
        assert _areas(result.widgets)['F'] == GridArea(0, 4, 6, 1)
        once = compact_layout(result.widgets)
        assert _areas(once) == _areas(result.widgets)
        assert _areas(compact_layout(once)) == _areas(once)

    def test_empty_layout(self):
        assert compact_layout([]) == ()

    def test_duplicate_ids_rejected(self, make_widget):
        with pytest.raises(ValueError):
            index_widgets([make_widget('a', 0, 0, 1, 1), make_widget('a', 2, 0, 1, 1)])
