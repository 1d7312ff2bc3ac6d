"""
Compaction pass

Pulls unlocked widgets upward to close vertical gaps.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .collision import CollisionDetector
from .types import Widget
from ..config import GridConfig

logger = logging.getLogger(__name__)


def index_widgets(widgets: Iterable[Widget]) -> Dict[str, Widget]:
    """
    Map widget id to widget, keeping collection order

    Raises:
        ValueError: If two widgets share an id
    """
    index: Dict[str, Widget] = {}
    for widget in widgets:
        if widget.id in index:
            raise ValueError(f"Duplicate widget id: {widget.id}")
        index[widget.id] = widget
    return index


class CompactionPass:
    """
    Vertical compaction

    Widgets are visited top to bottom (then left to right). Each unlocked
    widget moves to the smallest row above its current one where it
    collides with no widget placed so far. Locked widgets stay put and are
    placed before everything else, so they act as fixed obstacles.
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        self.config: GridConfig = config or GridConfig()

    def compact(self, widgets: Iterable[Widget]) -> Tuple[Widget, ...]:
        """
        Remove vertical gaps without introducing collisions

        Args:
            widgets: Widget collection

        Returns:
            New widget tuple in the input order
        """
        items: List[Widget] = list(widgets)
        working = index_widgets(items)
        order = sorted(items, key=lambda w: (w.grid_area.y, w.grid_area.x))

        # Only locked and already-placed widgets block a candidate row
        placed: List[Widget] = [w for w in items if w.is_locked]
        n_moved = 0
        for widget in order:
            if widget.is_locked:
                continue
            area = widget.grid_area
            for test_y in range(area.y):
                candidate = area.with_y(test_y)
                if not CollisionDetector.get_colliding_widgets(candidate, placed):
                    working[widget.id] = widget.with_area(candidate)
                    n_moved += 1
                    break
            placed.append(working[widget.id])

        logger.debug(f"Compaction moved {n_moved} of {len(items)} widgets")
        return tuple(working[w.id] for w in items)


def compact_layout(
    widgets: Iterable[Widget],
    config: Optional[GridConfig] = None
) -> Tuple[Widget, ...]:
    """Convenience function for CompactionPass.compact"""
    return CompactionPass(config).compact(widgets)
