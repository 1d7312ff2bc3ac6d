"""
Collision detection

Pure overlap predicates over widgets on the integer grid.
"""

from __future__ import annotations
from typing import Iterable, List, Optional
import logging

from .types import GridArea, Widget
from ..types import CollisionPair

logger = logging.getLogger(__name__)


class CollisionDetector:
    """Overlap queries over a widget collection"""

    @staticmethod
    def has_collision(widget: Widget, others: Iterable[Widget]) -> bool:
        """
        Check if a widget overlaps any other widget

        Args:
            widget: Widget to test
            others: Widgets to test against (the widget itself is ignored)

        Returns:
            True if any other widget's area intersects the widget's area
        """
        return any(
            other.id != widget.id and widget.grid_area.overlaps(other.grid_area)
            for other in others
        )

    @staticmethod
    def get_colliding_widgets(
        area: GridArea,
        widgets: Iterable[Widget],
        exclude_id: Optional[str] = None
    ) -> List[Widget]:
        """
        All widgets whose area overlaps the given area

        Args:
            area: Area to test
            widgets: Candidate widgets
            exclude_id: Widget id to skip, usually the widget occupying `area`

        Returns:
            Colliding widgets in collection order
        """
        return [
            w for w in widgets
            if w.id != exclude_id and area.overlaps(w.grid_area)
        ]

    @staticmethod
    def find_collisions(widgets: Iterable[Widget]) -> List[CollisionPair]:
        """
        Every pair of overlapping widgets

        Returns:
            List of (id, id) tuples in collection order
        """
        items = list(widgets)
        pairs: List[CollisionPair] = []
        for i, first in enumerate(items):
            for second in items[i + 1:]:
                if first.grid_area.overlaps(second.grid_area):
                    pairs.append((first.id, second.id))
        return pairs

    @staticmethod
    def has_any_collision(widgets: Iterable[Widget]) -> bool:
        """
        Validation pass over a whole layout

        Reflow is best-effort and locked widgets can leave residual overlap,
        so callers use this to detect a layout that did not fully resolve.
        """
        pairs = CollisionDetector.find_collisions(widgets)
        if pairs:
            logger.debug(f"Layout has {len(pairs)} colliding pair(s): {pairs}")
        return bool(pairs)


def has_any_collision(widgets: Iterable[Widget]) -> bool:
    """Convenience function for CollisionDetector.has_any_collision"""
    return CollisionDetector.has_any_collision(widgets)
