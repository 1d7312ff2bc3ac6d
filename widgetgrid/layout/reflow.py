"""
Reflow engine

Pushes widgets out of the way after a resize or move, then compacts.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .collision import CollisionDetector
from .compaction import CompactionPass, index_widgets
from .types import GridArea, ReflowResult, Widget
from ..config import GridConfig

logger = logging.getLogger(__name__)


class ReflowEngine:
    """
    Greedy downward-push reflow

    Algorithm:
    1. Put the resized widget at its new area
    2. Push every unlocked widget overlapping the new area straight down
       until it sits just below it
    3. Re-scan the whole layout; for each colliding pair push the lower
       widget below the upper one (or the upper one below a locked or
       resized lower one), repeating until nothing moves or the
       iteration cap is reached
    4. Compact the result

    Best-effort: the cap is never reported as a failure, and locked
    widgets can leave residual overlap. Check `converged` on the result
    or run CollisionDetector.has_any_collision.
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        """
        Initialize ReflowEngine

        Args:
            config: GridConfig instance (uses defaults if None)
        """
        self.config: GridConfig = config or GridConfig()
        self.compactor = CompactionPass(self.config)

    def reflow(
        self,
        resized_widget: Widget,
        new_area: GridArea,
        widgets: Iterable[Widget]
    ) -> ReflowResult:
        """
        Apply a new area to one widget and resolve the collisions it causes

        Args:
            resized_widget: Widget being resized or moved (matched by id)
            new_area: Requested area, already clamped to catalog bounds
            widgets: Complete widget collection, including resized_widget

        Returns:
            ReflowResult with the updated collection and the moved widget ids

        Raises:
            ValueError: If new_area lies outside the grid or the widget is
                        not part of the collection
        """
        if not new_area.fits(self.config.columns):
            raise ValueError(
                f"Area x={new_area.x}, w={new_area.w} exceeds grid width {self.config.columns}"
            )

        items: List[Widget] = list(widgets)
        working = index_widgets(items)
        resized_id = resized_widget.id
        if resized_id not in working:
            raise ValueError(f"Widget {resized_id} is not in the layout")

        working[resized_id] = working[resized_id].with_area(new_area)

        colliding = CollisionDetector.get_colliding_widgets(
            new_area, working.values(), exclude_id=resized_id
        )
        if not colliding:
            logger.debug(f"Reflow of {resized_id}: no collisions")
            return ReflowResult(widgets=tuple(working[w.id] for w in items))

        moved: List[str] = []
        for other in colliding:
            if other.is_locked:
                logger.debug(f"Reflow of {resized_id}: {other.id} is locked, not pushed")
                continue
            self._push_below(working, other.id, new_area, moved)

        iterations = 0
        pushed = True
        while pushed and iterations < self.config.max_reflow_iterations:
            iterations += 1
            pushed = self._cascade_pass(working, resized_id, moved)

        if pushed:
            logger.warning(
                f"Reflow of {resized_id} stopped at the iteration cap "
                f"({self.config.max_reflow_iterations})"
            )

        result: Tuple[Widget, ...] = tuple(working[w.id] for w in items)
        if self.config.compact_after_reflow:
            result = self.compactor.compact(result)

        # Widgets pulled up by compaction count as moved too
        for before, after in zip(items, result):
            if (before.id != resized_id and before.id not in moved
                    and before.grid_area != after.grid_area):
                moved.append(before.id)

        converged = not CollisionDetector.has_any_collision(result)
        if not converged:
            logger.warning(f"Reflow of {resized_id} left overlapping widgets")

        logger.debug(f"Reflow of {resized_id}: moved {moved} in {iterations} pass(es)")
        return ReflowResult(
            widgets=result,
            success=True,
            moved_widgets=tuple(moved),
            iterations=iterations,
            converged=converged
        )

    def _cascade_pass(
        self,
        working: Dict[str, Widget],
        resized_id: str,
        moved: List[str]
    ) -> bool:
        """
        One scan over the whole layout, resolving colliding pairs top-down

        Returns:
            True if any widget was pushed
        """
        pushed = False
        order = sorted(
            working,
            key=lambda i: (working[i].grid_area.y, working[i].grid_area.x, i != resized_id)
        )
        for anchor_id in order:
            colliding = CollisionDetector.get_colliding_widgets(
                working[anchor_id].grid_area, list(working.values()), exclude_id=anchor_id
            )
            for other in colliding:
                anchor = working[anchor_id]
                other = working[other.id]
                if not anchor.grid_area.overlaps(other.grid_area):
                    continue
                choice = self._choose_push(anchor, other, resized_id)
                if choice is None:
                    continue
                target, blocker = choice
                if self._push_below(working, target.id, blocker.grid_area, moved):
                    pushed = True
        return pushed

    @staticmethod
    def _choose_push(
        anchor: Widget,
        other: Widget,
        resized_id: str
    ) -> Optional[Tuple[Widget, Widget]]:
        """
        Pick which widget of a colliding pair moves

        The lower widget is pushed below the upper one. If the lower one is
        locked or is the resized widget, the upper one is pushed below it
        instead. Returns (target, blocker), or None when neither may move.
        """
        if anchor.grid_area.y > other.grid_area.y:
            lower, upper = anchor, other
        else:
            lower, upper = other, anchor

        for target, blocker in ((lower, upper), (upper, lower)):
            if not target.is_locked and target.id != resized_id:
                return target, blocker
        return None

    @staticmethod
    def _push_below(
        working: Dict[str, Widget],
        target_id: str,
        blocker: GridArea,
        moved: List[str]
    ) -> bool:
        """Move a widget straight down until its top meets the blocker's bottom"""
        target = working[target_id]
        distance = blocker.bottom - target.grid_area.y
        if distance <= 0:
            return False
        working[target_id] = target.with_area(target.grid_area.with_y(target.grid_area.y + distance))
        if target_id not in moved:
            moved.append(target_id)
        return True


def reflow_layout(
    resized_widget: Widget,
    new_area: GridArea,
    widgets: Iterable[Widget],
    config: Optional[GridConfig] = None
) -> ReflowResult:
    """Convenience function for ReflowEngine.reflow"""
    return ReflowEngine(config).reflow(resized_widget, new_area, widgets)
