"""
Layout controller for WidgetGrid

Sequences the layout components for the dashboard's user actions:

- add: EmptySpaceFinder
- resize / move: ReflowEngine (+ CompactionPass)
- remove: CompactionPass

Sizes are clamped to the widget catalog and positions to the grid here,
so the engine components only ever see valid areas.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .collision import CollisionDetector
from .compaction import CompactionPass
from .reflow import ReflowEngine
from .space import EmptySpaceFinder
from .types import GridArea, ReflowResult, Widget
from ..catalog import WIDGET_CATALOG, WidgetDefinition
from ..config import GridConfig
from ..types import CollisionPair

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Stateless orchestration of widget placement

    Every method takes the full widget collection and returns a new one;
    nothing is kept between calls.
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        catalog: Optional[Dict[str, WidgetDefinition]] = None
    ) -> None:
        """
        Initialize layout engine

        Args:
            config: Grid configuration (uses defaults if None)
            catalog: Widget catalog keyed by type (uses WIDGET_CATALOG if None)
        """
        self.config = config or GridConfig()
        self.catalog = WIDGET_CATALOG if catalog is None else catalog
        self.space_finder = EmptySpaceFinder(self.config)
        self.reflow_engine = ReflowEngine(self.config)
        self.compactor = CompactionPass(self.config)

        logger.debug(f"LayoutEngine initialized ({self.config.columns} columns)")

    def add_widget(
        self,
        widgets: Iterable[Widget],
        widget_id: str,
        widget_type: Optional[str] = None,
        size: Optional[Tuple[int, int]] = None,
        title: Optional[str] = None,
        is_locked: bool = False
    ) -> Tuple[Tuple[Widget, ...], Widget]:
        """
        Place a new widget in the first free space

        Args:
            widgets: Current layout
            widget_id: Id for the new widget (must be unique)
            widget_type: Catalog type; supplies the default size
            size: Explicit (w, h); required when widget_type is None
            title: Display title
            is_locked: Lock the new widget against automatic moves

        Returns:
            Tuple of (updated layout, new widget)
        """
        items = list(widgets)
        if any(w.id == widget_id for w in items):
            raise ValueError(f"Widget {widget_id} already exists")

        definition = self._definition(widget_type)
        if size is None:
            if widget_type is None:
                raise ValueError("Either widget_type or size is required")
            if definition is None:
                raise KeyError(f"Unknown widget type: {widget_type}")
            size = (definition.default_size.w, definition.default_size.h)

        w, h = self._clamp_size(definition, *size)
        area = self.space_finder.find_empty_space(items, w, h)
        widget = Widget(
            id=widget_id,
            grid_area=area,
            is_locked=is_locked,
            widget_type=widget_type,
            title=title
        )
        logger.info(f"Added {widget_id} at x={area.x}, y={area.y} ({w}x{h})")
        return tuple(items) + (widget,), widget

    def resize_widget(
        self,
        widgets: Iterable[Widget],
        widget_id: str,
        w: int,
        h: int
    ) -> ReflowResult:
        """
        Resize a widget in place and reflow the layout

        The size is clamped to the catalog bounds for the widget's type and
        to the grid width; the widget shifts left if it would overflow.
        """
        items = list(widgets)
        widget = self._get(items, widget_id)
        w, h = self._clamp_size(self._definition(widget.widget_type), w, h)
        area = widget.grid_area
        new_area = GridArea(x=min(area.x, self.config.columns - w), y=area.y, w=w, h=h)
        return self._reflow(widget, new_area, items)

    def move_widget(
        self,
        widgets: Iterable[Widget],
        widget_id: str,
        x: int,
        y: int
    ) -> ReflowResult:
        """Move a widget to (x, y), clamped into the grid, and reflow"""
        items = list(widgets)
        widget = self._get(items, widget_id)
        area = widget.grid_area
        new_area = GridArea(
            x=max(0, min(x, self.config.columns - area.w)),
            y=max(0, y),
            w=area.w,
            h=area.h
        )
        return self._reflow(widget, new_area, items)

    def remove_widget(self, widgets: Iterable[Widget], widget_id: str) -> Tuple[Widget, ...]:
        """Drop a widget and close the gap it leaves"""
        items = list(widgets)
        remaining = [w for w in items if w.id != widget_id]
        if len(remaining) == len(items):
            raise ValueError(f"Widget {widget_id} is not in the layout")
        logger.info(f"Removed {widget_id}")
        return self.compactor.compact(remaining)

    def compact(self, widgets: Iterable[Widget]) -> Tuple[Widget, ...]:
        return self.compactor.compact(widgets)

    def validate(self, widgets: Iterable[Widget]) -> List[CollisionPair]:
        """
        Colliding widget pairs in a layout

        An empty list means the layout is consistent. A reflow blocked by
        locked widgets can leave pairs behind; the UI should surface them.
        """
        pairs = CollisionDetector.find_collisions(widgets)
        if pairs:
            logger.warning(f"Layout has {len(pairs)} overlapping pair(s)")
        return pairs

    def _reflow(self, widget: Widget, new_area: GridArea, items: List[Widget]) -> ReflowResult:
        result = self.reflow_engine.reflow(widget, new_area, items)
        logger.info(
            f"{widget.id} -> x={new_area.x}, y={new_area.y}, {new_area.w}x{new_area.h}; "
            f"moved {result.n_moved} widget(s) {list(result.moved_widgets)}"
        )
        return result

    def _definition(self, widget_type: Optional[str]) -> Optional[WidgetDefinition]:
        if widget_type is None:
            return None
        return self.catalog.get(widget_type)

    def _clamp_size(
        self,
        definition: Optional[WidgetDefinition],
        w: int,
        h: int
    ) -> Tuple[int, int]:
        if definition is not None:
            w, h = definition.clamp(w, h)
        return max(1, min(w, self.config.columns)), max(1, h)

    @staticmethod
    def _get(items: List[Widget], widget_id: str) -> Widget:
        for widget in items:
            if widget.id == widget_id:
                return widget
        raise ValueError(f"Widget {widget_id} is not in the layout")
