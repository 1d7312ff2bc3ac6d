"""
Layout types for WidgetGrid
Value records for the grid layout engine

All types are immutable (frozen) so the engine can never modify the
caller's widget collection; every change produces a new record.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from ..types import GridAreaRecord, WidgetRecord


@dataclass(frozen=True)
class GridArea:
    """
    Integer rectangle on the dashboard grid

    Attributes:
        x: Column of the left edge (0-based)
        y: Row of the top edge (0-based, unbounded downward)
        w: Width in columns (>= 1)
        h: Height in rows (>= 1)
    """
    x: int
    y: int
    w: int
    h: int

    def __post_init__(self) -> None:
        if self.w < 1 or self.h < 1:
            raise ValueError(f"Grid area size must be >= 1, got w={self.w}, h={self.h}")
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Grid area origin must be >= 0, got x={self.x}, y={self.y}")

    @property
    def right(self) -> int:
        """First column to the right of the area"""
        return self.x + self.w

    @property
    def bottom(self) -> int:
        """First row below the area"""
        return self.y + self.h

    def overlaps(self, other: GridArea) -> bool:
        """Axis-aligned overlap test; touching edges do not overlap"""
        return not (
            self.right <= other.x
            or other.right <= self.x
            or self.bottom <= other.y
            or other.bottom <= self.y
        )

    def fits(self, columns: int) -> bool:
        """Whether the area lies inside a grid of the given width"""
        return self.right <= columns

    def with_y(self, y: int) -> GridArea:
        """Same area moved to row y"""
        return replace(self, y=y)

    def to_dict(self) -> GridAreaRecord:
        return {'x': self.x, 'y': self.y, 'w': self.w, 'h': self.h}

    @classmethod
    def from_dict(cls, record: GridAreaRecord) -> GridArea:
        return cls(
            x=int(record['x']),
            y=int(record['y']),
            w=int(record['w']),
            h=int(record['h'])
        )


@dataclass(frozen=True)
class Widget:
    """
    A dashboard widget placed on the grid

    Attributes:
        id: Unique widget identifier within a layout
        grid_area: Current position and size
        is_visible: Whether the widget is shown (does not affect placement)
        is_locked: Locked widgets are never repositioned by the engine
        widget_type: Catalog type (e.g., 'stat-active-jobs'), if known
        title: Display title, carried through untouched
    """
    id: str
    grid_area: GridArea
    is_visible: bool = True
    is_locked: bool = False
    widget_type: Optional[str] = None
    title: Optional[str] = None

    def with_area(self, grid_area: GridArea) -> Widget:
        """Copy of this widget at a new area"""
        return replace(self, grid_area=grid_area)

    def to_dict(self) -> WidgetRecord:
        """Convert to the external record shape"""
        record: WidgetRecord = {
            'id': self.id,
            'gridArea': self.grid_area.to_dict(),
            'isVisible': self.is_visible,
            'isLocked': self.is_locked,
        }
        if self.widget_type is not None:
            record['type'] = self.widget_type
        if self.title is not None:
            record['title'] = self.title
        return record

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> Widget:
        """
        Build a widget from an external record

        Args:
            record: Dict with 'id' and 'gridArea'; 'isVisible', 'isLocked',
                    'type' and 'title' are optional

        Returns:
            Widget instance
        """
        if 'id' not in record or 'gridArea' not in record:
            raise ValueError(f"Widget record needs 'id' and 'gridArea': {record}")
        return cls(
            id=str(record['id']),
            grid_area=GridArea.from_dict(record['gridArea']),
            is_visible=bool(record.get('isVisible', True)),
            is_locked=bool(record.get('isLocked', False)),
            widget_type=record.get('type'),
            title=record.get('title')
        )


@dataclass(frozen=True)
class ReflowResult:
    """
    Outcome of a resize or move

    Attributes:
        widgets: Complete updated widget collection (input order preserved)
        success: Always True; reflow is best-effort and never fails
        moved_widgets: Ids of widgets repositioned by the engine, first move first.
                       Never contains the resized widget or a locked widget.
        iterations: Cascading collision passes performed
        converged: False when the returned layout still has overlapping widgets
                   (iteration cap reached or a locked widget in the way)
    """
    widgets: Tuple[Widget, ...]
    success: bool = True
    moved_widgets: Tuple[str, ...] = ()
    iterations: int = 0
    converged: bool = True

    @property
    def n_moved(self) -> int:
        """Number of widgets moved"""
        return len(self.moved_widgets)

    def get_widget(self, widget_id: str) -> Widget:
        """Look up a widget in the result by id"""
        for widget in self.widgets:
            if widget.id == widget_id:
                return widget
        raise KeyError(widget_id)
