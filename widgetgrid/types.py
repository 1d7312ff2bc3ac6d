"""
Type definitions for WidgetGrid

Record shapes exchanged with the widget catalog and the persistence layer.
"""

from __future__ import annotations
from typing import TypedDict, Literal, List, Tuple, Union
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

WidgetCategory = Literal['stat', 'chart', 'activity']
"""Widget category from the catalog"""

CollisionPair = Tuple[str, str]
"""Ids of two widgets whose areas overlap"""


class GridAreaRecord(TypedDict):
    """Integer rectangle in grid cells"""
    x: int
    y: int
    w: int
    h: int


class WidgetRecord(TypedDict, total=False):
    """
    Widget as stored by the persistence layer

    Only 'id' and 'gridArea' are required; flags default to visible and unlocked.
    """
    id: str
    gridArea: GridAreaRecord
    isVisible: bool
    isLocked: bool
    type: str
    title: str


class LayoutRecord(TypedDict, total=False):
    """Stored dashboard layout"""
    id: str
    name: str
    dashboardType: str
    widgets: List[WidgetRecord]
