"""WidgetGrid: Grid layout engine for customizable dashboards"""

from .config import GridConfig
from .catalog import WIDGET_CATALOG, WidgetDefinition, WidgetSize, get_definition
from .layout import (
    LayoutEngine,
    CollisionDetector,
    EmptySpaceFinder,
    ReflowEngine,
    CompactionPass,
    GridArea,
    Widget,
    ReflowResult,
    find_empty_space,
    reflow_layout,
    compact_layout,
    has_any_collision,
)
from . import io

__version__ = "0.1.0"
__all__ = [
    "GridConfig", "WIDGET_CATALOG", "WidgetDefinition", "WidgetSize", "get_definition",
    "LayoutEngine", "CollisionDetector", "EmptySpaceFinder", "ReflowEngine", "CompactionPass",
    "GridArea", "Widget", "ReflowResult",
    "find_empty_space", "reflow_layout", "compact_layout", "has_any_collision", "io"]
