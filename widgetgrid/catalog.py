"""
Widget catalog

Default, minimum and maximum sizes per widget type. The engine itself
never consults the catalog; the layout controller clamps requested sizes
before handing them to the reflow engine.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .types import WidgetCategory


@dataclass(frozen=True)
class WidgetSize:
    """Width and height in grid cells"""
    w: int
    h: int


@dataclass(frozen=True)
class WidgetDefinition:
    """
    Catalog entry for one widget type

    Attributes:
        widget_type: Catalog key (e.g., 'chart-hiring-trends')
        name: Human-readable name
        category: 'stat', 'chart' or 'activity'
        default_size: Size used when the widget is added
        min_size: Smallest allowed size
        max_size: Largest allowed size, or None for unbounded
    """
    widget_type: str
    name: str
    category: WidgetCategory
    default_size: WidgetSize
    min_size: WidgetSize
    max_size: Optional[WidgetSize] = None

    def clamp(self, w: int, h: int) -> Tuple[int, int]:
        """Clamp a requested size into [min_size, max_size]"""
        w = max(w, self.min_size.w)
        h = max(h, self.min_size.h)
        if self.max_size is not None:
            w = min(w, self.max_size.w)
            h = min(h, self.max_size.h)
        return w, h


_STAT = dict(
    category='stat',
    default_size=WidgetSize(3, 1),
    min_size=WidgetSize(2, 1),
    max_size=WidgetSize(6, 1),
)

_CHART = dict(
    category='chart',
    default_size=WidgetSize(6, 2),
    min_size=WidgetSize(4, 2),
    max_size=WidgetSize(12, 4),
)


def _define(widget_type: str, name: str, sizes: dict) -> WidgetDefinition:
    return WidgetDefinition(widget_type=widget_type, name=name, **sizes)


WIDGET_CATALOG: Dict[str, WidgetDefinition] = {
    d.widget_type: d for d in [
        # Jobs
        _define('stat-active-jobs', 'Active Jobs', _STAT),
        _define('stat-total-candidates', 'Total Candidates', _STAT),
        _define('stat-applications', 'Applications', _STAT),
        _define('stat-hired', 'Hired This Month', _STAT),
        _define('chart-hiring-trends', 'Hiring Trends', _CHART),
        _define('chart-application-funnel', 'Application Funnel', _CHART),
        _define('chart-job-distribution', 'Job Distribution', _CHART),
        _define('chart-source-of-hire', 'Source of Hire', _CHART),
        # Candidates
        _define('stat-active-candidates', 'Active Candidates', _STAT),
        _define('stat-placed-candidates', 'Placed Candidates', _STAT),
        _define('chart-candidate-pipeline', 'Candidate Pipeline', _CHART),
        # AI interviews
        _define('stat-ai-interview-total', 'AI Interviews', _STAT),
        _define('chart-ai-interview-performance', 'AI Interview Performance', _CHART),
        # Shared
        WidgetDefinition(
            widget_type='feedback-dashboard',
            name='Collaborative Feedback',
            category='activity',
            default_size=WidgetSize(6, 3),
            min_size=WidgetSize(4, 2),
        ),
        WidgetDefinition(
            widget_type='activity-feed',
            name='Recent Activity',
            category='activity',
            default_size=WidgetSize(12, 2),
            min_size=WidgetSize(6, 2),
            max_size=WidgetSize(12, 4),
        ),
    ]
}


def get_definition(widget_type: str) -> WidgetDefinition:
    """
    Look up a catalog entry

    Raises:
        KeyError: If the widget type is not in the catalog
    """
    try:
        return WIDGET_CATALOG[widget_type]
    except KeyError:
        raise KeyError(f"Unknown widget type: {widget_type}") from None
