"""
Layout Module for WidgetGrid
Grid layout engine for customizable dashboards

Public API:
    - LayoutEngine: Add / resize / move / remove orchestration
    - CollisionDetector: Overlap predicates
    - EmptySpaceFinder: First-fit placement
    - ReflowEngine: Push colliding widgets down after a change
    - CompactionPass: Pull widgets up to close gaps
    - GridArea, Widget, ReflowResult: Immutable value records
"""

from .engine import LayoutEngine
from .collision import CollisionDetector, has_any_collision
from .space import EmptySpaceFinder, find_empty_space
from .reflow import ReflowEngine, reflow_layout
from .compaction import CompactionPass, compact_layout
from .types import GridArea, Widget, ReflowResult

__all__ = [
    'LayoutEngine',
    'CollisionDetector',
    'has_any_collision',
    'EmptySpaceFinder',
    'find_empty_space',
    'ReflowEngine',
    'reflow_layout',
    'CompactionPass',
    'compact_layout',
    'GridArea',
    'Widget',
    'ReflowResult',
]
