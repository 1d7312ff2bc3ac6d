"""
Empty space finder

First-fit placement of a new widget on the occupancy grid.
"""

from __future__ import annotations
from typing import Iterable, Optional
import numpy as np
import logging

from .types import GridArea, Widget
from ..config import GridConfig

logger = logging.getLogger(__name__)


class EmptySpaceFinder:
    """
    Finds the first unoccupied rectangle of a given size

    Algorithm:
    1. Mark every cell covered by an existing widget on a boolean
       (scan_rows x columns) occupancy grid
    2. Scan origins row-major (top to bottom, then left to right)
    3. Return the first origin whose full rectangle is unmarked
    4. Otherwise append at column 0 directly below all existing content
    """

    def __init__(self, config: Optional[GridConfig] = None) -> None:
        """
        Initialize EmptySpaceFinder

        Args:
            config: GridConfig instance (uses defaults if None)
        """
        self.config: GridConfig = config or GridConfig()

    def build_occupancy(self, widgets: Iterable[Widget]) -> np.ndarray:
        """
        Boolean occupancy grid for the scanned row range

        Cells below scan_rows or right of the grid are clipped.
        """
        rows = self.config.scan_rows
        cols = self.config.columns
        occupied = np.zeros((rows, cols), dtype=bool)
        for widget in widgets:
            area = widget.grid_area
            if area.y >= rows:
                continue
            occupied[area.y:min(area.bottom, rows), area.x:min(area.right, cols)] = True
        return occupied

    def find_empty_space(
        self,
        widgets: Iterable[Widget],
        required_w: int,
        required_h: int
    ) -> GridArea:
        """
        Find a collision-free area of the required size

        Args:
            widgets: Existing widgets (hidden and locked widgets still occupy space)
            required_w: Width in columns
            required_h: Height in rows

        Returns:
            First-fit GridArea in row-major order, or an area appended below
            the lowest widget at column 0
        """
        if required_w < 1 or required_h < 1:
            raise ValueError(f"Required size must be >= 1, got {required_w}x{required_h}")
        if required_w > self.config.columns:
            raise ValueError(
                f"Required width {required_w} exceeds grid width {self.config.columns}"
            )

        widgets = list(widgets)
        occupied = self.build_occupancy(widgets)
        rows, cols = occupied.shape

        for row in range(rows - required_h + 1):
            for col in range(cols - required_w + 1):
                if not occupied[row:row + required_h, col:col + required_w].any():
                    logger.debug(f"Empty {required_w}x{required_h} space at x={col}, y={row}")
                    return GridArea(x=col, y=row, w=required_w, h=required_h)

        max_y = max((w.grid_area.bottom for w in widgets), default=0)
        logger.debug(f"No {required_w}x{required_h} space in {rows} rows, appending at y={max_y}")
        return GridArea(x=0, y=max_y, w=required_w, h=required_h)


def find_empty_space(
    widgets: Iterable[Widget],
    required_w: int,
    required_h: int,
    config: Optional[GridConfig] = None
) -> GridArea:
    """Convenience function for EmptySpaceFinder.find_empty_space"""
    return EmptySpaceFinder(config).find_empty_space(widgets, required_w, required_h)
