"""
WidgetGrid Configuration
Grid dimensions and engine limits for the dashboard layout engine
"""
from dataclasses import dataclass


@dataclass
class GridConfig:
    """
    Dashboard grid configuration

    The grid has a fixed column count and an unbounded row axis.
    """

    # ============================================================
    # GRID DIMENSIONS
    # ============================================================
    columns: int = 12
    """Fixed number of grid columns"""

    scan_rows: int = 100
    """Rows in the occupancy grid scanned when looking for empty space"""

    # ============================================================
    # REFLOW
    # ============================================================
    max_reflow_iterations: int = 10
    """Cap on cascading collision passes after a resize or move"""

    compact_after_reflow: bool = True
    """Pull widgets upward after every reflow to close vertical gaps"""

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError("columns must be >= 1")
        if self.scan_rows < 1:
            raise ValueError("scan_rows must be >= 1")
        if self.max_reflow_iterations < 1:
            raise ValueError("max_reflow_iterations must be >= 1")

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def default(cls) -> 'GridConfig':
        """Standard 12-column dashboard grid"""
        return cls()

    @classmethod
    def wide(cls) -> 'GridConfig':
        """
        24-column grid for wide screens

        Example:
            >>> config = GridConfig.wide()
            >>> engine = LayoutEngine(config)
        """
        config = cls()
        config.columns = 24
        config.scan_rows = 200
        return config

    @classmethod
    def strict(cls) -> 'GridConfig':
        """
        Higher cascade cap for dense layouts

        Trades a little responsiveness for fewer unresolved collisions.
        """
        config = cls()
        config.max_reflow_iterations = 50
        return config
