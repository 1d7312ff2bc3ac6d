"""
I/O Writers

Writes widget layouts as JSON and as tabular summaries.
"""

from __future__ import annotations
from typing import Iterable, Optional
from pathlib import Path
import json
import logging
import pandas as pd

from ..layout.types import Widget
from ..types import LayoutRecord, PathLike

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ['id', 'type', 'x', 'y', 'w', 'h', 'visible', 'locked', 'moved']


def layout_frame(widgets: Iterable[Widget], moved: Iterable[str] = ()) -> pd.DataFrame:
    """
    Tabular view of a layout, one row per widget

    Args:
        widgets: Widget collection
        moved: Ids to flag in the 'moved' column

    Returns:
        DataFrame sorted top-to-bottom, left-to-right
    """
    moved_ids = set(moved)
    rows = [
        {
            'id': w.id,
            'type': w.widget_type or '',
            'x': w.grid_area.x,
            'y': w.grid_area.y,
            'w': w.grid_area.w,
            'h': w.grid_area.h,
            'visible': w.is_visible,
            'locked': w.is_locked,
            'moved': w.id in moved_ids,
        }
        for w in widgets
    ]
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return frame.sort_values(['y', 'x'], kind='stable').reset_index(drop=True)


class LayoutWriter:
    """Writes widget layouts as JSON"""

    @staticmethod
    def write(
        widgets: Iterable[Widget],
        output_file: PathLike,
        layout_id: Optional[str] = None,
        name: Optional[str] = None
    ) -> None:
        """
        Write a layout record

        Args:
            widgets: Widget collection
            output_file: Path to output JSON file
            layout_id: Optional layout id stored alongside the widgets
            name: Optional layout name
        """
        record: LayoutRecord = {}
        if layout_id is not None:
            record['id'] = layout_id
        if name is not None:
            record['name'] = name
        record['widgets'] = [w.to_dict() for w in widgets]

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(record, f, indent=2)
            f.write('\n')

        logger.debug(f"Wrote {len(record['widgets'])} widgets to {output_file}")


def write_layout(widgets: Iterable[Widget], output_file: PathLike, **kwargs) -> None:
    """Convenience function for LayoutWriter.write"""
    LayoutWriter.write(widgets, output_file, **kwargs)


class TSVWriter:
    """Writes layout summaries in TSV format"""

    @staticmethod
    def write(widgets: Iterable[Widget], output_file: PathLike, moved: Iterable[str] = ()) -> None:
        """
        Write one row per widget

        Args:
            widgets: Widget collection
            output_file: Path to output TSV file
            moved: Ids to flag as moved
        """
        frame = layout_frame(widgets, moved)
        if frame.empty:
            logger.warning("No widgets to save")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(output_file, sep='\t', index=False)
        logger.debug(f"Wrote layout table to {output_file}")


def write_tsv(widgets: Iterable[Widget], output_file: PathLike, moved: Iterable[str] = ()) -> None:
    """Convenience function for TSVWriter.write"""
    TSVWriter.write(widgets, output_file, moved)
