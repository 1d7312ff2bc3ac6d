"""
I/O Readers

Loads widget layouts from JSON files.
"""

from __future__ import annotations
from typing import Any, List
from pathlib import Path
import json
import logging

from ..layout.types import Widget
from ..types import PathLike

logger = logging.getLogger(__name__)


class LayoutReader:
    """Reads widget layouts stored as JSON"""

    @staticmethod
    def parse(data: Any) -> List[Widget]:
        """
        Build widgets from decoded JSON

        Args:
            data: Either a list of widget records or a layout record
                  with a 'widgets' key

        Returns:
            List of Widget objects in file order
        """
        if isinstance(data, dict):
            if 'widgets' not in data:
                raise ValueError("Layout record has no 'widgets' key")
            records = data['widgets']
        elif isinstance(data, list):
            records = data
        else:
            raise ValueError(f"Unsupported layout data: {type(data).__name__}")
        return [Widget.from_dict(record) for record in records]

    @staticmethod
    def read(filepath: PathLike) -> List[Widget]:
        """
        Read a layout file

        Args:
            filepath: Path to JSON layout file

        Returns:
            List of Widget objects
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Layout file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        widgets = LayoutReader.parse(data)
        logger.debug(f"Read {len(widgets)} widgets from {path}")
        return widgets


def read_layout(filepath: PathLike) -> List[Widget]:
    """
    Convenience function to read a layout file

    Args:
        filepath: Path to JSON layout file

    Returns:
        List of Widget objects
    """
    return LayoutReader.read(filepath)


def load_default_layout(dashboard_type: str) -> List[Widget]:
    """
    Load the packaged preset layout for a dashboard type

    Raises:
        KeyError: If no preset exists for the dashboard type
    """
    from ..data import DEFAULT_LAYOUTS

    if dashboard_type not in DEFAULT_LAYOUTS:
        raise KeyError(
            f"No default layout for '{dashboard_type}'. "
            f"Available: {', '.join(sorted(DEFAULT_LAYOUTS))}"
        )
    return LayoutReader.read(DEFAULT_LAYOUTS[dashboard_type])
