"""I/O utilities for WidgetGrid"""

from .readers import LayoutReader, read_layout, load_default_layout
from .writers import LayoutWriter, write_layout, TSVWriter, write_tsv, layout_frame

__all__ = [
    'LayoutReader', 'read_layout', 'load_default_layout',
    'LayoutWriter', 'write_layout',
    'TSVWriter', 'write_tsv',
    'layout_frame']
