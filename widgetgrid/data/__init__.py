"""
Default layout presets for WidgetGrid

Static seed layouts per dashboard type, loaded by the layout reader.
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_OVERVIEW_LAYOUT = os.path.join(DATA_DIR, 'overview_layout.json')
DEFAULT_JOBS_LAYOUT = os.path.join(DATA_DIR, 'jobs_layout.json')
DEFAULT_RPO_LAYOUT = os.path.join(DATA_DIR, 'rpo_layout.json')

# Dashboard type -> preset file
DEFAULT_LAYOUTS = {
    'overview': DEFAULT_OVERVIEW_LAYOUT,
    'jobs': DEFAULT_JOBS_LAYOUT,
    'rpo': DEFAULT_RPO_LAYOUT,
}
