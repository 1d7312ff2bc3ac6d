"""
Shared pytest fixtures for WidgetGrid tests
"""
import pytest
from argparse import Namespace
from pathlib import Path
import sys

from widgetgrid.layout.types import GridArea, Widget


@pytest.fixture(scope="session", autouse=True)
def setup_widgetgrid_path():
    """
    Add repository root to Python path for development mode

    Structure:
      widgetgrid-repo/              <- repo root
      └── widgetgrid/               <- package
          └── tests/
              └── conftest.py       <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


@pytest.fixture
def make_widget():
    """Factory for widgets: make_widget('a', x, y, w, h, locked=False)"""
    def _make(widget_id, x, y, w, h, locked=False, widget_type=None):
        return Widget(
            id=widget_id,
            grid_area=GridArea(x=x, y=y, w=w, h=h),
            is_locked=locked,
            widget_type=widget_type
        )
    return _make


@pytest.fixture
def cli_args(tmp_path):
    """
    Build an argparse Namespace with the options every subcommand shares
    """
    def _args(**overrides):
        values = dict(
            layout=None,
            preset=None,
            output=str(tmp_path / "out.json"),
            tsv=None,
            columns=None,
            max_iterations=None,
            debug=False,
        )
        values.update(overrides)
        return Namespace(**values)
    return _args


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running CLI subcommands"
    )
