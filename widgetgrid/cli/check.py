"""Check subcommand - report overlapping and off-grid widgets"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from .common import add_layout_arguments, build_config, load_widgets
from ..layout import LayoutEngine

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """Add check subcommand parser"""
    parser = subparsers.add_parser(
        'check',
        help='Validate a layout (exit status 1 on problems)'
    )
    add_layout_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> int:
    """
    Execute check subcommand

    Returns:
        Number of problems found (0 means the layout is consistent)
    """
    logger.info("=== WidgetGrid: Check ===")

    config = build_config(args)
    widgets = load_widgets(args)

    problems = 0
    for widget in widgets:
        if not widget.grid_area.fits(config.columns):
            logger.error(f"{widget.id} extends past column {config.columns}")
            problems += 1

    for first, second in LayoutEngine(config).validate(widgets):
        logger.error(f"Overlap: {first} / {second}")
        problems += 1

    if problems:
        print(f"{problems} problem(s) found")
    else:
        print(f"OK: {len(widgets)} widgets, no overlaps")
    return problems
