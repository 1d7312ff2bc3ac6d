"""Reflow subcommand - resize or move a widget and push others out of the way"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from .common import add_layout_arguments, build_config, load_widgets, emit
from ..layout import LayoutEngine

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add reflow subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for reflow subcommand
    """
    parser = subparsers.add_parser(
        'reflow',
        help='Resize and/or move a widget, then reflow the layout'
    )
    add_layout_arguments(parser)

    parser.add_argument('--widget-id', required=True,
                        help='Widget to resize or move')
    parser.add_argument('--x', type=int, help='New column (default: unchanged)')
    parser.add_argument('--y', type=int, help='New row (default: unchanged)')
    parser.add_argument('--w', type=int, help='New width (default: unchanged)')
    parser.add_argument('--h', type=int, help='New height (default: unchanged)')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute reflow subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logger.info("=== WidgetGrid: Reflow ===")

    engine = LayoutEngine(build_config(args))
    widgets = load_widgets(args)
    moved = []

    current = next((w for w in widgets if w.id == args.widget_id), None)
    if current is None:
        raise ValueError(f"Widget {args.widget_id} is not in the layout")
    area = current.grid_area

    if args.w is not None or args.h is not None:
        result = engine.resize_widget(
            widgets, args.widget_id,
            args.w if args.w is not None else area.w,
            args.h if args.h is not None else area.h
        )
        widgets = list(result.widgets)
        moved.extend(result.moved_widgets)
        area = result.get_widget(args.widget_id).grid_area

    if args.x is not None or args.y is not None:
        result = engine.move_widget(
            widgets, args.widget_id,
            args.x if args.x is not None else area.x,
            args.y if args.y is not None else area.y
        )
        widgets = list(result.widgets)
        moved.extend(i for i in result.moved_widgets if i not in moved)

    logger.info(f"Moved widgets: {', '.join(moved) if moved else 'none'}")
    pairs = engine.validate(widgets)
    for first, second in pairs:
        logger.warning(f"Unresolved overlap: {first} / {second}")

    emit(args, widgets, moved)
