"""Place subcommand - add a widget in the first free space"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from .common import add_layout_arguments, build_config, load_widgets, emit
from ..layout import LayoutEngine

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add place subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for place subcommand
    """
    parser = subparsers.add_parser(
        'place',
        help='Add a widget at the first free position'
    )
    add_layout_arguments(parser)

    parser.add_argument('--id', required=True, dest='widget_id',
                        help='Id of the new widget')
    parser.add_argument('--type', dest='widget_type',
                        help='Catalog widget type (supplies the default size)')
    parser.add_argument('--width', type=int,
                        help='Width in columns (default: catalog default)')
    parser.add_argument('--height', type=int,
                        help='Height in rows (default: catalog default)')
    parser.add_argument('--title', help='Widget title')
    parser.add_argument('--locked', action='store_true',
                        help='Lock the widget against automatic repositioning')

    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """
    Execute place subcommand

    Args:
        args: Parsed command-line arguments from argparse
    """
    logger.info("=== WidgetGrid: Place Widget ===")

    if (args.width is None) != (args.height is None):
        raise ValueError("--width and --height must be given together")
    size = (args.width, args.height) if args.width is not None else None

    engine = LayoutEngine(build_config(args))
    widgets, widget = engine.add_widget(
        load_widgets(args),
        args.widget_id,
        widget_type=args.widget_type,
        size=size,
        title=args.title,
        is_locked=args.locked
    )
    area = widget.grid_area
    logger.info(f"Placed {widget.id} at x={area.x}, y={area.y} ({area.w}x{area.h})")

    emit(args, widgets, moved=[widget.id])
