"""Compact subcommand - pull widgets up to close vertical gaps"""

from __future__ import annotations
from argparse import ArgumentParser, Namespace, _SubParsersAction
import logging

from .common import add_layout_arguments, build_config, load_widgets, emit
from ..layout import LayoutEngine

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """Add compact subcommand parser"""
    parser = subparsers.add_parser(
        'compact',
        help='Remove vertical gaps from a layout'
    )
    add_layout_arguments(parser)
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> None:
    """Execute compact subcommand"""
    logger.info("=== WidgetGrid: Compact ===")

    widgets = load_widgets(args)
    compacted = LayoutEngine(build_config(args)).compact(widgets)
    moved = [after.id for before, after in zip(widgets, compacted) if before != after]
    logger.info(f"Compaction moved {len(moved)} widgets")

    emit(args, compacted, moved)
