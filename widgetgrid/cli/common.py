"""Options and helpers shared by all subcommands"""

from __future__ import annotations
from typing import Iterable, List
from argparse import ArgumentParser, Namespace
import logging

from ..config import GridConfig
from ..io import read_layout, load_default_layout, write_layout, write_tsv, layout_frame
from ..layout.types import Widget

logger = logging.getLogger(__name__)


def add_layout_arguments(parser: ArgumentParser) -> None:
    """
    Input, output and grid options common to every subcommand

    Args:
        parser: Subcommand parser to extend
    """
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--layout', metavar='JSON_FILE',
                        help='Layout file (list of widget records or {"widgets": [...]})')
    source.add_argument('--preset', metavar='DASHBOARD',
                        help='Start from a built-in default layout (overview, jobs, rpo)')

    parser.add_argument('--output', metavar='JSON_FILE',
                        help='Write the resulting layout here (default: print a table)')
    parser.add_argument('--tsv', metavar='TSV_FILE',
                        help='Also write a tab-separated summary of the layout')

    # Grid parameters (optional, use config defaults)
    parser.add_argument('--columns', type=int,
                        help='Grid column count (default: 12)')
    parser.add_argument('--max-iterations', type=int,
                        help='Reflow cascade cap (default: 10)')

    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def build_config(args: Namespace) -> GridConfig:
    """Create config with CLI overrides"""
    config = GridConfig()
    if getattr(args, 'columns', None) is not None:
        config.columns = args.columns
    if getattr(args, 'max_iterations', None) is not None:
        config.max_reflow_iterations = args.max_iterations
    return config


def load_widgets(args: Namespace) -> List[Widget]:
    """Read the input layout from --layout or --preset"""
    if getattr(args, 'preset', None):
        widgets = load_default_layout(args.preset)
        logger.info(f"Using default '{args.preset}' layout")
    else:
        widgets = read_layout(args.layout)
        logger.info(f"Layout: {args.layout}")
    logger.info(f"Loaded {len(widgets)} widgets")
    return widgets


def emit(args: Namespace, widgets: Iterable[Widget], moved: Iterable[str] = ()) -> None:
    """Write or print the resulting layout"""
    widgets = list(widgets)
    moved = list(moved)
    if getattr(args, 'output', None):
        write_layout(widgets, args.output)
        logger.info(f"Layout written: {args.output}")
    else:
        print(layout_frame(widgets, moved).to_string(index=False))
    if getattr(args, 'tsv', None):
        write_tsv(widgets, args.tsv, moved)
        logger.info(f"Summary: {args.tsv}")
