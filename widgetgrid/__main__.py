"""
WidgetGrid CLI

Command-line interface with subcommands for dashboard layout editing.
"""

import argparse
import logging
import sys
from .cli import check, compact, place, reflow


def main():
    parser = argparse.ArgumentParser(
        prog='widgetgrid',
        description='WidgetGrid: Grid layout engine for dashboard widgets'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    place.add_parser(subparsers)
    reflow.add_parser(subparsers)
    compact.add_parser(subparsers)
    check.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Execute the appropriate subcommand
    if args.command == 'place':
        place.run(args)
    elif args.command == 'reflow':
        reflow.run(args)
    elif args.command == 'compact':
        compact.run(args)
    elif args.command == 'check':
        sys.exit(1 if check.run(args) else 0)


if __name__ == "__main__":
    main()
