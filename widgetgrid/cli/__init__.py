"""Command-line subcommands for WidgetGrid"""
