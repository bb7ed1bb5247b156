"""Command-line interface for itemviewer."""

import sys
import logging
import argparse
from pathlib import Path
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)

from itemviewer import __version__
from itemviewer.config.loader import load_config, get_config_value, ConfigError
from itemviewer.config.validator import validate_config, ValidationError
from itemviewer.items import (
    ExportError,
    ItemLibrary,
    ItemLoadError,
    SqlExporter,
    generate_sql_statement,
    render_detail_lines,
)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog='itemviewer',
        description='Item export viewer and item_basic SQL exporter',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List usable items
  itemviewer list items.xml

  # Search by name or ID
  itemviewer search items.xml sword

  # Show decoded details for one item
  itemviewer show items.xml 16535

  # Print the item_basic row for one item
  itemviewer sql items.xml 16535

  # Export all items
  itemviewer export items.xml -o item_basic_export.sql

  # Interactive browser
  itemviewer browse items.xml
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '--config',
        type=Path,
        metavar='PATH',
        help='Path to itemviewer.yaml (default: ./itemviewer.yaml if present)'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND', required=True)

    def add_command(name: str, help_text: str) -> argparse.ArgumentParser:
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument(
            'xml',
            type=Path,
            nargs='?',
            metavar='XML',
            help='Item export XML (default: paths.items_xml from config)'
        )
        return command

    add_command('list', 'List usable items')

    search = add_command('search', 'Search items by name or ID')
    search.add_argument('query', metavar='QUERY', help='Case-insensitive text to match')

    show = add_command('show', 'Show decoded details for an item')
    show.add_argument('item_id', metavar='ID', help='Item ID')

    sql = add_command('sql', 'Print the item_basic INSERT statement for an item')
    sql.add_argument('item_id', metavar='ID', help='Item ID')

    export = add_command('export', 'Export all usable items as item_basic INSERT statements')
    export.add_argument(
        '-o', '--output',
        type=Path,
        metavar='PATH',
        help='Output .sql file (default: export.filename from config)'
    )

    add_command('browse', 'Open the interactive item browser')

    return parser


def _setup_logging(config: dict, textual_ui=None) -> None:
    """
    Setup logging configuration from config.

    Args:
        config: Configuration dictionary
        textual_ui: Optional ItemViewerApp; replaces console output with
            notifications while the browser owns the terminal
    """
    logging_config = config.get('logging', {})

    # Get log level
    level_str = str(logging_config.get('level', 'INFO')).upper()
    level = getattr(logging, level_str, logging.INFO)

    handlers = []

    # Console handler (disabled while the browser is active)
    if logging_config.get('console', True) and not textual_ui:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if textual_ui:
        from itemviewer.ui.notify_log_handler import NotifyLogHandler
        notify_handler = NotifyLogHandler(textual_ui, level=max(level, logging.WARNING))
        notify_handler.setFormatter(logging.Formatter('%(message)s'))
        handlers.append(notify_handler)

    # File handler (if configured)
    log_file = logging_config.get('file')
    if log_file:
        try:
            log_path = Path(log_file)
            # Create parent directory if it doesn't exist
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)
        except (OSError, PermissionError) as e:
            print(f"Error: Could not create log file '{log_file}': {e}", file=sys.stderr)
            sys.exit(1)

    # Configure root logger
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )

    # Suppress PIL/Pillow debug logging (verbose chunk parsing messages)
    pil_logger = logging.getLogger('PIL')
    pil_logger.setLevel(logging.INFO)


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point for itemviewer CLI.

    Args:
        argv: Command-line arguments (default: sys.argv)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load and validate configuration
    try:
        config = load_config(args.config)
        validate_config(config)
    except (ConfigError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error loading config: {e}", file=sys.stderr)
        return 1

    _setup_logging(config)

    xml_path = args.xml or get_config_value(config, 'paths.items_xml')
    if not xml_path:
        parser.error("no XML file given and paths.items_xml is not configured")

    library = ItemLibrary()
    try:
        library.load(Path(xml_path).expanduser())
    except ItemLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return run_command(args, config, library)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


def run_command(
    args: argparse.Namespace,
    config: dict,
    library: ItemLibrary,
    console: Optional[Console] = None
) -> int:
    """
    Run a subcommand against a loaded library.

    Args:
        args: Parsed command-line arguments
        config: Loaded configuration
        library: Library with the export already loaded
        console: Rich console for output (default: stdout)

    Returns:
        Exit code
    """
    console = console or Console(highlight=False)

    if args.command in ('list', 'search'):
        items = library.search(args.query) if args.command == 'search' else library.visible_items
        for item in items:
            console.print(f"{item.id}  {item.display_name}", markup=False, soft_wrap=True)
        logger.info(f"{len(items)} of {library.total_count} records listed")
        return 0

    if args.command in ('show', 'sql'):
        item = library.find(args.item_id)
        if item is None:
            print(f"Item not found: {args.item_id}", file=sys.stderr)
            return 1
        if args.command == 'sql':
            console.print(generate_sql_statement(item), markup=False, soft_wrap=True)
        else:
            for line in render_detail_lines(item):
                console.print(line, soft_wrap=True)
        return 0

    if args.command == 'export':
        output_path = args.output or Path(get_config_value(config, 'export.filename', 'item_basic_export.sql'))
        try:
            count = SqlExporter().export_items(library.all_items, output_path)
        except ExportError as e:
            print(f"An error occurred during export:\n{e}", file=sys.stderr)
            return 1
        console.print(f"Successfully exported {count} items to: {output_path}", markup=False, soft_wrap=True)
        return 0

    if args.command == 'browse':
        from itemviewer.ui.textual_ui import ItemViewerApp

        app = ItemViewerApp(library, config)
        _setup_logging(config, textual_ui=app)
        try:
            app.run()
        finally:
            _setup_logging(config)
        return 0

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return 2


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
