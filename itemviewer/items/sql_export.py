"""
SQL export for the item_basic table.

Generates one INSERT statement per item and writes export-all files.
"""

import logging
from pathlib import Path
from typing import Iterable

from .item import Item
from .lookup_tables import NOT_SELABLE, parse_hex

logger = logging.getLogger(__name__)

FURNISHINGS_TERM = "@FURNISHINGS"
DEFAULT_TERM = "@NONE"


class ExportError(Exception):
    """Raised when an export file cannot be written."""
    pass


def sql_name(value: str) -> str:
    """Lower-case, spaces to underscores, apostrophes removed."""
    return value.lower().replace(" ", "_").replace("'", "")


def generate_sql_statement(item: Item) -> str:
    """
    Build the item_basic INSERT statement for an item.

    Args:
        item: Item to export

    Returns:
        Single-line SQL statement
    """
    attributes = item.attributes

    name = sql_name(attributes.get("log-name-singular", item.name))
    shortname = sql_name(attributes.get("name", item.name))
    stack_size = attributes.get("stack-size", "1")

    flags = parse_hex(attributes.get("flags")) or 0
    no_sale = 1 if flags & NOT_SELABLE else 0

    export_term = FURNISHINGS_TERM if "furnishing" in item.description.lower() else DEFAULT_TERM

    return (
        f"INSERT INTO `item_basic` VALUES ({item.id},0,'{name}','{shortname}',"
        f"{stack_size},{flags},'{export_term}',{no_sale},0);"
    )


class SqlExporter:
    """
    Writes item_basic export files.

    Placeholder items are skipped. The target is replaced atomically, so a
    failed export never leaves a half-written file behind.
    """

    def export_items(self, items: Iterable[Item], output_path: Path) -> int:
        """
        Write one INSERT statement per usable item.

        Args:
            items: Items to export
            output_path: Destination .sql file

        Returns:
            Number of statements written

        Raises:
            ExportError: If the file cannot be written
        """
        output_path = Path(output_path)
        temp_file = output_path.with_name(output_path.name + '.tmp')

        count = 0
        try:
            with open(temp_file, 'w', encoding='utf-8', newline='\n') as f:
                for item in items:
                    if not item.is_usable:
                        continue
                    f.write(generate_sql_statement(item) + "\n")
                    count += 1
            temp_file.replace(output_path)
        except OSError as e:
            temp_file.unlink(missing_ok=True)
            raise ExportError(f"Failed to write export file {output_path}: {e}") from e

        logger.info(f"Exported {count} items to {output_path}")
        return count
