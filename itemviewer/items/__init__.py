"""
Item decoding package for itemviewer.

Handles parsing item export XML, rendering item details and exporting
item_basic SQL rows.
"""

from .item import Item
from .parser import ItemParser
from .details import render_detail_lines, render_detail_text
from .sql_export import SqlExporter, ExportError, generate_sql_statement
from .library import ItemLibrary, ItemLoadError

__all__ = [
    'Item',
    'ItemParser',
    'render_detail_lines',
    'render_detail_text',
    'SqlExporter',
    'ExportError',
    'generate_sql_statement',
    'ItemLibrary',
    'ItemLoadError',
]
