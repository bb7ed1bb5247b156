"""
Terminal item browser.

A Textual front-end over ItemLibrary: search box, item list and a detail
pane. The selected item's SQL row can be copied to the clipboard and the
whole collection exported to the configured file.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Input, Label, ListItem, ListView, Static

from itemviewer.config.loader import get_config_value
from itemviewer.items import (
    ExportError,
    Item,
    ItemLibrary,
    SqlExporter,
    generate_sql_statement,
    render_detail_lines,
)

logger = logging.getLogger(__name__)


class ItemRow(ListItem):
    """List row bound to one item."""

    def __init__(self, record: Item):
        super().__init__(Label(Text(f"{record.id}  {record.display_name}")))
        self.record = record


class ItemViewerApp(App):
    """Browse, search and export the items of a loaded export file."""

    TITLE = "itemviewer"

    CSS = """
    #search {
        dock: top;
    }
    #items {
        width: 40%;
        border: solid $accent;
    }
    #details-pane {
        width: 60%;
        border: solid $accent;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("escape", "clear_search", "Clear Search", show=True),
        Binding("ctrl+y", "copy_sql", "Copy SQL", show=True),
        Binding("ctrl+s", "export_all", "Export All", show=True),
    ]

    def __init__(self, library: ItemLibrary, config: dict):
        """Initialize the browser.

        Args:
            library: Loaded item library
            config: Configuration dictionary
        """
        super().__init__()
        self.library = library
        self.config = config
        self.selected: Optional[Item] = None
        self.exporter = SqlExporter()

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header()
        yield Input(placeholder="Search by item name or ID", id="search")
        with Horizontal():
            yield ListView(id="items")
            with VerticalScroll(id="details-pane"):
                yield Static(id="details")
        yield Footer()

    async def on_mount(self) -> None:
        if self.library.source_path is not None:
            self.sub_title = self.library.source_path.name
        logger.debug(f"Browser opened with {len(self.library.visible_items)} items")
        await self._populate()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        await self.apply_search(event.value)

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        # Ignore stale highlights from rows removed by a new search
        if isinstance(event.item, ItemRow) and event.list_view.highlighted_child is event.item:
            self.show_item(event.item.record)

    async def apply_search(self, text: str) -> None:
        """Filter the list by id or name and show the first match."""
        results = self.library.search(text)
        if text.strip():
            self.notify(escape(f"Found {len(results)} items matching '{text.strip()}'."))
        await self._populate()

    async def action_clear_search(self) -> None:
        self.query_one("#search", Input).value = ""
        await self.apply_search("")

    def action_copy_sql(self) -> None:
        """Copy the selected item's SQL row to the clipboard."""
        if self.selected is None:
            self.notify("Please select an item to export.", severity="warning")
            return

        statement = generate_sql_statement(self.selected)
        self.copy_to_clipboard(statement)
        self.notify("SQL statement copied to clipboard.", title="Exported SQL Statement")

    def action_export_all(self) -> None:
        """Export every usable item to the configured file."""
        output_path = Path(get_config_value(self.config, 'export.filename', 'item_basic_export.sql'))
        try:
            count = self.exporter.export_items(self.library.all_items, output_path)
        except ExportError as e:
            self.notify(escape(f"An error occurred during export: {e}"), title="Export Error", severity="error")
            return

        self.notify(escape(f"Successfully exported {count} items to {output_path}"), title="Export Complete")

    def show_item(self, item: Item) -> None:
        """Render an item in the detail pane."""
        self.selected = item
        lines = render_detail_lines(item)
        lines.insert(0, Text(self._describe_icon(item), style="dim"))
        self.query_one("#details", Static).update(Text("\n").join(lines))

    async def _populate(self) -> None:
        """Rebuild the list from the library's visible items."""
        list_view = self.query_one("#items", ListView)
        await list_view.clear()

        items = self.library.visible_items
        if not items:
            self.selected = None
            self.query_one("#details", Static).update("Name: ---\nID: ---")
            return

        await list_view.extend(ItemRow(item) for item in items)
        list_view.index = 0
        self.show_item(items[0])

    @staticmethod
    def _describe_icon(item: Item) -> str:
        if item.image is None:
            return "Icon: none"
        width, height = item.image.size
        fmt = item.image.format or "image"
        return f"Icon: {width}x{height} {fmt}"
