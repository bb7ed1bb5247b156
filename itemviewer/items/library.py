"""
Loaded item collection.

Holds the items of the current export file together with the list the user
is browsing. Both are replaced wholesale on every load or search.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from lxml import etree

from .item import Item
from .parser import ItemParser

logger = logging.getLogger(__name__)


class ItemLoadError(Exception):
    """Raised when an item export cannot be loaded."""
    pass


class ItemLibrary:
    """
    The item collection behind browse, search and export-all.

    Placeholder records (name ".") are counted in ``total_count`` but never
    appear in ``usable_items`` or ``visible_items``.
    """

    def __init__(self, parser: Optional[ItemParser] = None):
        self.parser = parser or ItemParser()
        self.source_path: Optional[Path] = None
        self._all_items: Tuple[Item, ...] = ()
        self._usable_items: Tuple[Item, ...] = ()
        self._visible_items: Tuple[Item, ...] = ()

    @property
    def all_items(self) -> Tuple[Item, ...]:
        """Every decoded record, placeholders included."""
        return self._all_items

    @property
    def usable_items(self) -> Tuple[Item, ...]:
        return self._usable_items

    @property
    def visible_items(self) -> Tuple[Item, ...]:
        """Current browse or search result."""
        return self._visible_items

    @property
    def total_count(self) -> int:
        return len(self._all_items)

    @property
    def is_loaded(self) -> bool:
        return self.source_path is not None

    def load(self, xml_path: Path) -> int:
        """
        Load an item export, replacing the current collection.

        Args:
            xml_path: Path to the XML export

        Returns:
            Number of usable items

        Raises:
            ItemLoadError: If the file is missing (collection unchanged) or
                cannot be parsed (collection cleared)
        """
        xml_path = Path(xml_path)
        if not xml_path.is_file():
            raise ItemLoadError(f"The selected file '{xml_path.name}' was not found.")

        try:
            items = self.parser.parse_file(xml_path)
        except (etree.XMLSyntaxError, OSError) as e:
            self._replace(None, ())
            raise ItemLoadError(f"Error loading or parsing XML file: {e}") from e

        self._replace(xml_path, tuple(items))
        logger.info(
            f"Loaded {len(self._usable_items)} usable items "
            f"({self.total_count} records) from {xml_path.name}"
        )
        return len(self._usable_items)

    def search(self, text: str) -> Tuple[Item, ...]:
        """
        Filter usable items by id or name.

        Matching is a case-insensitive substring test. Empty text resets the
        result to all usable items.

        Args:
            text: Search text

        Returns:
            The new visible items
        """
        query = (text or "").strip().lower()
        if not query:
            return self.clear_search()

        self._visible_items = tuple(
            item for item in self._usable_items
            if query in item.id.lower() or query in item.name.lower()
        )
        logger.debug(f"Found {len(self._visible_items)} items matching '{query}'")
        return self._visible_items

    def clear_search(self) -> Tuple[Item, ...]:
        self._visible_items = self._usable_items
        return self._visible_items

    def find(self, item_id: str) -> Optional[Item]:
        """First usable item with the given id."""
        for item in self._usable_items:
            if item.id == item_id:
                return item
        return None

    def _replace(self, source_path: Optional[Path], items: Tuple[Item, ...]) -> None:
        self.source_path = source_path
        self._all_items = items
        self._usable_items = tuple(item for item in items if item.is_usable)
        self._visible_items = self._usable_items
