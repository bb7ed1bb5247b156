"""
Item export XML parser.

Decodes ``<thing type="Item">`` records from a game-data XML export into
Item objects, including the base64 icon nested under the ``icon`` field.
"""

import base64
import logging
from io import BytesIO
from pathlib import Path
from typing import Dict, List, Optional

from lxml import etree
from PIL import Image

from .item import Item

logger = logging.getLogger(__name__)


class ItemParser:
    """
    Parses item export XML files.

    Records may appear at any depth in the document. Every record is
    returned, including placeholders; filtering is left to the caller.
    """

    def parse_file(self, xml_path: Path) -> List[Item]:
        """
        Parse an item export file.

        Args:
            xml_path: Path to the XML export

        Returns:
            List of Item objects in document order

        Raises:
            FileNotFoundError: If the file doesn't exist
            etree.XMLSyntaxError: If XML is malformed
        """
        xml_path = Path(xml_path)
        if not xml_path.exists():
            raise FileNotFoundError(f"Item file not found: {xml_path}")

        logger.info(f"Parsing item XML: {xml_path}")
        tree = etree.parse(str(xml_path))
        return self._parse_root(tree.getroot())

    def parse_bytes(self, data: bytes) -> List[Item]:
        """
        Parse an item export held in memory.

        Args:
            data: Raw XML document

        Returns:
            List of Item objects in document order

        Raises:
            etree.XMLSyntaxError: If XML is malformed
        """
        return self._parse_root(etree.fromstring(data))

    def _parse_root(self, root: etree._Element) -> List[Item]:
        items = []
        for thing_elem in root.iter("thing"):
            if thing_elem.get("type") != "Item":
                continue
            items.append(self._parse_thing_element(thing_elem))

        logger.info(f"Decoded {len(items)} item records")
        return items

    def _parse_thing_element(self, thing_elem: etree._Element) -> Item:
        """
        Parse a single ``<thing type="Item">`` element.

        Args:
            thing_elem: Record element

        Returns:
            Item object
        """
        attributes: Dict[str, str] = {}
        image = None

        for field_elem in thing_elem.findall("field"):
            name = field_elem.get("name")
            if not name:
                continue

            if name == "icon":
                image = self._decode_icon(field_elem, attributes)
            else:
                attributes[name] = self._get_text(field_elem)

        return Item.from_attributes(attributes, image=image)

    def _decode_icon(
        self,
        icon_elem: etree._Element,
        attributes: Dict[str, str]
    ) -> Optional[Image.Image]:
        """
        Decode the base64 image nested in an ``icon`` field.

        Returns:
            Loaded image, or None if absent or undecodable
        """
        image_elem = None
        for candidate in icon_elem.iter("field"):
            if candidate is not icon_elem and candidate.get("name") == "image":
                image_elem = candidate
                break

        if image_elem is None:
            return None

        encoded = "".join(self._get_text(image_elem).split())
        if not encoded:
            return None

        try:
            image_bytes = base64.b64decode(encoded, validate=True)
            image = Image.open(BytesIO(image_bytes))
            # Force decode now so corrupt data fails here
            image.load()
            return image
        except Exception as e:
            record = attributes.get("name") or attributes.get("id") or "<unknown>"
            logger.warning(f"Error decoding image for item: {record} - {e}")
            return None

    @staticmethod
    def _get_text(element: etree._Element) -> str:
        """Get full text content of an element, empty if none."""
        return "".join(element.itertext())
