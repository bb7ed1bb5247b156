"""
Item data structures.

Defines the value object built from one ``thing`` record of an item export.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from PIL import Image

PLACEHOLDER = "N/A"
NO_DESCRIPTION = "No description."

# Records with this name are placeholders in the source data
UNUSABLE_NAME = "."


@dataclass(frozen=True)
class Item:
    """
    Represents one decoded item record.

    ``attributes`` holds every named field of the record except the icon,
    in document order, as a read-only mapping. ``id``, ``name`` and
    ``description`` are copies of the matching attributes with placeholders
    when absent.
    """
    id: str = PLACEHOLDER
    name: str = PLACEHOLDER
    description: str = NO_DESCRIPTION
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)

    # Decoded icon, None when missing or undecodable
    image: Optional[Image.Image] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        # Private copy behind a read-only view
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @classmethod
    def from_attributes(
        cls,
        attributes: Dict[str, str],
        image: Optional[Image.Image] = None
    ) -> 'Item':
        """
        Create an Item from a record's attribute map.

        Args:
            attributes: Field name to text value, in document order
            image: Decoded icon, if any

        Returns:
            Item instance
        """
        return cls(
            id=attributes.get("id", PLACEHOLDER),
            name=attributes.get("name", PLACEHOLDER),
            description=attributes.get("description", NO_DESCRIPTION),
            attributes=attributes,
            image=image,
        )

    @property
    def display_name(self) -> str:
        """Preferred name: log-name-singular when present, else name."""
        return self.attributes.get("log-name-singular", self.name)

    @property
    def is_usable(self) -> bool:
        """False for placeholder records that are hidden from every list."""
        return self.name != UNUSABLE_NAME
