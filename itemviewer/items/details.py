"""
Item detail rendering.

Turns an Item into the ordered lines shown in the detail view, decoding
skill, element, slot, flag and job codes through the lookup tables.
"""

from typing import Callable, Dict, List

from rich.text import Text

from .item import Item
from .lookup_tables import (
    combined_lsb_bitmask,
    element_info,
    enabled_flags,
    enabled_jobs,
    parse_hex,
    skill_name,
    slot_name,
)

ATTRIBUTES_HEADER = "--- Attributes ---"


def render_detail_lines(item: Item) -> List[Text]:
    """
    Render the detail view of an item.

    The header (name, id, description) is followed by one or more lines per
    attribute in insertion order. Values that fail to parse are shown raw.

    Args:
        item: Item to render

    Returns:
        List of rich Text lines; element names carry their colour
    """
    lines = [
        Text(f"Name: {item.display_name}"),
        Text(f"ID: {item.id}"),
        Text(f"Description: {item.description}"),
        Text(""),
        Text(ATTRIBUTES_HEADER),
    ]

    for key, value in item.attributes.items():
        if key == "description":
            continue
        formatter = _FORMATTERS.get(key, _format_plain)
        lines.extend(formatter(key, value))

    return lines


def render_detail_text(item: Item) -> str:
    """Plain-text detail view, one line per rendered line."""
    return "\n".join(line.plain for line in render_detail_lines(item))


def _format_plain(key: str, value: str) -> List[Text]:
    return [Text(f"{key}: {value}")]


def _format_skill(key: str, value: str) -> List[Text]:
    code = parse_hex(value)
    name = skill_name(code) if code is not None else None
    if name is None:
        return _format_plain(key, value)
    return [Text(f"{key}: {value} ({name})")]


def _format_element(key: str, value: str) -> List[Text]:
    code = parse_hex(value)
    info = element_info(code) if code is not None else None
    if info is None:
        return _format_plain(key, value)

    line = Text(f"{key}: {value} (")
    line.append(info.name, style=info.color)
    line.append(")")
    return [line]


def _format_slots(key: str, value: str) -> List[Text]:
    code = parse_hex(value)
    name = slot_name(code) if code is not None else None
    if name is None:
        return _format_plain(key, value)
    return [Text(f"{key}: {value} ({name})")]


def _format_flags(key: str, value: str) -> List[Text]:
    flags = parse_hex(value)
    if flags is None:
        return _format_plain(key, value)

    lines = [
        Text(f"{key}: {value} (Decimal: {flags})"),
        Text("  -- Flags Detail --"),
    ]
    lines.extend(Text(f"  * {name}") for name in enabled_flags(flags))
    return lines


def _format_jobs(key: str, value: str) -> List[Text]:
    jobs = parse_hex(value)
    if jobs is None:
        return _format_plain(key, value)

    job_names = enabled_jobs(jobs)
    return [
        Text(f"{key}: {value} (Combined Hex Value: {jobs})"),
        Text(f"  -- Enabled Jobs: {'/'.join(job_names)}"),
        Text(f"  -- Combined LSB Bitmask: {combined_lsb_bitmask(job_names)}"),
    ]


_FORMATTERS: Dict[str, Callable[[str, str], List[Text]]] = {
    "skill": _format_skill,
    "element": _format_element,
    "slots": _format_slots,
    "flags": _format_flags,
    "jobs": _format_jobs,
}
