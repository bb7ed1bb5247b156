"""
Shared pytest fixtures and utilities for the itemviewer test suite.
"""

import base64
from io import BytesIO
from pathlib import Path
from typing import Dict, Any, Callable, List, Optional
from xml.sax.saxutils import escape, quoteattr

import pytest
import yaml
from PIL import Image


def build_items_xml(records: List[Dict[str, str]], icons: Optional[Dict[int, str]] = None) -> str:
    """
    Build an item export document.

    Records are nested one level below the root to mirror real exports.

    Args:
        records: Field name to value, one dict per ``thing``
        icons: Record index to the text of its nested icon/image field
    """
    icons = icons or {}
    parts = ['<?xml version="1.0" encoding="utf-8"?>', '<export>', '<things>']
    for index, record in enumerate(records):
        parts.append('<thing type="Item">')
        if index in icons:
            parts.append(
                '<field name="icon"><field name="format">png</field>'
                f'<field name="image">{icons[index]}</field></field>'
            )
        for name, value in record.items():
            parts.append(f'<field name={quoteattr(name)}>{escape(value)}</field>')
        parts.append('</thing>')
    parts.extend(['</things>', '</export>'])
    return "\n".join(parts)


@pytest.fixture
def png_base64() -> str:
    """Base64 text of a small valid PNG."""
    buffer = BytesIO()
    Image.new("RGBA", (32, 32), (200, 30, 30, 255)).save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def sample_records() -> List[Dict[str, str]]:
    """Representative item records, including a placeholder."""
    return [
        {
            "id": "16535",
            "name": "bronze sword",
            "log-name-singular": "Bronze Sword",
            "description": "A plain blade.",
            "flags": "0x0800",
            "stack-size": "1",
            "skill": "0x003",
            "slots": "0x0003",
            "jobs": "0x00001",
        },
        {
            "id": "0",
            "name": ".",
            "description": "",
        },
        {
            "id": "86",
            "name": "san d'orian holiday tree",
            "description": "Furnishing: Adds festive cheer.",
            "flags": "0x9000",
            "stack-size": "1",
            "element": "0x0",
        },
    ]


@pytest.fixture
def make_items_xml(tmp_path: Path) -> Callable[..., Path]:
    """
    Write an item export into the temp workspace.

    Usage:
        path = make_items_xml([{"id": "1", "name": "Test"}])
    """

    def _builder(
        records: List[Dict[str, str]],
        icons: Optional[Dict[int, str]] = None,
        filename: str = "items.xml",
    ) -> Path:
        path = tmp_path / filename
        path.write_text(build_items_xml(records, icons), encoding="utf-8")
        return path

    return _builder


@pytest.fixture
def items_xml(make_items_xml, sample_records, png_base64) -> Path:
    """Sample export with an icon on the first record."""
    return make_items_xml(sample_records, icons={0: png_base64})


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Create a minimal itemviewer.yaml in a temp directory.

    Usage:
        path = make_config({"logging": {"level": "DEBUG"}})
    """

    def _builder(overrides: Dict[str, Any] = None) -> Path:
        base = {
            "export": {"filename": str(tmp_path / "export.sql")},
            "logging": {"console": False},
        }
        if overrides:
            base = merge_dicts(base, overrides)

        cfg_path = tmp_path / "itemviewer.yaml"
        cfg_path.write_text(yaml.safe_dump(base))
        return cfg_path

    return _builder


def merge_dicts(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dicts (overrides win)."""
    result = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
