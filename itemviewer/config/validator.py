"""Configuration validation."""

import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Configuration validation errors."""
    pass


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration structure and values.

    Args:
        config: Configuration dictionary from loader

    Raises:
        ValidationError: If configuration is invalid
    """
    errors = []

    for section in ('paths', 'export', 'logging'):
        if not isinstance(config.get(section, {}), dict):
            errors.append(f"{section} must be a mapping")

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )

    # Validate paths section
    errors.extend(_validate_paths(config.get('paths', {})))

    # Validate export section
    errors.extend(_validate_export(config.get('export', {})))

    # Validate logging section
    errors.extend(_validate_logging(config.get('logging', {})))

    if errors:
        raise ValidationError(
            "Configuration validation failed:\n  - " + "\n  - ".join(errors)
        )


def _validate_paths(section: Dict[str, Any]) -> List[str]:
    """Validate paths section."""
    errors = []

    items_xml = section.get('items_xml')
    if items_xml is not None and (not isinstance(items_xml, str) or not items_xml):
        errors.append("paths.items_xml must be a non-empty string path or null")

    return errors


def _validate_export(section: Dict[str, Any]) -> List[str]:
    """Validate export options section."""
    errors = []

    filename = section.get('filename', 'item_basic_export.sql')
    if not isinstance(filename, str) or not filename.strip():
        errors.append("export.filename must be a non-empty string")
    elif not filename.lower().endswith('.sql'):
        logger.warning(f"export.filename does not end in .sql: {filename}")

    return errors


def _validate_logging(section: Dict[str, Any]) -> List[str]:
    """Validate logging options section."""
    errors = []

    # Validate level
    level = section.get('level', 'INFO')
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    if not isinstance(level, str) or level.upper() not in valid_levels:
        errors.append(f"logging.level must be one of: {', '.join(valid_levels)}")

    # Validate console flag
    console = section.get('console', True)
    if not isinstance(console, bool):
        errors.append("logging.console must be a boolean")

    # Validate optional log file
    if 'file' in section and section['file'] is not None:
        if not isinstance(section['file'], str):
            errors.append("logging.file must be a string path or null")

    return errors
