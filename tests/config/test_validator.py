import copy

import pytest

from itemviewer.config.loader import DEFAULT_CONFIG
from itemviewer.config.validator import validate_config, ValidationError


@pytest.fixture
def config():
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.mark.unit
def test_defaults_are_valid(config):
    validate_config(config)


@pytest.mark.unit
def test_lowercase_level_accepted(config):
    config["logging"]["level"] = "debug"
    validate_config(config)


@pytest.mark.unit
def test_errors_are_aggregated(config):
    config["logging"]["level"] = "LOUD"
    config["logging"]["console"] = "yes"
    config["export"]["filename"] = ""

    with pytest.raises(ValidationError) as exc:
        validate_config(config)

    message = str(exc.value)
    assert "logging.level" in message
    assert "logging.console" in message
    assert "export.filename" in message


@pytest.mark.unit
def test_non_mapping_section_rejected(config):
    config["export"] = "item_basic_export.sql"

    with pytest.raises(ValidationError, match="export must be a mapping"):
        validate_config(config)


@pytest.mark.unit
def test_items_xml_must_be_string(config):
    config["paths"]["items_xml"] = 42

    with pytest.raises(ValidationError, match="paths.items_xml"):
        validate_config(config)


@pytest.mark.unit
def test_log_file_must_be_string(config):
    config["logging"]["file"] = ["a.log"]

    with pytest.raises(ValidationError, match="logging.file"):
        validate_config(config)
