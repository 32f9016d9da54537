"""
Tests for `MappingConfig` and the structlog setup in `log_config.py`.
"""

import json
import logging

import pytest
import structlog
from pydantic import ValidationError

from orm_mapping_schema.config import MappingConfig
from orm_mapping_schema.log_config import configure_from, configure_logging, get_logger
from orm_mapping_schema.naming import DefaultNamingStrategy, UnderscoreNamingStrategy


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ORM_MAPPING_NAMING_STRATEGY",
        "ORM_MAPPING_NAMING_CASE",
        "ORM_MAPPING_LOG_LEVEL",
        "ORM_MAPPING_JSON_LOGS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def reset_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


def test_defaults(clean_env):
    config = MappingConfig.from_env()

    assert config.naming_strategy == "default"
    assert config.naming_case == "lower"
    assert config.log_level == "INFO"
    assert config.json_logs is False
    assert isinstance(config.create_naming_strategy(), DefaultNamingStrategy)


def test_from_env(clean_env):
    clean_env.setenv("ORM_MAPPING_NAMING_STRATEGY", "Underscore")
    clean_env.setenv("ORM_MAPPING_NAMING_CASE", "UPPER")
    clean_env.setenv("ORM_MAPPING_LOG_LEVEL", "debug")
    clean_env.setenv("ORM_MAPPING_JSON_LOGS", "true")

    config = MappingConfig.from_env()

    assert config.naming_strategy == "underscore"
    assert config.log_level == "DEBUG"
    assert config.json_logs is True
    strategy = config.create_naming_strategy()
    assert isinstance(strategy, UnderscoreNamingStrategy)
    assert strategy.case == "upper"


def test_invalid_env_value_is_rejected(clean_env):
    clean_env.setenv("ORM_MAPPING_NAMING_STRATEGY", "camel")

    with pytest.raises(ValidationError):
        MappingConfig.from_env()


def test_config_is_frozen():
    config = MappingConfig()

    with pytest.raises(ValidationError):
        config.naming_strategy = "underscore"


def test_configure_logging_json(reset_logging, capsys):
    configure_logging(json_output=True, level="DEBUG")

    get_logger("orm_mapping_schema.tests").info("field_mapped", field="name")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "field_mapped"
    assert record["field"] == "name"
    assert record["level"] == "info"


def test_configure_from_config_sets_level(reset_logging):
    configure_from(MappingConfig(log_level="WARNING"))

    assert logging.getLogger().level == logging.WARNING
