"""
Configuration for metadata construction.

Settings are plain pydantic fields with defaults; `MappingConfig.from_env` reads
overrides from the environment:

    ORM_MAPPING_NAMING_STRATEGY   default | underscore
    ORM_MAPPING_NAMING_CASE       lower | upper   (underscore strategy only)
    ORM_MAPPING_LOG_LEVEL         DEBUG | INFO | WARNING | ERROR
    ORM_MAPPING_JSON_LOGS         1/true/yes for JSON log output
"""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict

from .naming import DefaultNamingStrategy, NamingStrategy, UnderscoreNamingStrategy


class MappingConfig(BaseModel):
    """
    Settings shared by every builder session.

    Attributes:
        naming_strategy: Which naming strategy fills in unnamed tables and columns
        naming_case: Letter case used by the underscore strategy
        log_level: Level passed to `configure_logging`
        json_logs: Emit JSON instead of console-formatted logs
    """

    model_config = ConfigDict(frozen=True)

    naming_strategy: Literal["default", "underscore"] = "default"
    naming_case: Literal["lower", "upper"] = "lower"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_logs: bool = False

    @classmethod
    def from_env(cls) -> "MappingConfig":
        values: dict[str, object] = {}
        if strategy := os.getenv("ORM_MAPPING_NAMING_STRATEGY"):
            values["naming_strategy"] = strategy.lower()
        if case := os.getenv("ORM_MAPPING_NAMING_CASE"):
            values["naming_case"] = case.lower()
        if level := os.getenv("ORM_MAPPING_LOG_LEVEL"):
            values["log_level"] = level.upper()
        if json_logs := os.getenv("ORM_MAPPING_JSON_LOGS"):
            values["json_logs"] = json_logs.lower() in ("1", "true", "yes")
        return cls(**values)

    def create_naming_strategy(self) -> NamingStrategy:
        if self.naming_strategy == "underscore":
            return UnderscoreNamingStrategy(case=self.naming_case)
        return DefaultNamingStrategy()
