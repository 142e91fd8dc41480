"""Settings for the filter and its logging.

Sources, strongest first: constructor arguments, ``TOCFILTER__*`` environment
variables, then a YAML file. The YAML file is looked up each time ``Settings``
is built, so a host can point at one after import:

  1. ``$TOCFILTER_CONFIG_FILE`` if set
  2. ``./tocfilter.yaml``
  3. ``tocfilter.yaml`` in the platform config dir
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE_ENV = "TOCFILTER_CONFIG_FILE"
CONFIG_FILE_NAME = "tocfilter.yaml"


def config_file_candidates() -> list[Path]:
    """Paths that may hold settings, in lookup order."""
    candidates = [
        Path(CONFIG_FILE_NAME),
        Path(platformdirs.user_config_dir("tocfilter")) / CONFIG_FILE_NAME,
    ]
    explicit = os.environ.get(CONFIG_FILE_ENV)
    if explicit:
        candidates.insert(0, Path(explicit))
    return candidates


def find_config_file() -> Path | None:
    return next((path for path in config_file_candidates() if path.is_file()), None)


class FilterSettings(BaseModel):
    name: str = "toc"


class LoggingSettings(BaseModel):
    # Off: events go to the host's own handlers for the "tocfilter" logger.
    enabled: bool = False
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOCFILTER__",
        env_nested_delimiter="__",  # TOCFILTER__LOGGING__LEVEL=DEBUG
    )

    filter: FilterSettings = FilterSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings]
        config_file = find_config_file()
        if config_file is not None:
            sources.append(
                YamlConfigSettingsSource(settings_cls, yaml_file=config_file, yaml_file_encoding="utf-8")
            )
        return tuple(sources)
