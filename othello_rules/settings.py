"""Configuration schema and TOML loading"""

from __future__ import annotations

import logging
import os
import pathlib
from typing import Optional, Union

import tomli
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.othello_rules"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parent / "config" / "defaults.toml"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseModel):
    """[logging] section"""
    level: str = Field("INFO", description="Root log level name")
    overwrite: bool = Field(True, description="Truncate the log file on startup")

    @field_validator("level")
    @classmethod
    def check_level(cls, v: str) -> str:
        name = v.upper()
        if name not in _LEVELS:
            raise ValueError(f"unknown log level {v!r}")
        return name

    @property
    def level_no(self) -> int:
        return getattr(logging, self.level)


class DisplaySettings(BaseModel):
    """[display] section"""
    empty: str = "."
    player1: str = "X"
    player2: str = "O"
    coordinates: bool = True

    @field_validator("empty", "player1", "player2")
    @classmethod
    def check_glyph(cls, v: str) -> str:
        if len(v) != 1 or v.isspace() or v.isdigit():
            raise ValueError(f"glyph must be one printable non-digit character, got {v!r}")
        return v

    @model_validator(mode="after")
    def check_distinct(self) -> "DisplaySettings":
        if len({self.empty, self.player1, self.player2}) != 3:
            raise ValueError("display glyphs must be distinct")
        return self


class Settings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


def ensure_config() -> bool:
    """Create the user config from the packaged defaults; True if created."""
    try:
        CONFIG_HOME.mkdir(parents=True, exist_ok=True)
        if CONFIG_PATH.exists():
            return False
        CONFIG_PATH.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot create {CONFIG_PATH}: {e}") from e
    logging.getLogger(__name__).info("Initialised configuration at %s", CONFIG_PATH)
    return True


def load_settings(path: Optional[Union[str, pathlib.Path]] = None) -> Settings:
    """Load and validate a TOML config; a missing file yields the defaults."""
    config_path = pathlib.Path(path) if path is not None else CONFIG_PATH
    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except FileNotFoundError:
        logging.getLogger(__name__).debug("No config at %s, using defaults", config_path)
        return Settings()
    except (tomli.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"{config_path}: {e}") from e

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{config_path}: {e}") from e
