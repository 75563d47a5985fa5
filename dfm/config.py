"""
Runtime configuration for DFM.

Settings are read from config/dfm.yaml (first match among the candidate
locations below) and then overridden by environment variables:
  DFM_LOG_LEVEL  -> log_level
  DFM_LOG_DIR    -> log_dir
"""

import os
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "dfm.yaml"

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    log_level: str = Field(default="WARNING", description="Root logging level")
    log_dir: Optional[str] = Field(default=None, description="Directory for rotating JSON logs; unset = console only")
    console_output: bool = Field(default=True, description="Also log to stderr")
    examples: List[str] = Field(default=["1101", "1100"], description="Inputs used when none are given")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Expected one of {_LOG_LEVELS}")
        return v


def _candidate_paths() -> List[str]:
    here = os.path.dirname(__file__)
    return [
        os.path.join(os.getcwd(), "config", CONFIG_FILENAME),
        os.path.join(here, "..", "config", CONFIG_FILENAME),
        os.path.join(here, "config", CONFIG_FILENAME),
    ]


def find_config_file() -> Optional[str]:
    for path in _candidate_paths():
        abs_path = os.path.abspath(path)
        if os.path.exists(abs_path):
            return abs_path
    return None


def load_settings(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML plus environment overrides.

    An explicit `config_path` must exist. Without one, the candidate
    locations are searched and defaults apply when none is found. A file
    whose top level is not a mapping raises ValueError.
    """
    if config_path is not None:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = find_config_file()

    data = {}
    if config_path is not None:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

    if os.environ.get("DFM_LOG_LEVEL"):
        data["log_level"] = os.environ["DFM_LOG_LEVEL"]
    if os.environ.get("DFM_LOG_DIR"):
        data["log_dir"] = os.environ["DFM_LOG_DIR"]

    return Settings(**data)
