# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for patternbook.

Settings are read from ``PATTERNBOOK_*`` environment variables and an optional
``.env`` file in the working directory:

    PATTERNBOOK_LOG_LEVEL=DEBUG
    PATTERNBOOK_LOG_FILE=/tmp/patternbook.log
    PATTERNBOOK_CATALOG_PATH=./my_patterns.yaml
    PATTERNBOOK_SHOW_TIMINGS=true
    PATTERNBOOK_COLOR=false

Set ``PATTERNBOOK_SKIP_ENV_FILE`` to ignore the ``.env`` file.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from patternbook.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class PatternbookSettings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PATTERNBOOK_",
        env_file=".env" if not os.getenv("PATTERNBOOK_SKIP_ENV_FILE") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    # Catalog override; None means the packaged patterns.yaml
    catalog_path: Optional[Path] = None

    # CLI output
    show_timings: bool = False
    color: bool = True
    output_width: int = Field(100, ge=40, le=400)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {v!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> PatternbookSettings:
    """Get the cached settings instance.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    try:
        settings = PatternbookSettings()
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(p) for p in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid setting {key or '<unknown>'}: {first.get('msg')}",
            config_key=key or None,
            cause=e,
        ) from e
    logger.debug(f"Settings loaded: log_level={settings.log_level}, catalog={settings.catalog_path}")
    return settings


def reset_settings() -> None:
    """Forget the cached settings (tests and hot reload)."""
    get_settings.cache_clear()


__all__ = [
    "PatternbookSettings",
    "get_settings",
    "reset_settings",
    "VALID_LOG_LEVELS",
]
