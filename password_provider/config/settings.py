# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password provider settings module."""

import logging
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ._common import DOT_ENV_PATH, ENV_PREFIX, to_kebab
from ._hashing import (
    AlgorithmType,
    ProfileType,
    get_algorithm,
    get_profile,
    get_salt_length,
)

LOG = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings class."""

    log_level: str = "INFO"
    algorithm: AlgorithmType = get_algorithm()
    profile: ProfileType = get_profile()
    # argon2 rejects salts shorter than 8 bytes
    salt_length: Annotated[int, Field(ge=8, le=1024)] = get_salt_length()

    model_config = SettingsConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=True)
        return cls()

    # pylint: disable=unused-argument
    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value

        Returns
        -------
        Any
            The upper-cased log level
        """
        if isinstance(value, str):
            return value.upper()
        return value  # pragma: no cover

    @field_validator("algorithm", "profile", mode="before")
    @classmethod
    def validate_lower(cls, value: Any) -> Any:
        """Accept case-insensitive algorithm and profile names.

        Parameters
        ----------
        value : Any
            The value

        Returns
        -------
        Any
            The lower-cased value
        """
        if isinstance(value, str):
            return value.lower()
        return value  # pragma: no cover
