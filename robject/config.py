# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ROBJECT_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    STRICT_DEFINITIONS: bool = Field(
        default=False,
        description=(
            "Reject a non-type `extends` and non-mapping mixins instead of "
            "applying them mechanically"
        ),
    )
    DEFAULT_TYPE_NAME: str = Field(
        default="RObject", description="Name given to anonymous types"
    )

    SESSION_SEPARATOR: str = "|"
    SESSION_ASSIGN: str = "="

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "INFO"
    )

    # Class variable to store the singleton instance
    _instance: ClassVar[Any] = None


# Create a singleton instance
settings = AppSettings()
# Store the instance in the class variable for singleton pattern
AppSettings._instance = settings
