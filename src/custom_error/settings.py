"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for rendering and printing reports.

    Values are read from ``CUSTOM_ERROR_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="CUSTOM_ERROR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Output
    color: Literal["auto", "always", "never"] = "auto"
    style: str = "ansi"  # style used whenever color is enabled

    # Documentation links
    docs_url_template: str = (
        "https://{package}.readthedocs.io/en/{version}/{path}.html#{anchor}"
    )
