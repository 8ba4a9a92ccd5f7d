"""Configuration management for Prompt Gacha.

This module provides centralized configuration using Pydantic Settings.
All configuration is loaded from environment variables with the
PROMPTGACHA_ prefix, allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (PROMPTGACHA_* prefix)
2. .env file in the project root
3. Default values defined in GachaConfig

Example .env file:
    PROMPTGACHA_DEFAULT_SEPARATOR=" "
    PROMPTGACHA_MAX_BATCH_SIZE=16
    PROMPTGACHA_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time
and serves as the single source of truth across the application.

Usage Example
-------------
    from promptgacha.core.config import config

    print(config.default_separator)
    print(config.max_batch_size)

Notes
-----
The default separator only applies to tokens without an explicit
separator clause.  Changing it changes how existing prompts that rely on
the default render, so leave it at a single space unless every prompt in
use was written for the new value.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GachaConfig(BaseSettings):
    """Main configuration for Prompt Gacha.

    Attributes
    ----------
    Expansion Settings:
        default_separator : str
            Text placed between chosen items when a token gives no separator
        max_batch_size : int
            Largest number of independent expansions one API request may ask for

    Server Settings:
        server_host : str
            Bind address for the API server
        server_port : int
            Port for the API server (1024-65535)

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = GachaConfig(max_batch_size=4, server_port=8000)

    Use the global configuration instance:

        >>> from promptgacha.core.config import config
        >>> config.default_separator
        ' '
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PROMPTGACHA_",
        case_sensitive=False,
    )

    # Expansion settings
    default_separator: str = Field(
        default=" ",
        description="Join separator for tokens without a separator clause",
    )
    max_batch_size: int = Field(
        default=16,
        description="Maximum number of expansions per batch request",
        ge=1,
        le=100,
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )


# Global configuration instance, loaded from PROMPTGACHA_* variables and .env.
config = GachaConfig()
