"""
settings.py

This module provides application configuration management for Radius.

Features:
- Centralized application configuration using Pydantic settings
- Constants for application-wide use
- Location of the user's default tag library

Usage:
Import appsettings for application configuration values.
"""

from pathlib import Path
from typing import Final, Optional
from appdirs import user_config_dir
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

# Console instance for rich output
console: Final[Console] = Console()

# Set up the configuration directory and file using appdirs
CONFIG_DIR: Final[Path] = Path(user_config_dir("radius", ""))
CONFIG_FILE: Final[Path] = CONFIG_DIR / "tags.json"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with RADIUS_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        prefix: Namespace that marks template tags
        tags_file: Tag library to load instead of CONFIG_FILE
        include_max_size: Largest file the include tag reads, in bytes
        include_base_path: Directory the include tag is restricted to
    """

    beQuiet: bool = False
    prefix: str = "radius"
    tags_file: Optional[Path] = None
    include_max_size: int = 1024 * 1024
    include_base_path: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="RADIUS_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="allow",  # Allow additional attributes not defined in the model
    )

    @field_validator("prefix")
    @classmethod
    def prefix_check(cls, value: str) -> str:
        """Reject empty prefixes and prefixes containing tag delimiters."""
        if not value or any(c in value for c in "<>/ \t\n"):
            raise ValueError(f"Invalid tag prefix: {value!r}")
        return value

    @field_validator("include_max_size")
    @classmethod
    def size_check(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("include_max_size must be positive")
        return value


def tagsFile_resolve(tags_file: Optional[Path] = None) -> Optional[Path]:
    """
    Determine which tag library file to load.

    Args:
        tags_file: Explicitly requested file, if any

    Returns:
        Path: The explicit file, else the configured one, else CONFIG_FILE
              if it exists; None when there is nothing to load
    """
    if tags_file:
        return tags_file
    if appsettings.tags_file:
        return appsettings.tags_file
    if CONFIG_FILE.exists():
        return CONFIG_FILE
    return None


# Create the application settings instance
appsettings: Final[App] = App()
