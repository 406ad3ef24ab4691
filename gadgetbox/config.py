# gadgetbox/config.py
"""Application configuration using pydantic-settings.

Provides a centralized Settings class for all environment variables.
Every variable is prefixed with GADGETBOX_ (e.g. GADGETBOX_GADGETS_FILE).
"""

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "GadgetBox"
GADGETS_FILE_NAME = "user_scripts.json"


def user_config_dir() -> Path:
    """Return the per-user configuration directory for this platform.

    Uses %APPDATA% on Windows, $XDG_CONFIG_HOME or ~/.config elsewhere.
    """
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        return Path(os.environ["APPDATA"])
    if os.environ.get("XDG_CONFIG_HOME"):
        return Path(os.environ["XDG_CONFIG_HOME"])
    return Path.home() / ".config"


def default_gadgets_file() -> Path:
    """Default location of the persisted gadget collection."""
    return user_config_dir() / APP_DIR_NAME / GADGETS_FILE_NAME


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings are loaded from .env file and environment variables.
    Environment variables take precedence over .env file values.
    """

    # Gadget storage
    gadgets_file: Path = Field(default_factory=default_gadgets_file)

    # Command analysis
    lexer: str = "powershell"  # Pygments lexer alias
    shell_executable: str = "pwsh"  # Used to list known commands
    known_commands_timeout: float = 30.0  # Seconds

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="GADGETBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
        case_sensitive=False,  # Allow case-insensitive env var names
    )


# Singleton instance - import this in your code
settings = Settings()
