"""
Configuration management for the exponential pageset library.
Loads pager defaults and logging options from YAML or the environment.
"""

import os
from functools import lru_cache

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from a YAML config file or the environment."""

    # Pager defaults
    default_entries_per_page: int = Field(
        default=10, gt=0, alias="PAGESET_ENTRIES_PER_PAGE"
    )
    default_first_page: int = Field(default=1, alias="PAGESET_FIRST_PAGE")
    default_exponent_base: int = Field(default=10, gt=0, alias="PAGESET_EXPONENT_BASE")
    default_exponent_max: int = Field(default=3, ge=0, alias="PAGESET_EXPONENT_MAX")
    default_pages_per_exponent: int = Field(
        default=3, gt=0, alias="PAGESET_PAGES_PER_EXPONENT"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True

    @classmethod
    def from_yaml(cls, config_path: str) -> "Settings":
        """Load settings from YAML file."""
        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}
        return cls(**config_data)


@lru_cache
def get_settings() -> Settings:
    """Get the settings instance.

    Reads the YAML file named by the CONFIG environment variable when it is
    set, otherwise falls back to environment variables and built-in defaults.

    Raises:
        FileNotFoundError: If CONFIG points to a file that doesn't exist
    """
    config_path = os.getenv("CONFIG")

    if not config_path:
        return Settings()

    if not os.path.exists(config_path):
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Please check the CONFIG environment variable points to a valid file."
        )

    return Settings.from_yaml(config_path)
