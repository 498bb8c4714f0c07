"""
Runtime settings for the configinject CLI, via Pydantic Settings.

These govern how the demonstration runs (where application configuration is
read from, logging), not the application configuration itself, which is
read through a KeyValueConfigSource.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilityConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field("WARNING")
    service_name: str = Field("configinject")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return v.upper()


class RuntimeSettings(BaseSettings):
    """CLI settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CONFIGINJECT_", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    # Where application configuration comes from
    source: Literal["env", "file"] = Field("env", description="Configuration backend")
    env_file: Path = Field(Path(".env"), description="Key/value file used when source=file")
    key_prefix: str = Field("", description="Prefix prepended to keys when source=env")

    wait_for_input: bool = Field(True, description="Wait for a line on stdin before exiting")

    debug: bool = Field(False, description="Force DEBUG logging")


@lru_cache
def get_runtime_settings() -> RuntimeSettings:
    """Get cached runtime settings instance."""
    return RuntimeSettings()
