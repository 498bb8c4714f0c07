"""Configuration sources, runtime settings and dependency injection."""

from .container import Container, hard_coded_consumer, setup_container
from .settings import RuntimeSettings, get_runtime_settings
from .sources import (
    BaseConfigSource,
    DotEnvConfigSource,
    EnvironmentConfigSource,
    LayeredConfigSource,
    MappingConfigSource,
)

__all__ = [
    "RuntimeSettings",
    "get_runtime_settings",
    "Container",
    "setup_container",
    "hard_coded_consumer",
    "BaseConfigSource",
    "DotEnvConfigSource",
    "EnvironmentConfigSource",
    "LayeredConfigSource",
    "MappingConfigSource",
]
