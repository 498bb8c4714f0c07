"""
Dependency injection container and the two object graphs of the demo.

The hard-coded graph is built by hand; the injected graph is described as
factories and resolved on demand, so the consumer never learns where its
settings came from.
"""

from typing import Any

from ..core.consumer import Consumer
from ..core.contracts import KeyValueConfigSource
from ..core.models import EmailSettings, FluxCapacitorSettings
from ..core.resolvers import EmailSettingsResolver, FluxCapacitorSettingsProvider
from ..observability.logging import get_logger
from .settings import RuntimeSettings, get_runtime_settings
from .sources import DotEnvConfigSource, EnvironmentConfigSource

logger = get_logger(__name__)


class Container:
    """Name-keyed dependency injection container with lazy factories."""

    def __init__(self, settings: RuntimeSettings | None = None):
        self.settings = settings or get_runtime_settings()
        self._services: dict[str, Any] = {}
        self._factories: dict[str, Any] = {}
        self._singletons: dict[str, Any] = {}

    def register_factory(self, name: str, factory: Any) -> None:
        """Register a factory function ``factory(container)`` for a service."""
        self._factories[name] = factory
        self._services.pop(name, None)

    def register_singleton(self, name: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[name] = instance

    def get(self, name: str, default: Any = None) -> Any:
        """Get a service by name, building it from its factory on first use."""
        if name in self._singletons:
            return self._singletons[name]

        if name in self._services:
            return self._services[name]

        if name in self._factories:
            instance = self._factories[name](self)
            self._services[name] = instance
            logger.debug("Built service", service=name, type=type(instance).__name__)
            return instance

        return default

    def require(self, name: str) -> Any:
        """Get a service by name, failing if nothing is registered under it."""
        if not self.has(name):
            raise LookupError(f"No service registered as {name!r}")
        return self.get(name)

    def has(self, name: str) -> bool:
        return name in self._singletons or name in self._factories


def build_config_source(settings: RuntimeSettings) -> KeyValueConfigSource:
    """Pick the configuration backend named by the runtime settings."""
    if settings.source == "file":
        return DotEnvConfigSource(settings.env_file)
    return EnvironmentConfigSource(prefix=settings.key_prefix)


def setup_container(
    settings: RuntimeSettings | None = None, source: KeyValueConfigSource | None = None
) -> Container:
    """Setup container with the injected object graph."""
    container = Container(settings)
    container.register_singleton(
        "config_source", source if source is not None else build_config_source(container.settings)
    )

    def _flux_capacitor_settings_factory(c: Container) -> FluxCapacitorSettings:
        return FluxCapacitorSettingsProvider().get()

    def _email_settings_factory(c: Container) -> EmailSettings:
        return EmailSettingsResolver(c.require("config_source")).get_settings()

    def _consumer_factory(c: Container) -> Consumer:
        return Consumer(c.require("email_settings"), c.require("flux_capacitor_settings"))

    container.register_factory("flux_capacitor_settings", _flux_capacitor_settings_factory)
    container.register_factory("email_settings", _email_settings_factory)
    container.register_factory("consumer", _consumer_factory)

    return container


def hard_coded_consumer() -> Consumer:
    """Build the consumer with settings wired in by hand."""
    return Consumer(
        EmailSettings(default_email_address="sean@sean.com", number_of_retries=3),
        FluxCapacitorSettings(required_speed_in_mph=88, required_gigawatts=1.21),
    )
