"""Settings values, capability interfaces and the resolvers that build them."""

from .consumer import Consumer
from .contracts import EmailSettingsLike, FluxCapacitorSettingsLike, KeyValueConfigSource
from .errors import ConfigurationError
from .fingerprint import settings_fingerprint
from .helpers import int_or_default, value_or_raise
from .models import EmailSettings, FluxCapacitorSettings
from .resolvers import EmailSettingsResolver, FluxCapacitorSettingsProvider

__all__ = [
    "Consumer",
    "ConfigurationError",
    "EmailSettings",
    "EmailSettingsLike",
    "EmailSettingsResolver",
    "FluxCapacitorSettings",
    "FluxCapacitorSettingsLike",
    "FluxCapacitorSettingsProvider",
    "KeyValueConfigSource",
    "int_or_default",
    "settings_fingerprint",
    "value_or_raise",
]
