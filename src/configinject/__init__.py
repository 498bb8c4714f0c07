"""
configinject - hard-coded versus injected settings.

Resolves typed settings values from an untyped, string-keyed configuration
store and hands them to a consumer that only knows them through narrow
capability interfaces.

Two kinds of settings:
- EmailSettings: read from configuration; a missing default address is fatal,
  a missing or invalid retry count falls back to 10
- FluxCapacitorSettings: compiled in, always (88 mph, 1.21 GW)

Quick Start:
    >>> from configinject import Consumer, EmailSettingsResolver, FluxCapacitorSettingsProvider
    >>> from configinject.config import MappingConfigSource
    >>>
    >>> source = MappingConfigSource({"defaultEmail": "a@b.com", "numberRetries": "3"})
    >>> email = EmailSettingsResolver().resolve(source)
    >>> Consumer(email, FluxCapacitorSettingsProvider().get()).run()
    the default e-mail is a@b.com
    I can retry an e-mail 3 times
    the flux capacitor requires 1.21 gigwatts of power

CLI:
    $ defaultEmail=a@b.com numberRetries=3 configinject --no-wait
    $ configinject --source file --env-file app.env --no-wait

Configuration:
    - CONFIGINJECT_SOURCE=env|file (where application configuration is read)
    - CONFIGINJECT_ENV_FILE=.env (key/value file for source=file)
    - CONFIGINJECT_KEY_PREFIX=APP_ (environment key prefix for source=env)
    - CONFIGINJECT_OBSERVABILITY__LOG_LEVEL=INFO (logging configuration)
"""

__version__ = "1.0.0"

from .core.consumer import Consumer
from .core.errors import ConfigurationError
from .core.models import EmailSettings, FluxCapacitorSettings
from .core.resolvers import EmailSettingsResolver, FluxCapacitorSettingsProvider

__all__ = [
    "Consumer",
    "ConfigurationError",
    "EmailSettings",
    "EmailSettingsResolver",
    "FluxCapacitorSettings",
    "FluxCapacitorSettingsProvider",
]
