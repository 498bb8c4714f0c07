"""
Settings resolvers: turn configuration into typed settings values.

Two flavours share the same capability interfaces:
- EmailSettingsResolver reads an external key/value source and validates it
- FluxCapacitorSettingsProvider hands out a compiled-in constant
"""

from pydantic import ValidationError

from ..observability.logging import get_logger
from .contracts import KeyValueConfigSource
from .errors import ConfigurationError
from .helpers import int_or_default, value_or_raise
from .models import EmailSettings, FluxCapacitorSettings

logger = get_logger(__name__)

DEFAULT_EMAIL_KEY = "defaultEmail"
NUMBER_RETRIES_KEY = "numberRetries"
DEFAULT_NUMBER_OF_RETRIES = 10

REQUIRED_SPEED_IN_MPH = 88
REQUIRED_GIGAWATTS = 1.21


class EmailSettingsResolver:
    """Resolve EmailSettings from a key/value configuration source.

    A missing default address is fatal; a missing or invalid retry count
    falls back to DEFAULT_NUMBER_OF_RETRIES.
    """

    def __init__(self, source: KeyValueConfigSource | None = None):
        self.source = source

    def resolve(self, source: KeyValueConfigSource) -> EmailSettings:
        default_email = value_or_raise(source, DEFAULT_EMAIL_KEY, "missing default email")
        retries = int_or_default(
            source, NUMBER_RETRIES_KEY, DEFAULT_NUMBER_OF_RETRIES, minimum=0
        )

        try:
            settings = EmailSettings(
                default_email_address=default_email, number_of_retries=retries
            )
        except ValidationError as e:
            raise ConfigurationError(f"invalid email settings: {e}") from e

        logger.info(
            "Resolved email settings",
            source=repr(source),
            retries=settings.number_of_retries,
        )
        return settings

    def get_settings(self) -> EmailSettings:
        """Resolve against the source given at construction."""
        if self.source is None:
            raise ConfigurationError("no configuration source bound to resolver")
        return self.resolve(self.source)


class FluxCapacitorSettingsProvider:
    """Everyone knows these values are constant, so they are compiled in."""

    def get(self) -> FluxCapacitorSettings:
        return FluxCapacitorSettings(
            required_speed_in_mph=REQUIRED_SPEED_IN_MPH,
            required_gigawatts=REQUIRED_GIGAWATTS,
        )

    get_settings = get
