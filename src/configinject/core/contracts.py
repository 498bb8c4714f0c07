"""
Capability interfaces.

Each protocol exposes only what its consumers actually read, so a hard-coded
value and a value resolved from configuration are interchangeable.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueConfigSource(Protocol):
    """Lookup from a string key to an optional string value."""

    def get_value(self, name: str) -> str | None:
        """Return the raw value stored under ``name``, or None if absent."""
        ...


class EmailSettingsLike(Protocol):
    @property
    def default_email_address(self) -> str: ...

    @property
    def number_of_retries(self) -> int: ...


class FluxCapacitorSettingsLike(Protocol):
    @property
    def required_gigawatts(self) -> float: ...
