"""
Exceptions raised while resolving settings from configuration.
"""


class ConfigurationError(ValueError):
    """A required configuration value is missing or unusable.

    ``key`` names the configuration key at fault, when there is one.
    """

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
