"""
Key/value configuration sources.

Every source answers ``get_value(name) -> str | None`` over some external
store. Sources never parse or validate; that is left to the resolvers.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from ..core.contracts import KeyValueConfigSource
from ..observability.logging import get_logger

logger = get_logger(__name__)


class BaseConfigSource(ABC):
    """Common base for the bundled configuration sources."""

    @abstractmethod
    def get_value(self, name: str) -> str | None:
        """Return the raw value stored under ``name``, or None if absent."""

    def get(self, name: str) -> str | None:
        return self.get_value(name)


class MappingConfigSource(BaseConfigSource):
    """Source backed by an in-memory mapping."""

    def __init__(self, values: Mapping[str, str | None] | None = None):
        self._values = dict(values or {})

    def get_value(self, name: str) -> str | None:
        return self._values.get(name)

    def __repr__(self) -> str:
        return f"MappingConfigSource(keys={sorted(self._values)})"


class EnvironmentConfigSource(BaseConfigSource):
    """Source backed by process environment variables.

    Key ``name`` is looked up as ``prefix + name``; case is preserved.
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None):
        self.prefix = prefix
        self._environ = os.environ if environ is None else environ

    def get_value(self, name: str) -> str | None:
        return self._environ.get(f"{self.prefix}{name}")

    def __repr__(self) -> str:
        return f"EnvironmentConfigSource(prefix={self.prefix!r})"


class DotEnvConfigSource(BaseConfigSource):
    """Source backed by a ``.env`` style file, read once at construction.

    A missing file behaves as an empty store.
    """

    def __init__(self, path: str | Path = ".env"):
        self.path = Path(path)
        if self.path.is_file():
            self._values = dict(dotenv_values(self.path))
            logger.debug("Loaded config file", path=str(self.path), keys=len(self._values))
        else:
            self._values = {}
            logger.warning("Config file not found, treating as empty", path=str(self.path))

    def get_value(self, name: str) -> str | None:
        return self._values.get(name)

    def __repr__(self) -> str:
        return f"DotEnvConfigSource(path={str(self.path)!r})"


class LayeredConfigSource(BaseConfigSource):
    """Stack of sources; the first one holding a value for a key wins.

    Put a defaults layer last to supply values the real configuration omits.
    """

    def __init__(self, *sources: KeyValueConfigSource):
        if not sources:
            raise ValueError("LayeredConfigSource needs at least one source")
        self.sources = sources

    def get_value(self, name: str) -> str | None:
        for source in self.sources:
            value = source.get_value(name)
            if value is not None:
                return value
        return None

    def __repr__(self) -> str:
        return f"LayeredConfigSource({', '.join(repr(s) for s in self.sources)})"
