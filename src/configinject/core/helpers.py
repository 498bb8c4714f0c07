"""
Typed reads over a key/value configuration source.
"""

import re

from ..observability.logging import get_logger
from .contracts import KeyValueConfigSource
from .errors import ConfigurationError

logger = get_logger(__name__)

# Optional surrounding whitespace, optional sign, ASCII digits only
_INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_int(raw: str | None) -> int | None:
    """Parse a 32-bit integer, returning None if ``raw`` is not one."""
    if raw is None or not _INTEGER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def value_or_raise(
    source: KeyValueConfigSource, name: str, message: str | None = None
) -> str:
    """Read ``name`` and fail if it is absent or blank."""
    value = source.get_value(name)
    if value is None or not value.strip():
        raise ConfigurationError(message or f"missing {name}", key=name)
    return value


def int_or_default(
    source: KeyValueConfigSource,
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    """Read ``name`` as an integer, using ``default`` when it is unusable.

    Absent, unparseable and out-of-range values all fall back silently.
    """
    raw = source.get_value(name)
    value = parse_int(raw)

    if value is None:
        reason = "absent" if raw is None else "unparseable"
    elif minimum is not None and value < minimum:
        reason = "below minimum"
    elif maximum is not None and value > maximum:
        reason = "above maximum"
    else:
        return value

    logger.debug("Using default for configuration value", key=name, reason=reason, default=default)
    return default
