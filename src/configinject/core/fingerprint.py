"""
Fingerprints of resolved settings, for telling configurations apart in logs.
"""

import hashlib
import json

from pydantic import BaseModel

from ..observability.logging import get_logger

logger = get_logger(__name__)


def settings_fingerprint(*settings: BaseModel) -> str:
    """
    Hash resolved settings values deterministically.

    Args:
        settings: Settings models to include, in any order

    Returns:
        SHA256 hex digest over the sorted JSON of all values
    """
    payload = {type(s).__name__: s.model_dump(mode="json") for s in settings}
    blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
    digest = hashlib.sha256(blob).hexdigest()

    logger.debug("Fingerprinted settings", models=sorted(payload), fingerprint=digest[:16])
    return digest
