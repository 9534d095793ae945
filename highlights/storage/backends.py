"""
Storage backend selection
"""
import logging
from enum import Enum
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class StorageBackend(str, Enum):
    """Where collections are read from and written to"""
    REMOTE = 'remote'
    LOCAL = 'local'


def resolve_backend(config: Mapping[str, Any]) -> StorageBackend:
    """
    Pick the storage backend from configuration

    Remote mode needs a token, an owner and a repository name; anything
    less runs against local storage only.
    """
    missing = [key for key in ('GITHUB_TOKEN', 'REPO_OWNER', 'REPO_NAME') if not config.get(key)]
    if missing:
        logger.info(f"Remote storage not configured (missing {', '.join(missing)}), using local storage")
        return StorageBackend.LOCAL
    return StorageBackend.REMOTE
