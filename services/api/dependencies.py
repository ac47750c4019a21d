from __future__ import annotations

from functools import lru_cache

from core.settings import get_settings
from core.storage import ObjectStorage, build_storage


@lru_cache(maxsize=1)
def get_storage() -> ObjectStorage:
    """Process-wide storage backend built from ``storage.*`` settings."""
    return build_storage(get_settings().storage)


__all__ = ["get_storage"]
