"""Storage abstraction (S3/MinIO or local filesystem fallback)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from core.settings import StorageSettings


class ObjectStorage(Protocol):
    def list_objects(self) -> list[str]:  # names in backend order
        ...

    def get_bytes(self, key: str) -> bytes | None:  # None when absent
        ...


def build_storage(settings: "StorageSettings") -> ObjectStorage:
    """Create the backend selected by ``storage.backend``."""
    if settings.backend == "local":
        from core.storage.local import LocalStorage

        return LocalStorage(settings.local_root / settings.bucket)

    from core.storage.s3 import S3Storage

    return S3Storage(
        settings.bucket,
        prefix=settings.prefix,
        region=settings.region,
        endpoint_url=settings.endpoint_url,
    )


__all__ = ["ObjectStorage", "build_storage"]
