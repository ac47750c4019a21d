from __future__ import annotations

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Response, status
from loguru import logger

from core.storage import ObjectStorage
from services.api.dependencies import get_storage


router = APIRouter(prefix="/storage")

StorageDep = Annotated[ObjectStorage, Depends(get_storage)]


def content_disposition(name: str) -> str:
    """Attachment header for ``name``; adds an RFC 5987 ``filename*`` when it is not Latin-1."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("latin-1")
    except UnicodeEncodeError:
        fallback = escaped.encode("ascii", "replace").decode("ascii")
        return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(name, safe='')}"
    return f'attachment; filename="{escaped}"'


@router.get("/objects", response_model=list[str], tags=["storage"])
def list_objects(storage: StorageDep) -> list[str]:
    return storage.list_objects()


@router.get("/download/{name:path}", tags=["storage"])
def download_object(name: str, storage: StorageDep) -> Response:
    content = storage.get_bytes(name)
    if content is None:
        logger.info("Object {name} not found", name=name)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={"Content-Disposition": content_disposition(name)},
    )


__all__ = ["content_disposition", "router"]
