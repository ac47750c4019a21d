from __future__ import annotations

from pathlib import Path

import pytest

from core.settings import get_settings
from services.api.dependencies import get_storage
from tests.utils_config import write_config


@pytest.fixture(autouse=True)
def _reset_caches():
    get_settings.cache_clear()
    get_storage.cache_clear()
    yield
    get_settings.cache_clear()
    get_storage.cache_clear()


@pytest.fixture()
def config_path(tmp_path, monkeypatch) -> Path:
    monkeypatch.delenv("STORAGE_BUCKET", raising=False)
    monkeypatch.delenv("COMPATIBILITY_VERIFIER_ENABLED", raising=False)
    path = write_config(tmp_path / "gateway.yaml", bucket_root=tmp_path / "buckets")
    monkeypatch.setenv("GATEWAY_CONFIG", str(path))
    return path
