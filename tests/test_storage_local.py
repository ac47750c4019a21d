from __future__ import annotations

import pytest

from core.exceptions import StorageError
from core.settings import StorageSettings
from core.storage import build_storage
from core.storage.local import LocalStorage
from core.storage.s3 import S3Storage


def test_empty_bucket_lists_nothing(tmp_path):
    storage = LocalStorage(tmp_path / "bucket")
    assert storage.list_objects() == []


def test_lists_nested_objects_sorted(tmp_path):
    root = tmp_path / "bucket"
    (root / "nested").mkdir(parents=True)
    (root / "b.txt").write_bytes(b"b")
    (root / "nested" / "a.txt").write_bytes(b"a")
    storage = LocalStorage(root)

    assert storage.list_objects() == ["b.txt", "nested/a.txt"]


def test_get_bytes(tmp_path):
    storage = LocalStorage(tmp_path)
    (tmp_path / "doc.pdf").write_bytes(b"%PDF")

    assert storage.get_bytes("doc.pdf") == b"%PDF"
    assert storage.get_bytes("missing") is None


def test_get_bytes_rejects_escaping_keys(tmp_path):
    (tmp_path / "secret.txt").write_text("nope")
    storage = LocalStorage(tmp_path / "bucket")

    assert storage.get_bytes("../secret.txt") is None


def test_root_must_be_directory(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(StorageError):
        LocalStorage(target)


def test_build_storage_local(tmp_path):
    settings = StorageSettings(bucket="media", backend="local", local_root=tmp_path)
    storage = build_storage(settings)

    assert isinstance(storage, LocalStorage)
    assert storage.root == tmp_path / "media"


def test_build_storage_s3():
    settings = StorageSettings(bucket="media", prefix="exports", region="eu-central-1")
    storage = build_storage(settings)

    assert isinstance(storage, S3Storage)
    assert storage.bucket == "media"
    assert storage.prefix == "exports"
