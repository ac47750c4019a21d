from __future__ import annotations

from pathlib import Path

from core.exceptions import StorageError


class LocalStorage:
    def __init__(self, root: Path) -> None:
        self.root = root
        if self.root.exists() and not self.root.is_dir():
            raise StorageError("Local storage root is not a directory", {"root": str(root)})
        self.root.mkdir(parents=True, exist_ok=True)

    def list_objects(self) -> list[str]:
        return sorted(
            path.relative_to(self.root).as_posix()
            for path in self.root.rglob("*")
            if path.is_file()
        )

    def get_bytes(self, key: str) -> bytes | None:
        root = self.root.resolve()
        path = (root / key).resolve()
        # keys may not escape the bucket directory
        if root not in path.parents or not path.is_file():
            return None
        return path.read_bytes()


__all__ = ["LocalStorage"]
