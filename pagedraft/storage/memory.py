"""In-process blob store, for tests and local development."""

from __future__ import annotations

from pagedraft.storage.base import BlobNotAccessible, BlobStore


class InMemoryBlobStore(BlobStore):
    """Dict-backed store. Values are copied in as immutable bytes."""

    def __init__(self) -> None:
        self._objects: dict[str, bytes] = {}

    def get(self, key: str) -> bytes:
        try:
            return self._objects[key]
        except KeyError:
            raise BlobNotAccessible(key) from None

    def put(self, key: str, data: bytes) -> None:
        self._objects[key] = bytes(data)

    def keys(self) -> list[str]:
        return sorted(self._objects)

    def __len__(self) -> int:
        return len(self._objects)
