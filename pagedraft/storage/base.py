"""Abstract blob store contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BlobNotAccessible(Exception):
    """The object is missing or the caller may not read it (indistinguishable)."""

    def __init__(self, key: str) -> None:
        super().__init__(f"blob {key!r} is not accessible")
        self.key = key


class BlobStoreError(Exception):
    """Any other storage failure: I/O, connection, timeout."""

    def __init__(self, key: str, detail: str) -> None:
        super().__init__(f"blob {key!r}: {detail}")
        self.key = key
        self.detail = detail


class BlobStore(ABC):
    """
    Key-addressed whole-object storage.

    A ``get`` issued after a completed ``put`` on the same key sees the full
    new content, never a partial write.
    """

    @abstractmethod
    def get(self, key: str) -> bytes: ...

    @abstractmethod
    def put(self, key: str, data: bytes) -> None: ...
