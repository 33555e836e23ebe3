from pagedraft.storage.base import BlobNotAccessible, BlobStore, BlobStoreError
from pagedraft.storage.filesystem import FilesystemBlobStore
from pagedraft.storage.memory import InMemoryBlobStore

__all__ = [
    "BlobNotAccessible",
    "BlobStore",
    "BlobStoreError",
    "FilesystemBlobStore",
    "InMemoryBlobStore",
    "create_blob_store",
]


def create_blob_store(settings) -> BlobStore:
    """Build the process-wide store from settings. Call once at startup."""
    backend = settings.storage_backend
    if backend == "memory":
        return InMemoryBlobStore()
    if backend == "filesystem":
        return FilesystemBlobStore(settings.storage_dir)
    raise ValueError(f"unknown storage backend {backend!r}")
