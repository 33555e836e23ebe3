"""Filesystem blob store: one file per key under a root directory."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pagedraft.storage.base import BlobNotAccessible, BlobStore, BlobStoreError

logger = logging.getLogger(__name__)

_DEFAULT_STORAGE_DIR = os.path.join(os.path.expanduser("~"), ".pagedraft_snapshots")


class FilesystemBlobStore(BlobStore):
    """
    Directory layout::

        {root}/
            {snapshot_id}.json

    Writes land in a temp file in ``root`` and are moved into place with
    ``os.replace``, so readers never see a half-written object.
    """

    def __init__(self, root: str | None = None) -> None:
        self._root = Path(root or _DEFAULT_STORAGE_DIR)
        self._root.mkdir(parents=True, exist_ok=True)

    @property
    def root(self) -> Path:
        return self._root

    @staticmethod
    def _is_safe_key(key: str) -> bool:
        if not key or key in (".", ".."):
            return False
        return "/" not in key and "\\" not in key and "\x00" not in key

    def _path(self, key: str) -> Path:
        return self._root / key

    def get(self, key: str) -> bytes:
        if not self._is_safe_key(key):
            raise BlobNotAccessible(key)
        try:
            return self._path(key).read_bytes()
        except (FileNotFoundError, PermissionError, IsADirectoryError):
            raise BlobNotAccessible(key) from None
        except OSError as exc:
            raise BlobStoreError(key, str(exc)) from exc

    def put(self, key: str, data: bytes) -> None:
        if not self._is_safe_key(key):
            raise BlobStoreError(key, "invalid key")

        tmp_path: str | None = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self._root, prefix=".tmp-", suffix=".part")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path(key))
            tmp_path = None
        except OSError as exc:
            logger.warning("blob write failed for %s: %s", key, exc)
            raise BlobStoreError(key, str(exc)) from exc
        finally:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except FileNotFoundError:
                    pass
