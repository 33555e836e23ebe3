"""SnapshotService — mints snapshot ids and persists edits to the blob store."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable

from pagedraft.core.errors import StorageReadNotAccessible, StorageReadOther, StorageWriteError
from pagedraft.core.types import FieldEdit, Snapshot
from pagedraft.snapshots.codec import dump_edits, parse_edits
from pagedraft.storage.base import BlobNotAccessible, BlobStore, BlobStoreError

logger = logging.getLogger(__name__)


def snapshot_key(snapshot_id: str) -> str:
    return f"{snapshot_id}.json"


def _new_snapshot_id() -> str:
    return uuid.uuid4().hex


class SnapshotService:
    """
    Writes each batch of edits as a new immutable snapshot.

    Every ``save`` gets a fresh id. Nothing is deduplicated, updated in
    place, or cleaned up.
    """

    def __init__(
        self,
        store: BlobStore,
        *,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._store = store
        self._new_id = id_factory or _new_snapshot_id

    def save(self, edits: list[FieldEdit] | Any) -> str:
        """
        Persist ``edits`` and return the new snapshot id.

        Raw payloads (decoded JSON, ``str`` or ``bytes``) are validated first
        and raise ``ValidationError`` when malformed. A failed write raises
        ``StorageWriteError``.
        """
        if not (isinstance(edits, list) and all(isinstance(e, FieldEdit) for e in edits)):
            edits = parse_edits(edits)

        snapshot_id = self._new_id()
        key = snapshot_key(snapshot_id)
        try:
            self._store.put(key, dump_edits(edits))
        except BlobStoreError as exc:
            logger.warning("snapshot %s write failed: %s", snapshot_id, exc.detail)
            raise StorageWriteError(exc.detail) from exc

        logger.info("saved snapshot %s (%d edits)", snapshot_id, len(edits))
        return snapshot_id

    def load(self, snapshot_id: str) -> Snapshot:
        """Read a snapshot back. Storage errors are re-raised as read errors."""
        key = snapshot_key(snapshot_id)
        try:
            raw = self._store.get(key)
        except BlobNotAccessible as exc:
            raise StorageReadNotAccessible(f"snapshot {snapshot_id!r} is not accessible") from exc
        except BlobStoreError as exc:
            raise StorageReadOther(exc.detail) from exc
        return Snapshot(id=snapshot_id, edits=parse_edits(raw))
