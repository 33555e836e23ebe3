"""PreviewGate — decides what a render shows when preview mode may be on."""

from __future__ import annotations

import logging

from pagedraft.core.errors import StorageReadNotAccessible, StorageReadOther, ValidationError
from pagedraft.core.types import Normal, Preview, PreviewError, PreviewReference, RenderDecision
from pagedraft.snapshots.service import SnapshotService
from pagedraft.storage.base import BlobStore

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "the requested preview does not exist"
CONNECTION_ERROR_MESSAGE = "a connection error occurred, please retry"


class PreviewGate:
    """
    Fetches a snapshot for a preview render and classifies failures.

    Never raises for storage or parse failures: every outcome is a
    RenderDecision the page can render.
    """

    def __init__(self, store: BlobStore) -> None:
        self._snapshots = SnapshotService(store)

    def resolve(self, preview_flag: bool, ref: PreviewReference | None) -> RenderDecision:
        if not preview_flag:
            return Normal()

        if ref is None or not ref.snapshot_id:
            logger.info("preview requested without a snapshot id")
            return PreviewError(NOT_FOUND_MESSAGE)

        snapshot_id = ref.snapshot_id
        try:
            snapshot = self._snapshots.load(snapshot_id)
        except StorageReadNotAccessible:
            # missing and access-denied are indistinguishable here
            logger.info("preview %s not found", snapshot_id)
            return PreviewError(NOT_FOUND_MESSAGE)
        except StorageReadOther as exc:
            logger.warning("preview %s fetch failed: %s", snapshot_id, exc.detail)
            return PreviewError(CONNECTION_ERROR_MESSAGE)
        except ValidationError as exc:
            logger.warning("preview %s is corrupt: %s", snapshot_id, exc)
            return PreviewError(NOT_FOUND_MESSAGE)

        return Preview(edits=snapshot.edits, snapshot_id=snapshot_id)
