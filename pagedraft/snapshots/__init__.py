from pagedraft.snapshots.codec import dump_edits, parse_edits
from pagedraft.snapshots.service import SnapshotService, snapshot_key

__all__ = ["SnapshotService", "dump_edits", "parse_edits", "snapshot_key"]
