from pagedraft.core.errors import (
    ClientNetworkError,
    InvalidPreviewToken,
    InvalidTransition,
    PagedraftError,
    RegionReadError,
    StorageReadNotAccessible,
    StorageReadOther,
    StorageWriteError,
    ValidationError,
)
from pagedraft.core.types import (
    Editing,
    FieldEdit,
    Normal,
    Preview,
    PreviewError,
    PreviewReference,
    RenderDecision,
    RenderProps,
    SessionState,
    SessionStateKind,
    Sharing,
    ShowingError,
    ShowingLink,
    Snapshot,
    Viewing,
)
from pagedraft.preview.gate import PreviewGate
from pagedraft.preview.token import PreviewTokenSigner
from pagedraft.session.controller import EditSessionController
from pagedraft.snapshots.service import SnapshotService
from pagedraft.storage import BlobStore, FilesystemBlobStore, InMemoryBlobStore

__all__ = [
    "EditSessionController",
    "PreviewGate",
    "PreviewTokenSigner",
    "SnapshotService",
    # Storage
    "BlobStore",
    "FilesystemBlobStore",
    "InMemoryBlobStore",
    # Types
    "FieldEdit",
    "Normal",
    "Preview",
    "PreviewError",
    "PreviewReference",
    "RenderDecision",
    "RenderProps",
    "Snapshot",
    # Session states
    "Editing",
    "SessionState",
    "SessionStateKind",
    "Sharing",
    "ShowingError",
    "ShowingLink",
    "Viewing",
    # Errors
    "ClientNetworkError",
    "InvalidPreviewToken",
    "InvalidTransition",
    "PagedraftError",
    "RegionReadError",
    "StorageReadNotAccessible",
    "StorageReadOther",
    "StorageWriteError",
    "ValidationError",
]
