"""Exception hierarchy for pagedraft."""

from __future__ import annotations


class PagedraftError(Exception):
    """Base class for every recoverable pagedraft failure."""


class ValidationError(PagedraftError):
    """A save payload or stored snapshot does not have the FieldEdit shape."""


class StorageWriteError(PagedraftError):
    """Writing a snapshot to the blob store failed."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class StorageReadNotAccessible(PagedraftError):
    """The snapshot is missing or access to it was denied."""


class StorageReadOther(PagedraftError):
    """Reading a snapshot failed for any reason other than access."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ClientNetworkError(PagedraftError):
    """The save request never got a usable answer from the server."""


class RegionReadError(PagedraftError):
    """The editable regions could not be read from the page."""


class InvalidPreviewToken(PagedraftError):
    """A preview token is malformed, tampered with, or expired."""


class InvalidTransition(RuntimeError):
    """An edit session call that is not legal in the current state."""

    def __init__(self, action: str, state: object) -> None:
        kind = getattr(state, "kind", state)
        super().__init__(f"cannot {action} while {getattr(kind, 'value', kind)}")
        self.action = action
        self.state = state
