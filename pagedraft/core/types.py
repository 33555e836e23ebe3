"""Shared types and dataclasses for pagedraft."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class FieldEdit:
    """Edited text for a single editable region."""

    id: str  # region id on the page
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "text": self.text}


@dataclass(frozen=True)
class Snapshot:
    """An immutable stored set of field edits."""

    id: str
    edits: list[FieldEdit] = field(default_factory=list)

    def as_mapping(self) -> dict[str, str]:
        """id → text, first edit for an id wins."""
        result: dict[str, str] = {}
        for edit in self.edits:
            result.setdefault(edit.id, edit.text)
        return result


@dataclass(frozen=True)
class PreviewReference:
    """Carries a snapshot id through exactly one render."""

    snapshot_id: str


# ---------------------------------------------------------------------------
# Edit session states
# ---------------------------------------------------------------------------


class SessionStateKind(str, Enum):
    VIEWING = "viewing"
    EDITING = "editing"
    SHARING = "sharing"
    SHOWING_LINK = "showing_link"
    SHOWING_ERROR = "showing_error"


@dataclass(frozen=True)
class Viewing:
    kind: SessionStateKind = field(default=SessionStateKind.VIEWING, init=False)


@dataclass(frozen=True)
class Editing:
    kind: SessionStateKind = field(default=SessionStateKind.EDITING, init=False)


@dataclass(frozen=True)
class Sharing:
    kind: SessionStateKind = field(default=SessionStateKind.SHARING, init=False)


@dataclass(frozen=True)
class ShowingLink:
    snapshot_id: str
    share_url: str = ""
    kind: SessionStateKind = field(default=SessionStateKind.SHOWING_LINK, init=False)


@dataclass(frozen=True)
class ShowingError:
    error: Exception
    kind: SessionStateKind = field(default=SessionStateKind.SHOWING_ERROR, init=False)

    @property
    def message(self) -> str:
        return str(self.error)


SessionState = Union[Viewing, Editing, Sharing, ShowingLink, ShowingError]


# ---------------------------------------------------------------------------
# Render decisions
# ---------------------------------------------------------------------------


@dataclass
class RenderProps:
    """Props handed to the page renderer."""

    is_preview: bool
    snapshot_id: str | None = None
    contents: list[FieldEdit] | None = None
    has_error: bool = False
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"isPreview": self.is_preview}
        if self.snapshot_id is not None:
            d["snapshotId"] = self.snapshot_id
        if self.contents is not None:
            d["contents"] = [e.to_dict() for e in self.contents]
        if self.has_error:
            d["hasError"] = True
            d["message"] = self.message or ""
        return d


@dataclass(frozen=True)
class Normal:
    """Render production content."""

    def to_props(self) -> RenderProps:
        return RenderProps(is_preview=False)


@dataclass(frozen=True)
class Preview:
    """Render production content with snapshot edits merged over it."""

    edits: list[FieldEdit]
    snapshot_id: str | None = None

    def to_props(self) -> RenderProps:
        return RenderProps(
            is_preview=True,
            snapshot_id=self.snapshot_id,
            contents=list(self.edits),
        )


@dataclass(frozen=True)
class PreviewError:
    """Render the preview error page with a user-facing message."""

    message: str

    def to_props(self) -> RenderProps:
        return RenderProps(is_preview=False, has_error=True, message=self.message)


RenderDecision = Union[Normal, Preview, PreviewError]
