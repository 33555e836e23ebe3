"""Reads the current text of every editable region from a live page."""

from __future__ import annotations

from abc import ABC, abstractmethod

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page

from pagedraft.core.errors import RegionReadError
from pagedraft.core.types import FieldEdit

# Regions render as <div id=...><tag contenteditable="true">text</tag></div>
_READ_REGIONS_JS = """() => {
    const els = document.querySelectorAll('[id] > [contenteditable=true]');
    return Array.from(els).map((el) => ({
        id: el.parentNode.id,
        text: el.innerText,
    }));
}"""


class RegionReader(ABC):
    """Source of the edits to persist when the editor shares."""

    @abstractmethod
    async def read(self) -> list[FieldEdit]: ...


class PlaywrightRegionReader(RegionReader):
    """
    Collects ``{id, text}`` for every editable region in document order.

    Every region is reported with its current text, edited or not, so a
    snapshot is always a complete picture of the page's editable content.
    """

    def __init__(self, page: Page) -> None:
        self._page = page

    async def read(self) -> list[FieldEdit]:
        try:
            rows = await self._page.evaluate(_READ_REGIONS_JS)
        except PlaywrightError as exc:
            raise RegionReadError(exc.message or str(exc)) from exc
        edits: list[FieldEdit] = []
        for row in rows or []:
            region_id = row.get("id") or ""
            if not region_id:
                continue
            edits.append(FieldEdit(id=region_id, text=row.get("text") or ""))
        return edits
