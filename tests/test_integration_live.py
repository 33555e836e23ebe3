"""
Live browser tests for the region reader and edit session.

Run with:
    pytest tests/test_integration_live.py -m integration -v

Excluded from the default run because they need a Playwright-controlled
Chromium (``playwright install chromium``). No network access is needed: the
page is rendered locally and loaded with ``page.set_content``.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import Browser, Page, async_playwright

from pagedraft.core.types import FieldEdit, PreviewReference, RenderProps, ShowingLink
from pagedraft.preview import PreviewGate
from pagedraft.render import LANDING_PAGE, render_page
from pagedraft.session import EditSessionController, PlaywrightRegionReader, SaveClient
from pagedraft.snapshots import SnapshotService
from pagedraft.storage import InMemoryBlobStore

pytestmark = pytest.mark.integration


class InProcessSaveClient(SaveClient):
    """Saves straight into a SnapshotService, skipping HTTP."""

    def __init__(self, service: SnapshotService) -> None:
        self._service = service

    async def save(self, edits: list[FieldEdit]) -> str:
        return self._service.save(edits)


@pytest_asyncio.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    async with async_playwright() as pw:
        b = await pw.chromium.launch(headless=True, args=["--no-sandbox"])
        yield b
        await b.close()


@pytest_asyncio.fixture
async def page(browser: Browser) -> AsyncGenerator[Page, None]:
    ctx = await browser.new_context()
    pg = await ctx.new_page()
    await pg.set_content(render_page(LANDING_PAGE, RenderProps(is_preview=False), editing=True))
    yield pg
    await ctx.close()


async def test_reader_reports_every_region(page: Page):
    edits = await PlaywrightRegionReader(page).read()
    assert [e.id for e in edits] == [r.id for r in LANDING_PAGE.regions]
    assert edits[0] == FieldEdit("title", LANDING_PAGE.regions[0].default_text)


async def test_typed_edit_round_trips_to_preview(page: Page):
    await page.locator("#title > [contenteditable=true]").first.fill("Hello from the browser")

    store = InMemoryBlobStore()
    ctl = EditSessionController(
        PlaywrightRegionReader(page), InProcessSaveClient(SnapshotService(store))
    )
    ctl.enable_editing()
    state = await ctl.share()
    assert isinstance(state, ShowingLink)

    decision = PreviewGate(store).resolve(True, PreviewReference(state.snapshot_id))
    assert FieldEdit("title", "Hello from the browser") in decision.edits
