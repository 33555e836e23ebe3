from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, RedirectResponse
from starlette.concurrency import run_in_threadpool

from pagedraft.core.errors import InvalidPreviewToken, StorageWriteError, ValidationError
from pagedraft.core.types import Normal
from pagedraft.render import LANDING_PAGE, render_page

logger = logging.getLogger(__name__)

router = APIRouter()


def _home_url(request: Request) -> str:
    # Relative when no public base url is configured
    return request.app.state.settings.public_base_url.rstrip("/") + "/"


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.post("/api/save")
async def save_snapshot(request: Request):
    # Body is a JSON array of {id, innerText}; parsed by the service
    body = await request.body()
    service = request.app.state.snapshots
    try:
        # Blob store calls block, keep them off the event loop
        snapshot_id = await run_in_threadpool(service.save, body)
    except ValidationError as exc:
        return PlainTextResponse(str(exc), status_code=400)
    except StorageWriteError as exc:
        return PlainTextResponse(exc.detail, status_code=500)
    return JSONResponse({"snapshotId": snapshot_id})


@router.get("/api/share/{snapshot_id}")
async def enter_preview(snapshot_id: str, request: Request):
    settings = request.app.state.settings
    token = request.app.state.signer.issue(snapshot_id)
    resp = RedirectResponse(_home_url(request), status_code=307)
    resp.set_cookie(
        settings.preview_cookie_name,
        token,
        max_age=settings.preview_ttl_seconds,
        path="/",
        httponly=True,
        samesite="lax",
    )
    return resp


@router.get("/api/exit")
async def exit_preview(request: Request):
    resp = RedirectResponse(_home_url(request), status_code=307)
    resp.delete_cookie(request.app.state.settings.preview_cookie_name, path="/")
    return resp


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, edit: bool = False):
    settings = request.app.state.settings
    gate = request.app.state.gate
    token = request.cookies.get(settings.preview_cookie_name)

    stale_cookie = False
    if token:
        try:
            ref = request.app.state.signer.verify(token)
        except InvalidPreviewToken as exc:
            logger.info("ignoring preview cookie: %s", exc)
            decision = Normal()
            stale_cookie = True
        else:
            decision = await run_in_threadpool(gate.resolve, True, ref)
    else:
        decision = gate.resolve(False, None)

    resp = HTMLResponse(render_page(LANDING_PAGE, decision.to_props(), editing=edit))
    if stale_cookie:
        resp.delete_cookie(settings.preview_cookie_name, path="/")
    return resp
