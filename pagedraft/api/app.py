from __future__ import annotations

import logging
import time

from dotenv import load_dotenv
from fastapi import FastAPI, Request

from pagedraft.config import Settings
from pagedraft.preview.gate import PreviewGate
from pagedraft.preview.token import PreviewTokenSigner
from pagedraft.snapshots.service import SnapshotService
from pagedraft.storage import BlobStore, create_blob_store

from .routes import router


def create_app(settings: Settings | None = None, store: BlobStore | None = None) -> FastAPI:
    # Ensure environment variables from .env are loaded before reading settings
    load_dotenv()
    settings = settings or Settings()

    logging.getLogger("pagedraft").setLevel(settings.log_level)
    logger = logging.getLogger("pagedraft.api")

    app = FastAPI(title="pagedraft", version="0.1.0")

    # One storage client for the life of the process
    if store is None:
        store = create_blob_store(settings)
    app.state.settings = settings
    app.state.store = store
    app.state.snapshots = SnapshotService(store)
    app.state.gate = PreviewGate(store)
    app.state.signer = PreviewTokenSigner(
        settings.preview_secret, ttl_seconds=settings.preview_ttl_seconds
    )

    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        start = time.perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            dur_ms = (time.perf_counter() - start) * 1000.0
            logger.info(
                "%s %s -> %s in %.1fms",
                request.method,
                request.url.path,
                getattr(response, "status_code", "NA"),
                dur_ms,
            )

    app.include_router(router)
    return app
