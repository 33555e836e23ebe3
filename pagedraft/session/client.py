"""Save clients used by the edit session."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from pagedraft.core.errors import ClientNetworkError, StorageWriteError, ValidationError
from pagedraft.core.types import FieldEdit

logger = logging.getLogger(__name__)

SAVE_PATH = "/api/save"


class SaveClient(ABC):
    @abstractmethod
    async def save(self, edits: list[FieldEdit]) -> str: ...


class HttpSaveClient(SaveClient):
    """
    Posts edits to the save route and returns the new snapshot id.

    The wire format is a JSON array of ``{id, innerText}``. Failures map onto
    the pagedraft error taxonomy:

    - transport errors (connect, timeout, protocol) → ``ClientNetworkError``
    - 4xx → ``ValidationError`` with the response body
    - any other non-2xx → ``StorageWriteError`` with the response body
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def save(self, edits: list[FieldEdit]) -> str:
        body = [{"id": e.id, "innerText": e.text} for e in edits]
        url = f"{self._base_url}{SAVE_PATH}"

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(url, json=body)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("save request to %s failed: %s", url, exc)
            raise ClientNetworkError(str(exc) or type(exc).__name__) from exc

        if resp.is_success:
            try:
                snapshot_id = resp.json().get("snapshotId")
            except (ValueError, AttributeError):
                snapshot_id = None
            if not isinstance(snapshot_id, str) or not snapshot_id:
                raise ClientNetworkError("save response did not include a snapshot id")
            return snapshot_id

        if 400 <= resp.status_code < 500:
            raise ValidationError(resp.text)
        raise StorageWriteError(resp.text)
