"""Signed preview tokens: ``base64url(payload) "." base64url(hmac)``."""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import time
from typing import Callable

from pagedraft.core.errors import InvalidPreviewToken
from pagedraft.core.types import PreviewReference


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(text: str) -> bytes:
    padded = text + "=" * (-len(text) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


class PreviewTokenSigner:
    """
    Issues and verifies preview tokens.

    The payload carries only the snapshot id (``sid``) and, when a TTL is
    configured, an expiry timestamp (``exp``). The id is trusted only after
    the signature has been checked.
    """

    def __init__(
        self,
        secret: str | bytes,
        *,
        ttl_seconds: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not secret:
            raise ValueError("preview secret must not be empty")
        self._secret = secret
        self._ttl = ttl_seconds
        self._clock = clock

    def _sign(self, body: str) -> str:
        digest = hmac.new(self._secret, body.encode("ascii"), hashlib.sha256).digest()
        return _b64encode(digest)

    def issue(self, snapshot_id: str) -> str:
        payload: dict[str, object] = {"sid": snapshot_id}
        if self._ttl is not None:
            payload["exp"] = int(self._clock()) + self._ttl
        body = _b64encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
        return f"{body}.{self._sign(body)}"

    def verify(self, token: str) -> PreviewReference:
        body, sep, signature = token.partition(".")
        if not sep or not body or not signature:
            raise InvalidPreviewToken("malformed preview token")

        try:
            expected = self._sign(body)
        except UnicodeEncodeError:
            raise InvalidPreviewToken("malformed preview token") from None
        if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
            raise InvalidPreviewToken("bad preview token signature")

        try:
            payload = json.loads(_b64decode(body))
        except (ValueError, UnicodeDecodeError):
            raise InvalidPreviewToken("unreadable preview token payload") from None
        if not isinstance(payload, dict):
            raise InvalidPreviewToken("unreadable preview token payload")

        exp = payload.get("exp")
        if exp is not None and (not isinstance(exp, int) or self._clock() >= exp):
            raise InvalidPreviewToken("preview token expired")

        snapshot_id = payload.get("sid")
        if not isinstance(snapshot_id, str) or not snapshot_id:
            raise InvalidPreviewToken("preview token has no snapshot id")
        return PreviewReference(snapshot_id=snapshot_id)
