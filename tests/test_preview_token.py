"""Unit tests for PreviewTokenSigner."""

from __future__ import annotations

import base64
import json

import pytest

from pagedraft.core.errors import InvalidPreviewToken
from pagedraft.core.types import PreviewReference
from pagedraft.preview import PreviewTokenSigner

SECRET = "test-secret-0123456789"


class FakeClock:
    def __init__(self, now: float = 1_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestPreviewTokenSigner:
    def setup_method(self):
        self.signer = PreviewTokenSigner(SECRET)

    def test_issue_then_verify(self):
        token = self.signer.issue("abc123")
        assert self.signer.verify(token) == PreviewReference(snapshot_id="abc123")

    def test_payload_carries_only_snapshot_id(self):
        body = self.signer.issue("abc123").split(".")[0]
        payload = json.loads(base64.urlsafe_b64decode(body + "=" * (-len(body) % 4)))
        assert payload == {"sid": "abc123"}

    def test_tampered_payload_rejected(self):
        token = self.signer.issue("abc123")
        forged_body = base64.urlsafe_b64encode(b'{"sid":"other"}').rstrip(b"=").decode()
        forged = f"{forged_body}.{token.split('.')[1]}"
        with pytest.raises(InvalidPreviewToken):
            self.signer.verify(forged)

    def test_other_secret_rejected(self):
        token = PreviewTokenSigner("another-secret-9876543210").issue("abc123")
        with pytest.raises(InvalidPreviewToken):
            self.signer.verify(token)

    @pytest.mark.parametrize("token", ["", "nodot", ".sig", "body.", "a.b.c", "ü.ß"])
    def test_malformed_tokens_rejected(self, token):
        with pytest.raises(InvalidPreviewToken):
            self.signer.verify(token)

    def test_empty_secret_refused(self):
        with pytest.raises(ValueError):
            PreviewTokenSigner("")

    # ------------------------------------------------------------------ expiry

    def test_token_valid_before_expiry(self):
        clock = FakeClock()
        signer = PreviewTokenSigner(SECRET, ttl_seconds=60, clock=clock)
        token = signer.issue("abc123")
        clock.now += 59
        assert signer.verify(token).snapshot_id == "abc123"

    def test_token_expires(self):
        clock = FakeClock()
        signer = PreviewTokenSigner(SECRET, ttl_seconds=60, clock=clock)
        token = signer.issue("abc123")
        clock.now += 60
        with pytest.raises(InvalidPreviewToken, match="expired"):
            signer.verify(token)

    def test_token_without_ttl_never_expires(self):
        clock = FakeClock()
        signer = PreviewTokenSigner(SECRET, clock=clock)
        token = signer.issue("abc123")
        clock.now += 10 ** 9
        assert signer.verify(token).snapshot_id == "abc123"
