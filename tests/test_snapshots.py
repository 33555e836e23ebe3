"""Unit tests for the edit codec and SnapshotService."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from pagedraft.core.errors import (
    StorageReadNotAccessible,
    StorageReadOther,
    StorageWriteError,
    ValidationError,
)
from pagedraft.core.types import FieldEdit
from pagedraft.snapshots import SnapshotService, dump_edits, parse_edits, snapshot_key
from pagedraft.storage import BlobNotAccessible, BlobStoreError, InMemoryBlobStore


class TestParseEdits:
    def test_accepts_text_key(self):
        assert parse_edits([{"id": "title", "text": "Hello"}]) == [FieldEdit("title", "Hello")]

    def test_accepts_inner_text_key(self):
        assert parse_edits([{"id": "title", "innerText": "Hi"}]) == [FieldEdit("title", "Hi")]

    def test_text_wins_over_inner_text(self):
        edits = parse_edits([{"id": "t", "text": "a", "innerText": "b"}])
        assert edits[0].text == "a"

    def test_accepts_bytes_and_str(self):
        raw = '[{"id": "t", "text": "é"}]'
        assert parse_edits(raw) == parse_edits(raw.encode("utf-8"))

    def test_empty_array(self):
        assert parse_edits("[]") == []

    def test_empty_text_allowed(self):
        assert parse_edits([{"id": "t", "text": ""}]) == [FieldEdit("t", "")]

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            b"\xff\xfe",
            {"id": "t", "text": "x"},
            ["t"],
            [{"text": "x"}],
            [{"id": "", "text": "x"}],
            [{"id": 3, "text": "x"}],
            [{"id": "t"}],
            [{"id": "t", "text": 5}],
        ],
    )
    def test_malformed_payload_raises(self, payload):
        with pytest.raises(ValidationError):
            parse_edits(payload)

    def test_error_names_offending_index(self):
        with pytest.raises(ValidationError, match="#1"):
            parse_edits([{"id": "a", "text": "x"}, {"id": "b"}])


class TestDumpEdits:
    def test_storage_layout(self):
        raw = dump_edits([FieldEdit("title", "Hello")])
        assert json.loads(raw) == [{"id": "title", "text": "Hello"}]

    def test_non_ascii_kept(self):
        raw = dump_edits([FieldEdit("emoji", "🐇")])
        assert "🐇" in raw.decode("utf-8")


class TestSnapshotService:
    def setup_method(self):
        self.store = InMemoryBlobStore()
        self.service = SnapshotService(self.store)

    # ------------------------------------------------------------------ save

    def test_save_writes_under_id_key(self):
        snapshot_id = self.service.save([FieldEdit("title", "Hello")])
        assert self.store.keys() == [f"{snapshot_id}.json"]
        assert json.loads(self.store.get(snapshot_key(snapshot_id))) == [
            {"id": "title", "text": "Hello"}
        ]

    def test_every_save_mints_new_id(self):
        edits = [FieldEdit("title", "Hello")]
        ids = {self.service.save(edits) for _ in range(5)}
        assert len(ids) == 5
        assert len(self.store) == 5

    def test_save_empty_list(self):
        snapshot_id = self.service.save([])
        assert self.store.get(f"{snapshot_id}.json") == b"[]"

    def test_save_raw_wire_payload(self):
        snapshot_id = self.service.save(b'[{"id": "title", "innerText": "Hi"}]')
        assert json.loads(self.store.get(f"{snapshot_id}.json")) == [
            {"id": "title", "text": "Hi"}
        ]

    def test_save_malformed_payload_writes_nothing(self):
        with pytest.raises(ValidationError):
            self.service.save('{"id": "title"}')
        assert len(self.store) == 0

    def test_custom_id_factory(self):
        service = SnapshotService(self.store, id_factory=lambda: "fixed")
        assert service.save([]) == "fixed"

    def test_write_failure_raises_storage_write_error(self):
        store = MagicMock()
        store.put.side_effect = BlobStoreError("x.json", "connection reset")
        service = SnapshotService(store)
        with pytest.raises(StorageWriteError) as exc_info:
            service.save([FieldEdit("title", "Hello")])
        assert exc_info.value.detail == "connection reset"
        assert isinstance(exc_info.value.__cause__, BlobStoreError)

    # ------------------------------------------------------------------ load

    def test_load_round_trip(self):
        snapshot_id = self.service.save([FieldEdit("title", "Hello")])
        snapshot = self.service.load(snapshot_id)
        assert snapshot.id == snapshot_id
        assert snapshot.edits == [FieldEdit("title", "Hello")]

    def test_load_missing_not_accessible(self):
        with pytest.raises(StorageReadNotAccessible):
            self.service.load("never-saved")

    def test_load_other_failure(self):
        store = MagicMock()
        store.get.side_effect = BlobStoreError("x.json", "timeout")
        with pytest.raises(StorageReadOther):
            SnapshotService(store).load("x")

    def test_load_corrupt_blob(self):
        self.store.put("bad.json", b"{not json")
        with pytest.raises(ValidationError):
            self.service.load("bad")

    def test_load_maps_not_accessible_from_store(self):
        store = MagicMock()
        store.get.side_effect = BlobNotAccessible("x.json")
        with pytest.raises(StorageReadNotAccessible):
            SnapshotService(store).load("x")
