"""JSON codec for FieldEdit sequences."""

from __future__ import annotations

import json
from typing import Any

from pagedraft.core.errors import ValidationError
from pagedraft.core.types import FieldEdit


def parse_edits(payload: Any) -> list[FieldEdit]:
    """
    Parse a FieldEdit sequence.

    Accepts raw ``bytes``/``str`` JSON or an already-decoded value. Each item
    must be an object with a non-empty string ``id`` and a string ``text``
    (or ``innerText``, as sent by the browser; ``text`` wins if both exist).
    """
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(f"payload is not UTF-8: {exc}") from exc
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"payload is not valid JSON: {exc.msg}") from exc

    if not isinstance(payload, list):
        raise ValidationError(
            f"expected a JSON array of edits, got {type(payload).__name__}"
        )

    edits: list[FieldEdit] = []
    for i, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValidationError(f"edit #{i} is not an object")
        region_id = item.get("id")
        if not isinstance(region_id, str) or not region_id:
            raise ValidationError(f"edit #{i} has no id")
        text = item.get("text", item.get("innerText"))
        if not isinstance(text, str):
            raise ValidationError(f"edit #{i} ({region_id!r}) has no text")
        edits.append(FieldEdit(id=region_id, text=text))
    return edits


def dump_edits(edits: list[FieldEdit]) -> bytes:
    """Serialize edits to the storage layout: a JSON array of {id, text}."""
    return json.dumps(
        [e.to_dict() for e in edits], ensure_ascii=False
    ).encode("utf-8")
