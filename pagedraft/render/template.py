"""Page templates: the ordered set of editable regions on a page."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pagedraft.core.types import FieldEdit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """One editable region. ``tag`` is the element the text is rendered in."""

    id: str
    default_text: str
    tag: str = "div"


@dataclass
class PageTemplate:
    title: str
    regions: list[Region] = field(default_factory=list)

    @property
    def region_ids(self) -> set[str]:
        return {r.id for r in self.regions}


def merge_edits(template: PageTemplate, edits: list[FieldEdit]) -> dict[str, str]:
    """
    Collect the edits that apply to the template.

    Returns region id → edited text. Regions without an edit keep their own
    ``default_text``, so repeated ids still render their own defaults. Edits
    whose id matches no region are dropped. The first edit for an id wins.
    """
    known = template.region_ids
    overrides: dict[str, str] = {}
    for edit in edits:
        if edit.id not in known:
            logger.debug("dropping edit for unknown region %r", edit.id)
            continue
        overrides.setdefault(edit.id, edit.text)
    return overrides
