from pagedraft.render.page import EXIT_PREVIEW_PATH, render_page
from pagedraft.render.pages import LANDING_PAGE
from pagedraft.render.template import PageTemplate, Region, merge_edits

__all__ = [
    "EXIT_PREVIEW_PATH",
    "LANDING_PAGE",
    "PageTemplate",
    "Region",
    "merge_edits",
    "render_page",
]
