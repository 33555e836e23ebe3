"""HTML renderer for the render contract (RenderProps)."""

from __future__ import annotations

from html import escape

from pagedraft.core.types import RenderProps
from pagedraft.render.template import PageTemplate, Region, merge_edits

EXIT_PREVIEW_PATH = "/api/exit"

_ERROR_VIEW = """<h1>Oops</h1>
<h2>Something unique to your preview went wrong.</h2>
<div class="explanation"><p>The production website is <strong>still available</strong> and this does not affect other users.</p></div>
<hr>
<h2>Reason</h2>
<div class="explanation"><p class="reason">{message}</p></div>"""


def _render_region(region: Region, text: str, editing: bool) -> str:
    tag = region.tag
    attrs = ' contenteditable="true"' if editing else ""
    # [id] > [contenteditable=true] is what the region reader selects on
    return f'<div id="{escape(region.id)}"><{tag}{attrs}>{escape(text)}</{tag}></div>'


def render_page(template: PageTemplate, props: RenderProps, *, editing: bool = False) -> str:
    """
    Render a full HTML document.

    Normal renders show defaults, previews show each region's edit (or its
    own default when it has none), and error
    renders show ``props.message`` verbatim instead of any region content.
    """
    parts: list[str] = []

    if props.is_preview or props.has_error:
        parts.append(
            f'<aside role="alert"><a href="{EXIT_PREVIEW_PATH}">Preview Mode</a></aside>'
        )

    if props.has_error:
        parts.append(_ERROR_VIEW.format(message=escape(props.message or "")))
    else:
        edits = props.contents if props.is_preview and props.contents else []
        overrides = merge_edits(template, edits)
        for region in template.regions:
            text = overrides.get(region.id, region.default_text)
            parts.append(_render_region(region, text, editing))

    body = "\n".join(parts)
    return (
        "<!DOCTYPE html>\n"
        '<html><head><meta charset="utf-8">'
        f"<title>{escape(template.title)}</title></head>\n"
        f'<body><div class="layout">\n{body}\n</div></body></html>\n'
    )
