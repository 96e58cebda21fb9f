from typing import Iterable

from django.utils.html import escape

from .identifiers import TocEntry

TOC_ROOT_ID = "toc"


def render_toc_row(entry: TocEntry) -> str:
    # entry.text is already escaped
    return (
        f'<div class="toc-{entry.tag_name}">'
        f'<a href="#{escape(entry.id)}">{entry.text}</a></div>'
    )


def render_toc(entries: Iterable[TocEntry]) -> str:
    """Render a flat TOC: one row per entry, in the order given."""
    rows = "\n".join(render_toc_row(entry) for entry in entries)
    return f'<div id="{TOC_ROOT_ID}">\n{rows}\n</div>'
