# html_toc/postprocessors.py

from .parser import Parser


def table_of_contents(html: str, context: dict) -> str:
    """
    Postprocessor that adds heading permalinks and collects the TOC.

    Returns the HTML with anchors injected. The TOC markup is stored in
    context["toc_html"] and the heading ids, in document order, in
    context["toc_ids"] so templates can render the TOC separately.

    Per-render options (same keys as settings.HTML_TOC) are read from
    context["toc_options"].
    """
    parser = Parser(html, context.get("toc_options"))

    context["toc_html"] = parser.build_toc()
    context["toc_ids"] = [entry.id for entry in parser.entries]

    return parser.inject_anchors()
