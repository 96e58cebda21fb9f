# html_toc/anchors.py

import urllib.parse
from typing import Iterable

from bs4 import BeautifulSoup

from .identifiers import TocEntry

ANCHOR_CLASS = "anchor"
ICON_CLASSES = ["octicon", "octicon-link"]

# Characters libxml2 leaves untouched when it escapes href values
_HREF_SAFE = "@/:=?;#%&,+!~*'()"


def anchor_href(identifier: str) -> str:
    """Fragment link for an anchor id; spaces and non-ASCII are percent-encoded."""
    return "#" + urllib.parse.quote(identifier, safe=_HREF_SAFE)


def inject_anchors(soup: BeautifulSoup, entries: Iterable[TocEntry]) -> str:
    """
    Insert a permalink anchor at the start of every TOC heading.

    The anchor goes right before the heading's first child, so it sits inside
    the heading ahead of the text. Empty headings are left alone. Mutates the
    soup in place and returns the serialized HTML.
    """
    for entry in entries:
        if entry.header_content is None:
            continue

        anchor = soup.new_tag("a")
        anchor["aria-hidden"] = "true"
        anchor["class"] = [ANCHOR_CLASS]
        anchor["href"] = anchor_href(entry.id)

        icon = soup.new_tag("span")
        icon["class"] = list(ICON_CLASSES)
        anchor.append(icon)

        entry.header_content.insert_before(anchor)

    return str(soup)
