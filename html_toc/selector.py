# html_toc/selector.py

import logging

from bs4 import BeautifulSoup, Tag

from .conf import TocConfiguration

logger = logging.getLogger(__name__)


def select_headings(soup: BeautifulSoup, config: TocConfiguration) -> list[Tag]:
    """
    Return the headings that belong in the TOC, in document order.

    A heading qualifies when its level is configured, it is not inside an
    element carrying one of the no-TOC section classes, and it does not carry
    the no-TOC class itself.
    """
    if not config.toc_levels:
        return []

    candidates = soup.select(config.heading_selector)

    # Tags compare by markup, so two identical headings would be equal;
    # exclusion has to go by object identity.
    excluded_selector = config.excluded_heading_selector
    excluded = (
        {id(node) for node in soup.select(excluded_selector)} if excluded_selector else set()
    )

    headings = [
        node
        for node in candidates
        if id(node) not in excluded
        and config.no_toc_class not in (node.get("class") or [])
    ]

    logger.debug(
        "Selected %d of %d candidate headings (%d inside no-TOC sections)",
        len(headings),
        len(candidates),
        len(excluded),
    )
    return headings
