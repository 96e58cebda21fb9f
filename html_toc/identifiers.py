# html_toc/identifiers.py
"""
Anchor id assignment for selected headings.

Each heading keeps its own ``id`` attribute when it has one; otherwise the id
is slugged from its text. Repeated ids get a numeric suffix in document order:
the first ``setup`` stays ``setup``, later ones become ``setup-1``,
``setup-2``, and so on. Explicit and generated ids share one counter.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from bs4 import PageElement, Tag
from django.utils.html import escape

from .slugs import generate_toc_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TocEntry:
    id: str
    text: str  # HTML-escaped heading text
    level: int
    tag_name: str
    header_content: Optional[PageElement]  # first child of the heading, anchor goes before it


def heading_level(tag_name: str) -> int:
    """Level from a tag name: "h3" -> 3."""
    return int(re.sub(r"\D", "", tag_name))


class IdentifierAssigner:
    def __init__(self, slugify: Callable[[str], str] = generate_toc_id):
        self.slugify = slugify

    def base_id(self, heading: Tag) -> str:
        existing = heading.get("id")
        if existing:
            return existing
        return self.slugify(heading.get_text())

    def assign(self, headings: Iterable[Tag]) -> tuple[TocEntry, ...]:
        seen: dict[str, int] = {}
        used: set[str] = set()
        entries: list[TocEntry] = []

        for heading in headings:
            base = self.base_id(heading)
            count = seen.get(base, 0)
            identifier = f"{base}-{count}" if count else base

            # A suffixed id can clash with a literal one ("Setup", "Setup", "Setup 1")
            while identifier in used:
                count += 1
                identifier = f"{base}-{count}"

            seen[base] = count + 1
            used.add(identifier)
            if identifier != base:
                logger.debug("Duplicate heading id %r renamed to %r", base, identifier)

            entries.append(
                TocEntry(
                    id=identifier,
                    text=escape(heading.get_text()),
                    level=heading_level(heading.name),
                    tag_name=heading.name,
                    header_content=heading.contents[0] if heading.contents else None,
                )
            )

        return tuple(entries)
