# html_toc/parser.py
"""
Parse an HTML fragment once and build its table of contents and permalinks.

Usage:
    parser = Parser(html, {"toc_levels": [2, 3]})
    parser.build_toc()       # TOC markup only
    parser.inject_anchors()  # fragment with anchors added to each heading
    parser.toc()             # both, TOC first

Heading selection and id assignment run in the constructor and are frozen
before anything touches the tree. Anchor injection mutates the parsed tree,
so it happens at most once per parser: the first call moves the parser from
READY to CONSUMED and later calls return the same HTML.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Mapping, Optional

from bs4 import BeautifulSoup

from .anchors import inject_anchors
from .conf import TocConfiguration, get_configuration
from .identifiers import IdentifierAssigner, TocEntry
from .renderer import render_toc
from .selector import select_headings
from .slugs import generate_toc_id

logger = logging.getLogger(__name__)


class ParserState(enum.Enum):
    READY = "ready"
    CONSUMED = "consumed"


class Parser:
    def __init__(
        self,
        html: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        configuration: Optional[TocConfiguration] = None,
        slugify: Callable[[str], str] = generate_toc_id,
    ):
        self._soup = BeautifulSoup(html or "", "html.parser")
        self.configuration = configuration or get_configuration(options)
        headings = select_headings(self._soup, self.configuration)
        self.entries: tuple[TocEntry, ...] = IdentifierAssigner(slugify).assign(headings)
        self._annotated_html: Optional[str] = None
        self._state = ParserState.READY

    @property
    def state(self) -> ParserState:
        return self._state

    def build_toc(self) -> str:
        return render_toc(self.entries)

    def inject_anchors(self) -> str:
        if self._state is ParserState.CONSUMED:
            logger.debug("Anchors already injected, returning cached HTML")
            return self._annotated_html

        self._annotated_html = inject_anchors(self._soup, self.entries)
        self._state = ParserState.CONSUMED
        return self._annotated_html

    def toc(self) -> str:
        return self.build_toc() + self.inject_anchors()
