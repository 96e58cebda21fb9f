"""Tests for IdentifierAssigner — anchor ids, collisions and entry fields."""

import pytest
from bs4 import BeautifulSoup

from html_toc.identifiers import IdentifierAssigner, TocEntry, heading_level


def _assign(html, **kwargs):
    soup = BeautifulSoup(html, "html.parser")
    headings = soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"])
    return IdentifierAssigner(**kwargs).assign(headings)


def _ids(html, **kwargs):
    return [entry.id for entry in _assign(html, **kwargs)]


class TestBaseIds:
    def test_slug_from_text(self):
        assert _ids("<h1>Intro</h1><h2>Getting Started!</h2>") == ["intro", "getting-started"]

    def test_existing_id_used_verbatim(self):
        assert _ids('<h2 id="custom">Something Else</h2>') == ["custom"]

    def test_unicode_text_kept(self):
        assert _ids("<h2>Café Menü</h2>") == ["café-menü"]

    def test_custom_slugify_is_used(self):
        assert _ids("<h2>A</h2><h2>B</h2>", slugify=lambda text: "x") == ["x", "x-1"]


class TestCollisions:
    def test_first_occurrence_unsuffixed(self):
        html = "<h1>Intro</h1><h2>Setup</h2><h2>Setup</h2><h3>Setup</h3>"
        assert _ids(html) == ["intro", "setup", "setup-1", "setup-2"]

    def test_existing_id_and_slug_share_counter(self):
        assert _ids('<h2 id="setup">A</h2><h2>Setup</h2>') == ["setup", "setup-1"]
        assert _ids('<h2>Setup</h2><h2 id="setup">A</h2>') == ["setup", "setup-1"]

    def test_suffix_never_duplicates_literal_id(self):
        ids = _ids("<h2>Setup</h2><h2>Setup</h2><h2>Setup 1</h2><h2>Setup</h2>")
        assert ids == ["setup", "setup-1", "setup-1-1", "setup-2"]
        assert len(set(ids)) == len(ids)

    def test_counter_is_per_call(self):
        soup = BeautifulSoup("<h2>Setup</h2>", "html.parser")
        assigner = IdentifierAssigner()
        first = assigner.assign(soup.find_all("h2"))
        second = assigner.assign(soup.find_all("h2"))
        assert first[0].id == second[0].id == "setup"


class TestEntryFields:
    def test_text_is_escaped(self):
        (entry,) = _assign("<h2>Fish &amp; Chips &lt;3 <b>&gt;</b></h2>")
        assert entry.text == "Fish &amp; Chips &lt;3 &gt;"
        assert entry.id == "fish-chips-3"

    def test_level_and_tag_name(self):
        (entry,) = _assign("<h4>Deep</h4>")
        assert entry.level == 4
        assert entry.tag_name == "h4"

    def test_header_content_is_first_child(self):
        (entry,) = _assign("<h2><em>Styled</em> heading</h2>")
        assert entry.header_content.name == "em"

    def test_empty_heading_has_no_header_content(self):
        (entry,) = _assign("<h2></h2>")
        assert entry.header_content is None
        assert entry.id == ""

    def test_entries_are_immutable(self):
        (entry,) = _assign("<h2>A</h2>")
        assert isinstance(entry, TocEntry)
        with pytest.raises(AttributeError):
            entry.id = "b"


def test_heading_level_parses_digits():
    assert heading_level("h1") == 1
    assert heading_level("H6") == 6
