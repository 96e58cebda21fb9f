# html_toc/conf.py
"""
Configuration for table-of-contents generation.

Options are resolved once per parse into an immutable ``TocConfiguration``.
Project-wide defaults live in ``settings.HTML_TOC``; per-call options override
them key by key.

Recognised keys:
    - toc_levels: iterable of heading levels (1-6) to include
    - min_level / max_level: inclusive level range, used when toc_levels is absent
    - no_toc_class: class that excludes an individual heading
    - no_toc_section_class: class (or list of classes) excluding whole subtrees
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

import soupsieve
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

SETTINGS_NAME = "HTML_TOC"

DEFAULT_MIN_LEVEL = 1
DEFAULT_MAX_LEVEL = 6
DEFAULT_NO_TOC_CLASS = "no_toc"
DEFAULT_NO_TOC_SECTION_CLASS = "no_toc_section"

_VALID_LEVELS = frozenset(range(1, 7))


@dataclass(frozen=True)
class TocConfiguration:
    toc_levels: frozenset = field(
        default_factory=lambda: frozenset(range(DEFAULT_MIN_LEVEL, DEFAULT_MAX_LEVEL + 1))
    )
    no_toc_class: str = DEFAULT_NO_TOC_CLASS
    no_toc_section_class: tuple = (DEFAULT_NO_TOC_SECTION_CLASS,)

    def __post_init__(self):
        # Accept a bare string or any iterable, store a tuple
        section_classes = self.no_toc_section_class
        if isinstance(section_classes, str):
            section_classes = (section_classes,)
        object.__setattr__(self, "no_toc_section_class", tuple(section_classes))
        object.__setattr__(self, "toc_levels", frozenset(self.toc_levels))

    @property
    def heading_tags(self) -> list[str]:
        return [f"h{level}" for level in sorted(self.toc_levels)]

    @property
    def heading_selector(self) -> str:
        """Selector matching every heading eligible for the TOC, e.g. ``h1,h2``."""
        return ",".join(self.heading_tags)

    @property
    def excluded_heading_selector(self) -> str:
        """Selector matching eligible headings inside a no-TOC section."""
        return ",".join(
            f".{soupsieve.escape(class_name)} {tag}"
            for class_name in self.no_toc_section_class
            for tag in self.heading_tags
        )

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "TocConfiguration":
        """
        Resolve a mapping of host options into a configuration.

        Raises ImproperlyConfigured for values that cannot describe a TOC.
        An empty ``toc_levels`` is allowed and simply yields an empty TOC.
        """
        options = dict(options or {})

        if options.get("toc_levels") is not None:
            levels = _coerce_levels(options["toc_levels"])
        else:
            min_level = _coerce_level(options.get("min_level", DEFAULT_MIN_LEVEL))
            max_level = _coerce_level(options.get("max_level", DEFAULT_MAX_LEVEL))
            if min_level > max_level:
                raise ImproperlyConfigured(
                    f"{SETTINGS_NAME}: min_level ({min_level}) is greater than "
                    f"max_level ({max_level})"
                )
            levels = frozenset(range(min_level, max_level + 1))

        no_toc_class = options.get("no_toc_class", DEFAULT_NO_TOC_CLASS)
        if not isinstance(no_toc_class, str):
            raise ImproperlyConfigured(
                f"{SETTINGS_NAME}: no_toc_class must be a string, got {no_toc_class!r}"
            )

        section_classes = options.get("no_toc_section_class", DEFAULT_NO_TOC_SECTION_CLASS)
        if isinstance(section_classes, str):
            section_classes = [section_classes]
        if not isinstance(section_classes, (list, tuple)) or not all(
            isinstance(name, str) and name for name in section_classes
        ):
            raise ImproperlyConfigured(
                f"{SETTINGS_NAME}: no_toc_section_class must be a non-empty string "
                f"or a list of them, got {section_classes!r}"
            )

        return cls(
            toc_levels=levels,
            no_toc_class=no_toc_class,
            no_toc_section_class=tuple(section_classes),
        )


def _coerce_level(value: Any) -> int:
    if isinstance(value, bool):
        raise ImproperlyConfigured(f"{SETTINGS_NAME}: invalid heading level {value!r}")
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ImproperlyConfigured(f"{SETTINGS_NAME}: invalid heading level {value!r}")
    if level not in _VALID_LEVELS:
        raise ImproperlyConfigured(
            f"{SETTINGS_NAME}: heading level {level} is outside the range 1-6"
        )
    return level


def _coerce_levels(values: Iterable[Any]) -> frozenset:
    if isinstance(values, (str, bytes)):
        raise ImproperlyConfigured(
            f"{SETTINGS_NAME}: toc_levels must be a collection of integers, got {values!r}"
        )
    try:
        return frozenset(_coerce_level(value) for value in values)
    except TypeError:
        raise ImproperlyConfigured(
            f"{SETTINGS_NAME}: toc_levels must be a collection of integers, got {values!r}"
        )


def get_configuration(options: Optional[Mapping[str, Any]] = None) -> TocConfiguration:
    """Merge ``settings.HTML_TOC`` with per-call options and resolve them."""
    merged: dict = {}
    if settings.configured:
        merged.update(getattr(settings, SETTINGS_NAME, None) or {})
    options = dict(options or {})
    # A per-call level range replaces a project-wide explicit level set
    if "toc_levels" not in options and ("min_level" in options or "max_level" in options):
        merged.pop("toc_levels", None)
    merged.update(options)
    return TocConfiguration.from_options(merged)
