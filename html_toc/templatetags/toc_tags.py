# html_toc/templatetags/toc_tags.py
"""
Template filters for rendered HTML.

Usage in templates:
    {% load toc_tags %}
    {{ post.body_html|toc_only }}         TOC markup only
    {{ post.body_html|inject_anchors }}   body with heading permalinks
    {{ post.body_html|toc }}              TOC followed by the annotated body
    {% toc_with_options post.body_html min_level=2 max_level=3 %}

Filters use settings.HTML_TOC; the tag accepts per-call overrides.
"""

from django import template
from django.utils.safestring import mark_safe

from html_toc.parser import Parser

register = template.Library()


@register.filter(name="toc_only")
def toc_only_filter(value):
    return mark_safe(Parser(value).build_toc())


@register.filter(name="inject_anchors")
def inject_anchors_filter(value):
    return mark_safe(Parser(value).inject_anchors())


@register.filter(name="toc")
def toc_filter(value):
    return mark_safe(Parser(value).toc())


@register.simple_tag
def toc_with_options(value, **options):
    """Same output as the ``toc`` filter, with options overriding HTML_TOC"""
    return mark_safe(Parser(value, options).toc())
