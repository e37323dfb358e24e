# demodocs/markdown/extensions/anchors.py
"""
Heading anchors for documentation pages.

Headings from ``anchor_level`` down get an id and a permalink placed before
the heading text:

    ## 基础用法
    ->
    <h2 id="ji-chu-yong-fa"><a class="header-anchor" href="#ji-chu-yong-fa">¶</a> 基础用法</h2>

Non-Latin heading text is transliterated so ids stay readable in URLs.
"""

from django.utils.text import slugify
from mdit_py_plugins.anchors import anchors_plugin
from unidecode import unidecode


def slugify_heading(text: str) -> str:
    """Convert heading text (any script) into a URL-safe identifier."""
    return slugify(unidecode(text)) or "section"


def heading_anchor_plugin(md, config: dict):
    """Register heading ids and permalinks using the session config."""
    md.use(
        anchors_plugin,
        min_level=config["anchor_level"],
        max_level=6,
        slug_func=slugify_heading,
        permalink=config["permalink"],
        permalinkSymbol=config["permalink_symbol"],
        permalinkBefore=config["permalink_before"],
    )
