# demodocs/markdown/extensions/tag_extractor.py
"""
Regex-level extraction of ``<script>``/``<style>``-like blocks from demo bodies.

    body = '<div>hi</div><script>console.log(1)</script>'

    strip_tags(body, {"script", "style"})  -> '<div>hi</div>'
    fetch_tag(body, "script")              -> 'console.log(1)'

Both functions share one compiled pattern per tag name, so every block that
``strip_tags`` removes is exactly a block whose content ``fetch_tag`` returns.

This is not an HTML parser. Self-closing tags are ignored and markup that is
not well formed (an unclosed ``<script>``, a close tag inside a string
literal) may be mis-extracted.
"""

import re
from functools import lru_cache
from typing import Iterable, Union


@lru_cache(maxsize=32)
def _tag_pattern(tag: str) -> re.Pattern:
    name = re.escape(tag)
    return re.compile(
        rf"<{name}(?=[\s>])[^>]*>(.*?)</{name}\s*>",
        re.IGNORECASE | re.DOTALL,
    )


def strip_tags(body: str, tags: Union[str, Iterable[str]]) -> str:
    """
    Remove every occurrence of the named tags, content included.

    Args:
        body: Raw demo body text
        tags: A tag name or an iterable of tag names

    Returns:
        ``body`` without the matched blocks; unchanged if nothing matched
    """
    if isinstance(tags, str):
        tags = [tags]

    for tag in tags:
        body = _tag_pattern(tag).sub("", body)
    return body


def fetch_tag(body: str, tag: str) -> str:
    """
    Concatenate the inner content of every ``tag`` block in document order.

    Returns an empty string when the tag does not occur.
    """
    return "".join(match.group(1) for match in _tag_pattern(tag).finditer(body))
