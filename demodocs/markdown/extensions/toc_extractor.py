from __future__ import annotations

from typing import TypedDict

from bs4 import BeautifulSoup, NavigableString, Tag

from .anchors import slugify_heading


class HeadingNode(TypedDict):
    level: int
    id: str
    title: str
    title_html: str
    children: list["HeadingNode"]


def _extract_heading_contents(heading: Tag) -> tuple[str, str]:
    """
    Return the plain text and inner HTML that should be displayed for a heading.

    Headings rendered by our pipeline start with a permalink anchor
    (a.header-anchor holding a pilcrow). Only the human-facing portion
    belongs in the outline, so the permalink is skipped.
    """
    parts: list[str] = []
    html_parts: list[str] = []
    for child in heading.contents:
        if isinstance(child, NavigableString):
            value = str(child)
            if value.strip():
                parts.append(value.strip())
            html_parts.append(value)
            continue

        if isinstance(child, Tag) and "header-anchor" in child.get("class", []):
            continue

        if isinstance(child, Tag):
            text_value = child.get_text(separator=" ", strip=True)
            if text_value:
                parts.append(text_value)
            html_parts.append(str(child))

    text = " ".join(parts).strip()
    html = "".join(html_parts).strip() or text
    return text, html


def _inside_demo(heading: Tag, demo_element: str) -> bool:
    return heading.find_parent(demo_element) is not None


def extract_toc_from_html(html: str, demo_element: str = "demo-block") -> list[HeadingNode]:
    """
    Given rendered HTML, return a hierarchical list of headings for a TOC.

    Headings that belong to live demo markup (inside the demo element) are
    not part of the page outline and are skipped.

    The resulting structure is a list of dictionaries. Each dictionary contains:
        - level: Heading level (1-6)
        - id: HTML id/slug for the heading
        - title: Plain-text version of the heading
        - title_html: HTML snippet preserving inline formatting
        - children: Nested list of child headings
    """
    soup = BeautifulSoup(html, "html.parser")
    toc: list[HeadingNode] = []
    stack: list[HeadingNode] = []
    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        if _inside_demo(heading, demo_element):
            continue

        level = int(heading.name[1])  # "h2" -> 2
        text, html_contents = _extract_heading_contents(heading)
        if not text:
            continue

        identifier = heading.get("id") or slugify_heading(text)

        node: HeadingNode = {
            "level": level,
            "id": identifier,
            "title": text,
            "title_html": html_contents,
            "children": [],
        }

        while stack and stack[-1]["level"] >= level:
            stack.pop()

        if stack:
            stack[-1]["children"].append(node)
        else:
            toc.append(node)

        stack.append(node)

    return toc
