# demodocs/markdown/extensions/demo_block.py
"""
Markdown-it container rule for interactive component demos.

Input markdown:
    ::: demo Buttons come in `primary` and `plain` styles.
    ```html
    <el-button type="primary">Primary</el-button>
    <script>
    export default { data() { return { count: 0 } } }
    </script>
    ```
    :::

Output markup:
    <demo-block class="demo-box" :jsfiddle="{&quot;html&quot;:...}">
    <div class="source" slot="source"><el-button ...>Primary</el-button>
    </div>
    <p>Buttons come in <code>primary</code> and <code>plain</code> styles.</p>
    <div class="highlight" slot="highlight"><pre v-pre><code class="hljs ...">
    ...</code></pre>
    </div></demo-block>

The "source" slot renders the markup live, the fence inside the container
renders into the "highlight" slot, and the payload attribute hands the
widget the html/script/style split of the same source (for "open in
playground" style features).
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import TypedDict

from django.utils.html import escape
from mdit_py_plugins.container import container_plugin

from .entities import normalize_entities
from .tag_extractor import fetch_tag, strip_tags

logger = logging.getLogger(__name__)

CONTAINER_NAME = "demo"

_MARKER_RE = re.compile(r"^demo(?:\s+(.*))?$", re.DOTALL)

# One tag's worth of markup: "<el-input disabled="" @click="n > 0">".
# Quoted values are skipped whole, so a ">" inside one does not end the tag.
_TAG_MARKUP_RE = re.compile(r"""<(?:[^<>"']|"[^"]*"|'[^']*')*>""")


class DemoPayload(TypedDict):
    html: str
    script: str
    style: str


@dataclass(frozen=True)
class DemoOpen:
    description: str
    body: str


@dataclass(frozen=True)
class DemoClose:
    pass


def validate_marker(params: str, *args) -> bool:
    """Accept "demo" and "demo <description>", but not "demonstration"."""
    return _MARKER_RE.match(params.strip()) is not None


def parse_description(info: str) -> str:
    """Return the text after the "demo" keyword on a marker line, trimmed."""
    match = _MARKER_RE.match(info.strip())
    if match is None:
        logger.debug(f"Unmatched demo marker {info!r}, rendering without description")
        return ""
    return (match.group(1) or "").strip()


def container_event(tokens, idx) -> DemoOpen | DemoClose:
    """Turn the container token at ``idx`` into an open or close event."""
    token = tokens[idx]
    if token.nesting != 1:
        return DemoClose()

    body = tokens[idx + 1].content if idx + 1 < len(tokens) else ""
    return DemoOpen(description=parse_description(token.info), body=body or "")


def remove_empty_attributes(html: str) -> str:
    """Drop ``=""`` assignments inside tag markup, leaving bare attributes."""
    return _TAG_MARKUP_RE.sub(lambda match: match.group(0).replace('=""', ""), html)


def build_payload(body: str) -> DemoPayload:
    """Split a demo body into live markup, script source and style source."""
    html = normalize_entities(strip_tags(body, ("script", "style")))
    return {
        "html": remove_empty_attributes(html),
        "script": fetch_tag(body, "script"),
        "style": fetch_tag(body, "style"),
    }


def serialize_payload(payload: DemoPayload) -> str:
    """Serialise the payload as JSON that is safe inside a quoted attribute."""
    data = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return str(escape(data))


def render_demo_event(event: DemoOpen | DemoClose, config: dict, description_engine, env=None) -> str:
    """
    Render the markup for one demo container marker.

    Args:
        event: DemoOpen for the opening marker, DemoClose for the closing one
        config: The "demo" section of the markdown config
        description_engine: MarkdownIt instance used for the description line
        env: markdown-it render env; open events record their payload in
            env["demos"] when it is a dict

    Returns:
        Markup fragment for this marker
    """
    element = config["element"]

    if isinstance(event, DemoClose):
        return f"</div></{element}>\n"

    payload = build_payload(event.body)
    if isinstance(env, dict):
        env.setdefault("demos", []).append(payload)

    description_html = (
        description_engine.render(event.description) if event.description else ""
    )

    return (
        f'<{element} class="{config["class"]}" :{config["prop"]}="{serialize_payload(payload)}">\n'
        f'<div class="source" slot="source">{payload["html"]}</div>\n'
        f"{description_html}"
        f'<div class="highlight" slot="highlight">'
    )


def demo_block_plugin(md, config: dict, description_engine):
    """
    Register the ``::: demo`` container on a MarkdownIt instance.

    Args:
        md: MarkdownIt instance being configured
        config: The "demo" section of the markdown config
        description_engine: MarkdownIt instance used for description lines
    """

    def render(self, tokens, idx, options, env):
        return render_demo_event(container_event(tokens, idx), config, description_engine, env)

    container_plugin(md, CONTAINER_NAME, validate=validate_marker, render=render)
