# demodocs/markdown/engine.py

import logging

from markdown_it import MarkdownIt
from mdit_py_plugins.container import container_plugin

from .config import get_markdown_config
from .extensions.anchors import heading_anchor_plugin
from .extensions.demo_block import demo_block_plugin
from .extensions.fence_highlight import highlight_fence, mark_raw_fence

logger = logging.getLogger(__name__)


def build_description_engine():
    """Plain engine for demo description lines; raw HTML is not passed through."""
    return MarkdownIt("commonmark", {"html": False})


def _is_external(href: str, site_domain: str) -> bool:
    if not href.startswith(("http://", "https://")):
        return False
    if site_domain and href.split("://", 1)[1].split("/", 1)[0] == site_domain:
        return False
    return True


def build_markdown_engine(config=None):
    """
    Build a MarkdownIt instance for one render session.

    Every call returns a new engine with its own rule table, so sessions
    never share renderer state.

    Args:
        config: Markdown config dict (default: get_markdown_config())

    Returns:
        Configured MarkdownIt instance
    """
    config = config or get_markdown_config()

    md = MarkdownIt(config["preset"], config["options"]).enable("table")

    heading_anchor_plugin(md, config)
    md.use(demo_block_plugin, config["demo"], build_description_engine())
    for name in config["notice_containers"]:
        md.use(container_plugin, name)

    table_class = config["table_class"]
    site_domain = config["site_domain"]
    render_token = md.renderer.renderToken

    def table_open(tokens, idx, options, env):
        return f'<table class="{table_class}">'

    def link_open(tokens, idx, options, env):
        token = tokens[idx]
        if _is_external(token.attrGet("href") or "", site_domain):
            token.attrSet("target", "_blank")
            token.attrSet("rel", "noopener noreferrer")
            token.attrJoin("class", "external-link")
        return render_token(tokens, idx, options, env)

    md.renderer.rules["table_open"] = table_open
    md.renderer.rules["link_open"] = link_open
    md.renderer.rules["fence"] = highlight_fence(mark_raw_fence(md.renderer.rules["fence"]))

    logger.debug(
        f"Built markdown engine (preset={config['preset']}, "
        f"containers={['demo', *config['notice_containers']]})"
    )
    return md
