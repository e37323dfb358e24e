# demodocs/markdown/renderer.py

from .config import get_markdown_config
from .engine import build_markdown_engine
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors


def render_markdown(text, context=None, config=None):
    """
    Main rendering function with pre/post processing pipeline using markdown-it-py

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            After rendering, context["demos"] holds the payload of every
            demo container in document order.
        config: Optional markdown config (default: get_markdown_config())
    """
    context = context if context is not None else {}
    config = config or get_markdown_config()
    context["config"] = config

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    # Markdown conversion with an engine private to this render
    md = build_markdown_engine(config)
    env = {}
    html = md.render(text, env)
    context["demos"] = env.get("demos", [])

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html


def compile_to_vue(text, context=None, config=None):
    """Render markdown as a Vue single-file component for the docs site."""
    context = context if context is not None else {}
    context["sfc"] = True
    return render_markdown(text, context, config)
