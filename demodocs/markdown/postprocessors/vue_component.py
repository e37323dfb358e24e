# demodocs/markdown/postprocessors/vue_component.py
"""
Postprocessor that turns a rendered page into a Vue single-file component.

The docs site loads each compiled page through vue-loader, so the page HTML
becomes the component template:

    <template>
      <section class="content">
    <h2 id="basic-usage">...</h2>
    <demo-block ...>...</demo-block>
      </section>
    </template>

Only active when context["sfc"] is true; template filters render plain HTML.
"""

from .. import config as markdown_config


def vue_component_wrapper(html: str, context: dict, component_class: str = "content") -> str:
    """
    Wrap HTML in a <template><section> pair.

    Args:
        html: Rendered page HTML
        context: Render context; nothing happens unless context["sfc"] is set
        component_class: Class of the wrapping <section>

    Returns:
        Vue single-file component source, or the HTML unchanged
    """
    if not context.get("sfc"):
        return html

    if html and not html.endswith("\n"):
        html += "\n"

    return (
        "<template>\n"
        f'  <section class="{component_class}">\n'
        f"{html}"
        "  </section>\n"
        "</template>\n"
    )


def vue_component_wrapper_default(html: str, context: dict) -> str:
    """
    Default configuration for vue_component_wrapper.

    This is the function that should be registered in POSTPROCESSORS.
    """
    config = context.get("config") or markdown_config.get_markdown_config()
    return vue_component_wrapper(html, context, component_class=config["component_class"])
