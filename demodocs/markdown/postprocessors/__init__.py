# demodocs/markdown/postprocessors/__init__.py

from .vue_component import vue_component_wrapper_default

POSTPROCESSORS = [
    vue_component_wrapper_default,  # Wrap as a Vue SFC when context["sfc"] is set
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
