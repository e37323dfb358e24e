# demodocs/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from demodocs.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="demo_markdown")
def demo_markdown_filter(value):
    """Render documentation markdown (demo containers included) as HTML"""
    return mark_safe(render_markdown(value or ""))
