# demodocs/markdown/extensions/fence_highlight.py
"""
Fence renderer wrappers.

Compiled documents are Vue templates, so every fenced listing is marked with
``v-pre`` to stop Vue from compiling mustaches inside the code:

    <pre v-pre><code v-pre class="language-html">...</code></pre>

The marker on ``<code>`` also keeps highlight.js away from the block. The
demo widget highlights its source listing on mount, so ``highlight_fence``
turns the code marker into the ``hljs`` class while ``<pre v-pre>`` keeps the
listing raw:

    <pre v-pre><code class="hljs language-html">...</code></pre>
"""

from functools import wraps


def mark_raw_fence(render_fence):
    """Wrap a fence renderer so its listing is not compiled by Vue."""

    @wraps(render_fence)
    def render(*args, **kwargs):
        html = render_fence(*args, **kwargs)
        return html.replace("<pre>", "<pre v-pre>", 1).replace("<code", "<code v-pre", 1)

    return render


def highlight_fence(render_fence):
    """
    Wrap a fence renderer so raw-marked code is picked up by highlight.js.

    Only the first code element is rewritten:
        <code v-pre class="foo">  ->  <code class="hljs foo">
        <code v-pre>              ->  <code class="hljs">
        <code>                    ->  <code class="hljs">

    Output with none of these forms is returned unchanged.
    """

    @wraps(render_fence)
    def render(*args, **kwargs):
        html = render_fence(*args, **kwargs)
        if '<code v-pre class="' in html:
            return html.replace('<code v-pre class="', '<code class="hljs ', 1)
        if "<code v-pre>" in html:
            return html.replace("<code v-pre>", '<code class="hljs">', 1)
        return html.replace("<code>", '<code class="hljs">', 1)

    return render
