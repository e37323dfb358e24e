import copy

from django.conf import settings

_DEFAULTS = {
    # markdown-it-py preset and options for the document engine
    "preset": "commonmark",
    "options": {"html": True},
    # Heading levels below this get no anchor, e.g. "# Title" stays plain
    "anchor_level": 2,
    "permalink": True,
    "permalink_before": True,
    "permalink_symbol": "¶",
    "table_class": "table",
    # ::: tip / ::: warning render as <div class="tip"> / <div class="warning">
    "notice_containers": ["tip", "warning"],
    # Links to this domain are not treated as external
    "site_domain": "",
    # Class of the <section> wrapping a compiled Vue component
    "component_class": "content",
    "demo": {
        "element": "demo-block",
        "class": "demo-box",
        "prop": "jsfiddle",
    },
}


def get_markdown_config():
    """
    Configuration for a markdown-it-py render session.

    Returns a fresh dict on every call so a session can adjust its copy
    without affecting others. Values from the DEMO_DOCS Django setting are
    merged over the defaults; the "demo" section is merged key by key.
    """
    config = copy.deepcopy(_DEFAULTS)

    overrides = getattr(settings, "DEMO_DOCS", {}) if settings.configured else {}
    for key, value in overrides.items():
        if key == "demo":
            config["demo"].update(value)
        elif key in config:
            config[key] = copy.deepcopy(value)

    return config
