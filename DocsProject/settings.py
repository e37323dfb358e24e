"""
Django settings for the documentation build project.

The project has no database or web front end of its own; Django provides
settings, management commands and template filters for the demodocs app.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "docs-build-insecure-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "demodocs",
]

DATABASES = {}

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]

USE_TZ = True

# Markdown pipeline overrides, merged over the defaults in
# demodocs.markdown.config.get_markdown_config()
DEMO_DOCS = {
    "SOURCE_DIR": BASE_DIR / "examples" / "docs",
    "OUTPUT_DIR": BASE_DIR / "examples" / "dist" / "docs",
    "anchor_level": 2,
    "notice_containers": ["tip", "warning"],
    "table_class": "table",
    "site_domain": os.environ.get("DEMO_DOCS_SITE_DOMAIN", ""),
}

CELERY_BROKER_URL = os.environ.get("CELERY_BROKER_URL", "redis://localhost:6379/0")
CELERY_TASK_SERIALIZER = "json"
CELERY_RESULT_SERIALIZER = "json"
CELERY_ACCEPT_CONTENT = ["json"]

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "demodocs": {
            "handlers": ["console"],
            "level": os.environ.get("DEMO_DOCS_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
