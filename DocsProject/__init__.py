# Expose the Celery app as "celery_app" so build tasks register on startup
from .celery import app as celery_app

__all__ = ("celery_app",)
