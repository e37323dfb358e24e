"""
Celery tasks for building documentation pages in the background.

To use Celery, you need to:
1. Install celery: pip install celery redis
2. Configure CELERY_BROKER_URL in settings.py
3. Run celery worker: celery -A DocsProject worker -l info
"""

import logging

from celery import shared_task

from .build import build_document
from .exceptions import DocumentBuildError

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(DocumentBuildError,),
    retry_backoff=5,
    retry_kwargs={"max_retries": 3},
)
def build_document_task(self, source_path, output_path, toc=False):
    """
    Compile one markdown page into a .vue component.

    Args:
        source_path: Markdown file to read
        output_path: .vue file to write
        toc: Also write the heading outline JSON

    Returns:
        Dict with a 'success' flag plus the build_document() result or the
        error text
    """
    try:
        result = build_document(source_path, output_path, toc=toc)
    except DocumentBuildError as e:
        cause = e.__cause__
        if isinstance(cause, OSError) and not isinstance(cause, FileNotFoundError):
            # Retried by Celery; a missing source is permanent
            raise
        logger.error(f"Document build failed: {e}", exc_info=True)
        return {
            "success": False,
            "source": str(source_path),
            "error": str(e),
        }

    return {"success": True, **result}
