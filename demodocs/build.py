"""
Compile markdown documentation pages into Vue single-file components.

Used by the build_docs management command and the build_document_task
Celery task; both build one document at a time with a fresh markdown engine.
"""

import json
import logging
from pathlib import Path

from .exceptions import DocumentBuildError
from .markdown.extensions.toc_extractor import extract_toc_from_html
from .markdown.renderer import compile_to_vue

logger = logging.getLogger(__name__)


def output_path_for(source_path, source_root, output_root) -> Path:
    """Mirror ``source_path`` under ``output_root`` with a .vue suffix."""
    relative = Path(source_path).relative_to(source_root)
    return Path(output_root) / relative.with_suffix(".vue")


def build_document(source_path, output_path, toc=False, dry_run=False):
    """
    Compile one markdown file into a .vue component.

    Args:
        source_path: Markdown file to read (UTF-8)
        output_path: .vue file to write; parent directories are created
        toc: Also write the heading outline to <name>.toc.json
        dry_run: Compile but write nothing

    Returns:
        Dict with keys: 'source', 'output', 'demos', 'toc'

    Raises:
        DocumentBuildError: if the source cannot be read or the output
            cannot be written
    """
    source_path = Path(source_path)
    output_path = Path(output_path)

    try:
        text = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentBuildError(source_path, f"cannot read source: {e}") from e

    context = {}
    component = compile_to_vue(text, context)

    toc_path = None
    outline = []
    if toc:
        outline = extract_toc_from_html(
            component, demo_element=context["config"]["demo"]["element"]
        )
        toc_path = output_path.with_suffix(".toc.json")

    if not dry_run:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(component, encoding="utf-8")
            if toc_path is not None:
                toc_path.write_text(
                    json.dumps(outline, ensure_ascii=False, indent=2), encoding="utf-8"
                )
        except (OSError, UnicodeError) as e:
            raise DocumentBuildError(source_path, f"cannot write output: {e}") from e

    logger.info(f"Built {source_path} -> {output_path} ({len(context['demos'])} demos)")

    return {
        "source": str(source_path),
        "output": str(output_path),
        "demos": len(context["demos"]),
        "toc": str(toc_path) if toc_path is not None else None,
    }
