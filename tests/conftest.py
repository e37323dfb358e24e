"""Shared pytest configuration: Django settings and sample documentation pages."""

from __future__ import annotations

import os
from pathlib import Path

import django
import pytest


def pytest_configure() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "DocsProject.settings")
    django.setup()


BUTTON_PAGE = """# Button

## Basic usage

::: demo Use `type` to pick a style.
```html
<el-button type="primary" disabled="">Primary</el-button>
<script>
export default {}
</script>
<style>
.el-button { margin: 4px; }
</style>
```
:::

## 禁用状态

::: tip
Disabled buttons ignore clicks.
:::
"""

INPUT_PAGE = """## Input

::: demo
```html
<el-input v-model="value"></el-input>
```
:::
"""


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A source directory with one top-level and one nested page."""
    source = tmp_path / "docs"
    (source / "form").mkdir(parents=True)
    (source / "button.md").write_text(BUTTON_PAGE, encoding="utf-8")
    (source / "form" / "input.md").write_text(INPUT_PAGE, encoding="utf-8")
    (source / "notes.txt").write_text("not a page", encoding="utf-8")
    return source


@pytest.fixture
def button_page() -> str:
    return BUTTON_PAGE
