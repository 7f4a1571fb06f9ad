"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

NoteWriter = Callable[..., Path]


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """Return an empty directory for note trees."""
    path = tmp_path / "notes"
    path.mkdir()
    return path


@pytest.fixture
def write_note(notes_dir: Path) -> NoteWriter:
    """Return a factory writing a note with PyYAML-emitted frontmatter.

    ``write_note("a/b.md", "Body text", tags=["x"])`` creates
    ``notes_dir/a/b.md``. Without frontmatter fields the body is written as is.
    """

    def _write(relative: str, body: str, **frontmatter: Any) -> Path:
        path = notes_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)

        content = body
        if frontmatter:
            header = yaml.safe_dump(frontmatter, default_flow_style=False, allow_unicode=True)
            content = f"---\n{header}---\n{body}"

        path.write_text(content, encoding="utf-8")
        return path

    return _write
