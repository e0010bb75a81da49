"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from blogstore.content import ContentStore


@pytest.fixture
def fixture_site_path() -> Path:
    """Path to the minimal fixture site."""
    return Path(__file__).parent / "fixtures" / "minimal_site"


@pytest.fixture
def fixture_store(fixture_site_path: Path) -> ContentStore:
    """Load the minimal fixture site."""
    return ContentStore.load(fixture_site_path)


@pytest.fixture
def write_doc(tmp_path: Path):
    """Write a markdown file under tmp_path from front-matter lines and a body."""

    def _write(rel: str, front: list[str] | None, body: str = "Body text.") -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = ["---", *front, "---", ""] if front is not None else []
        path.write_text("\n".join([*lines, body, ""]), encoding="utf-8")
        return path

    return _write
