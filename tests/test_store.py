"""Tests for ContentStore listing queries."""

from datetime import datetime
from pathlib import Path

import pytest

from blogstore.content import ContentStore, load_all
from blogstore.errors import DuplicatePathError
from blogstore.models import Document


def _doc(path: str, date: datetime | None = None, layout: str = "post", **kwargs) -> Document:
    return Document(
        path=path,
        source=Path(f"{path}.md"),
        layout=layout,
        title=path,
        body="",
        date=date,
        dated=layout == "post",
        **kwargs,
    )


def test_ordered_posts_newest_first_then_pages(fixture_store: ContentStore):
    ordered = fixture_store.ordered()

    assert [d.title for d in ordered] == [
        "What coding contests taught me about software engineering",
        "Porting an Advent of Code solution to Mojo",
        "About",
    ]
    assert ordered[0].date.date().isoformat() == "2025-02-15"
    assert ordered[1].date == datetime(2024, 7, 13)
    assert ordered[2].date is None


def test_by_tag_matches_exact_label(fixture_store: ContentStore):
    matched = fixture_store.by_tag("Software engineering")

    assert [d.path for d in matched] == ["_posts/2025-02-15-what-contests-taught-me"]
    assert fixture_store.by_tag("unrelated") == []


def test_by_tag_is_case_sensitive(fixture_store: ContentStore):
    assert fixture_store.by_tag("software engineering") == []


def test_reload_is_idempotent(fixture_site_path: Path):
    first = load_all(fixture_site_path)
    second = load_all(fixture_site_path)

    assert first == second
    assert ContentStore(tuple(first)).ordered() == ContentStore(tuple(second)).ordered()


def test_ties_broken_by_path():
    same_day = datetime(2024, 1, 1)
    store = ContentStore((_doc("b", same_day), _doc("a", same_day), _doc("c", datetime(2023, 1, 1))))

    assert [d.path for d in store.ordered()] == ["a", "b", "c"]


def test_undated_sorted_by_path_after_dated():
    store = ContentStore(
        (
            _doc("zeta", layout="page"),
            _doc("alpha", layout="page"),
            _doc("post", datetime(2020, 5, 1)),
        )
    )

    assert [d.path for d in store.ordered()] == ["post", "alpha", "zeta"]


def test_duplicate_paths_rejected():
    with pytest.raises(DuplicatePathError) as exc:
        ContentStore((_doc("same"), Document(path="same", source=Path("other.md"), layout="page", title="x", body="")))

    assert exc.value.path == "same"


def test_same_document_twice_rejected():
    doc = _doc("twice", datetime(2024, 1, 1))

    with pytest.raises(DuplicatePathError):
        ContentStore((doc, doc))


def test_posts_and_pages(fixture_store: ContentStore):
    assert [d.layout for d in fixture_store.posts()] == ["post", "post"]
    assert [d.title for d in fixture_store.pages()] == ["About"]
    assert len(fixture_store.by_layout("post")) == 2


def test_get_and_contains(fixture_store: ContentStore):
    about = fixture_store.get("/about/")

    assert about is not None
    assert about.title == "About"
    assert "/about/" in fixture_store
    assert fixture_store.get("/missing/") is None
    assert len(fixture_store) == 3


def test_tag_and_category_counts(fixture_store: ContentStore):
    assert fixture_store.tags() == {
        "Contests": 1,
        "Mojo": 1,
        "Python": 1,
        "Software engineering": 1,
    }
    assert fixture_store.categories() == {"Programming": 1, "Reflections": 1}
    assert [d.title for d in fixture_store.by_category("Programming")] == [
        "Porting an Advent of Code solution to Mojo"
    ]


def test_navigation_uses_order(fixture_store: ContentStore):
    assert [d.path for d in fixture_store.navigation()] == ["/about/"]


def test_empty_store():
    store = ContentStore()

    assert store.ordered() == []
    assert store.by_tag("anything") == []
    assert store.tags() == {}
