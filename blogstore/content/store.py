"""Read-only document store and listing queries."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from ..config import StoreConfig
from ..models import Document
from .loader import check_unique, load_all


def _newest_first(documents: Iterable[Document]) -> list[Document]:
    """Dated documents newest first, then undated ones; ties by path."""
    by_path = sorted(documents, key=lambda doc: doc.path)
    dated = [doc for doc in by_path if doc.date is not None]
    undated = [doc for doc in by_path if doc.date is None]
    # sort is stable, so equal dates keep path order
    dated.sort(key=lambda doc: doc.date, reverse=True)
    return dated + undated


@dataclass(frozen=True)
class ContentStore:
    """Snapshot of every document in a content directory."""

    documents: tuple[Document, ...] = ()

    # Lookup table built after loading
    _by_path: dict[str, Document] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        docs = tuple(self.documents)
        check_unique(list(docs))
        object.__setattr__(self, "documents", docs)
        object.__setattr__(self, "_by_path", {doc.path: doc for doc in docs})

    @classmethod
    def load(cls, root: Path, config: StoreConfig | None = None) -> "ContentStore":
        """Load all documents under root into a new store."""
        return cls(tuple(load_all(root, config)))

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def get(self, path: str) -> Document | None:
        """Get a document by its path."""
        return self._by_path.get(path)

    def ordered(self) -> list[Document]:
        """Documents newest first, undated documents last, ties by path."""
        return _newest_first(self.documents)

    def by_tag(self, tag: str) -> list[Document]:
        """Documents carrying tag, newest first."""
        return [doc for doc in self.ordered() if tag in doc.tags]

    def by_category(self, category: str) -> list[Document]:
        """Documents in category, newest first."""
        return [doc for doc in self.ordered() if category in doc.categories]

    def by_layout(self, layout: str) -> list[Document]:
        """Documents using layout, newest first."""
        return [doc for doc in self.ordered() if doc.layout == layout]

    def posts(self) -> list[Document]:
        """Documents with a dated layout, newest first."""
        return [doc for doc in self.ordered() if doc.is_post]

    def pages(self) -> list[Document]:
        """Documents with an undated layout."""
        return [doc for doc in self.ordered() if not doc.is_post]

    def tags(self) -> dict[str, int]:
        """Tag -> number of documents carrying it, sorted by tag."""
        return _count_labels(doc.tags for doc in self.documents)

    def categories(self) -> dict[str, int]:
        """Category -> number of documents in it, sorted by category."""
        return _count_labels(doc.categories for doc in self.documents)

    def navigation(self) -> list[Document]:
        """Documents that declare an ``order``, for site navigation."""
        entries = [doc for doc in self.documents if doc.order is not None]
        return sorted(entries, key=lambda doc: (doc.order, doc.path))


def _count_labels(label_sets: Iterable[frozenset[str]]) -> dict[str, int]:
    counts = Counter(label for labels in label_sets for label in labels)
    return dict(sorted(counts.items()))
