"""Data model for blog documents."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

# Front-matter keys with a dedicated Document attribute
RECOGNIZED_KEYS = frozenset(
    {
        "layout",
        "title",
        "date",
        "tags",
        "permalink",
        "categories",
        "icon",
        "order",
    }
)

# Jekyll post filenames: 2024-07-13-some-title.md
DATED_SLUG_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}-(.+)$")


def _frozen_mapping(value: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(value or {}))


@dataclass(frozen=True)
class Document:
    """One page or post of the blog."""

    path: str  # permalink, or source path without extension
    source: Path  # relative to the store root
    layout: str
    title: str
    body: str  # markdown after front-matter
    date: datetime | None = None
    tags: frozenset[str] = frozenset()
    categories: frozenset[str] = frozenset()
    permalink: str | None = None
    icon: str | None = None
    order: int | None = None
    extra: Mapping[str, Any] = field(default_factory=_frozen_mapping, hash=False)
    dated: bool = False  # layout requires a date
    excerpt_separator: str = field(default="\n\n", repr=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", _frozen_mapping(self.extra))

    @property
    def is_post(self) -> bool:
        return self.dated

    @property
    def slug(self) -> str:
        """Last segment of the path, without a Jekyll date prefix."""
        last = self.path.rstrip("/").rsplit("/", 1)[-1]
        match = DATED_SLUG_PATTERN.match(last)
        return match.group(1) if match else last

    @property
    def excerpt(self) -> str:
        """Body text up to the first excerpt separator."""
        text = self.body.strip()
        head, _, _ = text.partition(self.excerpt_separator)
        return head.strip()
