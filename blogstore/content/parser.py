"""Front-matter parsing and field normalization."""

from datetime import date, datetime, timezone
from pathlib import Path, PurePosixPath
from typing import Any

import frontmatter
import yaml

from ..config import StoreConfig
from ..errors import ParseError
from ..models import RECOGNIZED_KEYS, Document


def extract_title(content: str) -> str | None:
    """Return the text of the first H1 header, if any."""
    for line in content.split("\n"):
        if line.startswith("# "):
            return line[2:].strip() or None
    return None


def normalize_date(value: Any, source: Path) -> datetime:
    """Coerce a front-matter date to a naive datetime.

    Aware datetimes are converted to UTC first so that every date in a store
    compares against every other.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ParseError(source, f"invalid date {value!r}") from None
        return normalize_date(parsed, source)
    raise ParseError(source, f"invalid date {value!r}")


def normalize_labels(value: Any, key: str, source: Path) -> frozenset[str]:
    """Coerce ``tags`` or ``categories`` to a set of labels.

    A single string is one label unless it is comma separated.
    """
    if value is None:
        return frozenset()
    if isinstance(value, str):
        items = value.split(",") if "," in value else [value]
    elif isinstance(value, (list, tuple, set)):
        items = []
        for item in value:
            if isinstance(item, (dict, list)) or item is None:
                raise ParseError(source, f"{key} entries must be scalars")
            items.append(str(item))
    else:
        raise ParseError(source, f"{key} must be a list or a string")
    return frozenset(item.strip() for item in items if item.strip())


def normalize_order(value: Any, source: Path) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ParseError(source, f"order must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ParseError(source, f"order must be an integer, got {value!r}")


def _optional_text(value: Any, key: str, source: Path) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ParseError(source, f"{key} must be a scalar")
    text = str(value).strip()
    return text or None


def resolve_path(source: Path, permalink: str | None) -> str:
    """Identifier for a document: its permalink, else its extensionless source path."""
    if permalink:
        return permalink
    return PurePosixPath(source.as_posix()).with_suffix("").as_posix()


def build_document(post: frontmatter.Post, source: Path, config: StoreConfig) -> Document:
    """Validate parsed front-matter and build the Document."""
    fm = post.metadata

    layout = _optional_text(fm.get("layout"), "layout", source)
    if layout is None:
        raise ParseError(source, "missing required front-matter key 'layout'")
    if layout not in config.layouts:
        allowed = ", ".join(config.layouts)
        raise ParseError(source, f"unknown layout '{layout}' (expected one of: {allowed})")

    dated = config.is_dated(layout)
    raw_date = fm.get("date")
    if raw_date is None:
        if dated:
            raise ParseError(source, f"'{layout}' documents require a date")
        doc_date = None
    else:
        doc_date = normalize_date(raw_date, source)

    content = post.content
    title = (
        _optional_text(fm.get("title"), "title", source)
        or extract_title(content)
        or source.stem
    )
    permalink = _optional_text(fm.get("permalink"), "permalink", source)

    return Document(
        path=resolve_path(source, permalink),
        source=source,
        layout=layout,
        title=title,
        body=content,
        date=doc_date,
        tags=normalize_labels(fm.get("tags"), "tags", source),
        categories=normalize_labels(fm.get("categories"), "categories", source),
        permalink=permalink,
        icon=_optional_text(fm.get("icon"), "icon", source),
        order=normalize_order(fm.get("order"), source),
        extra={k: v for k, v in fm.items() if k not in RECOGNIZED_KEYS},
        dated=dated,
        excerpt_separator=config.excerpt_separator,
    )


def parse_document(text: str, source: Path, config: StoreConfig | None = None) -> Document:
    """Parse document text already read into memory.

    Args:
        text: Full file content, front-matter included
        source: Path relative to the store root, used as identifier and in errors
        config: Store configuration (defaults when omitted)

    Raises:
        ParseError: front-matter is malformed or incomplete
    """
    try:
        post = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError) as e:
        raise ParseError(source, f"malformed front-matter: {e}") from e
    return build_document(post, source, config or StoreConfig())
