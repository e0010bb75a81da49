"""Directory scanning and document loading."""

import fnmatch
import logging
from pathlib import Path

import frontmatter
import yaml

from ..config import StoreConfig, find_config, load_config
from ..errors import DuplicatePathError, ParseError
from ..models import Document
from .parser import build_document

logger = logging.getLogger(__name__)


def is_excluded(rel: Path, config: StoreConfig) -> bool:
    """Check a root-relative path against hidden parts and exclude globs."""
    if any(part.startswith(".") for part in rel.parts):
        return True
    posix = rel.as_posix()
    return any(fnmatch.fnmatch(posix, pattern) for pattern in config.exclude)


def iter_sources(root: Path, config: StoreConfig) -> list[Path]:
    """Document files under root, relative to it, in sorted order."""
    sources = []
    for file in root.rglob("*"):
        if not file.is_file() or file.suffix.lower() not in config.extensions:
            continue
        rel = file.relative_to(root)
        if is_excluded(rel, config):
            logger.debug("Skipping %s", rel.as_posix())
            continue
        sources.append(rel)
    return sorted(sources, key=lambda p: p.as_posix())


def load_document(path: Path, root: Path, config: StoreConfig | None = None) -> Document:
    """Load a single markdown file and parse its front-matter."""
    config = config or StoreConfig()
    try:
        source = path.relative_to(root)
    except ValueError:
        raise ValueError(f"{path} is not inside {root}") from None

    try:
        post = frontmatter.load(path)
    except UnicodeDecodeError as e:
        raise ParseError(source, f"not valid UTF-8 text: {e}") from e
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises a bare ValueError for impossible dates
        raise ParseError(source, f"malformed front-matter: {e}") from e
    return build_document(post, source, config)


def check_unique(documents: list[Document]) -> None:
    """Raise DuplicatePathError if two documents share a path."""
    seen: dict[str, Path] = {}
    for doc in documents:
        if doc.path in seen:
            raise DuplicatePathError(doc.path, [seen[doc.path], doc.source])
        seen[doc.path] = doc.source


def load_all(root: Path, config: StoreConfig | None = None) -> list[Document]:
    """Load every document under the store root.

    Args:
        root: Content directory to scan recursively
        config: Store configuration; defaults to ``root/blogstore.toml`` if present

    Returns:
        Documents in source path order

    Raises:
        ParseError: a document's front-matter is malformed or incomplete
        DuplicatePathError: two documents resolve to the same path
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"content directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    if config is None:
        config_path = find_config(root)
        config = load_config(config_path) if config_path else StoreConfig()

    documents = []
    for source in iter_sources(root, config):
        doc = load_document(root / source, root, config)
        logger.debug("Loaded %s as %s (%s)", source.as_posix(), doc.path, doc.layout)
        documents.append(doc)

    check_unique(documents)
    logger.info("Loaded %d documents from %s", len(documents), root)
    return documents
