"""blogstore - load-once content store for a Markdown blog."""

__version__ = "0.1.0"

from .config import StoreConfig, load_config
from .content import ContentStore, load_all, load_document, parse_document
from .errors import ContentError, DuplicatePathError, ParseError
from .models import Document

__all__ = [
    "__version__",
    "ContentError",
    "ContentStore",
    "Document",
    "DuplicatePathError",
    "ParseError",
    "StoreConfig",
    "load_all",
    "load_config",
    "load_document",
    "parse_document",
]
