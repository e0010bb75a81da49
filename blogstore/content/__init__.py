"""Content directory loading and querying."""

from .loader import load_all, load_document
from .parser import extract_title, parse_document
from .store import ContentStore

__all__ = [
    "ContentStore",
    "extract_title",
    "load_all",
    "load_document",
    "parse_document",
]
