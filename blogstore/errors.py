"""Errors raised while loading the content store."""

from pathlib import Path


class ContentError(Exception):
    """Base class for content store failures."""


class ParseError(ContentError):
    """A document's front-matter is malformed or incomplete."""

    def __init__(self, source: Path | str, reason: str):
        self.source = Path(source)
        self.reason = reason
        super().__init__(f"{self.source.as_posix()}: {reason}")


class DuplicatePathError(ContentError):
    """Two or more documents resolve to the same identifier."""

    def __init__(self, path: str, sources: list[Path]):
        self.path = path
        self.sources = list(sources)
        listed = ", ".join(s.as_posix() for s in self.sources)
        super().__init__(f"duplicate document path '{path}' ({listed})")
