"""Content store configuration, read from ``blogstore.toml``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "blogstore.toml"


@dataclass(frozen=True)
class StoreConfig:
    """Which files are documents and which layouts they may use."""

    layouts: tuple[str, ...] = ("page", "post")
    dated_layouts: tuple[str, ...] = ("post",)
    extensions: tuple[str, ...] = (".md", ".markdown")
    exclude: tuple[str, ...] = ()
    excerpt_separator: str = "\n\n"

    def __post_init__(self) -> None:
        missing = [name for name in self.dated_layouts if name not in self.layouts]
        if missing:
            raise ValueError(f"dated_layouts not listed in layouts: {', '.join(missing)}")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise ValueError(f"extension must start with '.': {ext!r}")
        if not self.excerpt_separator:
            raise ValueError("excerpt_separator must not be empty")

    def is_dated(self, layout: str) -> bool:
        """Whether documents with this layout require a date."""
        return layout in self.dated_layouts


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _string_tuple(data: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    if key not in data:
        return default
    raw = data[key]
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ValueError(f"{key} must be a list of strings")
    return tuple(item.strip() for item in raw if item.strip())


def load_config(path: Path) -> StoreConfig:
    """
    Load store configuration from TOML.

    Keys may sit under a ``[blogstore]`` table or at the top level.
    """
    import tomllib

    data = tomllib.loads(path.read_text(encoding="utf-8"))
    section = _coerce_dict(data.get("blogstore")) or data

    defaults = StoreConfig()
    separator = section.get("excerpt_separator", defaults.excerpt_separator)
    if not isinstance(separator, str):
        raise ValueError("excerpt_separator must be a string")

    return StoreConfig(
        layouts=_string_tuple(section, "layouts", defaults.layouts),
        dated_layouts=_string_tuple(section, "dated_layouts", defaults.dated_layouts),
        extensions=tuple(ext.lower() for ext in _string_tuple(section, "extensions", defaults.extensions)),
        exclude=_string_tuple(section, "exclude", defaults.exclude),
        excerpt_separator=separator,
    )


def find_config(root: Path) -> Path | None:
    """Return the config file at the store root, if any."""
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None
