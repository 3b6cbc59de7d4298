"""
Read-only catalogs of reference tables (JavaScript chapters, Git commands).
"""

from __future__ import annotations

import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, model_validator

BUILTIN_CATALOGS = ("js_chapters", "git_commands")


class CatalogError(RuntimeError):
    """Raised when a catalog file cannot be loaded or validated."""


class ReferenceTable(BaseModel):
    """
    One table of example rows.

    Attributes:
        title: Optional caption printed above the table.
        columns: Column headers.
        rows: Cell text per row; every row has one cell per column.
    """
    title: Optional[str] = None
    columns: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = ()

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _check_row_widths(self) -> "ReferenceTable":
        if not self.columns:
            raise ValueError("a table needs at least one column")
        width = len(self.columns)
        for index, row in enumerate(self.rows, start=1):
            if len(row) != width:
                raise ValueError(f"row {index} has {len(row)} cells, expected {width}")
        return self


class ReferenceTopic(BaseModel):
    name: str
    tables: Tuple[ReferenceTable, ...] = Field(default=(), alias="table")

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}


class ReferenceCatalog(BaseModel):
    """
    Topics in registration order plus a read-only name -> tables index.

    Attributes:
        title: Heading shown by the browser.
        item_label: What a topic is called in prompts ("chapter", "category").
        numbered: Prefix every row with a running ``No`` column when rendered.
        topics: Registered topics, possibly with zero tables.
    """
    title: str
    item_label: str = "topic"
    numbered: bool = False
    topics: Tuple[ReferenceTopic, ...] = Field(default=(), alias="topic")

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}

    _index: Mapping[str, Tuple[ReferenceTable, ...]] = PrivateAttr()

    @model_validator(mode="after")
    def _check_unique_names(self) -> "ReferenceCatalog":
        seen = set()
        for topic in self.topics:
            if topic.name in seen:
                raise ValueError(f"duplicate topic {topic.name!r}")
            seen.add(topic.name)
        return self

    def model_post_init(self, __context: Any) -> None:
        self._index = MappingProxyType({topic.name: topic.tables for topic in self.topics})

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(topic.name for topic in self.topics)

    @property
    def tables(self) -> Mapping[str, Tuple[ReferenceTable, ...]]:
        return self._index

    def tables_for(self, name: str) -> Tuple[ReferenceTable, ...]:
        """Tables registered for ``name``; empty for unknown or empty topics."""
        return self._index.get(name, ())


def _parse_catalog(raw: bytes | str, source: str) -> ReferenceCatalog:
    text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    try:
        data: Dict[str, Any] = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise CatalogError(f"Invalid TOML in catalog {source}: {exc}") from exc
    try:
        return ReferenceCatalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog {source}: {exc}") from exc


@lru_cache(maxsize=None)
def load_builtin_catalog(name: str) -> ReferenceCatalog:
    """
    Load one of the catalogs shipped with the package.

    Raises:
        CatalogError: If ``name`` is not a bundled catalog.
    """
    if name not in BUILTIN_CATALOGS:
        raise CatalogError(f"Unknown catalog {name!r}; choose from {', '.join(BUILTIN_CATALOGS)}")
    resource = resources.files(__package__).joinpath("data", f"{name}.toml")
    return _parse_catalog(resource.read_bytes(), name)


def load_catalog_file(path: Path | str) -> ReferenceCatalog:
    """Load a user-supplied catalog in the same TOML layout as the bundled ones."""
    catalog_path = Path(path).expanduser().resolve()
    try:
        raw = catalog_path.read_bytes()
    except OSError as exc:
        raise CatalogError(f"Unable to read catalog file {catalog_path}: {exc}") from exc
    return _parse_catalog(raw, str(catalog_path))
