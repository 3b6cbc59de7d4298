"""
Static reference catalogs and the terminal browser for them.
"""

from .browser import browse, render_catalog, render_topic
from .catalog import (
    BUILTIN_CATALOGS,
    CatalogError,
    ReferenceCatalog,
    ReferenceTable,
    ReferenceTopic,
    load_builtin_catalog,
    load_catalog_file,
)

__all__ = [
    "browse",
    "render_catalog",
    "render_topic",
    "BUILTIN_CATALOGS",
    "CatalogError",
    "ReferenceCatalog",
    "ReferenceTable",
    "ReferenceTopic",
    "load_builtin_catalog",
    "load_catalog_file",
]
