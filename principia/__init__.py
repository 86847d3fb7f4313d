"""principia - a catalog of object-oriented design principles.

Each entry pairs a definition with a bad and a good code example. The
catalog is loaded once, validated, and then only read.
"""
from __future__ import annotations

from .catalog import (
    BadExample,
    Catalog,
    GoodExample,
    PrincipleCatalog,
    PrincipleEntry,
)
from .errors import CatalogError, MalformedEntryError, NotFoundError
from .loader import default_catalog, load_catalog
from .text import parse_catalog, serialize_catalog

__version__ = "0.1.0"
__all__ = [
    "BadExample",
    "Catalog",
    "GoodExample",
    "PrincipleCatalog",
    "PrincipleEntry",
    "CatalogError",
    "MalformedEntryError",
    "NotFoundError",
    "default_catalog",
    "load_catalog",
    "parse_catalog",
    "serialize_catalog",
]
