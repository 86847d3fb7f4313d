"""Principle catalog records and lookups."""
from __future__ import annotations

from .models import BadExample, GoodExample, PrincipleEntry, Catalog
from .validation import validate_catalog, validate_entry
from .library import PrincipleCatalog

__all__ = [
    "BadExample",
    "GoodExample",
    "PrincipleEntry",
    "Catalog",
    "PrincipleCatalog",
    "validate_catalog",
    "validate_entry",
]
