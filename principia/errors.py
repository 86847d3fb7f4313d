"""Error taxonomy for catalog loading and lookup."""
from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    """Base class for every catalog error."""


class NotFoundError(CatalogError, LookupError):
    """A requested ordinal or name has no matching entry."""

    def __init__(self, query, message: Optional[str] = None):
        self.query = query
        super().__init__(message or f"No principle matches {query!r}")


class MalformedEntryError(CatalogError, ValueError):
    """An entry (or the catalog around it) is missing a required field.

    Raised at load time so a broken corpus never reaches rendering.
    """

    def __init__(self, entry: str, field: str, reason: str):
        self.entry = entry
        self.field = field
        self.reason = reason
        super().__init__(f"{entry}: {field}: {reason}")
