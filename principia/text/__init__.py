"""Markdown text structure for the catalog"""

from .parser import parse_catalog
from .serializer import serialize_catalog, serialize_entry

__all__ = ["parse_catalog", "serialize_catalog", "serialize_entry"]
