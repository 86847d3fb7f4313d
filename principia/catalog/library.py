"""Read-only principle catalog with lookup by ordinal and by name."""
from __future__ import annotations

import json
from typing import Iterable, Iterator, Optional

from ..errors import MalformedEntryError, NotFoundError
from ..text.serializer import serialize_catalog, serialize_entry
from .models import Catalog, PrincipleEntry
from .validation import validate_catalog


class PrincipleCatalog:
    """
    Ordered, immutable set of principle entries.

    The catalog is validated once on construction and never changes
    afterwards, so a single instance can be shared between any number of
    readers without locking.
    """

    def __init__(self, catalog: Catalog):
        validate_catalog(catalog)
        self.catalog = catalog
        self._index = self._build_index()

    def _build_index(self) -> dict[str, list[PrincipleEntry]]:
        """Index entries by lower-cased abbreviation."""
        index = {}
        for entry in self.catalog.entries:
            if entry.abbreviation:
                index.setdefault(entry.abbreviation.lower(), []).append(entry)
        return index

    @property
    def title(self) -> str:
        return self.catalog.title

    def __len__(self) -> int:
        return len(self.catalog.entries)

    def __iter__(self) -> Iterator[PrincipleEntry]:
        return self.list_all()

    def list_all(self) -> Iterator[PrincipleEntry]:
        """Yield every entry in catalog order. Each call starts over."""
        yield from self.catalog.entries

    def get_by_ordinal(self, ordinal: int) -> PrincipleEntry:
        """
        Get the entry at a display position.

        Args:
            ordinal: 1-based position in the catalog

        Raises:
            NotFoundError: if ordinal is outside [1, len(self)]
        """
        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise NotFoundError(ordinal, f"Ordinal must be an integer, got {ordinal!r}")
        if not 1 <= ordinal <= len(self):
            raise NotFoundError(
                ordinal, f"No principle #{ordinal} (catalog has {len(self)} entries)"
            )
        return self.catalog.entries[ordinal - 1]

    def get_by_name(self, query: str) -> list[PrincipleEntry]:
        """
        Find entries by abbreviation or name, ignoring case.

        Exact abbreviation matches come first, followed by entries whose
        name contains the query. Both groups keep catalog order and an
        entry never appears twice.

        Returns:
            Matching entries; empty when nothing matches or query is blank
        """
        needle = (query or "").strip().lower()
        if not needle:
            return []

        matches = list(self._index.get(needle, []))
        seen = {e.ordinal for e in matches}
        for entry in self.catalog.entries:
            if entry.ordinal not in seen and needle in entry.name.lower():
                matches.append(entry)
                seen.add(entry.ordinal)
        return matches

    def resolve(self, key: str) -> PrincipleEntry:
        """Look up a single entry by ordinal ("3") or name/abbreviation ("DIP")."""
        key = str(key).strip()
        if key.isdecimal():
            return self.get_by_ordinal(int(key))
        matches = self.get_by_name(key)
        if not matches:
            raise NotFoundError(key)
        return matches[0]

    def format_markdown(self, entries: Optional[Iterable[PrincipleEntry]] = None) -> str:
        """Format some (default: all) entries as markdown sections."""
        entries = list(self.list_all() if entries is None else entries)
        if not entries:
            return "No matching principles found in the catalog."
        return "\n\n".join(serialize_entry(e) for e in entries) + "\n"

    def to_markdown(self) -> str:
        """Export the whole catalog in its documented text structure."""
        return serialize_catalog(self.catalog)

    def to_json(self) -> str:
        """Export catalog as JSON."""
        return json.dumps(self.catalog.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "PrincipleCatalog":
        """Load catalog from JSON."""
        try:
            data = json.loads(json_str)
            catalog = Catalog.from_dict(data)
        except json.JSONDecodeError as e:
            raise MalformedEntryError("catalog", "json", str(e)) from e
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedEntryError("catalog", "json", f"missing or invalid field {e}") from e
        return cls(catalog)
