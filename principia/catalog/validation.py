"""Structural checks applied to every catalog before it is used."""
from __future__ import annotations

from typing import Union

from ..errors import MalformedEntryError
from .models import BadExample, Catalog, GoodExample, PrincipleEntry


def _require_text(entry: str, field: str, value) -> None:
    if not isinstance(value, str) or not value.strip():
        raise MalformedEntryError(entry, field, "must be non-empty text")


def _validate_example(
    entry: str,
    field: str,
    example: Union[BadExample, GoodExample],
    expected: type,
    list_name: str,
) -> None:
    if not isinstance(example, expected):
        raise MalformedEntryError(entry, field, f"expected exactly one {expected.__name__}")

    _require_text(entry, f"{field}.title", example.title)
    _require_text(entry, f"{field}.code", example.code)

    items = getattr(example, list_name)
    if not isinstance(items, tuple):
        raise MalformedEntryError(entry, f"{field}.{list_name}", "must be a list of strings")
    if not items:
        raise MalformedEntryError(entry, f"{field}.{list_name}", "list must have at least one item")
    for i, item in enumerate(items, 1):
        _require_text(entry, f"{field}.{list_name}[{i}]", item)
        if "\n" in item:
            raise MalformedEntryError(entry, f"{field}.{list_name}[{i}]", "items must be a single line")


def validate_entry(entry: PrincipleEntry) -> None:
    """Raise MalformedEntryError for the first missing or empty field."""
    label = entry.label if isinstance(entry.name, str) and entry.name else f"#{entry.ordinal}"

    _require_text(label, "name", entry.name)
    if entry.abbreviation is not None:
        _require_text(label, "abbreviation", entry.abbreviation)
    _require_text(label, "definition", entry.definition)
    _validate_example(label, "bad_example", entry.bad_example, BadExample, "issues")
    _validate_example(label, "good_example", entry.good_example, GoodExample, "benefits")


def validate_catalog(catalog: Catalog) -> None:
    """Check the catalog-level fields, ordinal order, and every entry."""
    _require_text("catalog", "title", catalog.title)

    for position, entry in enumerate(catalog.entries, 1):
        if not isinstance(entry, PrincipleEntry):
            raise MalformedEntryError(f"#{position}", "entry", "not a PrincipleEntry")
        if entry.ordinal != position:
            raise MalformedEntryError(
                entry.label, "ordinal", f"expected {position} to match catalog position"
            )
        validate_entry(entry)
