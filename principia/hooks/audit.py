"""Audit hooks for logging catalog loads and lookups."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional


def _write(entry: dict, context: Optional[dict]) -> None:
    if not context:
        return
    log_file = Path(context.get("audit_path", "./principia_audit.jsonl"))
    log_file.parent.mkdir(parents=True, exist_ok=True)

    with open(log_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(entry) + "\n")


def log_catalog_load(source: str, entry_count: int, context: Optional[dict]) -> None:
    """Log a completed catalog load."""
    _write(
        {
            "timestamp": datetime.now().isoformat(),
            "event": "catalog_load",
            "source": source,
            "entries": entry_count,
        },
        context,
    )


def log_lookup(
    operation: str,
    query: Any,
    hits: list[int],
    context: Optional[dict],
) -> None:
    """
    Log a lookup and the ordinals it returned.

    A miss is logged with an empty hit list; it is not an error.
    """
    _write(
        {
            "timestamp": datetime.now().isoformat(),
            "event": "lookup",
            "operation": operation,
            "query": query if isinstance(query, (int, str)) else repr(query),
            "hits": hits,
            "found": bool(hits),
        },
        context,
    )
