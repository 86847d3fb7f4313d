"""Render catalog records back into the markdown text structure."""
from __future__ import annotations

from ..catalog.models import Catalog, PrincipleEntry

BAD_LABEL = "**Bad Example:**"
GOOD_LABEL = "**Good Example:**"
ISSUES_LABEL = "**Issues:**"
BENEFITS_LABEL = "**Benefits:**"


def _code_block(language: str, code: str) -> str:
    return f"```{language}\n{code}\n```"


def _numbered(items) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, 1))


def serialize_entry(entry: PrincipleEntry) -> str:
    """Render one entry as a third-level section."""
    bad, good = entry.bad_example, entry.good_example
    blocks = [
        f"### {entry.heading}",
        entry.definition,
        f"{BAD_LABEL} {bad.title}",
        _code_block(bad.language, bad.code),
        ISSUES_LABEL,
        _numbered(bad.issues),
        f"{GOOD_LABEL} {good.title}",
        _code_block(good.language, good.code),
        BENEFITS_LABEL,
        _numbered(good.benefits),
    ]
    return "\n\n".join(blocks)


def serialize_catalog(catalog: Catalog) -> str:
    """Render the full catalog; parse_catalog() reads this back unchanged."""
    blocks = [f"# {catalog.title}"]
    if catalog.preamble:
        blocks.append(catalog.preamble)
    if catalog.rationale_heading:
        blocks.append(f"## {catalog.rationale_heading}")
        if catalog.rationale:
            blocks.append(catalog.rationale)
    blocks.extend(serialize_entry(e) for e in catalog.entries)
    return "\n\n".join(blocks) + "\n"
