"""One-shot catalog loading from a file or the bundled corpus."""
from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from pathlib import Path
from typing import Optional, Union

from .catalog.library import PrincipleCatalog
from .errors import MalformedEntryError
from .hooks.audit import log_catalog_load
from .logger import CatalogLogger
from .text.parser import parse_catalog

CONTENT_PACKAGE = "principia.content"
DEFAULT_CATALOG_FILE = "design_principles.md"


def load_catalog(
    path: Optional[Union[str, Path]] = None,
    logger: Optional[CatalogLogger] = None,
    audit_context: Optional[dict] = None,
) -> PrincipleCatalog:
    """
    Load and validate a catalog.

    The source is read and parsed inside a single ``with`` block, so the
    file handle is released whether parsing succeeds or fails.

    Args:
        path: Markdown or ``.json`` file; None loads the bundled corpus
        logger: Optional step logger
        audit_context: Audit hook context (None disables auditing)

    Raises:
        MalformedEntryError: if the content is not UTF-8 or breaks the catalog structure
        OSError: if the file cannot be read
    """
    if path is None:
        source = files(CONTENT_PACKAGE).joinpath(DEFAULT_CATALOG_FILE)
        source_name = f"<bundled {DEFAULT_CATALOG_FILE}>"
        is_json = False
    else:
        source = Path(path)
        source_name = str(source)
        is_json = source.suffix.lower() == ".json"

    if logger:
        logger.log("LOAD", f"Reading catalog from {source_name}")

    with source.open("r", encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedEntryError(source_name, "encoding", str(e)) from e
        if is_json:
            catalog = PrincipleCatalog.from_json(text)
        else:
            catalog = PrincipleCatalog(parse_catalog(text))

    if logger:
        logger.log(
            "LOAD",
            f"Loaded {len(catalog)} principle(s)",
            detail="\n".join(e.heading for e in catalog.list_all()),
        )
    log_catalog_load(source_name, len(catalog), audit_context)
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> PrincipleCatalog:
    """The bundled catalog, loaded once and shared (it is immutable)."""
    return load_catalog()
