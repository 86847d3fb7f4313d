"""Hooks for catalog load and lookup events"""

from .audit import log_catalog_load, log_lookup

__all__ = ["log_catalog_load", "log_lookup"]
