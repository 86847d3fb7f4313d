"""Configuration for principia."""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Catalog source; None means the bundled corpus
    catalog_path: Optional[str] = None

    # Logging
    verbose: bool = False
    log_file: Optional[str] = None

    # Audit trail of loads and lookups
    audit_enabled: bool = False
    audit_path: str = "./principia_audit.jsonl"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            catalog_path=os.getenv("PRINCIPIA_CATALOG_PATH") or None,
            verbose=_env_flag("PRINCIPIA_VERBOSE"),
            log_file=os.getenv("PRINCIPIA_LOG_FILE") or None,
            audit_enabled=_env_flag("PRINCIPIA_AUDIT_ENABLED"),
            audit_path=os.getenv("PRINCIPIA_AUDIT_PATH", "./principia_audit.jsonl"),
        )

    @classmethod
    def from_file(cls, path: str) -> "Config":
        """Load configuration from a JSON file. Unknown keys are ignored."""
        config_path = Path(path)
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
            known = {f.name for f in fields(cls)}
            return cls(**{k: v for k, v in data.items() if k in known})

        return cls()

    def audit_context(self) -> Optional[dict]:
        """Context dict for the audit hooks, or None when auditing is off."""
        if not self.audit_enabled:
            return None
        return {"audit_path": self.audit_path}
