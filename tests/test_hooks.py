"""
Tests for the audit hooks and the step logger.
"""
import io
import json

from rich.console import Console

from principia.hooks.audit import log_catalog_load, log_lookup
from principia.logger import CatalogLogger


def _records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestAuditHooks:

    def test_no_context_writes_nothing(self, tmp_path):
        log_lookup("search", "SRP", [1], None)
        log_catalog_load("x.md", 3, None)
        assert list(tmp_path.iterdir()) == []

    def test_lookup_hit_and_miss(self, tmp_path):
        path = tmp_path / "nested" / "audit.jsonl"
        context = {"audit_path": str(path)}
        log_lookup("search", "Principle", [1, 2], context)
        log_lookup("show", "Singleton", [], context)

        hit, miss = _records(path)
        assert hit["event"] == "lookup"
        assert hit["hits"] == [1, 2]
        assert hit["found"] is True
        assert miss["query"] == "Singleton"
        assert miss["found"] is False

    def test_catalog_load(self, tmp_path):
        path = tmp_path / "audit.jsonl"
        log_catalog_load("catalog.md", 13, {"audit_path": str(path)})
        (record,) = _records(path)
        assert record["source"] == "catalog.md"
        assert record["entries"] == 13
        assert "timestamp" in record


class TestCatalogLogger:

    def test_quiet_by_default(self):
        out = io.StringIO()
        logger = CatalogLogger(console=Console(file=out))
        logger.log("LOAD", "hello")
        assert out.getvalue() == ""

    def test_verbose_prints_step(self):
        out = io.StringIO()
        logger = CatalogLogger(verbose=True, console=Console(file=out, width=120))
        logger.log("LOAD", "Loaded [13] principle(s)")
        assert "[LOAD] Loaded [13] principle(s)" in out.getvalue()

    def test_file_gets_detail(self, tmp_path):
        path = tmp_path / "run.log"
        logger = CatalogLogger(log_file=str(path))
        logger.log_section("principia list")
        logger.log("LOAD", "short", detail="long detail")
        content = path.read_text(encoding="utf-8")
        assert "# principia list" in content
        assert "LOAD: short" in content
        assert "long detail" in content
