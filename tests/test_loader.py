"""
Tests for loading catalogs from files and the bundled corpus.
"""
import json
from pathlib import Path

import pytest

from principia.errors import MalformedEntryError
from principia.loader import default_catalog, load_catalog
from principia.logger import CatalogLogger


class TestLoadCatalog:

    def test_bundled_corpus(self):
        catalog = load_catalog()
        assert len(catalog) == 13
        assert catalog.get_by_ordinal(1).abbreviation == "SRP"

    def test_default_catalog_is_shared(self):
        assert default_catalog() is default_catalog()

    def test_markdown_file(self, tmp_path, sample_text):
        path = tmp_path / "catalog.md"
        path.write_text(sample_text, encoding="utf-8")
        catalog = load_catalog(path)
        assert catalog.title == "Sample Principles"
        assert len(catalog) == 2

    def test_json_file(self, tmp_path, catalog):
        path = tmp_path / "catalog.json"
        path.write_text(catalog.to_json(), encoding="utf-8")
        assert load_catalog(str(path)).catalog == catalog.catalog

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.md")

    def test_malformed_file_fails_at_load(self, tmp_path, sample_text):
        path = tmp_path / "broken.md"
        path.write_text(sample_text.replace("1. Framework owns the flow.\n", ""), encoding="utf-8")
        with pytest.raises(MalformedEntryError) as exc:
            load_catalog(path)
        assert exc.value.field == "good_example.benefits"

    def test_logger_receives_load_steps(self, tmp_path, sample_text):
        path = tmp_path / "catalog.md"
        path.write_text(sample_text, encoding="utf-8")
        log_file = tmp_path / "logs" / "load.log"
        load_catalog(path, logger=CatalogLogger(log_file=str(log_file)))
        content = log_file.read_text(encoding="utf-8")
        assert "LOAD: Reading catalog from" in content
        assert "Loaded 2 principle(s)" in content
        assert "1. Single Responsibility Principle (SRP)" in content

    def test_audit_records_load(self, tmp_path):
        audit_path = tmp_path / "audit.jsonl"
        load_catalog(audit_context={"audit_path": str(audit_path)})
        record = json.loads(audit_path.read_text(encoding="utf-8").splitlines()[0])
        assert record["event"] == "catalog_load"
        assert record["entries"] == 13


class TestFileHandle:

    @pytest.fixture
    def opened(self, monkeypatch):
        """Record every file object returned by Path.open."""
        handles = []
        real_open = Path.open

        def tracking_open(self, *args, **kwargs):
            f = real_open(self, *args, **kwargs)
            handles.append(f)
            return f

        monkeypatch.setattr(Path, "open", tracking_open)
        return handles

    def test_closed_after_parse_failure(self, tmp_path, sample_text, opened):
        path = tmp_path / "broken.md"
        path.write_text(sample_text.replace("### 2. Hollywood", "### 9. Hollywood"), encoding="utf-8")
        with pytest.raises(MalformedEntryError):
            load_catalog(path)
        assert len(opened) == 1
        assert opened[0].closed

    def test_closed_after_decode_failure(self, tmp_path, opened):
        path = tmp_path / "latin1.md"
        path.write_bytes("# Café\n".encode("latin-1"))
        with pytest.raises(MalformedEntryError) as exc:
            load_catalog(path)
        assert exc.value.field == "encoding"
        assert opened[0].closed

    def test_closed_after_success(self, tmp_path, sample_text, opened):
        path = tmp_path / "catalog.md"
        path.write_text(sample_text, encoding="utf-8")
        load_catalog(path)
        assert opened[0].closed
