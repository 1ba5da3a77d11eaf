"""
Unit tests for the tag registry.
"""

import threading
import tempfile
from pathlib import Path

import pytest

from pdf_archiver.naming.tags import Tag, TagRegistry


class TestTag:
    """Tests for Tag."""

    def test_identity_by_name(self):
        """Test tags with equal names are equal regardless of count."""
        assert Tag("home", 1) == Tag("home", 5)
        assert len({Tag("home", 1), Tag("home", 2)}) == 1

    def test_from_dict_clamps_count(self):
        """Test negative counts are not loaded."""
        assert Tag.from_dict({"name": "home", "count": -3}).count == 0


class TestTagRegistry:
    """Tests for TagRegistry."""

    @pytest.fixture
    def registry(self):
        """Create an empty registry."""
        return TagRegistry()

    def test_lookup_creates(self, registry):
        """Test an unknown name is created with count 1."""
        tag = registry.lookup_or_create("home")

        assert tag.name == "home"
        assert tag.count == 1
        assert "home" in registry

    def test_lookup_returns_same_instance(self, registry):
        """Test a second lookup returns the same tag, counted twice."""
        first = registry.lookup_or_create("home")
        second = registry.lookup_or_create("home")

        assert first is second
        assert second.count == 2
        assert len(registry) == 1

    def test_insert_does_not_overwrite(self, registry):
        """Test inserting a known name keeps the registered tag."""
        original = registry.lookup_or_create("home")

        assert registry.insert(Tag("home", 42)) is False
        assert registry.get("home") is original
        assert original.count == 1

    def test_insert_new(self, registry):
        """Test inserting an unknown tag adds it as is."""
        assert registry.insert(Tag("bills", 3)) is True
        assert registry.get("bills").count == 3

    def test_filter_by_prefix(self, registry):
        """Test prefix filtering is case-sensitive and sorted by name."""
        for name in ["utilities", "home", "hobby", "Hotel", "health"]:
            registry.lookup_or_create(name)

        result = [tag.name for tag in registry.filter_by_prefix("ho")]

        assert result == ["hobby", "home"]

    def test_filter_empty_prefix(self, registry):
        """Test an empty prefix returns every tag."""
        registry.lookup_or_create("b")
        registry.lookup_or_create("a")

        assert [tag.name for tag in registry.filter_by_prefix("")] == ["a", "b"]

    def test_concurrent_lookups(self, registry):
        """Test concurrent lookups create one tag and keep every increment."""
        results = []

        def worker():
            for _ in range(200):
                results.append(registry.lookup_or_create("home"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 1
        assert registry.get("home").count == 1600
        assert all(tag is results[0] for tag in results)


class TestFromArchive:
    """Tests for rebuilding the registry from archived files."""

    def test_counts_archived_documents(self):
        """Test each archived file counts once per tag."""
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "2018").mkdir()
            (root / "2019").mkdir()
            (root / "2018" / "2018-01-25--invoice__home_utilities.pdf").write_bytes(b"%PDF")
            (root / "2019" / "2019-03-01--rent__home.PDF").write_bytes(b"%PDF")
            (root / "2019" / "notes.txt").write_text("not a document")

            registry = TagRegistry.from_archive(root)

            assert registry.get("home").count == 2
            assert registry.get("utilities").count == 1
            assert len(registry) == 2

    def test_missing_archive(self):
        """Test a missing archive folder gives an empty registry."""
        registry = TagRegistry.from_archive(Path("/nonexistent/archive"))

        assert len(registry) == 0
