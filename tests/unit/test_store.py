"""Unit tests for wmatag.store."""

from wmatag.attribute import Attribute
from wmatag.store import AttributeStore


class TestAttributeStore:
    """Contract of the native attribute container."""

    def setup_method(self):
        self.store = AttributeStore()

    def test_starts_empty(self):
        assert self.store.is_empty()
        assert len(self.store) == 0
        assert self.store.lookup("WM/Genre") == []

    def test_append_creates_then_appends(self):
        self.store.append("WM/Genre", Attribute.text("Rock"))
        self.store.append("WM/Genre", Attribute.text("Pop"))
        assert self.store.contains("WM/Genre")
        assert self.store.lookup("WM/Genre") == [Attribute.text("Rock"), Attribute.text("Pop")]

    def test_insert_replaces(self):
        self.store.append("WM/Genre", Attribute.text("Rock"))
        self.store.insert("WM/Genre", [Attribute.text("Jazz")])
        assert self.store.lookup("WM/Genre") == [Attribute.text("Jazz")]

    def test_insert_empty_list_removes_key(self):
        self.store.append("WM/Genre", Attribute.text("Rock"))
        self.store.insert("WM/Genre", [])
        assert "WM/Genre" not in self.store
        assert self.store.is_empty()

    def test_erase(self):
        self.store.append("WM/Genre", Attribute.text("Rock"))
        self.store.erase("WM/Genre")
        assert not self.store.contains("WM/Genre")
        # Erasing a missing key is a no-op
        self.store.erase("WM/Genre")

    def test_keys_are_exact(self):
        self.store.append("WM/Genre", Attribute.text("Rock"))
        assert not self.store.contains("wm/genre")

    def test_lookup_returns_copy(self):
        self.store.append("WM/Genre", Attribute.text("Rock"))
        values = self.store.lookup("WM/Genre")
        values.append(Attribute.text("Pop"))
        assert len(self.store.lookup("WM/Genre")) == 1

    def test_items_in_insertion_order(self):
        for key in ("WM/Year", "WM/AlbumTitle", "ASIN"):
            self.store.append(key, Attribute.text(key))
        assert [k for k, _ in self.store.items()] == ["WM/Year", "WM/AlbumTitle", "ASIN"]
        assert list(self.store) == ["WM/Year", "WM/AlbumTitle", "ASIN"]

    def test_items_survive_mutation_during_scan(self):
        self.store.append("A", Attribute.text("1"))
        self.store.append("B", Attribute.text("2"))
        for key, _ in self.store.items():
            self.store.erase(key)
        assert self.store.is_empty()

    def test_clear(self):
        self.store.append("A", Attribute.text("1"))
        self.store.clear()
        assert self.store.is_empty()
