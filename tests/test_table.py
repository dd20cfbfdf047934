"""Tests for EnumTable and EnumEntry views."""

import pickle

import pytest

from enumtable import EnumEntry, EnumTable, create_enum


@pytest.fixture
def status():
    return create_enum(
        {
            "ACTIVE": {"value": 1, "label": "Active"},
            "INACTIVE": {"value": 0, "label": "Inactive"},
            "BANNED": {"value": -1, "label": "Banned", "terminal": True},
        },
        default_fields={"terminal": False},
        label="Status",
    )


class TestEnumEntry:
    """Tests for a single entry."""

    def test_attribute_and_item_access(self, status):
        entry = status.ACTIVE
        assert entry.label == "Active"
        assert entry["label"] == "Active"
        assert entry.get("missing") is None

    def test_missing_attribute(self, status):
        with pytest.raises(AttributeError, match="missing"):
            status.ACTIVE.missing

    def test_cannot_set_attribute(self, status):
        with pytest.raises(AttributeError):
            status.ACTIVE.label = "Changed"
        with pytest.raises(AttributeError):
            del status.ACTIVE.label

    def test_cannot_set_item(self, status):
        with pytest.raises(TypeError):
            status.ACTIVE["label"] = "Changed"

    def test_to_dict_is_copy(self, status):
        data = status.ACTIVE.to_dict()
        data["label"] = "Changed"
        assert status.ACTIVE.label == "Active"

    def test_equals_plain_dict(self):
        entry = EnumEntry({"name": "A", "index": 0})
        assert entry == {"name": "A", "index": 0}
        assert entry != {"name": "A", "index": 1}

    def test_repr(self):
        entry = EnumEntry({"name": "A", "index": 0})
        assert repr(entry) == "EnumEntry(name='A', index=0)"

    def test_dir_lists_fields(self, status):
        assert "label" in dir(status.BANNED)

    def test_pickle_roundtrip(self, status):
        assert pickle.loads(pickle.dumps(status.BANNED)) == status.BANNED


class TestEnumTable:
    """Tests for the table view."""

    def test_label(self, status):
        assert status.label == "Status"
        assert repr(status) == "<Status: ACTIVE, INACTIVE, BANNED>"

    def test_missing_entry_attribute(self, status):
        with pytest.raises(AttributeError, match="UNKNOWN"):
            status.UNKNOWN

    def test_missing_entry_item(self, status):
        with pytest.raises(KeyError):
            status["UNKNOWN"]

    def test_membership(self, status):
        assert "ACTIVE" in status
        assert "UNKNOWN" not in status

    def test_read_only(self, status):
        with pytest.raises(AttributeError):
            status.ACTIVE = {}
        with pytest.raises(TypeError):
            status["NEW"] = {}

    def test_find(self, status):
        assert status.find("value", -1) is status.BANNED
        assert status.find("value", 99) is None
        assert status.find("value", 99, default="none") == "none"

    def test_find_first_match_wins(self, status):
        assert status.find("terminal", False) is status.ACTIVE

    def test_find_skips_entries_without_field(self):
        table = create_enum({"A": {}, "B": {"code": None}})
        assert table.find("code", None) is table.B

    def test_filter(self, status):
        assert [e.name for e in status.filter(lambda e: e.value >= 0)] == ["ACTIVE", "INACTIVE"]

    def test_by_index(self, status):
        assert status.by_index(2) is status.BANNED
        with pytest.raises(IndexError):
            status.by_index(3)

    def test_by_index_rejects_negative(self, status):
        """Positions count from the first entry only."""
        with pytest.raises(IndexError):
            status.by_index(-1)

    def test_to_dict(self, status):
        data = status.to_dict()
        assert type(data["ACTIVE"]) is dict
        assert data["BANNED"] == {
            "terminal": True,
            "name": "BANNED",
            "index": 2,
            "value": -1,
            "label": "Banned",
        }

    def test_wraps_plain_mappings(self):
        table = EnumTable({"A": {"name": "A", "index": 0}})
        assert isinstance(table.A, EnumEntry)

    def test_cross_reference_by_name(self, status):
        """Other tables refer to entries by their name."""
        actions = create_enum({"BAN": {"target": status.BANNED.name}})
        assert status[actions.BAN.target] is status.BANNED

    def test_pickle_roundtrip(self, status):
        restored = pickle.loads(pickle.dumps(status))
        assert restored == status
        assert restored.label == "Status"
