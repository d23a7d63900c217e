"""
Unit tests for condition normalization.
"""

import pytest
from types import SimpleNamespace

from cancan.rules.conditions import (
    attributes_condition, get_attribute, is_partially_equal, normalize_condition
)
from cancan.shared.errors import InvalidConditionError


class Record:
    """Opaque object exposing a get() accessor."""

    def __init__(self, attrs=None):
        self.attrs = attrs or {}
        self.published = "attribute, not accessor"

    def get(self, key):
        return self.attrs.get(key)


class TestGetAttribute:
    """Test cases for get_attribute."""

    def test_prefers_get_accessor(self):
        record = Record({"published": True})

        assert get_attribute(record, "published") is True

    def test_reads_mapping_keys(self):
        assert get_attribute({"published": True}, "published") is True

    def test_falls_back_to_attribute_lookup(self):
        product = SimpleNamespace(published=True)

        assert get_attribute(product, "published") is True

    def test_missing_attribute_reads_as_none(self):
        assert get_attribute(SimpleNamespace(), "published") is None
        assert get_attribute(Record(), "published") is None

    def test_non_callable_get_is_ignored(self):
        product = SimpleNamespace(get="not a method", published=True)

        assert get_attribute(product, "published") is True


class TestPartialEquality:
    """Test cases for is_partially_equal."""

    def test_single_key(self):
        assert is_partially_equal(Record({"published": True}), {"published": True})
        assert not is_partially_equal(Record({"published": False}), {"published": True})

    def test_all_keys_must_match(self):
        target = Record({"published": True, "owner_id": 7, "extra": "ignored"})

        assert is_partially_equal(target, {"published": True, "owner_id": 7})
        assert not is_partially_equal(target, {"published": True, "owner_id": 8})

    def test_empty_map_matches_everything(self):
        assert is_partially_equal(Record(), {})

    def test_booleans_do_not_match_numbers(self):
        assert not is_partially_equal(Record({"published": 1}), {"published": True})
        assert not is_partially_equal(Record({"published": 1.0}), {"published": True})
        assert not is_partially_equal(Record({"published": 0}), {"published": False})
        assert not is_partially_equal(Record({"count": True}), {"count": 1})

    def test_numbers_and_strings_compare_by_value(self):
        assert is_partially_equal(Record({"count": 1}), {"count": 1.0})
        assert is_partially_equal(Record({"status": "paid"}), {"status": "paid"})
        assert not is_partially_equal(Record({"count": "1"}), {"count": 1})


class TestAttributesCondition:
    """Test cases for attributes_condition."""

    def test_ignores_performer_and_options(self):
        condition = attributes_condition({"published": True})
        target = Record({"published": True})

        assert condition(None, target, {}) is True
        assert condition(object(), target, {"published": False}) is True

    def test_snapshots_declared_map(self):
        attributes = {"published": True}
        condition = attributes_condition(attributes)
        attributes["published"] = False

        assert condition(None, Record({"published": True}), {}) is True
        assert condition.attributes == {"published": True}


class TestNormalizeCondition:
    """Test cases for normalize_condition."""

    def test_none_stays_none(self):
        assert normalize_condition(None) is None

    def test_callable_is_returned_unchanged(self):
        def condition(performer, target, options):
            return True

        assert normalize_condition(condition) is condition

    def test_mapping_becomes_predicate(self):
        condition = normalize_condition({"published": True})

        assert callable(condition)
        assert condition(None, Record({"published": True}), {}) is True
        assert condition(None, Record(), {}) is False

    @pytest.mark.parametrize("value, type_name", [
        ("abc", "str"),
        (42, "int"),
        (["published"], "list"),
    ])
    def test_rejects_other_values(self, value, type_name):
        with pytest.raises(InvalidConditionError) as exc_info:
            normalize_condition(value)

        error = exc_info.value
        assert isinstance(error, TypeError)
        assert str(error) == f"Expected condition to be object or function, got {type_name}"
        assert error.details["type"] == type_name
        assert error.code == "INVALID_CONDITION"
