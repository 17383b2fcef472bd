"""Tests for the memoizing attribute slot and the attribute declaration."""

import logging

import pytest

from hyperserial.core.attributes import AttributeSlot, attribute
from hyperserial.core.descriptors import ItemDescriptor


class TestAttributeSlot:
    """First-write-wins behaviour of AttributeSlot."""

    def test_new_slot_is_unset(self):
        slot = AttributeSlot("href")

        assert slot.is_set is False
        assert slot.get() is None
        assert slot.value is None

    def test_first_call_fixes_value(self):
        slot = AttributeSlot("href")

        assert slot("item-href") == ["item-href"]
        assert slot.is_set is True
        assert slot.get() == ["item-href"]

    def test_later_call_with_arguments_is_ignored(self):
        """The slot never adopts the values of a second write."""
        slot = AttributeSlot("href")
        first = slot("a")

        assert slot("b") == ["a"]
        assert slot("b", "c") == ["a"]
        assert slot.get() == first == ["a"]

    def test_returned_values_are_copies(self):
        """Mutating a returned list never changes the fixed value."""
        slot = AttributeSlot("href")
        slot("a").append("x")
        slot().append("b")
        slot.get().clear()

        assert slot() == ["a"]
        assert slot.value == ("a",)

    def test_later_call_without_arguments_reads(self):
        slot = AttributeSlot("href")
        slot("a")

        assert slot() == ["a"]

    def test_variadic_values_keep_order(self):
        slot = AttributeSlot("href")

        assert slot("x", "y") == ["x", "y"]
        assert slot() == ["x", "y"]

    def test_first_call_without_arguments_fixes_empty_list(self):
        """A zero-argument first call is a write, not a read."""
        slot = AttributeSlot("href")

        assert slot() == []
        assert slot.is_set is True
        assert slot("late") == []

    def test_set_if_unset_reports_whether_stored(self):
        slot = AttributeSlot("href")

        assert slot.set_if_unset(("a",)) is True
        assert slot.set_if_unset(("b",)) is False
        assert slot.get() == ["a"]

    def test_ignored_write_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="hyperserial.core.attributes")
        slot = AttributeSlot("href")
        slot("a")
        slot("b")

        records = [r for r in caplog.records if r.getMessage() == "attribute.write_ignored"]
        assert len(records) == 1
        assert records[0].attribute == "href"

    def test_plain_read_is_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="hyperserial.core.attributes")
        slot = AttributeSlot("href")
        slot("a")
        slot()

        assert not [r for r in caplog.records if r.getMessage() == "attribute.write_ignored"]

    def test_repr(self):
        slot = AttributeSlot("href")
        assert repr(slot) == "<AttributeSlot href unset>"
        slot("a")
        assert repr(slot) == "<AttributeSlot href=['a']>"


class TestAttributeDeclaration:
    """Test the attribute() class-level declaration."""

    def test_class_access_returns_declaration(self):
        declared = ItemDescriptor.href

        assert isinstance(declared, attribute)
        assert declared.name == "href"
        assert declared.__doc__ == "Link to the resource"

    def test_instance_access_returns_slot(self):
        descriptor = ItemDescriptor()

        assert isinstance(descriptor.href, AttributeSlot)
        assert descriptor.href is descriptor.slot("href")

    def test_assignment_is_rejected(self):
        descriptor = ItemDescriptor()

        with pytest.raises(AttributeError, match="memoizing attribute"):
            descriptor.href = ["x"]
        assert descriptor.is_set("href") is False
