"""Tests for the Event base and its registry."""

import pytest

from iprecord.domain.record.event import RecordDeleted, RecordTransferred
from iprecord.domain.shared.event import Event


class TestEvent:
    def test_subclasses_are_registered_by_name(self):
        assert Event._registry["RecordTransferred"] is RecordTransferred

    def test_name_and_payload(self):
        event = RecordDeleted(id="C1", deleted_by="addrA")
        assert event.name == "RecordDeleted"
        assert event.payload() == {"id": "C1", "deleted_by": "addrA"}

    def test_from_payload_rebuilds_typed_event(self):
        event = Event.from_payload(
            "RecordTransferred", {"id": "C1", "old_holder": "a", "new_holder": "b"}
        )
        assert event == RecordTransferred(id="C1", old_holder="a", new_holder="b")

    def test_from_payload_unknown_name_raises(self):
        with pytest.raises(KeyError):
            Event.from_payload("NoSuchEvent", {})
