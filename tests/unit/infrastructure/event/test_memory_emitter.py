from iprecord.domain.record.event import RecordDeleted
from iprecord.infrastructure.event.memory import InMemoryEventEmitter


class TestInMemoryEventEmitter:
    def test_collects_in_order(self):
        emitter = InMemoryEventEmitter()
        emitter.emit("RecordDeleted", {"id": "C1", "deleted_by": "a"})
        emitter.emit("RecordDeleted", {"id": "C2", "deleted_by": "b"})

        assert emitter.names() == ["RecordDeleted", "RecordDeleted"]
        assert emitter.events()[1] == RecordDeleted(id="C2", deleted_by="b")

    def test_clear(self):
        emitter = InMemoryEventEmitter()
        emitter.emit("RecordDeleted", {"id": "C1", "deleted_by": "a"})
        emitter.clear()
        assert emitter.emitted == []
