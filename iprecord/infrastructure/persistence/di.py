from dishka import Provider, Scope, from_context, provide

from iprecord.config import HostConfig
from iprecord.domain.record.port.repository import RecordRepository
from iprecord.domain.shared.context import Context
from iprecord.domain.shared.port.event_emitter import EventEmitter
from iprecord.domain.shared.port.object_store import ObjectStore
from iprecord.infrastructure.persistence.repository.record import ObjectStoreRecordRepository


class PersistenceProvider(Provider):
    """Ports bound to the execution context of one invocation."""

    context = from_context(provides=Context, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_object_store(self, context: Context) -> ObjectStore:
        return context.store

    @provide(scope=Scope.REQUEST)
    def get_event_emitter(self, context: Context) -> EventEmitter:
        return context.emitter

    # Repositories
    @provide(scope=Scope.REQUEST)
    def get_record_repo(self, store: ObjectStore, host_config: HostConfig) -> RecordRepository:
        return ObjectStoreRecordRepository(store, strict_reads=host_config.strict_reads)
