from dishka import Provider, Scope, from_context, provide

from iprecord.config import HostConfig
from iprecord.domain.record.command import (
    DeleteRecordHandler,
    InitializeHandler,
    QueryRecordHandler,
    RegisterRecordHandler,
    TransferRecordHandler,
    UpdateDescriptionHandler,
)
from iprecord.domain.record.port.repository import RecordRepository
from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.authorization.policy import AccessPolicy
from iprecord.domain.shared.port.event_emitter import EventEmitter


class RecordProvider(Provider):
    policy = from_context(provides=AccessPolicy, scope=Scope.APP)
    host_config = from_context(provides=HostConfig, scope=Scope.APP)

    # Command Handlers
    initialize_handler = provide(InitializeHandler, scope=Scope.REQUEST)
    register_handler = provide(RegisterRecordHandler, scope=Scope.REQUEST)
    query_handler = provide(QueryRecordHandler, scope=Scope.REQUEST)
    transfer_handler = provide(TransferRecordHandler, scope=Scope.REQUEST)
    update_description_handler = provide(UpdateDescriptionHandler, scope=Scope.REQUEST)
    delete_handler = provide(DeleteRecordHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_record_service(
        self,
        record_repo: RecordRepository,
        emitter: EventEmitter,
        policy: AccessPolicy,
        host_config: HostConfig,
    ) -> RecordService:
        return RecordService(
            record_repo=record_repo,
            emitter=emitter,
            policy=policy,
            write_once_creator=host_config.write_once_creator,
        )
