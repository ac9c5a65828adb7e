"""Dependency injection containers for the local runtime."""

import logging
from collections.abc import Iterable

from dishka import Container, Provider, Scope, from_context, make_container, provide
from sqlalchemy import Engine

from iprecord.application.manager import RecordManager
from iprecord.config import Config, HostConfig
from iprecord.domain.record.util.di import RecordProvider
from iprecord.domain.shared.authorization.policy import AccessPolicy, PermitAll, policy_from_name
from iprecord.infrastructure.host.local import LocalHost
from iprecord.infrastructure.persistence.database import create_db_engine, init_db
from iprecord.infrastructure.persistence.di import PersistenceProvider

logger = logging.getLogger(__name__)


def create_invocation_container(policy: AccessPolicy, host_config: HostConfig) -> Container:
    """Container whose REQUEST scope serves the handlers of one invocation."""
    return make_container(
        PersistenceProvider(),
        RecordProvider(),
        context={AccessPolicy: policy, HostConfig: host_config},
    )


def create_manager(
    policy: AccessPolicy | None = None,
    *,
    strict_reads: bool = False,
    write_once_creator: bool = False,
) -> RecordManager:
    host_config = HostConfig(strict_reads=strict_reads, write_once_creator=write_once_creator)
    return RecordManager(create_invocation_container(policy or PermitAll(), host_config))


class HostProvider(Provider):
    """Provides the APP-scoped pieces of a local host."""

    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> Iterable[Engine]:
        engine = create_db_engine(config)
        if config.database.auto_migrate:
            init_db(engine)
        yield engine
        engine.dispose()

    @provide(scope=Scope.APP)
    def get_access_policy(self, config: Config) -> AccessPolicy:
        return policy_from_name(config.auth.policy)

    @provide(scope=Scope.APP)
    def get_manager(self, config: Config, policy: AccessPolicy) -> Iterable[RecordManager]:
        manager = RecordManager(create_invocation_container(policy, config.host))
        yield manager
        manager.close()

    @provide(scope=Scope.APP)
    def get_host(self, config: Config, engine: Engine, manager: RecordManager) -> LocalHost:
        logger.debug(f"Local host using {engine.url.render_as_string(hide_password=True)}")
        return LocalHost(
            engine,
            manager,
            timezone=config.host.tzinfo,
            default_initiator=config.host.initiator,
        )


def create_container(config: Config | None = None) -> Container:
    config = config or Config()

    return make_container(
        HostProvider(),
        context={Config: config},
    )
