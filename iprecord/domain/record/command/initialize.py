import logfire

from iprecord.domain.record.service.record import RecordService
from iprecord.domain.shared.command import Command, CommandHandler, Confirmation
from iprecord.domain.shared.model.value import NonEmptyStr


class Initialize(Command):
    creator: NonEmptyStr


class InitializeHandler(CommandHandler[Initialize, Confirmation]):
    record_service: RecordService

    def run(self, cmd: Initialize) -> Confirmation:
        with logfire.span("Initialize"):
            self.record_service.initialize(cmd.creator)
            logfire.info("Contract initialized", creator=cmd.creator)
            return Confirmation(message=f"Initialized successfully by {cmd.creator}")
