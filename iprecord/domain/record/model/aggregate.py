"""Record aggregate - an intellectual-property registration with an audit trail."""

from datetime import datetime

from pydantic import Field

from iprecord.domain.record.model.value import RecordStatus, format_timestamp
from iprecord.domain.shared.error import AlreadyDeletedError, InvalidStateError
from iprecord.domain.shared.model.aggregate import Aggregate
from iprecord.domain.shared.model.value import NonEmptyStr


class Record(Aggregate):
    """A uniquely identified record.

    ``id``, ``creator_name`` and ``registered_at`` never change after
    registration. ``history`` only grows: every mutation appends exactly one
    entry. Once ``deleted`` is set the record rejects all further mutation.
    """

    id: NonEmptyStr
    title: NonEmptyStr
    creator_name: NonEmptyStr
    holder_address: NonEmptyStr
    registered_at: str
    category: NonEmptyStr
    description: str = ""
    history: list[str] = Field(default_factory=list)
    deleted: bool = False

    @classmethod
    def register(
        cls,
        *,
        id: str,
        title: str,
        creator_name: str,
        holder_address: str,
        category: str,
        description: str,
        at: datetime,
    ) -> "Record":
        registered_at = format_timestamp(at)
        return cls(
            id=id,
            title=title,
            creator_name=creator_name,
            holder_address=holder_address,
            registered_at=registered_at,
            category=category,
            description=description,
            history=[f"Registered on {registered_at} by {holder_address}"],
            deleted=False,
        )

    @property
    def status(self) -> RecordStatus:
        return RecordStatus.DELETED if self.deleted else RecordStatus.LIVE

    def transfer(self, new_holder: str, at: datetime) -> str:
        """Reassign the holder. Returns the previous holder."""
        if self.deleted:
            raise InvalidStateError(f"cannot transfer deleted record: {self.id}")
        old_holder = self.holder_address
        self.holder_address = new_holder
        self._append(f"Transferred from {old_holder} to {new_holder} on {format_timestamp(at)}")
        return old_holder

    def update_description(self, new_description: str, at: datetime) -> str:
        """Replace the description. Returns the previous description."""
        if self.deleted:
            raise InvalidStateError(f"cannot update description of deleted record: {self.id}")
        old_description = self.description
        self.description = new_description
        self._append(
            f"Description updated on {format_timestamp(at)}. "
            f"Old: '{old_description}', New: '{new_description}'"
        )
        return old_description

    def mark_deleted(self, caller: str, at: datetime) -> None:
        """Set the tombstone. The stored bytes are kept."""
        if self.deleted:
            raise AlreadyDeletedError(f"record {self.id} is already deleted")
        self.deleted = True
        self._append(f"Marked as deleted on {format_timestamp(at)} by caller {caller}")

    def _append(self, entry: str) -> None:
        # Reassign so validate_assignment sees the change
        self.history = [*self.history, entry]
