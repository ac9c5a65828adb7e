"""Pluggable access policies for mutating record operations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from iprecord.domain.shared.authorization.action import Action
from iprecord.domain.shared.error import AuthorizationError, ConfigurationError

if TYPE_CHECKING:
    from iprecord.domain.record.model.aggregate import Record


class AccessPolicy(ABC):
    """Base class for access policies.

    Policies are evaluated after the record is loaded and known to be live,
    before any mutation.
    """

    # Whether the service must load the contract creator before authorizing
    requires_creator: ClassVar[bool] = False

    @abstractmethod
    def authorize(
        self,
        action: Action,
        record: Record,
        initiator: str,
        contract_creator: str | None = None,
    ) -> None:
        """Raise AuthorizationError if initiator may not perform action on record."""
        ...


@dataclass(frozen=True)
class PermitAll(AccessPolicy):
    """Allow every caller. Matches the deployed behavior."""

    def authorize(
        self,
        action: Action,
        record: Record,
        initiator: str,
        contract_creator: str | None = None,
    ) -> None:
        return None


@dataclass(frozen=True)
class HolderOnly(AccessPolicy):
    """Only the current holder may transfer; holder or contract creator may delete."""

    requires_creator: ClassVar[bool] = True

    def authorize(
        self,
        action: Action,
        record: Record,
        initiator: str,
        contract_creator: str | None = None,
    ) -> None:
        if action is Action.TRANSFER and initiator != record.holder_address:
            raise AuthorizationError(
                f"only current holder {record.holder_address} can transfer, "
                f"caller is {initiator}"
            )
        if action is Action.DELETE and initiator not in (record.holder_address, contract_creator):
            raise AuthorizationError(f"permission denied to delete record {record.id}")


POLICIES: dict[str, type[AccessPolicy]] = {
    "permit_all": PermitAll,
    "holder_only": HolderOnly,
}


def policy_from_name(name: str) -> AccessPolicy:
    """Build a policy from its configured name."""
    try:
        return POLICIES[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown access policy '{name}'. Choose one of: {', '.join(POLICIES)}"
        ) from None
