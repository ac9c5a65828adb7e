from enum import StrEnum


class Action(StrEnum):
    """Mutating operations an access policy can gate."""

    TRANSFER = "transfer"
    UPDATE_DESCRIPTION = "update_description"
    DELETE = "delete"
