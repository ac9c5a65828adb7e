"""Record commands - register, show, transfer, describe and delete records."""

import sys

import cyclopts

from iprecord.cli.console import get_console
from iprecord.cli.util import local_host, parse_timestamp, report
from iprecord.domain.record.model.codec import decode_record

app = cyclopts.App(name="record", help="Manage records")


@app.command
def register(
    id: str,
    /,
    *,
    title: str,
    creator_name: str,
    holder: str,
    category: str,
    description: str = "",
    caller: str | None = None,
    at: str | None = None,
) -> None:
    """Register a new record.

    Args:
        id: Record identifier (must be unused).
        title: Title of the work.
        creator_name: Name of the work's creator.
        holder: Address of the initial rights holder.
        category: Free-form classification (e.g. image, text).
        description: Optional description.
        caller: Caller identity (default: configured initiator).
        at: Transaction time, "YYYY-MM-DD HH:MM:SS" (default: now).
    """
    with local_host() as host:
        response = host.invoke(
            "Register",
            {
                "id": id,
                "title": title,
                "creator_name": creator_name,
                "holder_address": holder,
                "category": category,
                "description": description,
            },
            initiator=caller,
            timestamp=parse_timestamp(at),
        )
    report(response)


@app.command
def show(id: str, /) -> None:
    """Show a live record and its history.

    Args:
        id: Record identifier.
    """
    console = get_console()
    with local_host() as host:
        response = host.invoke("Query", {"id": id})

    if not response.ok:
        console.error(f"{response.message} [dim]({response.code})[/dim]")
        sys.exit(1)
    console.record_detail(decode_record(response.body))


@app.command
def transfer(id: str, /, *, to: str, caller: str | None = None, at: str | None = None) -> None:
    """Transfer a record to a new holder.

    Args:
        id: Record identifier.
        to: Address of the new holder.
        caller: Caller identity (default: configured initiator).
        at: Transaction time, "YYYY-MM-DD HH:MM:SS" (default: now).
    """
    with local_host() as host:
        response = host.invoke(
            "Transfer",
            {"id": id, "new_holder_address": to},
            initiator=caller,
            timestamp=parse_timestamp(at),
        )
    report(response)


@app.command
def describe(
    id: str,
    /,
    *,
    description: str | None = None,
    caller: str | None = None,
    at: str | None = None,
) -> None:
    """Replace a record's description. Omitting --description clears it.

    Args:
        id: Record identifier.
        description: New description.
        caller: Caller identity (default: configured initiator).
        at: Transaction time, "YYYY-MM-DD HH:MM:SS" (default: now).
    """
    args = {"id": id}
    if description is not None:
        args["new_description"] = description

    with local_host() as host:
        response = host.invoke(
            "UpdateDescription", args, initiator=caller, timestamp=parse_timestamp(at)
        )
    report(response)


@app.command
def delete(id: str, /, *, caller: str | None = None, at: str | None = None) -> None:
    """Mark a record as deleted. The record stays in storage.

    Args:
        id: Record identifier.
        caller: Caller identity (default: configured initiator).
        at: Transaction time, "YYYY-MM-DD HH:MM:SS" (default: now).
    """
    with local_host() as host:
        response = host.invoke("Delete", {"id": id}, initiator=caller, timestamp=parse_timestamp(at))
    report(response)
