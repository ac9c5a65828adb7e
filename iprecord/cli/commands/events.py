"""Events command - view the event log."""

import cyclopts

from iprecord.cli.console import get_console
from iprecord.cli.util import local_host

app = cyclopts.App(name="events", help="View the event log")


@app.default
def events(limit: int = 20, names: list[str] | None = None) -> None:
    """Show recent events from the event log (newest first).

    Args:
        limit: Number of events to show.
        names: Filter by event names (e.g., RecordTransferred).
    """
    console = get_console()
    with local_host() as host:
        entries = host.list_events(limit=limit, names=names)

    if not entries:
        console.info("No events found")
        return

    rows = [
        {
            "emitted_at": emitted_at.strftime("%Y-%m-%d %H:%M:%S"),
            "name": event.name,
            "payload": ", ".join(f"{k}={v}" for k, v in event.payload().items()),
        }
        for emitted_at, event in entries
    ]
    console.table(
        rows,
        [("emitted_at", "Time"), ("name", "Event"), ("payload", "Payload")],
        title=f"Events ({len(rows)})",
    )
