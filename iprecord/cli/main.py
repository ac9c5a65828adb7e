"""Main CLI application using Cyclopts.

Every command runs one operation against a local, SQLite-backed host.
"""

import cyclopts

from iprecord import __version__
from iprecord.cli.commands import events, init, record

app = cyclopts.App(
    name="iprecord",
    help="IP record registry - CLI",
    version=__version__,
)

app.command(init.app, name="init")
app.command(record.app, name="record")
app.command(events.app, name="events")


def main() -> None:
    app()
