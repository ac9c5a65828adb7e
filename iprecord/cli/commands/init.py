"""Init command - record the deployment creator."""

import cyclopts

from iprecord.cli.util import local_host, parse_timestamp, report

app = cyclopts.App(name="init", help="Initialize the registry with its creator")


@app.default
def init(*, creator: str, caller: str | None = None, at: str | None = None) -> None:
    """Store the deployment creator.

    Args:
        creator: Address of the deployment creator.
        caller: Caller identity (default: configured initiator).
        at: Transaction time, "YYYY-MM-DD HH:MM:SS" (default: now).
    """
    with local_host() as host:
        response = host.invoke(
            "Initialize",
            {"creator": creator},
            initiator=caller,
            timestamp=parse_timestamp(at),
        )
    report(response)
