"""Opening a local host for one CLI command and reporting its response."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from iprecord.application.di import create_container
from iprecord.application.manager import Response
from iprecord.cli.console import get_console
from iprecord.config import Config, configure_logging
from iprecord.domain.record.model.value import TIMESTAMP_FORMAT
from iprecord.infrastructure.host.local import LocalHost


@contextmanager
def local_host() -> Iterator[LocalHost]:
    """Yield a LocalHost built from the environment's Config."""
    config = Config()
    configure_logging(config.logging)
    container = create_container(config)
    try:
        yield container.get(LocalHost)
    finally:
        container.close()


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an --at option ("YYYY-MM-DD HH:MM:SS"); exits on bad input."""
    if value is None:
        return None
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        get_console().error(f"Invalid timestamp: {value}", hint="Expected YYYY-MM-DD HH:MM:SS")
        sys.exit(2)


def report(response: Response) -> None:
    """Print a mutation response; exit with status 1 on failure."""
    console = get_console()
    if not response.ok:
        console.error(f"{response.message} [dim]({response.code})[/dim]")
        sys.exit(1)
    console.success(response.body.decode("utf-8"))
