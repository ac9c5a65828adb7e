"""CLI utilities (local host session, argument parsing)."""

from iprecord.cli.util.host import local_host, parse_timestamp, report

__all__ = ["local_host", "parse_timestamp", "report"]
