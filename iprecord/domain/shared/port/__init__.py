"""Ports - interfaces the domain requires from the host environment."""

from typing import Protocol


class Port(Protocol):
    """Marker base for all ports."""
