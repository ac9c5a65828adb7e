"""IP record registry: register, transfer, annotate and soft-delete records."""

__version__ = "0.1.0"
